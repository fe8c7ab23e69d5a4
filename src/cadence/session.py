# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from typing import Any, Iterable, Mapping, Optional

import pendulum

from cadence import time
from cadence.errors import EventValidationError
from cadence.model.event import Event, EventId
from cadence.model.layout import AgendaGroup, DayLayout, MonthCell, WeekDayColumn, YearMonth
from cadence.model.time_window import VisibleHours, WorkingHours
from cadence.model.user import User
from cadence.model.view import CalendarView, ViewState
from cadence.repository.event import EventStore
from cadence.service import grid, layout, navigation, time_window
from cadence.service.validate import parse_user
from cadence.template.time_window import (
    DEFAULT_HOUR_HEIGHT,
    get_visible_hours_template,
    get_working_hours_template,
)
from cadence.template.view import get_view_state_template

logger = logging.getLogger(__name__)


class CalendarSession:
    """
    Stateful wrapper owning one event store and one view state.

    All calendar computations are delegated to the pure functions in
    `cadence.service`; the session only supplies them with the current
    reference date, the assignee filter and the time windows. The clock is
    the only source of non-determinism and can be replaced for testing.

    Raises:
        TimeWindowError: If `working_hours` or `visible_hours` is malformed
    """

    def __init__(
        self,
        events: Iterable[Mapping[str, Any]] = (),
        users: Iterable[Mapping[str, Any]] = (),
        view: CalendarView | str = CalendarView.MONTH,
        reference_date: Optional[datetime.date] = None,
        working_hours: Optional[WorkingHours] = None,
        visible_hours: Optional[VisibleHours] = None,
        hour_height: float = DEFAULT_HOUR_HEIGHT,
        tz: str = "local",
        clock: Optional[time.Clock] = None,
    ) -> None:
        self.tz = tz
        self._clock = clock if clock is not None else lambda: time.now_in(tz)
        self.store = EventStore(events, tz)
        self._users: list[User] = []
        for user in users:
            self.add_user(user)

        # Weekday keys may arrive as strings from YAML or JSON
        self.working_hours: WorkingHours = (
            time_window.parse_working_hours(working_hours)
            if working_hours is not None
            else get_working_hours_template()
        )
        self.visible_hours: VisibleHours = (
            time_window.parse_hour_range(visible_hours)
            if visible_hours is not None
            else get_visible_hours_template()
        )
        self.hour_height = hour_height

        reference = (
            self.__to_reference(reference_date)
            if reference_date is not None
            else self.now()
        )
        self._state: ViewState = get_view_state_template(reference, CalendarView(view))
        self._anchor_day = reference.day

    def __to_reference(self, value: datetime.date) -> pendulum.DateTime:
        if isinstance(value, datetime.datetime):
            return pendulum.instance(value, tz=self.tz).in_tz(self.tz)
        return pendulum.datetime(value.year, value.month, value.day, tz=self.tz)

    # Clock

    def now(self) -> pendulum.DateTime:
        return self._clock().in_tz(self.tz)

    def today_date(self) -> pendulum.Date:
        return time.to_date(self.now())

    # View state

    @property
    def state(self) -> ViewState:
        return deepcopy(self._state)

    @property
    def view(self) -> CalendarView:
        return self._state["view"]

    @property
    def reference_date(self) -> pendulum.DateTime:
        return self._state["reference_date"]

    @property
    def filter_assignee_id(self) -> str:
        return self._state["filter_assignee_id"]

    def set_view(self, view: CalendarView | str) -> None:
        """Switch view; the reference date is left untouched."""
        self._state["view"] = CalendarView(view)
        logger.debug("View set to %s", self._state["view"])

    def set_reference_date(self, reference_date: datetime.date) -> None:
        reference = self.__to_reference(reference_date)
        self._state["reference_date"] = reference
        self._anchor_day = reference.day

    def set_filter_assignee_id(self, assignee_id: str) -> None:
        self._state["filter_assignee_id"] = str(assignee_id)

    def next(self) -> pendulum.DateTime:
        return self.__step(navigation.NEXT)

    def previous(self) -> pendulum.DateTime:
        return self.__step(navigation.PREVIOUS)

    def __step(self, direction: int) -> pendulum.DateTime:
        shifted = navigation.shift_reference_date(
            self.view, self.reference_date, direction, self._anchor_day
        )
        self._state["reference_date"] = shifted
        # Day and week steps move the anchor along with the date
        if navigation.NAVIGATION_STEPS[self.view] in ("days", "weeks"):
            self._anchor_day = shifted.day
        return shifted

    def today(self) -> pendulum.DateTime:
        """Reset the reference date to the current moment, whatever the view."""
        self.set_reference_date(self.now())
        return self.reference_date

    def select_day(self, day: datetime.date) -> None:
        """Open a day from a month or year grid: set the date, then show the day view."""
        self.set_reference_date(day)
        self.set_view(CalendarView.DAY)

    def select_month(self, month: datetime.date) -> None:
        self.set_reference_date(month)
        self.set_view(CalendarView.MONTH)

    # Events and users

    def add_event(self, event: Mapping[str, Any]) -> Event:
        return self.store.add(event)

    def update_event(self, id: EventId, patch: Mapping[str, Any]) -> bool:
        return self.store.update(id, patch)

    def remove_event(self, id: EventId) -> bool:
        return self.store.remove(id)

    def add_user(self, user: Mapping[str, Any]) -> User:
        parsed = parse_user(user)
        if any(existing["id"] == parsed["id"] for existing in self._users):
            raise EventValidationError(f"User {parsed['id']!r} already exists")
        self._users.append(parsed)
        return deepcopy(parsed)

    @property
    def users(self) -> list[User]:
        return deepcopy(self._users)

    def events(self) -> list[Event]:
        """Events visible under the current assignee filter."""
        return self.store.filter_by_assignee(self.filter_assignee_id)

    # Generators

    def month_grid(self) -> list[MonthCell]:
        return grid.month_grid(self.reference_date, self.events(), self.today_date())

    def year_grid(self) -> list[YearMonth]:
        return grid.year_grid(self.reference_date, self.events(), self.today_date())

    def week_grid(self) -> list[WeekDayColumn]:
        return grid.week_grid(self.reference_date, self.events(), self.today_date())

    def agenda(self) -> list[AgendaGroup]:
        return grid.agenda_groups(self.events(), self.reference_date)

    def day_layout(self) -> DayLayout:
        return layout.layout_day(
            self.events(),
            self.reference_date,
            self.visible_hours,
            self.hour_height,
            self.now(),
        )

    def week_layout(self) -> list[DayLayout]:
        events = self.events()
        now = self.now()
        return [
            layout.layout_day(events, day, self.visible_hours, self.hour_height, now)
            for day in grid.week_days(self.reference_date)
        ]

    def hour_rows(self) -> list[int]:
        return time_window.visible_hours(self.visible_hours)

    def is_working_hour(self, hour: int, day: Optional[datetime.date] = None) -> bool:
        if day is None:
            day = self.reference_date
        return time_window.is_working_hour(
            hour, time_window.sunday_weekday(day), self.working_hours
        )

    def current_time_indicator(self, day: Optional[datetime.date] = None) -> Optional[float]:
        if day is None:
            day = self.reference_date
        return layout.current_time_indicator(
            self.now(), day, self.visible_hours, self.hour_height
        )

    def range_label(self) -> str:
        return grid.range_label(self.view, self.reference_date)
