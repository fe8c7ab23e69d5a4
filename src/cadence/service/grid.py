# SPDX-License-Identifier: MIT

"""
Date-bucketing generators for the month, year, week and agenda views.

Every generator is a pure function of its arguments. "Today" is always passed
in explicitly and compared by calendar day, never by timestamp.
"""

import datetime
from typing import Optional

import pendulum

from cadence.model.event import Event
from cadence.model.layout import AgendaGroup, MonthCell, WeekDayColumn, YearMonth
from cadence.model.view import CalendarView
from cadence.service.layout import is_banner_event
from cadence.service.time_window import sunday_weekday
from cadence.time import same_day, to_date

MONTH_GRID_CELLS = 42
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


def sort_events(events: list[Event]) -> list[Event]:
    """Sort by start, then end; stable for identical intervals."""
    return sorted(events, key=lambda event: (event["start"], event["end"]))


def start_of_week(value: datetime.date) -> pendulum.Date:
    """The Sunday on or before the given day."""
    day = to_date(value)
    return day.subtract(days=sunday_weekday(day))


def start_of_month(value: datetime.date) -> pendulum.Date:
    return pendulum.Date(value.year, value.month, 1)


def end_of_month(value: datetime.date) -> pendulum.Date:
    first = start_of_month(value)
    return first.add(days=first.days_in_month - 1)


def events_starting_on(events: list[Event], day: datetime.date) -> list[Event]:
    return sort_events([event for event in events if same_day(event["start"], day)])


def events_in_range(
    events: list[Event], first_day: datetime.date, last_day: datetime.date
) -> list[Event]:
    """
    Events overlapping the inclusive calendar-day range.

    Both ends are compared by calendar day, so an event ending exactly at
    midnight still touches the day it ends on.
    """
    first = to_date(first_day)
    last = to_date(last_day)
    return sort_events(
        [
            event
            for event in events
            if to_date(event["start"]) <= last and to_date(event["end"]) >= first
        ]
    )


def events_for_day(events: list[Event], day: datetime.date) -> list[Event]:
    return events_in_range(events, day, day)


def events_for_week(events: list[Event], reference: datetime.date) -> list[Event]:
    first = start_of_week(reference)
    return events_in_range(events, first, first.add(days=DAYS_PER_WEEK - 1))


def events_for_month(events: list[Event], reference: datetime.date) -> list[Event]:
    return events_in_range(events, start_of_month(reference), end_of_month(reference))


def bucket_events_by_start_day(events: list[Event]) -> dict[pendulum.Date, list[Event]]:
    buckets: dict[pendulum.Date, list[Event]] = {}
    for event in sort_events(events):
        buckets.setdefault(to_date(event["start"]), []).append(event)
    return buckets


def month_grid(
    reference: datetime.date,
    events: Optional[list[Event]] = None,
    today: Optional[datetime.date] = None,
) -> list[MonthCell]:
    """
    Build the fixed 6x7 grid for the month containing `reference`.

    The grid starts on the Sunday on or before the first of the month and
    always holds exactly 42 cells, whatever the month's length.

    Args:
        reference: Any day of the month to display
        events: Events to bucket into cells by their start day
        today: Day to flag as today, if any

    Returns:
        42 consecutive cells, each flagged with whether it belongs to the
        reference month
    """
    first = start_of_month(reference)
    grid_start = first.subtract(days=sunday_weekday(first))
    buckets = bucket_events_by_start_day(events) if events is not None else {}

    cells: list[MonthCell] = []
    for offset in range(MONTH_GRID_CELLS):
        day = grid_start.add(days=offset)
        cells.append(
            {
                "date": day,
                "day": day.day,
                "current_month": day.month == first.month and day.year == first.year,
                "is_today": today is not None and same_day(day, today),
                "events": list(buckets.get(day, [])),
            }
        )
    return cells


def year_grid(
    reference: datetime.date,
    events: Optional[list[Event]] = None,
    today: Optional[datetime.date] = None,
) -> list[YearMonth]:
    """Twelve month grids for the year containing `reference`."""
    months: list[YearMonth] = []
    for month in range(1, MONTHS_PER_YEAR + 1):
        first = pendulum.Date(reference.year, month, 1)
        months.append({"month": first, "cells": month_grid(first, events, today)})
    return months


def week_days(reference: datetime.date) -> list[pendulum.Date]:
    first = start_of_week(reference)
    return [first.add(days=offset) for offset in range(DAYS_PER_WEEK)]


def week_grid(
    reference: datetime.date,
    events: Optional[list[Event]] = None,
    today: Optional[datetime.date] = None,
) -> list[WeekDayColumn]:
    """
    Seven day columns, Sunday to Saturday, for the week containing `reference`.

    Timed events land in the column of the day they start on. Banner events
    (long or multi-day) are listed on every day they touch.
    """
    if events is None:
        events = []
    banners = [event for event in events if is_banner_event(event)]
    timed = [event for event in events if not is_banner_event(event)]

    columns: list[WeekDayColumn] = []
    for day in week_days(reference):
        columns.append(
            {
                "date": day,
                "is_today": today is not None and same_day(day, today),
                "events": events_starting_on(timed, day),
                "banners": events_for_day(banners, day),
            }
        )
    return columns


def agenda_groups(events: list[Event], reference: datetime.date) -> list[AgendaGroup]:
    """
    Chronological, day-labelled sections for the month containing `reference`.

    Only events starting inside the month are listed. After sorting by start,
    a new section begins whenever the next event falls on a different day
    than the current section.
    """
    first = start_of_month(reference)
    last = end_of_month(reference)
    month_events = sort_events(
        [event for event in events if first <= to_date(event["start"]) <= last]
    )

    groups: list[AgendaGroup] = []
    for event in month_events:
        day = to_date(event["start"])
        if groups and groups[-1]["date"] == day:
            groups[-1]["events"].append(event)
        else:
            groups.append({"date": day, "events": [event]})
    return groups


def range_label(view: CalendarView, reference: datetime.date) -> str:
    """Human readable date range covered by a view, as shown in the toolbar."""
    day = to_date(reference)
    if view == CalendarView.DAY:
        return day.format("MMM D, YYYY")
    if view == CalendarView.WEEK:
        first = start_of_week(day)
        last = first.add(days=DAYS_PER_WEEK - 1)
        return f"{first.format('MMM D')} - {last.format('MMM D, YYYY')}"
    if view in (CalendarView.MONTH, CalendarView.AGENDA):
        first = start_of_month(day)
        last = end_of_month(day)
        return f"{first.format('MMM D')} - {last.format('MMM D, YYYY')}"
    first = pendulum.Date(day.year, 1, 1)
    last = pendulum.Date(day.year, 12, 31)
    return f"{first.format('MMM YYYY')} - {last.format('MMM YYYY')}"
