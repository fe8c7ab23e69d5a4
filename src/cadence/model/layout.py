# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from cadence.model.event import Event, EventId


class MonthCell(TypedDict):
    date: pendulum.Date
    day: int
    current_month: bool
    is_today: bool
    events: list[Event]


class YearMonth(TypedDict):
    month: pendulum.Date
    cells: list[MonthCell]


class WeekDayColumn(TypedDict):
    date: pendulum.Date
    is_today: bool
    # Timed events starting on this day, drawn on the hour axis
    events: list[Event]
    # All-day or multi-day events touching this day
    banners: list[Event]


class AgendaGroup(TypedDict):
    date: pendulum.Date
    events: list[Event]


class EventLayout(TypedDict):
    event_id: EventId
    top: float
    height: float
    # True when the event extends past the visible window
    clipped: bool


class PositionedEvent(TypedDict):
    event: Event
    layout: EventLayout
    column: int
    column_count: int


class DayLayout(TypedDict):
    date: pendulum.Date
    is_today: bool
    banners: list[Event]
    clusters: list[list[PositionedEvent]]
    now_top: float | None
