# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Mapping

from cadence.errors import TimeWindowError
from cadence.model.time_window import HourRange, WorkingHours
from cadence.template.time_window import get_closed_hours_template

MIN_HOUR = 0
MAX_HOUR = 24


def sunday_weekday(value: datetime.date) -> int:
    """Weekday index with Sunday = 0 and Saturday = 6."""
    return value.isoweekday() % 7


def working_hours_for_weekday(working_hours: WorkingHours, weekday: int) -> HourRange:
    """Return the opening hours for a weekday, closed when the weekday is absent."""
    hour_range = working_hours.get(weekday)
    if hour_range is None:
        return get_closed_hours_template()
    return hour_range


def is_working_hour(hour: int, weekday: int, working_hours: WorkingHours) -> bool:
    hour_range = working_hours_for_weekday(working_hours, weekday)
    return hour_range["from"] <= hour < hour_range["to"]


def is_closed(working_hours: WorkingHours, weekday: int) -> bool:
    hour_range = working_hours_for_weekday(working_hours, weekday)
    return hour_range["from"] == hour_range["to"]


def visible_hours(hour_range: HourRange) -> list[int]:
    """
    Hour-row labels for the day and week grids.

    The range is inclusive on both ends, so `{from: 8, to: 19}` yields twelve
    rows. A reversed range yields no rows.
    """
    return list(range(hour_range["from"], hour_range["to"] + 1))


def visible_minutes(hour_range: HourRange) -> int:
    """Height of the visible window in minutes, zero for a reversed range."""
    return len(visible_hours(hour_range)) * 60


def parse_hour_range(raw: Any, require_ordered: bool = False) -> HourRange:
    """
    Validate a `{from, to}` mapping read from configuration.

    Args:
        raw: Mapping with integer `from` and `to` keys
        require_ordered: Reject ranges where `from` is greater than `to`

    Raises:
        TimeWindowError: If the value is not a valid hour range
    """
    if not isinstance(raw, Mapping) or "from" not in raw or "to" not in raw:
        raise TimeWindowError(f"Hour range must have 'from' and 'to', got {raw!r}")

    hour_from = raw["from"]
    hour_to = raw["to"]
    for hour in (hour_from, hour_to):
        if isinstance(hour, bool) or not isinstance(hour, int):
            raise TimeWindowError(f"Hour must be an integer, got {hour!r}")
        if hour < MIN_HOUR or hour > MAX_HOUR:
            raise TimeWindowError(
                f"Hour must be between {MIN_HOUR} and {MAX_HOUR}, got {hour}"
            )
    if require_ordered and hour_from > hour_to:
        raise TimeWindowError(
            f"Hour range start {hour_from} is after its end {hour_to}"
        )
    return {"from": hour_from, "to": hour_to}


def parse_working_hours(raw: Any) -> WorkingHours:
    """
    Validate a weekday to hour-range mapping read from configuration.

    Keys may be integers or digit strings (JSON object keys). Weekdays that
    are missing stay missing and are treated as closed.

    Raises:
        TimeWindowError: If a weekday or its hour range is invalid
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise TimeWindowError(f"Working hours must be a mapping, got {raw!r}")

    working_hours: WorkingHours = {}
    for key, value in raw.items():
        try:
            weekday = int(key)
        except (TypeError, ValueError):
            raise TimeWindowError(f"Weekday must be 0-6, got {key!r}")
        if weekday < 0 or weekday > 6:
            raise TimeWindowError(f"Weekday must be 0-6, got {weekday}")
        working_hours[weekday] = parse_hour_range(value, require_ordered=True)
    return working_hours
