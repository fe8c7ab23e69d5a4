# SPDX-License-Identifier: MIT

import datetime
from typing import Callable, Optional, cast

import pendulum

Clock = Callable[[], pendulum.DateTime]

MINUTES_PER_DAY = 24 * 60


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def now_in(tz: str) -> pendulum.DateTime:
    return pendulum.now(tz)


def parse_timezone(value: object) -> str:
    """Check that `value` names a known timezone, or is "local".

    Raises:
        ValueError: If the timezone is unknown
    """
    if not isinstance(value, str) or value == "":
        raise ValueError(f"Timezone must be a non-empty string, got {value!r}")
    if value == "local":
        return value
    try:
        pendulum.timezone(value)
    except (ValueError, KeyError) as e:
        raise ValueError(f"Unknown timezone {value!r}") from e
    return value


def datetime_from_str(value: str, tz: str = "local") -> pendulum.DateTime:
    """Parse an ISO-8601 string into a pendulum.DateTime in the given timezone.

    Naive strings are interpreted in `tz`; strings carrying an offset keep their
    instant and are converted to `tz`.

    Raises:
        ValueError: If the string is not a date-time pendulum can parse
    """
    parsed = pendulum.parse(value, tz=tz)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"Not a date-time: {value!r}")
    return parsed.in_tz(tz)


def datetime_from_str_optional(
    value: Optional[str], tz: str = "local"
) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    return datetime_from_str(value, tz)


def datetime_to_iso_str(value: pendulum.DateTime) -> str:
    return value.isoformat()


def to_date(value: datetime.date) -> pendulum.Date:
    """Calendar day of a date or date-time, as a pendulum.Date."""
    return pendulum.Date(value.year, value.month, value.day)


def date_from_str(value: str) -> pendulum.Date:
    parsed = pendulum.parse(value)
    if isinstance(parsed, (pendulum.DateTime, pendulum.Date)):
        return to_date(cast(datetime.date, parsed))
    raise ValueError(f"Not a date: {value!r}")


def same_day(a: datetime.date, b: datetime.date) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def day_offset(value: datetime.date, day: datetime.date) -> int:
    """Number of calendar days from `day` to the calendar day of `value`."""
    return to_date(value).toordinal() - to_date(day).toordinal()


def wall_minutes(value: pendulum.DateTime, day: datetime.date) -> int:
    """Wall-clock minutes of `value` measured from midnight of `day`.

    Values on earlier days are negative, values on later days exceed a day.
    """
    return day_offset(value, day) * MINUTES_PER_DAY + value.hour * 60 + value.minute


def date_to_display_str(value: datetime.date) -> str:
    return to_date(value).format("YYYY-MM-DD ddd")


def datetime_to_display_time_str(value: pendulum.DateTime) -> str:
    return value.format("HH:mm")
