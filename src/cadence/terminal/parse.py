# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from cadence.time import date_from_str, to_date


def parse_date(
    date_param: Optional[str | int], tz: str = "local"
) -> Optional[pendulum.Date]:
    """
    Parse a calendar day given on the command line.

    Accepts YYYY-MM-DD (a time component is ignored), today/t, yesterday/y,
    tomorrow/o, or a day offset from today such as 1 or -1. Relative forms
    count from today in `tz`.
    """
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}", date):
        try:
            return date_from_str(date)
        except ValueError:
            raise typer.BadParameter(f"Invalid date: {date}")

    if re.match(r"^-?\d+$", date):
        return to_date(pendulum.today(tz).add(days=int(date)))

    if date == "today" or date == "t":
        return to_date(pendulum.today(tz))
    if date == "yesterday" or date == "y":
        return to_date(pendulum.yesterday(tz))
    if date == "tomorrow" or date == "o":
        return to_date(pendulum.tomorrow(tz))
    raise typer.BadParameter("Incorrect date format")


def parse_hour(hour: int) -> int:
    """Validate an hour bound for working or visible hours (0-24)."""
    if hour < 0 or hour > 24:
        raise typer.BadParameter(f"Hour must be between 0 and 24, got {hour}")
    return hour


def parse_weekday(weekday: str) -> int:
    """
    Parse a weekday as 0-6 (0 = Sunday) or a three-letter English name.
    """
    names = ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]
    lowered = weekday.strip().lower()
    if lowered[:3] in names and not lowered.isdigit():
        return names.index(lowered[:3])
    if re.match(r"^[0-6]$", lowered):
        return int(lowered)
    raise typer.BadParameter(
        f"Weekday must be 0-6 (0 = Sunday) or a day name, got '{weekday}'"
    )
