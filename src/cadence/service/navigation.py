# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from cadence.model.view import CalendarView

# Unit each view moves by on previous/next; agenda pages by month
NAVIGATION_STEPS: dict[CalendarView, str] = {
    CalendarView.DAY: "days",
    CalendarView.WEEK: "weeks",
    CalendarView.MONTH: "months",
    CalendarView.AGENDA: "months",
    CalendarView.YEAR: "years",
}

NEXT = 1
PREVIOUS = -1


def shift_reference_date(
    view: CalendarView,
    reference_date: pendulum.DateTime,
    direction: int,
    anchor_day: Optional[int] = None,
) -> pendulum.DateTime:
    """
    Move the reference date one unit of `view` forwards or backwards.

    Month and year steps clamp to the length of the target month. Passing the
    day-of-month the user originally picked as `anchor_day` restores it when
    the target month is long enough, so stepping forward then back always
    lands on the starting date (Jan 31 -> Feb 28 -> Jan 31).

    Args:
        view: Active view, selecting the step unit
        reference_date: Date to move from
        direction: NEXT (1) or PREVIOUS (-1)
        anchor_day: Preferred day-of-month for month and year steps

    Raises:
        ValueError: If direction is not 1 or -1
    """
    if direction not in (NEXT, PREVIOUS):
        raise ValueError(f"Direction must be 1 or -1, got {direction}")

    unit = NAVIGATION_STEPS[view]
    if unit in ("days", "weeks"):
        return reference_date.add(**{unit: direction})

    shifted = reference_date.add(**{unit: direction})
    if anchor_day is None:
        return shifted
    return shifted.set(day=min(anchor_day, shifted.days_in_month))
