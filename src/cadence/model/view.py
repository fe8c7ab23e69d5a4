# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

import pendulum

ALL_ASSIGNEES = "all"


class CalendarView(StrEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    AGENDA = "agenda"


class ViewState(TypedDict):
    view: CalendarView
    reference_date: pendulum.DateTime
    filter_assignee_id: str
