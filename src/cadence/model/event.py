# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias, TypedDict

import pendulum

from cadence.model.user import Assignee

EventId: TypeAlias = str | int

SESSION_TYPES = ("video", "in-person", "phone")
EVENT_STATUSES = ("scheduled", "completed", "cancelled", "no-show")


class Event(TypedDict):
    id: EventId
    title: str
    description: Optional[str]
    color: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    assignee: Optional[Assignee]
    candidate_id: Optional[str]
    interviewer_id: Optional[str]
    session_type: Optional[str]
    status: Optional[str]
