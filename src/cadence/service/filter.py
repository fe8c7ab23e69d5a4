# SPDX-License-Identifier: MIT

from cadence.model.event import Event
from cadence.model.view import ALL_ASSIGNEES


def filter_by_assignee(events: list[Event], assignee_id: str) -> list[Event]:
    """
    Narrow events to a single assignee.

    Args:
        events: Events to filter
        assignee_id: `"all"` for every event, otherwise a user id

    Returns:
        Every event for `"all"`, otherwise the events assigned to that user.
        Unassigned events never match a specific id.
    """
    if assignee_id == ALL_ASSIGNEES:
        return list(events)
    return [
        event
        for event in events
        if event["assignee"] is not None and event["assignee"]["id"] == assignee_id
    ]
