# SPDX-License-Identifier: MIT

"""
Boundary validation for event and user records.

Records arrive from external collaborators as mappings of ISO-8601 strings,
using either the source's camelCase keys (`startDate`, `picturePath`) or the
snake_case field names used throughout cadence. Everything admitted to the
event store passes through `parse_event`.
"""

import datetime
from typing import Any, Mapping, Optional

import pendulum

from cadence import time
from cadence.color import DEFAULT_EVENT_COLOR, EVENT_COLORS, is_event_color
from cadence.errors import EventValidationError
from cadence.model.event import EVENT_STATUSES, SESSION_TYPES, Event, EventId
from cadence.model.user import Assignee, User

KEY_ALIASES = {
    "startDate": "start",
    "start_date": "start",
    "endDate": "end",
    "end_date": "end",
    "user": "assignee",
    "picturePath": "picture_path",
    "candidateId": "candidate_id",
    "interviewerId": "interviewer_id",
    "sessionType": "session_type",
}

EVENT_FIELDS = (
    "id",
    "title",
    "description",
    "color",
    "start",
    "end",
    "assignee",
    "candidate_id",
    "interviewer_id",
    "session_type",
    "status",
)


def normalize_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Map source key spellings onto cadence field names."""
    return {KEY_ALIASES.get(key, key): value for key, value in raw.items()}


def parse_event_id(value: Any) -> EventId:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise EventValidationError(f"Event id must be a string or integer, got {value!r}")
    if isinstance(value, str) and value == "":
        raise EventValidationError("Event id cannot be empty")
    return value


def parse_timestamp(value: Any, field: str, tz: str) -> pendulum.DateTime:
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz=tz).in_tz(tz)
    if not isinstance(value, str):
        raise EventValidationError(f"{field} must be an ISO-8601 string, got {value!r}")
    try:
        return time.datetime_from_str(value, tz)
    except ValueError as e:
        raise EventValidationError(f"{field} is not a valid timestamp: {value!r}") from e


def _optional_str(raw: Mapping[str, Any], field: str) -> Optional[str]:
    value = raw.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise EventValidationError(f"{field} must be a string, got {value!r}")
    return value


def _optional_choice(
    raw: Mapping[str, Any], field: str, choices: tuple[str, ...]
) -> Optional[str]:
    value = _optional_str(raw, field)
    if value is not None and value not in choices:
        raise EventValidationError(
            f"{field} must be one of {', '.join(choices)}, got {value!r}"
        )
    return value


def _user_id(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)) or value == "":
        raise EventValidationError(f"User id must be a string or integer, got {value!r}")
    return str(value)


def parse_assignee(raw: Any) -> Optional[Assignee]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise EventValidationError(f"Assignee must be a mapping, got {raw!r}")
    record = normalize_keys(raw)
    if "id" not in record:
        raise EventValidationError("Assignee is missing an id")
    name = record.get("name")
    if not isinstance(name, str):
        raise EventValidationError(f"Assignee name must be a string, got {name!r}")
    return {
        "id": _user_id(record["id"]),
        "name": name,
        "picture_path": _optional_str(record, "picture_path"),
    }


def parse_user(raw: Any) -> User:
    """
    Validate a user record from the user source.

    Raises:
        EventValidationError: If the record is malformed
    """
    if not isinstance(raw, Mapping):
        raise EventValidationError(f"User must be a mapping, got {raw!r}")
    record = normalize_keys(raw)
    assignee = parse_assignee(record)
    if assignee is None:
        raise EventValidationError("User cannot be empty")
    return {
        "id": assignee["id"],
        "name": assignee["name"],
        "picture_path": assignee["picture_path"],
        "role": _optional_str(record, "role"),
        "color": _optional_choice(record, "color", EVENT_COLORS),
    }


def parse_event(raw: Any, tz: str = "local") -> Event:
    """
    Validate an event record and convert its timestamps into `tz`.

    Args:
        raw: Event mapping, with ISO-8601 strings or datetimes for start and end
        tz: Timezone every calendar computation will use

    Returns:
        A fully populated Event

    Raises:
        EventValidationError: If a field is missing, unparsable, or the event
            ends before it starts
    """
    if not isinstance(raw, Mapping):
        raise EventValidationError(f"Event must be a mapping, got {raw!r}")
    record = normalize_keys(raw)

    for field in ("id", "title", "start", "end"):
        if record.get(field) is None:
            raise EventValidationError(f"Event is missing required field '{field}'")

    event_id = parse_event_id(record["id"])

    title = record["title"]
    if not isinstance(title, str) or title.strip() == "":
        raise EventValidationError(f"Event {event_id!r} title must be a non-empty string")

    start = parse_timestamp(record["start"], "start", tz)
    end = parse_timestamp(record["end"], "end", tz)
    if end < start:
        raise EventValidationError(
            f"Event {event_id!r} ends ({end.isoformat()}) before it starts "
            f"({start.isoformat()})"
        )

    color = record.get("color")
    if color is None:
        color = DEFAULT_EVENT_COLOR
    if not isinstance(color, str) or not is_event_color(color):
        raise EventValidationError(f"Event {event_id!r} has unknown color {color!r}")

    return {
        "id": event_id,
        "title": title,
        "description": _optional_str(record, "description"),
        "color": color,
        "start": start,
        "end": end,
        "assignee": parse_assignee(record.get("assignee")),
        "candidate_id": _optional_str(record, "candidate_id"),
        "interviewer_id": _optional_str(record, "interviewer_id"),
        "session_type": _optional_choice(record, "session_type", SESSION_TYPES),
        "status": _optional_choice(record, "status", EVENT_STATUSES),
    }


def apply_event_patch(event: Event, patch: Mapping[str, Any], tz: str = "local") -> Event:
    """
    Merge a partial record onto an event and validate the result.

    Raises:
        EventValidationError: If the patch changes the id or yields an
            invalid event
    """
    changes = normalize_keys(patch)
    if "id" in changes and changes["id"] != event["id"]:
        raise EventValidationError(f"Event {event['id']!r} id cannot be changed")

    merged: dict[str, Any] = {field: event[field] for field in EVENT_FIELDS}  # type: ignore[literal-required]
    unknown = [key for key in changes if key not in EVENT_FIELDS]
    if unknown:
        raise EventValidationError(f"Unknown event fields: {', '.join(sorted(unknown))}")
    merged.update(changes)
    return parse_event(merged, tz)
