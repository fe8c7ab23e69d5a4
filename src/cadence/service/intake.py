# SPDX-License-Identifier: MIT

import logging
from typing import Any, TypedDict

from cadence.errors import EventValidationError
from cadence.repository.source import SourceRepository
from cadence.session import CalendarSession

logger = logging.getLogger(__name__)


class Rejection(TypedDict):
    kind: str
    index: int
    reason: str


def admit_records(session: CalendarSession, kind: str, records: list[Any]) -> list[Rejection]:
    """
    Push raw records into a session, collecting the ones it refuses.

    Args:
        session: Session to populate
        kind: "event" or "user"
        records: Raw records from the source document

    Returns:
        One rejection per record that failed validation
    """
    rejections: list[Rejection] = []
    for index, record in enumerate(records):
        try:
            if kind == "user":
                session.add_user(record)
            else:
                session.add_event(record)
        except EventValidationError as e:
            logger.warning("Skipping %s #%d: %s", kind, index, e)
            rejections.append({"kind": kind, "index": index, "reason": str(e)})
    return rejections


def populate_session(session: CalendarSession, source: SourceRepository) -> list[Rejection]:
    """Load users, then events, from a source document into a session."""
    rejections = admit_records(session, "user", source.get_raw_users())
    rejections.extend(admit_records(session, "event", source.get_raw_events()))
    logger.debug(
        "Loaded %d events and %d users from %s",
        len(session.store),
        len(session.users),
        source.path,
    )
    return rejections
