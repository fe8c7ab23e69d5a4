# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Iterable, Iterator, Mapping, Optional

from cadence.errors import DuplicateEventError
from cadence.model.event import Event, EventId
from cadence.service.filter import filter_by_assignee
from cadence.service.validate import apply_event_patch, parse_event

logger = logging.getLogger(__name__)


class EventStore:
    """
    In-memory ordered collection of validated events.

    Insertion order is preserved. Every record is validated on the way in and
    every read hands out deep copies, so the store is the only writer of its
    own state.
    """

    def __init__(self, events: Iterable[Mapping[str, Any]] = (), tz: str = "local") -> None:
        self.tz = tz
        self._events: list[Event] = []
        for event in events:
            self.add(event)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, id: object) -> bool:
        return self.__index_of(id) is not None

    def __iter__(self) -> Iterator[Event]:
        return iter(self.all())

    def __index_of(self, id: object) -> Optional[int]:
        for index, event in enumerate(self._events):
            # 1 and "1" are different ids, True is not 1
            if type(event["id"]) is type(id) and event["id"] == id:
                return index
        return None

    def add(self, event: Mapping[str, Any]) -> Event:
        """
        Validate and append an event.

        Raises:
            EventValidationError: If the record is malformed
            DuplicateEventError: If an event with the same id is already stored
        """
        parsed = parse_event(event, self.tz)
        if parsed["id"] in self:
            raise DuplicateEventError(f"Event {parsed['id']!r} already exists")
        self._events.append(parsed)
        logger.debug("Added event %r", parsed["id"])
        return deepcopy(parsed)

    def update(self, id: EventId, patch: Mapping[str, Any]) -> bool:
        """
        Merge `patch` onto the event with `id`.

        Returns:
            False when no event has that id, True otherwise

        Raises:
            EventValidationError: If the merged event would be invalid; the
                stored event is left unchanged
        """
        index = self.__index_of(id)
        if index is None:
            logger.debug("Ignoring update for unknown event %r", id)
            return False
        self._events[index] = apply_event_patch(self._events[index], patch, self.tz)
        logger.debug("Updated event %r", id)
        return True

    def remove(self, id: EventId) -> bool:
        index = self.__index_of(id)
        if index is None:
            logger.debug("Ignoring removal of unknown event %r", id)
            return False
        del self._events[index]
        logger.debug("Removed event %r", id)
        return True

    def get(self, id: EventId) -> Optional[Event]:
        index = self.__index_of(id)
        if index is None:
            return None
        return deepcopy(self._events[index])

    def all(self) -> list[Event]:
        return deepcopy(self._events)

    def filter_by_assignee(self, assignee_id: str) -> list[Event]:
        return deepcopy(filter_by_assignee(self._events, assignee_id))
