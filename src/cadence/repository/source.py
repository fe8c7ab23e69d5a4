# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]


class SourceRepository:
    """
    Read-only access to an event/user source document.

    The document is YAML (JSON works too) with a top-level `events` list and
    an optional `users` list. Records are returned raw; validation happens
    when they are admitted to a session.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._document: Optional[dict[str, Any]] = None

    @property
    def document(self) -> dict[str, Any]:
        if self._document is None:
            self.__load_data()
        if self._document is None:
            raise ValueError()
        return self._document

    def __load_data(self) -> None:
        raw = load(self.path.read_text(), Loader=Loader)
        if raw is None:
            raw = {}
        if isinstance(raw, list):
            # A bare list is treated as the events list
            raw = {"events": raw}
        if not isinstance(raw, dict):
            raise ValueError(f"{self.path} must contain a mapping or a list of events")
        self._document = raw

    def __get_list(self, key: str) -> list[Any]:
        records = self.document.get(key)
        if records is None:
            return []
        if not isinstance(records, list):
            raise ValueError(f"'{key}' in {self.path} must be a list")
        return list(records)

    def get_raw_events(self) -> list[Any]:
        return self.__get_list("events")

    def get_raw_users(self) -> list[Any]:
        return self.__get_list("users")
