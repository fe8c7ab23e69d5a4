"""
Pytest configuration and shared fixtures.
"""

from pathlib import Path
from typing import Any, Callable

import pendulum
import pytest

from cadence import configuration
from cadence.repository.configuration import CONFIGURATION_REPO
from cadence.service.validate import parse_event
from cadence.session import CalendarSession
from cadence.view import state as view_state

# Wednesday, mid-morning
FIXED_NOW = pendulum.datetime(2026, 7, 15, 10, 30, tz="UTC")


@pytest.fixture
def clock() -> Callable[[], pendulum.DateTime]:
    return lambda: FIXED_NOW


@pytest.fixture
def raw_event() -> Callable[..., dict[str, Any]]:
    """Factory for source-shaped event records (camelCase keys, ISO strings)."""

    def build(
        id: str | int = "e1",
        start: str = "2026-07-15T09:00:00",
        end: str = "2026-07-15T10:00:00",
        **extra: Any,
    ) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": id,
            "title": extra.pop("title", f"Interview {id}"),
            "startDate": start,
            "endDate": end,
        }
        record.update(extra)
        return record

    return build


@pytest.fixture
def make_event(raw_event: Callable[..., dict[str, Any]]) -> Callable[..., Any]:
    """Factory for validated events in UTC."""

    def build(*args: Any, **kwargs: Any) -> Any:
        return parse_event(raw_event(*args, **kwargs), "UTC")

    return build


@pytest.fixture
def alice() -> dict[str, Any]:
    return {"id": "u1", "name": "Alice Recruiter", "picturePath": None}


@pytest.fixture
def bob() -> dict[str, Any]:
    return {"id": "u2", "name": "Bob Interviewer", "picturePath": "/avatars/bob.png"}


@pytest.fixture
def session(
    clock: Callable[[], pendulum.DateTime],
    raw_event: Callable[..., dict[str, Any]],
    alice: dict[str, Any],
    bob: dict[str, Any],
) -> CalendarSession:
    events = [
        raw_event("e1", "2026-07-15T09:00:00", "2026-07-15T10:00:00", user=alice),
        raw_event("e2", "2026-07-15T09:30:00", "2026-07-15T10:30:00", user=bob),
        raw_event("e3", "2026-07-15T11:00:00", "2026-07-15T12:00:00"),
        raw_event("e4", "2026-07-03T14:00:00", "2026-07-03T15:00:00", user=alice),
        raw_event("e5", "2026-08-02T09:00:00", "2026-08-02T10:00:00", user=bob),
    ]
    return CalendarSession(
        events=events,
        users=[alice, bob],
        reference_date=pendulum.date(2026, 7, 15),
        tz="UTC",
        clock=clock,
    )


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration at a temporary file using UTC."""
    config_path = tmp_path / "config" / "config.yaml"
    config_path.parent.mkdir(parents=True)
    config_path.write_text("timezone: UTC\n")

    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path.parent)
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
    yield config_path
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    source_path = tmp_path / "events.yaml"
    source_path.write_text(
        """
users:
  - id: u1
    name: Alice Recruiter
    role: recruiter
    color: teal
  - id: u2
    name: Bob Interviewer
events:
  - id: 1
    title: Screening call
    startDate: "2026-07-15T09:00:00Z"
    endDate: "2026-07-15T09:45:00Z"
    color: green
    sessionType: phone
    user: {id: u1, name: Alice Recruiter}
  - id: 2
    title: Panel interview
    startDate: "2026-07-15T09:30:00Z"
    endDate: "2026-07-15T11:00:00Z"
    user: {id: u2, name: Bob Interviewer}
  - id: 3
    title: Onsite day
    startDate: "2026-07-16T08:00:00Z"
    endDate: "2026-07-17T17:00:00Z"
    color: purple
  - id: 4
    title: Broken record
    startDate: "not a date"
    endDate: "2026-07-15T11:00:00Z"
"""
    )
    return source_path
