# SPDX-License-Identifier: MIT


class EventValidationError(ValueError):
    """Raised when an event record cannot be admitted to the event store."""


class DuplicateEventError(EventValidationError):
    """Raised when an event id is already present in the event store."""


class TimeWindowError(ValueError):
    """Raised for malformed working-hours or visible-hours values."""
