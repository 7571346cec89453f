from __future__ import annotations


class DaybookError(Exception):
    """Base class for errors raised by the event store and its services."""


class EventNotFoundError(DaybookError, LookupError):
    """Raised when an update or delete references an id the store does not hold."""

    def __init__(self, event_id: int) -> None:
        super().__init__(f"event {event_id} not found")
        self.event_id = event_id
