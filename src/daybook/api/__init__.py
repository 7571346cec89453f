"""Request and response models shared by the HTTP layer."""

from __future__ import annotations

from .models import (
    CreateEventRequest,
    DeleteEventRequest,
    EventPayload,
    EventQuery,
    UpdateEventRequest,
    first_error_message,
    parse_day,
)
from .serializers import serialize_event, serialize_events

__all__ = [
    "CreateEventRequest",
    "DeleteEventRequest",
    "EventPayload",
    "EventQuery",
    "UpdateEventRequest",
    "first_error_message",
    "parse_day",
    "serialize_event",
    "serialize_events",
]
