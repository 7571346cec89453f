"""Domain models for the event store."""

from __future__ import annotations

from .enums import Period
from .errors import DaybookError, EventNotFoundError
from .models import Event

__all__ = ["DaybookError", "Event", "EventNotFoundError", "Period"]
