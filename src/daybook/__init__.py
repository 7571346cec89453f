"""Daybook: a concurrent in-memory calendar event store with an HTTP front end."""

from __future__ import annotations

from .core import EventStore
from .domain import Event, EventNotFoundError

__all__ = ["Event", "EventNotFoundError", "EventStore"]
