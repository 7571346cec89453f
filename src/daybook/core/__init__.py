"""Concurrent in-memory event store and its date-range predicates."""

from .calendar_store import EventStore
from .locking import ReadWriteLock
from .periods import iso_week, matcher_for, same_day, same_iso_week, same_month

__all__ = [
    "EventStore",
    "ReadWriteLock",
    "iso_week",
    "matcher_for",
    "same_day",
    "same_iso_week",
    "same_month",
]
