from __future__ import annotations

from datetime import date
from typing import Dict, List

from ..domain import Event, EventNotFoundError, Period
from .locking import ReadWriteLock
from .periods import matcher_for


class EventStore:
    """In-memory event map shared by concurrent request handlers.

    Mutations hold the write side of the guard, queries the read side. Every
    event handed out is a copy, so callers never alias stored state.
    """

    def __init__(self, *, first_id: int = 1) -> None:
        if first_id < 1:
            raise ValueError("first_id must be positive")
        self._events: Dict[int, Event] = {}
        self._next_id = first_id
        self._lock = ReadWriteLock()

    def create(self, user_id: int, occurs_on: date, title: str) -> Event:
        with self._lock.write():
            event = Event(id=self._next_id, user_id=user_id, occurs_on=occurs_on, title=title)
            self._events[event.id] = event
            self._next_id += 1
            return event.copy()

    def update(self, event_id: int, occurs_on: date, title: str) -> None:
        with self._lock.write():
            event = self._events.get(event_id)
            if event is None:
                raise EventNotFoundError(event_id)
            event.occurs_on = occurs_on
            event.title = title

    def delete(self, event_id: int) -> None:
        with self._lock.write():
            if event_id not in self._events:
                raise EventNotFoundError(event_id)
            del self._events[event_id]

    def events_for_day(self, user_id: int, day: date) -> List[Event]:
        return self.events_for(Period.DAY, user_id, day)

    def events_for_week(self, user_id: int, day: date) -> List[Event]:
        return self.events_for(Period.WEEK, user_id, day)

    def events_for_month(self, user_id: int, day: date) -> List[Event]:
        return self.events_for(Period.MONTH, user_id, day)

    def events_for(self, period: Period, user_id: int, day: date) -> List[Event]:
        matches = matcher_for(period)
        with self._lock.read():
            return [
                event.copy()
                for event in self._events.values()
                if event.user_id == user_id and matches(event.occurs_on, day)
            ]

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._events)


__all__ = ["EventStore"]
