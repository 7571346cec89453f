from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from ..core import EventStore
from ..domain import Event, EventNotFoundError, Period
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def store(self) -> EventStore:
        return self.context.store

    def create_event(self, *, user_id: int, occurs_on: date, title: str) -> Event:
        event = self.store.create(user_id, occurs_on, title)
        logger.info("Created event %s for user %s on %s", event.id, user_id, occurs_on.isoformat())
        return event

    def update_event(self, *, event_id: int, occurs_on: date, title: str) -> None:
        try:
            self.store.update(event_id, occurs_on, title)
        except EventNotFoundError:
            logger.warning("Update requested for unknown event %s", event_id)
            raise
        logger.info("Updated event %s", event_id)

    def delete_event(self, event_id: int) -> None:
        try:
            self.store.delete(event_id)
        except EventNotFoundError:
            logger.warning("Delete requested for unknown event %s", event_id)
            raise
        logger.info("Deleted event %s", event_id)

    def events_for(self, period: Period, *, user_id: int, day: date) -> list[Event]:
        events = self.store.events_for(period, user_id, day)
        logger.debug(
            "Found %d event(s) for user %s in %s of %s", len(events), user_id, Period(period).value, day.isoformat()
        )
        return sorted(events, key=lambda event: (event.occurs_on, event.id))
