from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..domain import Event
from .models import EventPayload


def serialize_event(event: Event) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump()


def serialize_events(events: Iterable[Event]) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in events]
