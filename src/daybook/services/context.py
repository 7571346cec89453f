from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..core import EventStore


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings and the event store."""

    settings: AppSettings = field(default_factory=get_settings)
    store: EventStore = field(default_factory=EventStore)
