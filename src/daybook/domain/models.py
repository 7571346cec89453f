from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Event:
    id: int
    user_id: int
    occurs_on: date
    title: str

    def copy(self) -> "Event":
        return Event(id=self.id, user_id=self.user_id, occurs_on=self.occurs_on, title=self.title)
