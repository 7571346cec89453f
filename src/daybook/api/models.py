from __future__ import annotations

import datetime as dt
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain import Event

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
INVALID_DATE = "invalid date format, expected YYYY-MM-DD"


def _as_int(value: Any, message: str) -> int:
    if isinstance(value, bool):
        raise ValueError(message)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(message) from None
    raise ValueError(message)


def _positive(value: Any, message: str) -> int:
    number = _as_int(value, message)
    if number <= 0:
        raise ValueError(message)
    return number


def _title(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError("title cannot be empty")
    return value


def parse_day(value: Any, *, missing: str = INVALID_DATE) -> dt.date:
    """Parse a ``YYYY-MM-DD`` string into a date."""

    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        return value
    if value is None or value == "":
        raise ValueError(missing)
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise ValueError(INVALID_DATE)
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise ValueError(INVALID_DATE) from None


def first_error_message(exc: ValidationError) -> str:
    """Return the message of the first failing field, without pydantic's prefix."""

    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if cause is not None:
            return str(cause)
        return str(error.get("msg", "invalid request"))
    return "invalid request"


class _RequestModel(BaseModel):
    # Defaults are validated so that missing fields report the same message as bad ones.
    model_config = ConfigDict(validate_default=True, extra="ignore")


class CreateEventRequest(_RequestModel):
    user_id: int = Field(default=None)
    title: str = Field(default=None)
    date: dt.date = Field(default=None)

    @field_validator("user_id", mode="before")
    @classmethod
    def _check_user_id(cls, value: Any) -> int:
        return _positive(value, "user_id must be positive")

    @field_validator("title", mode="before")
    @classmethod
    def _check_title(cls, value: Any) -> str:
        return _title(value)

    @field_validator("date", mode="before")
    @classmethod
    def _check_date(cls, value: Any) -> dt.date:
        return parse_day(value)


class UpdateEventRequest(_RequestModel):
    id: int = Field(default=None)
    title: str = Field(default=None)
    date: dt.date = Field(default=None)

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> int:
        return _positive(value, "id must be positive")

    @field_validator("title", mode="before")
    @classmethod
    def _check_title(cls, value: Any) -> str:
        return _title(value)

    @field_validator("date", mode="before")
    @classmethod
    def _check_date(cls, value: Any) -> dt.date:
        return parse_day(value)


class DeleteEventRequest(_RequestModel):
    id: int = Field(default=None)

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> int:
        return _positive(value, "id must be positive")


class EventQuery(_RequestModel):
    user_id: int = Field(default=None)
    date: dt.date = Field(default=None)

    @field_validator("user_id", mode="before")
    @classmethod
    def _check_user_id(cls, value: Any) -> int:
        return _positive(value, "invalid user_id")

    @field_validator("date", mode="before")
    @classmethod
    def _check_date(cls, value: Any) -> dt.date:
        return parse_day(value, missing="date parameter is required")


class EventPayload(BaseModel):
    id: int
    user_id: int
    date: str
    title: str

    @classmethod
    def from_domain(cls, event: Event) -> "EventPayload":
        return cls(
            id=event.id,
            user_id=event.user_id,
            date=event.occurs_on.isoformat(),
            title=event.title,
        )
