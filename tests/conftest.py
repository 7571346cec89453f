"""Shared fixtures for the daybook test suite."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from daybook.config import AppSettings, HttpSettings, LogSettings
from daybook.core import EventStore
from daybook.services import ServiceContext
from daybook.services.http import create_app


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        app_name="Daybook Test",
        http=HttpSettings(host="127.0.0.1", port=8080, timeout=4.0, idle_timeout=60.0),
        logging=LogSettings(level="DEBUG", directory=tmp_path / "logs"),
    )


@pytest.fixture
def store() -> EventStore:
    return EventStore()


@pytest.fixture
def holiday_store(store: EventStore) -> EventStore:
    """Store holding the Christmas week fixture for owner 1 plus noise for owner 2."""
    store.create(1, date(2023, 12, 25), "Christmas")
    store.create(1, date(2023, 12, 26), "Boxing Day")
    store.create(1, date(2024, 1, 1), "New Year")
    store.create(2, date(2023, 12, 25), "Someone else's Christmas")
    return store


@pytest.fixture
def context(settings: AppSettings, store: EventStore) -> ServiceContext:
    return ServiceContext(settings=settings, store=store)


@pytest.fixture
def client(context: ServiceContext):
    with TestClient(create_app(context)) as test_client:
        yield test_client
