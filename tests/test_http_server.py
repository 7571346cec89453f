"""HTTP-level tests for the event endpoints."""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from daybook.config import HttpSettings
from daybook.core import EventStore
from daybook.services.http import build_server_config


def _create(client: TestClient, user_id: int, day: str, title: str) -> dict:
    response = client.post("/create_event", json={"user_id": user_id, "date": day, "title": title})
    assert response.status_code == 200, response.text
    return response.json()["result"]


# ---------------------------------------------------------------------------
# create_event
# ---------------------------------------------------------------------------


def test_create_event_with_json(client: TestClient) -> None:
    event = _create(client, 1, "2023-12-25", "Christmas")
    assert event == {"id": 1, "user_id": 1, "date": "2023-12-25", "title": "Christmas"}


def test_create_event_with_form_data(client: TestClient, store: EventStore) -> None:
    response = client.post("/create_event", data={"user_id": "3", "date": "2024-02-29", "title": "Leap"})
    assert response.status_code == 200
    assert response.json()["result"]["user_id"] == 3
    assert [event.title for event in store.events_for_day(3, date(2024, 2, 29))] == ["Leap"]


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ({"user_id": 1, "date": "invalid-date", "title": "Christmas"}, "invalid date format, expected YYYY-MM-DD"),
        ({"user_id": 1, "date": "2023-02-30", "title": "Christmas"}, "invalid date format, expected YYYY-MM-DD"),
        ({"user_id": 1, "date": "2023-1-5", "title": "Christmas"}, "invalid date format, expected YYYY-MM-DD"),
        ({"user_id": 1, "date": "20231225", "title": "Christmas"}, "invalid date format, expected YYYY-MM-DD"),
        ({"user_id": 1, "date": "2023-12-25", "title": ""}, "title cannot be empty"),
        ({"user_id": 0, "date": "2023-12-25", "title": "Christmas"}, "user_id must be positive"),
        ({"date": "2023-12-25", "title": "Christmas"}, "user_id must be positive"),
        ({"user_id": 0, "title": ""}, "user_id must be positive"),
    ],
)
def test_create_event_rejects_invalid_input(client: TestClient, store: EventStore, body: dict, message: str) -> None:
    response = client.post("/create_event", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert len(store) == 0


def test_create_event_rejects_malformed_json(client: TestClient) -> None:
    response = client.post("/create_event", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "invalid JSON request body"}


# ---------------------------------------------------------------------------
# update_event / delete_event
# ---------------------------------------------------------------------------


def test_update_event(client: TestClient, store: EventStore) -> None:
    created = _create(client, 1, "2023-12-25", "Christmas")
    response = client.post("/update_event", json={"id": created["id"], "date": "2023-12-26", "title": "Boxing Day"})

    assert response.status_code == 200
    assert response.json() == {"result": "event updated successfully"}
    events = store.events_for_day(1, date(2023, 12, 26))
    assert [(event.id, event.title) for event in events] == [(created["id"], "Boxing Day")]


def test_update_missing_event(client: TestClient) -> None:
    response = client.post("/update_event", json={"id": 999, "date": "2023-12-26", "title": "Boxing Day"})
    assert response.status_code == 503
    assert response.json() == {"error": "event not found"}


def test_update_rejects_non_positive_id(client: TestClient) -> None:
    response = client.post("/update_event", json={"id": -4, "date": "2023-12-26", "title": "Boxing Day"})
    assert response.status_code == 400
    assert response.json() == {"error": "id must be positive"}


def test_delete_event(client: TestClient, store: EventStore) -> None:
    created = _create(client, 1, "2023-12-25", "Christmas")

    response = client.post("/delete_event", json={"id": created["id"]})
    assert response.status_code == 200
    assert response.json() == {"result": "event deleted successfully"}
    assert len(store) == 0

    again = client.post("/delete_event", json={"id": created["id"]})
    assert again.status_code == 503
    assert again.json() == {"error": "event not found"}


def test_delete_event_with_form_data(client: TestClient, store: EventStore) -> None:
    created = _create(client, 1, "2023-12-25", "Christmas")
    response = client.post("/delete_event", data={"id": str(created["id"])})
    assert response.status_code == 200
    assert len(store) == 0


# ---------------------------------------------------------------------------
# range queries
# ---------------------------------------------------------------------------


@pytest.fixture
def holiday_client(client: TestClient) -> TestClient:
    _create(client, 1, "2023-12-25", "Christmas")
    _create(client, 1, "2023-12-26", "Boxing Day")
    _create(client, 1, "2024-01-01", "New Year")
    _create(client, 2, "2023-12-25", "Other owner")
    return client


@pytest.mark.parametrize(
    ("path", "expected_ids"),
    [
        ("/events_for_day", [1]),
        ("/events_for_week", [1, 2]),
        ("/events_for_month", [1, 2]),
    ],
)
def test_range_queries(holiday_client: TestClient, path: str, expected_ids: list[int]) -> None:
    response = holiday_client.get(path, params={"user_id": 1, "date": "2023-12-25"})
    assert response.status_code == 200
    assert [event["id"] for event in response.json()["result"]] == expected_ids


def test_range_query_accepts_json_body(holiday_client: TestClient) -> None:
    response = holiday_client.request("GET", "/events_for_week", json={"user_id": 1, "date": "2024-01-03"})
    assert response.status_code == 200
    assert [event["title"] for event in response.json()["result"]] == ["New Year"]


def test_range_query_returns_empty_list(holiday_client: TestClient) -> None:
    response = holiday_client.get("/events_for_month", params={"user_id": 5, "date": "2023-12-25"})
    assert response.status_code == 200
    assert response.json() == {"result": []}


@pytest.mark.parametrize(
    ("params", "message"),
    [
        ({"date": "2023-12-25"}, "invalid user_id"),
        ({"user_id": "abc", "date": "2023-12-25"}, "invalid user_id"),
        ({"user_id": "-1", "date": "2023-12-25"}, "invalid user_id"),
        ({"user_id": "1"}, "date parameter is required"),
        ({"user_id": "1", "date": "25/12/2023"}, "invalid date format, expected YYYY-MM-DD"),
        ({"user_id": "1", "date": "2023-1-5"}, "invalid date format, expected YYYY-MM-DD"),
        ({"user_id": "1", "date": "20231225"}, "invalid date format, expected YYYY-MM-DD"),
    ],
)
def test_range_query_validation(client: TestClient, params: dict, message: str) -> None:
    response = client.get("/events_for_day", params=params)
    assert response.status_code == 400
    assert response.json() == {"error": message}


def test_range_query_rejects_malformed_body(client: TestClient) -> None:
    response = client.request(
        "GET", "/events_for_day", content=b"[1, 2", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "invalid request body"}


def test_update_is_visible_to_day_query(holiday_client: TestClient) -> None:
    holiday_client.post("/update_event", json={"id": 2, "date": "2023-12-26", "title": "Boxing Day Renamed"})

    response = holiday_client.get("/events_for_day", params={"user_id": 1, "date": "2023-12-26"})
    assert response.json()["result"] == [{"id": 2, "user_id": 1, "date": "2023-12-26", "title": "Boxing Day Renamed"}]


# ---------------------------------------------------------------------------
# server config
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(("timeout", "expected"), [(0.5, 1), (4.0, 4), (2.2, 3)])
def test_server_config_rounds_read_timeout_up(timeout: float, expected: int) -> None:
    http = HttpSettings(host="127.0.0.1", port=8080, timeout=timeout, idle_timeout=60.0)
    config = build_server_config(http)
    assert config.read_timeout == expected
    assert config.keep_alive_timeout == 60.0
    assert config.bind == ["127.0.0.1:8080"]


def test_server_config_applies_overrides() -> None:
    http = HttpSettings(host="127.0.0.1", port=8080, timeout=4.0, idle_timeout=60.0)
    assert build_server_config(http, "0.0.0.0", 9000).bind == ["0.0.0.0:9000"]
