from __future__ import annotations

import logging
import math
import time
from typing import Any, Dict, Optional

import orjson
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ...api import (
    CreateEventRequest,
    DeleteEventRequest,
    EventQuery,
    UpdateEventRequest,
    first_error_message,
    serialize_event,
    serialize_events,
)
from ...config import HttpSettings
from ...domain import EventNotFoundError, Period
from ..calendar import CalendarService
from ..context import ServiceContext

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class OrjsonResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return orjson.dumps(content)


class RequestPayloadError(ValueError):
    """Raised when a request body cannot be decoded at all."""


def result(data: Any) -> OrjsonResponse:
    return OrjsonResponse({"result": data})


def error(status_code: int, message: str) -> OrjsonResponse:
    return OrjsonResponse({"error": message}, status_code=status_code)


async def _mutation_arguments(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        try:
            form = await request.form()
        except Exception as exc:  # noqa: BLE001
            raise RequestPayloadError("invalid form data") from exc
        return {key: value for key, value in form.items()}
    body = await request.body()
    try:
        payload = orjson.loads(body)
    except orjson.JSONDecodeError as exc:
        raise RequestPayloadError("invalid JSON request body") from exc
    if not isinstance(payload, dict):
        raise RequestPayloadError("invalid JSON request body")
    return payload


async def _query_arguments(request: Request) -> Dict[str, Any]:
    if request.query_params:
        return dict(request.query_params)
    # Older clients send the filter as a JSON body on GET.
    body = await request.body()
    if not body:
        return {}
    try:
        payload = orjson.loads(body)
    except orjson.JSONDecodeError as exc:
        raise RequestPayloadError("invalid request body") from exc
    if not isinstance(payload, dict):
        raise RequestPayloadError("invalid request body")
    return payload


def create_app(context: Optional[ServiceContext] = None) -> FastAPI:
    """Build the HTTP application around a single shared event store."""

    context = context or ServiceContext()
    calendar = CalendarService(context)

    app = FastAPI(title=f"{context.settings.app_name} API", version="0.1.0", default_response_class=OrjsonResponse)
    app.state.context = context
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    @app.exception_handler(RequestPayloadError)
    async def _payload_error(request: Request, exc: RequestPayloadError) -> OrjsonResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
        return error(400, str(exc))

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> OrjsonResponse:
        message = first_error_message(exc)
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
        return error(400, message)

    @app.exception_handler(EventNotFoundError)
    async def _not_found(request: Request, exc: EventNotFoundError) -> OrjsonResponse:
        return error(503, "event not found")

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> OrjsonResponse:
        logger.exception("Request %s %s failed", request.method, request.url.path)
        return error(500, "internal server error")

    @app.post("/create_event")
    async def create_event(request: Request) -> OrjsonResponse:
        payload = CreateEventRequest.model_validate(await _mutation_arguments(request))
        event = await run_in_threadpool(
            calendar.create_event, user_id=payload.user_id, occurs_on=payload.date, title=payload.title
        )
        return result(serialize_event(event))

    @app.post("/update_event")
    async def update_event(request: Request) -> OrjsonResponse:
        payload = UpdateEventRequest.model_validate(await _mutation_arguments(request))
        await run_in_threadpool(calendar.update_event, event_id=payload.id, occurs_on=payload.date, title=payload.title)
        return result("event updated successfully")

    @app.post("/delete_event")
    async def delete_event(request: Request) -> OrjsonResponse:
        payload = DeleteEventRequest.model_validate(await _mutation_arguments(request))
        await run_in_threadpool(calendar.delete_event, payload.id)
        return result("event deleted successfully")

    async def _events_for(period: Period, request: Request) -> OrjsonResponse:
        query = EventQuery.model_validate(await _query_arguments(request))
        events = await run_in_threadpool(calendar.events_for, period, user_id=query.user_id, day=query.date)
        return result(serialize_events(events))

    @app.get("/events_for_day")
    async def events_for_day(request: Request) -> OrjsonResponse:
        return await _events_for(Period.DAY, request)

    @app.get("/events_for_week")
    async def events_for_week(request: Request) -> OrjsonResponse:
        return await _events_for(Period.WEEK, request)

    @app.get("/events_for_month")
    async def events_for_month(request: Request) -> OrjsonResponse:
        return await _events_for(Period.MONTH, request)

    return app


def build_server_config(http: HttpSettings, host: Optional[str] = None, port: Optional[int] = None):
    """Translate HTTP settings into a hypercorn ``Config``; timeouts round up to whole seconds."""

    from hypercorn.config import Config

    config = Config()
    config.bind = [f"{host or http.host}:{port or http.port}"]
    config.read_timeout = max(1, math.ceil(http.timeout))
    config.keep_alive_timeout = http.idle_timeout
    return config


def run_local_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    import asyncio

    from hypercorn.asyncio import serve

    context = ServiceContext()
    config = build_server_config(context.settings.http, host, port)
    logger.info("Server starting on %s", config.bind[0])
    asyncio.run(serve(create_app(context), config))
