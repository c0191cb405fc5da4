from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Awaitable, Callable

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, create_model, model_validator
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from versepost.core.connection import Connection
from versepost.utils.exceptions import NotConnected, VersepostError

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("versepost.access")


def init_app(
    app: FastAPI,
    connection: Connection,
    on_open: Callable[[FastAPI, Connection], Awaitable[None] | None] | None = None,
) -> FastAPI:
    """Open ``connection`` for the lifetime of ``app``.

    The connection is stored on ``app.state.connection``. ``on_open`` runs
    right after the connection opens, which is where services get built.
    Any lifespan already set on the app still runs inside this one.
    """
    app.state.connection = connection
    original_lifespan = app.router.lifespan_context

    @asynccontextmanager
    async def lifespan(a: FastAPI):
        await connection.open()
        try:
            if on_open is not None:
                result = on_open(a, connection)
                if result is not None:
                    await result
            async with original_lifespan(a) as state:
                yield state
        finally:
            await connection.close()

    app.router.lifespan_context = lifespan
    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Map versepost exceptions to JSON error responses."""

    @app.exception_handler(NotConnected)
    async def not_connected_handler(request: Request, exc: NotConnected):
        logger.error(f"Store unavailable for {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.exception_handler(VersepostError)
    async def versepost_error_handler(request: Request, exc: VersepostError):
        logger.error(f"Unhandled {type(exc).__name__} for {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with status and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            access_logger.error(
                "%s %s 500 %.1fms",
                request.method,
                request.url.path,
                (time.perf_counter() - start) * 1000,
            )
            raise
        duration_ms = (time.perf_counter() - start) * 1000

        status = response.status_code
        if status >= 500:
            level = logging.ERROR
        elif status >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        access_logger.log(
            level,
            "%s %s %d %.1fms",
            request.method,
            request.url.path,
            status,
            duration_ms,
        )
        return response


def request_logging_middleware(app: FastAPI) -> None:
    app.add_middleware(RequestLoggingMiddleware)


def _reject_server_id(cls, data: Any) -> Any:
    if isinstance(data, dict) and "_id" in data:
        raise ValueError("_id is assigned by the server")
    return data


def create_schema(document_class: type[BaseModel], *, name: str | None = None) -> type[BaseModel]:
    """Build a request schema from a document class, leaving out ``id``.

    Field definitions, defaults and the ``extra`` policy are carried over.
    A body carrying ``_id`` is rejected; a plain ``id`` key is kept as data.
    """
    model_name = name or f"{document_class.__name__}Create"
    fields: dict[str, Any] = {
        field_name: (field_info.annotation, field_info)
        for field_name, field_info in document_class.model_fields.items()
        if field_name != "id"
    }
    config = ConfigDict(extra=document_class.model_config.get("extra", "ignore"))
    return create_model(
        model_name,
        __config__=config,
        __validators__={"reject_server_id": model_validator(mode="before")(_reject_server_id)},
        **fields,
    )
