from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from versepost.api import ROUTERS
from versepost.config import Settings
from versepost.core.connection import Connection
from versepost.core.store import DocumentStore
from versepost.integrations.fastapi import (
    init_app,
    register_exception_handlers,
    request_logging_middleware,
)
from versepost.lifecycle.tracing import PostTracer
from versepost.logging_config import configure_logging
from versepost.models.post import Post
from versepost.services.person import PersonService
from versepost.services.posts import PostsService
from versepost.services.uploads import UploadService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, *, connection: Connection | None = None) -> FastAPI:
    """Build the blog API.

    Args:
        settings: Defaults to ``Settings()``, read from the environment.
        connection: Database handle; built from ``settings.mongo_uri`` when omitted.
            It is opened on startup and closed on shutdown.
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.title,
        description=settings.description,
        version=settings.version,
        docs_url=settings.docs_path,
        openapi_tags=[{"name": "blog"}],
    )
    app.state.settings = settings
    app.state.person_service = PersonService()
    app.state.upload_service = UploadService(settings.upload_dir)
    app.state.post_tracer = PostTracer(settings.slow_post_ms) if settings.trace_posts else None

    async def build_services(a: FastAPI, conn: Connection) -> None:
        a.state.posts_service = PostsService(
            DocumentStore.for_document(conn, Post), tracer=a.state.post_tracer
        )

    init_app(app, connection or Connection(settings.mongo_uri), on_open=build_services)
    register_exception_handlers(app)
    request_logging_middleware(app)

    for router in ROUTERS:
        app.include_router(router)
    app.mount(
        settings.static_prefix,
        StaticFiles(directory=settings.static_dir, check_dir=False),
        name="static",
    )

    logger.debug(f"Application created; docs at {settings.docs_path}")
    return app
