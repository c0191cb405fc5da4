from versepost.integrations.fastapi import (
    RequestLoggingMiddleware,
    create_schema,
    init_app,
    register_exception_handlers,
    request_logging_middleware,
)

__all__ = [
    "RequestLoggingMiddleware",
    "create_schema",
    "init_app",
    "register_exception_handlers",
    "request_logging_middleware",
]
