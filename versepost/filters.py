from __future__ import annotations

import logging
from typing import Any

from fastapi import Request

from versepost.routing import ExceptionFilter

logger = logging.getLogger(__name__)


class DemoException(Exception):
    """Raised by the root route to show exception filtering."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message


class LoggingFilter(ExceptionFilter):
    """Logs a DemoException and swallows it. The client gets ``null``."""

    catches = (DemoException,)

    def catch(self, exc: BaseException, request: Request) -> Any:
        logger.error(f"{exc!r} raised by {request.method} {request.url.path}")
        return None
