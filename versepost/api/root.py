from __future__ import annotations

from fastapi import APIRouter

from versepost.filters import DemoException, LoggingFilter
from versepost.routing import get_with_filter, register_routes


@get_with_filter("/", LoggingFilter(), tags=["default"], summary="Hello")
async def get_hello():
    raise DemoException("1", "2")


router = register_routes(APIRouter(), [get_hello])
