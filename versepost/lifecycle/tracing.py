"""Timing of post operations.

A ``PostTracer`` handed to ``PostsService`` turns every list, lookup, create
and delete into one ``PostOperation``. The record names the title or page
window the caller asked for and what came back, so a slow page or a failed
delete shows up in the log in the blog's own terms.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Callable

from versepost.utils.pagination import PageWindow

logger = logging.getLogger("versepost.tracing")

Subscriber = Callable[["PostOperation"], Any]


@dataclass(frozen=True)
class PostOperation:
    """One finished call on the posts service.

    ``outcome`` is what the call produced: the number of posts listed or
    inserted, or whether a title was found or deleted.
    """

    action: str
    title: str | None = None
    window: PageWindow | None = None
    outcome: Any = None
    duration_ms: float = 0.0
    failed: bool = False

    def describe(self) -> str:
        if self.window is not None:
            target = f"page skip={self.window.skip} limit={self.window.limit}"
        elif self.title is not None:
            target = f"'{self.title}'"
        else:
            target = "all posts"
        return f"{self.action} {target}"


class PostTracer:
    """Times post operations and hands each record to subscribers.

    Args:
        slow_ms: Operations slower than this are logged at WARNING.
    """

    def __init__(self, slow_ms: float = 100.0) -> None:
        self.slow_ms = slow_ms
        self._subscribers: list[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        self._subscribers.remove(callback)

    @asynccontextmanager
    async def trace(
        self,
        action: str,
        *,
        title: str | None = None,
        window: PageWindow | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Time the enclosed call.

        Set ``"outcome"`` on the yielded dict to record what the call produced.
        An exception is recorded as a failed operation and re-raised.
        """
        result: dict[str, Any] = {"outcome": None}
        start = time.perf_counter()
        failed = False
        try:
            yield result
        except Exception:
            failed = True
            raise
        finally:
            self._publish(
                PostOperation(
                    action=action,
                    title=title,
                    window=window,
                    outcome=result["outcome"],
                    duration_ms=(time.perf_counter() - start) * 1000,
                    failed=failed,
                )
            )

    def _publish(self, operation: PostOperation) -> None:
        if operation.failed:
            logger.warning(f"{operation.describe()} failed after {operation.duration_ms:.1f}ms")
        elif operation.duration_ms > self.slow_ms:
            logger.warning(
                f"Slow {operation.describe()}: {operation.duration_ms:.1f}ms "
                f"(limit {self.slow_ms:.1f}ms)"
            )
        else:
            logger.debug(
                f"{operation.describe()} -> {operation.outcome!r} in {operation.duration_ms:.1f}ms"
            )

        for callback in self._subscribers:
            callback(operation)
