from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 20


@dataclass(frozen=True)
class PageWindow:
    """Skip/limit window over a result set."""

    skip: int
    limit: int


def page_window(page_number: int, page_size: int | None = None, *, default_size: int = DEFAULT_PAGE_SIZE) -> PageWindow:
    """Compute the skip/limit window for a 1-based page number.

    An absent ``page_size`` falls back to ``default_size``; an explicit ``0``
    is kept as is. Neither argument is range checked, so a page number below
    1 yields a negative skip.
    """
    if page_size is None:
        page_size = default_size
    return PageWindow(skip=page_size * (page_number - 1), limit=page_size)
