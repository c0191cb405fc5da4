from versepost.utils.exceptions import (
    VersepostError,
    NotConnected,
    InvalidURI,
    UploadError,
)
from versepost.utils.pagination import PageWindow, page_window, DEFAULT_PAGE_SIZE
from versepost.utils.types import (
    DocumentData,
    FilterSpec,
    SortSpec,
    PyObjectId,
    merge_filters,
)

__all__ = [
    "VersepostError",
    "NotConnected",
    "InvalidURI",
    "UploadError",
    "PageWindow",
    "page_window",
    "DEFAULT_PAGE_SIZE",
    "DocumentData",
    "FilterSpec",
    "SortSpec",
    "PyObjectId",
    "merge_filters",
]
