from versepost.core import (
    Connection,
    Document,
    DocumentStore,
    QuerySet,
)
from versepost.models import Post, PersonCreate, PersonUpdate
from versepost.services import PersonService, PostsService, UploadService
from versepost.routing import ExceptionFilter, RouteSpec, get_with_filter, register_routes
from versepost.filters import DemoException, LoggingFilter
from versepost.lifecycle import PostOperation, PostTracer
from versepost.utils import (
    VersepostError,
    NotConnected,
    InvalidURI,
    UploadError,
    PageWindow,
    page_window,
)

__all__ = [
    # Core
    "Connection",
    "Document",
    "DocumentStore",
    "QuerySet",
    # Models
    "Post",
    "PersonCreate",
    "PersonUpdate",
    # Services
    "PersonService",
    "PostsService",
    "UploadService",
    # Routing
    "ExceptionFilter",
    "RouteSpec",
    "get_with_filter",
    "register_routes",
    "DemoException",
    "LoggingFilter",
    # Lifecycle
    "PostOperation",
    "PostTracer",
    # Utils
    "VersepostError",
    "NotConnected",
    "InvalidURI",
    "UploadError",
    "PageWindow",
    "page_window",
]
