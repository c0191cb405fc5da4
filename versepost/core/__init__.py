from versepost.core.connection import Connection, extract_db_name
from versepost.core.document import Document
from versepost.core.queryset import QuerySet
from versepost.core.store import DocumentStore

__all__ = [
    "Connection",
    "extract_db_name",
    "Document",
    "QuerySet",
    "DocumentStore",
]
