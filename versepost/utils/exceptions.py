class VersepostError(Exception):
    """Base exception for all versepost errors."""


class NotConnected(VersepostError):
    """Raised when a store is used before its connection is opened."""


class InvalidURI(VersepostError, ValueError):
    """Raised when a MongoDB URI cannot be parsed into a database name."""


class UploadError(VersepostError):
    """Raised when an uploaded file cannot be written to disk."""
