from __future__ import annotations

import logging
import re
from typing import Any, Callable

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from versepost.utils.exceptions import InvalidURI, NotConnected

logger = logging.getLogger(__name__)

_DB_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


class Connection:
    """A MongoDB client handle opened and closed explicitly.

    The database name is taken from the URI path. ``client_factory`` builds
    the client from the URI and defaults to ``AsyncMongoClient``.
    """

    def __init__(
        self,
        uri: str,
        *,
        client_factory: Callable[[str], Any] = AsyncMongoClient,
    ) -> None:
        self.uri = uri
        self.db_name = extract_db_name(uri)
        self._client_factory = client_factory
        self._client: Any = None
        self._database: AsyncDatabase | None = None

    @property
    def is_open(self) -> bool:
        return self._database is not None

    async def open(self) -> AsyncDatabase:
        """Create the client and bind the database. Idempotent."""
        if self._database is not None:
            return self._database

        logger.info(f"Connecting to MongoDB database '{self.db_name}'")
        try:
            client = self._client_factory(self.uri)
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise
        self._client = client
        self._database = client[self.db_name]
        logger.info(f"Connected to database '{self.db_name}'")
        return self._database

    async def close(self) -> None:
        """Close the client. Closing a closed connection is a no-op."""
        client, self._client, self._database = self._client, None, None
        if client is not None:
            await client.close()
            logger.info(f"Disconnected from MongoDB database '{self.db_name}'")

    @property
    def database(self) -> AsyncDatabase:
        if self._database is None:
            raise NotConnected(
                f"Connection to '{self.db_name}' is not open. Call open() first."
            )
        return self._database

    def collection(self, name: str) -> AsyncCollection:
        return self.database[name]


def extract_db_name(uri: str) -> str:
    """Extract the database name from a MongoDB URI.

    Raises:
        InvalidURI: If the URI is empty, has no database path, or the name
            contains characters MongoDB does not allow.
    """
    if not uri:
        raise InvalidURI("MongoDB URI cannot be empty")

    path = uri.split("?")[0]
    head, _, db_name = path.rpartition("/")

    if not db_name or head.endswith("/"):
        raise InvalidURI(
            "Cannot extract database name from URI. "
            "Expected format: mongodb://host:port/database"
        )

    if not _DB_NAME_RE.match(db_name):
        raise InvalidURI(
            f"Invalid database name '{db_name}'. "
            "Database names can only contain letters, numbers, underscores, and hyphens."
        )

    logger.debug(f"Extracted database name: {db_name}")
    return db_name
