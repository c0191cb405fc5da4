from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pymongo.asynchronous.collection import AsyncCollection

from versepost.core.document import Document
from versepost.core.queryset import QuerySet
from versepost.utils.types import FilterSpec, merge_filters

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Document)


class DocumentStore(Generic[D]):
    """Typed access to the collection backing one Document class.

    Args:
        collection: The collection handle, normally ``connection.collection(...)``.
        document_class: Model used to load raw documents.
    """

    def __init__(self, collection: AsyncCollection, document_class: type[D]) -> None:
        self.collection = collection
        self.document_class = document_class

    @classmethod
    def for_document(cls, connection: Any, document_class: type[D]) -> DocumentStore[D]:
        """Bind a store to the document class's collection on an open connection."""
        return cls(connection.collection(document_class._collection_name), document_class)

    @property
    def name(self) -> str:
        return self.collection.name

    def find(self, filter: FilterSpec | None = None, **kwargs: Any) -> QuerySet[D]:
        """Return a lazy QuerySet; no filter means every document."""
        return QuerySet(self.collection, self.document_class, merge_filters(filter, **kwargs))

    async def find_one(self, filter: FilterSpec | None = None, **kwargs: Any) -> D | None:
        filter = merge_filters(filter, **kwargs)
        data = await self.collection.find_one(filter)
        if data is None:
            return None
        return self.document_class.from_mongo(data)

    async def insert_many(self, documents: list[D]) -> list[Any]:
        """Bulk insert; assigns and returns the new ids."""
        payload = [doc.to_mongo() for doc in documents]
        result = await self.collection.insert_many(payload)
        for doc, inserted_id in zip(documents, result.inserted_ids):
            doc.id = inserted_id
        logger.debug(f"Inserted {len(result.inserted_ids)} document(s) into '{self.name}'")
        return list(result.inserted_ids)

    async def find_one_and_delete(self, filter: FilterSpec | None = None, **kwargs: Any) -> D | None:
        """Remove the first match and return it, or None if nothing matched."""
        filter = merge_filters(filter, **kwargs)
        data = await self.collection.find_one_and_delete(filter)
        if data is None:
            return None
        logger.debug(f"Deleted document {data.get('_id')} from '{self.name}'")
        return self.document_class.from_mongo(data)

    async def count(self, filter: FilterSpec | None = None, **kwargs: Any) -> int:
        return await self.find(filter, **kwargs).count()
