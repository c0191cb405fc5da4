from __future__ import annotations

from typing import Any, Generic, TypeVar

from pymongo import ASCENDING, DESCENDING
from pymongo.asynchronous.collection import AsyncCollection

from versepost.utils.types import FilterSpec, SortSpec, merge_filters

T = TypeVar("T")


class QuerySet(Generic[T]):
    """Lazy, immutable query over one collection.

    Chainable methods return a new QuerySet; nothing runs until a terminal
    method is awaited.
    """

    def __init__(
        self,
        collection: AsyncCollection,
        document_class: type[T],
        filter: FilterSpec | None = None,
        sort: SortSpec | None = None,
        skip_count: int = 0,
        limit_count: int = 0,
    ) -> None:
        self._collection = collection
        self._document_class = document_class
        self._filter: FilterSpec = filter or {}
        self._sort: SortSpec = sort or []
        self._skip_count = skip_count
        self._limit_count = limit_count

    def _clone(self, **overrides: Any) -> QuerySet[T]:
        state = {
            "collection": self._collection,
            "document_class": self._document_class,
            "filter": self._filter.copy(),
            "sort": self._sort.copy(),
            "skip_count": self._skip_count,
            "limit_count": self._limit_count,
        }
        state.update(overrides)
        return QuerySet(**state)

    # --- Chainable methods ---

    def filter(self, _filter: FilterSpec | None = None, **kwargs: Any) -> QuerySet[T]:
        return self._clone(filter=merge_filters({**self._filter, **(_filter or {})}, **kwargs))

    def sort(self, *fields: str) -> QuerySet[T]:
        """Set sort order. Prefix with '-' for descending.

        Example: .sort("-dynasty", "title")
        """
        sort_spec: SortSpec = []
        for field in fields:
            if field.startswith("-"):
                sort_spec.append((field[1:], DESCENDING))
            else:
                sort_spec.append((field, ASCENDING))
        return self._clone(sort=sort_spec)

    def skip(self, n: int) -> QuerySet[T]:
        return self._clone(skip_count=n)

    def limit(self, n: int) -> QuerySet[T]:
        """Cap the result size. MongoDB treats 0 as no limit."""
        return self._clone(limit_count=n)

    # --- Terminal methods ---

    async def all(self) -> list[T]:
        """Execute the query and return all matching documents."""
        return [self._document_class.from_mongo(raw) async for raw in self._build_cursor()]

    async def first(self) -> T | None:
        results = await self.limit(1).all()
        return results[0] if results else None

    async def count(self) -> int:
        return await self._collection.count_documents(self._filter)

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        async for raw in self._build_cursor():
            yield self._document_class.from_mongo(raw)

    # --- Internal ---

    def _build_cursor(self):
        # A non-zero skip goes straight to the driver, which rejects negatives.
        cursor = self._collection.find(self._filter)
        if self._sort:
            cursor = cursor.sort(self._sort)
        if self._skip_count:
            cursor = cursor.skip(self._skip_count)
        if self._limit_count:
            cursor = cursor.limit(self._limit_count)
        return cursor
