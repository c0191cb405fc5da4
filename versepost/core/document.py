from __future__ import annotations

from typing import Any, ClassVar, Optional, Self

from pydantic import BaseModel, Field, model_serializer

from versepost.utils.types import DocumentData, PyObjectId


def _pluralize(name: str) -> str:
    """Naive pluralization for collection names."""
    lower = name.lower()
    if lower.endswith("s"):
        return lower + "es"
    if lower.endswith("y") and not lower.endswith(("ay", "ey", "iy", "oy", "uy")):
        return lower[:-1] + "ies"
    return lower + "s"


def collection_name_for(cls: type) -> str:
    """Collection name from an inner ``Settings.collection``, else the plural class name."""
    settings = getattr(cls, "Settings", None)
    if settings is not None and hasattr(settings, "collection"):
        return settings.collection
    return _pluralize(cls.__name__)


class Document(BaseModel):
    """Base model for documents stored in a MongoDB collection.

    Fields left as ``None`` are not written, so a stored document only
    carries the keys it was given. The id is only read from ``_id``; a plain
    ``id`` key is ordinary data.
    """

    id: Optional[PyObjectId] = Field(default=None, alias="_id")

    _collection_name: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._collection_name = collection_name_for(cls)

    def to_mongo(self) -> DocumentData:
        """Dump to a MongoDB-ready dict, keeping native ObjectIds."""
        return self.model_dump(by_alias=True, mode="python", exclude_none=True)

    @classmethod
    def from_mongo(cls, data: DocumentData) -> Self:
        return cls.model_validate(data)

    @model_serializer(mode="wrap")
    def serialize_without_none(self, handler):
        # Unset optional fields stay out of both stored and rendered documents.
        return {key: value for key, value in handler(self).items() if value is not None}
