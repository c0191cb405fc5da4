from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field

from versepost.core.document import Document


class Post(Document):
    """A poem stored in the ``posts`` collection.

    ``content`` belongs to plain blog posts; the remaining fields describe a
    classical poem. Keys beyond the declared ones are kept as sent.
    """

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = Field(default=None, description="Title")
    content: Optional[str] = Field(default=None, description="Body text")
    notes: Optional[list[str]] = Field(default=None, description="Tags")
    paragraphs: Optional[list[str]] = Field(default=None, description="Lines of verse")
    dynasty: Optional[str] = Field(default=None, description="Dynasty")
    author: Optional[str] = Field(default=None, description="Author")

    class Settings:
        collection = "posts"
