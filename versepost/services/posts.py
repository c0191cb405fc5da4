from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Any

from versepost.core.store import DocumentStore
from versepost.lifecycle.tracing import PostTracer
from versepost.models.post import Post
from versepost.utils.pagination import PageWindow

logger = logging.getLogger(__name__)


class PostsService:
    """Post operations over a ``DocumentStore[Post]``.

    Lookups by title return ``None``/``False`` on a miss instead of raising.
    Titles are not unique; lookups and deletes act on the first match.
    When a ``tracer`` is given, every call is timed and recorded there.
    """

    def __init__(self, store: DocumentStore[Post], tracer: PostTracer | None = None) -> None:
        self.store = store
        self.tracer = tracer

    def _trace(self, action: str, **target: Any):
        if self.tracer is None:
            return nullcontext({"outcome": None})
        return self.tracer.trace(action, **target)

    async def list_posts(self, window: PageWindow | None = None) -> list[Post]:
        async with self._trace("list_posts", window=window) as result:
            query = self.store.find()
            if window is not None:
                query = query.skip(window.skip).limit(window.limit)
            posts = await query.all()
            result["outcome"] = len(posts)
        return posts

    async def get_post(self, title: str) -> Post | None:
        async with self._trace("get_post", title=title) as result:
            post = await self.store.find_one(title=title)
            result["outcome"] = post is not None
        return post

    async def create_post(self, record: Post | dict[str, Any], owner_id: str) -> dict[str, Any]:
        """Insert one post and report whether anything was stored.

        ``owner_id`` is echoed back only; it is neither stored nor checked.
        A ``_id`` key in a plain dict is dropped, since the id is assigned on
        insert.
        """
        if not isinstance(record, Post):
            record = Post.model_validate({key: value for key, value in record.items() if key != "_id"})
        async with self._trace("create_post", title=record.title) as result:
            inserted = await self.store.insert_many([record])
            result["outcome"] = len(inserted)
        logger.info(f"Created post '{record.title}' for user '{owner_id}'")
        return {"status": len(inserted) > 0, "userid": owner_id}

    async def delete_post(self, title: str) -> bool:
        async with self._trace("delete_post", title=title) as result:
            removed = await self.store.find_one_and_delete(title=title)
            result["outcome"] = removed is not None
        if removed is None:
            logger.debug(f"No post titled '{title}' to delete")
            return False
        logger.info(f"Deleted post '{title}'")
        return True
