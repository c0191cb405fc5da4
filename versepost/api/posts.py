from __future__ import annotations

from typing import Annotated, Any, Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from versepost.api.deps import get_posts_service
from versepost.integrations.fastapi import create_schema
from versepost.models.post import Post
from versepost.services.posts import PostsService
from versepost.utils.pagination import PageWindow, page_window

router = APIRouter(prefix="/posts", tags=["posts"])

PostCreate = create_schema(Post)

PostsServiceDep = Annotated[PostsService, Depends(get_posts_service)]


class PostDetail(BaseModel):
    data: Optional[Post] = None


class CreateResult(BaseModel):
    status: bool
    userid: str


class UpdateEcho(BaseModel):
    id: str
    data: dict[str, Any]


def page_params(
    request: Request,
    page_number: Annotated[Optional[int], Query(alias="pageNumber")] = None,
    page_size: Annotated[Optional[int], Query(alias="pageSize")] = None,
) -> PageWindow | None:
    """Skip/limit window from ``pageNumber``/``pageSize``; None when no page was asked for."""
    if page_number is None:
        return None
    return page_window(
        page_number,
        page_size,
        default_size=request.app.state.settings.default_page_size,
    )


@router.get("", response_model=list[Post], summary="List posts")
async def list_posts(
    service: PostsServiceDep,
    window: Annotated[Optional[PageWindow], Depends(page_params)],
):
    """All posts, or one page of them when ``pageNumber`` is given.

    ``pageSize`` defaults to 20. A ``pageSize`` of 0 means no limit, and a
    ``pageNumber`` below 1 gives a negative skip that the driver rejects.
    """
    return await service.list_posts(window)


@router.get("/{title}", response_model=PostDetail, summary="Get a post")
async def get_post(title: str, service: PostsServiceDep):
    return PostDetail(data=await service.get_post(title))


@router.post("/{userid}", response_model=CreateResult, summary="Create a post")
async def create_post(userid: str, body: PostCreate, service: PostsServiceDep):
    return await service.create_post(body.model_dump(exclude_unset=True), userid)


@router.put("/{id}", response_model=UpdateEcho, summary="Edit a post")
async def update_post(id: str, body: PostCreate):
    # Echo only: nothing is written.
    return {"id": id, "data": body.model_dump(exclude_unset=True)}


@router.delete("/{title}", response_model=bool, summary="Delete a post")
async def delete_post(title: str, service: PostsServiceDep):
    return await service.delete_post(title)
