from __future__ import annotations

from fastapi import Request

from versepost.services.person import PersonService
from versepost.services.posts import PostsService
from versepost.services.uploads import UploadService
from versepost.utils.exceptions import NotConnected


def get_posts_service(request: Request) -> PostsService:
    service = getattr(request.app.state, "posts_service", None)
    if service is None:
        raise NotConnected("Posts service is not available; the database connection was never opened")
    return service


def get_person_service(request: Request) -> PersonService:
    return request.app.state.person_service


def get_upload_service(request: Request) -> UploadService:
    return request.app.state.upload_service
