from versepost.services.person import PersonService
from versepost.services.posts import PostsService
from versepost.services.uploads import UploadService

__all__ = ["PersonService", "PostsService", "UploadService"]
