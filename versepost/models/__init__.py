from versepost.models.person import PersonCreate, PersonUpdate
from versepost.models.post import Post

__all__ = ["Post", "PersonCreate", "PersonUpdate"]
