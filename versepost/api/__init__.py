from versepost.api import person, posts, root

ROUTERS = (root.router, posts.router, person.router)

__all__ = ["ROUTERS"]
