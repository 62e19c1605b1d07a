"""Post repository."""

from app.models.post import Post
from app.repositories.base import SQLAlchemyRepository


class PostRepository(SQLAlchemyRepository[Post]):
    """Repository for the `posts` table."""

    model = Post
