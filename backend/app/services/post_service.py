"""
Posts API — Post Service (Business Logic)
===========================================

What:  CRUD operations for the Post resource, independent of HTTP concerns.
How:   Delegates all persistence to a Repository; converts lookup misses
       into NotFoundError and returns response schemas.
Who:   Called by route handlers in app/routes/posts.py.

Operations:
    create_post   → always inserts, id assigned by storage
    list_posts    → all posts, or one zero-indexed page when page AND size given
    get_post      → single post or NotFoundError
    update_post   → overwrite author/content/imageUrl (null included)
    patch_post    → overwrite only the non-null fields supplied
    delete_post   → hard delete or NotFoundError

Update semantics are read-then-write with no locking: concurrent writers on
the same id resolve as last-write-wins in the database.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.exceptions import NotFoundError, ValidationError
from app.models.post import MAX_POST_ID, Post
from app.repositories.base import Repository
from app.repositories.post_repository import PostRepository
from app.schemas.post import PostCreate, PostPatch, PostResponse, PostUpdate

logger = logging.getLogger(__name__)


class PostService:
    """
    Business logic layer for post operations.

    Stateless apart from the repository it wraps; a new instance is built
    for every request by `get_post_service`.
    """

    def __init__(self, repository: Repository[Post]):
        self.repository = repository

    async def create_post(self, data: PostCreate) -> PostResponse:
        post = Post(**data.to_fields())
        post = await self.repository.save(post)
        logger.info("Post %s created", post.id)
        return PostResponse.model_validate(post)

    async def list_posts(
        self,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> Tuple[List[PostResponse], int]:
        """
        List posts, optionally one page at a time.

        Paging applies only when both `page` and `size` are given; with
        either one missing, every post is returned.

        Args:
            page: Zero-indexed page number (>= 0)
            size: Posts per page (1 to settings.max_page_size)

        Returns:
            (posts, total_count) where total_count counts all stored posts

        Raises:
            ValidationError: page or size out of bounds (→ 400)
        """
        if page is not None and size is not None:
            self._validate_page_bounds(page, size)
            posts = await self.repository.find_page(page, size)
        else:
            posts = await self.repository.find_all()

        total_count = await self.repository.count()
        return [PostResponse.model_validate(post) for post in posts], total_count

    async def get_post(self, post_id: int) -> PostResponse:
        post = await self._get_existing(post_id)
        return PostResponse.model_validate(post)

    async def update_post(self, post_id: int, data: PostUpdate) -> PostResponse:
        """Full update: every field is replaced, omitted fields become null."""
        post = await self._get_existing(post_id)
        return await self._apply(post, data.to_fields())

    async def patch_post(self, post_id: int, data: PostPatch) -> PostResponse:
        """Partial update: only non-null fields in the request are replaced."""
        post = await self._get_existing(post_id)
        return await self._apply(post, data.to_fields())

    async def delete_post(self, post_id: int) -> None:
        await self._get_existing(post_id)
        await self.repository.delete_by_id(post_id)
        logger.info("Post %s deleted", post_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get_existing(self, post_id: int) -> Post:
        # Ids outside the key column's range cannot exist; the driver would reject them
        if post_id < 1 or post_id > MAX_POST_ID:
            logger.debug("Post id %s is outside the storable range", post_id)
            raise NotFoundError(resource="post", resource_id=post_id)

        post = await self.repository.find_by_id(post_id)
        if post is None:
            logger.debug("Post %s not found", post_id)
            raise NotFoundError(resource="post", resource_id=post_id)
        return post

    async def _apply(self, post: Post, fields: Dict[str, Any]) -> PostResponse:
        for name, value in fields.items():
            setattr(post, name, value)
        post = await self.repository.save(post)
        logger.info("Post %s updated: %s", post.id, ", ".join(sorted(fields)) or "no fields")
        return PostResponse.model_validate(post)

    @staticmethod
    def _validate_page_bounds(page: int, size: int) -> None:
        if page < 0:
            raise ValidationError(
                message="Query parameter 'page' must be zero or greater",
                field="page",
                context={"value": page},
            )
        if size < 1 or size > settings.max_page_size:
            raise ValidationError(
                message=(
                    f"Query parameter 'size' must be between 1 and {settings.max_page_size}"
                ),
                field="size",
                context={"value": size},
            )
        if page * size > MAX_POST_ID:
            raise ValidationError(
                message="Query parameter 'page' is too large for the requested page size",
                field="page",
                context={"value": page, "size": size},
            )


def get_post_service(db: AsyncSession = Depends(get_db_session)) -> PostService:
    """FastAPI dependency: a PostService bound to the request's session."""
    return PostService(PostRepository(db))
