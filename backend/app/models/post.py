"""
Posts API — Post SQLAlchemy Model
===================================

What:  ORM model representing the `posts` table.
Who:   Used by PostRepository for CRUD operations and by Alembic for schema management.

Table Design:
    - BIGINT autoincrement primary key, assigned by the database on insert
      (plain INTEGER on SQLite, which only autoincrements INTEGER PRIMARY KEY)
    - author / content / image_url: all nullable, no validation beyond presence
    - No timestamps, no soft-delete flag: deletes are hard removals
"""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# Largest id a signed 64-bit primary key can hold
MAX_POST_ID = 2**63 - 1


class Post(Base):
    """
    A single social post.

    Lifecycle:
        1. Inserted by PostService.create_post (database assigns `id`)
        2. Fields replaced in place by full or partial update (`id` never changes)
        3. Removed by PostService.delete_post (no tombstone)
    """

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier assigned by the database",
    )

    author: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Display name of the post author",
    )

    content: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Post body text",
    )

    image_url: Mapped[str | None] = mapped_column(
        String(2048),
        nullable=True,
        default=None,
        comment="URL of an image attached to the post",
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Post(id={self.id}, author='{self.author}')>"
