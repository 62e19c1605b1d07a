"""Create posts table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `posts` table backing the /api/posts resource.
How:   BIGINT autoincrement primary key; author, content and image_url are
       all nullable. See app/models/post.py.

Rollback: downgrade() drops the table (all posts are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            autoincrement=True,
            nullable=False,
            comment="Unique identifier assigned by the database",
        ),
        sa.Column(
            "author",
            sa.String(255),
            nullable=True,
            comment="Display name of the post author",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=True,
            comment="Post body text",
        ),
        sa.Column(
            "image_url",
            sa.String(2048),
            nullable=True,
            comment="URL of an image attached to the post",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("posts")
