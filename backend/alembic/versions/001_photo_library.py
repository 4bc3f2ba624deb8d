"""Photo library - users, photos, tags, search_histories.

Revision ID: 001_photo_library
Revises: None
Create Date: 2026-10-12

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_photo_library"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "photos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("image_url", sa.String(2048), nullable=False),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("alt_description", sa.String(1000), nullable=True),
        sa.Column("date_saved", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=True,
        ),
    )

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(20), nullable=False),
        sa.Column(
            "photo_id", sa.Integer,
            sa.ForeignKey("photos.id", ondelete="CASCADE"), nullable=False,
        ),
    )
    op.create_index("ix_tags_name", "tags", ["name"])
    op.create_index("ix_tags_photo_id", "tags", ["photo_id"])

    op.create_table(
        "search_histories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("query", sa.String(255), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_search_histories_user_id", "search_histories", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_search_histories_user_id", "search_histories")
    op.drop_table("search_histories")
    op.drop_index("ix_tags_photo_id", "tags")
    op.drop_index("ix_tags_name", "tags")
    op.drop_table("tags")
    op.drop_table("photos")
    op.drop_table("users")
