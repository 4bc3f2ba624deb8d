"""Movie curation - movies, watchlists, wishlists, curated lists, reviews.

Revision ID: 002_movie_curation
Revises: 001_photo_library
Create Date: 2026-10-14

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_movie_curation"
down_revision: Union[str, None] = "001_photo_library"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _movie_fk() -> sa.Column:
    return sa.Column(
        "movie_id", sa.Integer,
        sa.ForeignKey("movies.id", ondelete="CASCADE"), nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "movies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("tmdb_id", sa.Integer, nullable=False, unique=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("genre", sa.Text, nullable=True),
        sa.Column("actors", sa.Text, nullable=True),
        sa.Column("director", sa.Text, nullable=True),
        sa.Column("release_year", sa.Integer, nullable=True),
        sa.Column("rating", sa.Float, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    for table in ("watchlists", "wishlists"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
            _movie_fk(),
            sa.Column("added_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )

    op.create_table(
        "curated_lists",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(300), nullable=False, unique=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "curated_list_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "curated_list_id", sa.Integer,
            sa.ForeignKey("curated_lists.id", ondelete="CASCADE"), nullable=False,
        ),
        _movie_fk(),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _movie_fk(),
        sa.Column("rating", sa.Float, nullable=False),
        sa.Column("review_text", sa.String(500), nullable=False),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("reviews")
    op.drop_table("curated_list_items")
    op.drop_table("curated_lists")
    op.drop_table("wishlists")
    op.drop_table("watchlists")
    op.drop_table("movies")
