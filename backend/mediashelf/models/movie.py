"""Movie ORM - local copy of a movie first referenced by a list or review.

Invariants:
    - tmdb_id is unique: one local row per external movie
    - Created lazily from the metadata provider, never from client-supplied fields
    - genre/actors/director are comma-joined names (substring search targets)
    - rating is nullable; the top-5 leaderboard skips null ratings

Design Decisions:
    - Denormalized comma-joined text over genre/person tables: the only queries are
      case-insensitive substring filters (ADR: keep the schema flat)
    - cascade delete for every membership and review row
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediashelf.db.base import Base


class Movie(Base):
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tmdb_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    genre: Mapped[str | None] = mapped_column(Text, nullable=True)
    actors: Mapped[str | None] = mapped_column(Text, nullable=True)
    director: Mapped[str | None] = mapped_column(Text, nullable=True)
    release_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    reviews: Mapped[list["Review"]] = relationship(
        "Review", back_populates="movie", cascade="all, delete-orphan",
        order_by="Review.id",
    )
    watchlist_entries: Mapped[list["Watchlist"]] = relationship(
        "Watchlist", back_populates="movie", cascade="all, delete-orphan",
    )
    wishlist_entries: Mapped[list["Wishlist"]] = relationship(
        "Wishlist", back_populates="movie", cascade="all, delete-orphan",
    )
    curated_list_items: Mapped[list["CuratedListItem"]] = relationship(
        "CuratedListItem", back_populates="movie", cascade="all, delete-orphan",
    )
