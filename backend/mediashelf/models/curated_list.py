"""CuratedList ORM - a named, slugged collection of movies.

Invariants:
    - slug is unique (checked at creation -> 409, enforced by the table)
    - Renaming regenerates the slug

Design Decisions:
    - Items modelled as CuratedListItem rows rather than a secondary table so each
      membership carries its own added_at
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediashelf.db.base import Base


class CuratedList(Base):
    __tablename__ = "curated_lists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(300), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    items: Mapped[list["CuratedListItem"]] = relationship(
        "CuratedListItem", back_populates="curated_list",
        cascade="all, delete-orphan",
    )
