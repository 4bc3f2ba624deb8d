"""CuratedListItem ORM - membership of one Movie in one CuratedList."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediashelf.db.base import Base


class CuratedListItem(Base):
    __tablename__ = "curated_list_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    curated_list_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("curated_lists.id", ondelete="CASCADE"), nullable=False,
    )
    movie_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("movies.id", ondelete="CASCADE"), nullable=False,
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    curated_list: Mapped["CuratedList"] = relationship(
        "CuratedList", back_populates="items",
    )
    movie: Mapped["Movie"] = relationship(
        "Movie", back_populates="curated_list_items",
    )
