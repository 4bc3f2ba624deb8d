"""Photo ORM - an image saved from the image search provider.

Invariants:
    - image_url is non-nullable (validated as an Unsplash HTTPS URL before insert)
    - date_saved defaults to now; tag search orders by it
    - Owns at most 5 Tags (enforced at write time by the tag services, not the schema)

Design Decisions:
    - cascade delete for tags: a tag never outlives its photo
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediashelf.db.base import Base


class Photo(Base):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    image_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    alt_description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    date_saved: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True,
    )

    user: Mapped["User | None"] = relationship("User", back_populates="photos")
    tags: Mapped[list["Tag"]] = relationship(
        "Tag", back_populates="photo", cascade="all, delete-orphan",
        passive_deletes=True,
    )
