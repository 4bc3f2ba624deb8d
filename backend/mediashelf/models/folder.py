"""Folder ORM - a typed container for file records.

Invariants:
    - type is one of FolderType (csv, img, pdf, ppt); files must share it
    - Never holds more than max_file_limit files (checked before each insert)

Design Decisions:
    - UUID primary key: folder ids are exposed in URLs and should not be guessable
"""

import uuid

from sqlalchemy import Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediashelf.db.base import Base


class Folder(Base):
    __tablename__ = "folders"

    folder_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    max_file_limit: Mapped[int] = mapped_column(Integer, nullable=False)

    files: Mapped[list["File"]] = relationship(
        "File", back_populates="folder", cascade="all, delete-orphan",
        passive_deletes=True,
    )
