"""Document Manager Service - typed folders holding a bounded number of file records.

Invariants:
    - Folder type is one of FolderType; every file in a folder has the folder's type
    - File count never exceeds max_file_limit; the limit cannot drop below the current count
    - File size is a positive integer (bytes)
    - Deleting a folder cascades to its files
"""

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.core.domain_types import SortOrder
from mediashelf.core.errors import InvalidInputError, ResourceNotFoundError
from mediashelf.core.validators import (
    first_error, parse_sort_order, raise_for_invalid, validate_folder_type,
    validate_positive_int, validate_required_text, validate_sort_order,
)
from mediashelf.models.file import File
from mediashelf.models.folder import Folder

logger = logging.getLogger(__name__)


async def get_folder_or_404(db: AsyncSession, folder_id: uuid.UUID) -> Folder:
    folder = await db.get(Folder, folder_id)
    if folder is None:
        raise ResourceNotFoundError("Folder not found.", "Folder")
    return folder


async def count_files(db: AsyncSession, folder_id: uuid.UUID) -> int:
    result = await db.execute(
        select(func.count(File.file_id)).where(File.folder_id == folder_id),
    )
    return result.scalar_one()


async def create_folder(
    db: AsyncSession, name: str | None, folder_type: str | None, max_file_limit: int | None,
) -> Folder:
    raise_for_invalid(first_error(
        validate_required_text(name, "Folder name"),
        validate_folder_type(folder_type),
        validate_positive_int(max_file_limit, "maxFileLimit"),
    ))
    folder = Folder(name=name.strip(), type=folder_type, max_file_limit=max_file_limit)
    db.add(folder)
    await db.commit()
    await db.refresh(folder)
    logger.info(f"Folder created: {folder.folder_id}")
    return folder


async def list_folders(db: AsyncSession) -> list[tuple[Folder, int]]:
    result = await db.execute(
        select(Folder, func.count(File.file_id))
        .outerjoin(File, File.folder_id == Folder.folder_id)
        .group_by(Folder.folder_id)
        .order_by(Folder.name),
    )
    return [(folder, count) for folder, count in result.all()]


async def update_folder(
    db: AsyncSession,
    folder_id: uuid.UUID,
    name: str | None = None,
    max_file_limit: int | None = None,
) -> Folder:
    folder = await get_folder_or_404(db, folder_id)
    if name is not None:
        raise_for_invalid(validate_required_text(name, "Folder name"), field="name")
        folder.name = name.strip()
    if max_file_limit is not None:
        raise_for_invalid(
            validate_positive_int(max_file_limit, "maxFileLimit"), field="maxFileLimit",
        )
        current = await count_files(db, folder.folder_id)
        if max_file_limit < current:
            raise InvalidInputError(
                f"maxFileLimit cannot be lower than the current file count ({current}).",
                field="maxFileLimit",
            )
        folder.max_file_limit = max_file_limit
    await db.commit()
    await db.refresh(folder)
    return folder


async def delete_folder(db: AsyncSession, folder_id: uuid.UUID) -> None:
    folder = await get_folder_or_404(db, folder_id)
    await db.delete(folder)
    await db.commit()
    logger.info(f"Folder deleted: {folder_id}")


async def add_file(
    db: AsyncSession,
    folder_id: uuid.UUID,
    name: str | None,
    file_type: str | None,
    size: int | None,
    description: str | None = None,
) -> File:
    raise_for_invalid(first_error(
        validate_required_text(name, "File name"),
        validate_folder_type(file_type),
        validate_positive_int(size, "size"),
    ))
    folder = await get_folder_or_404(db, folder_id)
    if file_type != folder.type:
        raise InvalidInputError(
            f"File type must match folder type '{folder.type}'.", field="type",
        )
    if await count_files(db, folder.folder_id) >= folder.max_file_limit:
        raise InvalidInputError(
            f"Folder has reached its file limit of {folder.max_file_limit}.",
        )

    record = File(
        folder_id=folder.folder_id,
        name=name.strip(),
        type=file_type,
        size=size,
        description=description,
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


async def list_files(
    db: AsyncSession, folder_id: uuid.UUID, sort: str | None = None,
) -> list[File]:
    raise_for_invalid(validate_sort_order(sort), field="sort")
    await get_folder_or_404(db, folder_id)
    column = File.uploaded_at
    ordering = column.asc() if parse_sort_order(sort) is SortOrder.ASC else column.desc()
    result = await db.execute(
        select(File).where(File.folder_id == folder_id).order_by(ordering, File.name),
    )
    return list(result.scalars().all())


async def delete_file(db: AsyncSession, folder_id: uuid.UUID, file_id: uuid.UUID) -> None:
    result = await db.execute(
        select(File).where(File.file_id == file_id, File.folder_id == folder_id),
    )
    record = result.scalar_one_or_none()
    if record is None:
        raise ResourceNotFoundError("File not found.", "File")
    await db.delete(record)
    await db.commit()
