"""Document Manager Routes - folders and the file records they hold.

Invariants:
    - Folder and file ids are UUIDs; a malformed id fails request validation (400)
    - DELETE returns 204 with no body
"""

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.infrastructure.database import get_db
from mediashelf.schemas.document import (
    FileCreate, FolderCreate, FolderUpdate, serialize_file, serialize_folder,
)
from mediashelf.services import documents

router = APIRouter(prefix="/api/folders", tags=["folders"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_folder(body: FolderCreate, db: AsyncSession = Depends(get_db)):
    folder = await documents.create_folder(db, body.name, body.type, body.max_file_limit)
    return {"message": "Folder created successfully.", "folder": serialize_folder(folder, 0)}


@router.get("")
async def list_folders(db: AsyncSession = Depends(get_db)):
    rows = await documents.list_folders(db)
    return {"folders": [serialize_folder(folder, count) for folder, count in rows]}


@router.put("/{folder_id}")
async def update_folder(
    folder_id: uuid.UUID, body: FolderUpdate, db: AsyncSession = Depends(get_db),
):
    folder = await documents.update_folder(db, folder_id, body.name, body.max_file_limit)
    return {"message": "Folder updated successfully.", "folder": serialize_folder(folder)}


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_folder(folder_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    await documents.delete_folder(db, folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{folder_id}/files", status_code=status.HTTP_201_CREATED)
async def upload_file(
    folder_id: uuid.UUID, body: FileCreate, db: AsyncSession = Depends(get_db),
):
    record = await documents.add_file(
        db, folder_id, body.name, body.type, body.size, body.description,
    )
    return {"message": "File uploaded successfully.", "file": serialize_file(record)}


@router.get("/{folder_id}/files")
async def list_files(
    folder_id: uuid.UUID, sort: str | None = None, db: AsyncSession = Depends(get_db),
):
    files = await documents.list_files(db, folder_id, sort)
    return {"files": [serialize_file(f) for f in files]}


@router.delete("/{folder_id}/files/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
    folder_id: uuid.UUID, file_id: uuid.UUID, db: AsyncSession = Depends(get_db),
):
    await documents.delete_file(db, folder_id, file_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
