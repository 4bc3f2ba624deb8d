"""Document Manager Schemas - folder and file record bodies."""

from pydantic import BaseModel, ConfigDict, Field

from mediashelf.models.file import File
from mediashelf.models.folder import Folder


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class FolderCreate(_CamelModel):
    name: str | None = None
    type: str | None = None
    max_file_limit: int | None = Field(None, alias="maxFileLimit")


class FolderUpdate(_CamelModel):
    name: str | None = None
    max_file_limit: int | None = Field(None, alias="maxFileLimit")


class FileCreate(_CamelModel):
    name: str | None = None
    type: str | None = None
    size: int | None = None
    description: str | None = Field(None, max_length=5000)


def serialize_folder(folder: Folder, file_count: int | None = None) -> dict:
    data = {
        "folderId": str(folder.folder_id),
        "name": folder.name,
        "type": folder.type,
        "maxFileLimit": folder.max_file_limit,
    }
    if file_count is not None:
        data["fileCount"] = file_count
    return data


def serialize_file(file: File) -> dict:
    return {
        "fileId": str(file.file_id),
        "folderId": str(file.folder_id),
        "name": file.name,
        "description": file.description,
        "type": file.type,
        "size": file.size,
        "uploadedAt": file.uploaded_at.isoformat() if file.uploaded_at else None,
    }
