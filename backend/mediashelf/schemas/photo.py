"""Photo Library Schemas - Pydantic request bodies and response serializers.

Invariants:
    - Wire format is camelCase (imageUrl, altDescription, userId); attributes are snake_case
    - Bodies only check shape and types; field rules run in core/validators.py afterwards

Design Decisions:
    - Optional fields default to None so "missing" reaches the validators and gets their
      human-readable message instead of a generic type error
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mediashelf.models.photo import Photo
from mediashelf.models.search_history import SearchHistory
from mediashelf.models.user import User


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserCreate(_CamelModel):
    username: str | None = None
    email: str | None = None


class PhotoCreate(_CamelModel):
    image_url: str | None = Field(None, alias="imageUrl")
    description: str | None = Field(None, max_length=1000)
    alt_description: str | None = Field(None, alias="altDescription", max_length=1000)
    tags: list[str] | None = None
    user_id: int | None = Field(None, alias="userId", gt=0)


class TagsAdd(_CamelModel):
    tags: list[str] | None = None


def serialize_user(user: User) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "createdAt": _iso(user.created_at),
    }


def serialize_photo(photo: Photo) -> dict:
    return {
        "id": photo.id,
        "imageUrl": photo.image_url,
        "description": photo.description,
        "altDescription": photo.alt_description,
        "dateSaved": _iso(photo.date_saved),
        "userId": photo.user_id,
    }


def serialize_search_result(photo: Photo, tag_names: list[str]) -> dict:
    return {
        "imageUrl": photo.image_url,
        "description": photo.description,
        "dateSaved": _iso(photo.date_saved),
        "tags": tag_names,
    }


def serialize_history(entry: SearchHistory) -> dict:
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "query": entry.query,
        "timestamp": _iso(entry.timestamp),
    }


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
