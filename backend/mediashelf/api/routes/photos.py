"""Photo Routes - provider image search, saving photos, tagging and tag search.

Invariants:
    - Query and body validation happens before any storage or provider call
    - Tag search schedules the history write as a background task; the response never waits
      on it or fails because of it
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.api.dependencies import get_unsplash_client
from mediashelf.core.validators import parse_sort_order
from mediashelf.infrastructure.database import get_db
from mediashelf.infrastructure.unsplash_client import UnsplashClient
from mediashelf.schemas.photo import PhotoCreate, TagsAdd, serialize_photo
from mediashelf.services.photo_library import add_tags, save_photo, search_provider_images
from mediashelf.services.photo_search import (
    history_query, record_search_history, search_photos_by_tags, validate_search_params,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/photos", tags=["photos"])


@router.get("/search")
async def search_images(
    query: str | None = None,
    unsplash: UnsplashClient = Depends(get_unsplash_client),
):
    """Search the image provider; an empty result is a 200 with a message."""
    return await search_provider_images(unsplash, query)


@router.post("", status_code=status.HTTP_201_CREATED)
async def save_new_photo(body: PhotoCreate, db: AsyncSession = Depends(get_db)):
    photo = await save_photo(
        db,
        image_url=body.image_url,
        tags=body.tags,
        description=body.description,
        alt_description=body.alt_description,
        user_id=body.user_id,
    )
    return {"message": "Photo saved successfully", "photo": serialize_photo(photo)}


@router.post("/{photo_id}/tags")
async def add_tags_to_photo(
    photo_id: int, body: TagsAdd, db: AsyncSession = Depends(get_db),
):
    photo, tag_count = await add_tags(db, photo_id, body.tags)
    return {
        "message": "Tags added successfully",
        "photo": serialize_photo(photo),
        "tagCount": tag_count,
    }


@router.get("/tag/search")
async def search_photos_by_tag(
    background_tasks: BackgroundTasks,
    tags: list[str] | None = Query(None),
    sort: str | None = None,
    sort_order: str | None = Query(None, alias="sortOrder"),
    user_id: str | None = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db),
):
    """`sort` and `sortOrder` are interchangeable; `sort` wins when both are given."""
    sort = sort if sort is not None else sort_order
    validate_search_params(tags, sort, user_id)
    photos = await search_photos_by_tags(db, tags, parse_sort_order(sort))
    if user_id is not None:
        background_tasks.add_task(
            record_search_history, int(user_id), history_query(tags),
        )
    return {"photos": photos, "count": len(photos)}
