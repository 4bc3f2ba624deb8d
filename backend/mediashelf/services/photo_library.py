"""Photo Library Service - saving provider images and attaching tags.

Invariants:
    - A photo is saved with 1..5 tags; one Tag row per name
    - Tag attachment never pushes a photo past 5 tags or introduces a
      case-insensitive duplicate; on rejection no Tag row is written
    - Save: URL and tags (400) -> owning user exists when given (404)
    - Order of checks: body shape -> photo exists (404) -> combined count/duplicates (400)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.core.errors import InvalidInputError, ResourceNotFoundError
from mediashelf.core.validators import (
    first_error, raise_for_invalid, validate_image_url, validate_tag_count,
    validate_tags, validate_tags_array,
)
from mediashelf.infrastructure.unsplash_client import UnsplashClient
from mediashelf.models.photo import Photo
from mediashelf.models.tag import Tag
from mediashelf.models.user import User

logger = logging.getLogger(__name__)

NO_IMAGES_MESSAGE = "No images found for the given query."


async def search_provider_images(unsplash: UnsplashClient, query: str | None) -> dict:
    if not query or not query.strip():
        raise InvalidInputError("Query parameter is required.", field="query")
    photos = await unsplash.search_photos(query)
    if not photos:
        return {"message": NO_IMAGES_MESSAGE}
    return {"photos": photos}


async def save_photo(
    db: AsyncSession,
    image_url: str | None,
    tags: list[str] | None,
    description: str | None = None,
    alt_description: str | None = None,
    user_id: int | None = None,
) -> Photo:
    raise_for_invalid(first_error(
        validate_image_url(image_url), validate_tags(tags),
    ))
    if user_id is not None and await db.get(User, user_id) is None:
        raise ResourceNotFoundError("User not found.", "User")
    photo = Photo(
        image_url=image_url,
        description=description,
        alt_description=alt_description,
        user_id=user_id,
    )
    db.add(photo)
    await db.flush()
    for name in tags:
        db.add(Tag(name=name.strip(), photo_id=photo.id))
    await db.commit()
    await db.refresh(photo)
    logger.info("Photo saved", extra={"photo_id": photo.id, "user_id": user_id})
    return photo


async def get_photo_or_404(db: AsyncSession, photo_id: int) -> Photo:
    photo = await db.get(Photo, photo_id)
    if photo is None:
        raise ResourceNotFoundError("Photo not found.", "Photo")
    return photo


async def tag_names_for(db: AsyncSession, photo_id: int) -> list[str]:
    result = await db.execute(
        select(Tag.name).where(Tag.photo_id == photo_id).order_by(Tag.id),
    )
    return list(result.scalars().all())


async def add_tags(db: AsyncSession, photo_id: int, tags: list[str] | None) -> tuple[Photo, int]:
    """Append tags to an existing photo. Returns the photo and its new tag count."""
    raise_for_invalid(validate_tags_array(tags), field="tags")
    photo = await get_photo_or_404(db, photo_id)
    existing = await tag_names_for(db, photo.id)
    raise_for_invalid(validate_tag_count(existing, tags), field="tags")

    for name in tags:
        db.add(Tag(name=name.strip(), photo_id=photo.id))
    await db.commit()
    return photo, len(existing) + len(tags)
