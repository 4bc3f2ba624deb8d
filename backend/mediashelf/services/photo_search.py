"""Tag Search Service - photos by tag, each with its full tag list, plus best-effort history.

Invariants:
    - Tag names match case-insensitively against the set of requested names
    - No matching tag -> ResourceNotFoundError (404), never an empty 200
    - Photos ordered by date_saved (id breaks ties so equal timestamps stay stable)
    - History: at most one row per (user_id, query); written after the response is built,
      in its own session; any failure is logged and swallowed

Design Decisions:
    - Two-step read (tags -> photo ids -> photos) then one tag-name query per photo:
      the displayed tag list is the photo's full list, not just the matched names
    - record_search_history runs as a FastAPI background task with db_manager.session(),
      because the request session is already closed when the task runs
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.core.domain_types import SortOrder
from mediashelf.core.errors import InvalidInputError, ResourceNotFoundError
from mediashelf.core.validators import (
    first_error, raise_for_invalid, validate_single_tag, validate_sort_order,
    validate_user_id,
)
from mediashelf.infrastructure import database
from mediashelf.models.photo import Photo
from mediashelf.models.search_history import SearchHistory
from mediashelf.models.tag import Tag
from mediashelf.schemas.photo import serialize_search_result
from mediashelf.services.photo_library import tag_names_for

logger = logging.getLogger(__name__)


def validate_search_params(
    tags: list[str] | None, sort: str | None, user_id: str | None,
) -> None:
    """Boundary checks for the tag search query string."""
    if not tags:
        raise InvalidInputError("Tags are required.", field="tags")
    raise_for_invalid(first_error(*(validate_single_tag(t) for t in tags)), field="tags")
    raise_for_invalid(validate_sort_order(sort), field="sort")
    if user_id is not None:
        raise_for_invalid(validate_user_id(user_id), field="userId")


def history_query(tags: list[str]) -> str:
    return ",".join(t.strip() for t in tags)


async def search_photos_by_tags(
    db: AsyncSession, tags: list[str], sort_order: SortOrder = SortOrder.ASC,
) -> list[dict]:
    wanted = {t.strip().lower() for t in tags}
    tag_rows = await db.execute(
        select(Tag.photo_id).where(func.lower(Tag.name).in_(wanted)),
    )
    photo_ids = set(tag_rows.scalars().all())
    if not photo_ids:
        raise ResourceNotFoundError("Tag not found.", "Tag")

    ordering = (
        (Photo.date_saved.asc(), Photo.id.asc())
        if sort_order is SortOrder.ASC
        else (Photo.date_saved.desc(), Photo.id.desc())
    )
    result = await db.execute(
        select(Photo).where(Photo.id.in_(photo_ids)).order_by(*ordering),
    )
    photos = result.scalars().all()
    return [
        serialize_search_result(photo, await tag_names_for(db, photo.id))
        for photo in photos
    ]


async def record_search_history(user_id: int, query: str) -> None:
    """Best-effort: insert (user_id, query) unless it already exists. Never raises."""
    manager = database.get_db_manager()
    if not manager:
        logger.error("Cannot record search history: database not initialized")
        return
    try:
        async with manager.session() as db:
            existing = await db.execute(
                select(SearchHistory.id).where(
                    SearchHistory.user_id == user_id,
                    SearchHistory.query == query,
                ).limit(1),
            )
            if existing.scalar_one_or_none() is not None:
                return
            db.add(SearchHistory(user_id=user_id, query=query))
            await db.commit()
    except Exception as e:
        logger.warning(
            f"Error saving search history: {e}", extra={"user_id": user_id},
        )


async def get_search_history(db: AsyncSession, user_id: str | int | None) -> list[SearchHistory]:
    raise_for_invalid(validate_user_id(user_id), field="userId")
    result = await db.execute(
        select(SearchHistory)
        .where(SearchHistory.user_id == int(user_id))
        .order_by(SearchHistory.timestamp.desc(), SearchHistory.id.desc()),
    )
    history = list(result.scalars().all())
    if not history:
        raise ResourceNotFoundError("Search history not found.", "SearchHistory")
    return history
