"""Curated List Service - create and update named movie collections.

Invariants:
    - name and description are required (trimmed) on create
    - Slug is derived from the name plus a random suffix; an existing slug -> ConflictError (409)
    - Renaming regenerates the slug under the same uniqueness rule
    - An update may omit description but never blank it
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.core.errors import ConflictError, ResourceNotFoundError
from mediashelf.core.slugs import generate_slug
from mediashelf.core.validators import (
    missing_fields, raise_for_invalid, validate_required_text,
)
from mediashelf.models.curated_list import CuratedList

logger = logging.getLogger(__name__)

SLUG_TAKEN = "Slug already exists. Please use a unique slug."


async def _ensure_slug_free(db: AsyncSession, slug: str) -> None:
    result = await db.execute(select(CuratedList.id).where(CuratedList.slug == slug))
    if result.scalar_one_or_none() is not None:
        raise ConflictError(SLUG_TAKEN)


async def create_curated_list(
    db: AsyncSession, name: str | None, description: str | None,
) -> CuratedList:
    name = name.strip() if isinstance(name, str) else name
    description = description.strip() if isinstance(description, str) else description
    raise_for_invalid(missing_fields(name=name, description=description))

    slug = generate_slug(name)
    await _ensure_slug_free(db, slug)

    curated_list = CuratedList(name=name, description=description, slug=slug)
    db.add(curated_list)
    await db.commit()
    await db.refresh(curated_list)
    logger.info(f"Curated list created: {slug}")
    return curated_list


async def update_curated_list(
    db: AsyncSession, curated_list_id: int, name: str | None, description: str | None,
) -> CuratedList:
    curated_list = await db.get(CuratedList, curated_list_id)
    if curated_list is None:
        raise ResourceNotFoundError("Curated list not found", "CuratedList")
    if description is not None:
        raise_for_invalid(
            validate_required_text(description, "Description"), field="description",
        )

    if name and name.strip():
        curated_list.name = name.strip()
        slug = generate_slug(curated_list.name)
        await _ensure_slug_free(db, slug)
        curated_list.slug = slug
    if description is not None:
        curated_list.description = description.strip()

    await db.commit()
    await db.refresh(curated_list)
    return curated_list
