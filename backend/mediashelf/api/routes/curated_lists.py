"""Curated List Routes - create and rename named movie collections."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.infrastructure.database import get_db
from mediashelf.schemas.movie import CuratedListCreate, CuratedListUpdate, serialize_curated_list
from mediashelf.services.curated_lists import create_curated_list, update_curated_list

router = APIRouter(prefix="/api/curated-lists", tags=["curated-lists"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_list(body: CuratedListCreate, db: AsyncSession = Depends(get_db)):
    curated_list = await create_curated_list(db, body.name, body.description)
    return {
        "success": True,
        "message": "Curated list created successfully.",
        "data": {
            "id": curated_list.id,
            "name": curated_list.name,
            "slug": curated_list.slug,
        },
    }


@router.put("/{curated_list_id}")
async def update_list(
    curated_list_id: int, body: CuratedListUpdate, db: AsyncSession = Depends(get_db),
):
    curated_list = await update_curated_list(
        db, curated_list_id, body.name, body.description,
    )
    return {
        "message": "Curated list updated successfully.",
        "data": serialize_curated_list(curated_list),
    }
