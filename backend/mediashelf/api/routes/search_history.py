"""Search History Routes - a user's past tag searches, newest first."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.infrastructure.database import get_db
from mediashelf.schemas.photo import serialize_history
from mediashelf.services.photo_search import get_search_history

router = APIRouter(prefix="/api/search-history", tags=["search-history"])


@router.get("")
async def list_search_history(
    user_id: str | None = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db),
):
    history = await get_search_history(db, user_id)
    return {"searchHistory": [serialize_history(h) for h in history]}
