"""User Routes - signup."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.infrastructure.database import get_db
from mediashelf.schemas.photo import UserCreate, serialize_user
from mediashelf.services.users import create_user

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_new_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    user = await create_user(db, body.username, body.email)
    return {"message": "User created successfully", "user": serialize_user(user)}
