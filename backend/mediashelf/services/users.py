"""User Service - signup with the one storage-backed uniqueness check (email)."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.core.errors import ConflictError
from mediashelf.core.validators import (
    first_error, raise_for_invalid, validate_email, validate_username,
)
from mediashelf.models.user import User

logger = logging.getLogger(__name__)


async def email_exists(db: AsyncSession, email: str) -> bool:
    result = await db.execute(select(User.id).where(User.email == email))
    return result.scalar_one_or_none() is not None


async def create_user(db: AsyncSession, username: str | None, email: str | None) -> User:
    raise_for_invalid(first_error(
        validate_username(username), validate_email(email),
    ))
    if await email_exists(db, email):
        raise ConflictError("Email already exists.")

    user = User(username=username, email=email)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("User created", extra={"user_id": user.id})
    return user
