"""Review Service - attach a rated review to a movie already stored locally."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.core.errors import ResourceNotFoundError
from mediashelf.core.validators import (
    first_error, raise_for_invalid, validate_rating, validate_review_text,
)
from mediashelf.models.review import Review
from mediashelf.services.movie_resolver import find_movie

logger = logging.getLogger(__name__)


async def add_review(
    db: AsyncSession, tmdb_id: int, rating: float | None, review_text: str | None,
) -> Review:
    raise_for_invalid(first_error(
        validate_rating(rating), validate_review_text(review_text),
    ))
    movie = await find_movie(db, tmdb_id)
    if movie is None:
        raise ResourceNotFoundError("Movie not found.", "Movie")

    review = Review(movie_id=movie.id, rating=rating, review_text=review_text)
    db.add(review)
    await db.commit()
    await db.refresh(review)
    logger.info("Review added", extra={"tmdb_id": tmdb_id})
    return review
