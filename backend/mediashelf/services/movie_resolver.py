"""Movie Lazy Resolution - make sure a local Movie row exists for an external id.

Invariants:
    - Lookup by tmdb_id first; the provider is called only on a miss
    - Provider miss or malformed payload -> UpstreamAPIError (500), no Movie row written
    - The stored tmdb_id is the requested id, so the next lookup hits

Design Decisions:
    - Commit right after creating the Movie: the follow-up membership insert is a
      separate step with no enclosing transaction (a crash in between leaves the
      Movie without its membership, which the next call simply reuses)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.core.errors import UpstreamAPIError
from mediashelf.core.movie_transform import build_movie_fields
from mediashelf.infrastructure.tmdb_client import PROVIDER, TmdbClient
from mediashelf.models.movie import Movie

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch movie details from TMDB."


async def find_movie(db: AsyncSession, tmdb_id: int) -> Movie | None:
    result = await db.execute(select(Movie).where(Movie.tmdb_id == tmdb_id))
    return result.scalar_one_or_none()


async def ensure_movie(db: AsyncSession, tmdb: TmdbClient, tmdb_id: int) -> Movie:
    movie = await find_movie(db, tmdb_id)
    if movie is not None:
        return movie

    fields = build_movie_fields(await tmdb.movie_details(tmdb_id))
    if fields is None:
        raise UpstreamAPIError(FETCH_FAILED, PROVIDER)
    fields["tmdb_id"] = tmdb_id

    movie = Movie(**fields)
    db.add(movie)
    await db.commit()
    await db.refresh(movie)
    logger.info("Movie resolved from TMDB", extra={"tmdb_id": tmdb_id})
    return movie
