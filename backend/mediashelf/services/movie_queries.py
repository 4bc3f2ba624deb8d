"""Movie Queries - provider search, multi-field filtering, list sorting and the top-5 board.

Invariants:
    - Every query parameter is validated before the first storage or provider call
    - Filter search: empty string != absent; no match -> empty list with a message, never 404
    - Sort and filter by list use member_filter() from movie_lists
    - Top-5 skips null ratings; ties keep storage order (id ascending as the stable key)
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from mediashelf.core.domain_types import ListType, MovieSortKey, SortOrder, TOP_MOVIES_LIMIT
from mediashelf.core.errors import InvalidInputError, UpstreamAPIError
from mediashelf.core.movie_transform import review_summary, summarize_search_result
from mediashelf.core.validators import (
    raise_for_invalid, validate_movie_filters, validate_sort_params,
)
from mediashelf.infrastructure.tmdb_client import TmdbClient
from mediashelf.models.movie import Movie
from mediashelf.services.movie_lists import member_filter

logger = logging.getLogger(__name__)

NO_MATCHES_MESSAGE = "No movies found matching the specified filters."

_SORT_COLUMNS = {
    MovieSortKey.RATING: Movie.rating,
    MovieSortKey.RELEASE_YEAR: Movie.release_year,
}


async def search_provider_movies(tmdb: TmdbClient, query: str | None) -> list[dict]:
    """Provider search; a hit whose credits cannot be fetched is dropped, not fatal."""
    if not query or not query.strip():
        raise InvalidInputError("Search query is required", field="query")

    results = await tmdb.search_movies(query)
    if not results:
        return []
    # one genre fetch per cold cache; the per-hit map_genres calls read it
    await tmdb.genre_map()

    async def _summarize(raw: dict) -> dict | None:
        try:
            cast = await tmdb.movie_credits(raw["id"])
        except UpstreamAPIError as e:
            logger.warning(
                f"Error fetching credits for movie ID {raw.get('id')}: {e.message}",
                extra={"tmdb_id": raw.get("id")},
            )
            return None
        return summarize_search_result(
            raw, cast, await tmdb.map_genres(raw.get("genre_ids")),
        )

    summaries = await asyncio.gather(*(_summarize(r) for r in results))
    return [s for s in summaries if s is not None]


async def search_movies_by_filters(
    db: AsyncSession,
    genre: str | None = None,
    actor: str | None = None,
    director: str | None = None,
    list_type: str | None = None,
) -> list[Movie]:
    raise_for_invalid(validate_movie_filters(genre, actor, director, list_type))

    query = select(Movie)
    if genre:
        query = query.where(Movie.genre.ilike(f"%{genre.strip()}%"))
    if actor:
        query = query.where(Movie.actors.ilike(f"%{actor.strip()}%"))
    if director:
        query = query.where(Movie.director.ilike(f"%{director.strip()}%"))
    if list_type:
        query = query.where(member_filter(ListType(list_type)))

    result = await db.execute(query.order_by(Movie.id))
    return list(result.scalars().all())


async def sort_movies(
    db: AsyncSession, list_type: str | None, sort_by: str | None, order: str | None = None,
) -> list[Movie]:
    raise_for_invalid(validate_sort_params(list_type, sort_by, order))
    column = _SORT_COLUMNS[MovieSortKey(sort_by)]
    direction = SortOrder(order or SortOrder.ASC.value)
    ordering = column.asc() if direction is SortOrder.ASC else column.desc()

    result = await db.execute(
        select(Movie)
        .where(member_filter(ListType(list_type)))
        .order_by(ordering, Movie.id),
    )
    return list(result.scalars().all())


async def top_rated_movies(db: AsyncSession, limit: int = TOP_MOVIES_LIMIT) -> list[dict]:
    result = await db.execute(
        select(Movie)
        .where(Movie.rating.is_not(None))
        .order_by(Movie.rating.desc(), Movie.id)
        .limit(limit)
        .options(selectinload(Movie.reviews)),
    )
    board = []
    for movie in result.scalars().all():
        first_review = movie.reviews[0].review_text if movie.reviews else None
        board.append({
            "title": movie.title,
            "rating": movie.rating,
            "review": review_summary(first_review),
        })
    return board
