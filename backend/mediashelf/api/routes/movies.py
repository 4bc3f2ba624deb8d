"""Movie Routes - provider search, list membership, reviews, filtering, sorting, top-5.

Invariants:
    - List adds resolve the local Movie row lazily from the provider before inserting membership
    - Filter search with no matches returns 200 with an empty list and a message
    - Static paths (/search, /sort, /top5, /searchByGenreAndActor) never collide with
      /{movie_id}/reviews: the latter only accepts POST
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.api.dependencies import get_tmdb_client
from mediashelf.core.domain_types import ListType
from mediashelf.infrastructure.database import get_db
from mediashelf.infrastructure.tmdb_client import TmdbClient
from mediashelf.schemas.movie import (
    CuratedListAdd, MovieListAdd, ReviewCreate, serialize_movie, serialize_sorted_movie,
)
from mediashelf.services.movie_lists import add_movie_to_list, added_message
from mediashelf.services.movie_queries import (
    NO_MATCHES_MESSAGE, search_movies_by_filters, search_provider_movies, sort_movies,
    top_rated_movies,
)
from mediashelf.services.reviews import add_review

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("/search")
async def search_movies(
    query: str | None = None,
    tmdb: TmdbClient = Depends(get_tmdb_client),
):
    return {"movies": await search_provider_movies(tmdb, query)}


@router.post("/watchlist")
async def add_to_watchlist(
    body: MovieListAdd,
    db: AsyncSession = Depends(get_db),
    tmdb: TmdbClient = Depends(get_tmdb_client),
):
    await add_movie_to_list(db, tmdb, ListType.WATCHLIST, body.movie_id)
    return {"message": added_message(ListType.WATCHLIST)}


@router.post("/wishlist")
async def add_to_wishlist(
    body: MovieListAdd,
    db: AsyncSession = Depends(get_db),
    tmdb: TmdbClient = Depends(get_tmdb_client),
):
    await add_movie_to_list(db, tmdb, ListType.WISHLIST, body.movie_id)
    return {"message": added_message(ListType.WISHLIST)}


@router.post("/curated-list")
async def add_to_curated_list(
    body: CuratedListAdd,
    db: AsyncSession = Depends(get_db),
    tmdb: TmdbClient = Depends(get_tmdb_client),
):
    await add_movie_to_list(
        db, tmdb, ListType.CURATED_LIST, body.movie_id, body.curated_list_id,
    )
    return {"message": added_message(ListType.CURATED_LIST)}


@router.post("/{movie_id}/reviews", status_code=status.HTTP_201_CREATED)
async def add_movie_review(
    movie_id: int, body: ReviewCreate, db: AsyncSession = Depends(get_db),
):
    """movie_id is the provider id; the movie must already be stored locally."""
    await add_review(db, movie_id, body.rating, body.review_text)
    return {"message": "Review added successfully."}


@router.get("/searchByGenreAndActor")
async def search_by_genre_and_actor(
    genre: str | None = None,
    actor: str | None = None,
    director: str | None = None,
    list_type: str | None = Query(None, alias="listType"),
    db: AsyncSession = Depends(get_db),
):
    movies = await search_movies_by_filters(db, genre, actor, director, list_type)
    if not movies:
        return {"message": NO_MATCHES_MESSAGE, "movies": []}
    return {"movies": [serialize_movie(m) for m in movies]}


@router.get("/sort")
async def sort_movie_list(
    list_type: str | None = Query(None, alias="list"),
    sort_by: str | None = Query(None, alias="sortBy"),
    order: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    movies = await sort_movies(db, list_type, sort_by, order)
    return {"movies": [serialize_sorted_movie(m) for m in movies]}


@router.get("/top5")
async def top_five(db: AsyncSession = Depends(get_db)):
    return {"movies": await top_rated_movies(db)}
