"""Movie List Membership - watchlist, wishlist and curated-list entries.

Invariants:
    - ListType is a closed enum; LIST_HANDLERS maps every member to its model and label
    - A movie is in a given list at most once: duplicate -> ConflictError (409)
    - For curated lists the membership key is (movie, curated list); the list must exist
    - The Movie row is resolved lazily before the membership check

Design Decisions:
    - Handler table over a chain of if/elif on strings (ADR: unknown list types rejected at
      the boundary, never looked up dynamically)
    - member_filter() shared with the search and sort queries so "is in list X" means
      the same thing everywhere
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mediashelf.core.domain_types import ListType
from mediashelf.core.errors import ConflictError, InvalidInputError, ResourceNotFoundError
from mediashelf.core.validators import raise_for_invalid, validate_movie_id
from mediashelf.infrastructure.tmdb_client import TmdbClient
from mediashelf.models.curated_list import CuratedList
from mediashelf.models.curated_list_item import CuratedListItem
from mediashelf.models.movie import Movie
from mediashelf.models.watchlist import Watchlist
from mediashelf.models.wishlist import Wishlist
from mediashelf.services.movie_resolver import ensure_movie

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListHandler:
    model: type
    label: str


LIST_HANDLERS: dict[ListType, ListHandler] = {
    ListType.WATCHLIST: ListHandler(Watchlist, "watchlist"),
    ListType.WISHLIST: ListHandler(Wishlist, "wishlist"),
    ListType.CURATED_LIST: ListHandler(CuratedListItem, "curated list"),
}


def member_filter(list_type: ListType):
    """WHERE clause: Movie is a member of any list of this type."""
    model = LIST_HANDLERS[list_type].model
    return Movie.id.in_(select(model.movie_id))


async def _get_curated_list(db: AsyncSession, curated_list_id: int | None) -> CuratedList:
    if curated_list_id is None:
        raise InvalidInputError("Curated list ID is required.", field="curatedListId")
    curated_list = await db.get(CuratedList, curated_list_id)
    if curated_list is None:
        raise ResourceNotFoundError("Curated list not found.", "CuratedList")
    return curated_list


async def add_movie_to_list(
    db: AsyncSession,
    tmdb: TmdbClient,
    list_type: ListType,
    tmdb_id: int | None,
    curated_list_id: int | None = None,
) -> Movie:
    handler = LIST_HANDLERS[list_type]
    raise_for_invalid(validate_movie_id(tmdb_id), field="movieId")
    if list_type is ListType.CURATED_LIST:
        await _get_curated_list(db, curated_list_id)

    movie = await ensure_movie(db, tmdb, tmdb_id)

    membership = {"movie_id": movie.id}
    if list_type is ListType.CURATED_LIST:
        membership["curated_list_id"] = curated_list_id
    query = select(handler.model.id).filter_by(**membership).limit(1)
    if (await db.execute(query)).scalar_one_or_none() is not None:
        raise ConflictError(f"Movie is already in the {handler.label}.")

    db.add(handler.model(**membership))
    await db.commit()
    logger.info(
        f"Movie added to {handler.label}",
        extra={"tmdb_id": tmdb_id, "list_type": list_type.value},
    )
    return movie


def added_message(list_type: ListType) -> str:
    return f"Movie added to {LIST_HANDLERS[list_type].label} successfully."
