"""Movie Curation Schemas - request bodies for list membership, reviews and curated lists."""

from pydantic import BaseModel, ConfigDict, Field

from mediashelf.models.curated_list import CuratedList
from mediashelf.models.movie import Movie


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MovieListAdd(_CamelModel):
    """Body for watchlist/wishlist adds: the external (TMDB) movie id."""
    movie_id: int | None = Field(None, alias="movieId")


class CuratedListAdd(MovieListAdd):
    curated_list_id: int | None = Field(None, alias="curatedListId")


class ReviewCreate(_CamelModel):
    rating: float | None = None
    review_text: str | None = Field(None, alias="reviewText")


class CuratedListCreate(_CamelModel):
    name: str | None = None
    description: str | None = None


class CuratedListUpdate(_CamelModel):
    name: str | None = None
    description: str | None = None


def serialize_movie(movie: Movie) -> dict:
    return {
        "id": movie.id,
        "title": movie.title,
        "tmdbId": movie.tmdb_id,
        "genre": movie.genre,
        "actors": movie.actors,
        "director": movie.director,
        "releaseYear": movie.release_year,
        "rating": movie.rating,
        "description": movie.description,
        "createdAt": movie.created_at.isoformat() if movie.created_at else None,
    }


def serialize_sorted_movie(movie: Movie) -> dict:
    return {
        "title": movie.title,
        "tmdbId": movie.tmdb_id,
        "genre": movie.genre,
        "actors": movie.actors,
        "releaseYear": movie.release_year,
        "rating": movie.rating,
    }


def serialize_curated_list(curated_list: CuratedList) -> dict:
    return {
        "id": curated_list.id,
        "name": curated_list.name,
        "slug": curated_list.slug,
        "description": curated_list.description,
    }
