"""Movie Transform - pure normalization of movie-metadata payloads into local shapes.

Invariants:
    - build_movie_fields returns None for payloads without an id or title (never a partial row)
    - Genre names joined with ", "; cast capped at CAST_LIMIT names
    - Missing optional fields default: text -> "Unknown"/"", numbers -> None
    - review_summary never returns blank text (sentinel NO_REVIEW_TEXT instead)

Design Decisions:
    - Pure functions, no HTTP: the client fetches, this module shapes (ADR: impureim sandwich)
"""

import re
import string
from typing import Any

from mediashelf.core.domain_types import CAST_LIMIT

NO_REVIEW_TEXT = "No review available."
UNKNOWN = "Unknown"

_PUNCTUATION = re.compile(f"[{re.escape(string.punctuation)}]")


def extract_year(date_str: str | None) -> int | None:
    if not date_str or len(date_str) < 4:
        return None
    try:
        return int(date_str[:4])
    except ValueError:
        return None


def director_names(credits: dict[str, Any] | None) -> list[str]:
    crew = (credits or {}).get("crew") or []
    names: list[str] = []
    for member in crew:
        name = (member or {}).get("name")
        if name and (member or {}).get("job") == "Director" and name not in names:
            names.append(name)
    return names


def cast_names(cast: list[dict] | None, limit: int = CAST_LIMIT, acting_only: bool = False) -> list[str]:
    names = []
    for person in cast or []:
        if acting_only and (person or {}).get("known_for_department") != "Acting":
            continue
        name = (person or {}).get("name")
        if name:
            names.append(name)
        if len(names) >= limit:
            break
    return names


def build_movie_fields(details: dict[str, Any] | None, cast_limit: int = CAST_LIMIT) -> dict | None:
    """Map a movie detail+credits payload to Movie column values."""
    if not isinstance(details, dict):
        return None
    tmdb_id = details.get("id")
    title = details.get("title") or details.get("original_title")
    if not tmdb_id or not title:
        return None

    credits = details.get("credits") or {}
    genres = [g.get("name") for g in details.get("genres") or [] if g and g.get("name")]
    directors = director_names(credits)
    rating = details.get("vote_average")

    return {
        "tmdb_id": tmdb_id,
        "title": title,
        "genre": ", ".join(genres) or UNKNOWN,
        "actors": ", ".join(cast_names(credits.get("cast"), cast_limit)),
        "director": ", ".join(directors) or None,
        "release_year": extract_year(details.get("release_date")),
        "rating": float(rating) if isinstance(rating, (int, float)) else None,
        "description": details.get("overview") or "",
    }


def summarize_search_result(raw: dict[str, Any], cast: list[dict], genre_names: str) -> dict:
    """Shape one provider search hit for the /movies/search response."""
    return {
        "title": raw.get("title"),
        "tmdbId": raw.get("id"),
        "genre": genre_names,
        "actors": ", ".join(cast_names(cast, acting_only=True)),
        "releaseYear": extract_year(raw.get("release_date")),
        "rating": raw.get("vote_average"),
        "description": raw.get("overview"),
    }


def join_genre_names(genre_ids: list[int] | None, genres: dict[int, str]) -> str:
    if not genre_ids:
        return UNKNOWN
    return ", ".join(genres.get(gid, UNKNOWN) for gid in genre_ids)


def word_count(text: str) -> int:
    """Whitespace-delimited tokens after punctuation is stripped."""
    return len(_PUNCTUATION.sub("", text).split())


def review_summary(review_text: str | None) -> dict:
    text = review_text if review_text and review_text.strip() else NO_REVIEW_TEXT
    return {"text": text, "wordCount": word_count(text)}
