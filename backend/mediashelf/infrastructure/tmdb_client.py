"""Movie Metadata Client - wraps the TMDB search, detail, credits and genre endpoints.

Invariants:
    - Every call carries the bearer read-access token; missing token -> ConfigurationError
    - search_movies / movie_credits / genre_map failures -> UpstreamAPIError
    - movie_details returns None on failure (caller decides: lazy resolution turns it into 500)
    - genre_map reads through the client's GenreCache; an empty upstream list clears the cache
    - No retries: one request per call

Design Decisions:
    - Cache owned by the client instance, not module state: one cache per configured client
    - httpx.AsyncClient with injectable transport: tests swap in httpx.MockTransport
"""

import logging
from typing import Any

import httpx

from mediashelf.core.errors import ConfigurationError, UpstreamAPIError
from mediashelf.core.genre_cache import GenreCache
from mediashelf.core.movie_transform import UNKNOWN, join_genre_names

logger = logging.getLogger(__name__)

PROVIDER = "tmdb"


class TmdbClient:
    """Async client for the movie metadata provider."""

    def __init__(
        self,
        read_access_token: str,
        base_url: str = "https://api.themoviedb.org/3",
        timeout_seconds: float = 10.0,
        genre_cache: GenreCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.read_access_token = read_access_token
        self.genre_cache = genre_cache or GenreCache()
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout_seconds, transport=transport,
        )

    def _auth_headers(self) -> dict[str, str]:
        if not self.read_access_token:
            raise ConfigurationError(
                "TMDB read access token is missing. Please configure the .env file.",
            )
        return {"Authorization": f"Bearer {self.read_access_token}"}

    async def _get_json(self, path: str, params: dict | None = None) -> dict[str, Any]:
        response = await self._client.get(
            path, params=params, headers=self._auth_headers(),
        )
        response.raise_for_status()
        return response.json() or {}

    async def search_movies(self, query: str) -> list[dict]:
        try:
            data = await self._get_json("/search/movie", {"query": query})
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"TMDB search failed: {e}", extra={"provider": PROVIDER})
            raise UpstreamAPIError(
                "Error fetching data from TMDB API", PROVIDER, details=str(e),
            )
        return data.get("results") or []

    async def movie_credits(self, tmdb_id: int) -> list[dict]:
        try:
            data = await self._get_json(f"/movie/{tmdb_id}/credits")
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                f"TMDB credits failed for movie {tmdb_id}: {e}",
                extra={"provider": PROVIDER, "tmdb_id": tmdb_id},
            )
            raise UpstreamAPIError(
                "Error fetching credits from TMDB API", PROVIDER, details=str(e),
            )
        return data.get("cast") or []

    async def movie_details(self, tmdb_id: int) -> dict | None:
        """Detail payload with credits appended, or None when the fetch fails."""
        try:
            return await self._get_json(
                f"/movie/{tmdb_id}", {"append_to_response": "credits"},
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                f"Failed to fetch movie details from TMDB: {e}",
                extra={"provider": PROVIDER, "tmdb_id": tmdb_id},
            )
            return None

    async def _fetch_genres(self) -> dict[int, str]:
        try:
            data = await self._get_json("/genre/movie/list")
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch genres from TMDB: {e}", extra={"provider": PROVIDER})
            raise UpstreamAPIError(
                "Unable to fetch genres from TMDB. Check API key or network.",
                PROVIDER, details=str(e),
            )
        genres = data.get("genres") or []
        if not genres:
            logger.warning("TMDB API returned an empty genre list.")
            self.genre_cache.clear()
            return {}
        mapping = {g["id"]: g["name"] for g in genres if "id" in g and "name" in g}
        self.genre_cache.store(mapping)
        logger.debug("Genres refreshed from TMDB")
        return mapping

    async def genre_map(self) -> dict[int, str]:
        cached = self.genre_cache.get()
        if cached is not None:
            return cached
        return await self._fetch_genres()

    async def map_genres(self, genre_ids: list[int] | str | None) -> str:
        """Comma-joined genre names; unknown or missing ids become 'Unknown'."""
        if not genre_ids:
            return UNKNOWN
        if isinstance(genre_ids, str):
            genre_ids = [int(g) for g in genre_ids.split(",") if g.strip().isdigit()]
        return join_genre_names(genre_ids, await self.genre_map())

    async def aclose(self) -> None:
        await self._client.aclose()
