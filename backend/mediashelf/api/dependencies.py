"""Provider Dependencies - shared external API clients for route injection.

Invariants:
    - One UnsplashClient and one TmdbClient per process (lazily built from settings)
    - The TmdbClient owns the genre cache, so the cache lives as long as the client
    - Tests replace these via app.dependency_overrides

Design Decisions:
    - Module-level lazy singletons, closed by the lifespan on shutdown
"""

import logging

from mediashelf.config import get_settings
from mediashelf.core.genre_cache import GenreCache
from mediashelf.infrastructure.tmdb_client import TmdbClient
from mediashelf.infrastructure.unsplash_client import UnsplashClient

logger = logging.getLogger(__name__)

_unsplash_client: UnsplashClient | None = None
_tmdb_client: TmdbClient | None = None


def get_unsplash_client() -> UnsplashClient:
    global _unsplash_client
    if _unsplash_client is None:
        settings = get_settings()
        _unsplash_client = UnsplashClient(
            access_key=settings.unsplash_access_key,
            base_url=settings.unsplash_base_url,
            timeout_seconds=settings.http_timeout_seconds,
        )
    return _unsplash_client


def get_tmdb_client() -> TmdbClient:
    global _tmdb_client
    if _tmdb_client is None:
        settings = get_settings()
        _tmdb_client = TmdbClient(
            read_access_token=settings.tmdb_read_access_token,
            base_url=settings.tmdb_base_url,
            timeout_seconds=settings.http_timeout_seconds,
            genre_cache=GenreCache(ttl_seconds=settings.genre_cache_ttl_seconds),
        )
    return _tmdb_client


async def close_provider_clients() -> None:
    global _unsplash_client, _tmdb_client
    for client in (_unsplash_client, _tmdb_client):
        if client is not None:
            await client.aclose()
    _unsplash_client = None
    _tmdb_client = None
