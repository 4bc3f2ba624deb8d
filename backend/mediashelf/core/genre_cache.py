"""Genre Cache - time-boxed {genre_id: name} mapping for the movie metadata provider.

Invariants:
    - get() returns None when empty or older than ttl_seconds (caller refreshes)
    - Clock is injected: tests advance time without sleeping
    - No lock: concurrent misses may both refresh upstream (harmless duplicate fetch)

Design Decisions:
    - Explicit object owned by TmdbClient instead of module-level globals
"""

import time
from typing import Callable


class GenreCache:
    """Read-through cache slot with an explicit TTL."""

    def __init__(
        self,
        ttl_seconds: float = 24 * 60 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._genres: dict[int, str] = {}
        self._fetched_at: float | None = None

    def get(self) -> dict[int, str] | None:
        if not self._genres or self._fetched_at is None:
            return None
        if self._clock() - self._fetched_at > self.ttl_seconds:
            return None
        return self._genres

    def store(self, genres: dict[int, str]) -> None:
        self._genres = dict(genres)
        self._fetched_at = self._clock()

    def clear(self) -> None:
        self._genres = {}
        self._fetched_at = None

    @property
    def is_fresh(self) -> bool:
        return self.get() is not None
