"""Root conftest - shared test configuration."""

import os

# Ensure tests never reach real provider accounts or a real database
os.environ.setdefault("UNSPLASH_ACCESS_KEY", "test-unsplash-key")
os.environ.setdefault("TMDB_READ_ACCESS_TOKEN", "test-tmdb-token")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
