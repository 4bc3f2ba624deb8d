"""Service test fixtures - async DB, FastAPI test client and mocked provider APIs.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use test DB sessions (same error mapping as production)
    - db_manager patched for background tasks that bypass get_db
    - Provider clients are real UnsplashClient/TmdbClient instances over httpx.MockTransport

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Mock at the HTTP transport boundary: URL building, auth headers and payload
      normalization are exercised, only the network is fake
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import mediashelf.infrastructure.database as db_module
from mediashelf.api.dependencies import get_tmdb_client, get_unsplash_client
from mediashelf.core.genre_cache import GenreCache
from mediashelf.db.base import Base
from mediashelf.infrastructure.database import (
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
from mediashelf.infrastructure.tmdb_client import TmdbClient
from mediashelf.infrastructure.unsplash_client import UnsplashClient
from mediashelf.main import app
import mediashelf.models  # noqa: F401
from tests.services.mock_providers import FakeTmdbApi, FakeUnsplashApi


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def tmdb_api():
    return FakeTmdbApi()


@pytest.fixture
def unsplash_api():
    return FakeUnsplashApi()


@pytest.fixture
async def tmdb_client(tmdb_api):
    client = TmdbClient(
        read_access_token="test-tmdb-token",
        base_url="https://api.themoviedb.test/3",
        genre_cache=GenreCache(ttl_seconds=3600),
        transport=httpx.MockTransport(tmdb_api.handler),
    )
    yield client
    await client.aclose()


@pytest.fixture
async def unsplash_client(unsplash_api):
    client = UnsplashClient(
        access_key="test-unsplash-key",
        base_url="https://api.unsplash.test",
        transport=httpx.MockTransport(unsplash_api.handler),
    )
    yield client
    await client.aclose()


@pytest.fixture
async def client(test_engine, test_session_factory, tmdb_client, unsplash_client):
    """FastAPI test client with DB and provider dependencies overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_tmdb_client] = lambda: tmdb_client
    app.dependency_overrides[get_unsplash_client] = lambda: unsplash_client

    # Patch db_manager for background tasks that use it directly
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager