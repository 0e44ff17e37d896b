"""
Notice Board — Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all
       tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── sample_notice:   A detached Notice ORM object
    ├── database:        Connected in-memory SQLite Database handle
    ├── db_session:      One AsyncSession on that database
    ├── app:             FastAPI app wired to `database`
    ├── test_client:     HTTPX AsyncClient for API endpoint testing
    └── api_client:      NoticeApiClient talking to `app` in-process
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from noticeboard.client import NoticeApiClient  # noqa: E402
from noticeboard.config import Settings  # noqa: E402
from noticeboard.database import Database  # noqa: E402
from noticeboard.main import create_app  # noqa: E402
from noticeboard.models.notice import Notice  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ══════════════════════════════════════════════════════════════════════════
# Mocked Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_notice(mock_db_session):
            result = MagicMock()
            result.scalar_one_or_none.return_value = notice
            mock_db_session.execute.return_value = result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_notice():
    """A Notice as the collection would return it."""
    now = datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)
    return Notice(
        id=uuid4(),
        title="Meeting",
        content="10am standup",
        created_at=now,
        updated_at=now,
    )


# ══════════════════════════════════════════════════════════════════════════
# Real Database Fixtures (in-memory SQLite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """
    A connected Database on a private in-memory SQLite store.

    Every test gets its own engine, so no data leaks between tests.
    """
    db = Database(TEST_DATABASE_URL)
    await db.connect()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def app(database):
    return create_app(
        settings=Settings(database_url=TEST_DATABASE_URL, log_level="WARNING"),
        database=database,
    )


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan; the `database` fixture has
    already connected the store.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def api_client(app):
    """NoticeApiClient pointed at the in-process app."""
    async with NoticeApiClient("http://test/api/notes", transport=ASGITransport(app=app)) as client:
        yield client
