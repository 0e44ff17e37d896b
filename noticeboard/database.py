"""
Notice Board — Database Handle & Session Management
=====================================================

What:  The process-wide store handle (`Database`), the declarative `Base`,
       and the FastAPI dependency that hands each request its own session.
How:   `Database.connect()` builds the async engine and session factory,
       pings the store and creates missing tables. The application lifespan
       calls it once and keeps the handle on `app.state.database`; request
       handlers receive sessions through `get_db_session`, never through a
       module-level global.
Who:   Created by main.py's lifespan; consumed by routes via Depends().

Connection Pooling:
    PostgreSQL (asyncpg): pool_size / max_overflow / pre_ping from settings,
    connections recycled every hour.
    SQLite (aiosqlite):   a single StaticPool connection so that an in-memory
    database is shared by every session of the process.
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from noticeboard.config import Settings
from noticeboard.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


class Database:
    """
    Explicit handle on the notice store.

    Lifecycle:
        1. Database(url, ...): nothing is opened yet
        2. await connect()   : engine created, store pinged, tables created;
                                raises StoreUnavailableError if unreachable
        3. session_factory() : one AsyncSession per request
        4. await dispose()   : pooled connections closed at shutdown
    """

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_pre_ping: bool = True,
        echo: bool = False,
    ):
        self.url = url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_pre_ping = pool_pre_ping
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            echo=settings.log_level == "DEBUG",
        )

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self._session_factory

    def _engine_options(self) -> dict:
        if self.url.startswith("sqlite"):
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_pre_ping": self.pool_pre_ping,
            "pool_recycle": 3600,
        }

    async def connect(self) -> None:
        """
        Open the engine, verify the store answers, and create missing tables.

        Raises:
            StoreUnavailableError: the store could not be reached or the
                schema could not be created. The engine is disposed first.
        """
        # Register ORM models with Base.metadata before create_all
        from noticeboard.models import notice  # noqa: F401

        engine = create_async_engine(self.url, echo=self.echo, **self._engine_options())
        try:
            async with engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            await engine.dispose()
            logger.error("Notice store unreachable at startup: %s", type(e).__name__)
            raise StoreUnavailableError(
                error=str(e),
                context={"error_type": type(e).__name__},
            ) from e

        self._engine = engine
        # expire_on_commit=False: returned ORM objects stay readable after commit
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Connected to notice store (%s)", engine.url.get_backend_name())

    async def ping(self) -> bool:
        """Lightweight liveness probe used by the health endpoint."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError, RuntimeError) as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close every pooled connection. Safe to call when not connected."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connections closed")


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Takes the Database handle from app.state
        2. Yields a fresh session to the route handler
        3. On error: rolls back, then re-raises for the global handlers
        4. Always: closes the session (returns the connection to the pool)

    The teardown runs after the response has been sent, so it never commits:
    NoticeService commits each write before building its response, and a
    failed commit becomes a 500. Anything left uncommitted is rolled back
    when the session closes.
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
