"""Database handle with async SQLAlchemy.

Handles:
- Engine and connection pool lifetime
- Session management (commit on success, rollback on error)
- Schema creation for development/testing
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from person_registry.settings import Settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


def _is_sqlite_memory(url: str) -> bool:
    parsed = make_url(url)
    return parsed.database in (None, "", ":memory:") or parsed.query.get("mode") == "memory"


def _engine_options(url: str, echo: bool) -> dict[str, Any]:
    """Pool options per backend.

    In-memory SQLite shares a single connection so the database survives across sessions.
    File-backed SQLite keeps the default pool: one connection per session.
    """
    if url.startswith("sqlite"):
        options: dict[str, Any] = {"echo": echo, "connect_args": {"check_same_thread": False}}
        if _is_sqlite_memory(url):
            options["poolclass"] = StaticPool
        return options
    return {
        "echo": echo,
        "pool_size": 5,
        "max_overflow": 10,
        "pool_pre_ping": True,
    }


class Database:
    """Owns the engine and session factory for one process lifetime.

    Usage:
        database = Database.from_settings(settings)
        async with database.session() as session:
            result = await session.execute(query)
        await database.dispose()
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.engine: AsyncEngine = create_async_engine(url, **_engine_options(url, echo))
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        return cls(settings.async_database_url, echo=settings.debug)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session context manager; commits when the block exits cleanly."""
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> None:
        """Round-trip a trivial query to validate connectivity."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create all tables (for development/testing only)."""
        # Register models on Base.metadata before create_all.
        import person_registry.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        """Drop all tables (for testing only)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        """Close the connection pool."""
        await self.engine.dispose()
