"""Database session management utilities."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from .base import Base
from .session import SessionLocal, engine as _engine


@asynccontextmanager
async def get_session() -> AsyncIterator[AsyncSession]:
    """Context manager yielding a read-only async session."""

    async with SessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def get_session_dependency() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency wrapping :func:`get_session`."""

    async with get_session() as session:
        yield session


def get_engine() -> AsyncEngine:
    """Return the configured async SQLAlchemy engine."""

    return _engine


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Provide a transactional scope for seeding and test fixtures."""

    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_all() -> None:
    """Create every mapped table that does not exist yet."""

    from dashboard.backend.src import models  # noqa: F401

    async with _engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)


async def drop_all() -> None:
    """Drop every mapped table."""

    from dashboard.backend.src import models  # noqa: F401

    async with _engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)


__all__ = [
    "Base",
    "create_all",
    "drop_all",
    "get_engine",
    "get_session",
    "get_session_dependency",
    "session_scope",
]
