"""Async database engine and session factory for the policy parameter store.

Uses SQLAlchemy 2.0 async with the asyncpg driver. The engine is created on
first use so importing this module never opens a connection.
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncGenerator
from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from rules_engine.config import settings


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide async engine built from settings."""
    return create_async_engine(
        settings.db.database_url,
        echo=settings.log_level == "DEBUG",
        pool_size=settings.db.pool_size,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


@lru_cache(maxsize=1)
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


@contextlib.asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session; commit on success, roll back on error.

    Usage:
        async with session_scope() as db:
            engine = EligibilityEngine(SqlPolicyRepository(db))
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def close_db() -> None:
    """Dispose the engine's connection pool."""
    await get_engine().dispose()
