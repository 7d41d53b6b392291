"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL, and the
translation of connectivity failures into ``StoreUnavailableError``.
"""

import functools
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from typing import AsyncGenerator, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stampcard.config import Settings
from stampcard.domain.error import StoreUnavailableError

P = ParamSpec("P")
R = TypeVar("R")

# Failures that mean the store could not be reached or did not answer in time
STORE_FAILURES = (OperationalError, InterfaceError, PoolTimeoutError, OSError)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        pool_timeout=settings.database.pool_timeout,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session with automatic cleanup.

    Args:
        session_factory: Factory for creating sessions

    Yields:
        Database session
    """
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


def translate_store_errors(
    method: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Re-raise connectivity failures of a repository method as StoreUnavailableError.

    Integrity errors and programming errors pass through unchanged.
    """

    @functools.wraps(method)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await method(*args, **kwargs)
        except STORE_FAILURES as e:
            logfire.error(
                "Store unavailable",
                operation=method.__qualname__,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreUnavailableError(method.__qualname__) from e

    return wrapper
