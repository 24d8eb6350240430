"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL, and
the translation of driver failures into the domain StorageError.
"""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from devsocial.config import Settings
from devsocial.domain.error import StorageError

P = ParamSpec("P")
R = TypeVar("R")


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
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


def storage_errors(
    method: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Translate database failures of a repository method into StorageError.

    IntegrityError passes through untouched: services read it as a
    uniqueness conflict.
    """

    @functools.wraps(method)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await method(*args, **kwargs)
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            logfire.error(
                "Storage failure", operation=method.__qualname__, error=str(e)
            )
            raise StorageError(f"Storage failure in {method.__qualname__}") from e

    return wrapper
