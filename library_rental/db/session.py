"""
Database session management.

WHY: Services flush but never commit. The unit of work around them is
owned by whoever calls them, through session_scope().
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from library_rental.core.config import settings
from library_rental.models.base import Base


def build_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create an async engine.

    Args:
        database_url: Async database URL (defaults to settings)

    Returns:
        AsyncEngine bound to the URL
    """
    return create_async_engine(
        database_url or settings.async_database_url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create a session factory for the engine.

    expire_on_commit=False keeps loaded reservations readable after commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine()
AsyncSessionLocal = build_session_factory(engine)


async def create_schema(bind: Optional[AsyncEngine] = None) -> None:
    """Create all tables registered on Base.metadata."""
    import library_rental.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def session_scope(
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a transactional scope around a series of operations.

    Commits when the block exits normally and rolls back when it raises.

    Args:
        session_factory: Factory to open the session with (defaults to AsyncSessionLocal)

    Yields:
        AsyncSession: Database session for the unit of work
    """
    factory = session_factory or AsyncSessionLocal
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
