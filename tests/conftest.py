"""
Pytest configuration and fixtures.

WHY: Fixtures provide reusable test setup/teardown logic, so every test
starts from an empty schema.
"""

import pytest
import pytest_asyncio
from decimal import Decimal
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from library_rental.models import Base


# Test database URL
# WHY: An in-memory SQLite database needs no external service. StaticPool
# keeps every session on the one connection that holds the schema.
TEST_ASYNC_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create a test database engine with all tables."""
    engine = create_async_engine(
        TEST_ASYNC_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """
    Create a test database session.

    Yields:
        AsyncSession: Database session for the test
    """
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def sample_user_data() -> dict:
    """Sample member data for tests."""
    return {
        "name": "Juan Pérez",
        "email": "juan@example.com",
        "phone": "+54 11 5555 0000",
    }


@pytest.fixture
def sample_book_data() -> dict:
    """Sample catalogue entry for tests."""
    return {
        "external_id": 258027,
        "title": "The Lord of the Rings",
        "author_name": "J. R. R. Tolkien",
        "price": Decimal("15.99"),
        "stock_quantity": 10,
    }


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession):
    """Create a test member."""
    from tests.factories import UserFactory

    return await UserFactory.create(db_session)


@pytest_asyncio.fixture
async def test_book(db_session: AsyncSession):
    """Create a test book with five copies available."""
    from tests.factories import BookFactory

    return await BookFactory.create(
        db_session,
        external_id=258027,
        title="The Lord of the Rings",
        price=Decimal("15.99"),
        stock_quantity=10,
        available_quantity=5,
    )
