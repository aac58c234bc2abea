"""
Quotes API — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── sample_quote: Attribute bag shaped like a Quote row
    ├── db_engine: In-memory aiosqlite engine with the schema created
    ├── db_session: Session bound to db_engine
    ├── test_client: HTTPX AsyncClient whose requests use db_engine
    └── seeded_client: test_client after the seed loader has run
"""

import os
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

# Override settings BEFORE any quotes_api import instantiates them
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from quotes_api.database import Base, get_db_session
from quotes_api.models.quote import Quote  # noqa: F401


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            result = await service.get_quote(mock_db_session, "1")
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_quote():
    """A row-like object accepted by QuoteResponse.model_validate."""
    now = datetime.now(timezone.utc)
    return SimpleNamespace(
        id=7,
        content="Do or do not, there is no try.",
        author="Yoda",
        category="motivational",
        created_at=now,
        updated_at=now,
    )


@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    get_db_session is overridden with the same commit/rollback behavior,
    bound to the test engine.
    """
    from quotes_api.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded_client(test_client, session_factory):
    """test_client with the 22 seed quotes already stored."""
    from quotes_api.seeds import seed_quotes

    async with session_factory() as session:
        async with session.begin():
            await seed_quotes(session)
    return test_client
