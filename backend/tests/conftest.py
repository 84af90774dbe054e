"""
Portfolio Backend — Test Configuration (conftest.py)
======================================================

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine:       in-memory SQLite with the full schema
    ├── db_session:      session on db_engine for seeding and assertions
    ├── test_client:     HTTPX AsyncClient wired to the app, sessions from db_engine
    └── profile_id:      id of a seeded profile row
"""

import os

# Override settings BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("FRONTEND_DIR", None)

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, build_engine, get_db_session
from app.main import app
from app.models.profile import Profile


@pytest.fixture
def mock_db_session():
    """
    Mock async database session.

    Usage:
        query_result = MagicMock()
        query_result.scalar_one_or_none.return_value = skill
        mock_db_session.execute.return_value = query_result
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory database per test.

    StaticPool keeps a single connection, so every session sees the same
    :memory: database; build_engine turns on SQLite foreign keys.
    """
    engine = build_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        pool_pre_ping=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the app through ASGITransport.

    get_db_session is overridden with one that uses the test engine
    but keeps the commit/rollback behaviour of the real dependency.
    """

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
async def profile_id(db_session) -> int:
    profile = Profile(
        name="Jane Doe",
        role="Backend Developer",
        bio="Builds APIs.",
        contact_email="jane@example.com",
        years_experience=5,
        projects_completed=12,
    )
    db_session.add(profile)
    await db_session.commit()
    return profile.id
