"""
Portfolio Backend — Database Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, declarative base and
       the FastAPI session dependency.
How:   One engine per process; one session per request. The session
       dependency commits on success and rolls back on error.
Who:   Route handlers receive sessions via Depends(get_db_session);
       models inherit from Base; Alembic reads Base.metadata.
"""

from typing import Any, AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def _enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    SQLite ignores FOREIGN KEY clauses unless asked per connection.

    Without this the ON DELETE CASCADE from profile to its child tables
    is silently skipped on SQLite (used by the test suite).
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, **engine_kwargs: Any) -> AsyncEngine:
    """
    Create an async engine, applying dialect-specific connection setup.

    Extra keyword arguments go to create_async_engine (the test suite
    passes poolclass=StaticPool for a shared in-memory database).
    """
    engine_kwargs.setdefault("pool_pre_ping", settings.db_pool_pre_ping)
    # Echo SQL statements only when debugging
    engine_kwargs.setdefault("echo", settings.log_level == "DEBUG")
    engine = create_async_engine(url, **engine_kwargs)
    if url.startswith("sqlite"):
        _enable_sqlite_foreign_keys(engine)
    return engine


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings.database_url)

# expire_on_commit=False: attributes stay readable after commit
# (e.g. the new row id returned by an insert)
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every table (profile, skills, projects, education, hobbies, contacts)
    registers itself on this metadata; Alembic migrations and the test
    fixtures build the schema from it.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session

    Example usage in a route:
        @router.get("/skills")
        async def skills(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called from the lifespan shutdown."""
    await engine.dispose()
