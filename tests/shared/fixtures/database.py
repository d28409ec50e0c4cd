"""
Database fixtures for persistence tests.

By default every test gets a private in-memory SQLite database
(aiosqlite). Set TEST_DATABASE_URL to run the same tests against
another async database, e.g. a disposable PostgreSQL instance.

Usage:
    async def test_something(db_session):
        repo = SomeRepository(db_session)
        await repo.create(entity)
"""

import os

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

# Import models to register them with Base.metadata
import crowdmap_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from crowdmap_identity.infrastructure.persistence.sqlalchemy.base import Base

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


def _test_database_url() -> str:
    return os.environ.get("TEST_DATABASE_URL", SQLITE_MEMORY_URL)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture(scope="function")
async def async_engine():
    """
    Create an engine with a freshly created schema.

    SQLite in-memory databases live as long as their connection, so a
    single shared connection (StaticPool) is used for the whole test.
    """
    url = _test_database_url()
    if url.startswith("sqlite"):
        engine = create_async_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_async_engine(url, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine):
    """
    Create a fresh database session for each test.

    Uncommitted changes are rolled back after the test.
    """
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()
