"""Database engine and schema utilities."""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register with Base.metadata
import crowdmap_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from crowdmap_config.settings import Settings, get_settings
from crowdmap_identity.infrastructure.persistence.sqlalchemy.base import Base

logger = logging.getLogger(__name__)


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    """Create an async engine for the configured database."""
    settings = settings or get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.sql_echo,
        pool_pre_ping=True,
    )


def get_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


def display_url(database_url: str) -> str:
    """Strip credentials from a database URL for display."""
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owned = engine is None
    engine = engine or get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owned:
        await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owned = engine is None
    engine = engine or get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owned:
        await engine.dispose()
    logger.info("Database tables dropped successfully")
