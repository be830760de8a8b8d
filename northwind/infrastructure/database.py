"""
Database lifecycle management.

Creates the async engine and session factory, bootstraps tables and
disposes connections on shutdown.
"""
from typing import Optional
import logging

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from northwind.settings import DatabaseSettings, get_app_settings


logger = logging.getLogger(__name__)

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


# =============================================================================
# ENGINE CREATION
# =============================================================================

def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine(settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        settings: Database settings; defaults to the application settings

    Returns:
        Configured async engine
    """
    settings = settings or get_app_settings().database
    url = make_url(settings.database_url)

    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")

    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs = {"pool_pre_ping": settings.pool_pre_ping}

    engine = create_async_engine(url, echo=settings.echo_sql, **kwargs)

    if url.get_backend_name() == "sqlite":
        enable_sqlite_foreign_keys(engine)

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build the session factory used by every unit of work."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables if they don't exist."""
    from northwind.data.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# =============================================================================
# LIFECYCLE
# =============================================================================

async def init_database(settings: Optional[DatabaseSettings] = None) -> None:
    """Initialize async database engine and session factory."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        return

    settings = settings or get_app_settings().database

    logger.info("Initializing database...")

    _async_engine = create_engine(settings)
    _async_session_factory = create_session_factory(_async_engine)

    if settings.create_tables:
        await create_tables(_async_engine)

    logger.info("✅ Database initialized successfully")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _async_session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _async_session_factory


async def close_database() -> None:
    """Close async database engine."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        logger.info("Closing database connections...")
        await _async_engine.dispose()
        logger.info("✅ Database connections closed")

    _async_engine = None
    _async_session_factory = None
