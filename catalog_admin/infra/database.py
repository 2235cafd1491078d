"""Async database configuration.

Provides:
- Async SQLAlchemy engine and session factory
- Per-request session context manager
- Schema creation and connectivity check
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi.exceptions import RequestValidationError
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from catalog_admin.config import settings
from catalog_admin.core.errors import CatalogError
from catalog_admin.infra.logging import get_logger
from catalog_admin.models import Base

logger = get_logger(__name__)

# Global engine (initialized lazily on first use)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite ignores foreign keys unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine

    if _engine is None:
        if settings.is_sqlite:
            logger.info("Creating database engine", backend="sqlite")
            _engine = create_async_engine(
                settings.database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,  # Keeps in-memory databases alive
                echo=settings.debug,
            )
            event.listen(_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            logger.info(
                "Creating database engine",
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_pool_max_overflow,
            )
            _engine = create_async_engine(
                settings.database_url,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_pool_max_overflow,
                pool_pre_ping=True,  # Verify connections before use
                pool_recycle=1800,  # Recycle connections after 30 min
                echo=settings.debug,
            )

    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _session_factory


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get an async database session scoped to one unit of work.

    Services commit their own single-row writes; anything still pending when
    the block exits cleanly is committed, and errors roll back. Application
    errors such as NotFoundError roll back quietly; anything else is logged.

    Example:
        async with get_db_session() as session:
            result = await session.execute(select(Category))
    """
    factory = get_session_factory()
    session = factory()

    try:
        yield session
        await session.commit()

    except (CatalogError, RequestValidationError):
        # Expected outcomes of a request (404 pages, bad input), not failures
        await session.rollback()
        raise

    except Exception as e:
        await session.rollback()
        logger.error("Database session error", error=str(e))
        raise

    finally:
        await session.close()


async def create_tables() -> None:
    """Create all tables that do not exist yet."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", tables=sorted(Base.metadata.tables))


async def close_db_engine() -> None:
    """Close the database engine and all connections.

    Call this during application shutdown.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database engine")
        await _engine.dispose()
        _engine = None
        _session_factory = None


async def verify_db_connection() -> bool:
    """Verify database connectivity.

    Returns:
        True if connection successful, False otherwise
    """
    try:
        async with get_db_session() as session:
            await session.execute(text("SELECT 1"))
            logger.info("Database connection verified")
            return True
    except Exception as e:
        logger.error("Database connection failed", error=str(e))
        return False
