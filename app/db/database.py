"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from sqlalchemy import delete, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from app.configs import file_logger, settings
from app.errors.database import DatabaseInitializationError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def _engine_kwargs(url: str) -> dict[str, Any]:
    """
    Build engine keyword arguments for the configured backend.

    SQLite (tests, local runs) shares a single connection so an in-memory
    database survives across sessions; PostgreSQL gets a sized pool and
    server-side timeouts.
    """
    if make_url(url).get_backend_name() == "sqlite":
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
        "connect_args": {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    }


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection events."""

    is_sqlite = engine.dialect.name == "sqlite"

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: Any, connection_record: object) -> None:
        # SQLite ignores ON DELETE CASCADE unless asked per connection
        if is_sqlite:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
        logger.debug("New database connection established")


def create_engine(url: str = settings.DATABASE_URL) -> AsyncEngine:
    """
    Create the async engine for a database URL.

    Args:
        url: SQLAlchemy async database URL

    Returns:
        AsyncEngine: Configured engine with connection events attached
    """
    new_engine = create_async_engine(url, echo=settings.DATABASE_ECHO, **_engine_kwargs(url))
    _configure_engine_events(new_engine)
    return new_engine


engine: AsyncEngine = create_engine()

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    One session per request: committed when the handler returns,
    rolled back when it raises.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(BlogDB(name="Tech", ...))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            logger.debug("Transaction rolled back")
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """
    Create all tables defined in SQLModel models.

    Called on application startup. Production schemas are managed by
    Alembic; ``create_all`` skips tables that already exist.

    Raises:
        DatabaseInitializationError: If the database cannot be reached
    """
    from app.models import BlogDB, CommentDB, PostDB, UserDB  # noqa: F401, PLC0415

    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        logger.exception("Failed to initialize database")
        raise DatabaseInitializationError from e
    logger.info("Database initialized successfully!")


async def clear_all_data(session: AsyncSession) -> None:
    """
    Delete every row of every table, children first.

    Args:
        session: Database session
    """
    for table in reversed(SQLModel.metadata.sorted_tables):
        await session.execute(delete(table))
    logger.warning("All data deleted")


async def close_db() -> None:
    """
    Close database connections.

    This function should be called on application shutdown
    to properly close all database connections.
    """
    await engine.dispose()
    logger.info("Database connections closed")
