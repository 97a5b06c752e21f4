"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from blog_backend.configs import Settings, settings
from blog_backend.monitoring import get_logger

logger = get_logger(__name__)

STATEMENT_TIMEOUT_MS = 30000


def _engine_options(url: str, config: Settings) -> dict[str, Any]:
    """
    Build engine keyword arguments for the given database URL.

    SQLite (used by the test suite) gets a single shared connection so an
    in-memory database survives across sessions. Everything else is tuned
    from settings and gets the asyncpg statement timeout.
    """
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }

    return {
        "pool_size": config.POOL_SIZE,
        "max_overflow": config.MAX_OVERFLOW,
        "pool_timeout": config.POOL_TIMEOUT,
        "pool_recycle": config.POOL_RECYCLE,
        "pool_pre_ping": True,
        "connect_args": {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    }


class Database:
    """
    Owns the async engine and the session factory for one process.

    An instance is created during application startup and stored on
    ``app.state.database``; request handlers reach it through the
    ``get_session`` dependency.

    Args:
        url: SQLAlchemy async database URL. Defaults to ``settings.DATABASE_URL``.
        config: Settings used for engine tuning.
    """

    def __init__(self, url: str | None = None, config: Settings = settings) -> None:
        self.url = url or config.DATABASE_URL
        self.engine: AsyncEngine = create_async_engine(
            self.url,
            echo=config.DATABASE_ECHO,
            **_engine_options(self.url, config),
        )

        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for explicit transaction management.

        Yields:
            AsyncSession: Database session within a transaction

        Example:
            ```python
            async with database.transaction() as session:
                session.add(UserDB(username="test", ...))
                # Commits on successful exit, rolls back on exception
            ```
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                logger.exception("Transaction error")
                raise

    async def create_all(self) -> None:
        """
        Create all tables defined in SQLModel models.

        Production schemas are managed by Alembic; this is used for local
        development and the test suite.
        """
        from blog_backend.models import BlogPostDB, CommentDB, UserDB  # noqa: F401, PLC0415

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables created")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")
