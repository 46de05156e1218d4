"""
Database handle with async SQLAlchemy 2.0.

A ``Database`` is constructed once at process start (see the application
lifespan), stored on ``app.state`` and disposed on shutdown. Request handlers
receive sessions through the ``get_db`` dependency.
"""

from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from bizdesk.core.logging import get_logger
from bizdesk.db.base import Base

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Async engine plus sessionmaker for one database."""

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        max_overflow: int = 0,
        echo: bool = False,
    ):
        """
        Create the engine. No connection is opened until first use.

        Args:
            url: SQLAlchemy async URL
            pool_size: Persistent connections kept in the pool
            max_overflow: Extra connections allowed above pool_size
            echo: Log every SQL statement
        """
        self.url = url
        self.is_sqlite = url.startswith("sqlite")

        if self.is_sqlite:
            # Single shared connection so in-memory databases survive across sessions
            self.engine: AsyncEngine = create_async_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            self.engine = create_async_engine(
                url,
                echo=echo,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,  # Verify connections before using
            )

        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        logger.info(
            "Database engine created",
            extra={
                "dialect": self.engine.dialect.name,
                "pool_size": None if self.is_sqlite else pool_size,
                "max_overflow": None if self.is_sqlite else max_overflow,
            },
        )

    async def create_tables(self) -> None:
        """Create all tables known to the models' metadata."""
        # Import models so they register with Base.metadata
        import bizdesk.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def drop_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database session.
    Yields a session and ensures it's closed after use.
    """
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database is not initialized; the application lifespan has not run")

    async with database.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
