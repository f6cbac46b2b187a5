"""
Database configuration and connection management.
SQLite (aiosqlite) by default; any SQLAlchemy async URL works.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, AsyncIterator
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    async_sessionmaker,
    AsyncEngine
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
import logging

from ai_cofounder.config import get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def _sqlite_file(url: str) -> "Path | None":
    """Database file of a SQLite URL, or None for in-memory databases."""
    db_path = url.split("///", 1)[-1]
    if not db_path or db_path.startswith(":memory:"):
        return None
    return Path(db_path)


class DatabaseManager:
    """
    Manages the engine and session factory.
    Singleton pattern for application-wide access.
    """

    _instance: "DatabaseManager | None" = None
    _engine: AsyncEngine | None = None
    _session_factory: async_sessionmaker[AsyncSession] | None = None

    def __new__(cls) -> "DatabaseManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError(
                "Database not initialized. Call initialize() first.")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            raise RuntimeError(
                "Database not initialized. Call initialize() first.")
        return self._session_factory

    async def initialize(self, database_url: str | None = None) -> None:
        """
        Create the engine and session factory.

        Args:
            database_url: Database URL. If None, uses settings.
        """
        if self._engine is not None:
            logger.warning("Database already initialized")
            return

        settings = get_settings()
        url = database_url or settings.database_url

        if url.startswith("sqlite"):
            db_file = _sqlite_file(url)
            if db_file is not None:
                db_file.parent.mkdir(parents=True, exist_ok=True)
                logger.info(f"Ensured database directory exists: {db_file.parent}")

            # One shared connection keeps in-memory databases alive
            self._engine = create_async_engine(
                url,
                echo=settings.database_echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self._engine = create_async_engine(
                url,
                echo=settings.database_echo,
                pool_size=settings.database_pool_size,
                max_overflow=settings.database_max_overflow,
                pool_pre_ping=True,
            )

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        logger.info(
            f"Database initialized: {url.split('@')[-1] if '@' in url else url}")

    async def create_tables(self) -> None:
        """Create all tables defined in models."""
        # Models must be imported before create_all
        from ai_cofounder.database import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def drop_tables(self) -> None:
        """Drop all tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.warning("All database tables dropped")

    async def close(self) -> None:
        """Close database connections."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connections closed")

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """Session committed on success and rolled back on error."""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


# Global database manager instance
db_manager = DatabaseManager()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with db_manager.session_scope() as session:
        yield session


async def init_db(database_url: str | None = None) -> None:
    """Initialize database, create tables and seed the co-founder directory."""
    await db_manager.initialize(database_url)
    await db_manager.create_tables()

    from ai_cofounder.database.repositories import seed_cofounder_directory

    async with db_manager.session_scope() as session:
        await seed_cofounder_directory(session)


async def close_db() -> None:
    """Close database connections."""
    await db_manager.close()
