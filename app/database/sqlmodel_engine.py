"""
SQLModel database engine and session management.

This module provides SQLAlchemy/SQLModel database initialization, connection pooling,
and async session management for PostgreSQL.
"""

from typing import Optional, AsyncGenerator, Dict, Any
from contextlib import asynccontextmanager
import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.sql import text
from sqlmodel import SQLModel

from app.core.config import Settings

logger = structlog.get_logger(__name__)


class SQLModelDatabaseManager:
    """
    SQLModel database manager with async session support.

    Owns the async engine and hands out sessions to repositories.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Check if SQLModel manager is initialized."""
        return self._initialized and self.engine is not None

    def _build_database_url(self) -> str:
        """
        Build SQLAlchemy async database URL from settings.

        Converts PostgreSQL URL to SQLAlchemy async format.
        """
        url = str(self.settings.get_postgres_url())
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        return url

    async def initialize(self) -> None:
        """
        Initialize SQLModel engine and session factory and verify connectivity.
        """
        if self._initialized:
            logger.warning("sqlmodel_manager_already_initialized")
            return

        database_url = self._build_database_url()
        try:
            self.engine = create_async_engine(
                database_url,
                pool_size=self.settings.DATABASE_POOL_SIZE,
                max_overflow=self.settings.DATABASE_POOL_SIZE * 2,
                pool_timeout=30,
                pool_recycle=3600,  # Recycle connections every hour
                pool_pre_ping=True,
                echo=self.settings.DEBUG,
                connect_args={
                    "server_settings": {
                        "application_name": "board-champions-profiles",
                    }
                },
            )

            self.async_session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,  # Keep objects usable after commit
                autoflush=True,
            )

            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

            self._initialized = True
            logger.info(
                "sqlmodel_manager_initialized",
                database_url=database_url.split("@")[-1],  # Hide credentials
            )

        except Exception as e:
            logger.error("sqlmodel_manager_initialization_failed", error=str(e))
            raise

    async def create_tables(self) -> None:
        """
        Create all SQLModel tables.

        This is used for development and testing. In production,
        use Alembic migrations instead.
        """
        if not self.engine:
            raise RuntimeError("Database manager not initialized")

        # Import all models to ensure they're registered
        import app.infrastructure.persistence.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

        logger.info("sqlmodel_tables_created")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get async database session with automatic commit or rollback.

        Usage:
            async with db_manager.get_session() as session:
                result = await session.execute(select(CandidateProfileTable))
        """
        if not self.async_session_factory:
            raise RuntimeError("Database manager not initialized")

        session = self.async_session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform health check on the database connection.
        """
        if not self.engine:
            return {
                "status": "unhealthy",
                "error": "Database manager not initialized"
            }

        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1 as health_check"))

            pool = self.engine.pool
            return {
                "status": "healthy",
                "pool_size": pool.size(),
                "checked_out": pool.checkedout(),
            }

        except Exception as e:
            logger.error("database_health_check_failed", error=str(e))
            return {
                "status": "unhealthy",
                "error": str(e)
            }

    async def shutdown(self) -> None:
        """
        Shutdown SQLModel database manager and close connections.
        """
        if self.engine:
            try:
                await self.engine.dispose()
                logger.info("sqlmodel_manager_shutdown")
            finally:
                self.engine = None
                self.async_session_factory = None
                self._initialized = False


__all__ = ["SQLModelDatabaseManager"]
