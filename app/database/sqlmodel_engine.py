"""
SQLModel database engine and session management.

This module provides async engine initialisation, connection pooling and
session management for PostgreSQL through asyncpg.
"""

from typing import Optional, AsyncGenerator, Dict, Any
from contextlib import asynccontextmanager
import structlog
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.sql import text
from sqlmodel import SQLModel

from app.core.config import Settings

logger = structlog.get_logger(__name__)


class SQLModelDatabaseManager:
    """
    SQLModel database manager with async session support.

    Provides SQLAlchemy engine and session management for the application.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None
        self.async_session_factory: Optional[sessionmaker] = None
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        """Check if SQLModel manager is initialized."""
        return self._initialized and self.engine is not None

    @staticmethod
    def to_async_url(url: str) -> str:
        """Convert a PostgreSQL URL to the asyncpg dialect."""
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        return url

    async def initialize(self) -> None:
        """Create the async engine and session factory and verify connectivity."""
        if self._initialized:
            logger.warning("SQLModel database manager already initialized")
            return

        try:
            database_url = self.to_async_url(self.settings.get_postgres_url())

            self.engine = create_async_engine(
                database_url,
                pool_size=10,
                max_overflow=20,
                pool_timeout=30,
                pool_recycle=3600,
                pool_pre_ping=True,
                echo=False,
                future=True,
                connect_args={
                    "server_settings": {
                        "application_name": "cvsift",
                    }
                }
            )

            self.async_session_factory = sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
                autocommit=False
            )

            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))

            self._initialized = True
            logger.info(
                "SQLModel database manager initialized successfully",
                database_url=database_url.split("@")[-1]
            )

        except Exception as e:
            logger.error("Failed to initialize SQLModel database manager", error=str(e))
            raise

    async def create_tables(self) -> None:
        """
        Create all SQLModel tables.

        This is used for local development and testing. Deployed
        environments use Alembic migrations instead.
        """
        if not self.engine:
            raise RuntimeError("Database manager not initialized")

        # Registers every table on SQLModel.metadata
        import app.infrastructure.persistence.models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)

            logger.info("SQLModel tables created successfully")

        except Exception as e:
            logger.error("Failed to create SQLModel tables", error=str(e))
            raise

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get async database session with automatic cleanup.

        Usage:
            async with db_manager.get_session() as session:
                result = await session.execute(select(CVTable))
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
        """Run a trivial query and report connection pool statistics."""
        if not self.engine:
            return {
                "status": "unhealthy",
                "error": "Database manager not initialized"
            }

        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1 as health_check"))

            pool = self.engine.pool
            return {
                "status": "healthy",
                "pool_size": pool.size(),
                "checked_in": pool.checkedin(),
                "checked_out": pool.checkedout(),
                "overflow": pool.overflow()
            }

        except Exception as e:
            logger.error("SQLModel database health check failed", error=str(e))
            return {
                "status": "unhealthy",
                "error": str(e)
            }

    async def shutdown(self) -> None:
        """Dispose of the engine and close pooled connections."""
        if self.engine:
            try:
                await self.engine.dispose()
                logger.info("SQLModel database manager shut down successfully")
            except Exception as e:
                logger.error("Error during SQLModel database shutdown", error=str(e))
            finally:
                self.engine = None
                self.async_session_factory = None
                self._initialized = False


__all__ = ["SQLModelDatabaseManager"]
