"""Shared plumbing for the PostgreSQL repository adapters."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.sqlmodel_engine import SQLModelDatabaseManager
from app.domain.exceptions import RepositoryError

logger = structlog.get_logger(__name__)


class PostgresRepositoryBase:
    """Lazily resolves the database manager and wraps driver errors."""

    def __init__(self, db_manager: Optional[SQLModelDatabaseManager] = None):
        self._db_manager = db_manager

    async def _get_db_manager(self) -> SQLModelDatabaseManager:
        if self._db_manager is None:
            from app.infrastructure.providers.database_provider import get_database_manager

            self._db_manager = await get_database_manager()
        return self._db_manager

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        """Open a committing session; persistence failures surface as RepositoryError."""
        db_manager = await self._get_db_manager()
        try:
            async with db_manager.get_session() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(
                "Repository operation failed",
                repository=type(self).__name__,
                operation=operation,
                error=str(e),
            )
            raise RepositoryError(f"Failed to {operation}: {str(e)}") from e


__all__ = ["PostgresRepositoryBase"]
