"""PostgreSQL implementation of IActivityLogRepository."""

from __future__ import annotations

from typing import List

from sqlalchemy import desc
from sqlmodel import select

from app.domain.entities.activity_log import ActivityLogEntry
from app.domain.repositories.activity_log_repository import IActivityLogRepository
from app.domain.value_objects import UserId
from app.infrastructure.persistence.mappers.activity_log_mapper import ActivityLogMapper
from app.infrastructure.persistence.models.activity_log_table import ActivityLogTable
from app.infrastructure.persistence.repositories.base import PostgresRepositoryBase


class PostgresActivityLogRepository(PostgresRepositoryBase, IActivityLogRepository):

    async def add(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        async with self._session("add activity log entry") as session:
            session.add(ActivityLogMapper.to_table(entry))
        return entry

    async def list_recent(self, owner_id: UserId, limit: int = 100) -> List[ActivityLogEntry]:
        async with self._session("list activity log") as session:
            stmt = (
                select(ActivityLogTable)
                .where(ActivityLogTable.owner_id == owner_id.value)
                .order_by(desc(ActivityLogTable.created_at))
                .limit(limit)
            )
            rows = (await session.execute(stmt)).scalars().all()
        return [ActivityLogMapper.to_domain(row) for row in rows]


__all__ = ["PostgresActivityLogRepository"]
