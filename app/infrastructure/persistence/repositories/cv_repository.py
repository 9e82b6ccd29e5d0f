"""PostgreSQL implementation of ICVRepository using CVMapper."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import desc, func
from sqlmodel import select

from app.domain.entities.cv import CV, CVStatus
from app.domain.repositories.cv_repository import ICVRepository
from app.domain.value_objects import CVId, JobSpecId, UserId
from app.infrastructure.persistence.mappers.cv_mapper import CVMapper
from app.infrastructure.persistence.models.cv_table import CVTable
from app.infrastructure.persistence.repositories.base import PostgresRepositoryBase


class PostgresCVRepository(PostgresRepositoryBase, ICVRepository):
    """PostgreSQL adapter implementation of ICVRepository. Deleted rows are soft deleted."""

    @staticmethod
    def _scoped(owner_id: UserId):
        return select(CVTable).where(
            CVTable.owner_id == owner_id.value,
            CVTable.is_deleted == False,  # noqa: E712
        )

    async def get_by_id(self, cv_id: CVId, owner_id: UserId) -> Optional[CV]:
        async with self._session("get CV") as session:
            result = await session.execute(self._scoped(owner_id).where(CVTable.id == cv_id.value))
            row = result.scalars().first()
            return CVMapper.to_domain(row) if row else None

    async def save(self, cv: CV) -> CV:
        async with self._session("save CV") as session:
            existing = await session.get(CVTable, cv.id.value)
            if existing:
                CVMapper.update_table_from_domain(existing, cv)
            else:
                session.add(CVMapper.to_table(cv))
        return cv

    async def list_by_owner(self, owner_id: UserId) -> List[CV]:
        async with self._session("list CVs") as session:
            result = await session.execute(self._scoped(owner_id).order_by(desc(CVTable.uploaded_at)))
            rows = result.scalars().all()
        return [CVMapper.to_domain(row) for row in rows]

    async def list_completed(self, owner_id: UserId) -> List[CV]:
        async with self._session("list completed CVs") as session:
            stmt = self._scoped(owner_id).where(
                CVTable.status == CVStatus.COMPLETED.value,
                CVTable.parsed == True,  # noqa: E712
            ).order_by(desc(CVTable.uploaded_at))
            result = await session.execute(stmt)
            rows = result.scalars().all()
        return [CVMapper.to_domain(row) for row in rows]

    async def count_by_owner(self, owner_id: UserId) -> int:
        async with self._session("count CVs") as session:
            stmt = select(func.count()).select_from(CVTable).where(
                CVTable.owner_id == owner_id.value,
                CVTable.is_deleted == False,  # noqa: E712
            )
            result = await session.execute(stmt)
            return int(result.scalar_one())

    async def delete(self, cv_id: CVId, owner_id: UserId) -> bool:
        async with self._session("delete CV") as session:
            result = await session.execute(self._scoped(owner_id).where(CVTable.id == cv_id.value))
            row = result.scalars().first()
            if not row:
                return False
            row.soft_delete()
            return True

    async def remove_match_results(self, owner_id: UserId, job_spec_id: JobSpecId) -> int:
        key = str(job_spec_id)
        async with self._session("remove match results") as session:
            stmt = self._scoped(owner_id).where(CVTable.match_results.has_key(key))
            result = await session.execute(stmt)
            rows = result.scalars().all()
            for row in rows:
                row.match_results = {k: v for k, v in (row.match_results or {}).items() if k != key}
                row.update_timestamp()
            return len(rows)


__all__ = ["PostgresCVRepository"]
