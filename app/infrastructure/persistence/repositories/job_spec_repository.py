"""PostgreSQL implementation of IJobSpecRepository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import desc, func
from sqlmodel import select

from app.domain.entities.job_spec import JobSpec
from app.domain.repositories.job_spec_repository import IJobSpecRepository
from app.domain.value_objects import JobSpecId, UserId
from app.infrastructure.persistence.mappers.job_spec_mapper import JobSpecMapper
from app.infrastructure.persistence.models.job_spec_table import JobSpecTable
from app.infrastructure.persistence.repositories.base import PostgresRepositoryBase


class PostgresJobSpecRepository(PostgresRepositoryBase, IJobSpecRepository):

    @staticmethod
    def _scoped(owner_id: UserId):
        return select(JobSpecTable).where(
            JobSpecTable.owner_id == owner_id.value,
            JobSpecTable.is_deleted == False,  # noqa: E712
        )

    async def get_by_id(self, job_spec_id: JobSpecId, owner_id: UserId) -> Optional[JobSpec]:
        async with self._session("get job spec") as session:
            result = await session.execute(self._scoped(owner_id).where(JobSpecTable.id == job_spec_id.value))
            row = result.scalars().first()
            return JobSpecMapper.to_domain(row) if row else None

    async def save(self, job_spec: JobSpec) -> JobSpec:
        async with self._session("save job spec") as session:
            existing = await session.get(JobSpecTable, job_spec.id.value)
            if existing:
                JobSpecMapper.update_table_from_domain(existing, job_spec)
            else:
                session.add(JobSpecMapper.to_table(job_spec))
        return job_spec

    async def list_by_owner(self, owner_id: UserId, active_only: bool = False) -> List[JobSpec]:
        async with self._session("list job specs") as session:
            stmt = self._scoped(owner_id)
            if active_only:
                stmt = stmt.where(JobSpecTable.is_active == True)  # noqa: E712
            result = await session.execute(stmt.order_by(desc(JobSpecTable.created_at)))
            rows = result.scalars().all()
        return [JobSpecMapper.to_domain(row) for row in rows]

    async def count_by_owner(self, owner_id: UserId) -> int:
        async with self._session("count job specs") as session:
            stmt = select(func.count()).select_from(JobSpecTable).where(
                JobSpecTable.owner_id == owner_id.value,
                JobSpecTable.is_deleted == False,  # noqa: E712
            )
            result = await session.execute(stmt)
            return int(result.scalar_one())

    async def delete(self, job_spec_id: JobSpecId, owner_id: UserId) -> bool:
        async with self._session("delete job spec") as session:
            result = await session.execute(self._scoped(owner_id).where(JobSpecTable.id == job_spec_id.value))
            row = result.scalars().first()
            if not row:
                return False
            row.soft_delete()
            return True


__all__ = ["PostgresJobSpecRepository"]
