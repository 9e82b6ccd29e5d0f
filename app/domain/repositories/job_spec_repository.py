"""Domain repository contract for job specifications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.job_spec import JobSpec
from app.domain.value_objects import JobSpecId, UserId


class IJobSpecRepository(ABC):
    """Persistence operations for job specifications."""

    @abstractmethod
    async def get_by_id(self, job_spec_id: JobSpecId, owner_id: UserId) -> Optional[JobSpec]:
        """Load a job spec within the owner's workspace."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, job_spec: JobSpec) -> JobSpec:
        """Insert or update a job spec."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_owner(self, owner_id: UserId, active_only: bool = False) -> List[JobSpec]:
        """List job specs, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count job specs for plan limit checks."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, job_spec_id: JobSpecId, owner_id: UserId) -> bool:
        """Delete a job spec."""
        raise NotImplementedError


__all__ = ["IJobSpecRepository"]
