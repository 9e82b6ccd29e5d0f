"""Domain repository contract for CV aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.cv import CV
from app.domain.value_objects import CVId, JobSpecId, UserId


class ICVRepository(ABC):
    """Domain-facing abstraction for CV persistence scoped to a workspace owner."""

    @abstractmethod
    async def get_by_id(self, cv_id: CVId, owner_id: UserId) -> Optional[CV]:
        """Load a CV by identifier within the owner's workspace."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, cv: CV) -> CV:
        """Insert or update a CV aggregate."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_owner(self, owner_id: UserId) -> List[CV]:
        """List every CV in the workspace, newest upload first."""
        raise NotImplementedError

    @abstractmethod
    async def list_completed(self, owner_id: UserId) -> List[CV]:
        """List parsed CVs that are ready for matching."""
        raise NotImplementedError

    @abstractmethod
    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count CVs in the workspace for plan limit checks."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, cv_id: CVId, owner_id: UserId) -> bool:
        """Delete a CV, returning False when it did not exist."""
        raise NotImplementedError

    @abstractmethod
    async def remove_match_results(self, owner_id: UserId, job_spec_id: JobSpecId) -> int:
        """Drop stored match results for a job spec, returning how many CVs changed."""
        raise NotImplementedError


__all__ = ["ICVRepository"]
