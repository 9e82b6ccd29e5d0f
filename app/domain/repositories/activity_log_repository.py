"""Domain repository contract for the workspace activity log."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from app.domain.entities.activity_log import ActivityLogEntry
from app.domain.value_objects import UserId


class IActivityLogRepository(ABC):
    """Append-only store of workspace activity."""

    @abstractmethod
    async def add(self, entry: ActivityLogEntry) -> ActivityLogEntry:
        """Append an entry."""
        raise NotImplementedError

    @abstractmethod
    async def list_recent(self, owner_id: UserId, limit: int = 100) -> List[ActivityLogEntry]:
        """Return the newest entries for the workspace."""
        raise NotImplementedError


__all__ = ["IActivityLogRepository"]
