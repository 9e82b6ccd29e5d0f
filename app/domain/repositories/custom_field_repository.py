"""Domain repository contract for custom field definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.custom_field import CustomFieldDefinition
from app.domain.value_objects import CustomFieldId, UserId


class ICustomFieldRepository(ABC):
    """Persistence operations for a workspace's custom field definitions."""

    @abstractmethod
    async def get_by_id(self, field_id: CustomFieldId, owner_id: UserId) -> Optional[CustomFieldDefinition]:
        """Load a field definition within the owner's workspace."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_owner(self, owner_id: UserId) -> List[CustomFieldDefinition]:
        """List field definitions in display order."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, definition: CustomFieldDefinition) -> CustomFieldDefinition:
        """Insert or update a field definition."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, field_id: CustomFieldId, owner_id: UserId) -> bool:
        """Delete a field definition."""
        raise NotImplementedError


__all__ = ["ICustomFieldRepository"]
