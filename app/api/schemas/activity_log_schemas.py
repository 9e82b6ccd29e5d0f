"""Activity log API schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import id_str
from app.domain.entities.activity_log import ActivityLogEntry


class ActivityLogResponse(BaseModel):
    id: str
    user_id: str
    user_email: Optional[str] = None
    user_name: Optional[str] = None
    role: str
    is_team_member_action: bool
    action: str
    resource_type: str
    resource_id: Optional[str] = None
    resource_name: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime

    @classmethod
    def from_entity(cls, entry: ActivityLogEntry) -> "ActivityLogResponse":
        return cls(
            id=id_str(entry.id),
            user_id=id_str(entry.user_id),
            user_email=entry.user_email,
            user_name=entry.user_name,
            role=entry.role,
            is_team_member_action=entry.is_team_member_action,
            action=entry.action.value,
            resource_type=entry.resource_type.value,
            resource_id=entry.resource_id,
            resource_name=entry.resource_name,
            metadata=dict(entry.metadata),
            created_at=entry.created_at,
        )


class ActivityLogListResponse(BaseModel):
    items: List[ActivityLogResponse] = Field(default_factory=list)
    total: int = 0


__all__ = ["ActivityLogResponse", "ActivityLogListResponse"]
