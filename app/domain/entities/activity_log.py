"""Audit trail of actions taken inside a workspace."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from app.domain.value_objects import ActivityLogId, UserId


class ActivityAction(str, Enum):
    CV_UPLOADED = "cv_uploaded"
    CV_DELETED = "cv_deleted"
    CV_UPDATED = "cv_updated"
    CV_VIEWED = "cv_viewed"
    JOBSPEC_CREATED = "jobspec_created"
    JOBSPEC_UPDATED = "jobspec_updated"
    JOBSPEC_DELETED = "jobspec_deleted"
    TEAM_MEMBER_REMOVED = "team_member_removed"
    TEAM_MEMBER_ROLE_UPDATED = "team_member_role_updated"
    TEAM_INVITE_SENT = "team_invite_sent"
    TEAM_INVITE_ACCEPTED = "team_invite_accepted"


class ResourceType(str, Enum):
    CV = "cv"
    JOB_SPEC = "jobspec"
    TEAM_MEMBER = "team_member"
    TEAM_INVITE = "team_invite"


@dataclass
class ActivityLogEntry:
    """Immutable record of a single workspace action."""

    id: ActivityLogId
    owner_id: UserId
    user_id: UserId
    action: ActivityAction
    resource_type: ResourceType
    resource_id: Optional[str] = None
    resource_name: Optional[str] = None
    user_email: Optional[str] = None
    user_name: Optional[str] = None
    role: str = "owner"
    is_team_member_action: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.utcnow)


__all__ = ["ActivityAction", "ResourceType", "ActivityLogEntry"]
