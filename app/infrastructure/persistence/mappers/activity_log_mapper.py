"""Mapper between activity log entries and ActivityLogTable rows."""

from __future__ import annotations

from app.domain.entities.activity_log import ActivityAction, ActivityLogEntry, ResourceType
from app.domain.value_objects import ActivityLogId, UserId
from app.infrastructure.persistence.models.activity_log_table import ActivityLogTable


class ActivityLogMapper:

    @staticmethod
    def to_domain(table: ActivityLogTable) -> ActivityLogEntry:
        return ActivityLogEntry(
            id=ActivityLogId(table.id),
            owner_id=UserId(table.owner_id),
            user_id=UserId(table.user_id),
            action=ActivityAction(table.action),
            resource_type=ResourceType(table.resource_type),
            resource_id=table.resource_id,
            resource_name=table.resource_name,
            user_email=table.user_email,
            user_name=table.user_name,
            role=table.role,
            is_team_member_action=table.is_team_member_action,
            metadata=dict(table.details or {}),
            created_at=table.created_at,
        )

    @staticmethod
    def to_table(entity: ActivityLogEntry) -> ActivityLogTable:
        return ActivityLogTable(
            id=entity.id.value,
            owner_id=entity.owner_id.value,
            user_id=entity.user_id.value,
            user_email=entity.user_email,
            user_name=entity.user_name,
            action=entity.action.value,
            resource_type=entity.resource_type.value,
            resource_id=entity.resource_id,
            resource_name=entity.resource_name,
            role=entity.role,
            is_team_member_action=entity.is_team_member_action,
            details=dict(entity.metadata),
            created_at=entity.created_at,
        )


__all__ = ["ActivityLogMapper"]
