"""Application service that records and reads the workspace activity log."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog

from app.application.workspace import WorkspaceContext
from app.domain.entities.activity_log import ActivityAction, ActivityLogEntry, ResourceType
from app.domain.plans import PlanFeature
from app.domain.value_objects import ActivityLogId

if TYPE_CHECKING:
    from app.application.dependencies.activity_log_dependencies import ActivityLogDependencies


class ActivityLogApplicationService:
    """Coordinates activity logging for every workspace write."""

    def __init__(self, dependencies: ActivityLogDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def log_activity(
        self,
        workspace: WorkspaceContext,
        action: ActivityAction,
        resource_type: ResourceType,
        resource_id: Optional[str] = None,
        resource_name: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Append an entry for the acting user.

        Logging must never break the action being logged, so failures are
        reported as ``False`` instead of raised.
        """
        entry = ActivityLogEntry(
            id=ActivityLogId.generate(),
            owner_id=workspace.owner_id,
            user_id=workspace.user_id,
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            resource_name=resource_name,
            user_email=workspace.user.email,
            user_name=workspace.user.display_name or workspace.user.email,
            role=workspace.role.value,
            is_team_member_action=workspace.is_team_member,
            metadata=dict(metadata or {}),
        )

        try:
            await self._deps.activity_log_repository.add(entry)
        except Exception as e:
            self._logger.error(
                "Failed to log activity",
                action=action.value,
                owner_id=str(workspace.owner_id),
                error=str(e),
            )
            return False

        self._logger.debug(
            "Activity logged",
            action=action.value,
            resource_type=resource_type.value,
            resource_id=resource_id,
        )
        return True

    async def get_activity_logs(self, workspace: WorkspaceContext) -> List[ActivityLogEntry]:
        """Newest entries first; owners and admins only, on plans with activity logs."""
        workspace.require_manager("Only team owners and admins can view activity logs")
        workspace.require_feature(PlanFeature.ACTIVITY_LOGS)

        return await self._deps.activity_log_repository.list_recent(
            workspace.owner_id,
            limit=self._deps.page_limit,
        )


__all__ = ["ActivityLogApplicationService"]
