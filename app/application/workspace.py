"""Request-scoped identity and workspace context shared by application services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.domain.entities.team import TeamRole
from app.domain.exceptions import InsufficientPermissionsError
from app.domain.plans import PlanFeature, PlanName, has_feature_access, require_feature
from app.domain.value_objects import UserId


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller, built from verified token claims."""

    user_id: UserId
    email: str
    display_name: Optional[str] = None
    plan: PlanName = PlanName.FREE


@dataclass(frozen=True)
class WorkspaceContext:
    """
    The workspace a request acts on.

    Team members act inside their owner's workspace with the owner's plan;
    everyone else owns their own workspace.
    """

    owner_id: UserId
    user: CurrentUser
    role: TeamRole
    plan: PlanName
    is_team_member: bool = False
    owner_name: Optional[str] = None

    @property
    def user_id(self) -> UserId:
        return self.user.user_id

    @property
    def is_owner(self) -> bool:
        return self.role == TeamRole.OWNER

    @property
    def can_manage(self) -> bool:
        """Owners and admins may manage shared workspace data."""
        return self.role in (TeamRole.OWNER, TeamRole.ADMIN)

    def has_feature(self, feature: PlanFeature) -> bool:
        return has_feature_access(self.plan, feature)

    def require_feature(self, feature: PlanFeature) -> None:
        require_feature(self.plan, feature)

    def require_owner(self, message: str = "Only the team owner can perform this action") -> None:
        if not self.is_owner:
            raise InsufficientPermissionsError(message)

    def require_manager(self, message: str = "Only owners and admins can perform this action") -> None:
        if not self.can_manage:
            raise InsufficientPermissionsError(message)

    @classmethod
    def personal(cls, user: CurrentUser) -> "WorkspaceContext":
        """Workspace owned by ``user`` themself."""
        return cls(
            owner_id=user.user_id,
            user=user,
            role=TeamRole.OWNER,
            plan=user.plan,
            is_team_member=False,
            owner_name=user.display_name,
        )


__all__ = ["CurrentUser", "WorkspaceContext"]
