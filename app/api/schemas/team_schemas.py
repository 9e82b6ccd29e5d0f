"""Team collaboration API schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import id_str
from app.application.team_service import InviteDetails, TeamRoster
from app.application.workspace import WorkspaceContext
from app.domain.entities.team import TeamInvite, TeamMember


class InviteCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    role: str = Field("member", description="admin or member")


class RoleUpdate(BaseModel):
    role: str = Field(..., description="admin or member")


class InviteResponse(BaseModel):
    id: str
    owner_id: str
    email: str
    role: str
    status: str
    invited_by: str
    owner_name: Optional[str] = None
    expires_at: datetime
    created_at: datetime
    accepted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, invite: TeamInvite) -> "InviteResponse":
        return cls(
            id=id_str(invite.id),
            owner_id=id_str(invite.owner_id),
            email=invite.email,
            role=invite.role.value,
            status=invite.status.value,
            invited_by=id_str(invite.invited_by),
            owner_name=invite.owner_name,
            expires_at=invite.expires_at,
            created_at=invite.created_at,
            accepted_at=invite.accepted_at,
        )


class InviteDetailsResponse(BaseModel):
    invite: InviteResponse
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None

    @classmethod
    def from_details(cls, details: InviteDetails) -> "InviteDetailsResponse":
        return cls(
            invite=InviteResponse.from_entity(details.invite),
            owner_name=details.owner_name,
            owner_email=details.owner_email,
        )


class TeamMemberResponse(BaseModel):
    id: str
    user_id: str
    email: str
    role: str
    display_name: Optional[str] = None
    joined_at: datetime

    @classmethod
    def from_entity(cls, member: TeamMember) -> "TeamMemberResponse":
        return cls(
            id=id_str(member.id),
            user_id=id_str(member.user_id),
            email=member.email,
            role=member.role.value,
            display_name=member.display_name,
            joined_at=member.joined_at,
        )


class TeamRosterResponse(BaseModel):
    owner_id: str
    owner_email: Optional[str] = None
    owner_name: Optional[str] = None
    members: List[TeamMemberResponse] = Field(default_factory=list)
    total: int = 0

    @classmethod
    def from_roster(cls, roster: TeamRoster) -> "TeamRosterResponse":
        return cls(
            owner_id=id_str(roster.owner_id),
            owner_email=roster.owner_email,
            owner_name=roster.owner_name,
            members=[TeamMemberResponse.from_entity(member) for member in roster.members],
            total=len(roster.members) + 1,
        )


class TeamAccessResponse(BaseModel):
    """The caller's workspace as seen by the team module."""

    owner_id: str
    user_id: str
    role: str
    plan: str
    is_team_member: bool
    owner_name: Optional[str] = None
    can_manage: bool

    @classmethod
    def from_workspace(cls, workspace: WorkspaceContext) -> "TeamAccessResponse":
        return cls(
            owner_id=id_str(workspace.owner_id),
            user_id=id_str(workspace.user_id),
            role=workspace.role.value,
            plan=workspace.plan.value,
            is_team_member=workspace.is_team_member,
            owner_name=workspace.owner_name,
            can_manage=workspace.can_manage,
        )


__all__ = [
    "InviteCreate",
    "RoleUpdate",
    "InviteResponse",
    "InviteDetailsResponse",
    "TeamMemberResponse",
    "TeamRosterResponse",
    "TeamAccessResponse",
]
