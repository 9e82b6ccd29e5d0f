"""Application service for team collaboration: members, roles and invitations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

import structlog

from app.application.workspace import CurrentUser, WorkspaceContext
from app.domain.entities.activity_log import ActivityAction, ResourceType
from app.domain.entities.team import TeamInvite, TeamMember, TeamRole
from app.domain.exceptions import (
    ConflictError,
    InsufficientPermissionsError,
    LimitExceededError,
    TeamInviteNotFoundError,
    TeamMemberNotFoundError,
    ValidationError,
)
from app.domain.plans import PlanFeature, PlanName, get_team_limit
from app.domain.value_objects import TeamInviteId, TeamMemberId, UserId

if TYPE_CHECKING:
    from app.application.dependencies.team_dependencies import TeamDependencies


@dataclass
class InviteDetails:
    """Invitation as shown to the person being invited."""

    invite: TeamInvite
    owner_name: Optional[str]
    owner_email: Optional[str]


@dataclass
class TeamRoster:
    """Workspace owner plus the members of their team."""

    owner_id: UserId
    owner_email: Optional[str]
    owner_name: Optional[str]
    members: List[TeamMember]


class TeamApplicationService:
    """Coordinates team membership within a workspace."""

    def __init__(self, dependencies: TeamDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def resolve_workspace(self, user: CurrentUser) -> WorkspaceContext:
        """
        Work out which workspace the user acts in.

        Members act inside their owner's workspace with the owner's plan.
        """
        member = await self._deps.member_repository.get_by_user(user.user_id)
        if member is None:
            return WorkspaceContext.personal(user)

        owner = await self._deps.account_repository.get_by_id(member.owner_id)
        plan = owner.plan if owner else PlanName.FREE
        owner_name = (owner.display_name or owner.email) if owner else None

        return WorkspaceContext(
            owner_id=member.owner_id,
            user=user,
            role=member.role,
            plan=plan,
            is_team_member=True,
            owner_name=owner_name,
        )

    async def send_invite(self, workspace: WorkspaceContext, email: str, role: str) -> TeamInvite:
        """
        Invite an email address to join the caller's team.

        Args:
            workspace: Caller's workspace; must be the owner
            email: Address to invite
            role: ``admin`` or ``member``

        Returns:
            The stored pending invitation

        Raises:
            InsufficientPermissionsError: If the caller is not the team owner
            PlanFeatureUnavailableError: If the plan has no team collaboration
            LimitExceededError: If the team is full
            ValidationError: If the role or email is not acceptable
            ConflictError: If the address is already a member or invited
        """
        workspace.require_owner("Only the team owner can send invitations")
        workspace.require_feature(PlanFeature.TEAM_COLLABORATION)

        normalized_email = (email or "").strip().lower()
        if not normalized_email or "@" not in normalized_email:
            raise ValidationError("A valid email address is required")

        try:
            team_role = TeamRole.assignable(role)
        except ValueError as e:
            raise ValidationError(str(e))

        if normalized_email == (workspace.user.email or "").lower():
            raise ValidationError("You cannot invite yourself")

        await self._check_team_capacity(workspace)

        if await self._deps.member_repository.get_by_email(workspace.owner_id, normalized_email):
            raise ConflictError("This user is already a team member")
        if await self._deps.invite_repository.find_pending(workspace.owner_id, normalized_email):
            raise ConflictError("An invitation has already been sent to this email")

        self._logger.info("Creating team invite", owner_id=str(workspace.owner_id), role=team_role.value)

        invite = TeamInvite.create(
            owner_id=workspace.owner_id,
            email=normalized_email,
            role=team_role,
            owner_name=workspace.user.display_name or workspace.user.email,
            expiry_days=self._deps.invite_expiry_days,
        )
        saved = await self._deps.invite_repository.save(invite)

        await self._send_invite_email(saved)
        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.TEAM_INVITE_SENT,
            ResourceType.TEAM_INVITE,
            resource_id=str(saved.id),
            resource_name=saved.email,
            metadata={"role": team_role.value},
        )

        self._logger.info("Team invite sent successfully", invite_id=str(saved.id))
        return saved

    async def _check_team_capacity(self, workspace: WorkspaceContext) -> None:
        limit = get_team_limit(workspace.plan)
        if limit is None:
            raise InsufficientPermissionsError(
                "Team collaboration is only available for Professional, Business, and Enterprise plans."
            )

        members = await self._deps.member_repository.count_by_owner(workspace.owner_id)
        pending = await self._deps.invite_repository.count_pending(workspace.owner_id)
        # The owner occupies one seat.
        if members + pending + 1 >= limit:
            raise LimitExceededError(
                f"Team member limit reached. Your {workspace.plan.value} plan supports up to "
                f"{limit} team member(s). Upgrade to add more.",
                limit=limit,
            )

    async def _send_invite_email(self, invite: TeamInvite) -> None:
        inviter = invite.owner_name or "A CVSift user"
        link = self._deps.invite_url_builder(str(invite.id))
        subject = f"{inviter} invited you to join their team on CVSift"
        body = (
            f"{inviter} has invited you to join their CVSift team as {invite.role.value}.\n\n"
            f"Accept the invitation: {link}\n\n"
            f"This invitation expires on {invite.expires_at.strftime('%Y-%m-%d')}."
        )

        try:
            sent = await self._deps.notification_service.send_email(invite.email, subject, body)
        except Exception as e:
            self._logger.error("Failed to send invite email", invite_id=str(invite.id), error=str(e))
            return

        if not sent:
            self._logger.warning("Invite email was not delivered", invite_id=str(invite.id))

    async def get_invite(self, invite_id: TeamInviteId) -> InviteDetails:
        """Load an invitation for display, expiring it if its time has passed."""
        invite = await self._deps.invite_repository.get_by_id(invite_id)
        if invite is None:
            raise TeamInviteNotFoundError("Invitation not found")

        if invite.is_pending and invite.is_expired():
            invite.expire()
            invite = await self._deps.invite_repository.save(invite)

        owner = await self._deps.account_repository.get_by_id(invite.owner_id)
        return InviteDetails(
            invite=invite,
            owner_name=(owner.display_name if owner else None) or invite.owner_name,
            owner_email=owner.email if owner else None,
        )

    async def accept_invite(self, user: CurrentUser, invite_id: TeamInviteId) -> TeamMember:
        """
        Join the inviting owner's team.

        Raises:
            TeamInviteNotFoundError: If the invite does not exist
            ValidationError: If the invite is no longer pending or has expired
            InsufficientPermissionsError: If the invite was sent to another address
            ConflictError: If the user already belongs to a team
        """
        invite = await self._deps.invite_repository.get_by_id(invite_id)
        if invite is None:
            raise TeamInviteNotFoundError("Invitation not found")

        if not invite.is_pending:
            raise ValidationError("This invitation is no longer valid")

        if invite.is_expired():
            invite.expire()
            await self._deps.invite_repository.save(invite)
            raise ValidationError("This invitation has expired")

        if not invite.is_for(user.email):
            raise InsufficientPermissionsError(
                f"This invitation was sent to {invite.email}. You are signed in as {user.email}. "
                "Please sign in with the correct email address."
            )

        if user.user_id == invite.owner_id:
            raise ValidationError("You cannot join your own team")

        if await self._deps.member_repository.get_by_user(user.user_id):
            raise ConflictError("You are already a member of a team")

        self._logger.info("Accepting team invite", invite_id=str(invite.id), user_id=str(user.user_id))

        member = TeamMember(
            id=TeamMemberId.generate(),
            owner_id=invite.owner_id,
            user_id=user.user_id,
            email=invite.email,
            role=invite.role,
            display_name=user.display_name,
        )
        saved_member = await self._deps.member_repository.save(member)

        invite.accept(user.user_id)
        await self._deps.invite_repository.save(invite)

        workspace = await self.resolve_workspace(user)
        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.TEAM_INVITE_ACCEPTED,
            ResourceType.TEAM_INVITE,
            resource_id=str(invite.id),
            resource_name=invite.email,
            metadata={"role": invite.role.value},
        )

        self._logger.info("Team invite accepted successfully", member_id=str(saved_member.id))
        return saved_member

    async def cancel_invite(self, workspace: WorkspaceContext, invite_id: TeamInviteId) -> TeamInvite:
        workspace.require_owner("Only the team owner can cancel invitations")

        invite = await self._deps.invite_repository.get_by_id(invite_id)
        if invite is None or invite.owner_id != workspace.owner_id:
            raise TeamInviteNotFoundError("Invitation not found")

        try:
            invite.cancel()
        except ValueError as e:
            raise ValidationError(str(e))

        saved = await self._deps.invite_repository.save(invite)
        self._logger.info("Team invite cancelled", invite_id=str(invite.id))
        return saved

    async def list_members(self, workspace: WorkspaceContext) -> TeamRoster:
        """Owner details plus every member, for anyone inside the workspace."""
        owner = await self._deps.account_repository.get_by_id(workspace.owner_id)
        members = await self._deps.member_repository.list_by_owner(workspace.owner_id)
        return TeamRoster(
            owner_id=workspace.owner_id,
            owner_email=owner.email if owner else None,
            owner_name=(owner.display_name if owner else None) or workspace.owner_name,
            members=members,
        )

    async def list_pending_invites(self, workspace: WorkspaceContext) -> List[TeamInvite]:
        workspace.require_owner("Only the team owner can view invitations")

        invites = await self._deps.invite_repository.list_pending(workspace.owner_id)
        now = datetime.utcnow()
        pending = []
        for invite in invites:
            if invite.is_expired(now):
                invite.expire()
                await self._deps.invite_repository.save(invite)
                continue
            pending.append(invite)
        return pending

    async def remove_member(self, workspace: WorkspaceContext, member_id: TeamMemberId) -> None:
        workspace.require_owner("Only the team owner can remove members")

        member = await self._deps.member_repository.get_by_id(member_id, workspace.owner_id)
        if member is None:
            raise TeamMemberNotFoundError("Team member not found")

        await self._deps.member_repository.delete(member_id, workspace.owner_id)
        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.TEAM_MEMBER_REMOVED,
            ResourceType.TEAM_MEMBER,
            resource_id=str(member.id),
            resource_name=member.email,
        )
        self._logger.info("Team member removed", member_id=str(member_id), owner_id=str(workspace.owner_id))

    async def update_member_role(
        self,
        workspace: WorkspaceContext,
        member_id: TeamMemberId,
        role: str,
    ) -> TeamMember:
        workspace.require_owner("Only the team owner can change member roles")

        try:
            new_role = TeamRole.assignable(role)
        except ValueError as e:
            raise ValidationError(str(e))

        member = await self._deps.member_repository.get_by_id(member_id, workspace.owner_id)
        if member is None:
            raise TeamMemberNotFoundError("Team member not found")

        previous_role = member.role
        member.change_role(new_role)
        saved = await self._deps.member_repository.save(member)

        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.TEAM_MEMBER_ROLE_UPDATED,
            ResourceType.TEAM_MEMBER,
            resource_id=str(member.id),
            resource_name=member.email,
            metadata={"previous_role": previous_role.value, "new_role": new_role.value},
        )
        self._logger.info("Team member role updated", member_id=str(member_id), role=new_role.value)
        return saved

    async def check_team_access(self, user: CurrentUser) -> WorkspaceContext:
        return await self.resolve_workspace(user)


__all__ = ["TeamApplicationService", "InviteDetails", "TeamRoster"]
