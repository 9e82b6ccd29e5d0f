"""
Unit tests for TeamApplicationService.

Covers workspace resolution, the invitation lifecycle, team capacity rules
and owner-only member management.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from app.application.activity_log_service import ActivityLogApplicationService
from app.application.dependencies.activity_log_dependencies import ActivityLogDependencies
from app.application.dependencies.team_dependencies import TeamDependencies
from app.application.team_service import TeamApplicationService
from app.application.workspace import CurrentUser, WorkspaceContext
from app.domain.entities.account import UserAccount
from app.domain.entities.activity_log import ActivityAction
from app.domain.entities.team import InviteStatus, TeamInvite, TeamMember, TeamRole
from app.domain.exceptions import (
    ConflictError,
    InsufficientPermissionsError,
    LimitExceededError,
    PlanFeatureUnavailableError,
    TeamInviteNotFoundError,
    TeamMemberNotFoundError,
    ValidationError,
)
from app.domain.interfaces import INotificationService
from app.domain.plans import PlanName
from app.domain.value_objects import TeamInviteId, TeamMemberId, UserId
from tests.fixtures.workspace_fixtures import make_user
from tests.mocks.mock_repositories import (
    MockActivityLogRepository,
    MockTeamInviteRepository,
    MockTeamMemberRepository,
    MockUserAccountRepository,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def member_repository():
    return MockTeamMemberRepository()


@pytest.fixture
def invite_repository():
    return MockTeamInviteRepository()


@pytest.fixture
def account_repository():
    return MockUserAccountRepository()


@pytest.fixture
def activity_log_repository():
    return MockActivityLogRepository()


@pytest.fixture
def mock_notification_service():
    service = Mock(spec=INotificationService)
    service.send_email = AsyncMock(return_value=True)
    return service


@pytest.fixture
def team_dependencies(
    member_repository,
    invite_repository,
    account_repository,
    activity_log_repository,
    mock_notification_service,
):
    return TeamDependencies(
        member_repository=member_repository,
        invite_repository=invite_repository,
        account_repository=account_repository,
        notification_service=mock_notification_service,
        activity_logger=ActivityLogApplicationService(
            ActivityLogDependencies(activity_log_repository=activity_log_repository)
        ),
        invite_url_builder=lambda invite_id: f"https://app.example.com/accept-invite?inviteId={invite_id}",
    )


@pytest.fixture
def team_service(team_dependencies):
    return TeamApplicationService(team_dependencies)


@pytest.fixture
def invitee():
    return make_user(plan=PlanName.FREE, email="Lerato@Example.com", name="Lerato")


def pending_invite(owner_id, email="lerato@example.com", role=TeamRole.MEMBER, expiry_days=7):
    return TeamInvite.create(owner_id=owner_id, email=email, role=role, owner_name="Test Owner", expiry_days=expiry_days)


def team_member(owner_id, email="colleague@example.com", role=TeamRole.MEMBER, user_id=None):
    return TeamMember(
        id=TeamMemberId.generate(),
        owner_id=owner_id,
        user_id=user_id or UserId(uuid4()),
        email=email,
        role=role,
    )


# =============================================================================
# WORKSPACE RESOLUTION
# =============================================================================


class TestResolveWorkspace:

    @pytest.mark.asyncio
    async def test_user_without_team_owns_workspace(self, team_service, owner_user):
        workspace = await team_service.resolve_workspace(owner_user)

        assert workspace.owner_id == owner_user.user_id
        assert workspace.is_owner
        assert not workspace.is_team_member
        assert workspace.plan == PlanName.PROFESSIONAL

    @pytest.mark.asyncio
    async def test_member_uses_owner_workspace_and_plan(self, team_service, member_repository, account_repository, invitee):
        owner_id = UserId(uuid4())
        await account_repository.save(UserAccount(id=owner_id, email="boss@example.com", plan=PlanName.BUSINESS))
        await member_repository.save(team_member(owner_id, invitee.email, TeamRole.ADMIN, user_id=invitee.user_id))

        workspace = await team_service.resolve_workspace(invitee)

        assert workspace.owner_id == owner_id
        assert workspace.user_id == invitee.user_id
        assert workspace.role == TeamRole.ADMIN
        assert workspace.plan == PlanName.BUSINESS
        assert workspace.is_team_member
        assert workspace.owner_name == "boss@example.com"

    @pytest.mark.asyncio
    async def test_missing_owner_account_falls_back_to_free(self, team_service, member_repository, invitee):
        await member_repository.save(team_member(UserId(uuid4()), invitee.email, user_id=invitee.user_id))

        workspace = await team_service.resolve_workspace(invitee)

        assert workspace.plan == PlanName.FREE


# =============================================================================
# INVITATIONS
# =============================================================================


class TestSendInvite:

    @pytest.mark.asyncio
    async def test_creates_pending_invite(
        self, team_service, workspace, invite_repository, mock_notification_service, activity_log_repository
    ):
        invite = await team_service.send_invite(workspace, "  Lerato@Example.com ", "Admin")

        assert invite.email == "lerato@example.com"
        assert invite.role == TeamRole.ADMIN
        assert invite.status == InviteStatus.PENDING
        assert invite.owner_id == workspace.owner_id
        assert invite.owner_name == "Test Owner"
        assert str(invite.id) in invite_repository.invites
        assert invite.expires_at - invite.created_at == timedelta(days=7)

        mock_notification_service.send_email.assert_awaited_once()
        to, subject, body = mock_notification_service.send_email.await_args.args
        assert to == "lerato@example.com"
        assert subject == "Test Owner invited you to join their team on CVSift"
        assert f"inviteId={invite.id}" in body

        [entry] = activity_log_repository.entries
        assert entry.action == ActivityAction.TEAM_INVITE_SENT
        assert entry.metadata == {"role": "admin"}

    @pytest.mark.asyncio
    async def test_only_owner_can_invite(self, team_service, admin_workspace):
        with pytest.raises(InsufficientPermissionsError):
            await team_service.send_invite(admin_workspace, "new@example.com", "member")

    @pytest.mark.asyncio
    async def test_plan_without_teams(self, team_service, free_workspace):
        with pytest.raises(PlanFeatureUnavailableError):
            await team_service.send_invite(free_workspace, "new@example.com", "member")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,role", [("not-an-email", "member"), ("", "member"), ("new@example.com", "owner")])
    async def test_rejects_bad_input(self, team_service, workspace, email, role):
        with pytest.raises(ValidationError):
            await team_service.send_invite(workspace, email, role)

    @pytest.mark.asyncio
    async def test_cannot_invite_self(self, team_service, workspace):
        with pytest.raises(ValidationError, match="cannot invite yourself"):
            await team_service.send_invite(workspace, workspace.user.email.upper(), "member")

    @pytest.mark.asyncio
    async def test_owner_seat_counts_towards_limit(self, team_service, workspace, member_repository, invite_repository):
        # Professional allows three people: the owner, one member and one pending invite fill it.
        await member_repository.save(team_member(workspace.owner_id))
        await invite_repository.save(pending_invite(workspace.owner_id, "waiting@example.com"))

        with pytest.raises(LimitExceededError) as exc_info:
            await team_service.send_invite(workspace, "new@example.com", "member")

        assert exc_info.value.limit == 3

    @pytest.mark.asyncio
    async def test_existing_member(self, team_service, workspace, member_repository):
        await member_repository.save(team_member(workspace.owner_id, "lerato@example.com"))

        with pytest.raises(ConflictError, match="already a team member"):
            await team_service.send_invite(workspace, "lerato@example.com", "member")

    @pytest.mark.asyncio
    async def test_duplicate_pending_invite(self, team_service, workspace, invite_repository):
        await invite_repository.save(pending_invite(workspace.owner_id))

        with pytest.raises(ConflictError, match="already been sent"):
            await team_service.send_invite(workspace, "lerato@example.com", "member")

    @pytest.mark.asyncio
    async def test_email_failure_does_not_fail_invite(self, team_service, workspace, mock_notification_service):
        mock_notification_service.send_email.side_effect = RuntimeError("smtp down")

        invite = await team_service.send_invite(workspace, "lerato@example.com", "member")

        assert invite.is_pending


class TestGetInvite:

    @pytest.mark.asyncio
    async def test_unknown_invite(self, team_service):
        with pytest.raises(TeamInviteNotFoundError):
            await team_service.get_invite(TeamInviteId.generate())

    @pytest.mark.asyncio
    async def test_expires_stale_invite(self, team_service, workspace, invite_repository, account_repository):
        await account_repository.save(UserAccount(id=workspace.owner_id, email="owner@example.com"))
        invite = await invite_repository.save(pending_invite(workspace.owner_id, expiry_days=-1))

        details = await team_service.get_invite(invite.id)

        assert details.invite.status == InviteStatus.EXPIRED
        assert details.owner_email == "owner@example.com"
        assert details.owner_name == "Test Owner"


class TestAcceptInvite:

    @pytest.mark.asyncio
    async def test_joins_team(self, team_service, workspace, invite_repository, member_repository, activity_log_repository, invitee):
        invite = await invite_repository.save(pending_invite(workspace.owner_id, role=TeamRole.ADMIN))

        member = await team_service.accept_invite(invitee, invite.id)

        assert member.owner_id == workspace.owner_id
        assert member.user_id == invitee.user_id
        assert member.role == TeamRole.ADMIN
        assert str(member.id) in member_repository.members
        assert invite_repository.invites[str(invite.id)].status == InviteStatus.ACCEPTED

        [entry] = activity_log_repository.entries
        assert entry.action == ActivityAction.TEAM_INVITE_ACCEPTED
        assert entry.owner_id == workspace.owner_id
        assert entry.is_team_member_action

    @pytest.mark.asyncio
    async def test_expired_invite(self, team_service, workspace, invite_repository, invitee):
        invite = await invite_repository.save(pending_invite(workspace.owner_id, expiry_days=-1))

        with pytest.raises(ValidationError, match="expired"):
            await team_service.accept_invite(invitee, invite.id)

        assert invite_repository.invites[str(invite.id)].status == InviteStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_already_used_invite(self, team_service, workspace, invite_repository, invitee):
        invite = pending_invite(workspace.owner_id)
        invite.cancel()
        await invite_repository.save(invite)

        with pytest.raises(ValidationError, match="no longer valid"):
            await team_service.accept_invite(invitee, invite.id)

    @pytest.mark.asyncio
    async def test_wrong_email(self, team_service, workspace, invite_repository):
        invite = await invite_repository.save(pending_invite(workspace.owner_id))
        stranger = make_user(email="someone@else.com")

        with pytest.raises(InsufficientPermissionsError, match="sent to lerato@example.com"):
            await team_service.accept_invite(stranger, invite.id)

    @pytest.mark.asyncio
    async def test_owner_cannot_join_own_team(self, team_service, owner_user, invite_repository):
        invite = await invite_repository.save(pending_invite(owner_user.user_id, email=owner_user.email))

        with pytest.raises(ValidationError, match="your own team"):
            await team_service.accept_invite(owner_user, invite.id)

    @pytest.mark.asyncio
    async def test_user_already_in_a_team(self, team_service, workspace, invite_repository, member_repository, invitee):
        await member_repository.save(team_member(UserId(uuid4()), invitee.email, user_id=invitee.user_id))
        invite = await invite_repository.save(pending_invite(workspace.owner_id))

        with pytest.raises(ConflictError):
            await team_service.accept_invite(invitee, invite.id)


class TestCancelAndListInvites:

    @pytest.mark.asyncio
    async def test_cancel(self, team_service, workspace, invite_repository):
        invite = await invite_repository.save(pending_invite(workspace.owner_id))

        cancelled = await team_service.cancel_invite(workspace, invite.id)

        assert cancelled.status == InviteStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_cancel_twice(self, team_service, workspace, invite_repository):
        invite = await invite_repository.save(pending_invite(workspace.owner_id))
        await team_service.cancel_invite(workspace, invite.id)

        with pytest.raises(ValidationError):
            await team_service.cancel_invite(workspace, invite.id)

    @pytest.mark.asyncio
    async def test_cannot_cancel_another_teams_invite(self, team_service, workspace, invite_repository):
        invite = await invite_repository.save(pending_invite(UserId(uuid4())))

        with pytest.raises(TeamInviteNotFoundError):
            await team_service.cancel_invite(workspace, invite.id)

    @pytest.mark.asyncio
    async def test_pending_list_drops_expired(self, team_service, workspace, invite_repository):
        fresh = await invite_repository.save(pending_invite(workspace.owner_id))
        stale = await invite_repository.save(pending_invite(workspace.owner_id, "old@example.com", expiry_days=-1))

        pending = await team_service.list_pending_invites(workspace)

        assert [i.id for i in pending] == [fresh.id]
        assert invite_repository.invites[str(stale.id)].status == InviteStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_members_cannot_list_invites(self, team_service, member_workspace):
        with pytest.raises(InsufficientPermissionsError):
            await team_service.list_pending_invites(member_workspace)


# =============================================================================
# MEMBER MANAGEMENT
# =============================================================================


class TestMemberManagement:

    @pytest.mark.asyncio
    async def test_roster_includes_owner(self, team_service, workspace, member_repository, account_repository):
        await account_repository.save(UserAccount(id=workspace.owner_id, email="owner@example.com", display_name="Owner"))
        member = await member_repository.save(team_member(workspace.owner_id))

        roster = await team_service.list_members(workspace)

        assert roster.owner_email == "owner@example.com"
        assert roster.owner_name == "Owner"
        assert [m.id for m in roster.members] == [member.id]

    @pytest.mark.asyncio
    async def test_remove_member(self, team_service, workspace, member_repository, activity_log_repository):
        member = await member_repository.save(team_member(workspace.owner_id))

        await team_service.remove_member(workspace, member.id)

        assert member_repository.members == {}
        assert activity_log_repository.entries[0].action == ActivityAction.TEAM_MEMBER_REMOVED

    @pytest.mark.asyncio
    async def test_remove_unknown_member(self, team_service, workspace):
        with pytest.raises(TeamMemberNotFoundError):
            await team_service.remove_member(workspace, TeamMemberId.generate())

    @pytest.mark.asyncio
    async def test_admin_cannot_remove_members(self, team_service, admin_workspace):
        with pytest.raises(InsufficientPermissionsError):
            await team_service.remove_member(admin_workspace, TeamMemberId.generate())

    @pytest.mark.asyncio
    async def test_update_role(self, team_service, workspace, member_repository, activity_log_repository):
        member = await member_repository.save(team_member(workspace.owner_id))

        updated = await team_service.update_member_role(workspace, member.id, "admin")

        assert updated.role == TeamRole.ADMIN
        assert activity_log_repository.entries[0].metadata == {"previous_role": "member", "new_role": "admin"}

    @pytest.mark.asyncio
    async def test_cannot_promote_to_owner(self, team_service, workspace, member_repository):
        member = await member_repository.save(team_member(workspace.owner_id))

        with pytest.raises(ValidationError):
            await team_service.update_member_role(workspace, member.id, "owner")


class TestActivityLoggingFailures:

    @pytest.mark.asyncio
    async def test_logging_failure_does_not_break_action(self, team_service, workspace, activity_log_repository):
        activity_log_repository.add = AsyncMock(side_effect=RuntimeError("database unavailable"))

        invite = await team_service.send_invite(workspace, "lerato@example.com", "member")

        assert invite.is_pending


def test_personal_workspace_is_owned():
    user = CurrentUser(user_id=UserId(uuid4()), email="solo@example.com", plan=PlanName.BASIC)
    workspace = WorkspaceContext.personal(user)

    assert workspace.can_manage
    assert workspace.plan == PlanName.BASIC
