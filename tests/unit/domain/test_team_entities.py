"""Tests for team roles, memberships and invitations."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from app.domain.entities.team import InviteStatus, TeamInvite, TeamMember, TeamRole
from app.domain.value_objects import TeamMemberId, UserId


@pytest.fixture
def owner_id():
    return UserId(uuid4())


class TestTeamRole:

    @pytest.mark.parametrize("raw,expected", [("admin", TeamRole.ADMIN), (" Member ", TeamRole.MEMBER)])
    def test_assignable_roles(self, raw, expected):
        assert TeamRole.assignable(raw) == expected

    @pytest.mark.parametrize("raw", ["owner", "viewer", "", None])
    def test_rejects_non_assignable_roles(self, raw):
        with pytest.raises(ValueError, match="admin' or 'member"):
            TeamRole.assignable(raw)


class TestTeamInvite:

    def test_create_normalises_email_and_sets_expiry(self, owner_id):
        before = datetime.utcnow()
        invite = TeamInvite.create(owner_id, "  New.Hire@Example.COM ", TeamRole.MEMBER, owner_name="Owner")

        assert invite.email == "new.hire@example.com"
        assert invite.status == InviteStatus.PENDING
        assert invite.invited_by == owner_id
        assert before + timedelta(days=7) <= invite.expires_at <= datetime.utcnow() + timedelta(days=7)

    def test_blank_email_rejected(self, owner_id):
        with pytest.raises(ValueError):
            TeamInvite.create(owner_id, "   ", TeamRole.MEMBER)

    def test_is_for_ignores_case(self, owner_id):
        invite = TeamInvite.create(owner_id, "hire@example.com", TeamRole.ADMIN)

        assert invite.is_for("HIRE@example.com")
        assert not invite.is_for("other@example.com")
        assert not invite.is_for(None)

    def test_expiry(self, owner_id):
        invite = TeamInvite.create(owner_id, "hire@example.com", TeamRole.MEMBER, expiry_days=1)

        assert not invite.is_expired()
        assert invite.is_expired(datetime.utcnow() + timedelta(days=2))

    def test_accept_records_user(self, owner_id):
        invite = TeamInvite.create(owner_id, "hire@example.com", TeamRole.MEMBER)
        user_id = UserId(uuid4())

        invite.accept(user_id)

        assert invite.status == InviteStatus.ACCEPTED
        assert invite.accepted_by == user_id
        assert invite.accepted_at is not None

    def test_accept_twice_fails(self, owner_id):
        invite = TeamInvite.create(owner_id, "hire@example.com", TeamRole.MEMBER)
        invite.accept(UserId(uuid4()))

        with pytest.raises(ValueError, match="no longer valid"):
            invite.accept(UserId(uuid4()))

    def test_only_pending_invites_can_be_cancelled(self, owner_id):
        invite = TeamInvite.create(owner_id, "hire@example.com", TeamRole.MEMBER)
        invite.cancel()
        assert invite.status == InviteStatus.CANCELLED

        with pytest.raises(ValueError):
            invite.cancel()


class TestTeamMember:

    def test_change_role(self, owner_id):
        member = TeamMember(
            id=TeamMemberId.generate(),
            owner_id=owner_id,
            user_id=UserId(uuid4()),
            email="member@example.com",
        )

        member.change_role(TeamRole.ADMIN)

        assert member.is_admin

    def test_cannot_promote_to_owner(self, owner_id):
        member = TeamMember(
            id=TeamMemberId.generate(),
            owner_id=owner_id,
            user_id=UserId(uuid4()),
            email="member@example.com",
        )

        with pytest.raises(ValueError):
            member.change_role(TeamRole.OWNER)
        assert member.role == TeamRole.MEMBER
