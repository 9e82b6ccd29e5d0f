"""Team collaboration: workspace members and pending invitations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from app.domain.value_objects import TeamInviteId, TeamMemberId, UserId


class TeamRole(str, Enum):
    """Roles a user can hold inside a workspace."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"

    @classmethod
    def assignable(cls, value: str) -> "TeamRole":
        """Parse a role that can be granted to an invited member."""
        try:
            role = cls((value or "").strip().lower())
        except ValueError:
            role = None
        if role not in (cls.ADMIN, cls.MEMBER):
            raise ValueError("Role must be either 'admin' or 'member'")
        return role


class InviteStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


@dataclass
class TeamMember:
    """Membership of a user in another account's workspace."""

    id: TeamMemberId
    owner_id: UserId
    user_id: UserId
    email: str
    role: TeamRole = TeamRole.MEMBER
    display_name: Optional[str] = None
    joined_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def change_role(self, role: TeamRole) -> None:
        if role == TeamRole.OWNER:
            raise ValueError("Role must be either 'admin' or 'member'")
        self.role = role
        self.updated_at = datetime.utcnow()

    @property
    def is_admin(self) -> bool:
        return self.role == TeamRole.ADMIN


@dataclass
class TeamInvite:
    """Invitation for an email address to join a workspace."""

    id: TeamInviteId
    owner_id: UserId
    email: str
    role: TeamRole
    invited_by: UserId
    owner_name: Optional[str] = None
    status: InviteStatus = InviteStatus.PENDING
    expires_at: datetime = field(default_factory=lambda: datetime.utcnow() + timedelta(days=7))
    created_at: datetime = field(default_factory=datetime.utcnow)
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[UserId] = None

    def __post_init__(self):
        self.email = (self.email or "").strip().lower()
        if not self.email:
            raise ValueError("Invite email is required")

    @classmethod
    def create(
        cls,
        owner_id: UserId,
        email: str,
        role: TeamRole,
        owner_name: Optional[str] = None,
        expiry_days: int = 7,
    ) -> "TeamInvite":
        now = datetime.utcnow()
        return cls(
            id=TeamInviteId.generate(),
            owner_id=owner_id,
            email=email,
            role=role,
            invited_by=owner_id,
            owner_name=owner_name,
            expires_at=now + timedelta(days=expiry_days),
            created_at=now,
        )

    @property
    def is_pending(self) -> bool:
        return self.status == InviteStatus.PENDING

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.utcnow()) > self.expires_at

    def is_for(self, email: Optional[str]) -> bool:
        return (email or "").strip().lower() == self.email

    def accept(self, user_id: UserId) -> None:
        if not self.is_pending:
            raise ValueError("This invitation is no longer valid")
        self.status = InviteStatus.ACCEPTED
        self.accepted_at = datetime.utcnow()
        self.accepted_by = user_id

    def expire(self) -> None:
        self.status = InviteStatus.EXPIRED

    def cancel(self) -> None:
        if not self.is_pending:
            raise ValueError("Only pending invitations can be cancelled")
        self.status = InviteStatus.CANCELLED


__all__ = ["TeamRole", "InviteStatus", "TeamMember", "TeamInvite"]
