"""Domain repository contracts for team members and invitations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.team import TeamInvite, TeamMember
from app.domain.value_objects import TeamInviteId, TeamMemberId, UserId


class ITeamMemberRepository(ABC):
    """Persistence operations for team memberships."""

    @abstractmethod
    async def get_by_id(self, member_id: TeamMemberId, owner_id: UserId) -> Optional[TeamMember]:
        """Load a membership within the owner's team."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_user(self, user_id: UserId) -> Optional[TeamMember]:
        """Find the membership of a user in any team."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_email(self, owner_id: UserId, email: str) -> Optional[TeamMember]:
        """Find a member of the owner's team by email."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_owner(self, owner_id: UserId) -> List[TeamMember]:
        """List members of the owner's team, earliest joined first."""
        raise NotImplementedError

    @abstractmethod
    async def count_by_owner(self, owner_id: UserId) -> int:
        """Count members of the owner's team."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, member: TeamMember) -> TeamMember:
        """Insert or update a membership."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, member_id: TeamMemberId, owner_id: UserId) -> bool:
        """Remove a membership."""
        raise NotImplementedError


class ITeamInviteRepository(ABC):
    """Persistence operations for team invitations."""

    @abstractmethod
    async def get_by_id(self, invite_id: TeamInviteId) -> Optional[TeamInvite]:
        """Load an invitation by identifier regardless of owner."""
        raise NotImplementedError

    @abstractmethod
    async def find_pending(self, owner_id: UserId, email: str) -> Optional[TeamInvite]:
        """Find a pending invitation for ``email`` in the owner's team."""
        raise NotImplementedError

    @abstractmethod
    async def list_pending(self, owner_id: UserId) -> List[TeamInvite]:
        """List pending invitations, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def count_pending(self, owner_id: UserId) -> int:
        """Count pending invitations for team limit checks."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, invite: TeamInvite) -> TeamInvite:
        """Insert or update an invitation."""
        raise NotImplementedError


__all__ = ["ITeamMemberRepository", "ITeamInviteRepository"]
