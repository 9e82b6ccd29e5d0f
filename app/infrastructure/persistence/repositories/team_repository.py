"""PostgreSQL implementations of the team member and invite repositories."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import asc, desc, func
from sqlmodel import select

from app.domain.entities.team import InviteStatus, TeamInvite, TeamMember
from app.domain.repositories.team_repository import ITeamInviteRepository, ITeamMemberRepository
from app.domain.value_objects import TeamInviteId, TeamMemberId, UserId
from app.infrastructure.persistence.mappers.team_mapper import TeamInviteMapper, TeamMemberMapper
from app.infrastructure.persistence.models.team_tables import TeamInviteTable, TeamMemberTable
from app.infrastructure.persistence.repositories.base import PostgresRepositoryBase


class PostgresTeamMemberRepository(PostgresRepositoryBase, ITeamMemberRepository):

    async def get_by_id(self, member_id: TeamMemberId, owner_id: UserId) -> Optional[TeamMember]:
        async with self._session("get team member") as session:
            stmt = select(TeamMemberTable).where(
                TeamMemberTable.id == member_id.value,
                TeamMemberTable.owner_id == owner_id.value,
            )
            row = (await session.execute(stmt)).scalars().first()
            return TeamMemberMapper.to_domain(row) if row else None

    async def get_by_user(self, user_id: UserId) -> Optional[TeamMember]:
        async with self._session("get team membership") as session:
            stmt = select(TeamMemberTable).where(TeamMemberTable.user_id == user_id.value)
            row = (await session.execute(stmt)).scalars().first()
            return TeamMemberMapper.to_domain(row) if row else None

    async def get_by_email(self, owner_id: UserId, email: str) -> Optional[TeamMember]:
        async with self._session("get team member by email") as session:
            stmt = select(TeamMemberTable).where(
                TeamMemberTable.owner_id == owner_id.value,
                func.lower(TeamMemberTable.email) == (email or "").strip().lower(),
            )
            row = (await session.execute(stmt)).scalars().first()
            return TeamMemberMapper.to_domain(row) if row else None

    async def list_by_owner(self, owner_id: UserId) -> List[TeamMember]:
        async with self._session("list team members") as session:
            stmt = (
                select(TeamMemberTable)
                .where(TeamMemberTable.owner_id == owner_id.value)
                .order_by(asc(TeamMemberTable.joined_at))
            )
            rows = (await session.execute(stmt)).scalars().all()
        return [TeamMemberMapper.to_domain(row) for row in rows]

    async def count_by_owner(self, owner_id: UserId) -> int:
        async with self._session("count team members") as session:
            stmt = select(func.count()).select_from(TeamMemberTable).where(
                TeamMemberTable.owner_id == owner_id.value
            )
            return int((await session.execute(stmt)).scalar_one())

    async def save(self, member: TeamMember) -> TeamMember:
        async with self._session("save team member") as session:
            existing = await session.get(TeamMemberTable, member.id.value)
            if existing:
                TeamMemberMapper.update_table_from_domain(existing, member)
            else:
                session.add(TeamMemberMapper.to_table(member))
        return member

    async def delete(self, member_id: TeamMemberId, owner_id: UserId) -> bool:
        async with self._session("delete team member") as session:
            stmt = select(TeamMemberTable).where(
                TeamMemberTable.id == member_id.value,
                TeamMemberTable.owner_id == owner_id.value,
            )
            row = (await session.execute(stmt)).scalars().first()
            if not row:
                return False
            await session.delete(row)
            return True


class PostgresTeamInviteRepository(PostgresRepositoryBase, ITeamInviteRepository):

    @staticmethod
    def _pending(owner_id: UserId):
        return select(TeamInviteTable).where(
            TeamInviteTable.owner_id == owner_id.value,
            TeamInviteTable.status == InviteStatus.PENDING.value,
        )

    async def get_by_id(self, invite_id: TeamInviteId) -> Optional[TeamInvite]:
        async with self._session("get team invite") as session:
            row = await session.get(TeamInviteTable, invite_id.value)
            return TeamInviteMapper.to_domain(row) if row else None

    async def find_pending(self, owner_id: UserId, email: str) -> Optional[TeamInvite]:
        async with self._session("find pending invite") as session:
            stmt = self._pending(owner_id).where(TeamInviteTable.email == (email or "").strip().lower())
            row = (await session.execute(stmt)).scalars().first()
            return TeamInviteMapper.to_domain(row) if row else None

    async def list_pending(self, owner_id: UserId) -> List[TeamInvite]:
        async with self._session("list pending invites") as session:
            stmt = self._pending(owner_id).order_by(desc(TeamInviteTable.created_at))
            rows = (await session.execute(stmt)).scalars().all()
        return [TeamInviteMapper.to_domain(row) for row in rows]

    async def count_pending(self, owner_id: UserId) -> int:
        async with self._session("count pending invites") as session:
            stmt = select(func.count()).select_from(TeamInviteTable).where(
                TeamInviteTable.owner_id == owner_id.value,
                TeamInviteTable.status == InviteStatus.PENDING.value,
            )
            return int((await session.execute(stmt)).scalar_one())

    async def save(self, invite: TeamInvite) -> TeamInvite:
        async with self._session("save team invite") as session:
            existing = await session.get(TeamInviteTable, invite.id.value)
            if existing:
                TeamInviteMapper.update_table_from_domain(existing, invite)
            else:
                session.add(TeamInviteMapper.to_table(invite))
        return invite


__all__ = ["PostgresTeamMemberRepository", "PostgresTeamInviteRepository"]
