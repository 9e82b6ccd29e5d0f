"""Mappers for team memberships and invitations."""

from __future__ import annotations

from app.domain.entities.team import InviteStatus, TeamInvite, TeamMember, TeamRole
from app.domain.value_objects import TeamInviteId, TeamMemberId, UserId
from app.infrastructure.persistence.models.team_tables import TeamInviteTable, TeamMemberTable


class TeamMemberMapper:
    """Maps between TeamMember entities and TeamMemberTable rows."""

    @staticmethod
    def to_domain(table: TeamMemberTable) -> TeamMember:
        return TeamMember(
            id=TeamMemberId(table.id),
            owner_id=UserId(table.owner_id),
            user_id=UserId(table.user_id),
            email=table.email,
            role=TeamRole(table.role),
            display_name=table.display_name,
            joined_at=table.joined_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: TeamMember) -> TeamMemberTable:
        return TeamMemberTable(
            id=entity.id.value,
            owner_id=entity.owner_id.value,
            user_id=entity.user_id.value,
            email=entity.email,
            role=entity.role.value,
            display_name=entity.display_name,
            joined_at=entity.joined_at,
            created_at=entity.joined_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def update_table_from_domain(table: TeamMemberTable, entity: TeamMember) -> None:
        table.role = entity.role.value
        table.display_name = entity.display_name
        table.email = entity.email
        table.updated_at = entity.updated_at


class TeamInviteMapper:
    """Maps between TeamInvite entities and TeamInviteTable rows."""

    @staticmethod
    def to_domain(table: TeamInviteTable) -> TeamInvite:
        return TeamInvite(
            id=TeamInviteId(table.id),
            owner_id=UserId(table.owner_id),
            email=table.email,
            role=TeamRole(table.role),
            invited_by=UserId(table.invited_by),
            owner_name=table.owner_name,
            status=InviteStatus(table.status),
            expires_at=table.expires_at,
            created_at=table.created_at,
            accepted_at=table.accepted_at,
            accepted_by=UserId(table.accepted_by) if table.accepted_by else None,
        )

    @staticmethod
    def to_table(entity: TeamInvite) -> TeamInviteTable:
        table = TeamInviteTable(
            id=entity.id.value,
            owner_id=entity.owner_id.value,
            email=entity.email,
            role=entity.role.value,
            invited_by=entity.invited_by.value,
            owner_name=entity.owner_name,
            expires_at=entity.expires_at,
            created_at=entity.created_at,
        )
        TeamInviteMapper.update_table_from_domain(table, entity)
        return table

    @staticmethod
    def update_table_from_domain(table: TeamInviteTable, entity: TeamInvite) -> None:
        table.status = entity.status.value
        table.accepted_at = entity.accepted_at
        table.accepted_by = entity.accepted_by.value if entity.accepted_by else None
        table.update_timestamp()


__all__ = ["TeamMemberMapper", "TeamInviteMapper"]
