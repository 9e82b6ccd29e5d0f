"""SQLModel tables for team memberships and invitations."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import Column, DateTime, Index, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID
from sqlmodel import Field

from app.infrastructure.persistence.models.base import IdentifiedModel, create_owner_id_column


class TeamMemberTable(IdentifiedModel, table=True):
    """Membership of a user in an owner's team. A user belongs to at most one team."""

    __tablename__ = "team_members"

    owner_id: UUID = Field(
        sa_column=create_owner_id_column(),
        description="Team owner"
    )

    __table_args__ = (
        UniqueConstraint("user_id", name="uq_team_members_user"),
        Index("idx_team_members_owner_email", "owner_id", "email"),
    )

    user_id: UUID = Field(sa_column=Column(PostgreSQLUUID(as_uuid=True), nullable=False))
    email: str = Field(sa_column=Column(String(255), nullable=False))
    role: str = Field(default="member", sa_column=Column(String(20), nullable=False, default="member"))
    display_name: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    joined_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
    )


class TeamInviteTable(IdentifiedModel, table=True):
    """Invitation to join an owner's team."""

    __tablename__ = "team_invites"

    owner_id: UUID = Field(
        sa_column=create_owner_id_column(),
        description="Team owner"
    )

    __table_args__ = (
        Index("idx_team_invites_owner_status", "owner_id", "status"),
        Index("idx_team_invites_email", "email"),
    )

    email: str = Field(sa_column=Column(String(255), nullable=False))
    role: str = Field(default="member", sa_column=Column(String(20), nullable=False, default="member"))
    invited_by: UUID = Field(sa_column=Column(PostgreSQLUUID(as_uuid=True), nullable=False))
    owner_name: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    status: str = Field(default="pending", sa_column=Column(String(20), nullable=False, default="pending"))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))
    accepted_by: Optional[UUID] = Field(
        default=None,
        sa_column=Column(PostgreSQLUUID(as_uuid=True), nullable=True),
    )


__all__ = ["TeamMemberTable", "TeamInviteTable"]
