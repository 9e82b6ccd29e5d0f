"""SQLModel table for the workspace activity log."""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Column, DateTime, Index, String
from sqlalchemy.dialects.postgresql import JSONB, UUID as PostgreSQLUUID
from sqlmodel import Field, SQLModel

from app.infrastructure.persistence.models.base import create_owner_id_column


class ActivityLogTable(SQLModel, table=True):
    """Append-only activity entry. Rows are never updated, so no updated_at column."""

    __tablename__ = "activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: UUID = Field(
        sa_column=create_owner_id_column(),
        description="Workspace owner"
    )

    __table_args__ = (
        Index("idx_activity_logs_owner_created", "owner_id", "created_at"),
    )

    user_id: UUID = Field(sa_column=Column(PostgreSQLUUID(as_uuid=True), nullable=False))
    user_email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    user_name: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    action: str = Field(sa_column=Column(String(50), nullable=False))
    resource_type: str = Field(sa_column=Column(String(30), nullable=False))
    resource_id: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))
    resource_name: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    role: str = Field(default="owner", sa_column=Column(String(20), nullable=False, default="owner"))
    is_team_member_action: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
    )
    details: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column("metadata", JSONB, nullable=False, default={}),
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
    )


__all__ = ["ActivityLogTable"]
