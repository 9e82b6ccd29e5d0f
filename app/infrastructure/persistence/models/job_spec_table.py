"""SQLModel table for job specifications."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlmodel import Field

from app.infrastructure.persistence.models.base import AuditableModel, create_owner_id_column


class JobSpecTable(AuditableModel, table=True):
    """Job specification owned by a workspace."""

    __tablename__ = "job_specs"

    owner_id: UUID = Field(
        sa_column=create_owner_id_column(),
        description="Workspace owner"
    )

    __table_args__ = (
        Index("idx_job_specs_owner_created", "owner_id", "created_at"),
    )

    title: str = Field(sa_column=Column(String(200), nullable=False))
    location: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    location_type: str = Field(
        default="onsite",
        sa_column=Column(String(20), nullable=False, default="onsite"),
        description="onsite, hybrid or remote"
    )
    department: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    industry: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    min_experience: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    max_experience: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    required_skills: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list),
    )
    preferred_skills: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list),
    )
    education: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    gender: Optional[str] = Field(default=None, sa_column=Column(String(20), nullable=True))
    race: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    min_age: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    max_age: Optional[int] = Field(default=None, sa_column=Column(Integer, nullable=True))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    is_active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True, index=True),
    )


__all__ = ["JobSpecTable"]
