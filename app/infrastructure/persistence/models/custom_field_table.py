"""SQLModel table for per-workspace custom field definitions."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, Integer, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import ARRAY
from sqlmodel import Field

from app.infrastructure.persistence.models.base import IdentifiedModel, create_owner_id_column


class CustomFieldTable(IdentifiedModel, table=True):
    """Custom field definition attached to a workspace's CVs."""

    __tablename__ = "custom_fields"

    owner_id: UUID = Field(
        sa_column=create_owner_id_column(),
        description="Workspace owner"
    )

    __table_args__ = (
        UniqueConstraint("owner_id", "name", name="uq_custom_fields_owner_name"),
    )

    name: str = Field(sa_column=Column(String(100), nullable=False), description="snake_case key")
    label: str = Field(sa_column=Column(String(200), nullable=False))
    field_type: str = Field(sa_column=Column(String(20), nullable=False))
    required: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    options: List[str] = Field(
        default_factory=list,
        sa_column=Column(ARRAY(String), nullable=False, default=list),
    )
    conditional_on: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))
    conditional_value: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    order: int = Field(default=0, sa_column=Column("display_order", Integer, nullable=False, default=0))


__all__ = ["CustomFieldTable"]
