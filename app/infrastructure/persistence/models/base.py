"""
SQLModel base classes with timestamps, soft delete and audit columns.

Every table model inherits from one of these bases so that identifiers and
timestamps are declared the same way across the schema.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy import Column
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID
from sqlalchemy.ext.hybrid import hybrid_property
from sqlmodel import Field, SQLModel


class BaseModel(SQLModel):
    """Base SQLModel with shared configuration and export helpers."""

    model_config = {
        "arbitrary_types_allowed": True,
        "validate_assignment": True,
        "populate_by_name": True,
        "ignored_types": (hybrid_property,),
    }

    def dict_exclude_none(self, **kwargs) -> Dict[str, Any]:
        """Export to dict excluding None values."""
        return self.model_dump(exclude_none=True, **kwargs)


class TimestampedModel(BaseModel):
    """Base model with automatic timestamp management."""

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Record creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Record last update timestamp"
    )

    def update_timestamp(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.utcnow()


class IdentifiedModel(TimestampedModel):
    """Base model with a UUID primary key."""

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique identifier"
    )


class SoftDeleteModel(IdentifiedModel):
    """Model with soft delete columns."""

    is_deleted: bool = Field(
        default=False,
        description="Soft delete flag"
    )

    deleted_at: Optional[datetime] = Field(
        default=None,
        description="Soft delete timestamp"
    )

    def soft_delete(self) -> None:
        """Mark record as soft deleted."""
        self.is_deleted = True
        self.deleted_at = datetime.utcnow()
        self.update_timestamp()


class AuditableModel(SoftDeleteModel):
    """Model that records who created and last changed a row."""

    created_by: Optional[UUID] = Field(
        default=None,
        description="User who created the record"
    )

    updated_by: Optional[UUID] = Field(
        default=None,
        description="User who last updated the record"
    )


def create_owner_id_column(nullable: bool = False) -> Column:
    """
    Workspace owner column shared by every owner-scoped table.

    Each table model must declare its own column instance; SQLAlchemy
    columns cannot be shared between tables.
    """
    return Column(PostgreSQLUUID(as_uuid=True), nullable=nullable, index=True)


__all__ = [
    "BaseModel",
    "TimestampedModel",
    "IdentifiedModel",
    "SoftDeleteModel",
    "AuditableModel",
    "create_owner_id_column",
]
