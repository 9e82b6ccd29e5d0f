"""
SQLModel CV table with JSONB storage for parsed metadata and match results.

Parsed metadata, custom field values and per-job-spec match results are
schemaless documents, so they live in JSONB columns next to the
denormalised fields the list view needs.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field

from app.infrastructure.persistence.models.base import AuditableModel, create_owner_id_column


class CVTable(AuditableModel, table=True):
    """Uploaded CV within a workspace."""

    __tablename__ = "cvs"

    owner_id: UUID = Field(
        sa_column=create_owner_id_column(),
        description="Workspace owner"
    )

    __table_args__ = (
        Index("idx_cvs_owner_uploaded", "owner_id", "uploaded_at"),
        Index("idx_cvs_owner_status", "owner_id", "status"),
    )

    file_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Original file name"
    )
    file_type: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Lower-cased file extension"
    )
    file_size: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="File size in bytes"
    )
    storage_path: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Relative path inside the file store"
    )
    status: str = Field(
        default="uploaded",
        sa_column=Column(String(20), nullable=False, default="uploaded"),
        description="Processing status"
    )
    parsed: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
        description="Whether parsed metadata is available"
    )
    parsed_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column("metadata", JSONB, nullable=False, default={}),
        description="Structured data extracted from the CV"
    )
    custom_fields: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default={}),
        description="Custom field values keyed by field name"
    )
    match_results: Dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSONB, nullable=False, default={}),
        description="Stored match results keyed by job spec id"
    )
    processing_error: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Reason the last parse failed"
    )
    view_count: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Number of times the CV was opened"
    )
    last_viewed_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, nullable=True),
    )
    uploaded_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column(DateTime, nullable=False),
    )


__all__ = ["CVTable"]
