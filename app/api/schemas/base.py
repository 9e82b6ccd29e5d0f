"""
Shared API response types and base schemas.

This module contains common API response models that are used across multiple
endpoints. These are DTOs (Data Transfer Objects) in the API layer, separate
from domain entities and persistence tables.

Following hexagonal architecture principles:
- API Layer: HTTP request/response DTOs (this file)
- Domain Layer: Business entities and logic
- Infrastructure Layer: Database tables and adapters
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiSchema(BaseModel):
    """
    Base class for response DTOs read straight from domain objects.

    ``from_attributes`` lets nested domain dataclasses (compliance reports,
    match breakdowns) validate without hand-written converters.
    """

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class MessageResponse(BaseModel):
    """Simple acknowledgement returned by command endpoints."""

    success: bool = Field(default=True, description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable outcome")


class DeletionResponse(MessageResponse):
    """Acknowledgement for delete endpoints."""

    deleted_id: Optional[str] = Field(None, description="Identifier of the removed resource")
    details: Optional[Any] = Field(None, description="Operation-specific details")


def id_str(value: Any) -> Optional[str]:
    """Render a value-object identifier for JSON."""
    return str(value) if value is not None else None


__all__ = ["ApiSchema", "MessageResponse", "DeletionResponse", "id_str"]
