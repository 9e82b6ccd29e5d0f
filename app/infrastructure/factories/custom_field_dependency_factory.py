"""Concrete factory for creating CustomFieldApplicationService dependencies."""

from __future__ import annotations

from app.application.dependencies.custom_field_dependencies import CustomFieldDependencies
from app.infrastructure.providers.repository_provider import get_custom_field_repository


async def get_custom_field_dependencies() -> CustomFieldDependencies:
    """Construct dependencies for the custom field application service."""
    return CustomFieldDependencies(custom_field_repository=await get_custom_field_repository())


__all__ = ["get_custom_field_dependencies"]
