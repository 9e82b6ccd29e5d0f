"""Dependency container for the custom field application service."""

from dataclasses import dataclass

from app.domain.repositories.custom_field_repository import ICustomFieldRepository


@dataclass
class CustomFieldDependencies:
    """Container for custom field service dependencies."""

    custom_field_repository: ICustomFieldRepository


__all__ = ["CustomFieldDependencies"]
