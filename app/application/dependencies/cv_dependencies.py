"""Dependency container for the CV application service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.interfaces import IFileStorage
from app.domain.repositories.custom_field_repository import ICustomFieldRepository
from app.domain.repositories.cv_repository import ICVRepository
from app.domain.services.cv_filter_service import ICVFilterService

if TYPE_CHECKING:
    from app.application.activity_log_service import ActivityLogApplicationService


@dataclass
class CVDependencies:
    """Dependencies required by CVApplicationService."""

    cv_repository: ICVRepository
    custom_field_repository: ICustomFieldRepository
    file_storage: IFileStorage
    filter_service: ICVFilterService
    activity_logger: ActivityLogApplicationService
    max_file_size: int = 10 * 1024 * 1024


__all__ = ["CVDependencies"]
