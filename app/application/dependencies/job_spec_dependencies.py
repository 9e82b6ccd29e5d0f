"""Dependency container for the job specification application service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.repositories.cv_repository import ICVRepository
from app.domain.repositories.job_spec_repository import IJobSpecRepository

if TYPE_CHECKING:
    from app.application.activity_log_service import ActivityLogApplicationService


@dataclass
class JobSpecDependencies:
    """Container for job specification service dependencies."""

    job_spec_repository: IJobSpecRepository
    cv_repository: ICVRepository
    activity_logger: ActivityLogApplicationService


__all__ = ["JobSpecDependencies"]
