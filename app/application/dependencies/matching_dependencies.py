"""Dependency container for the matching application service."""

from dataclasses import dataclass

from app.domain.repositories.cv_repository import ICVRepository
from app.domain.repositories.job_spec_repository import IJobSpecRepository
from app.domain.services.matching_service import IMatchingService


@dataclass
class MatchingDependencies:
    """Container for matching workflow dependencies."""

    cv_repository: ICVRepository
    job_spec_repository: IJobSpecRepository
    matching_service: IMatchingService


__all__ = ["MatchingDependencies"]
