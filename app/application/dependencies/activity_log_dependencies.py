"""Dependency container for the activity log application service."""

from dataclasses import dataclass

from app.domain.repositories.activity_log_repository import IActivityLogRepository


@dataclass
class ActivityLogDependencies:
    """Container for activity log service dependencies."""

    activity_log_repository: IActivityLogRepository
    page_limit: int = 100


__all__ = ["ActivityLogDependencies"]
