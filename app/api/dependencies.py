"""
API-specific dependencies for application services with dependency injection.

This module provides FastAPI dependency injection helpers for application services,
bridging the API layer with the hexagonal architecture's application services.
"""

from typing import Annotated

import structlog
from fastapi import Depends, HTTPException

from app.application.account_service import AccountApplicationService
from app.application.activity_log_service import ActivityLogApplicationService
from app.application.custom_field_service import CustomFieldApplicationService
from app.application.cv_service import CVApplicationService
from app.application.eea_import_service import EEAImportApplicationService
from app.application.eea_report_service import EEAReportApplicationService
from app.application.eea_service import EEAApplicationService
from app.application.job_spec_service import JobSpecApplicationService
from app.application.matching_service import MatchingApplicationService
from app.application.team_service import TeamApplicationService
from app.domain.exceptions import (
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    DomainException,
    EmployeeImportError,
    LimitExceededError,
    NotFoundError,
    ProcessingError,
    ValidationError,
)
from app.infrastructure.factories.account_dependency_factory import get_account_dependencies
from app.infrastructure.factories.activity_log_dependency_factory import get_activity_log_dependencies
from app.infrastructure.factories.custom_field_dependency_factory import get_custom_field_dependencies
from app.infrastructure.factories.cv_dependency_factory import get_cv_dependencies
from app.infrastructure.factories.eea_dependency_factory import get_eea_dependencies
from app.infrastructure.factories.job_spec_dependency_factory import get_job_spec_dependencies
from app.infrastructure.factories.matching_dependency_factory import get_matching_dependencies
from app.infrastructure.factories.team_dependency_factory import get_team_dependencies

logger = structlog.get_logger(__name__)


# Application Service Dependencies
async def get_account_service() -> AccountApplicationService:
    """Create AccountApplicationService with injected dependencies."""
    try:
        dependencies = await get_account_dependencies()
        return AccountApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create account service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Account service unavailable"
        ) from e


async def get_activity_log_service() -> ActivityLogApplicationService:
    """Create ActivityLogApplicationService with injected dependencies."""
    try:
        dependencies = await get_activity_log_dependencies()
        return ActivityLogApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create activity log service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Activity log service unavailable"
        ) from e


async def get_cv_service() -> CVApplicationService:
    """Create CVApplicationService with injected dependencies."""
    try:
        dependencies = await get_cv_dependencies()
        return CVApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create CV service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="CV service unavailable"
        ) from e


async def get_job_spec_service() -> JobSpecApplicationService:
    """Create JobSpecApplicationService with injected dependencies."""
    try:
        dependencies = await get_job_spec_dependencies()
        return JobSpecApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create job spec service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Job spec service unavailable"
        ) from e


async def get_matching_service() -> MatchingApplicationService:
    """Create MatchingApplicationService with injected dependencies."""
    try:
        dependencies = await get_matching_dependencies()
        return MatchingApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create matching service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Matching service unavailable"
        ) from e


async def get_team_service() -> TeamApplicationService:
    """Create TeamApplicationService with injected dependencies."""
    try:
        dependencies = await get_team_dependencies()
        return TeamApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create team service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Team service unavailable"
        ) from e


async def get_custom_field_service() -> CustomFieldApplicationService:
    """Create CustomFieldApplicationService with injected dependencies."""
    try:
        dependencies = await get_custom_field_dependencies()
        return CustomFieldApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create custom field service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="Custom field service unavailable"
        ) from e


async def get_eea_service() -> EEAApplicationService:
    """Create EEAApplicationService with injected dependencies."""
    try:
        dependencies = await get_eea_dependencies()
        return EEAApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create EEA service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="EEA service unavailable"
        ) from e


async def get_eea_import_service() -> EEAImportApplicationService:
    """Create EEAImportApplicationService with injected dependencies."""
    try:
        dependencies = await get_eea_dependencies()
        return EEAImportApplicationService(dependencies)
    except Exception as e:
        logger.error("Failed to create EEA import service", error=str(e))
        raise HTTPException(
            status_code=500,
            detail="EEA import service unavailable"
        ) from e


async def get_eea_report_service(
    eea_service: Annotated[EEAApplicationService, Depends(get_eea_service)],
) -> EEAReportApplicationService:
    """Create EEAReportApplicationService on top of the EEA service."""
    return EEAReportApplicationService(eea_service)


# Type aliases for cleaner dependency injection
AccountServiceDep = Annotated[AccountApplicationService, Depends(get_account_service)]
ActivityLogServiceDep = Annotated[ActivityLogApplicationService, Depends(get_activity_log_service)]
CVServiceDep = Annotated[CVApplicationService, Depends(get_cv_service)]
JobSpecServiceDep = Annotated[JobSpecApplicationService, Depends(get_job_spec_service)]
MatchingServiceDep = Annotated[MatchingApplicationService, Depends(get_matching_service)]
TeamServiceDep = Annotated[TeamApplicationService, Depends(get_team_service)]
CustomFieldServiceDep = Annotated[CustomFieldApplicationService, Depends(get_custom_field_service)]
EEAServiceDep = Annotated[EEAApplicationService, Depends(get_eea_service)]
EEAImportServiceDep = Annotated[EEAImportApplicationService, Depends(get_eea_import_service)]
EEAReportServiceDep = Annotated[EEAReportApplicationService, Depends(get_eea_report_service)]


def map_domain_exception_to_http(exception: Exception) -> HTTPException:
    """Map domain exceptions to appropriate HTTP responses."""

    # Row-level import errors - 400 with the individual messages
    if isinstance(exception, EmployeeImportError):
        return HTTPException(
            status_code=400,
            detail={"message": str(exception), "errors": exception.errors},
        )

    # NotFoundError hierarchy - 404 Not Found
    elif isinstance(exception, NotFoundError):
        return HTTPException(status_code=404, detail=str(exception))

    # ValidationError hierarchy - 400 Bad Request
    elif isinstance(exception, ValidationError):
        return HTTPException(status_code=400, detail=str(exception))

    # AuthorizationError hierarchy - 403 Forbidden
    elif isinstance(exception, AuthorizationError):
        return HTTPException(status_code=403, detail=str(exception))

    # ProcessingError hierarchy - 422 Unprocessable Entity
    elif isinstance(exception, ProcessingError):
        return HTTPException(status_code=422, detail=str(exception))

    # ConflictError - 409 Conflict
    elif isinstance(exception, ConflictError):
        return HTTPException(status_code=409, detail=str(exception))

    # Plan limits - 429 Too Many Requests
    elif isinstance(exception, LimitExceededError):
        return HTTPException(status_code=429, detail=str(exception))

    # ConfigurationError - 500 Internal Server Error (configuration issues)
    elif isinstance(exception, ConfigurationError):
        logger.error("Configuration error", error=str(exception))
        return HTTPException(status_code=500, detail="Service configuration error")

    # Generic DomainException - 500 Internal Server Error
    elif isinstance(exception, DomainException):
        logger.error("Unhandled domain exception", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Domain operation failed")

    else:
        # Non-domain exception - log and return generic error
        logger.error("Non-domain exception in mapping", exception_type=type(exception).__name__, error=str(exception))
        return HTTPException(status_code=500, detail="Internal server error")


__all__ = [
    "get_account_service",
    "get_activity_log_service",
    "get_cv_service",
    "get_job_spec_service",
    "get_matching_service",
    "get_team_service",
    "get_custom_field_service",
    "get_eea_service",
    "get_eea_import_service",
    "get_eea_report_service",
    "AccountServiceDep",
    "ActivityLogServiceDep",
    "CVServiceDep",
    "JobSpecServiceDep",
    "MatchingServiceDep",
    "TeamServiceDep",
    "CustomFieldServiceDep",
    "EEAServiceDep",
    "EEAImportServiceDep",
    "EEAReportServiceDep",
    "map_domain_exception_to_http",
]
