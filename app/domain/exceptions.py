"""
Domain-level exceptions for the hexagonal architecture.

These exceptions represent business rule violations and domain logic errors.
They should be mapped to appropriate HTTP responses in the API layer.
"""

from typing import List, Optional


class DomainException(Exception):
    """Base exception for all domain-level errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation rules are violated."""
    pass


class NotFoundError(DomainException):
    """Base exception for entities not found."""
    pass


class CVNotFoundError(NotFoundError):
    """Raised when a CV is not found."""
    pass


class JobSpecNotFoundError(NotFoundError):
    """Raised when a job specification is not found."""
    pass


class TeamMemberNotFoundError(NotFoundError):
    """Raised when a team member is not found."""
    pass


class TeamInviteNotFoundError(NotFoundError):
    """Raised when a team invite is not found."""
    pass


class CustomFieldNotFoundError(NotFoundError):
    """Raised when a custom field definition is not found."""
    pass


class CompanyNotFoundError(NotFoundError):
    """Raised when no EEA company profile exists for the workspace."""
    pass


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee is not found."""
    pass


class MatchResultNotFoundError(NotFoundError):
    """Raised when a CV has no stored match for a job specification."""
    pass


class AuthorizationError(DomainException):
    """Base exception for authorization errors."""
    pass


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""
    pass


class PlanFeatureUnavailableError(AuthorizationError):
    """Raised when the workspace plan does not include a feature."""

    def __init__(self, feature: str, plan: str):
        self.feature = feature
        self.plan = plan
        super().__init__(
            f"The {plan} plan does not include {feature.replace('_', ' ')}. Please upgrade your plan."
        )


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""
    pass


class ConcurrencyError(ConflictError):
    """Raised when concurrent operations conflict."""
    pass


class LimitExceededError(DomainException):
    """Raised when a plan or team limit would be exceeded."""

    def __init__(self, message: str, limit: Optional[int] = None):
        self.limit = limit
        super().__init__(message)


class ProcessingError(DomainException):
    """Base exception for processing errors."""
    pass


class RepositoryError(ProcessingError):
    """Raised when a persistence operation fails."""
    pass


class ReportGenerationError(ProcessingError):
    """Raised when a compliance report cannot be produced."""
    pass


class ConfigurationError(DomainException):
    """Raised when configuration is invalid or missing."""
    pass


class FileSizeExceededError(ValidationError):
    """Raised when uploaded file exceeds size limits."""

    def __init__(self, actual_size: int, max_size: int, filename: str = None):
        self.actual_size = actual_size
        self.max_size = max_size
        self.filename = filename

        size_mb = actual_size / (1024 * 1024)
        max_mb = max_size / (1024 * 1024)

        filename_str = f" '{filename}'" if filename else ""
        message = f"File{filename_str} size {size_mb:.2f}MB exceeds maximum allowed size of {max_mb:.2f}MB"
        super().__init__(message)


class InvalidFileError(ValidationError):
    """Raised when uploaded file is invalid or corrupted."""

    def __init__(self, filename: str = None, reason: str = None):
        self.filename = filename
        self.reason = reason

        filename_str = f" '{filename}'" if filename else ""
        reason_str = f": {reason}" if reason else ""
        message = f"Invalid file{filename_str}{reason_str}"
        super().__init__(message)


class EmployeeImportError(ValidationError):
    """Raised when an employee import contains invalid rows."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Import failed with {len(self.errors)} error(s)")


__all__ = [
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "CVNotFoundError",
    "JobSpecNotFoundError",
    "TeamMemberNotFoundError",
    "TeamInviteNotFoundError",
    "CustomFieldNotFoundError",
    "CompanyNotFoundError",
    "EmployeeNotFoundError",
    "MatchResultNotFoundError",
    "AuthorizationError",
    "InsufficientPermissionsError",
    "PlanFeatureUnavailableError",
    "ConflictError",
    "ConcurrencyError",
    "LimitExceededError",
    "ProcessingError",
    "RepositoryError",
    "ReportGenerationError",
    "ConfigurationError",
    "FileSizeExceededError",
    "InvalidFileError",
    "EmployeeImportError",
]
