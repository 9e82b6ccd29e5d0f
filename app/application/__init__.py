"""Application layer entry points.

Holds use-case services that coordinate domain logic with adapters.

Note: Services are imported directly from their modules to avoid circular imports.
Use:
    from app.application.cv_service import CVApplicationService
    from app.application.team_service import TeamApplicationService
    from app.application.eea_service import EEAApplicationService
"""

# Services are NOT imported here to avoid circular dependencies with API layer
# Import directly from submodules when needed

__all__ = [
    "AccountApplicationService",
    "ActivityLogApplicationService",
    "CVApplicationService",
    "CustomFieldApplicationService",
    "EEAApplicationService",
    "EEAImportApplicationService",
    "EEAReportApplicationService",
    "JobSpecApplicationService",
    "MatchingApplicationService",
    "TeamApplicationService",
]
