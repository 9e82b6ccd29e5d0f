"""Infrastructure provider accessors package."""

from .database_provider import get_database_manager, reset_database_manager  # noqa: F401
from .notification_provider import (  # noqa: F401
    get_notification_service,
    reset_notification_service,
)
from .repository_provider import (  # noqa: F401
    get_activity_log_repository,
    get_company_repository,
    get_custom_field_repository,
    get_cv_repository,
    get_employee_repository,
    get_job_spec_repository,
    get_sector_target_repository,
    get_team_invite_repository,
    get_team_member_repository,
    get_user_account_repository,
    reset_repositories,
)
from .storage_provider import get_file_storage, reset_file_storage  # noqa: F401


async def reset_all_providers() -> None:
    """Reset every cached provider; used at shutdown and between tests."""
    await reset_repositories()
    await reset_notification_service()
    await reset_file_storage()
    await reset_database_manager()


__all__ = [
    "get_database_manager",
    "reset_database_manager",
    "get_notification_service",
    "reset_notification_service",
    "get_activity_log_repository",
    "get_company_repository",
    "get_custom_field_repository",
    "get_cv_repository",
    "get_employee_repository",
    "get_job_spec_repository",
    "get_sector_target_repository",
    "get_team_invite_repository",
    "get_team_member_repository",
    "get_user_account_repository",
    "reset_repositories",
    "get_file_storage",
    "reset_file_storage",
    "reset_all_providers",
]
