"""PostgreSQL repository adapters implementing the domain repository contracts."""

from app.infrastructure.persistence.repositories.account_repository import PostgresUserAccountRepository
from app.infrastructure.persistence.repositories.activity_log_repository import PostgresActivityLogRepository
from app.infrastructure.persistence.repositories.custom_field_repository import PostgresCustomFieldRepository
from app.infrastructure.persistence.repositories.cv_repository import PostgresCVRepository
from app.infrastructure.persistence.repositories.eea_repository import (
    PostgresCompanyRepository,
    PostgresEmployeeRepository,
    PostgresSectorTargetRepository,
)
from app.infrastructure.persistence.repositories.job_spec_repository import PostgresJobSpecRepository
from app.infrastructure.persistence.repositories.team_repository import (
    PostgresTeamInviteRepository,
    PostgresTeamMemberRepository,
)

__all__ = [
    "PostgresUserAccountRepository",
    "PostgresActivityLogRepository",
    "PostgresCustomFieldRepository",
    "PostgresCVRepository",
    "PostgresCompanyRepository",
    "PostgresEmployeeRepository",
    "PostgresSectorTargetRepository",
    "PostgresJobSpecRepository",
    "PostgresTeamInviteRepository",
    "PostgresTeamMemberRepository",
]
