"""Domain repository abstractions."""

from .account_repository import IUserAccountRepository
from .activity_log_repository import IActivityLogRepository
from .custom_field_repository import ICustomFieldRepository
from .cv_repository import ICVRepository
from .eea_repository import ICompanyRepository, IEmployeeRepository, ISectorTargetRepository
from .job_spec_repository import IJobSpecRepository
from .team_repository import ITeamInviteRepository, ITeamMemberRepository

__all__ = [
    "IUserAccountRepository",
    "IActivityLogRepository",
    "ICustomFieldRepository",
    "ICVRepository",
    "ICompanyRepository",
    "IEmployeeRepository",
    "ISectorTargetRepository",
    "IJobSpecRepository",
    "ITeamInviteRepository",
    "ITeamMemberRepository",
]
