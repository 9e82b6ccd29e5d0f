"""Application service dependency containers."""

from .account_dependencies import AccountDependencies
from .activity_log_dependencies import ActivityLogDependencies
from .custom_field_dependencies import CustomFieldDependencies
from .cv_dependencies import CVDependencies
from .eea_dependencies import EEADependencies
from .job_spec_dependencies import JobSpecDependencies
from .matching_dependencies import MatchingDependencies
from .team_dependencies import TeamDependencies

__all__ = [
    "AccountDependencies",
    "ActivityLogDependencies",
    "CustomFieldDependencies",
    "CVDependencies",
    "EEADependencies",
    "JobSpecDependencies",
    "MatchingDependencies",
    "TeamDependencies",
]
