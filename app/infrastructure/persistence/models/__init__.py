"""
Infrastructure persistence models module.

Importing this package registers every table on ``SQLModel.metadata``.
"""

from app.infrastructure.persistence.models.account_table import UserAccountTable
from app.infrastructure.persistence.models.activity_log_table import ActivityLogTable
from app.infrastructure.persistence.models.custom_field_table import CustomFieldTable
from app.infrastructure.persistence.models.cv_table import CVTable
from app.infrastructure.persistence.models.eea_tables import CompanyTable, EmployeeTable, SectorTargetTable
from app.infrastructure.persistence.models.job_spec_table import JobSpecTable
from app.infrastructure.persistence.models.team_tables import TeamInviteTable, TeamMemberTable

__all__ = [
    "UserAccountTable",
    "ActivityLogTable",
    "CustomFieldTable",
    "CVTable",
    "CompanyTable",
    "EmployeeTable",
    "SectorTargetTable",
    "JobSpecTable",
    "TeamInviteTable",
    "TeamMemberTable",
]
