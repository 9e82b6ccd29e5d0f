"""Mappers between domain entities and SQLModel table rows."""

from app.infrastructure.persistence.mappers.account_mapper import UserAccountMapper
from app.infrastructure.persistence.mappers.activity_log_mapper import ActivityLogMapper
from app.infrastructure.persistence.mappers.custom_field_mapper import CustomFieldMapper
from app.infrastructure.persistence.mappers.cv_mapper import CVMapper
from app.infrastructure.persistence.mappers.eea_mapper import CompanyMapper, EmployeeMapper, SectorTargetMapper
from app.infrastructure.persistence.mappers.job_spec_mapper import JobSpecMapper
from app.infrastructure.persistence.mappers.team_mapper import TeamInviteMapper, TeamMemberMapper

__all__ = [
    "UserAccountMapper",
    "ActivityLogMapper",
    "CustomFieldMapper",
    "CVMapper",
    "CompanyMapper",
    "EmployeeMapper",
    "SectorTargetMapper",
    "JobSpecMapper",
    "TeamInviteMapper",
    "TeamMemberMapper",
]
