"""Domain entities exposed for application layer use."""

from .account import UserAccount
from .activity_log import ActivityAction, ActivityLogEntry, ResourceType
from .custom_field import (
    CUSTOM_FIELD_TEMPLATES,
    CustomFieldDefinition,
    CustomFieldTemplate,
    CustomFieldTemplateField,
    CustomFieldType,
)
from .cv import (
    ALLOWED_CV_EXTENSIONS,
    CV,
    CVMetadata,
    CVStatus,
    EducationEntry,
    ExperienceEntry,
    StoredMatch,
)
from .employment_equity import Company, Employee, SectorTarget
from .job_spec import JobSpec, LocationType
from .team import InviteStatus, TeamInvite, TeamMember, TeamRole

__all__ = [
    # Accounts
    "UserAccount",
    # Activity
    "ActivityAction",
    "ActivityLogEntry",
    "ResourceType",
    # Custom fields
    "CUSTOM_FIELD_TEMPLATES",
    "CustomFieldDefinition",
    "CustomFieldTemplate",
    "CustomFieldTemplateField",
    "CustomFieldType",
    # CVs
    "ALLOWED_CV_EXTENSIONS",
    "CV",
    "CVMetadata",
    "CVStatus",
    "EducationEntry",
    "ExperienceEntry",
    "StoredMatch",
    # Employment equity
    "Company",
    "Employee",
    "SectorTarget",
    # Job specs
    "JobSpec",
    "LocationType",
    # Teams
    "InviteStatus",
    "TeamInvite",
    "TeamMember",
    "TeamRole",
]
