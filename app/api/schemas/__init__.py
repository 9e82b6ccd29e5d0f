"""
API Schemas - DTOs for REST API following hexagonal architecture.

This module contains all request/response models for the API layer.
These are separated from domain entities and persistence tables.

All schemas use Pydantic BaseModel and are organized by feature area:
- account_schemas: Account, plan and usage DTOs
- activity_log_schemas: Workspace audit trail DTOs
- custom_field_schemas: Custom field definition and template DTOs
- cv_schemas: CV upload, listing and metadata DTOs
- eea_schemas: Employment Equity company, workforce and compliance DTOs
- job_spec_schemas: Job specification DTOs
- matching_schemas: CV-to-job match DTOs
- team_schemas: Team member and invitation DTOs
"""

from app.api.schemas.account_schemas import AccountOverviewResponse, PlanResponse
from app.api.schemas.activity_log_schemas import ActivityLogListResponse, ActivityLogResponse
from app.api.schemas.base import DeletionResponse, MessageResponse
from app.api.schemas.custom_field_schemas import (
    CustomFieldCreate,
    CustomFieldResponse,
    CustomFieldUpdate,
    TemplateResponse,
)
from app.api.schemas.cv_schemas import (
    BulkUploadResponse,
    CustomFieldValuesUpdate,
    CVListResponse,
    CVMetadataSchema,
    CVResponse,
    ParsingFailedRequest,
    StoredMatchResponse,
)
from app.api.schemas.eea_schemas import (
    CompanyCreate,
    CompanyResponse,
    CompanyUpdate,
    ComplianceReportResponse,
    ComplianceSummaryResponse,
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    HiringImpactRequest,
    HiringImpactResponse,
    HiringRecommendationSchema,
    ImportResponse,
    IncomeDifferentialResponse,
    SectorTargetsResponse,
    TerminateRequest,
    TerminationImpactRequest,
    TerminationImpactResponse,
)
from app.api.schemas.job_spec_schemas import JobSpecCreate, JobSpecResponse, JobSpecUpdate
from app.api.schemas.matching_schemas import BatchMatchResponse, MatchResultResponse
from app.api.schemas.team_schemas import (
    InviteCreate,
    InviteDetailsResponse,
    InviteResponse,
    RoleUpdate,
    TeamAccessResponse,
    TeamMemberResponse,
    TeamRosterResponse,
)

__all__ = [
    # Shared
    "MessageResponse",
    "DeletionResponse",
    # Accounts
    "AccountOverviewResponse",
    "PlanResponse",
    # Activity logs
    "ActivityLogResponse",
    "ActivityLogListResponse",
    # Custom fields
    "CustomFieldCreate",
    "CustomFieldUpdate",
    "CustomFieldResponse",
    "TemplateResponse",
    # CVs
    "CVMetadataSchema",
    "CVResponse",
    "CVListResponse",
    "BulkUploadResponse",
    "ParsingFailedRequest",
    "CustomFieldValuesUpdate",
    "StoredMatchResponse",
    # EEA
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyResponse",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeResponse",
    "TerminateRequest",
    "ImportResponse",
    "SectorTargetsResponse",
    "ComplianceReportResponse",
    "ComplianceSummaryResponse",
    "HiringRecommendationSchema",
    "HiringImpactRequest",
    "HiringImpactResponse",
    "TerminationImpactRequest",
    "TerminationImpactResponse",
    "IncomeDifferentialResponse",
    # Job specs
    "JobSpecCreate",
    "JobSpecUpdate",
    "JobSpecResponse",
    # Matching
    "MatchResultResponse",
    "BatchMatchResponse",
    # Teams
    "InviteCreate",
    "InviteResponse",
    "InviteDetailsResponse",
    "RoleUpdate",
    "TeamMemberResponse",
    "TeamRosterResponse",
    "TeamAccessResponse",
]
