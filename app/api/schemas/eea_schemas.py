"""
Employment Equity API schemas.

Request models accept enum values as plain strings; the domain entities
normalise and validate them. Compliance responses are read directly from the
compliance engine's result objects.
"""

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import ApiSchema, id_str
from app.domain.entities.employment_equity import Company, Employee
from app.domain.services.eea.constants import ComplianceStatus


# ---------------------------------------------------------------------------
# Company
# ---------------------------------------------------------------------------

class CompanyFields(BaseModel):
    dti_registration_name: Optional[str] = None
    dti_registration_number: Optional[str] = None
    paye_sars_number: Optional[str] = None
    uif_reference_number: Optional[str] = None
    ee_reference_number: Optional[str] = None
    eap_type: Optional[str] = Field(None, description="NATIONAL or PROVINCIAL")
    province: Optional[str] = None
    reporting_period_from: Optional[date] = None
    reporting_period_to: Optional[date] = None
    plan_duration_from: Optional[date] = None
    plan_duration_to: Optional[date] = None


class CompanyCreate(CompanyFields):
    name: str = Field(..., min_length=1, max_length=200)
    sector: str = Field(..., description="Economic sector code, e.g. FINANCIAL_INSURANCE")


class CompanyUpdate(CompanyFields):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    sector: Optional[str] = None


class CompanyResponse(BaseModel):
    id: str
    name: str
    sector: str
    dti_registration_name: Optional[str] = None
    dti_registration_number: Optional[str] = None
    paye_sars_number: Optional[str] = None
    uif_reference_number: Optional[str] = None
    ee_reference_number: Optional[str] = None
    eap_type: str
    province: Optional[str] = None
    reporting_period_from: Optional[date] = None
    reporting_period_to: Optional[date] = None
    plan_duration_from: Optional[date] = None
    plan_duration_to: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyResponse":
        return cls(
            id=id_str(company.id),
            name=company.name,
            sector=company.sector.value,
            dti_registration_name=company.dti_registration_name,
            dti_registration_number=company.dti_registration_number,
            paye_sars_number=company.paye_sars_number,
            uif_reference_number=company.uif_reference_number,
            ee_reference_number=company.ee_reference_number,
            eap_type=company.eap_type.value,
            province=company.province.value if company.province else None,
            reporting_period_from=company.reporting_period_from,
            reporting_period_to=company.reporting_period_to,
            plan_duration_from=company.plan_duration_from,
            plan_duration_to=company.plan_duration_to,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )


# ---------------------------------------------------------------------------
# Employees
# ---------------------------------------------------------------------------

class EmployeeFields(BaseModel):
    initials: Optional[str] = None
    nationality: Optional[str] = None
    is_foreign_national: Optional[bool] = None
    id_number: Optional[str] = None
    passport_number: Optional[str] = None
    has_disability: Optional[bool] = None
    disability_type: Optional[str] = None
    employment_date: Optional[date] = None
    position: Optional[str] = None
    annual_variable_income: Optional[float] = Field(None, ge=0)


class EmployeeCreate(EmployeeFields):
    employee_number: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    gender: str
    race: str
    occupational_level: str
    annual_fixed_income: float = Field(..., gt=0)


class EmployeeUpdate(EmployeeFields):
    employee_number: Optional[str] = Field(None, min_length=1, max_length=50)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    gender: Optional[str] = None
    race: Optional[str] = None
    occupational_level: Optional[str] = None
    annual_fixed_income: Optional[float] = Field(None, gt=0)
    status: Optional[str] = None


class EmployeeResponse(BaseModel):
    id: str
    company_id: str
    employee_number: str
    first_name: str
    last_name: str
    full_name: str
    initials: Optional[str] = None
    gender: str
    race: str
    nationality: str
    is_foreign_national: bool
    id_number: Optional[str] = None
    passport_number: Optional[str] = None
    has_disability: bool
    disability_type: Optional[str] = None
    occupational_level: str
    employment_date: Optional[date] = None
    position: Optional[str] = None
    annual_fixed_income: float
    annual_variable_income: Optional[float] = None
    status: str
    termination_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=id_str(employee.id),
            company_id=id_str(employee.company_id),
            employee_number=employee.employee_number,
            first_name=employee.first_name,
            last_name=employee.last_name,
            full_name=employee.full_name,
            initials=employee.initials,
            gender=employee.gender.value,
            race=employee.race.value,
            nationality=employee.nationality,
            is_foreign_national=employee.is_foreign_national,
            id_number=employee.id_number,
            passport_number=employee.passport_number,
            has_disability=employee.has_disability,
            disability_type=employee.disability_type.value if employee.disability_type else None,
            occupational_level=employee.occupational_level.value,
            employment_date=employee.employment_date,
            position=employee.position,
            annual_fixed_income=employee.annual_fixed_income,
            annual_variable_income=employee.annual_variable_income,
            status=employee.status.value,
            termination_date=employee.termination_date,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )


class TerminateRequest(BaseModel):
    termination_date: Optional[date] = Field(None, description="Defaults to today")


class ImportResponse(BaseModel):
    success: bool = True
    created: int
    updated: int
    total: int


class SectorTargetsResponse(BaseModel):
    sector: str
    targets: Dict[str, float] = Field(default_factory=dict, description="Designated-group target % per level")


# ---------------------------------------------------------------------------
# Compliance
# ---------------------------------------------------------------------------

class DemographicBreakdownSchema(ApiSchema):
    AM: int = 0
    AF: int = 0
    CM: int = 0
    CF: int = 0
    IM: int = 0
    IF: int = 0
    WM: int = 0
    WF: int = 0
    foreignMale: int = 0
    foreignFemale: int = 0


class LevelComplianceSchema(ApiSchema):
    level: str
    level_name: str
    total_employees: int
    designated: int
    designated_percentage: float
    current_percentage: float
    target: float
    target_percentage: float
    gap: float
    gap_count: int
    status: ComplianceStatus
    demographics: DemographicBreakdownSchema


class DisabilityComplianceSchema(ApiSchema):
    current_count: int
    current_percentage: float
    target: float
    gap: float
    status: ComplianceStatus


class ComplianceReportResponse(ApiSchema):
    company_id: Optional[str] = None
    company_name: Optional[str] = None
    report_date: datetime
    levels: List[LevelComplianceSchema] = Field(default_factory=list)
    total_employees: int
    designated_count: int
    designated_percentage: float
    disability_compliance: DisabilityComplianceSchema
    overall_status: ComplianceStatus


class ComplianceSummaryResponse(ApiSchema):
    total_levels: int
    compliant_levels: int
    near_compliant_levels: int
    non_compliant_levels: int
    compliance_rate: int
    total_employees: int
    total_designated: int
    overall_percentage: float
    total_hires_needed: int
    disability_status: ComplianceStatus
    overall_status: ComplianceStatus


class HiringRecommendationSchema(ApiSchema):
    type: str
    level: str
    count: int
    priority: str
    message: str
    recommended_groups: List[str] = Field(default_factory=list)


class ComplianceSnapshotSchema(ApiSchema):
    total_employees: int
    designated: int
    percentage: float
    gap: float
    status: ComplianceStatus


class HiringImpactRequest(BaseModel):
    occupational_level: str
    race: str
    gender: str
    has_disability: bool = False
    count: int = Field(1, ge=1, le=1000)


class HiringImpactResponse(ApiSchema):
    level: str
    race: str
    gender: str
    has_disability: bool
    number_of_hires: int
    current: ComplianceSnapshotSchema
    predicted: ComplianceSnapshotSchema
    improvement: float


class TerminationImpactRequest(BaseModel):
    employee_id: str


class TerminationImpactResponse(ApiSchema):
    level: str
    employee_id: str
    race: str
    gender: str
    current: ComplianceSnapshotSchema
    predicted: ComplianceSnapshotSchema
    impact: float


class IncomeDifferentialSchema(ApiSchema):
    level: Optional[str] = None
    level_name: str
    designated_count: int
    non_designated_count: int
    designated_average: float
    non_designated_average: float
    differential_percentage: float
    within_tolerance: bool


class IncomeDifferentialResponse(ApiSchema):
    overall: IncomeDifferentialSchema
    levels: List[IncomeDifferentialSchema] = Field(default_factory=list)
    within_tolerance: bool


__all__ = [
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
]
