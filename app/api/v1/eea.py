"""
Employment Equity (EEA) API Endpoints

South African Employment Equity Act compliance for the caller's workspace:
- Company profile and sector targets
- Workforce records, including spreadsheet import
- Compliance reports, hiring recommendations and impact predictions
- EEA2 and EEA4 report exports
"""

from typing import Dict, List, Optional

import structlog
from fastapi import APIRouter, File, HTTPException, Path, Query, UploadFile, status
from fastapi.responses import Response

from app.api.dependencies import (
    EEAImportServiceDep,
    EEAReportServiceDep,
    EEAServiceDep,
    map_domain_exception_to_http,
)
from app.api.responses import attachment_headers
from app.api.schemas.base import DeletionResponse
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
from app.application.eea_report_service import MEDIA_TYPES, ReportFormat
from app.core.config import get_settings
from app.core.dependencies import WorkspaceDep
from app.domain.exceptions import DomainException
from app.domain.plans import PlanFeature
from app.domain.utils.file_size_validator import FileSizeValidator
from app.domain.value_objects import EmployeeId

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/eea", tags=["eea"])

IMPORT_TEMPLATE_FILE_NAME = "EEA_Employee_Import_Template.xlsx"


def _parse_employee_id(employee_id: str) -> EmployeeId:
    try:
        return EmployeeId(employee_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=404, detail=f"Employee {employee_id} not found")


# ---------------------------------------------------------------------------
# Company
# ---------------------------------------------------------------------------

@router.get("/company", response_model=Optional[CompanyResponse])
async def get_company(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> Optional[CompanyResponse]:
    """The workspace's company profile, or null before setup."""
    try:
        company = await eea_service.find_company(workspace)
        return CompanyResponse.from_entity(company) if company else None
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/company", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def setup_company(
    body: CompanyCreate,
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> CompanyResponse:
    try:
        company = await eea_service.setup_company(workspace, body.model_dump(exclude_none=True))
        return CompanyResponse.from_entity(company)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/company", response_model=CompanyResponse)
async def update_company(
    body: CompanyUpdate,
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> CompanyResponse:
    try:
        company = await eea_service.update_company(workspace, body.model_dump(exclude_unset=True))
        return CompanyResponse.from_entity(company)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/sector-targets", response_model=SectorTargetsResponse)
async def get_sector_targets(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> SectorTargetsResponse:
    try:
        company = await eea_service.get_company(workspace)
        targets = await eea_service.get_sector_targets(workspace)
        return SectorTargetsResponse(
            sector=company.sector.value,
            targets={level.value: target for level, target in targets.items()},
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


# ---------------------------------------------------------------------------
# Employees
# ---------------------------------------------------------------------------

@router.get("/employees", response_model=List[EmployeeResponse])
async def list_employees(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
    status_filter: Optional[str] = Query(None, alias="status", description="ACTIVE, TERMINATED or SUSPENDED"),
    occupational_level: Optional[str] = Query(None, description="Occupational level code"),
) -> List[EmployeeResponse]:
    try:
        employees = await eea_service.list_employees(
            workspace, status=status_filter, occupational_level=occupational_level
        )
        return [EmployeeResponse.from_entity(employee) for employee in employees]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/employees", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeCreate,
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> EmployeeResponse:
    try:
        employee = await eea_service.create_employee(workspace, body.model_dump(exclude_none=True))
        return EmployeeResponse.from_entity(employee)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/employees/import", response_model=ImportResponse)
async def import_employees(
    workspace: WorkspaceDep,
    import_service: EEAImportServiceDep,
    file: UploadFile = File(..., description="CSV or XLSX employee spreadsheet"),
) -> ImportResponse:
    """
    Import employees from a spreadsheet.

    The import is all-or-nothing: any invalid row rejects the file and the
    response lists every row error. Rows with an existing employee number
    update that employee.
    """
    settings = get_settings()
    try:
        content, _ = await FileSizeValidator.read_limited(file, settings.MAX_FILE_SIZE)
        result = await import_service.import_employees(workspace, file.filename or "", content)
        return ImportResponse(created=result.created, updated=result.updated, total=result.total)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Employee import failed", owner_id=str(workspace.owner_id), error=str(e))
        raise HTTPException(status_code=500, detail="Failed to import employees")


@router.get("/employees/import/template")
async def download_import_template(
    workspace: WorkspaceDep,
    import_service: EEAImportServiceDep,
) -> Response:
    """Blank XLSX import workbook with headers, a sample row and instructions."""
    try:
        workspace.require_feature(PlanFeature.EEA_COMPLIANCE)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)

    return Response(
        content=import_service.build_template(),
        media_type=MEDIA_TYPES[ReportFormat.XLSX],
        headers={"Content-Disposition": f'attachment; filename="{IMPORT_TEMPLATE_FILE_NAME}"'},
    )


@router.get("/employees/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
    employee_id: str = Path(..., description="Employee identifier"),
) -> EmployeeResponse:
    try:
        employee = await eea_service.get_employee(workspace, _parse_employee_id(employee_id))
        return EmployeeResponse.from_entity(employee)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/employees/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    body: EmployeeUpdate,
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
    employee_id: str = Path(..., description="Employee identifier"),
) -> EmployeeResponse:
    try:
        employee = await eea_service.update_employee(
            workspace,
            _parse_employee_id(employee_id),
            body.model_dump(exclude_unset=True),
        )
        return EmployeeResponse.from_entity(employee)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/employees/{employee_id}/terminate", response_model=EmployeeResponse)
async def terminate_employee(
    body: TerminateRequest,
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
    employee_id: str = Path(..., description="Employee identifier"),
) -> EmployeeResponse:
    try:
        employee = await eea_service.terminate_employee(
            workspace, _parse_employee_id(employee_id), body.termination_date
        )
        return EmployeeResponse.from_entity(employee)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/employees/{employee_id}", response_model=DeletionResponse)
async def delete_employee(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
    employee_id: str = Path(..., description="Employee identifier"),
) -> DeletionResponse:
    try:
        await eea_service.delete_employee(workspace, _parse_employee_id(employee_id))
        return DeletionResponse(message="Employee deleted", deleted_id=employee_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


# ---------------------------------------------------------------------------
# Compliance
# ---------------------------------------------------------------------------

@router.get("/compliance/report", response_model=Optional[ComplianceReportResponse])
async def get_compliance_report(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> Optional[ComplianceReportResponse]:
    """Compliance per occupational level, or null when there are no employees yet."""
    try:
        report = await eea_service.get_compliance_report(workspace)
        return ComplianceReportResponse.model_validate(report) if report else None
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/compliance/summary", response_model=Optional[ComplianceSummaryResponse])
async def get_compliance_summary(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> Optional[ComplianceSummaryResponse]:
    try:
        summary = await eea_service.get_compliance_summary(workspace)
        return ComplianceSummaryResponse.model_validate(summary) if summary else None
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/compliance/recommendations", response_model=Dict[str, List[HiringRecommendationSchema]])
async def get_hiring_recommendations(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> Dict[str, List[HiringRecommendationSchema]]:
    """Hiring recommendations for every level that misses its target."""
    try:
        recommendations = await eea_service.get_hiring_recommendations(workspace)
        return {
            level: [HiringRecommendationSchema.model_validate(item) for item in items]
            for level, items in recommendations.items()
        }
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/compliance/hiring-impact", response_model=HiringImpactResponse)
async def predict_hiring_impact(
    body: HiringImpactRequest,
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> HiringImpactResponse:
    try:
        impact = await eea_service.predict_hiring_impact(
            workspace,
            body.occupational_level,
            body.race,
            body.gender,
            has_disability=body.has_disability,
            count=body.count,
        )
        return HiringImpactResponse.model_validate(impact)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/compliance/termination-impact", response_model=TerminationImpactResponse)
async def predict_termination_impact(
    body: TerminationImpactRequest,
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> TerminationImpactResponse:
    try:
        impact = await eea_service.predict_termination_impact(workspace, _parse_employee_id(body.employee_id))
        return TerminationImpactResponse.model_validate(impact)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/compliance/income-differentials", response_model=IncomeDifferentialResponse)
async def get_income_differentials(
    workspace: WorkspaceDep,
    eea_service: EEAServiceDep,
) -> IncomeDifferentialResponse:
    try:
        report = await eea_service.get_income_differentials(workspace)
        return IncomeDifferentialResponse.model_validate(report)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

@router.get("/reports/{report_type}")
async def export_report(
    workspace: WorkspaceDep,
    report_service: EEAReportServiceDep,
    report_type: str = Path(..., description="EEA2 or EEA4"),
    file_format: str = Query("xlsx", alias="format", description="csv or xlsx"),
) -> Response:
    """Download an EEA2 workforce or EEA4 income differential report."""
    try:
        report = await report_service.export_report(workspace, report_type, file_format)
        logger.info(
            "EEA report exported",
            owner_id=str(workspace.owner_id),
            report_type=report_type,
            file_name=report.file_name,
        )
        return Response(
            content=report.content,
            media_type=report.media_type,
            headers=attachment_headers(report.file_name),
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("EEA report export failed", owner_id=str(workspace.owner_id), error=str(e))
        raise HTTPException(status_code=500, detail="Failed to generate report")
