"""Application service for Employment Equity company records and compliance."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog

from app.application.workspace import WorkspaceContext
from app.domain.entities.employment_equity import Company, Employee
from app.domain.exceptions import (
    CompanyNotFoundError,
    ConflictError,
    EmployeeNotFoundError,
    ValidationError,
)
from app.domain.plans import PlanFeature
from app.domain.services.eea.compliance_engine import (
    ComplianceReport,
    ComplianceSummary,
    HiringImpact,
    HiringRecommendation,
    IncomeDifferentialReport,
    TerminationImpact,
)
from app.domain.services.eea.constants import (
    EmployeeStatus,
    Gender,
    OccupationalLevel,
    Race,
    default_sector_targets,
)
from app.domain.value_objects import CompanyId, EmployeeId

if TYPE_CHECKING:
    from app.application.dependencies.eea_dependencies import EEADependencies


def parse_enum(enum_cls, value: Any, label: str):
    """Parse an optional enum value, raising ValidationError with a readable label."""
    if value is None or value == "" or isinstance(value, enum_cls):
        return value or None
    try:
        return enum_cls(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid {label}: {value}")


class EEAApplicationService:
    """Coordinates the EEA module: company setup, workforce records and compliance."""

    def __init__(self, dependencies: EEADependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    # ------------------------------------------------------------------
    # Company
    # ------------------------------------------------------------------

    async def find_company(self, workspace: WorkspaceContext) -> Optional[Company]:
        workspace.require_feature(PlanFeature.EEA_COMPLIANCE)
        return await self._deps.company_repository.get_by_owner(workspace.owner_id)

    async def get_company(self, workspace: WorkspaceContext) -> Company:
        company = await self.find_company(workspace)
        if company is None:
            raise CompanyNotFoundError("Company profile has not been set up")
        return company

    async def setup_company(self, workspace: WorkspaceContext, data: Dict[str, Any]) -> Company:
        """
        Create the workspace's company profile.

        Raises:
            ConflictError: If the workspace already has a company
            ValidationError: If the company details are invalid
        """
        workspace.require_manager("Only team owners and admins can set up the company profile")
        if await self.find_company(workspace) is not None:
            raise ConflictError("A company profile already exists for this account")

        fields = {key: value for key, value in data.items() if key not in {"id", "owner_id"}}
        try:
            company = Company(id=CompanyId.generate(), owner_id=workspace.owner_id, **fields)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e))

        self._logger.info("Creating EEA company", owner_id=str(workspace.owner_id), sector=company.sector.value)
        saved = await self._deps.company_repository.save(company)
        self._logger.info("EEA company created successfully", company_id=str(saved.id))
        return saved

    async def update_company(self, workspace: WorkspaceContext, changes: Dict[str, Any]) -> Company:
        workspace.require_manager("Only team owners and admins can update the company profile")
        company = await self.get_company(workspace)
        try:
            company.update(**changes)
        except ValueError as e:
            raise ValidationError(str(e))

        saved = await self._deps.company_repository.save(company)
        self._logger.info("EEA company updated", company_id=str(saved.id))
        return saved

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    async def list_employees(
        self,
        workspace: WorkspaceContext,
        status: Optional[Any] = None,
        occupational_level: Optional[Any] = None,
    ) -> List[Employee]:
        company = await self.get_company(workspace)
        return await self._deps.employee_repository.list_by_company(
            company.id,
            status=parse_enum(EmployeeStatus, status, "employee status"),
            occupational_level=parse_enum(OccupationalLevel, occupational_level, "occupational level"),
        )

    async def get_employee(self, workspace: WorkspaceContext, employee_id: EmployeeId) -> Employee:
        company = await self.get_company(workspace)
        return await self._get_company_employee(company, employee_id)

    async def _get_company_employee(self, company: Company, employee_id: EmployeeId) -> Employee:
        employee = await self._deps.employee_repository.get_by_id(employee_id, company.id)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee {employee_id} not found")
        return employee

    async def create_employee(self, workspace: WorkspaceContext, data: Dict[str, Any]) -> Employee:
        """
        Add an employee to the company's workforce.

        Raises:
            ConflictError: If the employee number is already in use
            ValidationError: If the employee details are invalid
        """
        company = await self.get_company(workspace)

        fields = {key: value for key, value in data.items() if key not in {"id", "company_id"}}
        try:
            employee = Employee(id=EmployeeId.generate(), company_id=company.id, **fields)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e))

        existing = await self._deps.employee_repository.get_by_employee_number(company.id, employee.employee_number)
        if existing is not None:
            raise ConflictError(f"Employee number {employee.employee_number} already exists")

        saved = await self._deps.employee_repository.save(employee)
        self._logger.info("Employee created", company_id=str(company.id), employee_id=str(saved.id))
        return saved

    async def update_employee(
        self,
        workspace: WorkspaceContext,
        employee_id: EmployeeId,
        changes: Dict[str, Any],
    ) -> Employee:
        company = await self.get_company(workspace)
        employee = await self._get_company_employee(company, employee_id)

        new_number = (changes.get("employee_number") or "").strip()
        if new_number and new_number != employee.employee_number:
            clash = await self._deps.employee_repository.get_by_employee_number(company.id, new_number)
            if clash is not None:
                raise ConflictError(f"Employee number {new_number} already exists")

        try:
            employee.update(**changes)
        except ValueError as e:
            raise ValidationError(str(e))

        saved = await self._deps.employee_repository.save(employee)
        self._logger.info("Employee updated", employee_id=str(saved.id))
        return saved

    async def terminate_employee(
        self,
        workspace: WorkspaceContext,
        employee_id: EmployeeId,
        termination_date: Optional[date] = None,
    ) -> Employee:
        company = await self.get_company(workspace)
        employee = await self._get_company_employee(company, employee_id)
        try:
            employee.terminate(termination_date)
        except ValueError as e:
            raise ValidationError(str(e))

        saved = await self._deps.employee_repository.save(employee)
        self._logger.info("Employee terminated", employee_id=str(saved.id), termination_date=str(saved.termination_date))
        return saved

    async def delete_employee(self, workspace: WorkspaceContext, employee_id: EmployeeId) -> None:
        company = await self.get_company(workspace)
        await self._get_company_employee(company, employee_id)
        await self._deps.employee_repository.delete(employee_id, company.id)
        self._logger.info("Employee deleted", employee_id=str(employee_id), company_id=str(company.id))

    # ------------------------------------------------------------------
    # Sector targets and compliance
    # ------------------------------------------------------------------

    async def get_sector_targets(self, workspace: WorkspaceContext) -> Dict[OccupationalLevel, float]:
        company = await self.get_company(workspace)
        return await self._targets_for(company)

    async def _targets_for(self, company: Company) -> Dict[OccupationalLevel, float]:
        """Designated-group targets per level; stored rows override built-in defaults."""
        rows = await self._deps.sector_target_repository.list_by_sector(company.sector)
        if not rows:
            self._logger.debug("Using default sector targets", sector=company.sector.value)
            return default_sector_targets(company.sector)

        configured = {row.occupational_level: row.total_target for row in rows}
        return {level: configured[level] for level in OccupationalLevel if level in configured}

    async def _load_workforce(self, workspace: WorkspaceContext):
        company = await self.get_company(workspace)
        employees = await self._deps.employee_repository.list_by_company(company.id)
        targets = await self._targets_for(company)
        return company, employees, targets

    async def get_compliance_report(self, workspace: WorkspaceContext) -> Optional[ComplianceReport]:
        """Full compliance report, or None when there is nothing to measure."""
        company, employees, targets = await self._load_workforce(workspace)
        if not employees or not targets:
            return None

        report = self._deps.compliance_engine.calculate_compliance_report(
            employees,
            targets,
            company_name=company.name,
            company_id=str(company.id),
        )
        self._logger.info(
            "Compliance report calculated",
            company_id=str(company.id),
            overall_status=report.overall_status.value,
            total_employees=report.total_employees,
        )
        return report

    async def get_compliance_summary(self, workspace: WorkspaceContext) -> Optional[ComplianceSummary]:
        report = await self.get_compliance_report(workspace)
        if report is None:
            return None
        return self._deps.compliance_engine.get_compliance_summary(report)

    async def get_hiring_recommendations(self, workspace: WorkspaceContext) -> Dict[str, List[HiringRecommendation]]:
        """Recommendations keyed by occupational level, for levels missing their target."""
        report = await self.get_compliance_report(workspace)
        if report is None:
            return {}

        recommendations: Dict[str, List[HiringRecommendation]] = {}
        for level in report.levels:
            level_recommendations = self._deps.compliance_engine.get_hiring_recommendations(level)
            if level_recommendations:
                recommendations[level.level] = level_recommendations
        return recommendations

    async def predict_hiring_impact(
        self,
        workspace: WorkspaceContext,
        occupational_level: Any,
        race: Any,
        gender: Any,
        has_disability: bool = False,
        count: int = 1,
    ) -> HiringImpact:
        """
        Project a level's compliance after hiring ``count`` people of one profile.

        Raises:
            ValidationError: If the level has no target or the profile is invalid
        """
        level = parse_enum(OccupationalLevel, occupational_level, "occupational level")
        race_value = parse_enum(Race, race, "race")
        gender_value = parse_enum(Gender, gender, "gender")
        if level is None or race_value is None or gender_value is None:
            raise ValidationError("Occupational level, race and gender are required")

        _, employees, targets = await self._load_workforce(workspace)
        if level not in targets:
            raise ValidationError(f"No sector target is configured for {level.value}")

        return self._deps.compliance_engine.predict_hiring_impact(
            employees,
            level,
            race_value,
            gender_value,
            has_disability,
            targets[level],
            count=count,
        )

    async def predict_termination_impact(self, workspace: WorkspaceContext, employee_id: EmployeeId) -> TerminationImpact:
        _, employees, targets = await self._load_workforce(workspace)

        employee = next((e for e in employees if e.id == employee_id), None)
        if employee is None:
            raise EmployeeNotFoundError(f"Employee {employee_id} not found")
        if employee.occupational_level not in targets:
            raise ValidationError(f"No sector target is configured for {employee.occupational_level.value}")

        return self._deps.compliance_engine.predict_termination_impact(
            employees,
            employee_id,
            targets[employee.occupational_level],
        )

    async def get_income_differentials(self, workspace: WorkspaceContext) -> IncomeDifferentialReport:
        company = await self.get_company(workspace)
        employees = await self._deps.employee_repository.list_by_company(company.id, status=EmployeeStatus.ACTIVE)
        return self._deps.compliance_engine.calculate_income_differentials(employees)


__all__ = ["EEAApplicationService", "parse_enum"]
