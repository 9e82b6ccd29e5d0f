"""Dependency container shared by the EEA application services."""

from dataclasses import dataclass

from app.domain.repositories.eea_repository import (
    ICompanyRepository,
    IEmployeeRepository,
    ISectorTargetRepository,
)
from app.domain.services.eea.compliance_engine import ComplianceEngine


@dataclass
class EEADependencies:
    """Dependencies for company setup, employee records, import and reporting."""

    company_repository: ICompanyRepository
    employee_repository: IEmployeeRepository
    sector_target_repository: ISectorTargetRepository
    compliance_engine: ComplianceEngine


__all__ = ["EEADependencies"]
