"""Concrete factory for creating dependencies of the EEA application services."""

from __future__ import annotations

from app.application.dependencies.eea_dependencies import EEADependencies
from app.domain.services.eea.compliance_engine import ComplianceEngine
from app.infrastructure.providers.repository_provider import (
    get_company_repository,
    get_employee_repository,
    get_sector_target_repository,
)


async def get_eea_dependencies() -> EEADependencies:
    """
    Construct dependencies shared by the EEA, import and report services.

    The compliance engine holds no state and is built per call.
    """
    return EEADependencies(
        company_repository=await get_company_repository(),
        employee_repository=await get_employee_repository(),
        sector_target_repository=await get_sector_target_repository(),
        compliance_engine=ComplianceEngine(),
    )


__all__ = ["get_eea_dependencies"]
