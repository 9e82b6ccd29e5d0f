"""Domain repository contracts for Employment Equity data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.employment_equity import Company, Employee, SectorTarget
from app.domain.services.eea.constants import EconomicSector, EmployeeStatus, OccupationalLevel
from app.domain.value_objects import CompanyId, EmployeeId, UserId


class ICompanyRepository(ABC):
    """Persistence operations for the single EEA company of a workspace."""

    @abstractmethod
    async def get_by_owner(self, owner_id: UserId) -> Optional[Company]:
        """Load the workspace's company."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, company: Company) -> Company:
        """Insert or update the company."""
        raise NotImplementedError


class IEmployeeRepository(ABC):
    """Persistence operations for a company's employees."""

    @abstractmethod
    async def get_by_id(self, employee_id: EmployeeId, company_id: CompanyId) -> Optional[Employee]:
        """Load an employee within a company."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_employee_number(self, company_id: CompanyId, employee_number: str) -> Optional[Employee]:
        """Find an employee by the company's own employee number."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_company(
        self,
        company_id: CompanyId,
        status: Optional[EmployeeStatus] = None,
        occupational_level: Optional[OccupationalLevel] = None,
    ) -> List[Employee]:
        """List employees ordered by last name."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, employee: Employee) -> Employee:
        """Insert or update an employee."""
        raise NotImplementedError

    @abstractmethod
    async def save_many(self, employees: List[Employee]) -> List[Employee]:
        """Persist a batch of employees in one transaction."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, employee_id: EmployeeId, company_id: CompanyId) -> bool:
        """Delete an employee."""
        raise NotImplementedError


class ISectorTargetRepository(ABC):
    """Read access to the sector numerical targets."""

    @abstractmethod
    async def list_by_sector(self, sector: EconomicSector) -> List[SectorTarget]:
        """Return configured targets for a sector."""
        raise NotImplementedError


__all__ = ["ICompanyRepository", "IEmployeeRepository", "ISectorTargetRepository"]
