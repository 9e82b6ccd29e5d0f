"""PostgreSQL implementations of the Employment Equity repositories."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import asc
from sqlmodel import select

from app.domain.entities.employment_equity import Company, Employee, SectorTarget
from app.domain.repositories.eea_repository import (
    ICompanyRepository,
    IEmployeeRepository,
    ISectorTargetRepository,
)
from app.domain.services.eea.constants import EconomicSector, EmployeeStatus, OccupationalLevel
from app.domain.value_objects import CompanyId, EmployeeId, UserId
from app.infrastructure.persistence.mappers.eea_mapper import CompanyMapper, EmployeeMapper, SectorTargetMapper
from app.infrastructure.persistence.models.eea_tables import CompanyTable, EmployeeTable, SectorTargetTable
from app.infrastructure.persistence.repositories.base import PostgresRepositoryBase


class PostgresCompanyRepository(PostgresRepositoryBase, ICompanyRepository):

    async def get_by_owner(self, owner_id: UserId) -> Optional[Company]:
        async with self._session("get company") as session:
            stmt = select(CompanyTable).where(CompanyTable.owner_id == owner_id.value)
            row = (await session.execute(stmt)).scalars().first()
            return CompanyMapper.to_domain(row) if row else None

    async def save(self, company: Company) -> Company:
        async with self._session("save company") as session:
            existing = await session.get(CompanyTable, company.id.value)
            if existing:
                CompanyMapper.update_table_from_domain(existing, company)
            else:
                session.add(CompanyMapper.to_table(company))
        return company


class PostgresEmployeeRepository(PostgresRepositoryBase, IEmployeeRepository):

    async def get_by_id(self, employee_id: EmployeeId, company_id: CompanyId) -> Optional[Employee]:
        async with self._session("get employee") as session:
            stmt = select(EmployeeTable).where(
                EmployeeTable.id == employee_id.value,
                EmployeeTable.company_id == company_id.value,
            )
            row = (await session.execute(stmt)).scalars().first()
            return EmployeeMapper.to_domain(row) if row else None

    async def get_by_employee_number(self, company_id: CompanyId, employee_number: str) -> Optional[Employee]:
        async with self._session("get employee by number") as session:
            stmt = select(EmployeeTable).where(
                EmployeeTable.company_id == company_id.value,
                EmployeeTable.employee_number == employee_number,
            )
            row = (await session.execute(stmt)).scalars().first()
            return EmployeeMapper.to_domain(row) if row else None

    async def list_by_company(
        self,
        company_id: CompanyId,
        status: Optional[EmployeeStatus] = None,
        occupational_level: Optional[OccupationalLevel] = None,
    ) -> List[Employee]:
        async with self._session("list employees") as session:
            stmt = select(EmployeeTable).where(EmployeeTable.company_id == company_id.value)
            if status:
                stmt = stmt.where(EmployeeTable.status == status.value)
            if occupational_level:
                stmt = stmt.where(EmployeeTable.occupational_level == occupational_level.value)
            stmt = stmt.order_by(asc(EmployeeTable.last_name), asc(EmployeeTable.first_name))
            rows = (await session.execute(stmt)).scalars().all()
        return [EmployeeMapper.to_domain(row) for row in rows]

    async def save(self, employee: Employee) -> Employee:
        await self.save_many([employee])
        return employee

    async def save_many(self, employees: List[Employee]) -> List[Employee]:
        async with self._session("save employees") as session:
            for employee in employees:
                existing = await session.get(EmployeeTable, employee.id.value)
                if existing:
                    EmployeeMapper.update_table_from_domain(existing, employee)
                else:
                    session.add(EmployeeMapper.to_table(employee))
        return employees

    async def delete(self, employee_id: EmployeeId, company_id: CompanyId) -> bool:
        async with self._session("delete employee") as session:
            stmt = select(EmployeeTable).where(
                EmployeeTable.id == employee_id.value,
                EmployeeTable.company_id == company_id.value,
            )
            row = (await session.execute(stmt)).scalars().first()
            if not row:
                return False
            await session.delete(row)
            return True


class PostgresSectorTargetRepository(PostgresRepositoryBase, ISectorTargetRepository):

    async def list_by_sector(self, sector: EconomicSector) -> List[SectorTarget]:
        async with self._session("list sector targets") as session:
            stmt = select(SectorTargetTable).where(SectorTargetTable.sector == sector.value)
            rows = (await session.execute(stmt)).scalars().all()
        return [SectorTargetMapper.to_domain(row) for row in rows]


__all__ = ["PostgresCompanyRepository", "PostgresEmployeeRepository", "PostgresSectorTargetRepository"]
