"""
Mappers for Employment Equity companies, employees and sector targets.

Enums are persisted by value; the entities re-parse them on load.
"""

from __future__ import annotations

from typing import Any, Optional

from app.domain.entities.employment_equity import Company, Employee, SectorTarget
from app.domain.value_objects import CompanyId, EmployeeId, UserId
from app.infrastructure.persistence.models.eea_tables import CompanyTable, EmployeeTable, SectorTargetTable


_COMPANY_FIELDS = (
    "name",
    "sector",
    "dti_registration_name",
    "dti_registration_number",
    "paye_sars_number",
    "uif_reference_number",
    "ee_reference_number",
    "eap_type",
    "province",
    "reporting_period_from",
    "reporting_period_to",
    "plan_duration_from",
    "plan_duration_to",
)

_EMPLOYEE_FIELDS = (
    "employee_number",
    "first_name",
    "last_name",
    "initials",
    "gender",
    "race",
    "nationality",
    "is_foreign_national",
    "id_number",
    "passport_number",
    "has_disability",
    "disability_type",
    "employment_date",
    "position",
    "occupational_level",
    "annual_fixed_income",
    "annual_variable_income",
    "status",
    "termination_date",
)


def _enum_value(value: Any) -> Optional[Any]:
    return getattr(value, "value", value)


class CompanyMapper:

    @staticmethod
    def to_domain(table: CompanyTable) -> Company:
        return Company(
            id=CompanyId(table.id),
            owner_id=UserId(table.owner_id),
            created_at=table.created_at,
            updated_at=table.updated_at,
            **{name: getattr(table, name) for name in _COMPANY_FIELDS},
        )

    @staticmethod
    def to_table(entity: Company) -> CompanyTable:
        table = CompanyTable(
            id=entity.id.value,
            owner_id=entity.owner_id.value,
            name=entity.name,
            sector=_enum_value(entity.sector),
            created_at=entity.created_at,
        )
        CompanyMapper.update_table_from_domain(table, entity)
        return table

    @staticmethod
    def update_table_from_domain(table: CompanyTable, entity: Company) -> None:
        for name in _COMPANY_FIELDS:
            setattr(table, name, _enum_value(getattr(entity, name)))
        table.updated_at = entity.updated_at


class EmployeeMapper:

    @staticmethod
    def to_domain(table: EmployeeTable) -> Employee:
        return Employee(
            id=EmployeeId(table.id),
            company_id=CompanyId(table.company_id),
            created_at=table.created_at,
            updated_at=table.updated_at,
            **{name: getattr(table, name) for name in _EMPLOYEE_FIELDS},
        )

    @staticmethod
    def to_table(entity: Employee) -> EmployeeTable:
        table = EmployeeTable(
            id=entity.id.value,
            company_id=entity.company_id.value,
            employee_number=entity.employee_number,
            first_name=entity.first_name,
            last_name=entity.last_name,
            gender=_enum_value(entity.gender),
            race=_enum_value(entity.race),
            occupational_level=_enum_value(entity.occupational_level),
            annual_fixed_income=entity.annual_fixed_income,
            created_at=entity.created_at,
        )
        EmployeeMapper.update_table_from_domain(table, entity)
        return table

    @staticmethod
    def update_table_from_domain(table: EmployeeTable, entity: Employee) -> None:
        for name in _EMPLOYEE_FIELDS:
            setattr(table, name, _enum_value(getattr(entity, name)))
        table.updated_at = entity.updated_at


class SectorTargetMapper:

    @staticmethod
    def to_domain(table: SectorTargetTable) -> SectorTarget:
        return SectorTarget(
            sector=table.sector,
            occupational_level=table.occupational_level,
            total_target=table.total_target,
            male_target=table.male_target,
            female_target=table.female_target,
        )


__all__ = ["CompanyMapper", "EmployeeMapper", "SectorTargetMapper"]
