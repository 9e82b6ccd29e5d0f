"""
SQLModel tables for Employment Equity reporting.

Enum-valued columns store the upper-case enum values used in the statutory
EEA forms.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, Column, Date, Float, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID as PostgreSQLUUID
from sqlmodel import Field

from app.infrastructure.persistence.models.base import IdentifiedModel, create_owner_id_column


class CompanyTable(IdentifiedModel, table=True):
    """The designated employer of a workspace (one per owner)."""

    __tablename__ = "eea_companies"

    owner_id: UUID = Field(
        sa_column=Column(PostgreSQLUUID(as_uuid=True), nullable=False, unique=True, index=True),
        description="Workspace owner"
    )

    name: str = Field(sa_column=Column(String(255), nullable=False))
    sector: str = Field(sa_column=Column(String(60), nullable=False))
    dti_registration_name: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    dti_registration_number: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))
    paye_sars_number: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))
    uif_reference_number: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))
    ee_reference_number: Optional[str] = Field(default=None, sa_column=Column(String(100), nullable=True))
    eap_type: str = Field(default="NATIONAL", sa_column=Column(String(20), nullable=False, default="NATIONAL"))
    province: Optional[str] = Field(default=None, sa_column=Column(String(30), nullable=True))
    reporting_period_from: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    reporting_period_to: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    plan_duration_from: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    plan_duration_to: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))


class EmployeeTable(IdentifiedModel, table=True):
    """Employee of an EEA company."""

    __tablename__ = "eea_employees"

    company_id: UUID = Field(
        sa_column=Column(
            PostgreSQLUUID(as_uuid=True),
            ForeignKey("eea_companies.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
    )

    __table_args__ = (
        UniqueConstraint("company_id", "employee_number", name="uq_eea_employees_number"),
        Index("idx_eea_employees_company_level", "company_id", "occupational_level"),
    )

    employee_number: str = Field(sa_column=Column(String(50), nullable=False))
    first_name: str = Field(sa_column=Column(String(100), nullable=False))
    last_name: str = Field(sa_column=Column(String(100), nullable=False))
    initials: Optional[str] = Field(default=None, sa_column=Column(String(20), nullable=True))
    gender: str = Field(sa_column=Column(String(10), nullable=False))
    race: str = Field(sa_column=Column(String(20), nullable=False))
    nationality: str = Field(
        default="South African",
        sa_column=Column(String(100), nullable=False, default="South African"),
    )
    is_foreign_national: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    id_number: Optional[str] = Field(default=None, sa_column=Column(String(20), nullable=True))
    passport_number: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    has_disability: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    disability_type: Optional[str] = Field(default=None, sa_column=Column(String(30), nullable=True))
    employment_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    position: Optional[str] = Field(default=None, sa_column=Column(String(200), nullable=True))
    occupational_level: str = Field(sa_column=Column(String(60), nullable=False))
    annual_fixed_income: float = Field(sa_column=Column(Float, nullable=False))
    annual_variable_income: Optional[float] = Field(default=None, sa_column=Column(Float, nullable=True))
    status: str = Field(default="ACTIVE", sa_column=Column(String(20), nullable=False, default="ACTIVE"))
    termination_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))


class SectorTargetTable(IdentifiedModel, table=True):
    """Numerical target for designated groups per sector and occupational level."""

    __tablename__ = "eea_sector_targets"

    __table_args__ = (
        UniqueConstraint("sector", "occupational_level", name="uq_eea_sector_targets"),
    )

    sector: str = Field(sa_column=Column(String(60), nullable=False, index=True))
    occupational_level: str = Field(sa_column=Column(String(60), nullable=False))
    total_target: float = Field(sa_column=Column(Float, nullable=False))
    male_target: Optional[float] = Field(default=None, sa_column=Column(Float, nullable=True))
    female_target: Optional[float] = Field(default=None, sa_column=Column(Float, nullable=True))


__all__ = ["CompanyTable", "EmployeeTable", "SectorTargetTable"]
