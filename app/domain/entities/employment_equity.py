"""Employment Equity entities: the reporting company, its workforce and sector targets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from app.domain.services.eea.constants import (
    DisabilityType,
    EAPType,
    EconomicSector,
    EmployeeStatus,
    Gender,
    OccupationalLevel,
    Province,
    Race,
)
from app.domain.value_objects import CompanyId, EmployeeId, UserId


def _parse_enum(enum_cls, value, label: str):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Invalid {label}: {value}")


@dataclass
class Company:
    """Designated employer that submits EE reports; one per workspace."""

    id: CompanyId
    owner_id: UserId
    name: str
    sector: EconomicSector
    dti_registration_name: Optional[str] = None
    dti_registration_number: Optional[str] = None
    paye_sars_number: Optional[str] = None
    uif_reference_number: Optional[str] = None
    ee_reference_number: Optional[str] = None
    eap_type: EAPType = EAPType.NATIONAL
    province: Optional[Province] = None
    reporting_period_from: Optional[date] = None
    reporting_period_to: Optional[date] = None
    plan_duration_from: Optional[date] = None
    plan_duration_to: Optional[date] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Company name is required")
        self.name = self.name.strip()
        if self.sector is None:
            raise ValueError("Economic sector is required")
        self.sector = _parse_enum(EconomicSector, self.sector, "economic sector")
        self.eap_type = _parse_enum(EAPType, self.eap_type, "EAP type") or EAPType.NATIONAL
        self.province = _parse_enum(Province, self.province, "province")

        for label, start, end in (
            ("reporting period", self.reporting_period_from, self.reporting_period_to),
            ("EE plan duration", self.plan_duration_from, self.plan_duration_to),
        ):
            if start and end and start > end:
                raise ValueError(f"The {label} start date must be before its end date")

    def update(self, **changes) -> None:
        for name, value in changes.items():
            if name in {"id", "owner_id", "created_at"}:
                continue
            if not hasattr(self, name):
                raise ValueError(f"Unknown company field: {name}")
            setattr(self, name, value)
        self._validate()
        self.updated_at = datetime.utcnow()


@dataclass
class Employee:
    """Workforce member counted in the company's EE profile."""

    id: EmployeeId
    company_id: CompanyId
    employee_number: str
    first_name: str
    last_name: str
    gender: Gender
    race: Race
    occupational_level: OccupationalLevel
    annual_fixed_income: float
    initials: Optional[str] = None
    nationality: str = "South African"
    is_foreign_national: bool = False
    id_number: Optional[str] = None
    passport_number: Optional[str] = None
    has_disability: bool = False
    disability_type: Optional[DisabilityType] = None
    employment_date: Optional[date] = None
    position: Optional[str] = None
    annual_variable_income: Optional[float] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    termination_date: Optional[date] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        self.employee_number = (self.employee_number or "").strip()
        if not self.employee_number:
            raise ValueError("Employee number is required")
        if not (self.first_name or "").strip() or not (self.last_name or "").strip():
            raise ValueError("First and last name are required")

        self.gender = _parse_enum(Gender, self.gender, "gender")
        self.race = _parse_enum(Race, self.race, "race")
        self.occupational_level = _parse_enum(OccupationalLevel, self.occupational_level, "occupational level")
        self.disability_type = _parse_enum(DisabilityType, self.disability_type, "disability type")
        self.status = _parse_enum(EmployeeStatus, self.status, "employee status") or EmployeeStatus.ACTIVE
        if self.gender is None or self.race is None or self.occupational_level is None:
            raise ValueError("Gender, race and occupational level are required")

        if self.annual_fixed_income is None or self.annual_fixed_income <= 0:
            raise ValueError("Annual fixed income must be greater than zero")
        if self.annual_variable_income is not None and self.annual_variable_income < 0:
            raise ValueError("Annual variable income cannot be negative")
        if not self.has_disability:
            self.disability_type = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def update(self, **changes) -> None:
        for name, value in changes.items():
            if name in {"id", "company_id", "created_at"}:
                continue
            if not hasattr(self, name):
                raise ValueError(f"Unknown employee field: {name}")
            setattr(self, name, value)
        self._validate()
        self.updated_at = datetime.utcnow()

    def terminate(self, termination_date: Optional[date] = None) -> None:
        if self.status == EmployeeStatus.TERMINATED:
            raise ValueError("Employee is already terminated")
        self.status = EmployeeStatus.TERMINATED
        self.termination_date = termination_date or date.today()
        self.updated_at = datetime.utcnow()


@dataclass
class SectorTarget:
    """Gazetted numerical target for designated groups at one level of a sector."""

    sector: EconomicSector
    occupational_level: OccupationalLevel
    total_target: float
    male_target: Optional[float] = None
    female_target: Optional[float] = None

    def __post_init__(self):
        self.sector = _parse_enum(EconomicSector, self.sector, "economic sector")
        self.occupational_level = _parse_enum(OccupationalLevel, self.occupational_level, "occupational level")
        for value in (self.total_target, self.male_target, self.female_target):
            if value is not None and not 0 <= value <= 1:
                raise ValueError("Sector targets must be fractions between 0 and 1")


__all__ = ["Company", "Employee", "SectorTarget"]
