"""Employment Equity compliance calculations.

The engine is stateless. It works on any object exposing the employee
attributes it reads (``occupational_level``, ``status``, ``race``,
``gender``, ``is_foreign_national``, ``has_disability`` and, for income
analysis, ``annual_fixed_income``), so hypothetical hires can be modelled
without building full ``Employee`` aggregates.

Percentages are reported in percentage points rounded half-up to one
decimal place; fractions (``designated_percentage``, ``target``) are left
unrounded for downstream reporting.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from app.domain.exceptions import EmployeeNotFoundError, ValidationError
from app.domain.services.eea.constants import (
    DEMOGRAPHIC_KEYS,
    DISABILITY_TARGET,
    ComplianceStatus,
    EmployeeStatus,
    OccupationalLevel,
    format_occupational_level,
    get_compliance_status,
    get_demographic_key,
    is_designated_group,
)


INCOME_DIFFERENTIAL_TOLERANCE = 20.0


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like a spreadsheet does: halves always go up."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _value(item: Any) -> Any:
    return getattr(item, "value", item)


def _is_active(employee: Any) -> bool:
    return _value(employee.status) == EmployeeStatus.ACTIVE.value


@dataclass(frozen=True)
class HypotheticalEmployee:
    """Minimal workforce member used for what-if projections."""

    occupational_level: Any
    race: Any
    gender: Any
    has_disability: bool = False
    is_foreign_national: bool = False
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    id: Optional[str] = None


@dataclass
class DemographicBreakdown:
    """Head counts per race/gender bucket, foreign nationals counted apart."""

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

    def increment(self, key: str) -> None:
        if key in DEMOGRAPHIC_KEYS:
            setattr(self, key, getattr(self, key) + 1)

    def to_dict(self) -> Dict[str, int]:
        """Short keys plus the long names used in report exports."""
        counts = {key: getattr(self, key) for key in DEMOGRAPHIC_KEYS}
        counts.update(
            african_male=self.AM,
            african_female=self.AF,
            coloured_male=self.CM,
            coloured_female=self.CF,
            indian_male=self.IM,
            indian_female=self.IF,
            white_male=self.WM,
            white_female=self.WF,
        )
        return counts


@dataclass
class LevelCompliance:
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
    demographics: DemographicBreakdown


@dataclass
class DisabilityCompliance:
    current_count: int
    current_percentage: float
    target: float
    gap: float
    status: ComplianceStatus

    @property
    def current(self) -> float:
        return self.current_percentage


@dataclass
class ComplianceReport:
    company_id: Optional[str]
    company_name: Optional[str]
    report_date: datetime
    levels: List[LevelCompliance]
    total_employees: int
    designated_count: int
    designated_percentage: float
    disability_compliance: DisabilityCompliance
    overall_status: ComplianceStatus


@dataclass
class ComplianceSnapshot:
    total_employees: int
    designated: int
    percentage: float
    gap: float
    status: ComplianceStatus


@dataclass
class HiringImpact:
    level: str
    race: str
    gender: str
    has_disability: bool
    number_of_hires: int
    current: ComplianceSnapshot
    predicted: ComplianceSnapshot
    improvement: float


@dataclass
class TerminationImpact:
    level: str
    employee_id: str
    race: str
    gender: str
    current: ComplianceSnapshot
    predicted: ComplianceSnapshot
    impact: float


@dataclass
class HiringRecommendation:
    type: str
    level: str
    count: int
    priority: str
    message: str
    recommended_groups: List[str] = field(default_factory=list)


@dataclass
class ComplianceSummary:
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


@dataclass
class IncomeDifferential:
    level: Optional[str]
    level_name: str
    designated_count: int
    non_designated_count: int
    designated_average: float
    non_designated_average: float
    differential_percentage: float

    @property
    def within_tolerance(self) -> bool:
        return abs(self.differential_percentage) <= INCOME_DIFFERENTIAL_TOLERANCE


@dataclass
class IncomeDifferentialReport:
    overall: IncomeDifferential
    levels: List[IncomeDifferential]

    @property
    def within_tolerance(self) -> bool:
        return self.overall.within_tolerance


# Designated groups in the order recommendations break ties.
_RECOMMENDATION_GROUPS = (
    ("AF", "African Female"),
    ("AM", "African Male"),
    ("CF", "Coloured Female"),
    ("CM", "Coloured Male"),
    ("IF", "Indian Female"),
    ("IM", "Indian Male"),
    ("WF", "White Female"),
)


class ComplianceEngine:
    """Calculates EEA compliance, projections and recommendations."""

    def calculate_level_compliance(
        self,
        employees: Iterable[Any],
        level: Any,
        sector_target: float,
    ) -> LevelCompliance:
        """Compute designated-group representation for one occupational level.

        Only ACTIVE employees at ``level`` are counted. ``sector_target`` is
        the designated-group target as a fraction (0-1).
        """
        level_value = _value(level)
        level_employees = [
            e for e in employees
            if _value(e.occupational_level) == level_value and _is_active(e)
        ]
        total = len(level_employees)

        demographics = DemographicBreakdown()
        for employee in level_employees:
            demographics.increment(get_demographic_key(employee))

        designated = sum(1 for e in level_employees if is_designated_group(e))

        current_percentage = (designated / total) * 100 if total > 0 else 0.0
        target_percentage = sector_target * 100
        gap = target_percentage - current_percentage
        gap_count = math.ceil((gap / 100) * total) if total > 0 else 0

        return LevelCompliance(
            level=level_value,
            level_name=format_occupational_level(level_value),
            total_employees=total,
            designated=designated,
            designated_percentage=designated / total if total > 0 else 0.0,
            current_percentage=round_half_up(current_percentage),
            target=sector_target,
            target_percentage=round_half_up(target_percentage),
            gap=round_half_up(gap),
            gap_count=max(0, gap_count),
            status=get_compliance_status(gap),
            demographics=demographics,
        )

    def calculate_compliance_report(
        self,
        employees: Sequence[Any],
        sector_targets: Mapping[Any, float],
        company_name: Optional[str] = None,
        company_id: Optional[str] = None,
    ) -> ComplianceReport:
        """Build the full compliance report, one entry per targeted level."""
        levels = [
            self.calculate_level_compliance(employees, level, target)
            for level, target in sector_targets.items()
        ]

        active = [e for e in employees if _is_active(e)]
        with_disability = sum(1 for e in active if e.has_disability)
        disability_percentage = (with_disability / len(active)) * 100 if active else 0.0
        disability_gap = (DISABILITY_TARGET * 100) - disability_percentage

        non_compliant = sum(1 for l in levels if l.status == ComplianceStatus.NON_COMPLIANT)
        near_compliant = sum(1 for l in levels if l.status == ComplianceStatus.NEAR_COMPLIANT)

        if non_compliant > 0 or disability_gap > 1:
            overall_status = ComplianceStatus.NON_COMPLIANT
        elif near_compliant > 0 or disability_gap > 0:
            overall_status = ComplianceStatus.NEAR_COMPLIANT
        else:
            overall_status = ComplianceStatus.COMPLIANT

        total_employees = sum(l.total_employees for l in levels)
        designated_count = sum(l.designated for l in levels)

        return ComplianceReport(
            company_id=company_id,
            company_name=company_name,
            report_date=datetime.utcnow(),
            levels=levels,
            total_employees=total_employees,
            designated_count=designated_count,
            designated_percentage=designated_count / total_employees if total_employees > 0 else 0.0,
            disability_compliance=DisabilityCompliance(
                current_count=with_disability,
                current_percentage=round_half_up(disability_percentage),
                target=DISABILITY_TARGET * 100,
                gap=round_half_up(disability_gap),
                status=ComplianceStatus.COMPLIANT if disability_gap <= 0 else ComplianceStatus.NON_COMPLIANT,
            ),
            overall_status=overall_status,
        )

    def predict_hiring_impact(
        self,
        employees: Sequence[Any],
        level: Any,
        race: Any,
        gender: Any,
        has_disability: bool,
        sector_target: float,
        count: int = 1,
    ) -> HiringImpact:
        """Project the level's compliance after ``count`` hires of one profile."""
        if count < 1:
            raise ValidationError("Number of hires must be at least 1")

        hires = [
            HypotheticalEmployee(
                occupational_level=_value(level),
                race=_value(race),
                gender=_value(gender),
                has_disability=has_disability,
            )
            for _ in range(count)
        ]

        current = self.calculate_level_compliance(employees, level, sector_target)
        predicted = self.calculate_level_compliance([*employees, *hires], level, sector_target)

        return HiringImpact(
            level=_value(level),
            race=_value(race),
            gender=_value(gender),
            has_disability=has_disability,
            number_of_hires=count,
            current=self._snapshot(current),
            predicted=self._snapshot(predicted),
            improvement=round_half_up(current.gap - predicted.gap),
        )

    def predict_termination_impact(
        self,
        employees: Sequence[Any],
        employee_id: Any,
        sector_target: float,
    ) -> TerminationImpact:
        """Project the level's compliance if one employee leaves."""
        target_id = str(employee_id)
        employee = next((e for e in employees if str(e.id) == target_id), None)
        if employee is None:
            raise EmployeeNotFoundError("Employee not found")

        level = employee.occupational_level
        current = self.calculate_level_compliance(employees, level, sector_target)
        remaining = [e for e in employees if str(e.id) != target_id]
        predicted = self.calculate_level_compliance(remaining, level, sector_target)

        return TerminationImpact(
            level=_value(level),
            employee_id=target_id,
            race=_value(employee.race),
            gender=_value(employee.gender),
            current=self._snapshot(current),
            predicted=self._snapshot(predicted),
            impact=round_half_up(predicted.gap - current.gap),
        )

    def get_hiring_recommendations(self, level_compliance: LevelCompliance) -> List[HiringRecommendation]:
        """Recommend designated-group hires for a level that misses its target."""
        if level_compliance.status == ComplianceStatus.COMPLIANT:
            return []

        recommendations: List[HiringRecommendation] = []
        if level_compliance.gap_count > 0:
            counts = level_compliance.demographics
            # sorted() is stable so ties keep the declared group order
            ranked = sorted(_RECOMMENDATION_GROUPS, key=lambda group: getattr(counts, group[0]))
            needed = level_compliance.gap_count
            recommendations.append(
                HiringRecommendation(
                    type="HIRE",
                    level=level_compliance.level,
                    count=needed,
                    priority="HIGH",
                    message=(
                        f"Hire {needed} designated group "
                        f"{'employee' if needed == 1 else 'employees'} to achieve compliance"
                    ),
                    recommended_groups=[label for _, label in ranked[:3]],
                )
            )

        return recommendations

    def get_compliance_summary(self, report: ComplianceReport) -> ComplianceSummary:
        levels = report.levels
        total_levels = len(levels)
        compliant = sum(1 for l in levels if l.status == ComplianceStatus.COMPLIANT)
        total_employees = sum(l.total_employees for l in levels)
        total_designated = sum(l.designated for l in levels)
        overall = (total_designated / total_employees) * 100 if total_employees > 0 else 0.0

        return ComplianceSummary(
            total_levels=total_levels,
            compliant_levels=compliant,
            near_compliant_levels=sum(1 for l in levels if l.status == ComplianceStatus.NEAR_COMPLIANT),
            non_compliant_levels=sum(1 for l in levels if l.status == ComplianceStatus.NON_COMPLIANT),
            compliance_rate=int(round_half_up((compliant / total_levels) * 100, 0)) if total_levels > 0 else 0,
            total_employees=total_employees,
            total_designated=total_designated,
            overall_percentage=round_half_up(overall),
            total_hires_needed=sum(max(0, l.gap_count) for l in levels),
            disability_status=report.disability_compliance.status,
            overall_status=report.overall_status,
        )

    def calculate_income_differentials(self, employees: Iterable[Any]) -> IncomeDifferentialReport:
        """Compare average fixed income of designated and non-designated staff."""
        earners = [e for e in employees if _is_active(e) and (e.annual_fixed_income or 0) > 0]

        overall = self._income_differential(earners, None, "All Levels")
        levels = []
        for level in OccupationalLevel:
            at_level = [e for e in earners if _value(e.occupational_level) == level.value]
            if at_level:
                levels.append(self._income_differential(at_level, level.value, format_occupational_level(level)))

        return IncomeDifferentialReport(overall=overall, levels=levels)

    @staticmethod
    def _income_differential(employees: List[Any], level: Optional[str], level_name: str) -> IncomeDifferential:
        designated = [float(e.annual_fixed_income) for e in employees if is_designated_group(e)]
        non_designated = [float(e.annual_fixed_income) for e in employees if not is_designated_group(e)]

        designated_avg = sum(designated) / len(designated) if designated else 0.0
        non_designated_avg = sum(non_designated) / len(non_designated) if non_designated else 0.0
        differential = (
            (designated_avg - non_designated_avg) / non_designated_avg * 100
            if non_designated_avg > 0 else 0.0
        )

        return IncomeDifferential(
            level=level,
            level_name=level_name,
            designated_count=len(designated),
            non_designated_count=len(non_designated),
            designated_average=round(designated_avg, 2),
            non_designated_average=round(non_designated_avg, 2),
            differential_percentage=round_half_up(differential),
        )

    @staticmethod
    def _snapshot(compliance: LevelCompliance) -> ComplianceSnapshot:
        return ComplianceSnapshot(
            total_employees=compliance.total_employees,
            designated=compliance.designated,
            percentage=compliance.current_percentage,
            gap=compliance.gap,
            status=compliance.status,
        )


__all__ = [
    "ComplianceEngine",
    "ComplianceReport",
    "ComplianceSnapshot",
    "ComplianceSummary",
    "DemographicBreakdown",
    "DisabilityCompliance",
    "HiringImpact",
    "HiringRecommendation",
    "HypotheticalEmployee",
    "IncomeDifferential",
    "IncomeDifferentialReport",
    "LevelCompliance",
    "TerminationImpact",
    "INCOME_DIFFERENTIAL_TOLERANCE",
    "round_half_up",
]
