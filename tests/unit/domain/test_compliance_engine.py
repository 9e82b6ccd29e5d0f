"""Tests for EEA compliance calculations, projections and income analysis."""

import pytest

from app.domain.exceptions import EmployeeNotFoundError, ValidationError
from app.domain.services.eea.compliance_engine import ComplianceEngine, round_half_up
from app.domain.services.eea.constants import (
    ComplianceStatus,
    EmployeeStatus,
    Gender,
    OccupationalLevel,
    Race,
)
from app.domain.value_objects import CompanyId
from tests.fixtures.workspace_fixtures import make_employee, make_workforce

TOP = OccupationalLevel.TOP_MANAGEMENT
SKILLED = OccupationalLevel.SKILLED_TECHNICAL


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def engine():
    return ComplianceEngine()


@pytest.fixture
def company_id():
    return CompanyId.generate()


@pytest.fixture
def skilled_workforce(company_id):
    """Six designated and four non-designated skilled technical employees."""
    return make_workforce(company_id, SKILLED, designated=6, non_designated=4)


@pytest.fixture
def mixed_workforce(company_id, skilled_workforce):
    """Top management on target (2 of 4), skilled technical below it (6 of 10)."""
    return make_workforce(company_id, TOP, designated=2, non_designated=2) + skilled_workforce


@pytest.fixture
def targets():
    return {TOP: 0.5, SKILLED: 0.8}


class TestRounding:

    @pytest.mark.parametrize("value,expected", [(66.666, 66.7), (3.35, 3.4), (2.25, 2.3), (-6.699999999999999, -6.7)])
    def test_half_up(self, value, expected):
        assert round_half_up(value) == pytest.approx(expected)

    def test_whole_numbers(self):
        assert round_half_up(49.5, 0) == 50


# =============================================================================
# LEVEL COMPLIANCE
# =============================================================================


class TestLevelCompliance:

    def test_below_target(self, engine, skilled_workforce):
        result = engine.calculate_level_compliance(skilled_workforce, SKILLED, 0.8)

        assert result.total_employees == 10
        assert result.designated == 6
        assert result.designated_percentage == pytest.approx(0.6)
        assert result.current_percentage == 60.0
        assert result.target_percentage == 80.0
        assert result.gap == 20.0
        assert result.gap_count == 2
        assert result.status == ComplianceStatus.NON_COMPLIANT
        assert result.level_name == "Skilled Technical"
        assert result.demographics.AF == 6
        assert result.demographics.WM == 4

    def test_only_active_employees_at_level_count(self, engine, company_id, skilled_workforce):
        leaver = make_employee(company_id, SKILLED, status=EmployeeStatus.TERMINATED)
        manager = make_employee(company_id, TOP)

        result = engine.calculate_level_compliance([*skilled_workforce, leaver, manager], SKILLED, 0.8)

        assert result.total_employees == 10

    def test_near_compliance_rounds_half_up(self, engine, company_id):
        workforce = make_workforce(company_id, SKILLED, designated=2, non_designated=1)

        result = engine.calculate_level_compliance(workforce, SKILLED, 0.7)

        assert result.current_percentage == 66.7
        assert result.gap == 3.3
        assert result.gap_count == 1
        assert result.status == ComplianceStatus.NEAR_COMPLIANT

    def test_above_target(self, engine, company_id):
        workforce = make_workforce(company_id, SKILLED, designated=9, non_designated=1)

        result = engine.calculate_level_compliance(workforce, SKILLED, 0.8)

        assert result.gap == -10.0
        assert result.gap_count == 0
        assert result.status == ComplianceStatus.COMPLIANT

    def test_empty_level(self, engine):
        result = engine.calculate_level_compliance([], TOP, 0.5)

        assert result.total_employees == 0
        assert result.current_percentage == 0.0
        assert result.gap == 50.0
        assert result.gap_count == 0
        assert result.status == ComplianceStatus.NON_COMPLIANT

    def test_demographics_export_keys(self, engine, company_id):
        foreigner = make_employee(company_id, SKILLED, Race.WHITE, Gender.MALE, is_foreign_national=True)
        result = engine.calculate_level_compliance([foreigner], SKILLED, 0.8)

        counts = result.demographics.to_dict()
        assert counts["foreignMale"] == 1
        assert counts["WM"] == 0
        assert counts["white_male"] == 0


# =============================================================================
# REPORT AND SUMMARY
# =============================================================================


class TestComplianceReport:

    def test_report_totals(self, engine, mixed_workforce, targets):
        report = engine.calculate_compliance_report(mixed_workforce, targets, company_name="Acme")

        assert [level.level for level in report.levels] == [TOP.value, SKILLED.value]
        assert report.company_name == "Acme"
        assert report.total_employees == 14
        assert report.designated_count == 8
        assert report.levels[0].status == ComplianceStatus.COMPLIANT
        assert report.overall_status == ComplianceStatus.NON_COMPLIANT

    def test_disability_gap_drives_near_compliance(self, engine, company_id):
        workforce = make_workforce(company_id, TOP, designated=20, non_designated=19)
        workforce.append(make_employee(company_id, TOP, Race.WHITE, Gender.MALE, has_disability=True))

        report = engine.calculate_compliance_report(workforce, {TOP: 0.5})

        assert report.levels[0].status == ComplianceStatus.COMPLIANT
        assert report.disability_compliance.current_count == 1
        assert report.disability_compliance.current_percentage == 2.5
        assert report.disability_compliance.gap == 0.5
        assert report.disability_compliance.status == ComplianceStatus.NON_COMPLIANT
        assert report.overall_status == ComplianceStatus.NEAR_COMPLIANT

    def test_large_disability_gap_is_non_compliant(self, engine, company_id):
        workforce = make_workforce(company_id, TOP, designated=3, non_designated=1)

        report = engine.calculate_compliance_report(workforce, {TOP: 0.5})

        assert report.levels[0].status == ComplianceStatus.COMPLIANT
        assert report.overall_status == ComplianceStatus.NON_COMPLIANT

    def test_fully_compliant(self, engine, company_id):
        workforce = make_workforce(company_id, TOP, designated=18, non_designated=20)
        workforce += [make_employee(company_id, TOP, has_disability=True) for _ in range(2)]

        report = engine.calculate_compliance_report(workforce, {TOP: 0.5})

        assert report.disability_compliance.current_percentage == 5.0
        assert report.overall_status == ComplianceStatus.COMPLIANT

    def test_summary(self, engine, mixed_workforce, targets):
        summary = engine.get_compliance_summary(engine.calculate_compliance_report(mixed_workforce, targets))

        assert summary.total_levels == 2
        assert summary.compliant_levels == 1
        assert summary.non_compliant_levels == 1
        assert summary.compliance_rate == 50
        assert summary.total_hires_needed == 2
        assert summary.overall_percentage == 57.1
        assert summary.overall_status == ComplianceStatus.NON_COMPLIANT


# =============================================================================
# PROJECTIONS
# =============================================================================


class TestHiringImpact:

    def test_designated_hires_reduce_gap(self, engine, skilled_workforce):
        impact = engine.predict_hiring_impact(skilled_workforce, SKILLED, Race.AFRICAN, Gender.FEMALE, False, 0.8, count=2)

        assert impact.number_of_hires == 2
        assert impact.current.gap == 20.0
        assert impact.predicted.total_employees == 12
        assert impact.predicted.percentage == 66.7
        assert impact.improvement == 6.7

    def test_non_designated_hire_widens_gap(self, engine, skilled_workforce):
        impact = engine.predict_hiring_impact(skilled_workforce, SKILLED, "WHITE", "MALE", False, 0.8)

        assert impact.improvement < 0

    def test_disability_makes_hire_designated(self, engine, skilled_workforce):
        impact = engine.predict_hiring_impact(skilled_workforce, SKILLED, "WHITE", "MALE", True, 0.8)

        assert impact.improvement > 0

    def test_requires_at_least_one_hire(self, engine, skilled_workforce):
        with pytest.raises(ValidationError):
            engine.predict_hiring_impact(skilled_workforce, SKILLED, Race.AFRICAN, Gender.FEMALE, False, 0.8, count=0)


class TestTerminationImpact:

    def test_losing_non_designated_employee(self, engine, skilled_workforce):
        leaver = next(e for e in skilled_workforce if e.race == Race.WHITE)

        impact = engine.predict_termination_impact(skilled_workforce, leaver.id, 0.8)

        assert impact.predicted.total_employees == 9
        assert impact.predicted.gap == 13.3
        assert impact.impact == -6.7

    def test_losing_designated_employee(self, engine, skilled_workforce):
        leaver = next(e for e in skilled_workforce if e.race == Race.AFRICAN)

        impact = engine.predict_termination_impact(skilled_workforce, str(leaver.id), 0.8)

        assert impact.race == "AFRICAN"
        assert impact.impact == 4.4

    def test_unknown_employee(self, engine, skilled_workforce):
        with pytest.raises(EmployeeNotFoundError):
            engine.predict_termination_impact(skilled_workforce, "missing", 0.8)


class TestRecommendations:

    def test_compliant_level_needs_nothing(self, engine, company_id):
        workforce = make_workforce(company_id, SKILLED, designated=9, non_designated=1)
        level = engine.calculate_level_compliance(workforce, SKILLED, 0.8)

        assert engine.get_hiring_recommendations(level) == []

    def test_recommends_least_represented_groups(self, engine, skilled_workforce):
        level = engine.calculate_level_compliance(skilled_workforce, SKILLED, 0.8)

        [recommendation] = engine.get_hiring_recommendations(level)

        assert recommendation.type == "HIRE"
        assert recommendation.priority == "HIGH"
        assert recommendation.count == 2
        assert recommendation.message == "Hire 2 designated group employees to achieve compliance"
        assert recommendation.recommended_groups == ["African Male", "Coloured Female", "Coloured Male"]

    def test_singular_message(self, engine, company_id):
        workforce = make_workforce(company_id, SKILLED, designated=2, non_designated=1)
        level = engine.calculate_level_compliance(workforce, SKILLED, 0.7)

        [recommendation] = engine.get_hiring_recommendations(level)

        assert recommendation.message == "Hire 1 designated group employee to achieve compliance"


# =============================================================================
# INCOME DIFFERENTIALS
# =============================================================================


class TestIncomeDifferentials:

    def test_differentials_per_level(self, engine, company_id):
        workforce = [
            *(make_employee(company_id, TOP, Race.AFRICAN, Gender.FEMALE, annual_fixed_income=200000) for _ in range(2)),
            *(make_employee(company_id, TOP, Race.WHITE, Gender.MALE, annual_fixed_income=250000) for _ in range(2)),
            *(make_employee(company_id, SKILLED, Race.INDIAN, Gender.MALE, annual_fixed_income=100000) for _ in range(6)),
            *(make_employee(company_id, SKILLED, Race.WHITE, Gender.MALE, annual_fixed_income=100000) for _ in range(4)),
            make_employee(company_id, SKILLED, annual_fixed_income=900000, status=EmployeeStatus.TERMINATED),
        ]

        report = engine.calculate_income_differentials(workforce)

        assert report.overall.level is None
        assert report.overall.level_name == "All Levels"
        assert report.overall.designated_count == 8
        assert report.overall.designated_average == 125000.0
        assert report.overall.non_designated_average == 150000.0
        assert report.overall.differential_percentage == -16.7
        assert report.within_tolerance

        top, skilled = report.levels
        assert top.level == TOP.value
        assert top.differential_percentage == -20.0
        assert top.within_tolerance
        assert skilled.level_name == "Skilled Technical"
        assert skilled.differential_percentage == 0.0

    def test_no_non_designated_staff(self, engine, company_id):
        workforce = make_workforce(company_id, SKILLED, designated=3, non_designated=0)

        report = engine.calculate_income_differentials(workforce)

        assert report.overall.non_designated_count == 0
        assert report.overall.differential_percentage == 0.0

    def test_outside_tolerance(self, engine, company_id):
        workforce = [
            make_employee(company_id, TOP, Race.AFRICAN, Gender.MALE, annual_fixed_income=100000),
            make_employee(company_id, TOP, Race.WHITE, Gender.MALE, annual_fixed_income=200000),
        ]

        report = engine.calculate_income_differentials(workforce)

        assert report.overall.differential_percentage == -50.0
        assert not report.within_tolerance
