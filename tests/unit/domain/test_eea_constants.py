"""Tests for EEA classification rules and reference data."""

import pytest

from app.domain.services.eea.constants import (
    ComplianceStatus,
    EconomicSector,
    OccupationalLevel,
    Race,
    default_sector_targets,
    format_economic_sector,
    format_occupational_level,
    format_race,
    get_compliance_status,
    get_demographic_key,
    is_designated_group,
)
from app.domain.services.eea.compliance_engine import HypotheticalEmployee


def person(race="AFRICAN", gender="FEMALE", disability=False, foreign=False):
    return HypotheticalEmployee(
        occupational_level=OccupationalLevel.SKILLED_TECHNICAL,
        race=race,
        gender=gender,
        has_disability=disability,
        is_foreign_national=foreign,
    )


class TestDesignatedGroups:

    @pytest.mark.parametrize(
        "employee,designated",
        [
            (person("AFRICAN", "MALE"), True),
            (person("COLOURED", "FEMALE"), True),
            (person("INDIAN", "MALE"), True),
            (person("WHITE", "FEMALE"), True),
            (person("WHITE", "MALE"), False),
            (person("WHITE", "MALE", disability=True), True),
            (person("AFRICAN", "FEMALE", foreign=True), False),
            (person("AFRICAN", "MALE", disability=True, foreign=True), False),
        ],
    )
    def test_classification(self, employee, designated):
        assert is_designated_group(employee) is designated

    @pytest.mark.parametrize(
        "employee,key",
        [
            (person("AFRICAN", "MALE"), "AM"),
            (person("INDIAN", "FEMALE"), "IF"),
            (person("WHITE", "MALE"), "WM"),
            (person("WHITE", "MALE", foreign=True), "foreignMale"),
            (person("COLOURED", "FEMALE", foreign=True), "foreignFemale"),
        ],
    )
    def test_demographic_key(self, employee, key):
        assert get_demographic_key(employee) == key


class TestComplianceStatus:

    @pytest.mark.parametrize(
        "gap,status",
        [
            (-3, ComplianceStatus.COMPLIANT),
            (0, ComplianceStatus.COMPLIANT),
            (0.1, ComplianceStatus.NEAR_COMPLIANT),
            (5, ComplianceStatus.NEAR_COMPLIANT),
            (5.1, ComplianceStatus.NON_COMPLIANT),
        ],
    )
    def test_thresholds(self, gap, status):
        assert get_compliance_status(gap) == status


class TestLabels:

    def test_occupational_level_label(self):
        assert format_occupational_level("PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT") == (
            "Professionally Qualified & Mid Management"
        )

    def test_enum_members_are_accepted(self):
        assert format_race(Race.WHITE) == "White"
        assert format_economic_sector(EconomicSector.FINANCIAL_INSURANCE) == "Financial and Insurance Activities"

    def test_unknown_values_pass_through(self):
        assert format_occupational_level("INTERNS") == "INTERNS"


class TestDefaultTargets:

    def test_general_defaults(self):
        targets = default_sector_targets(EconomicSector.EDUCATION)

        assert list(targets) == [
            OccupationalLevel.TOP_MANAGEMENT,
            OccupationalLevel.SENIOR_MANAGEMENT,
            OccupationalLevel.PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT,
            OccupationalLevel.SKILLED_TECHNICAL,
        ]
        assert targets[OccupationalLevel.TOP_MANAGEMENT] == 0.50
        assert targets[OccupationalLevel.SKILLED_TECHNICAL] == 0.80

    def test_sector_overrides(self):
        targets = default_sector_targets("FINANCIAL_INSURANCE")

        assert targets[OccupationalLevel.TOP_MANAGEMENT] == 0.45
        assert targets[OccupationalLevel.PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT] == 0.70

    def test_unknown_sector_uses_defaults(self):
        assert default_sector_targets("SPACE")[OccupationalLevel.TOP_MANAGEMENT] == 0.50
