"""Employment Equity Act reference data and demographic classification rules."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class OccupationalLevel(str, Enum):
    """Occupational levels used in EEA workforce reporting."""

    TOP_MANAGEMENT = "TOP_MANAGEMENT"
    SENIOR_MANAGEMENT = "SENIOR_MANAGEMENT"
    PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT = "PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT"
    SKILLED_TECHNICAL = "SKILLED_TECHNICAL"
    SEMI_SKILLED = "SEMI_SKILLED"
    UNSKILLED = "UNSKILLED"


class EconomicSector(str, Enum):
    """Economic sectors for which sector targets are gazetted."""

    ACCOMMODATION_FOOD_SERVICE = "ACCOMMODATION_FOOD_SERVICE"
    ADMINISTRATIVE_SUPPORT = "ADMINISTRATIVE_SUPPORT"
    AGRICULTURE_FORESTRY_FISHING = "AGRICULTURE_FORESTRY_FISHING"
    ARTS_ENTERTAINMENT_RECREATION = "ARTS_ENTERTAINMENT_RECREATION"
    CONSTRUCTION = "CONSTRUCTION"
    EDUCATION = "EDUCATION"
    ELECTRICITY_GAS_STEAM = "ELECTRICITY_GAS_STEAM"
    FINANCIAL_INSURANCE = "FINANCIAL_INSURANCE"
    HEALTH_SOCIAL_WORK = "HEALTH_SOCIAL_WORK"
    INFORMATION_COMMUNICATION = "INFORMATION_COMMUNICATION"
    MANUFACTURING = "MANUFACTURING"
    MINING_QUARRYING = "MINING_QUARRYING"
    PROFESSIONAL_SCIENTIFIC_TECHNICAL = "PROFESSIONAL_SCIENTIFIC_TECHNICAL"
    PUBLIC_ADMINISTRATION_DEFENCE = "PUBLIC_ADMINISTRATION_DEFENCE"
    REAL_ESTATE = "REAL_ESTATE"
    TRANSPORTATION_STORAGE = "TRANSPORTATION_STORAGE"
    WATER_SEWERAGE_WASTE = "WATER_SEWERAGE_WASTE"
    WHOLESALE_RETAIL_TRADE = "WHOLESALE_RETAIL_TRADE"


class Province(str, Enum):
    EASTERN_CAPE = "EASTERN_CAPE"
    FREE_STATE = "FREE_STATE"
    GAUTENG = "GAUTENG"
    KWAZULU_NATAL = "KWAZULU_NATAL"
    LIMPOPO = "LIMPOPO"
    MPUMALANGA = "MPUMALANGA"
    NORTHERN_CAPE = "NORTHERN_CAPE"
    NORTH_WEST = "NORTH_WEST"
    WESTERN_CAPE = "WESTERN_CAPE"


class Race(str, Enum):
    AFRICAN = "AFRICAN"
    COLOURED = "COLOURED"
    INDIAN = "INDIAN"
    WHITE = "WHITE"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class DisabilityType(str, Enum):
    COMMUNICATION = "COMMUNICATION"
    HEARING = "HEARING"
    INTELLECTUAL = "INTELLECTUAL"
    MENTAL_EMOTIONAL = "MENTAL_EMOTIONAL"
    PHYSICAL = "PHYSICAL"
    SIGHT = "SIGHT"
    OTHER = "OTHER"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    TERMINATED = "TERMINATED"
    SUSPENDED = "SUSPENDED"


class EAPType(str, Enum):
    """Economically active population baseline used for targets."""

    NATIONAL = "NATIONAL"
    PROVINCIAL = "PROVINCIAL"


class ComplianceStatus(str, Enum):
    COMPLIANT = "COMPLIANT"
    NEAR_COMPLIANT = "NEAR_COMPLIANT"
    NON_COMPLIANT = "NON_COMPLIANT"


OCCUPATIONAL_LEVEL_LABELS: Dict[OccupationalLevel, str] = {
    OccupationalLevel.TOP_MANAGEMENT: "Top Management",
    OccupationalLevel.SENIOR_MANAGEMENT: "Senior Management",
    OccupationalLevel.PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT: "Professionally Qualified & Mid Management",
    OccupationalLevel.SKILLED_TECHNICAL: "Skilled Technical",
    OccupationalLevel.SEMI_SKILLED: "Semi-Skilled",
    OccupationalLevel.UNSKILLED: "Unskilled",
}

ECONOMIC_SECTOR_LABELS: Dict[EconomicSector, str] = {
    EconomicSector.ACCOMMODATION_FOOD_SERVICE: "Accommodation and Food Service Activities",
    EconomicSector.ADMINISTRATIVE_SUPPORT: "Administrative and Support Activities",
    EconomicSector.AGRICULTURE_FORESTRY_FISHING: "Agriculture, Forestry & Fishing",
    EconomicSector.ARTS_ENTERTAINMENT_RECREATION: "Arts, Entertainment and Recreation",
    EconomicSector.CONSTRUCTION: "Construction",
    EconomicSector.EDUCATION: "Education",
    EconomicSector.ELECTRICITY_GAS_STEAM: "Electricity, Gas, Steam and Air Conditioning Supply",
    EconomicSector.FINANCIAL_INSURANCE: "Financial and Insurance Activities",
    EconomicSector.HEALTH_SOCIAL_WORK: "Human Health and Social Work Activities",
    EconomicSector.INFORMATION_COMMUNICATION: "Information and Communication",
    EconomicSector.MANUFACTURING: "Manufacturing",
    EconomicSector.MINING_QUARRYING: "Mining and Quarrying",
    EconomicSector.PROFESSIONAL_SCIENTIFIC_TECHNICAL: "Professional, Scientific and Technical Activities",
    EconomicSector.PUBLIC_ADMINISTRATION_DEFENCE: "Public Administration and Defence",
    EconomicSector.REAL_ESTATE: "Real Estate Activities",
    EconomicSector.TRANSPORTATION_STORAGE: "Transportation and Storage",
    EconomicSector.WATER_SEWERAGE_WASTE: "Water Supply, Sewerage, Waste Management",
    EconomicSector.WHOLESALE_RETAIL_TRADE: "Wholesale and Retail Trade",
}

PROVINCE_LABELS: Dict[Province, str] = {
    Province.EASTERN_CAPE: "Eastern Cape",
    Province.FREE_STATE: "Free State",
    Province.GAUTENG: "Gauteng",
    Province.KWAZULU_NATAL: "KwaZulu-Natal",
    Province.LIMPOPO: "Limpopo",
    Province.MPUMALANGA: "Mpumalanga",
    Province.NORTHERN_CAPE: "Northern Cape",
    Province.NORTH_WEST: "North West",
    Province.WESTERN_CAPE: "Western Cape",
}

RACE_LABELS: Dict[Race, str] = {
    Race.AFRICAN: "African",
    Race.COLOURED: "Coloured",
    Race.INDIAN: "Indian",
    Race.WHITE: "White",
}

GENDER_LABELS: Dict[Gender, str] = {Gender.MALE: "Male", Gender.FEMALE: "Female"}

DISABILITY_TYPE_LABELS: Dict[DisabilityType, str] = {
    DisabilityType.COMMUNICATION: "Communication",
    DisabilityType.HEARING: "Hearing",
    DisabilityType.INTELLECTUAL: "Intellectual",
    DisabilityType.MENTAL_EMOTIONAL: "Mental / Emotional",
    DisabilityType.PHYSICAL: "Physical",
    DisabilityType.SIGHT: "Sight",
    DisabilityType.OTHER: "Other",
}

DESIGNATED_RACES = frozenset({Race.AFRICAN, Race.COLOURED, Race.INDIAN})

# Employees with disabilities as a fraction of the active workforce.
DISABILITY_TARGET = 0.03

# Gap thresholds in percentage points.
COMPLIANT_THRESHOLD = 0
NEAR_COMPLIANT_THRESHOLD = 5

DEMOGRAPHIC_KEYS = ("AM", "AF", "CM", "CF", "IM", "IF", "WM", "WF", "foreignMale", "foreignFemale")


def _format(labels: Dict[Any, str], value: Any) -> Any:
    try:
        return labels[type(next(iter(labels)))(value)]
    except (ValueError, KeyError):
        return value


def format_occupational_level(level: Any) -> Any:
    """Return the display label for ``level``; unknown values come back unchanged."""
    return _format(OCCUPATIONAL_LEVEL_LABELS, level)


def format_economic_sector(sector: Any) -> Any:
    return _format(ECONOMIC_SECTOR_LABELS, sector)


def format_province(province: Any) -> Any:
    return _format(PROVINCE_LABELS, province)


def format_race(race: Any) -> Any:
    return _format(RACE_LABELS, race)


def format_gender(gender: Any) -> Any:
    return _format(GENDER_LABELS, gender)


def format_disability_type(disability_type: Any) -> Any:
    return _format(DISABILITY_TYPE_LABELS, disability_type)


def _enum_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value.value if isinstance(value, Enum) else str(value)


def get_demographic_key(employee: Any) -> str:
    """Return the reporting bucket for an employee, e.g. ``AM``, ``WF`` or ``foreignMale``."""
    is_male = _enum_value(employee.gender) == Gender.MALE.value
    if employee.is_foreign_national:
        return "foreignMale" if is_male else "foreignFemale"

    race_code = (_enum_value(employee.race) or "")[:1]
    return f"{race_code}{'M' if is_male else 'F'}"


def is_designated_group(employee: Any) -> bool:
    """Classify an employee as a designated group member.

    Designated groups are African, Coloured and Indian people of any gender,
    White females, and people with disabilities of any race. Foreign
    nationals are never designated; White males without a disability are not.
    """
    if employee.is_foreign_national:
        return False

    if employee.has_disability:
        return True

    if _enum_value(employee.race) == Race.WHITE.value and _enum_value(employee.gender) == Gender.MALE.value:
        return False

    return True


def get_compliance_status(gap: float) -> ComplianceStatus:
    """Map a gap to target (percentage points) to a compliance status."""
    if gap <= COMPLIANT_THRESHOLD:
        return ComplianceStatus.COMPLIANT
    if gap <= NEAR_COMPLIANT_THRESHOLD:
        return ComplianceStatus.NEAR_COMPLIANT
    return ComplianceStatus.NON_COMPLIANT


# Fallback designated-group targets (fraction of workforce per level) used
# when no sector target rows have been loaded for the company's sector.
DEFAULT_LEVEL_TARGETS: Dict[OccupationalLevel, float] = {
    OccupationalLevel.TOP_MANAGEMENT: 0.50,
    OccupationalLevel.SENIOR_MANAGEMENT: 0.60,
    OccupationalLevel.PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT: 0.70,
    OccupationalLevel.SKILLED_TECHNICAL: 0.80,
}

_SECTOR_TARGET_OVERRIDES: Dict[EconomicSector, Dict[OccupationalLevel, float]] = {
    EconomicSector.FINANCIAL_INSURANCE: {
        OccupationalLevel.TOP_MANAGEMENT: 0.45,
        OccupationalLevel.SENIOR_MANAGEMENT: 0.55,
    },
    EconomicSector.MINING_QUARRYING: {
        OccupationalLevel.SKILLED_TECHNICAL: 0.85,
    },
    EconomicSector.PUBLIC_ADMINISTRATION_DEFENCE: {
        OccupationalLevel.TOP_MANAGEMENT: 0.70,
        OccupationalLevel.SENIOR_MANAGEMENT: 0.75,
        OccupationalLevel.PROFESSIONALLY_QUALIFIED_MID_MANAGEMENT: 0.80,
        OccupationalLevel.SKILLED_TECHNICAL: 0.85,
    },
}


def default_sector_targets(sector: Any) -> Dict[OccupationalLevel, float]:
    """Return built-in targets for ``sector``, ordered from top management down."""
    targets = dict(DEFAULT_LEVEL_TARGETS)
    try:
        targets.update(_SECTOR_TARGET_OVERRIDES.get(EconomicSector(_enum_value(sector)), {}))
    except ValueError:
        pass
    return targets


__all__ = [
    "OccupationalLevel",
    "EconomicSector",
    "Province",
    "Race",
    "Gender",
    "DisabilityType",
    "EmployeeStatus",
    "EAPType",
    "ComplianceStatus",
    "OCCUPATIONAL_LEVEL_LABELS",
    "ECONOMIC_SECTOR_LABELS",
    "PROVINCE_LABELS",
    "RACE_LABELS",
    "GENDER_LABELS",
    "DISABILITY_TYPE_LABELS",
    "DESIGNATED_RACES",
    "DISABILITY_TARGET",
    "COMPLIANT_THRESHOLD",
    "NEAR_COMPLIANT_THRESHOLD",
    "DEMOGRAPHIC_KEYS",
    "DEFAULT_LEVEL_TARGETS",
    "format_occupational_level",
    "format_economic_sector",
    "format_province",
    "format_race",
    "format_gender",
    "format_disability_type",
    "get_demographic_key",
    "is_designated_group",
    "get_compliance_status",
    "default_sector_targets",
]
