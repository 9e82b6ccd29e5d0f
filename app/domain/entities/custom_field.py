"""Workspace-defined custom fields attached to CVs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from app.domain.value_objects import CustomFieldId, UserId


class CustomFieldType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    SELECT = "select"


_NAME_PATTERN = re.compile(r"[^a-z0-9]+")
_TRUTHY = {"true", "yes", "1", "y"}
_FALSY = {"false", "no", "0", "n"}


def to_field_name(label: str) -> str:
    """Convert a label into the snake_case key used to store values."""
    return _NAME_PATTERN.sub("_", (label or "").strip().lower()).strip("_")


@dataclass
class CustomFieldDefinition:
    """A single custom field definition owned by a workspace."""

    id: CustomFieldId
    owner_id: UserId
    name: str
    label: str
    field_type: CustomFieldType = CustomFieldType.TEXT
    required: bool = False
    options: List[str] = field(default_factory=list)
    conditional_on: Optional[str] = None
    conditional_value: Optional[str] = None
    order: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self.name = to_field_name(self.name or self.label)
        self._validate()

    def _validate(self) -> None:
        if not self.name:
            raise ValueError("Field name is required")
        if not self.label or not self.label.strip():
            raise ValueError("Field label is required")
        self.options = [option.strip() for option in self.options if option and option.strip()]
        if self.field_type == CustomFieldType.SELECT and not self.options:
            raise ValueError("Select fields must have at least one option")
        if self.conditional_on and self.conditional_on == self.name:
            raise ValueError("A field cannot be conditional on itself")

    def update(self, **changes) -> None:
        for name, value in changes.items():
            if name in {"id", "owner_id", "name", "created_at"}:
                continue
            if not hasattr(self, name):
                raise ValueError(f"Unknown custom field attribute: {name}")
            setattr(self, name, value)
        self._validate()
        self.updated_at = datetime.utcnow()

    def is_active_for(self, values: Dict[str, Any]) -> bool:
        """Whether the field applies given the other submitted values."""
        if not self.conditional_on:
            return True
        current = values.get(self.conditional_on)
        if self.conditional_value is None:
            return bool(current)
        return str(current).strip().lower() == str(self.conditional_value).strip().lower()

    @staticmethod
    def _is_blank(value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    def validate_value(self, value: Any) -> Any:
        """Coerce a submitted value to the field type.

        Returns ``None`` for blank input; raises ``ValueError`` when the value
        cannot be represented by this field.
        """
        if self._is_blank(value):
            return None

        if self.field_type == CustomFieldType.BOOLEAN:
            if isinstance(value, bool):
                return value
            text = str(value).strip().lower()
            if text in _TRUTHY:
                return True
            if text in _FALSY:
                return False
            raise ValueError(f"{self.label} must be yes or no")

        if self.field_type == CustomFieldType.NUMBER:
            if isinstance(value, bool):
                raise ValueError(f"{self.label} must be a number")
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise ValueError(f"{self.label} must be a number")
            return int(number) if number.is_integer() else number

        if self.field_type == CustomFieldType.DATE:
            if isinstance(value, datetime):
                return value.date().isoformat()
            if isinstance(value, date):
                return value.isoformat()
            try:
                return date.fromisoformat(str(value).strip()[:10]).isoformat()
            except ValueError:
                raise ValueError(f"{self.label} must be a date in YYYY-MM-DD format")

        text = str(value).strip()
        if self.field_type == CustomFieldType.SELECT:
            for option in self.options:
                if option.lower() == text.lower():
                    return option
            raise ValueError(f"{self.label} must be one of: {', '.join(self.options)}")
        return text

    def matches_filter(self, value: Any, filter_value: Any) -> bool:
        """Apply the list filter for this field to a stored CV value."""
        if self._is_blank(filter_value):
            return True
        if value is None:
            return False

        if self.field_type == CustomFieldType.BOOLEAN:
            wanted = str(filter_value).strip().lower() == "true"
            actual = value if isinstance(value, bool) else str(value).strip().lower() == "true"
            return actual == wanted

        if self.field_type == CustomFieldType.NUMBER:
            try:
                return float(value) == float(filter_value)
            except (TypeError, ValueError):
                return False

        if self.field_type == CustomFieldType.DATE:
            return str(value)[:10] == str(filter_value).strip()[:10]

        return str(filter_value).strip().lower() in str(value).lower()


@dataclass(frozen=True)
class CustomFieldTemplateField:
    name: str
    label: str
    field_type: CustomFieldType
    required: bool = False
    options: tuple = ()


@dataclass(frozen=True)
class CustomFieldTemplate:
    key: str
    name: str
    description: str
    fields: tuple


_T = CustomFieldType

CUSTOM_FIELD_TEMPLATES: Dict[str, CustomFieldTemplate] = {
    "recruitment": CustomFieldTemplate(
        key="recruitment",
        name="Recruitment Agency",
        description="Candidate availability and placement details",
        fields=(
            CustomFieldTemplateField(
                "notice_period", "Notice Period", _T.SELECT, True,
                ("Immediate", "1 Week", "2 Weeks", "1 Month", "2 Months", "3 Months"),
            ),
            CustomFieldTemplateField("salary_expectation", "Salary Expectation", _T.TEXT),
            CustomFieldTemplateField("available_for_relocation", "Available for Relocation", _T.BOOLEAN),
            CustomFieldTemplateField("driver_license", "Has Driver License", _T.BOOLEAN),
            CustomFieldTemplateField(
                "security_clearance", "Security Clearance", _T.SELECT, False,
                ("None", "Confidential", "Secret", "Top Secret"),
            ),
            CustomFieldTemplateField("interview_availability", "Interview Availability", _T.DATE),
        ),
    ),
    "internal": CustomFieldTemplate(
        key="internal",
        name="Corporate HR",
        description="Internal mobility and employee records",
        fields=(
            CustomFieldTemplateField("employee_id", "Employee ID", _T.TEXT),
            CustomFieldTemplateField(
                "department", "Department", _T.SELECT, True,
                ("Engineering", "Sales", "Marketing", "Finance", "HR", "Operations"),
            ),
            CustomFieldTemplateField(
                "seniority_level", "Seniority Level", _T.SELECT, True,
                ("Entry", "Junior", "Mid", "Senior", "Lead", "Manager", "Director", "Executive"),
            ),
            CustomFieldTemplateField("hire_date", "Hire Date", _T.DATE),
            CustomFieldTemplateField(
                "performance_rating", "Performance Rating", _T.SELECT, False,
                (
                    "1 - Needs Improvement",
                    "2 - Meets Expectations",
                    "3 - Exceeds Expectations",
                    "4 - Outstanding",
                    "5 - Exceptional",
                ),
            ),
            CustomFieldTemplateField("internal_referral", "Internal Referral", _T.BOOLEAN),
        ),
    ),
    "trades": CustomFieldTemplate(
        key="trades",
        name="Construction/Trades",
        description="Trade certification, tools and site experience",
        fields=(
            CustomFieldTemplateField("trade_certification", "Trade Certification", _T.TEXT, True),
            CustomFieldTemplateField("years_in_trade", "Years in Trade", _T.NUMBER, True),
            CustomFieldTemplateField("has_own_tools", "Has Own Tools", _T.BOOLEAN),
            CustomFieldTemplateField(
                "vehicle_type", "Vehicle Type", _T.SELECT, False,
                ("None", "Car", "Bakkie", "Van", "Truck"),
            ),
            CustomFieldTemplateField("willing_to_travel", "Willing to Travel", _T.BOOLEAN),
            CustomFieldTemplateField(
                "site_experience", "Site Experience", _T.SELECT, False,
                ("Residential", "Commercial", "Industrial", "Infrastructure", "All"),
            ),
        ),
    ),
    "tech": CustomFieldTemplate(
        key="tech",
        name="Tech/IT",
        description="Online profiles and technical background",
        fields=(
            CustomFieldTemplateField("github_profile", "GitHub Profile", _T.TEXT),
            CustomFieldTemplateField("linkedin_profile", "LinkedIn Profile", _T.TEXT),
            CustomFieldTemplateField("portfolio_url", "Portfolio URL", _T.TEXT),
            CustomFieldTemplateField(
                "remote_work_preference", "Remote Work Preference", _T.SELECT, False,
                ("On-site", "Hybrid", "Remote", "Flexible"),
            ),
            CustomFieldTemplateField("tech_stack", "Primary Tech Stack", _T.TEXT),
            CustomFieldTemplateField("certifications_count", "Number of Certifications", _T.NUMBER),
        ),
    ),
}


__all__ = [
    "CustomFieldType",
    "CustomFieldDefinition",
    "CustomFieldTemplate",
    "CustomFieldTemplateField",
    "CUSTOM_FIELD_TEMPLATES",
    "to_field_name",
]
