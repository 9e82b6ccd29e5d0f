"""Domain value objects used across aggregates."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any
from uuid import UUID, uuid4


def _coerce_uuid(value: Any, *, field_name: str) -> UUID:
    """Convert strings to UUID instances while validating type."""
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        return UUID(value)
    raise TypeError(f"{field_name} must be a UUID-compatible value")


@dataclass(frozen=True)
class UserId:
    """Identifier for user accounts. A team owner's id also identifies the workspace."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="user_id"))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CVId:
    """Aggregate identifier for CV domain entities."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="cv_id"))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "CVId":
        return cls(uuid4())


@dataclass(frozen=True)
class JobSpecId:
    """Aggregate identifier for job specifications."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="job_spec_id"))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "JobSpecId":
        return cls(uuid4())


@dataclass(frozen=True)
class TeamMemberId:
    """Identifier for team membership records."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="team_member_id"))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "TeamMemberId":
        return cls(uuid4())


@dataclass(frozen=True)
class TeamInviteId:
    """Identifier for team invitations."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="team_invite_id"))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "TeamInviteId":
        return cls(uuid4())


@dataclass(frozen=True)
class CustomFieldId:
    """Identifier for custom field definitions."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="custom_field_id"))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "CustomFieldId":
        return cls(uuid4())


@dataclass(frozen=True)
class CompanyId:
    """Identifier for EEA company profiles."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="company_id"))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "CompanyId":
        return cls(uuid4())


@dataclass(frozen=True)
class EmployeeId:
    """Identifier for EEA employee records."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="employee_id"))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "EmployeeId":
        return cls(uuid4())


@dataclass(frozen=True)
class ActivityLogId:
    """Identifier for activity log entries."""

    value: UUID

    def __init__(self, value: Any):
        object.__setattr__(self, "value", _coerce_uuid(value, field_name="activity_log_id"))

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> "ActivityLogId":
        return cls(uuid4())


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class EmailAddress:
    """Value object for email addresses with validation."""

    value: str

    def __init__(self, value: str):
        if not value or not _EMAIL_PATTERN.match(value.strip()):
            raise ValueError("Invalid email address format")

        object.__setattr__(self, "value", value.lower().strip())

    def __str__(self) -> str:
        return self.value


__all__ = [
    "UserId",
    "CVId",
    "JobSpecId",
    "TeamMemberId",
    "TeamInviteId",
    "CustomFieldId",
    "CompanyId",
    "EmployeeId",
    "ActivityLogId",
    "EmailAddress",
]
