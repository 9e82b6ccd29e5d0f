"""Domain service for filtering and ordering a workspace's CV list.

Professional filters (location, skills, experience) drop CVs that lack the
data being filtered on. Demographic filters (gender, race, age) keep such
CVs only when ``include_unknown`` is set.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Dict, Iterable, List, Optional

import structlog

from app.domain.entities.custom_field import CustomFieldDefinition
from app.domain.entities.cv import CV, CVStatus, ExperienceEntry
from app.domain.value_objects import JobSpecId

logger = structlog.get_logger(__name__)


EXPERIENCE_BRACKETS = ("0-2", "3-5", "6-10", "10+")
YEARS_PER_ROLE_ESTIMATE = 1.5

_YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")


@dataclass
class CVFilterCriteria:
    """Filters accepted by the CV list."""

    search: Optional[str] = None
    only_parsed: bool = False
    status: Optional[CVStatus] = None
    file_type: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    gender: Optional[str] = None
    race: Optional[str] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    include_unknown: bool = True
    location: Optional[str] = None
    skills: Optional[str] = None
    experience: Optional[str] = None
    custom_fields: Dict[str, str] = field(default_factory=dict)
    job_spec_id: Optional[JobSpecId] = None

    def __post_init__(self):
        if self.experience and self.experience not in EXPERIENCE_BRACKETS:
            raise ValueError(
                f"Experience filter must be one of: {', '.join(EXPERIENCE_BRACKETS)}"
            )
        if self.age_min is not None and self.age_max is not None and self.age_min > self.age_max:
            raise ValueError("Minimum age cannot exceed maximum age")
        self.custom_fields = {name: value for name, value in self.custom_fields.items() if value not in (None, "")}

    @property
    def has_demographic_filters(self) -> bool:
        return bool(self.gender or self.race or self.age_min is not None or self.age_max is not None)

    @property
    def has_advanced_filters(self) -> bool:
        """Filters that need the advanced filtering plan feature."""
        return self.has_demographic_filters or bool(self.experience) or bool(self.custom_fields)

    @property
    def has_custom_field_filters(self) -> bool:
        return bool(self.custom_fields)


def calculate_role_years(entry: ExperienceEntry, current_year: int) -> int:
    """Years spent in one role, read from its duration or start/end dates."""
    if not entry.duration and not entry.start_date and not entry.end_date:
        return 0

    period = entry.duration or f"{entry.start_date or ''} - {entry.end_date or ''}"
    years = [int(match) for match in _YEAR_PATTERN.findall(period)]
    if not years:
        return 0

    lowered = period.lower()
    if "present" in lowered or "current" in lowered:
        end = current_year
    elif len(years) >= 2:
        end = years[-1]
    else:
        return 1
    return max(0, end - years[0])


def calculate_total_experience(experience: List[ExperienceEntry], current_year: int) -> float:
    """Sum of role years, estimated from the role count when no dates parse."""
    total: float = sum(calculate_role_years(entry, current_year) for entry in experience)
    if total == 0:
        total = len(experience) * YEARS_PER_ROLE_ESTIMATE
    return total


def in_experience_bracket(total_years: float, bracket: str) -> bool:
    if bracket == "0-2":
        return total_years <= 2
    if bracket == "3-5":
        return 3 <= total_years <= 5
    if bracket == "6-10":
        return 6 <= total_years <= 10
    if bracket == "10+":
        return total_years > 10
    return True


class ICVFilterService(ABC):
    """Domain service interface for CV list filtering."""

    @abstractmethod
    def apply(
        self,
        cvs: Iterable[CV],
        criteria: CVFilterCriteria,
        field_definitions: Optional[List[CustomFieldDefinition]] = None,
    ) -> List[CV]:
        """Return the CVs matching ``criteria``, ranked by match score when a job spec is given."""
        pass


class CVFilterService(ICVFilterService):
    """Applies list filters in memory over a workspace's CVs."""

    def __init__(self, current_year: Optional[int] = None):
        self._current_year = current_year

    @property
    def current_year(self) -> int:
        return self._current_year or datetime.utcnow().year

    def apply(
        self,
        cvs: Iterable[CV],
        criteria: CVFilterCriteria,
        field_definitions: Optional[List[CustomFieldDefinition]] = None,
    ) -> List[CV]:
        definitions = {definition.name: definition for definition in field_definitions or []}
        candidates = list(cvs)
        filtered = [cv for cv in candidates if self.matches(cv, criteria, definitions)]

        if criteria.job_spec_id is not None:
            filtered.sort(key=lambda cv: cv.match_score_for(criteria.job_spec_id), reverse=True)

        logger.debug(
            "CV filters applied",
            total=len(candidates),
            matched=len(filtered),
            job_spec_id=str(criteria.job_spec_id) if criteria.job_spec_id else None,
        )
        return filtered

    def matches(
        self,
        cv: CV,
        criteria: CVFilterCriteria,
        definitions: Optional[Dict[str, CustomFieldDefinition]] = None,
    ) -> bool:
        metadata = cv.metadata

        if criteria.only_parsed and not cv.is_parsed:
            return False

        if criteria.search:
            term = criteria.search.lower()
            searchable = (metadata.name, metadata.email, metadata.phone, metadata.location)
            if not any(value and term in value.lower() for value in searchable):
                return False

        if criteria.status is not None and cv.status != criteria.status:
            return False

        if criteria.file_type and criteria.file_type.lower() not in (cv.file_type or "").lower():
            return False

        if criteria.date_from and cv.uploaded_at < datetime.combine(criteria.date_from, time.min):
            return False
        if criteria.date_to and cv.uploaded_at > datetime.combine(criteria.date_to, time.max):
            return False

        if not self._matches_demographics(cv, criteria):
            return False

        if criteria.location:
            if not metadata.location or criteria.location.lower() not in metadata.location.lower():
                return False

        if criteria.skills:
            terms = [term.strip() for term in criteria.skills.lower().split(",") if term.strip()]
            if not metadata.skills:
                return False
            if terms and not any(term in skill.lower() for skill in metadata.skills for term in terms):
                return False

        if criteria.experience:
            if not metadata.experience:
                return False
            total = calculate_total_experience(metadata.experience, self.current_year)
            if not in_experience_bracket(total, criteria.experience):
                return False

        for name, filter_value in criteria.custom_fields.items():
            definition = (definitions or {}).get(name)
            if definition is None:
                continue
            if not definition.matches_filter(cv.custom_fields.get(name), filter_value):
                return False

        return True

    @staticmethod
    def _matches_demographics(cv: CV, criteria: CVFilterCriteria) -> bool:
        metadata = cv.metadata

        if criteria.gender:
            if not metadata.gender:
                if not criteria.include_unknown:
                    return False
            elif metadata.gender.lower() != criteria.gender.lower():
                return False

        if criteria.age_min is not None or criteria.age_max is not None:
            if metadata.age is None:
                if not criteria.include_unknown:
                    return False
            else:
                if criteria.age_min is not None and metadata.age < criteria.age_min:
                    return False
                if criteria.age_max is not None and metadata.age > criteria.age_max:
                    return False

        if criteria.race:
            if not metadata.race:
                if not criteria.include_unknown:
                    return False
            elif metadata.race.lower() != criteria.race.lower():
                return False

        return True


__all__ = [
    "CVFilterCriteria",
    "ICVFilterService",
    "CVFilterService",
    "EXPERIENCE_BRACKETS",
    "calculate_role_years",
    "calculate_total_experience",
    "in_experience_bracket",
]
