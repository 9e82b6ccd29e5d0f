"""Pure domain representation of uploaded CVs and their parsed metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from app.domain.value_objects import CVId, JobSpecId, UserId


class CVStatus(str, Enum):
    """Processing lifecycle of an uploaded CV."""

    UPLOADED = "uploaded"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


ALLOWED_CV_EXTENSIONS = (".pdf", ".doc", ".docx", ".txt")


@dataclass
class ExperienceEntry:
    """A single role from the candidate's work history, most recent first."""

    title: Optional[str] = None
    company: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    def period_text(self) -> str:
        """Free-text period used for year extraction."""
        if self.duration:
            return self.duration
        if self.start_date or self.end_date:
            return f"{self.start_date or ''} - {self.end_date or 'Present'}"
        return ""


@dataclass
class EducationEntry:
    degree: Optional[str] = None
    institution: Optional[str] = None
    field_of_study: Optional[str] = None
    year: Optional[str] = None


@dataclass
class CVMetadata:
    """Structured data extracted from a CV by the parsing pipeline."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    race: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    summary: Optional[str] = None

    @property
    def highest_education_text(self) -> str:
        """Degree text of the first education entry, as listed on the CV."""
        if not self.education:
            return ""
        first = self.education[0]
        return first.degree or first.field_of_study or ""


@dataclass
class StoredMatch:
    """Match result persisted on the CV for one job specification."""

    job_spec_id: JobSpecId
    score: int
    quality: str
    breakdown: Dict[str, Any] = field(default_factory=dict)
    strengths: List[str] = field(default_factory=list)
    gaps: List[str] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)
    recommendation: Optional[str] = None
    matched_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class CV:
    """Aggregate root for an uploaded CV within a workspace."""

    id: CVId
    owner_id: UserId
    uploaded_by: UserId
    file_name: str
    file_type: str
    file_size: int
    storage_path: str
    status: CVStatus = CVStatus.UPLOADED
    parsed: bool = False
    metadata: CVMetadata = field(default_factory=CVMetadata)
    custom_fields: Dict[str, Any] = field(default_factory=dict)
    match_results: Dict[str, StoredMatch] = field(default_factory=dict)
    processing_error: Optional[str] = None
    view_count: int = 0
    last_viewed_at: Optional[datetime] = None
    uploaded_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if not self.file_name or not self.file_name.strip():
            raise ValueError("CV must have a file name")
        if self.file_size < 0:
            raise ValueError("File size cannot be negative")

    @property
    def display_name(self) -> str:
        return self.metadata.name or self.file_name

    @property
    def is_parsed(self) -> bool:
        return self.parsed and self.status == CVStatus.COMPLETED

    def mark_processing(self) -> None:
        self.status = CVStatus.PROCESSING
        self.processing_error = None
        self.updated_at = datetime.utcnow()

    def apply_parsed_metadata(self, metadata: CVMetadata) -> None:
        """Store parser output and mark the CV as ready for matching."""
        self.metadata = metadata
        self.parsed = True
        self.status = CVStatus.COMPLETED
        self.processing_error = None
        self.updated_at = datetime.utcnow()

    def mark_processing_failed(self, reason: Optional[str] = None) -> None:
        self.status = CVStatus.FAILED
        self.parsed = False
        self.processing_error = reason
        self.updated_at = datetime.utcnow()

    def set_custom_field_values(self, values: Dict[str, Any]) -> None:
        self.custom_fields = dict(values)
        self.updated_at = datetime.utcnow()

    def record_match(self, match: StoredMatch) -> None:
        self.match_results[str(match.job_spec_id)] = match
        self.updated_at = datetime.utcnow()

    def remove_match(self, job_spec_id: JobSpecId) -> bool:
        removed = self.match_results.pop(str(job_spec_id), None) is not None
        if removed:
            self.updated_at = datetime.utcnow()
        return removed

    def match_score_for(self, job_spec_id: Optional[JobSpecId]) -> int:
        if job_spec_id is None:
            return 0
        match = self.match_results.get(str(job_spec_id))
        return match.score if match else 0

    def record_view(self) -> None:
        self.view_count += 1
        self.last_viewed_at = datetime.utcnow()


__all__ = [
    "CV",
    "CVStatus",
    "CVMetadata",
    "ExperienceEntry",
    "EducationEntry",
    "StoredMatch",
    "ALLOWED_CV_EXTENSIONS",
]
