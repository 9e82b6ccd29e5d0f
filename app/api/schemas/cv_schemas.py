"""
CV API schemas and DTOs.

Request and response models for CV upload, listing and metadata updates.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import id_str
from app.domain.entities.cv import CV, CVMetadata, EducationEntry, ExperienceEntry, StoredMatch
from app.domain.value_objects import JobSpecId


class ExperienceEntrySchema(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class EducationEntrySchema(BaseModel):
    degree: Optional[str] = None
    institution: Optional[str] = None
    field_of_study: Optional[str] = None
    year: Optional[str] = None


class CVMetadataSchema(BaseModel):
    """Parsed CV content as produced by the external parser."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=120)
    gender: Optional[str] = None
    race: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience: List[ExperienceEntrySchema] = Field(default_factory=list)
    education: List[EducationEntrySchema] = Field(default_factory=list)
    summary: Optional[str] = None

    def to_domain(self) -> CVMetadata:
        return CVMetadata(
            name=self.name,
            email=self.email,
            phone=self.phone,
            location=self.location,
            age=self.age,
            gender=self.gender,
            race=self.race,
            skills=list(self.skills),
            experience=[ExperienceEntry(**entry.model_dump()) for entry in self.experience],
            education=[EducationEntry(**entry.model_dump()) for entry in self.education],
            summary=self.summary,
        )

    @classmethod
    def from_domain(cls, metadata: CVMetadata) -> "CVMetadataSchema":
        return cls(
            name=metadata.name,
            email=metadata.email,
            phone=metadata.phone,
            location=metadata.location,
            age=metadata.age,
            gender=metadata.gender,
            race=metadata.race,
            skills=list(metadata.skills),
            experience=[ExperienceEntrySchema(**vars(entry)) for entry in metadata.experience],
            education=[EducationEntrySchema(**vars(entry)) for entry in metadata.education],
            summary=metadata.summary,
        )


class StoredMatchResponse(BaseModel):
    job_spec_id: str
    score: int
    quality: str
    breakdown: Dict[str, Any] = Field(default_factory=dict)
    strengths: List[str] = Field(default_factory=list)
    gaps: List[str] = Field(default_factory=list)
    insights: List[str] = Field(default_factory=list)
    recommendation: Optional[str] = None
    matched_at: datetime

    @classmethod
    def from_domain(cls, match: StoredMatch) -> "StoredMatchResponse":
        return cls(
            job_spec_id=str(match.job_spec_id),
            score=match.score,
            quality=match.quality,
            breakdown=match.breakdown,
            strengths=match.strengths,
            gaps=match.gaps,
            insights=match.insights,
            recommendation=match.recommendation,
            matched_at=match.matched_at,
        )


class CVResponse(BaseModel):
    """CV record as returned by the API."""

    id: str
    owner_id: str
    uploaded_by: str
    file_name: str
    file_type: str
    file_size: int
    status: str
    parsed: bool
    display_name: str
    metadata: CVMetadataSchema
    custom_fields: Dict[str, Any] = Field(default_factory=dict)
    match_results: Dict[str, StoredMatchResponse] = Field(default_factory=dict)
    match_score: Optional[int] = Field(None, description="Stored score for the selected job spec")
    processing_error: Optional[str] = None
    view_count: int = 0
    last_viewed_at: Optional[datetime] = None
    uploaded_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, cv: CV, job_spec_id: Optional[JobSpecId] = None) -> "CVResponse":
        return cls(
            id=id_str(cv.id),
            owner_id=id_str(cv.owner_id),
            uploaded_by=id_str(cv.uploaded_by),
            file_name=cv.file_name,
            file_type=cv.file_type,
            file_size=cv.file_size,
            status=cv.status.value,
            parsed=cv.parsed,
            display_name=cv.display_name,
            metadata=CVMetadataSchema.from_domain(cv.metadata),
            custom_fields=dict(cv.custom_fields),
            match_results={key: StoredMatchResponse.from_domain(match) for key, match in cv.match_results.items()},
            match_score=cv.match_score_for(job_spec_id) if job_spec_id else None,
            processing_error=cv.processing_error,
            view_count=cv.view_count,
            last_viewed_at=cv.last_viewed_at,
            uploaded_at=cv.uploaded_at,
            updated_at=cv.updated_at,
        )


class CVListResponse(BaseModel):
    items: List[CVResponse] = Field(default_factory=list)
    total: int = Field(0, ge=0)


class UploadFailure(BaseModel):
    file_name: str
    error: str


class BulkUploadResponse(BaseModel):
    uploaded: List[CVResponse] = Field(default_factory=list)
    failed: List[UploadFailure] = Field(default_factory=list)
    total_uploaded: int = 0
    total_failed: int = 0


class ParsingFailedRequest(BaseModel):
    reason: Optional[str] = Field(None, max_length=1000)


class CustomFieldValuesUpdate(BaseModel):
    values: Dict[str, Any] = Field(default_factory=dict, description="Custom field values keyed by field name")


__all__ = [
    "ExperienceEntrySchema",
    "EducationEntrySchema",
    "CVMetadataSchema",
    "StoredMatchResponse",
    "CVResponse",
    "CVListResponse",
    "UploadFailure",
    "BulkUploadResponse",
    "ParsingFailedRequest",
    "CustomFieldValuesUpdate",
]
