"""Job specification API schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import id_str
from app.domain.entities.job_spec import JobSpec


class JobSpecBase(BaseModel):
    location: Optional[str] = Field(None, max_length=200)
    location_type: Optional[str] = Field(None, description="onsite, remote or hybrid")
    department: Optional[str] = Field(None, max_length=200)
    industry: Optional[str] = Field(None, max_length=200)
    min_experience: Optional[int] = Field(None, ge=0, le=60)
    max_experience: Optional[int] = Field(None, ge=0, le=60)
    required_skills: Optional[List[str]] = Field(None, description="Skills a candidate must have")
    preferred_skills: Optional[List[str]] = Field(None, description="Nice-to-have skills")
    education: Optional[str] = None
    gender: Optional[str] = None
    race: Optional[str] = None
    min_age: Optional[int] = Field(None, ge=16, le=100)
    max_age: Optional[int] = Field(None, ge=16, le=100)
    description: Optional[str] = None


class JobSpecCreate(JobSpecBase):
    title: str = Field(..., min_length=1, max_length=200)


class JobSpecUpdate(JobSpecBase):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    is_active: Optional[bool] = None


class JobSpecResponse(BaseModel):
    id: str
    owner_id: str
    created_by: str
    title: str
    location: Optional[str] = None
    location_type: str
    department: Optional[str] = None
    industry: Optional[str] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    required_skills: List[str] = Field(default_factory=list)
    preferred_skills: List[str] = Field(default_factory=list)
    education: Optional[str] = None
    gender: Optional[str] = None
    race: Optional[str] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    description: Optional[str] = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime
    updated_by: Optional[str] = None

    @classmethod
    def from_entity(cls, job_spec: JobSpec) -> "JobSpecResponse":
        return cls(
            id=id_str(job_spec.id),
            owner_id=id_str(job_spec.owner_id),
            created_by=id_str(job_spec.created_by),
            title=job_spec.title,
            location=job_spec.location,
            location_type=job_spec.location_type.value,
            department=job_spec.department,
            industry=job_spec.industry,
            min_experience=job_spec.min_experience,
            max_experience=job_spec.max_experience,
            required_skills=list(job_spec.required_skills),
            preferred_skills=list(job_spec.preferred_skills),
            education=job_spec.education,
            gender=job_spec.gender,
            race=job_spec.race,
            min_age=job_spec.min_age,
            max_age=job_spec.max_age,
            description=job_spec.description,
            is_active=job_spec.is_active,
            created_at=job_spec.created_at,
            updated_at=job_spec.updated_at,
            updated_by=id_str(job_spec.updated_by),
        )


__all__ = ["JobSpecCreate", "JobSpecUpdate", "JobSpecResponse"]
