"""Mapper between JobSpec domain entities and JobSpecTable persistence models."""

from __future__ import annotations

from app.domain.entities.job_spec import JobSpec, LocationType
from app.domain.value_objects import JobSpecId, UserId
from app.infrastructure.persistence.models.job_spec_table import JobSpecTable


_COPIED_FIELDS = (
    "title",
    "location",
    "department",
    "industry",
    "min_experience",
    "max_experience",
    "education",
    "gender",
    "race",
    "min_age",
    "max_age",
    "description",
    "is_active",
    "updated_at",
)


class JobSpecMapper:
    """Maps between JobSpec domain entities and JobSpecTable persistence models."""

    @staticmethod
    def to_domain(table: JobSpecTable) -> JobSpec:
        return JobSpec(
            id=JobSpecId(table.id),
            owner_id=UserId(table.owner_id),
            created_by=UserId(table.created_by or table.owner_id),
            title=table.title,
            location=table.location,
            location_type=LocationType(table.location_type),
            department=table.department,
            industry=table.industry,
            min_experience=table.min_experience,
            max_experience=table.max_experience,
            required_skills=list(table.required_skills or []),
            preferred_skills=list(table.preferred_skills or []),
            education=table.education,
            gender=table.gender,
            race=table.race,
            min_age=table.min_age,
            max_age=table.max_age,
            description=table.description,
            is_active=table.is_active,
            created_at=table.created_at,
            updated_at=table.updated_at,
            updated_by=UserId(table.updated_by) if table.updated_by else None,
        )

    @staticmethod
    def to_table(entity: JobSpec) -> JobSpecTable:
        table = JobSpecTable(
            id=entity.id.value,
            owner_id=entity.owner_id.value,
            created_by=entity.created_by.value,
            title=entity.title,
            created_at=entity.created_at,
        )
        JobSpecMapper.update_table_from_domain(table, entity)
        return table

    @staticmethod
    def update_table_from_domain(table: JobSpecTable, entity: JobSpec) -> None:
        for name in _COPIED_FIELDS:
            setattr(table, name, getattr(entity, name))
        table.location_type = entity.location_type.value
        table.required_skills = list(entity.required_skills)
        table.preferred_skills = list(entity.preferred_skills)
        table.updated_by = entity.updated_by.value if entity.updated_by else None


__all__ = ["JobSpecMapper"]
