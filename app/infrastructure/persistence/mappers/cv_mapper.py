"""
Mapper between CV domain entities and CVTable persistence models.

Parsed metadata and match results are stored as JSONB documents; the mapper
owns their document layout.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.domain.entities.cv import CV, CVMetadata, CVStatus, EducationEntry, ExperienceEntry, StoredMatch
from app.domain.value_objects import CVId, JobSpecId, UserId
from app.infrastructure.persistence.models.cv_table import CVTable


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


class CVMapper:
    """Maps between CV domain entities and CVTable persistence models."""

    @staticmethod
    def to_domain(table: CVTable) -> CV:
        """Convert CVTable (persistence) to CV (domain entity)."""
        return CV(
            id=CVId(table.id),
            owner_id=UserId(table.owner_id),
            uploaded_by=UserId(table.created_by or table.owner_id),
            file_name=table.file_name,
            file_type=table.file_type,
            file_size=table.file_size,
            storage_path=table.storage_path,
            status=CVStatus(table.status),
            parsed=table.parsed,
            metadata=CVMapper.metadata_from_document(table.parsed_metadata or {}),
            custom_fields=dict(table.custom_fields or {}),
            match_results={
                job_spec_id: CVMapper.match_from_document(job_spec_id, document)
                for job_spec_id, document in (table.match_results or {}).items()
            },
            processing_error=table.processing_error,
            view_count=table.view_count,
            last_viewed_at=table.last_viewed_at,
            uploaded_at=table.uploaded_at,
            updated_at=table.updated_at,
        )

    @staticmethod
    def to_table(entity: CV) -> CVTable:
        """Convert CV (domain entity) to CVTable (persistence)."""
        table = CVTable(
            id=entity.id.value,
            owner_id=entity.owner_id.value,
            created_by=entity.uploaded_by.value,
            file_name=entity.file_name,
            file_type=entity.file_type,
            storage_path=entity.storage_path,
            uploaded_at=entity.uploaded_at,
            created_at=entity.uploaded_at,
        )
        CVMapper.update_table_from_domain(table, entity)
        return table

    @staticmethod
    def update_table_from_domain(table: CVTable, entity: CV) -> None:
        """Copy mutable CV state onto an existing row."""
        table.file_name = entity.file_name
        table.file_type = entity.file_type
        table.file_size = entity.file_size
        table.storage_path = entity.storage_path
        table.status = entity.status.value
        table.parsed = entity.parsed
        table.parsed_metadata = CVMapper.metadata_to_document(entity.metadata)
        table.custom_fields = dict(entity.custom_fields)
        table.match_results = {
            job_spec_id: CVMapper.match_to_document(match)
            for job_spec_id, match in entity.match_results.items()
        }
        table.processing_error = entity.processing_error
        table.view_count = entity.view_count
        table.last_viewed_at = entity.last_viewed_at
        table.updated_at = entity.updated_at

    @staticmethod
    def metadata_to_document(metadata: CVMetadata) -> Dict[str, Any]:
        return asdict(metadata)

    @staticmethod
    def metadata_from_document(document: Dict[str, Any]) -> CVMetadata:
        experience: List[ExperienceEntry] = [
            ExperienceEntry(**{key: entry.get(key) for key in ExperienceEntry.__dataclass_fields__})
            for entry in document.get("experience") or []
            if isinstance(entry, dict)
        ]
        education: List[EducationEntry] = [
            EducationEntry(**{key: entry.get(key) for key in EducationEntry.__dataclass_fields__})
            for entry in document.get("education") or []
            if isinstance(entry, dict)
        ]
        return CVMetadata(
            name=document.get("name"),
            email=document.get("email"),
            phone=document.get("phone"),
            location=document.get("location"),
            age=document.get("age"),
            gender=document.get("gender"),
            race=document.get("race"),
            skills=list(document.get("skills") or []),
            experience=experience,
            education=education,
            summary=document.get("summary"),
        )

    @staticmethod
    def match_to_document(match: StoredMatch) -> Dict[str, Any]:
        return {
            "score": match.score,
            "quality": match.quality,
            "breakdown": match.breakdown,
            "strengths": list(match.strengths),
            "gaps": list(match.gaps),
            "insights": list(match.insights),
            "recommendation": match.recommendation,
            "matched_at": match.matched_at.isoformat(),
        }

    @staticmethod
    def match_from_document(job_spec_id: str, document: Dict[str, Any]) -> StoredMatch:
        return StoredMatch(
            job_spec_id=JobSpecId(job_spec_id),
            score=int(document.get("score", 0)),
            quality=document.get("quality", ""),
            breakdown=document.get("breakdown") or {},
            strengths=list(document.get("strengths") or []),
            gaps=list(document.get("gaps") or []),
            insights=list(document.get("insights") or []),
            recommendation=document.get("recommendation"),
            matched_at=_parse_datetime(document.get("matched_at")) or datetime.utcnow(),
        )


__all__ = ["CVMapper"]
