"""Application service running CV-to-job matching and storing the results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, List

import structlog

from app.application.workspace import WorkspaceContext
from app.domain.entities.cv import CV, StoredMatch
from app.domain.entities.job_spec import JobSpec
from app.domain.exceptions import (
    CVNotFoundError,
    JobSpecNotFoundError,
    MatchResultNotFoundError,
    ValidationError,
)
from app.domain.services.matching_service import MatchResult
from app.domain.value_objects import CVId, JobSpecId

if TYPE_CHECKING:
    from app.application.dependencies.matching_dependencies import MatchingDependencies


@dataclass
class BatchMatchSummary:
    """Ranked results of matching every parsed CV against one job spec."""

    job_spec_id: JobSpecId
    results: List[MatchResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def average_score(self) -> int:
        if not self.results:
            return 0
        return math.floor(sum(result.score for result in self.results) / len(self.results) + 0.5)

    @property
    def best_score(self) -> int:
        return max((result.score for result in self.results), default=0)


def to_stored_match(result: MatchResult) -> StoredMatch:
    return StoredMatch(
        job_spec_id=result.job_spec_id,
        score=result.score,
        quality=result.quality,
        breakdown=result.breakdown.to_dict(),
        strengths=list(result.strengths),
        gaps=list(result.gaps),
        insights=list(result.insights),
        recommendation=result.recommendation,
        matched_at=datetime.utcnow(),
    )


class MatchingApplicationService:
    """Coordinates matching between a workspace's CVs and job specs."""

    def __init__(self, dependencies: MatchingDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def _get_job_spec(self, workspace: WorkspaceContext, job_spec_id: JobSpecId) -> JobSpec:
        job_spec = await self._deps.job_spec_repository.get_by_id(job_spec_id, workspace.owner_id)
        if job_spec is None:
            raise JobSpecNotFoundError(f"Job specification {job_spec_id} not found")
        return job_spec

    async def _get_cv(self, workspace: WorkspaceContext, cv_id: CVId) -> CV:
        cv = await self._deps.cv_repository.get_by_id(cv_id, workspace.owner_id)
        if cv is None:
            raise CVNotFoundError(f"CV {cv_id} not found")
        return cv

    async def match_cv(self, workspace: WorkspaceContext, job_spec_id: JobSpecId, cv_id: CVId) -> MatchResult:
        """
        Match one CV against one job spec and store the result on the CV.

        Raises:
            JobSpecNotFoundError: If the job spec is not in the workspace
            CVNotFoundError: If the CV is not in the workspace
            ValidationError: If the CV has not been parsed yet
        """
        job_spec = await self._get_job_spec(workspace, job_spec_id)
        cv = await self._get_cv(workspace, cv_id)

        if not cv.is_parsed:
            raise ValidationError("CV has not been parsed yet and cannot be matched")

        result = self._deps.matching_service.calculate_match(cv, job_spec)
        cv.record_match(to_stored_match(result))
        await self._deps.cv_repository.save(cv)

        self._logger.info(
            "CV matched",
            cv_id=str(cv.id),
            job_spec_id=str(job_spec.id),
            score=result.score,
            quality=result.quality,
        )
        return result

    async def batch_match(self, workspace: WorkspaceContext, job_spec_id: JobSpecId) -> BatchMatchSummary:
        """
        Match every parsed CV in the workspace against a job spec.

        Args:
            workspace: Workspace whose CVs are matched
            job_spec_id: Target job specification

        Returns:
            BatchMatchSummary ranked by score, highest first
        """
        job_spec = await self._get_job_spec(workspace, job_spec_id)
        cvs = await self._deps.cv_repository.list_completed(workspace.owner_id)

        self._logger.info("Starting batch match", job_spec_id=str(job_spec.id), cv_count=len(cvs))

        by_id = {str(cv.id): cv for cv in cvs}
        ranked = self._deps.matching_service.rank_cvs(cvs, job_spec)
        for result in ranked:
            cv = by_id[str(result.cv_id)]
            cv.record_match(to_stored_match(result))
            await self._deps.cv_repository.save(cv)

        summary = BatchMatchSummary(job_spec_id=job_spec.id, results=ranked)
        self._logger.info(
            "Batch match completed successfully",
            job_spec_id=str(job_spec.id),
            total=summary.total,
            average_score=summary.average_score,
            best_score=summary.best_score,
        )
        return summary

    async def get_match_breakdown(
        self,
        workspace: WorkspaceContext,
        job_spec_id: JobSpecId,
        cv_id: CVId,
    ) -> StoredMatch:
        cv = await self._get_cv(workspace, cv_id)
        stored = cv.match_results.get(str(job_spec_id))
        if stored is None:
            raise MatchResultNotFoundError(f"CV {cv_id} has not been matched against job specification {job_spec_id}")
        return stored


__all__ = ["MatchingApplicationService", "BatchMatchSummary", "to_stored_match"]
