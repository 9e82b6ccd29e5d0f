"""Application service for job specification management."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

import structlog

from app.application.workspace import WorkspaceContext
from app.domain.entities.activity_log import ActivityAction, ResourceType
from app.domain.entities.job_spec import JobSpec, LocationType
from app.domain.exceptions import JobSpecNotFoundError, LimitExceededError, ValidationError
from app.domain.plans import get_job_spec_limit, within_limit
from app.domain.services.normalization import parse_skill_list
from app.domain.value_objects import JobSpecId

if TYPE_CHECKING:
    from app.application.dependencies.job_spec_dependencies import JobSpecDependencies


class JobSpecApplicationService:
    """Coordinates job specification CRUD for a workspace."""

    def __init__(self, dependencies: JobSpecDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    @staticmethod
    def _prepare_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        fields = dict(data)
        if "location_type" in fields and fields["location_type"] is not None:
            try:
                fields["location_type"] = LocationType(str(fields["location_type"]).lower())
            except ValueError:
                raise ValidationError("Location type must be one of: onsite, hybrid, remote")
        for key in ("required_skills", "preferred_skills"):
            if key in fields:
                fields[key] = parse_skill_list(fields[key])
        if isinstance(fields.get("title"), str):
            fields["title"] = fields["title"].strip()
        return fields

    async def create_job_spec(self, workspace: WorkspaceContext, data: Dict[str, Any]) -> JobSpec:
        """
        Create a job specification.

        Args:
            workspace: Workspace the job spec belongs to
            data: Job spec attributes

        Returns:
            The stored job specification

        Raises:
            LimitExceededError: If the plan job spec limit has been reached
            ValidationError: If the attributes are invalid
        """
        limit = get_job_spec_limit(workspace.plan)
        count = await self._deps.job_spec_repository.count_by_owner(workspace.owner_id)
        if not within_limit(limit, count):
            raise LimitExceededError(
                f"Job spec limit reached. Your {workspace.plan.value} plan allows up to {limit} "
                "job specs. Upgrade your plan to create more.",
                limit=limit,
            )

        fields = self._prepare_fields(data)
        for protected in ("id", "owner_id", "created_by"):
            fields.pop(protected, None)

        try:
            job_spec = JobSpec(
                id=JobSpecId.generate(),
                owner_id=workspace.owner_id,
                created_by=workspace.user_id,
                **fields,
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e))

        self._logger.info("Creating job spec", job_spec_id=str(job_spec.id), owner_id=str(workspace.owner_id))
        saved = await self._deps.job_spec_repository.save(job_spec)

        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.JOBSPEC_CREATED,
            ResourceType.JOB_SPEC,
            resource_id=str(saved.id),
            resource_name=saved.title,
        )
        self._logger.info("Job spec created successfully", job_spec_id=str(saved.id))
        return saved

    async def list_job_specs(self, workspace: WorkspaceContext, active_only: bool = False) -> List[JobSpec]:
        specs = await self._deps.job_spec_repository.list_by_owner(workspace.owner_id, active_only=active_only)
        return sorted(specs, key=lambda spec: spec.created_at, reverse=True)

    async def get_job_spec(self, workspace: WorkspaceContext, job_spec_id: JobSpecId) -> JobSpec:
        job_spec = await self._deps.job_spec_repository.get_by_id(job_spec_id, workspace.owner_id)
        if job_spec is None:
            raise JobSpecNotFoundError(f"Job specification {job_spec_id} not found")
        return job_spec

    async def update_job_spec(
        self,
        workspace: WorkspaceContext,
        job_spec_id: JobSpecId,
        changes: Dict[str, Any],
    ) -> JobSpec:
        job_spec = await self.get_job_spec(workspace, job_spec_id)

        fields = self._prepare_fields(changes)
        try:
            job_spec.update(workspace.user_id, **fields)
        except ValueError as e:
            raise ValidationError(str(e))

        saved = await self._deps.job_spec_repository.save(job_spec)
        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.JOBSPEC_UPDATED,
            ResourceType.JOB_SPEC,
            resource_id=str(saved.id),
            resource_name=saved.title,
            metadata={"fields": sorted(fields)},
        )
        self._logger.info("Job spec updated", job_spec_id=str(saved.id))
        return saved

    async def delete_job_spec(self, workspace: WorkspaceContext, job_spec_id: JobSpecId) -> int:
        """
        Delete a job specification and the match results stored against it.

        Returns:
            Number of CVs whose stored match was removed

        Raises:
            InsufficientPermissionsError: If the caller is not an owner or admin
        """
        workspace.require_manager("Only team owners and admins can delete job specifications")
        job_spec = await self.get_job_spec(workspace, job_spec_id)

        self._logger.info("Deleting job spec", job_spec_id=str(job_spec.id), owner_id=str(workspace.owner_id))

        cleared = await self._deps.cv_repository.remove_match_results(workspace.owner_id, job_spec.id)
        await self._deps.job_spec_repository.delete(job_spec.id, workspace.owner_id)

        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.JOBSPEC_DELETED,
            ResourceType.JOB_SPEC,
            resource_id=str(job_spec.id),
            resource_name=job_spec.title,
            metadata={"cleared_matches": cleared},
        )
        self._logger.info("Job spec deleted successfully", job_spec_id=str(job_spec.id), cleared_matches=cleared)
        return cleared


__all__ = ["JobSpecApplicationService"]
