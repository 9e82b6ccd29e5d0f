"""Application service for CV upload, listing, parsing results and export."""

from __future__ import annotations

import csv
from collections.abc import Generator
from dataclasses import dataclass, field
from io import StringIO
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import structlog

from app.application.workspace import WorkspaceContext
from app.domain.entities.activity_log import ActivityAction, ResourceType
from app.domain.entities.custom_field import CustomFieldDefinition
from app.domain.entities.cv import CV, CVMetadata, CVStatus
from app.domain.exceptions import CVNotFoundError, DomainException, LimitExceededError, ValidationError
from app.domain.plans import PlanFeature, get_cv_limit, is_unlimited, within_limit
from app.domain.services.cv_filter_service import CVFilterCriteria
from app.domain.services.normalization import normalize_cv_metadata
from app.domain.utils.file_size_validator import FileSizeValidator
from app.domain.value_objects import CVId

if TYPE_CHECKING:
    from app.application.dependencies.cv_dependencies import CVDependencies


CSV_EXPORT_COLUMNS = [
    "Name",
    "Email",
    "Phone",
    "Location",
    "Skills",
    "Status",
    "File Name",
    "Uploaded At",
]


@dataclass
class BulkUploadResult:
    """Outcome of a multi-file upload; files fail independently."""

    uploaded: List[CV] = field(default_factory=list)
    failed: List[Dict[str, str]] = field(default_factory=list)


class CVApplicationService:
    """Coordinates CV storage, parsing results and list filtering."""

    def __init__(self, dependencies: CVDependencies) -> None:
        self._deps = dependencies
        self._logger = structlog.get_logger(__name__)

    async def upload_cv(self, workspace: WorkspaceContext, file_name: str, content: bytes) -> CV:
        """
        Store an uploaded CV file and register it for parsing.

        Args:
            workspace: Workspace the CV belongs to
            file_name: Original file name
            content: Raw file content

        Returns:
            The stored CV with status ``uploaded``

        Raises:
            InvalidFileError: If the file type is not accepted or the file is empty
            FileSizeExceededError: If the file is larger than the configured limit
            LimitExceededError: If the plan CV limit has been reached
        """
        file_type = FileSizeValidator.validate_extension(file_name)
        FileSizeValidator.validate_size(len(content), self._deps.max_file_size, file_name)

        await self._check_cv_limit(workspace)

        cv_id = CVId.generate()
        self._logger.info("Uploading CV", cv_id=str(cv_id), owner_id=str(workspace.owner_id), file_name=file_name)

        storage_path = await self._deps.file_storage.save_file(
            str(workspace.owner_id), str(cv_id), file_name, content
        )

        cv = CV(
            id=cv_id,
            owner_id=workspace.owner_id,
            uploaded_by=workspace.user_id,
            file_name=file_name,
            file_type=file_type,
            file_size=len(content),
            storage_path=storage_path,
        )

        try:
            saved = await self._deps.cv_repository.save(cv)
        except Exception:
            await self._deps.file_storage.delete_file(storage_path)
            raise

        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.CV_UPLOADED,
            ResourceType.CV,
            resource_id=str(saved.id),
            resource_name=saved.file_name,
            metadata={"file_size": saved.file_size, "file_type": saved.file_type},
        )

        self._logger.info("CV uploaded successfully", cv_id=str(saved.id), owner_id=str(workspace.owner_id))
        return saved

    async def upload_cvs(self, workspace: WorkspaceContext, files: List[Tuple[str, bytes]]) -> BulkUploadResult:
        """Upload several files; needs the bulk upload feature for more than one file."""
        if len(files) > 1:
            workspace.require_feature(PlanFeature.BULK_UPLOAD)

        result = BulkUploadResult()
        for file_name, content in files:
            try:
                result.uploaded.append(await self.upload_cv(workspace, file_name, content))
            except LimitExceededError:
                raise
            except DomainException as e:
                self._logger.warning("CV upload rejected", file_name=file_name, error=str(e))
                result.failed.append({"file_name": file_name, "error": str(e)})

        self._logger.info(
            "Bulk CV upload finished",
            owner_id=str(workspace.owner_id),
            uploaded=len(result.uploaded),
            failed=len(result.failed),
        )
        return result

    async def _check_cv_limit(self, workspace: WorkspaceContext) -> None:
        limit = get_cv_limit(workspace.plan)
        if is_unlimited(limit):
            return
        count = await self._deps.cv_repository.count_by_owner(workspace.owner_id)
        if not within_limit(limit, count):
            raise LimitExceededError(
                f"CV limit reached. Your {workspace.plan.value} plan allows up to {limit} CVs. "
                "Upgrade your plan to upload more.",
                limit=limit,
            )

    async def _get_owned_cv(self, workspace: WorkspaceContext, cv_id: CVId) -> CV:
        cv = await self._deps.cv_repository.get_by_id(cv_id, workspace.owner_id)
        if cv is None:
            raise CVNotFoundError(f"CV {cv_id} not found")
        return cv

    async def get_cv(self, workspace: WorkspaceContext, cv_id: CVId) -> CV:
        """Load a CV and count the view."""
        cv = await self._get_owned_cv(workspace, cv_id)
        cv.record_view()
        saved = await self._deps.cv_repository.save(cv)

        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.CV_VIEWED,
            ResourceType.CV,
            resource_id=str(cv.id),
            resource_name=cv.display_name,
        )
        return saved

    async def download_cv_file(self, workspace: WorkspaceContext, cv_id: CVId) -> Tuple[CV, bytes]:
        cv = await self._get_owned_cv(workspace, cv_id)
        try:
            content = await self._deps.file_storage.retrieve_file(cv.storage_path)
        except FileNotFoundError:
            self._logger.warning("Stored CV file missing", cv_id=str(cv.id), storage_path=cv.storage_path)
            raise CVNotFoundError(f"File for CV {cv_id} not found")
        return cv, content

    async def list_cvs(self, workspace: WorkspaceContext, criteria: Optional[CVFilterCriteria] = None) -> List[CV]:
        """
        List the workspace's CVs after applying filters.

        Raises:
            PlanFeatureUnavailableError: If advanced or custom field filters
                are used on a plan without them
        """
        criteria = criteria or CVFilterCriteria()

        if criteria.has_advanced_filters:
            workspace.require_feature(PlanFeature.ADVANCED_FILTERING)

        definitions: List[CustomFieldDefinition] = []
        if criteria.has_custom_field_filters:
            workspace.require_feature(PlanFeature.CUSTOM_FIELDS)
            definitions = await self._deps.custom_field_repository.list_by_owner(workspace.owner_id)

        cvs = await self._deps.cv_repository.list_by_owner(workspace.owner_id)
        return self._deps.filter_service.apply(cvs, criteria, definitions)

    async def apply_parsed_metadata(self, workspace: WorkspaceContext, cv_id: CVId, metadata: CVMetadata) -> CV:
        """Store parser output, normalised, and mark the CV completed."""
        cv = await self._get_owned_cv(workspace, cv_id)

        cv.apply_parsed_metadata(normalize_cv_metadata(metadata))
        saved = await self._deps.cv_repository.save(cv)

        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.CV_UPDATED,
            ResourceType.CV,
            resource_id=str(cv.id),
            resource_name=cv.display_name,
            metadata={"change": "parsed_metadata"},
        )
        self._logger.info("CV metadata applied", cv_id=str(cv.id), skills=len(saved.metadata.skills))
        return saved

    async def mark_parsing_failed(self, workspace: WorkspaceContext, cv_id: CVId, reason: Optional[str] = None) -> CV:
        cv = await self._get_owned_cv(workspace, cv_id)
        cv.mark_processing_failed(reason)
        saved = await self._deps.cv_repository.save(cv)
        self._logger.warning("CV parsing failed", cv_id=str(cv.id), reason=reason)
        return saved

    async def update_custom_fields(self, workspace: WorkspaceContext, cv_id: CVId, values: Dict[str, Any]) -> CV:
        """
        Validate and store custom field values on a CV.

        Submitted values are merged over the stored ones. Fields whose
        condition is not met are cleared.

        Raises:
            ValidationError: With every failing field when any value is invalid
        """
        workspace.require_feature(PlanFeature.CUSTOM_FIELDS)

        cv = await self._get_owned_cv(workspace, cv_id)
        definitions = await self._deps.custom_field_repository.list_by_owner(workspace.owner_id)
        by_name = {definition.name: definition for definition in definitions}

        unknown = sorted(name for name in values if name not in by_name)
        if unknown:
            raise ValidationError(f"Unknown custom field(s): {', '.join(unknown)}")

        merged = {**cv.custom_fields, **values}
        cleaned, errors = self._validate_custom_values(definitions, merged)
        if errors:
            raise ValidationError("; ".join(errors))

        cv.set_custom_field_values(cleaned)
        saved = await self._deps.cv_repository.save(cv)

        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.CV_UPDATED,
            ResourceType.CV,
            resource_id=str(cv.id),
            resource_name=cv.display_name,
            metadata={"change": "custom_fields", "fields": sorted(values)},
        )
        return saved

    @staticmethod
    def _validate_custom_values(
        definitions: List[CustomFieldDefinition],
        values: Dict[str, Any],
    ) -> Tuple[Dict[str, Any], List[str]]:
        cleaned: Dict[str, Any] = {}
        errors: List[str] = []

        for definition in sorted(definitions, key=lambda d: d.order):
            if not definition.is_active_for(values):
                continue
            try:
                value = definition.validate_value(values.get(definition.name))
            except ValueError as e:
                errors.append(str(e))
                continue
            if value is None:
                if definition.required:
                    errors.append(f"{definition.label} is required")
                continue
            cleaned[definition.name] = value

        return cleaned, errors

    async def delete_cv(self, workspace: WorkspaceContext, cv_id: CVId) -> None:
        cv = await self._get_owned_cv(workspace, cv_id)

        self._logger.info("Deleting CV", cv_id=str(cv.id), owner_id=str(workspace.owner_id))

        if not await self._deps.file_storage.delete_file(cv.storage_path):
            self._logger.warning("Stored CV file was already missing", cv_id=str(cv.id), path=cv.storage_path)

        await self._deps.cv_repository.delete(cv.id, workspace.owner_id)

        await self._deps.activity_logger.log_activity(
            workspace,
            ActivityAction.CV_DELETED,
            ResourceType.CV,
            resource_id=str(cv.id),
            resource_name=cv.display_name,
        )
        self._logger.info("CV deleted successfully", cv_id=str(cv.id))

    async def export_cvs_csv(
        self,
        workspace: WorkspaceContext,
        criteria: Optional[CVFilterCriteria] = None,
    ) -> Generator[str, None, None]:
        """
        Filter the CV list and return a generator of CSV lines.

        The list is loaded up front so the returned generator does no I/O and
        can be handed straight to a streaming response.
        """
        workspace.require_feature(PlanFeature.EXPORT_CSV)

        criteria = criteria or CVFilterCriteria()
        cvs = await self.list_cvs(workspace, criteria)

        definitions: List[CustomFieldDefinition] = []
        if workspace.has_feature(PlanFeature.CUSTOM_FIELDS):
            definitions = await self._deps.custom_field_repository.list_by_owner(workspace.owner_id)

        self._logger.info("CSV export started", owner_id=str(workspace.owner_id), rows=len(cvs))
        return self._generate_csv(cvs, sorted(definitions, key=lambda d: d.order), criteria)

    @staticmethod
    def _generate_csv(
        cvs: List[CV],
        definitions: List[CustomFieldDefinition],
        criteria: CVFilterCriteria,
    ) -> Generator[str, None, None]:
        header = list(CSV_EXPORT_COLUMNS)
        if criteria.job_spec_id is not None:
            header.append("Match Score")
        header.extend(definition.label for definition in definitions)

        buffer = StringIO()
        writer = csv.writer(buffer)

        writer.writerow(header)
        yield buffer.getvalue()

        for cv in cvs:
            buffer.seek(0)
            buffer.truncate(0)

            metadata = cv.metadata
            row = [
                metadata.name or "",
                metadata.email or "",
                metadata.phone or "",
                metadata.location or "",
                "; ".join(metadata.skills),
                cv.status.value if isinstance(cv.status, CVStatus) else cv.status,
                cv.file_name,
                cv.uploaded_at.strftime("%Y-%m-%d %H:%M"),
            ]
            if criteria.job_spec_id is not None:
                row.append(cv.match_score_for(criteria.job_spec_id))
            for definition in definitions:
                value = cv.custom_fields.get(definition.name)
                if isinstance(value, bool):
                    value = "Yes" if value else "No"
                row.append("" if value is None else value)

            writer.writerow(row)
            yield buffer.getvalue()


__all__ = ["CVApplicationService", "BulkUploadResult", "CSV_EXPORT_COLUMNS"]
