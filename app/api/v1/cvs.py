"""
CV Management API Endpoints

CV library for the caller's workspace:
- Single and bulk upload of CV documents
- Filtered listing, ranked by match score when a job spec is selected
- Parsed metadata intake from the external parser
- Custom field values, downloads and CSV export
"""

from datetime import date, datetime
from typing import Dict, List, Optional

import structlog
from fastapi import APIRouter, File, HTTPException, Path, Query, Request, UploadFile, status
from fastapi.responses import Response, StreamingResponse

from app.api.dependencies import CVServiceDep, map_domain_exception_to_http
from app.api.responses import attachment_headers
from app.api.schemas.base import DeletionResponse
from app.api.schemas.cv_schemas import (
    BulkUploadResponse,
    CustomFieldValuesUpdate,
    CVListResponse,
    CVMetadataSchema,
    CVResponse,
    ParsingFailedRequest,
    UploadFailure,
)
from app.core.config import get_settings
from app.core.dependencies import WorkspaceDep
from app.domain.entities.cv import CVStatus
from app.domain.exceptions import DomainException, ValidationError
from app.domain.plans import PlanFeature
from app.domain.services.cv_filter_service import CVFilterCriteria
from app.domain.utils.file_size_validator import FileSizeValidator
from app.domain.value_objects import CVId, JobSpecId

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/cvs", tags=["cvs"])

CUSTOM_FIELD_QUERY_PREFIX = "cf_"


def _parse_cv_id(cv_id: str) -> CVId:
    try:
        return CVId(cv_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=404, detail=f"CV {cv_id} not found")


def _build_criteria(
    request: Request,
    search: Optional[str],
    only_parsed: bool,
    status_filter: Optional[str],
    file_type: Optional[str],
    date_from: Optional[date],
    date_to: Optional[date],
    gender: Optional[str],
    race: Optional[str],
    age_min: Optional[int],
    age_max: Optional[int],
    include_unknown: bool,
    location: Optional[str],
    skills: Optional[str],
    experience: Optional[str],
    job_spec_id: Optional[str],
) -> CVFilterCriteria:
    """Translate query parameters into filter criteria; ``cf_<name>`` params filter custom fields."""
    custom_fields: Dict[str, str] = {
        key[len(CUSTOM_FIELD_QUERY_PREFIX):]: value
        for key, value in request.query_params.items()
        if key.startswith(CUSTOM_FIELD_QUERY_PREFIX)
    }
    try:
        return CVFilterCriteria(
            search=search,
            only_parsed=only_parsed,
            status=CVStatus(status_filter) if status_filter else None,
            file_type=file_type,
            date_from=date_from,
            date_to=date_to,
            gender=gender,
            race=race,
            age_min=age_min,
            age_max=age_max,
            include_unknown=include_unknown,
            location=location,
            skills=skills,
            experience=experience,
            custom_fields=custom_fields,
            job_spec_id=JobSpecId(job_spec_id) if job_spec_id else None,
        )
    except (TypeError, ValueError) as e:
        raise map_domain_exception_to_http(ValidationError(str(e)))


@router.post("/", response_model=BulkUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_cvs(
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    files: List[UploadFile] = File(..., description="CV documents (PDF, DOC, DOCX, TXT)"),
) -> BulkUploadResponse:
    """
    Upload one or more CVs.

    Uploading more than one file at a time needs the bulk upload plan feature.
    Files that fail validation are reported individually; the plan CV limit
    stops the whole request.
    """
    settings = get_settings()
    try:
        logger.info("CV upload requested", owner_id=str(workspace.owner_id), files=len(files))
        if len(files) > 1:
            workspace.require_feature(PlanFeature.BULK_UPLOAD)

        payloads = []
        failures: List[UploadFailure] = []
        for upload in files:
            file_name = upload.filename or "unknown"
            try:
                content, _ = await FileSizeValidator.read_limited(upload, settings.MAX_FILE_SIZE)
                payloads.append((file_name, content))
            except ValidationError as e:
                failures.append(UploadFailure(file_name=file_name, error=str(e)))

        result = await cv_service.upload_cvs(workspace, payloads) if payloads else None
        uploaded = [CVResponse.from_entity(cv) for cv in result.uploaded] if result else []
        if result:
            failures.extend(UploadFailure(**failure) for failure in result.failed)

        return BulkUploadResponse(
            uploaded=uploaded,
            failed=failures,
            total_uploaded=len(uploaded),
            total_failed=len(failures),
        )

    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("CV upload failed", owner_id=str(workspace.owner_id), error=str(e))
        raise HTTPException(status_code=500, detail="Failed to upload CVs")


@router.get("/", response_model=CVListResponse)
async def list_cvs(
    request: Request,
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    search: Optional[str] = Query(None, description="Free-text search over name, email, phone and location"),
    only_parsed: bool = Query(False, description="Only CVs that have been parsed"),
    status_filter: Optional[str] = Query(None, alias="status", description="Processing status"),
    file_type: Optional[str] = Query(None, description="pdf, doc, docx or txt"),
    date_from: Optional[date] = Query(None, description="Uploaded on or after"),
    date_to: Optional[date] = Query(None, description="Uploaded on or before"),
    gender: Optional[str] = Query(None),
    race: Optional[str] = Query(None),
    age_min: Optional[int] = Query(None, ge=0, le=120),
    age_max: Optional[int] = Query(None, ge=0, le=120),
    include_unknown: bool = Query(True, description="Keep CVs with unknown demographics"),
    location: Optional[str] = Query(None),
    skills: Optional[str] = Query(None, description="Comma-separated skills, any may match"),
    experience: Optional[str] = Query(None, description="0-2, 3-5, 6-10 or 10+"),
    job_spec_id: Optional[str] = Query(None, description="Sort by stored match score for this job spec"),
) -> CVListResponse:
    """List the workspace's CVs. Custom field filters are passed as ``cf_<field_name>`` parameters."""
    criteria = _build_criteria(
        request, search, only_parsed, status_filter, file_type, date_from, date_to, gender, race,
        age_min, age_max, include_unknown, location, skills, experience, job_spec_id,
    )
    try:
        cvs = await cv_service.list_cvs(workspace, criteria)
        return CVListResponse(
            items=[CVResponse.from_entity(cv, criteria.job_spec_id) for cv in cvs],
            total=len(cvs),
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("Failed to list CVs", owner_id=str(workspace.owner_id), error=str(e))
        raise HTTPException(status_code=500, detail="Failed to retrieve CVs")


@router.get("/export")
async def export_cvs(
    request: Request,
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    search: Optional[str] = Query(None),
    only_parsed: bool = Query(False),
    status_filter: Optional[str] = Query(None, alias="status"),
    file_type: Optional[str] = Query(None),
    date_from: Optional[date] = Query(None),
    date_to: Optional[date] = Query(None),
    gender: Optional[str] = Query(None),
    race: Optional[str] = Query(None),
    age_min: Optional[int] = Query(None, ge=0, le=120),
    age_max: Optional[int] = Query(None, ge=0, le=120),
    include_unknown: bool = Query(True),
    location: Optional[str] = Query(None),
    skills: Optional[str] = Query(None),
    experience: Optional[str] = Query(None),
    job_spec_id: Optional[str] = Query(None),
) -> StreamingResponse:
    """
    Export the filtered CV list as CSV.

    Returns:
        StreamingResponse with text/csv content and attachment disposition
    """
    criteria = _build_criteria(
        request, search, only_parsed, status_filter, file_type, date_from, date_to, gender, race,
        age_min, age_max, include_unknown, location, skills, experience, job_spec_id,
    )
    try:
        csv_generator = await cv_service.export_cvs_csv(workspace, criteria)
        filename = f"cvs_export_{datetime.utcnow().strftime('%Y%m%d_%H%M%S')}.csv"

        logger.info("CSV export started", owner_id=str(workspace.owner_id), filename=filename)

        return StreamingResponse(
            csv_generator,
            media_type="text/csv",
            headers={
                "Content-Disposition": f'attachment; filename="{filename}"',
                "Cache-Control": "no-cache",
            },
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except Exception as e:
        logger.error("CSV export failed", owner_id=str(workspace.owner_id), error=str(e))
        raise HTTPException(status_code=500, detail="Failed to export CVs")


@router.get("/{cv_id}", response_model=CVResponse)
async def get_cv(
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    cv_id: str = Path(..., description="CV identifier"),
) -> CVResponse:
    """Get one CV; each call counts as a view."""
    try:
        cv = await cv_service.get_cv(workspace, _parse_cv_id(cv_id))
        return CVResponse.from_entity(cv)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/{cv_id}/file")
async def download_cv_file(
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    cv_id: str = Path(..., description="CV identifier"),
) -> Response:
    """Download the original uploaded document."""
    try:
        cv, content = await cv_service.download_cv_file(workspace, _parse_cv_id(cv_id))
        return Response(
            content=content,
            media_type="application/octet-stream",
            headers=attachment_headers(cv.file_name),
        )
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
    except HTTPException:
        raise
    except Exception as e:
        logger.error("CV download failed", owner_id=str(workspace.owner_id), cv_id=cv_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to download CV")


@router.put("/{cv_id}/metadata", response_model=CVResponse)
async def update_cv_metadata(
    metadata: CVMetadataSchema,
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    cv_id: str = Path(..., description="CV identifier"),
) -> CVResponse:
    """Store parser output for a CV and mark it ready for matching."""
    try:
        cv = await cv_service.apply_parsed_metadata(workspace, _parse_cv_id(cv_id), metadata.to_domain())
        return CVResponse.from_entity(cv)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/{cv_id}/parsing-failed", response_model=CVResponse)
async def mark_parsing_failed(
    body: ParsingFailedRequest,
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    cv_id: str = Path(..., description="CV identifier"),
) -> CVResponse:
    try:
        cv = await cv_service.mark_parsing_failed(workspace, _parse_cv_id(cv_id), body.reason)
        return CVResponse.from_entity(cv)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.patch("/{cv_id}/custom-fields", response_model=CVResponse)
async def update_custom_fields(
    body: CustomFieldValuesUpdate,
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    cv_id: str = Path(..., description="CV identifier"),
) -> CVResponse:
    """Validate and merge custom field values into the CV."""
    try:
        cv = await cv_service.update_custom_fields(workspace, _parse_cv_id(cv_id), body.values)
        return CVResponse.from_entity(cv)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/{cv_id}", response_model=DeletionResponse)
async def delete_cv(
    workspace: WorkspaceDep,
    cv_service: CVServiceDep,
    cv_id: str = Path(..., description="CV identifier"),
) -> DeletionResponse:
    try:
        await cv_service.delete_cv(workspace, _parse_cv_id(cv_id))
        return DeletionResponse(message="CV deleted", deleted_id=cv_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
