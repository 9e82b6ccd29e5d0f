"""
Custom Field API Endpoints

Workspace-defined CV fields and the ready-made templates that seed them.
"""

from typing import List

import structlog
from fastapi import APIRouter, HTTPException, Path, status

from app.api.dependencies import CustomFieldServiceDep, map_domain_exception_to_http
from app.api.schemas.base import DeletionResponse
from app.api.schemas.custom_field_schemas import (
    CustomFieldCreate,
    CustomFieldResponse,
    CustomFieldUpdate,
    TemplateResponse,
)
from app.core.dependencies import WorkspaceDep
from app.domain.exceptions import DomainException
from app.domain.value_objects import CustomFieldId

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/custom-fields", tags=["custom-fields"])


def _parse_field_id(field_id: str) -> CustomFieldId:
    try:
        return CustomFieldId(field_id)
    except (TypeError, ValueError):
        raise HTTPException(status_code=404, detail=f"Custom field {field_id} not found")


@router.get("/", response_model=List[CustomFieldResponse])
async def list_fields(
    workspace: WorkspaceDep,
    custom_field_service: CustomFieldServiceDep,
) -> List[CustomFieldResponse]:
    try:
        fields = await custom_field_service.list_fields(workspace)
        return [CustomFieldResponse.from_entity(definition) for definition in fields]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.post("/", response_model=CustomFieldResponse, status_code=status.HTTP_201_CREATED)
async def create_field(
    body: CustomFieldCreate,
    workspace: WorkspaceDep,
    custom_field_service: CustomFieldServiceDep,
) -> CustomFieldResponse:
    try:
        definition = await custom_field_service.create_field(workspace, body.model_dump())
        return CustomFieldResponse.from_entity(definition)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.get("/templates", response_model=List[TemplateResponse])
async def list_templates(
    workspace: WorkspaceDep,
    custom_field_service: CustomFieldServiceDep,
) -> List[TemplateResponse]:
    return [TemplateResponse.from_template(template) for template in custom_field_service.list_templates()]


@router.post("/templates/{template_key}", response_model=List[CustomFieldResponse], status_code=status.HTTP_201_CREATED)
async def apply_template(
    workspace: WorkspaceDep,
    custom_field_service: CustomFieldServiceDep,
    template_key: str = Path(..., description="recruitment, internal, trades or tech"),
) -> List[CustomFieldResponse]:
    """Add a template's fields; names that already exist are skipped."""
    try:
        added = await custom_field_service.apply_template(workspace, template_key)
        return [CustomFieldResponse.from_entity(definition) for definition in added]
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.put("/{field_id}", response_model=CustomFieldResponse)
async def update_field(
    body: CustomFieldUpdate,
    workspace: WorkspaceDep,
    custom_field_service: CustomFieldServiceDep,
    field_id: str = Path(..., description="Custom field identifier"),
) -> CustomFieldResponse:
    try:
        definition = await custom_field_service.update_field(
            workspace,
            _parse_field_id(field_id),
            body.model_dump(exclude_unset=True),
        )
        return CustomFieldResponse.from_entity(definition)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)


@router.delete("/{field_id}", response_model=DeletionResponse)
async def delete_field(
    workspace: WorkspaceDep,
    custom_field_service: CustomFieldServiceDep,
    field_id: str = Path(..., description="Custom field identifier"),
) -> DeletionResponse:
    try:
        await custom_field_service.delete_field(workspace, _parse_field_id(field_id))
        return DeletionResponse(message="Custom field deleted", deleted_id=field_id)
    except DomainException as domain_exc:
        raise map_domain_exception_to_http(domain_exc)
