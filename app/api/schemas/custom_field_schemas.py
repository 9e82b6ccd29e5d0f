"""Custom field API schemas."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from app.api.schemas.base import id_str
from app.domain.entities.custom_field import CustomFieldDefinition, CustomFieldTemplate


class CustomFieldCreate(BaseModel):
    label: str = Field(..., min_length=1, max_length=100)
    name: Optional[str] = Field(None, description="Storage key; derived from the label when omitted")
    field_type: str = Field("text", description="text, number, date, boolean or select")
    required: bool = False
    options: List[str] = Field(default_factory=list, description="Choices for select fields")
    conditional_on: Optional[str] = Field(None, description="Name of the field this one depends on")
    conditional_value: Optional[Any] = None


class CustomFieldUpdate(BaseModel):
    label: Optional[str] = Field(None, min_length=1, max_length=100)
    field_type: Optional[str] = None
    required: Optional[bool] = None
    options: Optional[List[str]] = None
    conditional_on: Optional[str] = None
    conditional_value: Optional[Any] = None
    order: Optional[int] = Field(None, ge=0)


class CustomFieldResponse(BaseModel):
    id: str
    name: str
    label: str
    field_type: str
    required: bool
    options: List[str] = Field(default_factory=list)
    conditional_on: Optional[str] = None
    conditional_value: Optional[Any] = None
    order: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, definition: CustomFieldDefinition) -> "CustomFieldResponse":
        return cls(
            id=id_str(definition.id),
            name=definition.name,
            label=definition.label,
            field_type=definition.field_type.value,
            required=definition.required,
            options=list(definition.options),
            conditional_on=definition.conditional_on,
            conditional_value=definition.conditional_value,
            order=definition.order,
            created_at=definition.created_at,
            updated_at=definition.updated_at,
        )


class TemplateFieldResponse(BaseModel):
    name: str
    label: str
    field_type: str
    required: bool = False
    options: List[str] = Field(default_factory=list)


class TemplateResponse(BaseModel):
    key: str
    name: str
    description: str
    fields: List[TemplateFieldResponse] = Field(default_factory=list)

    @classmethod
    def from_template(cls, template: CustomFieldTemplate) -> "TemplateResponse":
        return cls(
            key=template.key,
            name=template.name,
            description=template.description,
            fields=[
                TemplateFieldResponse(
                    name=field.name,
                    label=field.label,
                    field_type=field.field_type.value,
                    required=field.required,
                    options=list(field.options),
                )
                for field in template.fields
            ],
        )


__all__ = [
    "CustomFieldCreate",
    "CustomFieldUpdate",
    "CustomFieldResponse",
    "TemplateFieldResponse",
    "TemplateResponse",
]
