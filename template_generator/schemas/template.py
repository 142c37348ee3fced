"""Template API schemas.

Request models accept missing fields so the template service can answer
with its own 400 messages ("Template name is required", ...).
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from template_generator.application.dtos.template import (
    ComponentDefinition,
    SubComponentDefinition,
    TemplateCreate,
)
from template_generator.shared.utils.generators import SYSTEM_ACTOR_ID


class SubComponentPayload(BaseModel):
    """One alternative schema under a component."""

    key: str | None = None
    title: str | None = None
    schema_json: dict[str, Any] | None = None

    def to_definition(self) -> SubComponentDefinition:
        return SubComponentDefinition(
            key=self.key or "",
            title=self.title or "",
            schema_json=self.schema_json or {},
        )


class ComponentPayload(BaseModel):
    """Component as returned by POST /upload and edited by the client."""

    key: str | None = None
    title: str | None = None
    schema_json: dict[str, Any] | None = None
    subcomponents: list[SubComponentPayload] | None = None

    def to_definition(self) -> ComponentDefinition:
        return ComponentDefinition(
            key=self.key or "",
            title=self.title or "",
            schema_json=self.schema_json,
            subcomponents=(
                [sub.to_definition() for sub in self.subcomponents]
                if self.subcomponents is not None
                else None
            ),
        )


class TemplateCreateRequest(BaseModel):
    """Request body for POST /templates."""

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    created_by: str | None = Field(default=None, max_length=255)
    components: list[ComponentPayload] | None = None

    def to_command(self) -> TemplateCreate:
        return TemplateCreate(
            name=self.name or "",
            description=self.description,
            created_by=self.created_by or SYSTEM_ACTOR_ID,
            components=[c.to_definition() for c in self.components or []],
        )


class TemplateResponse(BaseModel):
    """Template response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None
    created_by: str
    is_deleted: bool
    created_at: datetime
    updated_at: datetime


class ComponentResponse(BaseModel):
    """Persisted component response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    template_id: str
    key: str
    title: str
    schema_json: dict[str, Any]
    subcomponents: list[dict[str, Any]] | None
    order_index: int
    is_deleted: bool
    created_at: datetime
    updated_at: datetime


class TemplateWithComponentsResponse(BaseModel):
    """Template with its components in display order."""

    model_config = ConfigDict(from_attributes=True)

    template: TemplateResponse
    components: list[ComponentResponse]


class TemplateAuditLogResponse(BaseModel):
    """One audit entry for a template."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    template_id: str
    change_type: str
    performed_by: str
    diff_json: dict[str, Any]
    created_at: datetime
