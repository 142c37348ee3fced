"""API request/response models (Pydantic). Kept separate from application DTOs."""

from template_generator.schemas.health import HealthErrorResponse, HealthResponse
from template_generator.schemas.schema_json import (
    NormalizeSchemaRequest,
    NormalizeSchemaResponse,
)
from template_generator.schemas.template import (
    ComponentPayload,
    ComponentResponse,
    SubComponentPayload,
    TemplateAuditLogResponse,
    TemplateCreateRequest,
    TemplateResponse,
    TemplateWithComponentsResponse,
)
from template_generator.schemas.upload import (
    UploadComponentResponse,
    UploadResponse,
    UploadSubComponentResponse,
)

__all__ = [
    "ComponentPayload",
    "ComponentResponse",
    "HealthErrorResponse",
    "HealthResponse",
    "NormalizeSchemaRequest",
    "NormalizeSchemaResponse",
    "SubComponentPayload",
    "TemplateAuditLogResponse",
    "TemplateCreateRequest",
    "TemplateResponse",
    "TemplateWithComponentsResponse",
    "UploadComponentResponse",
    "UploadResponse",
    "UploadSubComponentResponse",
]
