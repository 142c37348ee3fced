"""Application DTOs (no ORM dependency)."""

from template_generator.application.dtos.audit_log import (
    AuditLogEntryCreate,
    AuditLogResult,
)
from template_generator.application.dtos.template import (
    ComponentDefinition,
    ComponentResult,
    SubComponentDefinition,
    TemplateCreate,
    TemplateResult,
    TemplateWithComponents,
)
from template_generator.application.dtos.upload import (
    InferenceResult,
    SheetData,
    SheetRow,
    UploadResult,
)

__all__ = [
    "AuditLogEntryCreate",
    "AuditLogResult",
    "ComponentDefinition",
    "ComponentResult",
    "InferenceResult",
    "SheetData",
    "SheetRow",
    "SubComponentDefinition",
    "TemplateCreate",
    "TemplateResult",
    "TemplateWithComponents",
    "UploadResult",
]
