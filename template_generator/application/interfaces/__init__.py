"""Application ports (Protocols) implemented by infrastructure."""

from template_generator.application.interfaces.repositories import (
    IComponentSchemaRepository,
    ITemplateAuditLogRepository,
    ITemplateRepository,
)
from template_generator.application.interfaces.services import (
    ISchemaGenerator,
    ITextGenerator,
    IWorkbookReader,
)

__all__ = [
    "IComponentSchemaRepository",
    "ISchemaGenerator",
    "ITemplateAuditLogRepository",
    "ITemplateRepository",
    "ITextGenerator",
    "IWorkbookReader",
]
