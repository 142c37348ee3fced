"""SQLAlchemy repositories implementing the application ports."""

from template_generator.infrastructure.persistence.repositories.component_schema_repo import (
    ComponentSchemaRepository,
)
from template_generator.infrastructure.persistence.repositories.template_audit_log_repo import (
    TemplateAuditLogRepository,
)
from template_generator.infrastructure.persistence.repositories.template_repo import (
    TemplateRepository,
)

__all__ = [
    "ComponentSchemaRepository",
    "TemplateAuditLogRepository",
    "TemplateRepository",
]
