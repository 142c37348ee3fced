"""Persistence models: ORM entities and mixins."""

from template_generator.infrastructure.persistence.models.component_schema import (
    ComponentSchema,
)
from template_generator.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SoftDeletableModel,
    SoftDeleteMixin,
    TimestampMixin,
)
from template_generator.infrastructure.persistence.models.template import Template
from template_generator.infrastructure.persistence.models.template_audit_log import (
    TemplateAuditLog,
)

__all__ = [
    "ComponentSchema",
    "CuidMixin",
    "SoftDeletableModel",
    "SoftDeleteMixin",
    "Template",
    "TemplateAuditLog",
    "TimestampMixin",
]
