"""Template operations: list, read, create (with components and audit), soft delete.

Runs inside the request's transactional session; any exception raised here
rolls back the whole unit of work, so a partially created template is never
committed.
"""

from __future__ import annotations

import logging
from typing import Any

from template_generator.application.dtos.audit_log import (
    AuditLogEntryCreate,
    AuditLogResult,
)
from template_generator.application.dtos.template import (
    ComponentResult,
    TemplateCreate,
    TemplateResult,
    TemplateWithComponents,
)
from template_generator.application.interfaces.repositories import (
    IComponentSchemaRepository,
    ITemplateAuditLogRepository,
    ITemplateRepository,
)
from template_generator.domain.exceptions import (
    ResourceNotFoundException,
    TemplateAlreadyExistsException,
    ValidationException,
)
from template_generator.shared.enums import AuditChangeType

logger = logging.getLogger(__name__)


def _snapshot(name: str, component_keys: list[str]) -> dict[str, Any]:
    """Audit diff payload: template name and component keys, not a field-level diff."""
    return {"snapshot": {"template": {"name": name, "components": component_keys}}}


def validate_template_create(data: TemplateCreate) -> None:
    """Raise ValidationException for a missing name or missing/incomplete components."""
    if not data.name or not data.name.strip():
        raise ValidationException("Template name is required", field="name")
    if not data.components:
        raise ValidationException("At least one component is required", field="components")
    for index, component in enumerate(data.components):
        if not component.key:
            raise ValidationException(
                f"Component at index {index} is missing a key", field=f"components[{index}].key"
            )
        if not component.title:
            raise ValidationException(
                f"Component at index {index} is missing a title", field=f"components[{index}].title"
            )
        if component.schema_json is None:
            raise ValidationException(
                f"Component at index {index} is missing a schema",
                field=f"components[{index}].schema_json",
            )


class TemplateService:
    """Template use cases over the template, component, and audit repositories."""

    def __init__(
        self,
        template_repo: ITemplateRepository,
        component_repo: IComponentSchemaRepository,
        audit_repo: ITemplateAuditLogRepository,
    ) -> None:
        self.template_repo = template_repo
        self.component_repo = component_repo
        self.audit_repo = audit_repo

    async def list_templates(self) -> list[TemplateResult]:
        return await self.template_repo.list_active()

    async def get_template(self, template_id: str) -> TemplateWithComponents:
        """Return the template and its components; 404 when missing or soft-deleted."""
        if not template_id or not template_id.strip():
            raise ValidationException("Template ID is required", field="id")
        template = await self.template_repo.get_active_by_id(template_id)
        if template is None:
            raise ResourceNotFoundException("template", template_id)
        components = await self.component_repo.list_active_for_template(template_id)
        return TemplateWithComponents(template=template, components=components)

    async def create_template(self, data: TemplateCreate) -> TemplateWithComponents:
        """Create template, components (order_index = list position), and one CREATE audit row."""
        validate_template_create(data)
        name = data.name.strip()
        if await self.template_repo.exists_active_by_name(name):
            raise TemplateAlreadyExistsException(name)

        template = await self.template_repo.create_template(
            name=name,
            description=data.description or None,
            created_by=data.created_by,
        )
        components: list[ComponentResult] = await self.component_repo.create_many(
            template.id, list(data.components)
        )
        await self.audit_repo.create(
            AuditLogEntryCreate(
                template_id=template.id,
                change_type=AuditChangeType.CREATE.value,
                performed_by=data.created_by,
                diff_json=_snapshot(name, [c.key for c in data.components]),
            )
        )
        logger.info(
            "Created template %s (%s) with %d components", template.id, name, len(components)
        )
        return TemplateWithComponents(template=template, components=components)

    async def delete_template(self, template_id: str, performed_by: str) -> None:
        """Soft-delete the template and its components and append a DELETE audit row."""
        existing = await self.get_template(template_id)
        deleted = await self.template_repo.soft_delete(template_id)
        if deleted is None:
            raise ResourceNotFoundException("template", template_id)
        await self.component_repo.soft_delete_for_template(template_id)
        await self.audit_repo.create(
            AuditLogEntryCreate(
                template_id=template_id,
                change_type=AuditChangeType.DELETE.value,
                performed_by=performed_by,
                diff_json=_snapshot(deleted.name, [c.key for c in existing.components]),
            )
        )
        logger.info("Soft-deleted template %s (%s)", template_id, deleted.name)

    async def list_audit_logs(self, template_id: str) -> list[AuditLogResult]:
        """Audit trail for a template (including soft-deleted ones), oldest first."""
        return await self.audit_repo.list_for_template(template_id)
