"""Repository interfaces (ports) for the application layer.

Protocols define contracts; infrastructure implements them with SQLAlchemy.
Use cases depend on these, not on ORM models.
"""

from __future__ import annotations

from typing import Protocol

from template_generator.application.dtos.audit_log import (
    AuditLogEntryCreate,
    AuditLogResult,
)
from template_generator.application.dtos.template import (
    ComponentDefinition,
    ComponentResult,
    TemplateResult,
)


class ITemplateRepository(Protocol):
    """Protocol for template persistence (soft delete only)."""

    async def list_active(self) -> list[TemplateResult]:
        """Return non-deleted templates, newest first."""
        ...

    async def get_active_by_id(self, template_id: str) -> TemplateResult | None:
        """Return the template if it exists and is not deleted."""
        ...

    async def exists_active_by_name(self, name: str) -> bool:
        """Return True if a non-deleted template already uses name."""
        ...

    async def create_template(
        self, name: str, description: str | None, created_by: str
    ) -> TemplateResult:
        """Insert a template; raise TemplateAlreadyExistsException on a name conflict."""
        ...

    async def soft_delete(self, template_id: str) -> TemplateResult | None:
        """Mark the template deleted; return None if missing or already deleted."""
        ...


class IComponentSchemaRepository(Protocol):
    """Protocol for component schema persistence."""

    async def create_many(
        self, template_id: str, components: list[ComponentDefinition]
    ) -> list[ComponentResult]:
        """Insert components with order_index equal to list position."""
        ...

    async def list_active_for_template(self, template_id: str) -> list[ComponentResult]:
        """Return non-deleted components ordered by order_index."""
        ...

    async def soft_delete_for_template(self, template_id: str) -> int:
        """Mark all components of the template deleted; return count."""
        ...


class ITemplateAuditLogRepository(Protocol):
    """Protocol for the append-only template audit log."""

    async def create(self, entry: AuditLogEntryCreate) -> AuditLogResult:
        """Append one entry."""
        ...

    async def list_for_template(self, template_id: str) -> list[AuditLogResult]:
        """Return entries for the template, oldest first."""
        ...
