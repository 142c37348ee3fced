"""DTOs for template and component use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SubComponentDefinition:
    """Alternative schema under one component (one per sheet in a multi-sheet group)."""

    key: str
    title: str
    schema_json: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "title": self.title, "schema_json": self.schema_json}


@dataclass(frozen=True)
class ComponentDefinition:
    """Component as produced by the upload pipeline and submitted on template creation."""

    key: str
    title: str
    schema_json: dict[str, Any] | None
    subcomponents: list[SubComponentDefinition] | None = None

    def subcomponents_as_dicts(self) -> list[dict[str, Any]] | None:
        if self.subcomponents is None:
            return None
        return [sub.to_dict() for sub in self.subcomponents]


@dataclass(frozen=True)
class TemplateCreate:
    """Input for creating a template with its components in one transaction."""

    name: str
    description: str | None
    created_by: str
    components: list[ComponentDefinition] = field(default_factory=list)


@dataclass(frozen=True)
class TemplateResult:
    """Template read-model."""

    id: str
    name: str
    description: str | None
    created_by: str
    is_deleted: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ComponentResult:
    """Component read-model (subcomponents are opaque JSON)."""

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


@dataclass(frozen=True)
class TemplateWithComponents:
    """Template together with its non-deleted components in display order."""

    template: TemplateResult
    components: list[ComponentResult]
