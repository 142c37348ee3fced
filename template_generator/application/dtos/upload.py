"""DTOs for workbook upload and schema inference."""

from dataclasses import dataclass, field
from typing import Any

from template_generator.application.dtos.template import ComponentDefinition

SheetRow = dict[str, Any]


@dataclass(frozen=True)
class SheetData:
    """One worksheet as read from a workbook.

    rows are header-keyed data rows (may be empty); headers are the
    non-empty cells of the first row of the used range, in column order.
    """

    name: str
    rows: list[SheetRow] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UploadResult:
    """Result of processing an uploaded workbook."""

    file_name: str
    components: list[ComponentDefinition]


@dataclass(frozen=True)
class InferenceResult:
    """Outcome of a model-backed schema inference.

    Exactly one of schema / failure is set.
    """

    schema: dict[str, Any] | None = None
    failure: str | None = None

    @property
    def ok(self) -> bool:
        return self.schema is not None

    @classmethod
    def success(cls, schema: dict[str, Any]) -> "InferenceResult":
        return cls(schema=schema)

    @classmethod
    def failed(cls, reason: str) -> "InferenceResult":
        return cls(failure=reason)
