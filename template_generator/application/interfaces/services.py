"""Service interfaces (ports) for the application layer.

Protocols for the external collaborators of the upload pipeline: the
spreadsheet reader and the text-generation capability (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol

from template_generator.application.dtos.upload import SheetData, SheetRow


class ITextGenerator(Protocol):
    """Protocol for a text-generation model (black box: prompt in, text out)."""

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        """Return generated text. May raise TextGenerationException on transport failure."""
        ...


class IWorkbookReader(Protocol):
    """Protocol for reading a spreadsheet into ordered sheets."""

    def read(self, file_path: str) -> list[SheetData]:
        """Return sheets in workbook order. Raise WorkbookReadError if unreadable."""
        ...


class ISchemaGenerator(Protocol):
    """Protocol for producing a JSON Schema from sampled rows. Never raises."""

    async def generate(self, rows: list[SheetRow]) -> dict[str, Any]:
        """Return a component schema for rows."""
        ...
