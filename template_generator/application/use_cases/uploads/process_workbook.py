"""Upload pipeline: workbook → grouped sheets → inferred component schemas."""

from __future__ import annotations

import asyncio
import copy
import logging
import re
from typing import Any

from template_generator.application.dtos.template import (
    ComponentDefinition,
    SubComponentDefinition,
)
from template_generator.application.dtos.upload import SheetData, SheetRow, UploadResult
from template_generator.application.interfaces.services import (
    ISchemaGenerator,
    IWorkbookReader,
)
from template_generator.application.services.sheet_grouper import (
    component_key,
    group_sheets,
)
from template_generator.domain.exceptions import (
    ValidationException,
    WorkbookProcessingException,
    WorkbookReadError,
)

logger = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def strip_extension(file_name: str) -> str:
    """Remove the last extension ("Budget.2024.xlsx" -> "Budget.2024")."""
    return _EXTENSION_RE.sub("", file_name)


def rows_for_sheet(sheet: SheetData) -> list[SheetRow]:
    """Data rows of the sheet, or one all-null row keyed by its headers when it has none."""
    if sheet.rows:
        return list(sheet.rows)
    logger.info('No data found in sheet "%s", extracting headers only', sheet.name)
    if not sheet.headers:
        return []
    return [{header: None for header in sheet.headers}]


class ProcessWorkbookUseCase:
    """Turn an uploaded workbook into component definitions for review in the editor."""

    def __init__(
        self,
        workbook_reader: IWorkbookReader,
        schema_generator: ISchemaGenerator,
        *,
        concurrency: int = 1,
    ) -> None:
        self.workbook_reader = workbook_reader
        self.schema_generator = schema_generator
        self.concurrency = max(1, concurrency)

    async def _read_sheets(self, file_path: str, original_file_name: str) -> list[SheetData]:
        try:
            return await asyncio.to_thread(self.workbook_reader.read, file_path)
        except WorkbookReadError as e:
            logger.error("Error processing file %s: %s", original_file_name, e.details.get("reason"))
            raise WorkbookProcessingException(
                original_file_name, str(e.details.get("reason", e.message))
            ) from e

    async def _generate_schemas(self, sheets: list[SheetData]) -> list[dict[str, Any]]:
        """Schemas in sheet order; at most self.concurrency inference calls in flight."""
        semaphore = asyncio.Semaphore(self.concurrency)

        async def generate(sheet: SheetData) -> dict[str, Any]:
            async with semaphore:
                return await self.schema_generator.generate(rows_for_sheet(sheet))

        return list(await asyncio.gather(*(generate(sheet) for sheet in sheets)))

    async def process(self, file_path: str, original_file_name: str) -> UploadResult:
        """Read, group, and infer; raise ValidationException when the workbook has no sheets."""
        file_name = strip_extension(original_file_name)
        sheets = await self._read_sheets(file_path, original_file_name)
        schemas = await self._generate_schemas(sheets)
        schema_by_sheet = {id(sheet): schema for sheet, schema in zip(sheets, schemas)}

        components: list[ComponentDefinition] = []
        for base_name, members in group_sheets(sheets, name_of=lambda s: s.name).items():
            if len(members) == 1:
                sheet = members[0]
                components.append(
                    ComponentDefinition(
                        key=component_key(sheet.name),
                        title=sheet.name,
                        schema_json=schema_by_sheet[id(sheet)],
                    )
                )
                continue
            subcomponents = [
                SubComponentDefinition(
                    key=component_key(sheet.name),
                    title=sheet.name,
                    schema_json=schema_by_sheet[id(sheet)],
                )
                for sheet in members
            ]
            components.append(
                ComponentDefinition(
                    key=component_key(base_name),
                    title=base_name,
                    schema_json=copy.deepcopy(subcomponents[0].schema_json),
                    subcomponents=subcomponents,
                )
            )

        if not components:
            raise ValidationException("No valid sheets found in the Excel file", field="file")
        return UploadResult(file_name=file_name, components=components)
