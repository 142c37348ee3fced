"""Workbook reader on openpyxl. Blocking; callers run it in a worker thread."""

from __future__ import annotations

import logging

from openpyxl import load_workbook

from template_generator.application.dtos.upload import SheetData
from template_generator.domain.exceptions import WorkbookReadError
from template_generator.infrastructure.external.spreadsheet.sheet_rows import sheet_from_rows

logger = logging.getLogger(__name__)


class OpenpyxlWorkbookReader:
    """IWorkbookReader for .xlsx/.xlsm files. First row of each sheet holds the headers."""

    def read(self, file_path: str) -> list[SheetData]:
        try:
            workbook = load_workbook(file_path, data_only=True, read_only=True)
        except Exception as e:
            raise WorkbookReadError(file_path, str(e)) from e
        try:
            sheets = [
                sheet_from_rows(ws.title, ws.iter_rows(values_only=True))
                for ws in workbook.worksheets
            ]
        except Exception as e:
            raise WorkbookReadError(file_path, str(e)) from e
        finally:
            workbook.close()
        logger.debug("Read %d sheet(s) from %s", len(sheets), file_path)
        return sheets
