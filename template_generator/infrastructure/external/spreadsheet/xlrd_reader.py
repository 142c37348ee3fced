"""Workbook reader on xlrd for legacy binary .xls files. Blocking."""

from __future__ import annotations

import logging
from typing import Any

import xlrd

from template_generator.application.dtos.upload import SheetData
from template_generator.domain.exceptions import WorkbookReadError
from template_generator.infrastructure.external.spreadsheet.sheet_rows import sheet_from_rows

logger = logging.getLogger(__name__)

_EMPTY_CELL_TYPES = frozenset({xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR})


def _cell_value(cell: xlrd.sheet.Cell, datemode: int) -> Any:
    """Python value for an xlrd cell, typed the way openpyxl returns .xlsx values."""
    if cell.ctype in _EMPTY_CELL_TYPES:
        return None
    if cell.ctype == xlrd.XL_CELL_DATE:
        return xlrd.xldate_as_datetime(cell.value, datemode)
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == xlrd.XL_CELL_NUMBER and float(cell.value).is_integer():
        return int(cell.value)
    return cell.value


def _sheet_values(sheet: xlrd.sheet.Sheet, datemode: int) -> list[list[Any]]:
    return [
        [_cell_value(cell, datemode) for cell in sheet.row(index)]
        for index in range(sheet.nrows)
    ]


class XlrdWorkbookReader:
    """IWorkbookReader for .xls (BIFF) files. First row of each sheet holds the headers."""

    def read(self, file_path: str) -> list[SheetData]:
        try:
            book = xlrd.open_workbook(file_path, on_demand=True)
        except Exception as e:
            raise WorkbookReadError(file_path, str(e)) from e
        try:
            sheets = []
            for index in range(book.nsheets):
                sheet = book.sheet_by_index(index)
                sheets.append(sheet_from_rows(sheet.name, _sheet_values(sheet, book.datemode)))
                book.unload_sheet(index)
        except Exception as e:
            raise WorkbookReadError(file_path, str(e)) from e
        finally:
            book.release_resources()
        logger.debug("Read %d sheet(s) from %s", len(sheets), file_path)
        return sheets
