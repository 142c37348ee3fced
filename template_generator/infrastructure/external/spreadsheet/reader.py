"""Pick the workbook reader from the file's leading bytes.

Legacy .xls files are OLE2 compound documents; everything else
(.xlsx, .xlsm) goes to openpyxl, which reports unreadable files itself.
"""

from __future__ import annotations

from template_generator.application.dtos.upload import SheetData
from template_generator.application.interfaces.services import IWorkbookReader
from template_generator.domain.exceptions import WorkbookReadError
from template_generator.infrastructure.external.spreadsheet.openpyxl_reader import (
    OpenpyxlWorkbookReader,
)
from template_generator.infrastructure.external.spreadsheet.xlrd_reader import XlrdWorkbookReader

OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def is_legacy_xls(file_path: str) -> bool:
    try:
        with open(file_path, "rb") as fh:
            return fh.read(len(OLE2_SIGNATURE)) == OLE2_SIGNATURE
    except OSError as e:
        raise WorkbookReadError(file_path, str(e)) from e


class SpreadsheetWorkbookReader:
    """IWorkbookReader that delegates to xlrd for .xls and openpyxl otherwise."""

    def __init__(
        self,
        xlsx_reader: IWorkbookReader | None = None,
        xls_reader: IWorkbookReader | None = None,
    ) -> None:
        self.xlsx_reader = xlsx_reader or OpenpyxlWorkbookReader()
        self.xls_reader = xls_reader or XlrdWorkbookReader()

    def read(self, file_path: str) -> list[SheetData]:
        if is_legacy_xls(file_path):
            return self.xls_reader.read(file_path)
        return self.xlsx_reader.read(file_path)
