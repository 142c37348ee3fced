from template_generator.infrastructure.external.spreadsheet.openpyxl_reader import (
    OpenpyxlWorkbookReader,
)
from template_generator.infrastructure.external.spreadsheet.reader import (
    SpreadsheetWorkbookReader,
)
from template_generator.infrastructure.external.spreadsheet.xlrd_reader import XlrdWorkbookReader

__all__ = ["OpenpyxlWorkbookReader", "SpreadsheetWorkbookReader", "XlrdWorkbookReader"]
