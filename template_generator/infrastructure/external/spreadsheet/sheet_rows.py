"""Turn a sheet's raw cell rows into SheetData.

Shared by every workbook reader so .xlsx and .xls files produce the same
row keys: first row holds the headers, blank headers become "__EMPTY",
repeats get "_<n>" suffixes, and empty cells are left out of the row.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from template_generator.application.dtos.upload import SheetData, SheetRow

EMPTY_HEADER = "__EMPTY"


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def column_keys(header_row: Iterable[Any]) -> list[str]:
    """Row keys per column: header text, "__EMPTY" for blank headers, "_<n>" on repeats."""
    keys: list[str] = []
    seen: dict[str, int] = {}
    for cell in header_row:
        base = EMPTY_HEADER if is_blank(cell) else str(cell).strip()
        count = seen.get(base, 0)
        seen[base] = count + 1
        keys.append(base if count == 0 else f"{base}_{count}")
    return keys


def sheet_from_rows(name: str, values: Iterable[Sequence[Any]]) -> SheetData:
    rows_iter = iter(values)
    header_row = next(rows_iter, None)
    if header_row is None:
        return SheetData(name=name)
    keys = column_keys(header_row)
    headers = [str(cell).strip() for cell in header_row if not is_blank(cell)]

    rows: list[SheetRow] = []
    for raw in rows_iter:
        # Cells without a value are omitted, so a row may not carry every header.
        row = {
            keys[i] if i < len(keys) else f"{EMPTY_HEADER}_{i}": value
            for i, value in enumerate(raw)
            if not is_blank(value)
        }
        if row:
            rows.append(row)
    return SheetData(name=name, rows=rows, headers=headers)
