"""Group workbook sheets that share a base name.

Sheets such as "Invoice - Header" and "Invoice - Lines" share the base name
"Invoice" and become one component with a subcomponent per sheet.
"""

import re
from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")

_SEPARATOR_RE = re.compile(r"[-_]")
_PAREN_SUFFIX_RE = re.compile(r"\s*\([^()]*\)\s*$")
_PART_SUFFIX_RE = re.compile(r"\s*part\s*\d+\s*$", re.IGNORECASE)
# Only a separate numeric token ("Data 2"); "Sheet1" keeps its digit.
_NUMBER_SUFFIX_RE = re.compile(r"(?<=\S)\s+\d+\s*$")
_WHITESPACE_RE = re.compile(r"\s+")


def group_base_name(sheet_name: str) -> str:
    """Derive the grouping key for a sheet name.

    Applied in order: cut at the first '-' or '_', drop a trailing
    parenthesized suffix, drop a trailing 'part <n>', drop a trailing
    number, trim. Falls back to sheet_name when nothing is left.
    """
    base = _SEPARATOR_RE.split(sheet_name, maxsplit=1)[0]
    base = _PAREN_SUFFIX_RE.sub("", base)
    base = _PART_SUFFIX_RE.sub("", base)
    base = _NUMBER_SUFFIX_RE.sub("", base)
    base = base.strip()
    return base or sheet_name


def group_sheets(
    sheets: Sequence[T], name_of: Callable[[T], str] = str
) -> dict[str, list[T]]:
    """Cluster sheets by base name.

    Groups appear in order of first occurrence; members keep workbook order.
    """
    groups: dict[str, list[T]] = {}
    for sheet in sheets:
        groups.setdefault(group_base_name(name_of(sheet)), []).append(sheet)
    return groups


def component_key(name: str) -> str:
    """Key for a component or subcomponent: trimmed, whitespace runs to '_', lowercase."""
    return _WHITESPACE_RE.sub("_", name.strip()).lower()
