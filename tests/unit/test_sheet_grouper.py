"""Unit tests for sheet grouping by base name."""

import pytest

from template_generator.application.services.sheet_grouper import (
    component_key,
    group_base_name,
    group_sheets,
)


class TestGroupBaseName:
    @pytest.mark.parametrize(
        ("sheet_name", "expected"),
        [
            ("Sheet1_Part1", "Sheet1"),
            ("Data (1)", "Data"),
            ("NoSeparator", "NoSeparator"),
            ("- ", "- "),
            ("Invoice - Header", "Invoice"),
            ("Orders Part 2", "Orders"),
            ("Orders part3", "Orders"),
            ("Sales 2024", "Sales"),
            ("  Padded  ", "Padded"),
        ],
    )
    def test_base_name(self, sheet_name: str, expected: str) -> None:
        assert group_base_name(sheet_name) == expected

    def test_only_first_separator_matters(self) -> None:
        assert group_base_name("A_B-C") == "A"


class TestGroupSheets:
    def test_groups_preserve_workbook_order(self) -> None:
        sheets = ["Invoice - Header", "Customers", "Invoice - Lines", "Data (1)", "Data (2)"]
        groups = group_sheets(sheets)
        assert list(groups) == ["Invoice", "Customers", "Data"]
        assert groups["Invoice"] == ["Invoice - Header", "Invoice - Lines"]
        assert groups["Data"] == ["Data (1)", "Data (2)"]

    def test_deterministic(self) -> None:
        sheets = ["b_1", "a", "b_2", "c (x)"]
        assert group_sheets(sheets) == group_sheets(list(sheets))

    def test_name_of_for_objects(self) -> None:
        class Sheet:
            def __init__(self, name: str) -> None:
                self.name = name

        sheets = [Sheet("X_1"), Sheet("X_2")]
        groups = group_sheets(sheets, name_of=lambda s: s.name)
        assert [s.name for s in groups["X"]] == ["X_1", "X_2"]

    def test_empty(self) -> None:
        assert group_sheets([]) == {}


class TestComponentKey:
    def test_whitespace_and_case(self) -> None:
        assert component_key("  Invoice   Lines ") == "invoice_lines"

    def test_keeps_punctuation(self) -> None:
        assert component_key("Invoice - Header") == "invoice_-_header"
