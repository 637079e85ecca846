"""Unit tests for structural validation of raw grids."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from list_table.grid import build_grid
from list_table.nodes import table_from_rows
from list_table.schema import Cell, ValidationIssue, ValidationResult, effective_span, is_valid_span
from list_table.validation import validate_table


def grid_of(rows: list[list[str]]) -> list[list[Cell]]:
    """Build a raw grid from rows of cell strings."""
    return build_grid(table_from_rows(rows))


def codes(rows: list[list[str]], mode: str = "warn") -> list[str]:
    return [issue.code for issue in validate_table(grid_of(rows), mode).errors]


# ===========================================================================
# Modes
# ===========================================================================


class TestModes:

    def test_off_skips_everything(self):
        result = validate_table(grid_of([["A", "B", "C"], ["_"]]), "off")
        assert result.errors == []
        assert result.is_valid is True

    def test_warn_and_strict_detect_the_same_issues(self):
        rows = [["[r5] X", "Y"], ["_", "Z", "extra"], ["[c3] W", "_"]]
        warn = validate_table(grid_of(rows), "warn")
        strict = validate_table(grid_of(rows), "strict")
        assert warn == strict
        assert warn.errors

    def test_valid_table(self):
        result = validate_table(grid_of([["Month", "[c2] Revenue", "_"], ["[r2] Q1", "1", "2"], ["_", "3", "4"]]))
        assert result.errors == []
        assert result.is_valid is True

    def test_empty_grid(self):
        assert validate_table([]).is_valid is True

    def test_warnings_do_not_invalidate(self):
        result = ValidationResult(errors=[ValidationIssue(kind="warning", code="orphan_placeholder", message="m")])
        assert result.is_valid is True


# ===========================================================================
# Width
# ===========================================================================


class TestInconsistentWidth:

    def test_short_row(self):
        result = validate_table(grid_of([["A", "B", "C"], ["D", "E"]]))
        assert len(result.errors) == 1
        issue = result.errors[0]
        assert issue.code == "inconsistent_width"
        assert issue.row == 1
        assert issue.col is None
        assert issue.message == "Row has inconsistent width. Expected 3 cells, found 2."
        assert result.is_valid is False

    def test_long_row(self):
        assert codes([["A"], ["B", "C"]]) == ["inconsistent_width"]


# ===========================================================================
# Span values
# ===========================================================================


class TestInvalidSpanValues:

    def test_zero_row_span(self):
        result = validate_table(grid_of([["[r0] A", "B"]]))
        assert [issue.code for issue in result.errors] == ["invalid_row_span"]
        assert result.errors[0].message == "Invalid rowSpan value: 0. Must be a positive integer."
        assert (result.errors[0].row, result.errors[0].col) == (0, 0)

    def test_negative_col_span(self):
        assert codes([["A", "[c-1] B"]]) == ["invalid_col_span"]

    def test_both_invalid(self):
        assert codes([["[r0c0] A"]]) == ["invalid_row_span", "invalid_col_span"]

    def test_non_integer_span(self):
        grid = [[Cell(content=["A"], row_span=1.5), Cell(content=["B"])]]
        result = validate_table(grid)
        assert [issue.code for issue in result.errors] == ["invalid_row_span"]

    def test_invalid_span_on_placeholder_still_reported(self):
        grid = [[Cell(content=["A"], col_span=2), Cell(content=[""], is_placeholder=True, row_span=0)]]
        assert [issue.code for issue in validate_table(grid).errors] == ["invalid_row_span"]


# ===========================================================================
# Rowspan
# ===========================================================================


class TestRowSpan:

    def test_overflow_message(self):
        result = validate_table(grid_of([["[r5] X", "Y"], ["_", "Z"]]))
        overflow = [issue for issue in result.errors if issue.code == "row_span_overflow"]
        assert len(overflow) == 1
        assert overflow[0].message == "Cell rowSpan (5) extends beyond table bounds. Table has 2 rows (0-1), but span reaches row 4."

    def test_overflow_also_short_of_placeholders(self):
        assert codes([["[r5] X", "Y"], ["_", "Z"]]) == ["row_span_overflow", "row_span_placeholders"]

    def test_missing_placeholders(self):
        result = validate_table(grid_of([["[r3] Tall", "B"], ["A2", "B2"], ["A3", "B3"]]))
        assert [issue.code for issue in result.errors] == ["row_span_placeholders"]
        assert result.errors[0].message == (
            "Cell rowSpan (3) doesn't have enough placeholders. Expected 2 placeholders in following rows at column 0, found 0."
        )

    def test_short_row_counts_as_missing(self):
        assert "row_span_placeholders" in codes([["A", "[r2] B"], ["C"]])

    def test_exact_fit(self):
        assert codes([["[r3] A", "B"], ["_", "C"], ["_", "D"]]) == []


# ===========================================================================
# Colspan
# ===========================================================================


class TestColSpan:

    def test_overflow(self):
        result = validate_table(grid_of([["A", "B", "C"], ["D", "[c5] Too wide", "_"]]))
        assert [issue.code for issue in result.errors] == ["col_span_overflow"]
        assert result.errors[0].message == (
            "Cell colSpan (5) extends beyond row bounds. Row has 2 remaining cells (including this one), but colSpan requires 5."
        )
        assert (result.errors[0].row, result.errors[0].col) == (1, 1)

    def test_missing_placeholders(self):
        result = validate_table(grid_of([["A", "B", "C"], ["[c3] Wide", "E", "F"]]))
        assert [issue.code for issue in result.errors] == ["col_span_placeholders"]
        assert "Expected 2 placeholders after this cell, found 0." in result.errors[0].message

    def test_partial_placeholders(self):
        assert codes([["[c3] Wide", "_", "F"]]) == ["col_span_placeholders"]

    def test_exact_fit(self):
        assert codes([["[c2] A-B", "_", "[c2] C-D", "_"], ["[c4] Full", "_", "_", "_"]]) == []

    def test_block_span(self):
        assert codes([["[r2c2] Merged", "_", "C"], ["_", "_", "F"]]) == []


# ===========================================================================
# Orphans
# ===========================================================================


class TestOrphanPlaceholders:

    def test_orphan(self):
        result = validate_table(grid_of([["A", "B"], ["C", "_"]]))
        assert len(result.errors) == 1
        issue = result.errors[0]
        assert issue.code == "orphan_placeholder"
        assert (issue.row, issue.col) == (1, 1)
        assert issue.message == "Placeholder found that doesn't belong to a rowSpan or colSpan."

    def test_orphan_mid_row(self):
        result = validate_table(grid_of([["A", "B", "C"], ["D", "_", "F"]]))
        assert [(issue.code, issue.row, issue.col) for issue in result.errors] == [("orphan_placeholder", 1, 1)]

    def test_placeholder_covered_by_earlier_row(self):
        assert codes([["[r2] A", "B"], ["_", "C"]]) == []

    def test_orphans_reported_after_span_issues(self):
        assert codes([["_", "[r3] B"], ["C", "D"]]) == ["row_span_overflow", "row_span_placeholders", "orphan_placeholder"]


# ===========================================================================
# Coercion
# ===========================================================================


class TestCoercion:

    @pytest.mark.parametrize("value,expected", [(0, 1), (-3, 1), (1, 1), (4, 4), (2.5, 1), (True, 1), (None, 1)])
    def test_effective_span(self, value, expected):
        assert effective_span(value) == expected

    @pytest.mark.parametrize("value,expected", [(1, True), (3, True), (0, False), (-1, False), (2.0, False), (True, False)])
    def test_is_valid_span(self, value, expected):
        assert is_valid_span(value) is expected

    def test_cell_keeps_raw_value(self):
        cell = Cell(row_span=-2, col_span=2.5)
        assert (cell.row_span, cell.col_span) == (-2, 2.5)
        assert (cell.effective_row_span, cell.effective_col_span) == (1, 1)

    def test_cell_rejects_bool_span(self):
        with pytest.raises(ValidationError):
            Cell(row_span=True)
        with pytest.raises(ValidationError):
            Cell(col_span=False)

    def test_cell_keeps_int_span(self):
        cell = Cell(row_span=2)
        assert cell.row_span == 2
        assert isinstance(cell.row_span, int)
