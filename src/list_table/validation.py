"""Structural validation of a raw grid.

Runs the same occupancy marking the renderer uses (in source-cell
coordinates) and reports every way the author's rows can be malformed:

  - a row whose cell count differs from row 0
  - a span value that is not a positive integer
  - a rowspan past the last row, or a colspan past the end of its row
  - a span without enough ``_`` placeholders where it lands
  - a placeholder that no span covers

Nothing is mutated; the result is a list of issues.  Mode ``off`` skips the
whole computation.
"""

import logging
from collections.abc import Sequence

from list_table.layout import Coordinate, mark_span
from list_table.schema import Cell, ValidationIssue, ValidationMode, ValidationResult, is_valid_span

logger = logging.getLogger(__name__)


def _check_span_values(cell: Cell, row_idx: int, col_idx: int) -> list[ValidationIssue]:
    issues = []
    if not is_valid_span(cell.row_span):
        issues.append(
            ValidationIssue(
                code="invalid_row_span",
                message=f"Invalid rowSpan value: {cell.row_span}. Must be a positive integer.",
                row=row_idx,
                col=col_idx,
            )
        )
    if not is_valid_span(cell.col_span):
        issues.append(
            ValidationIssue(
                code="invalid_col_span",
                message=f"Invalid colSpan value: {cell.col_span}. Must be a positive integer.",
                row=row_idx,
                col=col_idx,
            )
        )
    return issues


def _check_col_span(cell: Cell, row: Sequence[Cell], row_idx: int, col_idx: int) -> ValidationIssue | None:
    """Colspan must fit in the row and be followed by enough placeholders."""
    col_span = cell.effective_col_span
    remaining = len(row) - col_idx
    if col_span > remaining:
        return ValidationIssue(
            code="col_span_overflow",
            message=(
                f"Cell colSpan ({cell.col_span}) extends beyond row bounds. "
                f"Row has {remaining} remaining cells (including this one), but colSpan requires {col_span}."
            ),
            row=row_idx,
            col=col_idx,
        )

    found = sum(1 for offset in range(1, col_span) if row[col_idx + offset].is_placeholder)
    if found < col_span - 1:
        return ValidationIssue(
            code="col_span_placeholders",
            message=(
                f"Cell colSpan ({cell.col_span}) doesn't have enough placeholders. "
                f"Expected {col_span - 1} placeholders after this cell, found {found}."
            ),
            row=row_idx,
            col=col_idx,
        )
    return None


def _check_row_span_bounds(cell: Cell, total_rows: int, row_idx: int, col_idx: int) -> ValidationIssue | None:
    """Rowspan must not run past the last row."""
    row_span = cell.effective_row_span
    if row_idx + row_span <= total_rows:
        return None
    return ValidationIssue(
        code="row_span_overflow",
        message=(
            f"Cell rowSpan ({cell.row_span}) extends beyond table bounds. "
            f"Table has {total_rows} rows (0-{total_rows - 1}), but span reaches row {row_idx + row_span - 1}."
        ),
        row=row_idx,
        col=col_idx,
    )


def _check_row_span_placeholders(cell: Cell, raw_rows: Sequence[Sequence[Cell]], row_idx: int, col_idx: int) -> ValidationIssue | None:
    """Each row under a rowspan needs a placeholder in the anchor's source column."""
    row_span = cell.effective_row_span

    # Rows past the end, or too short to reach this column, count as missing
    found = 0
    for target in range(row_idx + 1, min(row_idx + row_span, len(raw_rows))):
        target_row = raw_rows[target]
        if col_idx < len(target_row) and target_row[col_idx].is_placeholder:
            found += 1
    if found >= row_span - 1:
        return None
    return ValidationIssue(
        code="row_span_placeholders",
        message=(
            f"Cell rowSpan ({cell.row_span}) doesn't have enough placeholders. "
            f"Expected {row_span - 1} placeholders in following rows at column {col_idx}, found {found}."
        ),
        row=row_idx,
        col=col_idx,
    )


def _find_orphans(raw_rows: Sequence[Sequence[Cell]], occupied: set[Coordinate]) -> list[ValidationIssue]:
    """Placeholders not covered by any span.  Must run after every span is marked."""
    return [
        ValidationIssue(
            code="orphan_placeholder",
            message="Placeholder found that doesn't belong to a rowSpan or colSpan.",
            row=row_idx,
            col=col_idx,
        )
        for row_idx, row in enumerate(raw_rows)
        for col_idx, cell in enumerate(row)
        if cell.is_placeholder and (row_idx, col_idx) not in occupied
    ]


def validate_table(raw_rows: Sequence[Sequence[Cell]], mode: ValidationMode = "warn") -> ValidationResult:
    """Validate *raw_rows* and return every structural issue found.

    The detected issues are identical for ``warn`` and ``strict``; only the
    caller's reaction differs.
    """
    if mode == "off":
        return ValidationResult()

    issues: list[ValidationIssue] = []
    occupied: set[Coordinate] = set()
    expected_cols = len(raw_rows[0]) if raw_rows else 0

    for row_idx, row in enumerate(raw_rows):
        if len(row) != expected_cols:
            issues.append(
                ValidationIssue(
                    code="inconsistent_width",
                    message=f"Row has inconsistent width. Expected {expected_cols} cells, found {len(row)}.",
                    row=row_idx,
                )
            )

        for col_idx, cell in enumerate(row):
            issues.extend(_check_span_values(cell, row_idx, col_idx))

            # Placeholders are checked by the orphan pass only
            if cell.is_placeholder:
                continue

            row_span = cell.effective_row_span
            col_span = cell.effective_col_span

            checks = []
            if row_span > 1:
                checks.append(_check_row_span_bounds(cell, len(raw_rows), row_idx, col_idx))
            if col_span > 1:
                checks.append(_check_col_span(cell, row, row_idx, col_idx))
            if row_span > 1:
                checks.append(_check_row_span_placeholders(cell, raw_rows, row_idx, col_idx))
            issues.extend(issue for issue in checks if issue is not None)

            mark_span(occupied, row_idx, col_idx, row_span, col_span)

    issues.extend(_find_orphans(raw_rows, occupied))

    result = ValidationResult(errors=issues)
    logger.debug("Validated %d rows: %d issue(s)", len(raw_rows), len(issues))
    return result
