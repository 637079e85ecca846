"""Occupancy tracking, section partitioning, and grid rendering.

The occupied set holds absolute ``(row, col)`` coordinates covered by a span
anchored earlier.  The validator and the renderer both mark spans through
``span_footprint`` so the two passes agree on what "covered" means; each
pass starts from its own empty set.
"""

import logging
from collections.abc import Iterator, Sequence

from list_table.errors import BoundsError
from list_table.schema import Cell, RenderedRow, ResolvedCell, SectionRanges

logger = logging.getLogger(__name__)

Coordinate = tuple[int, int]


# ─── Occupancy ───────────────────────────────────────────────────────────────


def span_footprint(row: int, col: int, row_span: int, col_span: int) -> Iterator[Coordinate]:
    """Yield every coordinate a span anchored at (row, col) covers, except the anchor."""
    for dr in range(row_span):
        for dc in range(col_span):
            if dr == 0 and dc == 0:
                continue
            yield row + dr, col + dc


def mark_span(occupied: set[Coordinate], row: int, col: int, row_span: int, col_span: int) -> None:
    """Add a span's footprint to *occupied* (no-op for 1x1 cells)."""
    if row_span > 1 or col_span > 1:
        occupied.update(span_footprint(row, col, row_span, col_span))


# ─── Section Partitioning ────────────────────────────────────────────────────


def partition_sections(total_rows: int, header_rows: int = 0, footer_rows: int = 0) -> SectionRanges:
    """Split [0, total_rows) into header / body / footer ranges.

    Raises BoundsError when header and footer rows together exceed the table.
    """
    if header_rows + footer_rows > total_rows:
        raise BoundsError(header_rows, footer_rows, total_rows)

    footer_start = total_rows - footer_rows
    ranges = SectionRanges(
        header=(0, header_rows),
        body=(header_rows, footer_start),
        footer=(footer_start, total_rows),
    )
    logger.debug("Sections: header=%s body=%s footer=%s", ranges.header, ranges.body, ranges.footer)
    return ranges


# ─── Rendering ───────────────────────────────────────────────────────────────


def _resolve_cell(cell: Cell, row: int, col: int, is_header_section: bool, header_columns: int) -> ResolvedCell:
    """Classify an anchor cell and attach its effective spans."""
    row_span = cell.effective_row_span
    col_span = cell.effective_col_span

    is_header_col = col < header_columns
    scope = None
    if is_header_section:
        scope = "col"
    if is_header_col:
        scope = "row"

    return ResolvedCell(
        content=cell.content,
        row=row,
        col=col,
        row_span=row_span if row_span > 1 else None,
        col_span=col_span if col_span > 1 else None,
        is_header=is_header_section or is_header_col,
        scope=scope,
    )


def _render_row(row: Sequence[Cell], row_idx: int, is_header_section: bool, occupied: set[Coordinate], header_columns: int) -> RenderedRow:
    """Lay out one row against *occupied*, marking the spans it anchors."""
    rendered = RenderedRow(index=row_idx)
    logical_col = 0
    cell_ptr = 0

    while cell_ptr < len(row):
        # Slot already covered by a span from above (or from the left)
        if (row_idx, logical_col) in occupied:
            if row[cell_ptr].is_placeholder:
                cell_ptr += 1
            else:
                logger.debug("Row %d: slot %d is covered but source cell %d is not a placeholder", row_idx, logical_col, cell_ptr)
            logical_col += 1
            continue

        cell = row[cell_ptr]
        cell_ptr += 1

        # Uncovered placeholder: nothing to draw here
        if cell.is_placeholder:
            logical_col += 1
            continue

        resolved = _resolve_cell(cell, row_idx, logical_col, is_header_section, header_columns)
        row_span = cell.effective_row_span
        col_span = cell.effective_col_span
        mark_span(occupied, row_idx, logical_col, row_span, col_span)
        rendered.cells.append(resolved)
        logical_col += col_span

        # Swallow the placeholders written after a colspan anchor
        for _ in range(col_span - 1):
            if cell_ptr < len(row) and row[cell_ptr].is_placeholder:
                cell_ptr += 1

    return rendered


def render_section(
    rows: Sequence[Sequence[Cell]],
    start_row: int,
    is_header_section: bool,
    occupied: frozenset[Coordinate] | set[Coordinate] = frozenset(),
    header_columns: int = 0,
) -> tuple[list[RenderedRow], set[Coordinate]]:
    """Render a contiguous block of rows starting at absolute row *start_row*.

    *occupied* is the coverage left by previously rendered sections; it is
    not modified.  Returns the rendered rows and the coverage after this
    section, to be passed on to the next one.
    """
    covered = set(occupied)
    rendered = [_render_row(row, start_row + offset, is_header_section, covered, header_columns) for offset, row in enumerate(rows)]
    return rendered, covered
