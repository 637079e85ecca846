"""Main list-table build: content tree in, rendered table (or error report) out.

Steps, in order:

  1. Build the raw grid from the nested list (StructureError -> report).
  2. Validate it.  ``strict`` returns a report if any error was found;
     ``warn`` logs every issue and carries on with coerced spans; ``off``
     skips validation entirely.
  3. Partition rows into header / body / footer (BoundsError -> report).
  4. Render header, body and footer in that order, threading one occupancy
     set through all three so spans may cross section boundaries.

Every call starts from a fresh occupancy set; nothing is cached between
builds.
"""

import logging
from typing import Any

from list_table.config import LOG_PREFIX
from list_table.errors import BoundsError, StructureError
from list_table.grid import build_grid
from list_table.layout import partition_sections, render_section
from list_table.schema import ErrorReport, RenderedTable, TableOptions, ValidationResult
from list_table.validation import validate_table

logger = logging.getLogger(__name__)


def _log_issues(result: ValidationResult) -> None:
    """Warn-mode side channel: one log record per issue."""
    for issue in result.errors:
        suffix = f" Row {issue.row}" if issue.row is not None else ""
        logger.warning("%s %s: %s%s", LOG_PREFIX, issue.kind, issue.message, suffix)


def build_table(content: Any, options: TableOptions | None = None, **overrides: Any) -> RenderedTable | ErrorReport:
    """Resolve *content* (a single list-of-rows) into a rendered table.

    Options may be given as a ``TableOptions`` instance, as keyword overrides
    (``header_rows=1``, ``validation="strict"``, ...), or both.  Problems with
    the table itself never raise; they come back as an ``ErrorReport``.
    """
    base = dict(options) if options is not None else {}
    options = TableOptions(**{**base, **overrides})

    # ── 1. Grid ──────────────────────────────────────────────────────────
    try:
        raw_rows = build_grid(content)
    except StructureError as exc:
        logger.error("%s %s (received %s)", LOG_PREFIX, exc, exc.observed)
        return ErrorReport(kind="structure", message=str(exc), detail={"observed": exc.observed})

    # ── 2. Validation ────────────────────────────────────────────────────
    result = validate_table(raw_rows, options.validation)
    if options.validation == "strict" and not result.is_valid:
        logger.error("%s Table validation failed with %d issue(s)", LOG_PREFIX, len(result.errors))
        return ErrorReport(kind="validation", message="Table Validation Errors", issues=result.errors)
    if options.validation == "warn" and result.errors:
        _log_issues(result)

    # ── 3. Sections ──────────────────────────────────────────────────────
    try:
        sections = partition_sections(len(raw_rows), options.header_rows, options.footer_rows)
    except BoundsError as exc:
        logger.error("%s %s", LOG_PREFIX, exc)
        return ErrorReport(
            kind="bounds",
            message=str(exc),
            detail={"header_rows": exc.header_rows, "footer_rows": exc.footer_rows, "total_rows": exc.total_rows},
        )

    # ── 4. Render, sharing coverage header -> body -> footer ─────────────
    occupied: set[tuple[int, int]] = set()
    head = foot = None

    if options.header_rows > 0:
        start, end = sections.header
        head, occupied = render_section(raw_rows[start:end], start, True, occupied, options.header_columns)

    start, end = sections.body
    body, occupied = render_section(raw_rows[start:end], start, False, occupied, options.header_columns)

    if options.footer_rows > 0:
        start, end = sections.footer
        foot, occupied = render_section(raw_rows[start:end], start, False, occupied, options.header_columns)

    logger.debug("Rendered %d rows (%d header, %d footer)", len(raw_rows), options.header_rows, options.footer_rows)
    return RenderedTable(caption=options.caption, class_name=options.class_name, head=head, body=body, foot=foot)
