"""Pydantic models for list-table cells, validation issues, options and results.

``Cell`` is what the annotator produces from one author bullet; the grid is a
plain ``list[list[Cell]]``.  ``ResolvedCell`` / ``RenderedTable`` are what the
renderer hands to the presentation layer, and ``ErrorReport`` replaces the
table whenever the input cannot (or, in strict mode, must not) be rendered.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from list_table.config import DEFAULT_VALIDATION

ValidationMode = Literal["strict", "warn", "off"]

IssueCode = Literal[
    "inconsistent_width",
    "invalid_row_span",
    "invalid_col_span",
    "row_span_overflow",
    "col_span_overflow",
    "col_span_placeholders",
    "row_span_placeholders",
    "orphan_placeholder",
]


def is_valid_span(value: Any) -> bool:
    """Return True if *value* is a positive integer (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def effective_span(value: Any) -> int:
    """Span used for layout: invalid values (<= 0, non-integer) count as 1."""
    if isinstance(value, int) and not isinstance(value, bool):
        return max(1, value)
    return 1


# ─── Grid Input ──────────────────────────────────────────────────────────────


class Cell(BaseModel):
    """One author-supplied cell after marker extraction.

    Spans are stored exactly as written (``[r0]`` keeps ``row_span=0``) so the
    validator can report them; layout code goes through ``effective_span``.
    """

    content: list[Any] = Field(default_factory=list)
    row_span: StrictInt | StrictFloat = Field(default=1)
    col_span: StrictInt | StrictFloat = Field(default=1)
    is_placeholder: bool = False

    @property
    def effective_row_span(self) -> int:
        return effective_span(self.row_span)

    @property
    def effective_col_span(self) -> int:
        return effective_span(self.col_span)


# ─── Validation ──────────────────────────────────────────────────────────────


class ValidationIssue(BaseModel):
    """A structural problem found in the grid.  Purely descriptive."""

    kind: Literal["error", "warning"] = "error"
    code: IssueCode
    message: str
    row: int | None = None
    col: int | None = None

    @property
    def location(self) -> str:
        """'Row 1, Col 2: ' style prefix ('' when no row is known)."""
        if self.row is None:
            return ""
        if self.col is None:
            return f"Row {self.row}: "
        return f"Row {self.row}, Col {self.col}: "


class ValidationResult(BaseModel):
    errors: list[ValidationIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Warnings never affect validity."""
        return not any(issue.kind == "error" for issue in self.errors)


# ─── Options ─────────────────────────────────────────────────────────────────


class TableOptions(BaseModel):
    """Author-facing configuration of one table."""

    header_rows: int = Field(default=0, ge=0)
    header_columns: int = Field(default=0, ge=0)
    footer_rows: int = Field(default=0, ge=0)
    caption: Any = None
    validation: ValidationMode = Field(default=DEFAULT_VALIDATION, validate_default=True)
    class_name: str = ""


# ─── Render Output ───────────────────────────────────────────────────────────


class SectionRanges(BaseModel):
    """Half-open row ranges of the three sections; together they cover [0, total)."""

    header: tuple[int, int]
    body: tuple[int, int]
    footer: tuple[int, int]


class ResolvedCell(BaseModel):
    """A cell placed on the final grid.

    ``row_span`` / ``col_span`` are None when the effective span is 1, so the
    presentation layer can omit the attribute.
    """

    content: list[Any] = Field(default_factory=list)
    row: int
    col: int
    row_span: int | None = None
    col_span: int | None = None
    is_header: bool = False
    scope: Literal["col", "row"] | None = None

    @property
    def element(self) -> str:
        return "th" if self.is_header else "td"


class RenderedRow(BaseModel):
    index: int
    cells: list[ResolvedCell] = Field(default_factory=list)


class RenderedTable(BaseModel):
    caption: Any = None
    class_name: str = ""
    head: list[RenderedRow] | None = None
    body: list[RenderedRow] = Field(default_factory=list)
    foot: list[RenderedRow] | None = None

    @property
    def rows(self) -> list[RenderedRow]:
        """All rendered rows, header -> body -> footer."""
        return [*(self.head or []), *self.body, *(self.foot or [])]


class ErrorReport(BaseModel):
    """Replaces the table output when it cannot or must not be rendered."""

    kind: Literal["structure", "bounds", "validation"]
    message: str
    issues: list[ValidationIssue] = Field(default_factory=list)
    detail: dict[str, Any] = Field(default_factory=dict)
