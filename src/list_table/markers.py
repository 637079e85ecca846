"""Anchored scanner for the leading span marker of a cell.

Grammar (anchored at the start of the text)::

    "[" ws* ( "r" int )? ws* ( "c" int )? ws* "]"
    int := "-"? digit+

Zero and negative values are accepted here and rejected later by the
validator, so authors get a precise message instead of silently plain text.
Anything that does not match is ordinary cell text.
"""

from dataclasses import dataclass

from list_table.patterns import COL_SPAN_PREFIX, DIGITS, MARKER_CLOSE, MARKER_OPEN, ROW_SPAN_PREFIX


@dataclass(frozen=True)
class SpanMarker:
    """A parsed marker.  ``None`` means the dimension was not given."""

    row_span: int | None
    col_span: int | None
    end: int  # index just past the closing bracket


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _scan_int(text: str, pos: int) -> tuple[int | None, int]:
    """Scan ``-?digit+`` at *pos*.  Returns (value, new_pos) or (None, pos) on no match."""
    start = pos
    if pos < len(text) and text[pos] == "-":
        pos += 1
    digits_start = pos
    while pos < len(text) and text[pos] in DIGITS:
        pos += 1
    if pos == digits_start:
        return None, start
    return int(text[start:pos]), pos


def _scan_dimension(text: str, pos: int, prefix: str) -> tuple[int | None, int, bool]:
    """Scan an optional ``<prefix><int>`` group.

    Returns (value, new_pos, ok).  ``ok`` is False when the prefix letter is
    present but not followed by an integer, which fails the whole marker.
    """
    if pos >= len(text) or text[pos] != prefix:
        return None, pos, True
    value, new_pos = _scan_int(text, pos + 1)
    if value is None:
        return None, pos, False
    return value, new_pos, True


def parse_span_marker(text: str) -> SpanMarker | None:
    """Return the span marker at the very start of *text*, or None.

    >>> parse_span_marker("[r2c3] Merged")
    SpanMarker(row_span=2, col_span=3, end=6)
    >>> parse_span_marker("[c-1] x").col_span
    -1
    >>> parse_span_marker("[x] not a marker") is None
    True
    """
    if not text.startswith(MARKER_OPEN):
        return None
    pos = _skip_whitespace(text, len(MARKER_OPEN))

    row_span, pos, ok = _scan_dimension(text, pos, ROW_SPAN_PREFIX)
    if not ok:
        return None
    pos = _skip_whitespace(text, pos)

    col_span, pos, ok = _scan_dimension(text, pos, COL_SPAN_PREFIX)
    if not ok:
        return None
    pos = _skip_whitespace(text, pos)

    if not text.startswith(MARKER_CLOSE, pos):
        return None
    return SpanMarker(row_span=row_span, col_span=col_span, end=pos + len(MARKER_CLOSE))
