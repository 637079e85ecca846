"""Cell annotator: turn one author bullet into a ``Cell``.

Only the first content node is inspected.  A cell whose text is exactly
``_`` is a placeholder; otherwise a leading ``[r<n>c<n>]`` marker sets the
spans and is stripped from the visible text.
"""

from typing import Any

from list_table.markers import parse_span_marker
from list_table.nodes import get_text_content, to_array
from list_table.patterns import PLACEHOLDER_MARKER
from list_table.schema import Cell


def process_cell(children: Any) -> Cell:
    """Extract span / placeholder markers from a cell's content."""
    content = to_array(children)
    first = content[0] if content else None
    text_check = first if isinstance(first, str) else get_text_content(first)

    # Placeholder wins; the two grammars never both match anyway
    if text_check.strip() == PLACEHOLDER_MARKER:
        content[0] = ""
        return Cell(content=content, is_placeholder=True)

    marker = parse_span_marker(text_check)
    if marker is None:
        return Cell(content=content)

    # Marker text is only removed from a literal text node; spans apply either way
    if isinstance(first, str):
        content[0] = first[marker.end :].strip()

    return Cell(
        content=content,
        row_span=1 if marker.row_span is None else marker.row_span,
        col_span=1 if marker.col_span is None else marker.col_span,
    )
