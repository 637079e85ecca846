"""Marker constants and compiled regex patterns for list-table input.

The span-marker grammar itself is scanned by hand in markers.py; these are
the fixed tokens it looks for, plus the bullet-line pattern the markdown
reader uses to split author text into list items.
"""

import re

# ─── Span Marker Tokens ──────────────────────────────────────────────────────

# "[r2c3] Cell text" -- a leading bracketed token declaring the cell's spans
MARKER_OPEN = "["
MARKER_CLOSE = "]"
ROW_SPAN_PREFIX = "r"
COL_SPAN_PREFIX = "c"

# ASCII digits only; "²" and friends are ordinary text
DIGITS = "0123456789"


# ─── Placeholder Token ───────────────────────────────────────────────────────

# A cell whose whole (trimmed) text is this character is covered by a span
PLACEHOLDER_MARKER = "_"


# ─── Markdown Bullet Lines ───────────────────────────────────────────────────

# "  - cell text" -> indent, bullet, text.  The bullet must be followed by
# whitespace or end the line, so "---" and "**bold**" are not bullets.
BULLET_LINE_RE = re.compile(r"^([ \t]*)([-*+])(?:[ \t]+(.*))?$")
