"""Read markdown bullet lists into content node trees.

Handles the subset of markdown a list table is written in::

    - - Month
      - [c2] Revenue
      - _
    - - January
      - Sales
      - Services

Nesting follows indentation; ``- - x`` opens a nested list on the same
line.  Indented lines that are not bullets continue the previous item, and
non-list text outside any list (including an unindented paragraph after a
blank line) becomes a plain text node.  Inline markup is
left as literal text.
"""

from typing import Any

from list_table.nodes import ListContainer, ListItem
from list_table.patterns import BULLET_LINE_RE


def _split_bullets(line: str) -> list[tuple[int, str]]:
    """Return (indent, text) for each bullet on *line*, outermost first.

    ``"  - - A"`` gives ``[(2, "- A"), (4, "A")]``; a non-bullet line gives [].
    """
    bullets: list[tuple[int, str]] = []
    offset = 0
    rest = line
    match = BULLET_LINE_RE.match(rest)
    while match:
        text = match.group(3) or ""
        bullets.append((offset + len(match.group(1)), text))
        if match.group(3) is None:
            break
        offset += match.start(3)
        rest = text
        match = BULLET_LINE_RE.match(rest)
    return bullets


def _append_text(item: ListItem, text: str) -> None:
    """Add a continuation line to *item*, joining onto trailing text."""
    if item.children and isinstance(item.children[-1], str):
        item.children[-1] = f"{item.children[-1]}\n{text}" if item.children[-1] else text
    else:
        item.children.append(text)


def parse_list_markup(text: str) -> list[Any]:
    """Parse *text* into top-level content nodes (lists and text)."""
    roots: list[Any] = []
    stack: list[tuple[int, ListContainer]] = []  # (bullet indent, list) from outermost in

    after_blank = False

    for line in text.splitlines():
        if not line.strip():
            after_blank = True
            continue

        bullets = _split_bullets(line)
        blank_before, after_blank = after_blank, False
        if not bullets:
            indent = len(line) - len(line.lstrip())
            # A paragraph after a blank line, no deeper than the outermost list, ends the list
            if blank_before and stack and indent <= stack[0][0]:
                stack.clear()
            if stack and stack[-1][1].children:
                _append_text(stack[-1][1].children[-1], line.strip())
            else:
                roots.append(line.strip())
            continue

        for indent, item_text in bullets:
            # Close lists nested deeper than this bullet
            while stack and indent < stack[-1][0]:
                stack.pop()

            if stack and indent == stack[-1][0]:
                container = stack[-1][1]
            else:
                container = ListContainer()
                if stack and stack[-1][1].children:
                    stack[-1][1].children[-1].children.append(container)
                else:
                    roots.append(container)
                stack.append((indent, container))

            # The nested bullet's text is handled on the next iteration
            nested = BULLET_LINE_RE.match(item_text) is not None
            container.children.append(ListItem([] if nested or not item_text else [item_text]))

    return roots
