"""Content node types supplied by the markup parser, and the leaf text aggregator.

A content node is one of:
  - ``str``            -- a text leaf
  - ``ListContainer``  -- a bullet list; its children are ``ListItem`` nodes
  - ``ListItem``       -- one bullet; children are arbitrary content nodes
  - ``Element``        -- any other inline or block element (code, emphasis, ...)
  - a list / tuple of content nodes

Anything else (numbers, None, foreign objects) is an opaque leaf that
contributes no text.  Cell content is never interpreted beyond marker
detection; these types only exist so the grid builder can tell list
structure apart from payload.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Tag carried by every content node."""

    LIST_CONTAINER = "list_container"
    LIST_ITEM = "list_item"
    LEAF = "leaf"
    ELEMENT = "element"
    OTHER = "other"


@dataclass
class ListContainer:
    """A bullet list (``<ul>``)."""

    children: list[Any] = field(default_factory=list)
    kind = NodeKind.LIST_CONTAINER


@dataclass
class ListItem:
    """One bullet (``<li>``)."""

    children: list[Any] = field(default_factory=list)
    kind = NodeKind.LIST_ITEM


@dataclass
class Element:
    """Any non-list element, e.g. ``Element("code", ["x = 1"])``."""

    tag: str
    children: list[Any] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)
    kind = NodeKind.ELEMENT


# Node kinds that carry children and count as structure (not stray text)
STRUCTURAL_KINDS = (NodeKind.LIST_CONTAINER, NodeKind.LIST_ITEM, NodeKind.ELEMENT)


def node_kind(node: Any) -> NodeKind:
    """Return the tag of *node*; plain strings are leaves, unknown objects are OTHER."""
    if isinstance(node, str):
        return NodeKind.LEAF
    kind = getattr(node, "kind", None)
    if isinstance(kind, NodeKind):
        return kind
    return NodeKind.OTHER


def is_structural(node: Any) -> bool:
    """Return True for list containers, list items and elements."""
    return node_kind(node) in STRUCTURAL_KINDS


def to_array(children: Any) -> list[Any]:
    """Flatten *children* into a flat list, dropping ``None`` and booleans.

    A single node becomes a one-element list.
    """
    if children is None or isinstance(children, bool):
        return []
    if isinstance(children, (list, tuple)):
        flat: list[Any] = []
        for child in children:
            flat.extend(to_array(child))
        return flat
    return [children]


def get_text_content(node: Any) -> str:
    """Concatenate every string leaf under *node*, depth-first, left to right."""
    if isinstance(node, str):
        return node
    if isinstance(node, (list, tuple)):
        return "".join(get_text_content(child) for child in node)
    if is_structural(node) and node.children:
        return get_text_content(node.children)
    return ""


def describe_node(node: Any) -> str:
    """Short human-readable description of a node's shape, for diagnostics."""
    kind = node_kind(node)
    if kind == NodeKind.ELEMENT:
        return f"element <{node.tag}>"
    if kind == NodeKind.OTHER:
        return f"{kind.value} ({type(node).__name__})"
    return kind.value


def table_from_rows(rows: Sequence[Sequence[Any]]) -> ListContainer:
    """Build the list-of-rows tree for *rows*, each row a sequence of cell contents.

    ``table_from_rows([["[r2] X", "Y"], ["_", "Z"]])`` is the node form of::

        - - [r2] X
          - Y
        - - _
          - Z
    """
    return ListContainer([ListItem([ListContainer([ListItem(to_array(cell)) for cell in row])]) for row in rows])
