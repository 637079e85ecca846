"""Grid builder: walk the author's list-of-rows and annotate every cell.

Expected shape::

    ListContainer                     <- exactly one, the table
      ListItem                        <- one per row
        ListContainer                 <- the row's cell list (first one wins)
          ListItem  -> process_cell   <- one per cell

Stray text between items is skipped.  A row item without a nested list has
no cells and is dropped.
"""

import logging
from typing import Any

from list_table.cells import process_cell
from list_table.errors import StructureError
from list_table.nodes import NodeKind, describe_node, is_structural, node_kind, to_array
from list_table.schema import Cell

logger = logging.getLogger(__name__)


def _single_list(content: Any) -> Any:
    """Return the one ListContainer in *content*, or raise StructureError."""
    nodes = [node for node in to_array(content) if not (isinstance(node, str) and not node.strip())]
    if len(nodes) != 1:
        observed = f"{len(nodes)} top-level nodes" if nodes else "no content"
        raise StructureError("ListTable content must be a single Markdown list.", observed=observed)

    outer = nodes[0]
    if node_kind(outer) != NodeKind.LIST_CONTAINER:
        raise StructureError("ListTable content must be a Markdown list.", observed=describe_node(outer))
    return outer


def _find_cell_list(row_item: Any) -> Any:
    """Return the first ListContainer among a row item's children, or None."""
    for child in to_array(row_item.children):
        if node_kind(child) == NodeKind.LIST_CONTAINER:
            return child
    return None


def build_grid(content: Any) -> list[list[Cell]]:
    """Build ``rawRows`` from the table content, preserving author order.

    Rows are not padded or normalised: each row holds exactly the cells the
    author wrote.
    """
    outer = _single_list(content)

    raw_rows: list[list[Cell]] = []
    for row_idx, row_item in enumerate(to_array(outer.children)):
        if not is_structural(row_item):
            continue

        cell_list = _find_cell_list(row_item)
        if cell_list is None:
            logger.debug("Row item %d has no nested cell list -- dropped", row_idx)
            continue

        raw_rows.append([process_cell(cell_item.children) for cell_item in to_array(cell_list.children) if is_structural(cell_item)])

    logger.debug("Built grid: %d rows, widths %s", len(raw_rows), [len(row) for row in raw_rows])
    return raw_rows
