"""HTML rendering of resolved tables and error reports.

A thin presentation adapter: section scaffolding, th/td choice, scope and
span attributes come from the rendered table; cell content is written out
node by node with text escaped.
"""

import html
from typing import Any

from list_table.nodes import NodeKind, node_kind
from list_table.schema import ErrorReport, RenderedRow, RenderedTable, ResolvedCell

ERROR_CLASS = "list-table-error"


# ─── Content ─────────────────────────────────────────────────────────────────


def render_content(node: Any) -> str:
    """Render a content node (or list of nodes) as HTML."""
    if isinstance(node, str):
        return html.escape(node)
    if isinstance(node, (list, tuple)):
        return "".join(render_content(child) for child in node)

    kind = node_kind(node)
    if kind == NodeKind.LIST_CONTAINER:
        return f"<ul>{render_content(node.children)}</ul>"
    if kind == NodeKind.LIST_ITEM:
        return f"<li>{render_content(node.children)}</li>"
    if kind == NodeKind.ELEMENT:
        attrs = "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in node.attrs.items())
        return f"<{node.tag}{attrs}>{render_content(node.children)}</{node.tag}>"
    if node is None:
        return ""
    return html.escape(str(node))


# ─── Table ───────────────────────────────────────────────────────────────────


def _render_cell(cell: ResolvedCell) -> str:
    attrs = []
    if cell.row_span is not None:
        attrs.append(f'rowspan="{cell.row_span}"')
    if cell.col_span is not None:
        attrs.append(f'colspan="{cell.col_span}"')
    if cell.scope is not None:
        attrs.append(f'scope="{cell.scope}"')
    attr_text = (" " + " ".join(attrs)) if attrs else ""
    return f"<{cell.element}{attr_text}>{render_content(cell.content)}</{cell.element}>"


def _render_rows(rows: list[RenderedRow]) -> list[str]:
    return ["<tr>" + "".join(_render_cell(cell) for cell in row.cells) + "</tr>" for row in rows]


def render_table_html(table: RenderedTable) -> str:
    """Render a RenderedTable as an HTML ``<table>``, one row per line."""
    class_attr = f' class="{html.escape(table.class_name, quote=True)}"' if table.class_name else ""
    lines = [f"<table{class_attr}>"]

    if table.caption:
        lines.append(f"<caption>{render_content(table.caption)}</caption>")
    if table.head:
        lines += ["<thead>", *_render_rows(table.head), "</thead>"]
    lines += ["<tbody>", *_render_rows(table.body), "</tbody>"]
    if table.foot:
        lines += ["<tfoot>", *_render_rows(table.foot), "</tfoot>"]

    lines.append("</table>")
    return "\n".join(lines)


# ─── Error Reports ───────────────────────────────────────────────────────────


def format_error_report(report: ErrorReport) -> str:
    """Plain-text error report: the message, then one line per issue."""
    lines = [f"Error: {report.message}"]
    if report.kind == "structure" and report.detail.get("observed"):
        lines.append(f"Received: {report.detail['observed']}")
    for issue in report.issues:
        lines.append(f"  - [{issue.kind}] {issue.location}{issue.message}")
    return "\n".join(lines)


def render_error_html(report: ErrorReport) -> str:
    items = "".join(f'<li class="{issue.kind}">{html.escape(issue.location + issue.message)}</li>' for issue in report.issues)
    body = f"<ul>{items}</ul>" if items else ""
    detail = ""
    if report.kind == "structure" and report.detail.get("observed"):
        detail = f"<small>Received: {html.escape(report.detail['observed'])}</small>"
    return f'<div class="{ERROR_CLASS}"><h4>{html.escape(report.message)}</h4>{detail}{body}</div>'


def render_html(result: RenderedTable | ErrorReport) -> str:
    """Render either build outcome as HTML."""
    if isinstance(result, ErrorReport):
        return render_error_html(result)
    return render_table_html(result)
