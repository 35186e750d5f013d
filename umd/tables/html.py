# umd/tables/html.py

from typing import Callable, List

from ..markdown.text import escape_text
from .models import Cell, Table


def _render_cell(cell: Cell, render_content: Callable[[str], str]) -> str:
    tag = "th" if cell.is_header else "td"
    attrs = []
    if cell.classes:
        attrs.append(f'class="{" ".join(cell.classes)}"')
    if cell.styles:
        attrs.append(f'style="{"; ".join(cell.styles)}"')
    if cell.colspan > 1:
        attrs.append(f'colspan="{cell.colspan}"')
    if cell.rowspan > 1:
        attrs.append(f'rowspan="{cell.rowspan}"')
    attrs_str = " " + " ".join(attrs) if attrs else ""
    return f"<{tag}{attrs_str}>{render_content(cell.content)}</{tag}>"


def _render_rows(rows: List[List[Cell]], render_content: Callable[[str], str]) -> str:
    return "".join(
        "<tr>" + "".join(_render_cell(cell, render_content) for cell in row) + "</tr>"
        for row in rows
    )


def render_table(table: Table, render_content: Callable[[str], str] = escape_text) -> str:
    """
    Emit the table as a single line of HTML.

    Args:
        table: Parsed and span-resolved table
        render_content: Turns raw cell text into HTML; escapes by default

    Returns:
        ``<table class="table umd-table">…</table>``
    """
    rows = table.rows
    html = ['<table class="table umd-table">']

    if table.has_header_row and rows:
        html.append("<thead>" + _render_rows(rows[:1], render_content) + "</thead>")
        rows = rows[1:]

    if rows:
        html.append("<tbody>" + _render_rows(rows, render_content) + "</tbody>")

    html.append("</table>")
    return "".join(html)
