# umd/markdown/postprocessors/tables.py
"""
Postprocessor that puts UMD tables back in place of their sentinels.

    <p>TABLE_MARKER_0_END</p>   → <table class="table umd-table">...</table>

Markers left in cell text (plugins, underline) are restored on the way in.
"""

import re

from ..header_ids import get_header_map
from .plugins import restore_markers


def restore_tables(html: str, context: dict) -> str:
    for sentinel, table_html in get_header_map(context).tables:
        token = sentinel.strip()
        table_html = restore_markers(table_html, context)
        paragraph = re.compile(r"<p>\s*%s\s*</p>" % re.escape(token))
        html = paragraph.sub(lambda match: table_html, html)
        html = html.replace(token, table_html)
    return html


def restore_tables_default(html: str, context: dict) -> str:
    """
    Default configuration for restore_tables.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return restore_tables(html, context)
