# umd/markdown/postprocessors/cell_alignment.py
"""
Postprocessor for vertical alignment prefixes in native table cells.

    <td>MIDDLE: Value</td>   → <td class="align-middle">Value</td>

UMD tables handle the prefixes themselves; this covers GFM pipe tables
rendered by Pandoc.
"""

import re

from bs4 import NavigableString

from ..decorations import VERTICAL_ALIGN_CLASSES
from .utils import get_shared_soup, soup_to_html

VERTICAL_PREFIX_PATTERN = re.compile(r"^\s*(?P<keyword>%s):\s*" % "|".join(VERTICAL_ALIGN_CLASSES))


def apply_cell_alignment(html: str, context: dict) -> str:
    if "<td" not in html and "<th" not in html:
        return html

    soup = get_shared_soup(html, context)
    for cell in soup.find_all(["td", "th"]):
        if not cell.contents or not isinstance(cell.contents[0], NavigableString):
            continue
        first = cell.contents[0]
        match = VERTICAL_PREFIX_PATTERN.match(str(first))
        if match is None:
            continue
        first.replace_with(NavigableString(str(first)[match.end():]))
        cell["class"] = [VERTICAL_ALIGN_CLASSES[match.group("keyword")]] + cell.get("class", [])

    return soup_to_html(context, soup)


def apply_cell_alignment_default(html: str, context: dict) -> str:
    """
    Default configuration for apply_cell_alignment.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return apply_cell_alignment(html, context)
