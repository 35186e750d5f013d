# umd/markdown/postprocessors/block_placement.py
"""
Postprocessor for placement lines in front of tables and block plugins.

    CENTER:
    | A | B |

    <p>CENTER:</p><table class="table umd-table">...</table>

    → <div class="w-auto mx-auto"><table class="table umd-table">...</table></div>

A placement line is a paragraph holding only ``LEFT:``, ``CENTER:``,
``RIGHT:`` or ``JUSTIFY:``. It is removed once the block is wrapped; a
placement line with nothing placeable after it stays as text.
"""

import re

from bs4 import NavigableString, Tag

from .utils import get_shared_soup, soup_to_html

PLACEMENT_CLASSES = {
    "LEFT": "w-auto",
    "CENTER": "w-auto mx-auto",
    "RIGHT": "w-auto ms-auto me-0",
    "JUSTIFY": "w-100",
}

PLACEMENT_PATTERN = re.compile(r"^\s*(?P<keyword>LEFT|CENTER|RIGHT|JUSTIFY):\s*$")


def _is_placeable(element) -> bool:
    if not isinstance(element, Tag):
        return False
    if element.name == "table":
        return True
    return element.name == "template" and "umd-plugin" in element.get("class", [])


def _next_element_sibling(element):
    sibling = element.next_sibling
    while isinstance(sibling, NavigableString) and not sibling.strip():
        sibling = sibling.next_sibling
    return sibling


def _wrapper(soup, keyword):
    return soup.new_tag("div", attrs={"class": PLACEMENT_CLASSES[keyword]})


def apply_block_placement(html: str, context: dict) -> str:
    """
    Wrap tables and block plugins that follow a placement line.

    Args:
        html: HTML string to process
        context: Processor context

    Returns:
        HTML with placement wrappers
    """
    if not any(f"{keyword}:" in html for keyword in PLACEMENT_CLASSES):
        return html

    soup = get_shared_soup(html, context)
    for paragraph in soup.find_all("p"):
        blocks = [child for child in paragraph.children if isinstance(child, Tag)]
        text = "".join(
            str(child) for child in paragraph.children if isinstance(child, NavigableString)
        )
        match = PLACEMENT_PATTERN.match(text)
        if match is None:
            continue
        keyword = match.group("keyword")

        # Placement line and block plugin rendered into one paragraph
        if len(blocks) == 1 and _is_placeable(blocks[0]):
            wrapper = _wrapper(soup, keyword)
            paragraph.replace_with(wrapper)
            wrapper.append(blocks[0].extract())
            continue
        if blocks:
            continue

        following = _next_element_sibling(paragraph)
        if _is_placeable(following):
            following.wrap(_wrapper(soup, keyword))
            paragraph.decompose()

    return soup_to_html(context, soup)


def apply_block_placement_default(html: str, context: dict) -> str:
    """
    Default configuration for apply_block_placement.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return apply_block_placement(html, context)
