# umd/markdown/postprocessors/heading_anchors.py
"""
Postprocessor that prepends a self-link anchor to every heading.

    <h2>Setup</h2>
        → <h2><a href="#h-2" aria-hidden="true" class="anchor" id="h-2"></a>Setup</h2>

    # Setup {#setup}
        → <h1><a href="#h-setup" aria-hidden="true" class="anchor" id="h-setup"></a>Setup</h1>

Headings are numbered in document order. The ``h-`` prefix keeps the ids
apart from ids generated elsewhere on the page.
"""

from ..header_ids import get_header_map
from .utils import get_shared_soup, soup_to_html

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def add_heading_anchors(html: str, context: dict) -> str:
    """
    Insert ``<a class="anchor">`` elements into headings.

    Args:
        html: HTML string to process
        context: Context dictionary holding the document's HeaderIdMap

    Returns:
        HTML with anchored headings
    """
    header_map = get_header_map(context)
    soup = get_shared_soup(html, context)

    for counter, heading in enumerate(soup.find_all(HEADING_TAGS), start=1):
        # Avoid duplicates when the document is processed twice
        if heading.find("a", class_="anchor", recursive=False):
            continue

        anchor_id = f"h-{header_map.ids.get(counter, counter)}"
        anchor = soup.new_tag(
            "a",
            attrs={
                "href": f"#{anchor_id}",
                "aria-hidden": "true",
                "class": "anchor",
                "id": anchor_id,
            },
        )
        heading.insert(0, anchor)

    return soup_to_html(context, soup)


def add_heading_anchors_default(html: str, context: dict) -> str:
    """
    Default configuration for add_heading_anchors.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return add_heading_anchors(html, context)
