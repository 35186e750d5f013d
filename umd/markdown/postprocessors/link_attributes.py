# umd/markdown/postprocessors/link_attributes.py
"""
Postprocessor for attribute lists written after a link.

    [Docs](/docs){#docs .btn .btn-primary}
        → <a href="/docs" id="docs" class="btn btn-primary">Docs</a>

    [Docs](/docs){docs btn}
        → <a href="/docs" id="docs" class="btn">Docs</a>

Bare tokens are read as an id followed by classes. An id already on the link
is kept. Tokens with characters outside ``[A-Za-z0-9_-]`` are ignored.
"""

import re

from bs4 import NavigableString

from .utils import get_shared_soup, soup_to_html

ATTRIBUTE_LIST_PATTERN = re.compile(r"^\s*\{(?P<attrs>[^}]+)\}")
TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def parse_attribute_list(attrs: str):
    """
    Split ``#id .cls bare`` into an id and a list of classes.

    Returns:
        ``(id or None, [classes])``
    """
    element_id = None
    classes = []
    bare = []
    for token in attrs.split():
        if token.startswith("#"):
            if TOKEN_PATTERN.match(token[1:]):
                element_id = token[1:]
        elif token.startswith("."):
            if TOKEN_PATTERN.match(token[1:]):
                classes.append(token[1:])
        elif TOKEN_PATTERN.match(token):
            bare.append(token)

    if bare:
        if element_id is None:
            element_id = bare.pop(0)
        classes.extend(bare)
    return element_id, classes


def apply_link_attributes(html: str, context: dict) -> str:
    if "{" not in html:
        return html

    soup = get_shared_soup(html, context)
    for link in soup.find_all("a", href=True):
        following = link.next_sibling
        if not isinstance(following, NavigableString):
            continue
        match = ATTRIBUTE_LIST_PATTERN.match(str(following))
        if match is None:
            continue

        element_id, classes = parse_attribute_list(match.group("attrs"))
        if element_id is None and not classes:
            continue
        if element_id and not link.get("id"):
            link["id"] = element_id
        if classes:
            existing = link.get("class", [])
            link["class"] = existing + [cls for cls in classes if cls not in existing]

        remainder = str(following)[match.end():]
        if remainder:
            following.replace_with(NavigableString(remainder))
        else:
            following.extract()

    return soup_to_html(context, soup)


def apply_link_attributes_default(html: str, context: dict) -> str:
    """
    Default configuration for apply_link_attributes.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return apply_link_attributes(html, context)
