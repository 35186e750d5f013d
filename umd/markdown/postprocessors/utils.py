# umd/markdown/postprocessors/utils.py
"""Helpers shared by the postprocessors: a cached soup and marker replacement."""

from __future__ import annotations

import re
from typing import Callable

from bs4 import BeautifulSoup

from ..markers import Marker, MarkerKind, marker_from_match, marker_pattern

_SHARED_SOUP_KEY = "_umd_soup"
_SHARED_SOURCE_KEY = "_umd_soup_source"


def get_shared_soup(html: str, context: dict) -> BeautifulSoup:
    """
    Parse ``html`` once per run of bs4 postprocessors.

    The tree is kept in the context next to the string it was parsed from. A
    regex restorer running in between changes that string, which forces a
    fresh parse.
    """
    if context.get(_SHARED_SOURCE_KEY) != html or _SHARED_SOUP_KEY not in context:
        context[_SHARED_SOUP_KEY] = BeautifulSoup(html, "html.parser")
        context[_SHARED_SOURCE_KEY] = html
    return context[_SHARED_SOUP_KEY]


def soup_to_html(context: dict, soup: BeautifulSoup) -> str:
    html = str(soup)
    context[_SHARED_SOUP_KEY] = soup
    context[_SHARED_SOURCE_KEY] = html
    return html


def clear_shared_soup(context: dict) -> None:
    for key in (_SHARED_SOUP_KEY, _SHARED_SOURCE_KEY):
        context.pop(key, None)


def replace_markers(
    html: str,
    kind: MarkerKind,
    render_block: Callable[[Marker], str],
    render_inline: Callable[[Marker], str] | None = None,
) -> str:
    """Replace every marker of ``kind`` in rendered HTML.

    A paragraph holding nothing but markers of this kind is replaced as a
    whole by their ``render_block`` output, which drops the ``<p>`` Pandoc
    wrapped around them. Markers sharing a paragraph with other content go
    through ``render_inline`` (defaults to ``render_block``).
    """
    pattern = marker_pattern(kind)
    render_inline = render_inline or render_block
    paragraph = re.compile(r"<p>\s*((?:%s\s*)+)</p>" % pattern.pattern, re.DOTALL)

    def replace_paragraph(match):
        return "".join(
            render_block(marker_from_match(kind, inner))
            for inner in pattern.finditer(match.group(1))
        )

    html = paragraph.sub(replace_paragraph, html)
    return pattern.sub(lambda match: render_inline(marker_from_match(kind, match)), html)
