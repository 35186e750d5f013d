# umd/markdown/postprocessors/marker_quotes.py
"""
Postprocessor that undoes Pandoc's quote escaping inside markers.

Only plugin and definition-list markers are touched; everything outside a
marker keeps its escaping.
"""

import re

from ..markers import ENCODED_KINDS

ENCODED_MARKER_PATTERN = re.compile(
    r"\{\{(?:%s):[^{}]*?:(?:%s)\}\}"
    % ("|".join(kind.value for kind in ENCODED_KINDS), "|".join(kind.value for kind in ENCODED_KINDS))
)


def unescape_marker_quotes(html: str, context: dict) -> str:
    def replace(match):
        return match.group(0).replace("&quot;", '"').replace("&#39;", "'")

    return ENCODED_MARKER_PATTERN.sub(replace, html)


def unescape_marker_quotes_default(html: str, context: dict) -> str:
    """
    Default configuration for unescape_marker_quotes.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return unescape_marker_quotes(html, context)
