# umd/markdown/postprocessors/definition_lists.py
"""
Postprocessor that restores definition list markers.

    <p>{{DEFINITION_LIST:W1siSFRNTCIsIkh5cGVyVGV4dCJdXQ==:DEFINITION_LIST}}</p>

    → <dl><dt>HTML</dt><dd>HyperText</dd></dl>
"""

import json
import logging

from ..markers import Marker, MarkerKind
from ..text import escape_text
from .plugins import restore_markers
from .utils import replace_markers

logger = logging.getLogger(__name__)


def render_definition_list(marker: Marker, context: dict) -> str:
    payload = marker.content or ""
    try:
        items = json.loads(payload)
    except ValueError:
        logger.warning("Definition list payload is not valid JSON, keeping text")
        return escape_text(payload)
    if not items:
        return ""
    if not isinstance(items, list) or any(not isinstance(item, list) or len(item) != 2 for item in items):
        logger.warning("Definition list payload has an unexpected shape, keeping text")
        return escape_text(payload)

    parts = ["<dl>"]
    for term, definition in items:
        parts.append(f"<dt>{restore_markers(escape_text(term), context)}</dt>")
        parts.append(f"<dd>{restore_markers(escape_text(definition), context)}</dd>")
    parts.append("</dl>")
    return "".join(parts)


def restore_definition_lists(html: str, context: dict) -> str:
    return replace_markers(
        html, MarkerKind.DEFINITION_LIST, lambda marker: render_definition_list(marker, context)
    )


def restore_definition_lists_default(html: str, context: dict) -> str:
    """
    Default configuration for restore_definition_lists.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return restore_definition_lists(html, context)
