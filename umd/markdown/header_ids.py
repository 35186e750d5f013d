# umd/markdown/header_ids.py
"""Per-document state shared between the pre- and postprocessors."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

_CONTEXT_KEY = "header_ids"


@dataclass
class HeaderIdMap:
    """
    Custom heading ids and extracted tables of one document.

    ``ids`` maps the 1-based position of a heading in the document to the id
    given with ``{#id}``. ``tables`` holds ``(sentinel, html)`` pairs for the
    UMD tables pulled out before rendering.
    """

    ids: Dict[int, str] = field(default_factory=dict)
    tables: List[Tuple[str, str]] = field(default_factory=list)


def get_header_map(context: dict) -> HeaderIdMap:
    """Return the document's map, creating it on first use."""
    header_map = context.get(_CONTEXT_KEY)
    if header_map is None:
        header_map = HeaderIdMap()
        context[_CONTEXT_KEY] = header_map
    return header_map
