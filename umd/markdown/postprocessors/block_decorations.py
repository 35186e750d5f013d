# umd/markdown/postprocessors/block_decorations.py
"""
Postprocessor that applies line-prefix decorations.

    <p>{{BLOCK_DECORATION:SIZE(1.5): COLOR(primary): CENTER: Title:BLOCK_DECORATION}}</p>
        → <p class="fs-4 text-primary text-center">Title</p>

    COLOR(#336699,warning): Note
        → <p class="bg-warning" style="color: #336699">Note</p>

A decorated line that shares its paragraph with other lines keeps the
paragraph and is restored as a ``<span>``.
"""

import re
from typing import Tuple

from ..decorations import TEXT_ALIGN_CLASSES, VERTICAL_ALIGN_CLASSES, Decoration
from ..markers import MarkerKind
from .utils import replace_markers

PREFIX_PATTERN = re.compile(
    r"^\s*(?:SIZE\((?P<size>[^)]*)\)|COLOR\((?P<color>[^)]*)\)|(?P<keyword>[A-Z]+)):\s*"
)


def parse_decoration_prefixes(text: str) -> Tuple[Decoration, str]:
    """
    Strip chained decoration prefixes off ``text``.

    Returns:
        The collected decoration and the remaining content
    """
    decoration = Decoration()
    while True:
        match = PREFIX_PATTERN.match(text)
        if match is None:
            break
        keyword = match.group("keyword")
        if match.group("size") is not None:
            decoration.add_size(match.group("size"))
        elif match.group("color") is not None:
            decoration.add_colors(match.group("color"))
        elif keyword in TEXT_ALIGN_CLASSES:
            decoration.classes.append(TEXT_ALIGN_CLASSES[keyword])
        elif keyword in VERTICAL_ALIGN_CLASSES:
            decoration.classes.append(VERTICAL_ALIGN_CLASSES[keyword])
        else:
            break
        text = text[match.end() :]
    return decoration, text.strip()


def _render_block(marker):
    decoration, content = parse_decoration_prefixes(marker.content or "")
    return f"<p{decoration.attrs()}>{content}</p>"


def _render_inline(marker):
    decoration, content = parse_decoration_prefixes(marker.content or "")
    if not decoration:
        return content
    return f"<span{decoration.attrs()}>{content}</span>"


def restore_block_decorations(html: str, context: dict) -> str:
    return replace_markers(html, MarkerKind.BLOCK_DECORATION, _render_block, _render_inline)


def restore_block_decorations_default(html: str, context: dict) -> str:
    """
    Default configuration for restore_block_decorations.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return restore_block_decorations(html, context)
