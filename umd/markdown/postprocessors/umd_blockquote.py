# umd/markdown/postprocessors/umd_blockquote.py
"""
Postprocessor that restores legacy blockquotes.

    <p>{{UMD_BLOCKQUOTE:Quoted <em>text</em>:UMD_BLOCKQUOTE}}</p>
        → <blockquote class="umd-blockquote">Quoted <em>text</em></blockquote>
"""

from ..markers import MarkerKind
from .utils import replace_markers


def _render(marker):
    return f'<blockquote class="umd-blockquote">{marker.content}</blockquote>'


def restore_umd_blockquotes(html: str, context: dict) -> str:
    return replace_markers(html, MarkerKind.UMD_BLOCKQUOTE, _render)


def restore_umd_blockquotes_default(html: str, context: dict) -> str:
    """
    Default configuration for restore_umd_blockquotes.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return restore_umd_blockquotes(html, context)
