# umd/markdown/postprocessors/underline.py
"""
Postprocessor that restores underline markers.

    {{UNDERLINE:<em>very</em> important:UNDERLINE}}   → <u><em>very</em> important</u>
"""

from ..markers import MarkerKind, marker_pattern

UNDERLINE_PATTERN = marker_pattern(MarkerKind.UNDERLINE)


def restore_underline(html: str, context: dict) -> str:
    return UNDERLINE_PATTERN.sub(lambda match: f"<u>{match.group('body')}</u>", html)


def restore_underline_default(html: str, context: dict) -> str:
    """
    Default configuration for restore_underline.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return restore_underline(html, context)
