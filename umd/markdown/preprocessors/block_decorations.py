# umd/markdown/preprocessors/block_decorations.py
"""
Preprocessor for line-prefix decorations.

    COLOR(primary): Text               → {{BLOCK_DECORATION:COLOR(primary): Text:BLOCK_DECORATION}}
    SIZE(1.5): CENTER: Large title     → {{BLOCK_DECORATION:SIZE(1.5): CENTER: Large title:BLOCK_DECORATION}}

Prefixes may be chained. A prefix alone on its line (``CENTER:``) is a block
placement, not a decoration, and is left for the placement postprocessor.
"""

from ..markers import MarkerKind, encode
from ..text import code_guarded

DECORATION_PREFIX = (
    r"(?:SIZE\([^)\n]*\)|COLOR\([^)\n]*\)|TRUNCATE|TOP|MIDDLE|BOTTOM|BASELINE"
    r"|JUSTIFY|RIGHT|CENTER|LEFT):[ \t]*"
)

BLOCK_DECORATION_PATTERN = code_guarded(
    r"^(?P<indent>[ \t]*)(?P<body>(?:%s)+\S[^\n]*)$" % DECORATION_PREFIX
)


def protect_block_decorations(text: str, context: dict) -> str:
    def replace(match):
        if match.group("_code") is not None:
            return match.group(0)
        body = match.group("body").rstrip()
        return match.group("indent") + encode(MarkerKind.BLOCK_DECORATION, content=body)

    return BLOCK_DECORATION_PATTERN.sub(replace, text)


def protect_block_decorations_default(text: str, context: dict) -> str:
    """
    Default configuration for protect_block_decorations.

    This is the function that should be registered in PREPROCESSORS.
    """
    return protect_block_decorations(text, context)
