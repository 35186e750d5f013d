# umd/markdown/preprocessors/umd_blockquote.py
"""
Preprocessor for legacy single-line blockquotes.

    > Quoted text <      → {{UMD_BLOCKQUOTE:Quoted text:UMD_BLOCKQUOTE}}

Without protection CommonMark would read the line as a Markdown blockquote
ending in a literal ``<``.
"""

from ..markers import MarkerKind, encode
from ..text import code_guarded

UMD_BLOCKQUOTE_PATTERN = code_guarded(
    r"^(?P<indent>[ \t]*)>[ \t]*(?P<body>[^\n]+?)[ \t]*<[ \t]*$"
)


def protect_umd_blockquotes(text: str, context: dict) -> str:
    def replace(match):
        if match.group("_code") is not None:
            return match.group(0)
        return match.group("indent") + encode(MarkerKind.UMD_BLOCKQUOTE, content=match.group("body"))

    return UMD_BLOCKQUOTE_PATTERN.sub(replace, text)


def protect_umd_blockquotes_default(text: str, context: dict) -> str:
    """
    Default configuration for protect_umd_blockquotes.

    This is the function that should be registered in PREPROCESSORS.
    """
    return protect_umd_blockquotes(text, context)
