# umd/markdown/preprocessors/underline.py
"""
Preprocessor for underlined text.

    This is __important__.   → This is {{UNDERLINE:important:UNDERLINE}}.

CommonMark would render ``__x__`` as bold, so the span is protected and
restored as ``<u>`` after rendering. Inline Markdown inside still renders.
"""

from ..markers import MarkerKind, encode
from ..text import code_guarded

UNDERLINE_PATTERN = code_guarded(r"__(?P<text>[^_\n]+)__")


def protect_underline(text: str, context: dict) -> str:
    def replace(match):
        if match.group("_code") is not None:
            return match.group(0)
        return encode(MarkerKind.UNDERLINE, content=match.group("text"))

    return UNDERLINE_PATTERN.sub(replace, text)


def protect_underline_default(text: str, context: dict) -> str:
    """
    Default configuration for protect_underline.

    This is the function that should be registered in PREPROCESSORS.
    """
    return protect_underline(text, context)
