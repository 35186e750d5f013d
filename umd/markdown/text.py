# umd/markdown/text.py
"""Text helpers shared by the preprocessors and restorers."""

import re
from html.entities import html5

# Entity names without the trailing semicolon: {"amp", "nbsp", "sup", ...}
HTML_ENTITY_NAMES = frozenset(name.rstrip(";") for name in html5)

FENCE_PATTERN = re.compile(r"^[ \t]*(`{3,}|~{3,})")

# Fenced code blocks and inline code spans. Prepended to protector patterns
# so the regex engine consumes code before any construct can match inside it.
CODE_PATTERN = (
    r"(?P<_code>"
    r"^[ \t]*(?P<_fence>`{3,}|~{3,})[^\n]*\n[\s\S]*?(?:^[ \t]*(?P=_fence)[ \t]*$|\Z)"
    r"|(?P<_ticks>`+)[^`\n][^\n]*?(?P=_ticks)"
    r")"
)

_UNSAFE_AMPERSAND = re.compile(r"&(?!#[0-9]+;|#[xX][0-9a-fA-F]+;|[A-Za-z][A-Za-z0-9]*;)")


def code_guarded(pattern: str, flags: int = 0) -> re.Pattern:
    """
    Compile ``pattern`` behind the code alternation.

    ``pattern`` must use named groups only. Callers check ``match["_code"]``
    and return code matches unchanged.
    """
    return re.compile(CODE_PATTERN + "|" + pattern, flags | re.MULTILINE)


def escape_text(text: str) -> str:
    """
    Escape text for HTML while keeping existing character references.

    ``a < b &amp; c & d`` → ``a &lt; b &amp; c &amp; d``
    """
    text = _UNSAFE_AMPERSAND.sub("&amp;", text)
    return text.replace("<", "&lt;").replace(">", "&gt;")


def escape_attr(value: str) -> str:
    return escape_text(value).replace('"', "&quot;")


def iter_lines_outside_fences(lines):
    """
    Yield ``(line, in_code)`` for each line, tracking fenced code blocks.

    Fence lines themselves are reported as code.
    """
    fence = None
    for line in lines:
        match = FENCE_PATTERN.match(line)
        if fence is None:
            if match:
                fence = match.group(1)
                yield line, True
                continue
            yield line, False
        else:
            closing = line.strip()
            if match and closing.strip(fence[0]) == "" and len(closing) >= len(fence):
                fence = None
            yield line, True
