# umd/markdown/preprocessors/comment_stripper.py
"""
Preprocessor that removes wiki comments.

    text // comment          → text
    a /* note */ b           → a  b
    https://example.com      (kept, "//" after ":" is not a comment)
    [cdn](//cdn.example.com) (kept, nor is "//" opening a link destination)

Fenced code blocks and inline code spans are never touched.
"""

from ..text import code_guarded, iter_lines_outside_fences

BLOCK_COMMENT_PATTERN = code_guarded(r"(?P<comment>/\*[\s\S]*?\*/)")

# "//" right after one of these belongs to a URL
URL_PREFIX_CHARACTERS = frozenset(":(<\"'=")


def _remove_block_comment(match):
    if match.group("_code") is not None:
        return match.group(0)
    return ""


def _strip_line_comment(line: str) -> str:
    in_code = False
    previous = ""
    for index, char in enumerate(line):
        if char == "`":
            in_code = not in_code
        elif not in_code and line.startswith("//", index) and previous not in URL_PREFIX_CHARACTERS:
            return line[:index].rstrip()
        previous = char
    return line


def strip_comments(text: str, context: dict) -> str:
    """
    Remove ``/* */`` and ``//`` comments.

    Args:
        text: Markdown text
        context: Processor context (unused)

    Returns:
        Text without comments; lines that held only a comment become blank
    """
    text = BLOCK_COMMENT_PATTERN.sub(_remove_block_comment, text)

    lines = []
    for line, in_code in iter_lines_outside_fences(text.split("\n")):
        if in_code or "//" not in line:
            lines.append(line)
            continue
        stripped = _strip_line_comment(line)
        lines.append(stripped if stripped.strip() else "")
    return "\n".join(lines)


def strip_comments_default(text: str, context: dict) -> str:
    """
    Default configuration for strip_comments.

    This is the function that should be registered in PREPROCESSORS.
    """
    return strip_comments(text, context)
