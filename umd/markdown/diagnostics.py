# umd/markdown/diagnostics.py
"""Warnings for wiki text that renders differently than its author may expect."""

import re
from typing import List

TRIPLE_STAR_EMPHASIS = re.compile(r"\*\*\*[^*\n]+\*\*\*")


def detect_ambiguous_syntax(text: str) -> List[str]:
    """
    Look for syntax mixes that are easy to misread.

    Args:
        text: Wiki source

    Returns:
        Human readable warnings, empty when nothing looks ambiguous
    """
    warnings = []

    if TRIPLE_STAR_EMPHASIS.search(text) and "'''" in text:
        warnings.append(
            "Both ***text*** (Markdown) and '''text''' (wiki) are used. "
            "Consider **text** for Markdown bold."
        )

    if "COLOR(" in text and "\n:" in text:
        warnings.append(
            "COLOR() next to a line starting with ':' may be read as a definition list. "
            "Separate them with a blank line."
        )

    return warnings
