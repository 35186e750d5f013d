# umd/markdown/preprocessors/definition_lists.py
"""
Preprocessor for wiki definition lists.

    :HTML|HyperText Markup Language
    :CSS|Cascading Style Sheets

Consecutive ``:term|definition`` lines become one DEFINITION_LIST marker whose
content is the JSON list of ``[term, definition]`` pairs.
"""

import json
import re

from ..markers import MarkerKind, encode
from ..text import iter_lines_outside_fences

DEFINITION_PATTERN = re.compile(r"^(?P<indent>[ \t]*):(?P<term>[^|\n]*)\|(?P<definition>.*)$")


def protect_definition_lists(text: str, context: dict) -> str:
    """
    Replace runs of ``:term|definition`` lines with markers.

    Args:
        text: Markdown text
        context: Processor context (unused)

    Returns:
        Text with one marker line per definition list
    """
    output = []
    items = []
    indent = ""

    def flush():
        if items:
            payload = json.dumps(items, ensure_ascii=False)
            output.append(indent + encode(MarkerKind.DEFINITION_LIST, content=payload))
            items.clear()

    for line, in_code in iter_lines_outside_fences(text.split("\n")):
        match = None if in_code else DEFINITION_PATTERN.match(line)
        if match is None:
            flush()
            output.append(line)
            continue
        if not items:
            indent = match.group("indent")
        items.append([match.group("term").strip(), match.group("definition").strip()])

    flush()
    return "\n".join(output)


def protect_definition_lists_default(text: str, context: dict) -> str:
    """
    Default configuration for protect_definition_lists.

    This is the function that should be registered in PREPROCESSORS.
    """
    return protect_definition_lists(text, context)
