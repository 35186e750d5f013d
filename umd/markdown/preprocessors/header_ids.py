# umd/markdown/preprocessors/header_ids.py
"""
Preprocessor that extracts custom heading ids.

    # Introduction {#intro}     → # Introduction     (ids[1] = "intro")
    ## Details                  → unchanged          (heading 2, no id)

Headings are counted in document order, the same order the anchor
postprocessor walks the rendered ``<h1>``–``<h6>`` elements in, so the
counter doubles as the key of the custom id.
"""

import re

from ..header_ids import get_header_map
from ..text import FENCE_PATTERN
from .umd_blockquote import UMD_BLOCKQUOTE_PATTERN

ATX_HEADING_PATTERN = re.compile(
    r"^(?P<prefix>(?:[ \t]*(?:>|[-+*][ \t]|\d+[.)][ \t]))*[ \t]*)"
    r"(?P<hashes>#{1,6})(?=[ \t]|$)(?P<rest>.*)$"
)
CUSTOM_ID_PATTERN = re.compile(r"^(?P<title>.*?\S)[ \t]+\{#(?P<id>[A-Za-z0-9_-]+)\}[ \t]*$")
SETEXT_UNDERLINE_PATTERN = re.compile(r"^ {0,3}(?:=+|-+)[ \t]*$")
NON_PARAGRAPH_PATTERN = re.compile(r"^[ \t]*(?:[|>#]|[-+*][ \t]|\d+[.)][ \t]|$)")
PLUGIN_BODY_START = re.compile(r"@[A-Za-z]\w*\([^()\n]*\)\{\{")
LIST_ITEM_PATTERN = re.compile(r"^(?P<marker>[ \t]*(?:[-+*]|\d+[.)])[ \t]+)\S")


def _brace_depth(line: str) -> int:
    return line.count("{{") - line.count("}}")

def _list_indent(line: str, current):
    """Content column of the list item that ``line`` belongs to, if any."""
    item = LIST_ITEM_PATTERN.match(line)
    if item:
        return len(item.group("marker").expandtabs(4))
    if line.strip() and not line[0].isspace():
        return None
    return current


def _is_indented_code(prefix: str, list_indent) -> bool:
    if prefix.strip():
        return False
    width = len(prefix.expandtabs(4))
    if list_indent is not None and width >= list_indent:
        width -= list_indent
    return width >= 4


def _is_umd_blockquote(line: str) -> bool:
    match = UMD_BLOCKQUOTE_PATTERN.match(line)
    return match is not None and match.group("_code") is None


def extract_header_ids(text: str, context: dict) -> str:
    """
    Strip ``{#id}`` suffixes from ATX headings and record them.

    Args:
        text: Markdown text
        context: Processor context; receives the document's HeaderIdMap

    Returns:
        Text with the id suffixes removed
    """
    header_map = get_header_map(context)
    counter = 0
    fence = None
    plugin_depth = 0
    previous_is_paragraph = False
    list_indent = None
    lines = []

    for line in text.split("\n"):
        if fence is not None:
            closing = line.strip()
            if closing.startswith(fence) and closing.strip(fence[0]) == "":
                fence = None
            lines.append(line)
            continue

        if plugin_depth:
            plugin_depth = max(plugin_depth + _brace_depth(line), 0)
            lines.append(line)
            continue

        fence_match = FENCE_PATTERN.match(line)
        if fence_match:
            fence = fence_match.group(1)
            previous_is_paragraph = False
            lines.append(line)
            continue

        body = PLUGIN_BODY_START.search(line)
        if body:
            plugin_depth = max(_brace_depth(line[body.start() :]), 0)
        if plugin_depth:
            previous_is_paragraph = False
            lines.append(line)
            continue

        list_indent = _list_indent(line, list_indent)

        if _is_umd_blockquote(line):
            previous_is_paragraph = True
            lines.append(line)
            continue

        heading = ATX_HEADING_PATTERN.match(line)
        if heading and _is_indented_code(heading.group("prefix"), list_indent):
            # Indented code, or a lazy continuation of the paragraph above
            lines.append(line)
            continue

        if heading:
            counter += 1
            custom = CUSTOM_ID_PATTERN.match(heading.group("rest").strip())
            if custom:
                header_map.ids[counter] = custom.group("id")
                line = f"{heading.group('prefix')}{heading.group('hashes')} {custom.group('title')}"
            previous_is_paragraph = False
        elif previous_is_paragraph and SETEXT_UNDERLINE_PATTERN.match(line):
            counter += 1
            previous_is_paragraph = False
        else:
            previous_is_paragraph = not NON_PARAGRAPH_PATTERN.match(line)

        lines.append(line)

    return "\n".join(lines)


def extract_header_ids_default(text: str, context: dict) -> str:
    """
    Default configuration for extract_header_ids.

    This is the function that should be registered in PREPROCESSORS.
    """
    return extract_header_ids(text, context)
