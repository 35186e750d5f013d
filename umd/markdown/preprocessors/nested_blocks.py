# umd/markdown/preprocessors/nested_blocks.py
"""
Preprocessor that nests block constructs written right under a list item.

Authors tend to write:

    - Item
    | A | B |
    > quote

CommonMark would end the list at the table. Tables, blockquotes, code fences,
``@`` plugins and placement lines (``CENTER:`` before a table or plugin) that
follow a list item without enough indentation are indented to
``item indent + 4`` so they become part of the item.
"""

import re
from typing import List, Optional

from ..text import FENCE_PATTERN

LIST_ITEM_PATTERN = re.compile(r"^(?P<indent>[ \t]*)(?:[-+*]|\d+\.)\s+\S")
PLACEMENT_PATTERN = re.compile(r"^(?:LEFT|CENTER|RIGHT|JUSTIFY):\s*$")


def _indent_width(line: str) -> int:
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += 4
        else:
            break
    return width


def _list_indent(line: str) -> Optional[int]:
    match = LIST_ITEM_PATTERN.match(line)
    if match is None:
        return None
    return _indent_width(match.group("indent"))


def _indent_to(line: str, target: int) -> str:
    current = _indent_width(line)
    if current >= target:
        return line
    return " " * (target - current) + line


def _is_table(line: str) -> bool:
    return line.lstrip().startswith("|")


def _is_blockquote(line: str) -> bool:
    return line.lstrip().startswith(">")


def _is_plugin(line: str) -> bool:
    return line.lstrip().startswith("@")


def _is_placement(line: str) -> bool:
    return bool(PLACEMENT_PATTERN.match(line.lstrip()))


def _take_run(lines: List[str], start: int, predicate) -> int:
    end = start
    while end < len(lines) and predicate(lines[end]):
        end += 1
    return end


def _take_fence(lines: List[str], start: int) -> int:
    fence = FENCE_PATTERN.match(lines[start]).group(1)
    end = start + 1
    while end < len(lines):
        closing = lines[end].strip()
        end += 1
        if closing.startswith(fence) and closing.strip(fence[0]) == "":
            break
    return end


def _take_plugin(lines: List[str], start: int) -> int:
    # Multi-line plugin bodies run until the closing "}}".
    if "{{" not in lines[start] or "}}" in lines[start]:
        return start + 1
    end = start + 1
    while end < len(lines):
        end += 1
        if "}}" in lines[end - 1]:
            break
    return end


def nest_list_blocks(text: str, context: dict) -> str:
    """
    Indent block constructs that directly follow a list item.

    Args:
        text: Markdown text
        context: Processor context (unused)

    Returns:
        Text with those blocks indented under their list item
    """
    lines = text.split("\n")
    output = []
    index = 0

    while index < len(lines):
        line = lines[index]
        list_indent = _list_indent(line)
        output.append(line)
        index += 1
        if list_indent is None:
            continue

        target = list_indent + 4
        while index < len(lines):
            current = lines[index]
            if not current.strip():
                output.append(current)
                index += 1
                continue

            item_indent = _list_indent(current)
            if item_indent is not None:
                if item_indent <= list_indent:
                    break
                output.append(current)
                index += 1
                continue

            if _indent_width(current) > list_indent:
                output.append(current)
                index += 1
                continue

            if _is_table(current):
                end = _take_run(lines, index, _is_table)
            elif _is_blockquote(current):
                end = _take_run(lines, index, _is_blockquote)
            elif FENCE_PATTERN.match(current):
                end = _take_fence(lines, index)
            elif _is_plugin(current):
                end = _take_plugin(lines, index)
            elif (
                _is_placement(current)
                and index + 1 < len(lines)
                and (_is_table(lines[index + 1]) or _is_plugin(lines[index + 1]))
            ):
                end = index + 1
            else:
                break

            output.extend(_indent_to(block_line, target) for block_line in lines[index:end])
            index = end

    return "\n".join(output)


def nest_list_blocks_default(text: str, context: dict) -> str:
    """
    Default configuration for nest_list_blocks.

    This is the function that should be registered in PREPROCESSORS.
    """
    return nest_list_blocks(text, context)
