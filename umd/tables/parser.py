# umd/tables/parser.py
"""
Parser for UMD tables.

A UMD table is a run of lines starting with ``|`` that is not a GFM pipe
table:

    | ~Name      | COLOR(red): Score |h
    | Alice      | 10                |
    | RIGHT: Bob |> |
    | |^         | 12                |

- ``h`` after the last pipe of the first line makes that row the ``<thead>``
- ``~`` marks a header cell
- ``|>`` merges the cell with the empty cells to its right
- ``|^`` merges the cell with the cell above
- ``COLOR()``, ``SIZE()`` and alignment keywords decorate a cell

GFM tables (second line is a ``|---|---|`` separator, no UMD syntax) are left
in the document for Pandoc.
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from ..markdown.decorations import (
    ALIGN_KEYWORDS,
    TEXT_ALIGN_CLASSES,
    VERTICAL_ALIGN_CLASSES,
    Decoration,
)
from ..markdown.text import escape_text, iter_lines_outside_fences
from .html import render_table
from .models import Cell, Table
from .spanning import COLSPAN_MARKER, ROWSPAN_MARKER, resolve_spans

logger = logging.getLogger(__name__)

SEPARATOR_ROW = re.compile(r"^[\s|:]*-[\s|:\-]*$")
PLACEMENT_LINE = re.compile(r"^[ \t]*(LEFT|CENTER|RIGHT|JUSTIFY):[ \t]*$")

# Vertical keywords are not hints: native tables handle them after rendering
_UMD_HINTS = (COLSPAN_MARKER, ROWSPAN_MARKER, "COLOR(", "SIZE(") + tuple(
    f"{keyword}:" for keyword in TEXT_ALIGN_CLASSES
)

_COLOR_PREFIX = re.compile(r"^COLOR\((?P<spec>[^)]*)\):\s*")
_SIZE_PREFIX = re.compile(r"^SIZE\((?P<value>[^)]*)\):\s*")
_ALIGN_PREFIX = re.compile(r"^(?P<keyword>%s):\s*" % "|".join(ALIGN_KEYWORDS))

TABLE_SENTINEL = "\n\nTABLE_MARKER_{index}_END\n\n"


def is_table_line(line: str) -> bool:
    return line.strip().startswith("|")


def is_umd_table(lines: List[str]) -> bool:
    """
    Decide whether a block of ``|`` lines uses the UMD grammar.

    Single lines, blocks without a GFM separator as second line, and blocks
    using spans or decorations anywhere are UMD tables.
    """
    if len(lines) == 1:
        return True
    if not SEPARATOR_ROW.match(lines[1].strip()):
        return True
    return any(hint in line for line in lines for hint in _UMD_HINTS)


def tokenize_row(line: str) -> List[str]:
    """
    Split a table line into raw cell texts.

    ``|>`` and ``|^`` stay inside the cell they appear in. A closing pipe
    does not start another cell, except after a ``|>`` cell, which then gets
    an empty neighbour to fold.
    """
    text = line.strip()
    if text.startswith("|"):
        text = text[1:]

    cells = []
    current = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == "|":
            following = text[index + 1 : index + 2]
            if following in (">", "^"):
                current.append(char + following)
                index += 2
                continue
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        index += 1

    tail = "".join(current).strip()
    if tail:
        cells.append(tail)
    elif cells and cells[-1].endswith(COLSPAN_MARKER):
        cells.append("")
    return cells


def parse_cell(text: str) -> Cell:
    """
    Parse decoration prefixes off one cell.

    Order: ``~``, ``COLOR(fg,bg):``, ``SIZE(v):``, one alignment keyword,
    then ``~`` again so decorations may come before the header marker.
    """
    text = text.strip()
    is_header = False
    decoration = Decoration()

    if text.startswith("~"):
        is_header = True
        text = text[1:].lstrip()

    match = _COLOR_PREFIX.match(text)
    if match:
        decoration.add_colors(match.group("spec"))
        text = text[match.end() :]

    match = _SIZE_PREFIX.match(text)
    if match:
        decoration.add_size(match.group("value"))
        text = text[match.end() :]

    match = _ALIGN_PREFIX.match(text)
    if match:
        keyword = match.group("keyword")
        decoration.classes.append(
            TEXT_ALIGN_CLASSES.get(keyword) or VERTICAL_ALIGN_CLASSES[keyword]
        )
        text = text[match.end() :]

    if text.startswith("~"):
        is_header = True
        text = text[1:].lstrip()

    return Cell(
        content=text.strip(),
        is_header=is_header,
        classes=decoration.classes,
        styles=decoration.styles,
    )


def parse_table(lines: List[str]) -> Table:
    """
    Parse UMD table lines into a span-resolved :class:`Table`.

    Args:
        lines: Raw table lines, each starting with ``|``

    Returns:
        Table whose cells carry final colspan/rowspan values
    """
    lines = [line.strip() for line in lines]
    has_header_row = bool(lines) and lines[0].endswith("|h")
    if has_header_row:
        lines[0] = lines[0][:-1]
    if len(lines) > 1 and SEPARATOR_ROW.match(lines[1]):
        # GFM-shaped table with UMD syntax: the separator marks the header row
        del lines[1]
        has_header_row = True

    rows = [[parse_cell(text) for text in tokenize_row(line)] for line in lines]
    return Table(rows=resolve_spans(rows), has_header_row=has_header_row)


def _flush_block(
    block: List[str],
    output: List[str],
    tables: List[Tuple[str, str]],
    render_content: Callable[[str], str],
) -> None:
    if output and PLACEMENT_LINE.match(output[-1]):
        # Placement lines must stay a paragraph of their own.
        output.append("")

    if not is_umd_table(block):
        logger.debug("Leaving %d-line pipe table to the renderer", len(block))
        output.extend(block)
        return

    sentinel = TABLE_SENTINEL.format(index=len(tables))
    indent = block[0][: len(block[0]) - len(block[0].lstrip())]
    tables.append((sentinel, render_table(parse_table(block), render_content)))
    output.extend(["", indent + sentinel.strip(), ""])


def extract_tables(
    text: str, render_content: Optional[Callable[[str], str]] = None
) -> Tuple[str, List[Tuple[str, str]]]:
    """
    Replace every UMD table with a sentinel paragraph.

    Args:
        text: Markdown text
        render_content: Cell content renderer, HTML escaping by default

    Returns:
        The text with tables replaced, and ``(sentinel, html)`` pairs in
        document order
    """
    render_content = render_content or escape_text
    output: List[str] = []
    tables: List[Tuple[str, str]] = []
    block: List[str] = []

    for line, in_code in iter_lines_outside_fences(text.split("\n")):
        if not in_code and is_table_line(line):
            block.append(line)
            continue
        if block:
            _flush_block(block, output, tables, render_content)
            block = []
        output.append(line)

    if block:
        _flush_block(block, output, tables, render_content)

    return "\n".join(output), tables
