# umd/tables/spanning.py
"""
Colspan and rowspan folding.

    | A |> |          A spans two columns
    | |^ | D |        the cell above (A) spans two rows

Both passes build new row lists instead of deleting from the rows they walk.
Folding only ever removes cells, so a second pass over a resolved table finds
no markers and changes nothing.
"""

from typing import List

from .models import Cell

COLSPAN_MARKER = "|>"
ROWSPAN_MARKER = "|^"


def resolve_colspans(row: List[Cell]) -> List[Cell]:
    """
    Fold cells into the colspan of the cell to their left.

    A cell ending with ``|>`` loses the marker and absorbs every directly
    following cell that is empty or is exactly ``|>``.
    """
    resolved = []
    index = 0
    while index < len(row):
        cell = row[index]
        index += 1
        if cell.content.endswith(COLSPAN_MARKER):
            cell.content = cell.content[: -len(COLSPAN_MARKER)].rstrip()
            while index < len(row) and row[index].content in ("", COLSPAN_MARKER):
                cell.colspan += row[index].colspan
                index += 1
        resolved.append(cell)
    return resolved


def resolve_rowspans(rows: List[List[Cell]]) -> List[List[Cell]]:
    """
    Fold ``|^`` cells into the rowspan of the cell above them.

    Column indexes refer to the rows as they are after colspan folding. A
    marker with nothing above it (first row, or a shorter row above) stays in
    place as an ordinary empty cell.
    """
    width = max((len(row) for row in rows), default=0)
    removed = set()

    for column in range(width):
        source = None
        for row_index, row in enumerate(rows):
            if column >= len(row):
                source = None
                continue
            cell = row[column]
            if cell.content == ROWSPAN_MARKER:
                if source is not None:
                    source.rowspan += 1
                    removed.add((row_index, column))
                    continue
                cell.content = ""
            source = cell

    return [
        [cell for column, cell in enumerate(row) if (row_index, column) not in removed]
        for row_index, row in enumerate(rows)
    ]


def resolve_spans(rows: List[List[Cell]]) -> List[List[Cell]]:
    return resolve_rowspans([resolve_colspans(row) for row in rows])
