# umd/tables/models.py

from dataclasses import dataclass, field
from typing import List


@dataclass
class Cell:
    """One table cell, with decoration prefixes already stripped."""

    content: str
    is_header: bool = False
    colspan: int = 1
    rowspan: int = 1
    classes: List[str] = field(default_factory=list)
    styles: List[str] = field(default_factory=list)


@dataclass
class Table:
    rows: List[List[Cell]] = field(default_factory=list)
    has_header_row: bool = False
