# umd/tables/__init__.py
"""UMD table grammar: detection, cell spanning and HTML emission."""

from .html import render_table
from .models import Cell, Table
from .parser import extract_tables, is_umd_table, parse_table

__all__ = [
    "Cell",
    "Table",
    "extract_tables",
    "is_umd_table",
    "parse_table",
    "render_table",
]
