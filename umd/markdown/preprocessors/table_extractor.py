# umd/markdown/preprocessors/table_extractor.py
"""
Preprocessor that pulls UMD tables out of the document.

Each UMD table is rendered to HTML right away and replaced by a sentinel
paragraph (``TABLE_MARKER_<n>_END`` surrounded by blank lines, so Pandoc
cannot merge it into a neighbouring paragraph). The sentinel and its HTML
are stored on the document's HeaderIdMap for the table restorer.

GFM pipe tables stay in place for Pandoc.
"""

import logging

from ...tables import extract_tables
from ..header_ids import get_header_map

logger = logging.getLogger(__name__)


def extract_umd_tables(text: str, context: dict) -> str:
    header_map = get_header_map(context)
    text, tables = extract_tables(text)
    if tables:
        logger.debug("Extracted %d UMD table(s)", len(tables))
    header_map.tables.extend(tables)
    return text


def extract_umd_tables_default(text: str, context: dict) -> str:
    """
    Default configuration for extract_umd_tables.

    This is the function that should be registered in PREPROCESSORS.
    """
    return extract_umd_tables(text, context)
