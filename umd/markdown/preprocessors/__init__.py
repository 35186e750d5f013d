# umd/markdown/preprocessors/__init__.py

from .block_decorations import protect_block_decorations_default
from .comment_stripper import strip_comments_default
from .definition_lists import protect_definition_lists_default
from .header_ids import extract_header_ids_default
from .nested_blocks import nest_list_blocks_default
from .plugins import protect_plugins_default
from .table_extractor import extract_umd_tables_default
from .task_lists import mark_indeterminate_tasks_default
from .umd_blockquote import protect_umd_blockquotes_default
from .underline import protect_underline_default

PREPROCESSORS = [
    strip_comments_default,  # Must run first: comments may hide any other syntax
    nest_list_blocks_default,  # Indent tables/quotes/fences/plugins under list items
    mark_indeterminate_tasks_default,  # - [-] item → unchecked box + placeholder
    protect_underline_default,  # __text__ before CommonMark reads it as bold
    extract_header_ids_default,  # {#id} suffixes into the HeaderIdMap
    protect_umd_blockquotes_default,  # > text < lines
    protect_block_decorations_default,  # COLOR(): / SIZE(): / CENTER: lines
    protect_plugins_default,  # Block plugins, then inline plugins
    extract_umd_tables_default,  # UMD tables → TABLE_MARKER sentinels
    protect_definition_lists_default,  # :term|definition runs
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
