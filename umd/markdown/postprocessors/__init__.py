# umd/markdown/postprocessors/__init__.py

from .base_url import rewrite_base_url_default
from .block_decorations import restore_block_decorations_default
from .block_placement import apply_block_placement_default
from .bootstrap_enhancer import bootstrap_enhancer_default
from .cell_alignment import apply_cell_alignment_default
from .definition_lists import restore_definition_lists_default
from .heading_anchors import add_heading_anchors_default
from .link_attributes import apply_link_attributes_default
from .marker_quotes import unescape_marker_quotes_default
from .plugins import restore_plugins_default
from .sanitizer import sanitize_html_default
from .tables import restore_tables_default
from .task_lists import mark_indeterminate_checkboxes_default
from .umd_blockquote import restore_umd_blockquotes_default
from .underline import restore_underline_default
from .utils import clear_shared_soup

POSTPROCESSORS = [
    unescape_marker_quotes_default,  # Undo &quot; inside plugin/definition list markers only
    restore_underline_default,  # {{UNDERLINE}} → <u>
    add_heading_anchors_default,  # h-<id> anchors from the HeaderIdMap
    restore_umd_blockquotes_default,  # > text < → <blockquote class="umd-blockquote">
    restore_block_decorations_default,  # COLOR()/SIZE()/alignment lines
    restore_plugins_default,  # Inline decorations and <template> plugins
    restore_tables_default,  # TABLE_MARKER_n_END → stored table HTML
    restore_definition_lists_default,  # <dl><dt><dd>
    apply_link_attributes_default,  # [text](url){#id .class}
    mark_indeterminate_checkboxes_default,  # [-] checkboxes
    apply_block_placement_default,  # LEFT:/CENTER:/RIGHT:/JUSTIFY: wrappers
    bootstrap_enhancer_default,  # Default table/blockquote classes and alerts
    apply_cell_alignment_default,  # TOP:/MIDDLE:/BOTTOM:/BASELINE: in native tables
    sanitize_html_default,  # bleach allow-list over everything above
    rewrite_base_url_default,  # Prefix root-relative URLs
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    clear_shared_soup(context)
    return html
