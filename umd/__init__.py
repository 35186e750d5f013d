"""
UMD wiki markup for Django.

    >>> import umd
    >>> umd.parse("&kbd{Ctrl};")
    '<p><kbd>Ctrl</kbd></p>'
"""

from .markdown.exceptions import RenderError
from .markdown.renderer import render_markdown

__all__ = ("RenderError", "parse", "render_markdown")


def parse(text, base_url=None, renderer=None):
    """
    Render wiki text to HTML.

    Args:
        text: Wiki/Markdown source
        base_url: Prefix for root-relative ``href``/``src`` values
        renderer: ``str -> str`` Markdown renderer used instead of Pandoc

    Returns:
        HTML string
    """
    context = {}
    if base_url:
        context["base_url"] = base_url
    if renderer is not None:
        context["renderer"] = renderer
    return render_markdown(text, context=context)
