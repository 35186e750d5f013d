# umd/markdown/renderer.py

import logging

import pypandoc

from .config import get_pandoc_config
from .diagnostics import detect_ambiguous_syntax
from .exceptions import RenderError
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def pandoc_render(text):
    """
    Convert protected Markdown to HTML with Pandoc.

    Raises:
        RenderError: Pandoc is not installed or failed on the input
    """
    pandoc_config = get_pandoc_config()
    try:
        return pypandoc.convert_text(
            text,
            to=pandoc_config["to"],
            format=pandoc_config["format"],
            extra_args=pandoc_config["extra_args"],
        )
    except (OSError, RuntimeError) as exc:
        logger.exception("Pandoc failed to render document")
        raise RenderError(str(exc)) from exc


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using pypandoc

    Args:
        text: Raw wiki/markdown text
        context: Optional dict for processors that need additional data.
            ``renderer`` replaces Pandoc with any ``str -> str`` callable,
            ``base_url`` prefixes root-relative links.
    """
    context = context or {}

    for warning in detect_ambiguous_syntax(text):
        logger.debug("Ambiguous syntax: %s", warning)

    # Pre-processing: protect wiki syntax from the renderer
    text = apply_preprocessors(text, context)

    # Markdown conversion
    renderer = context.get("renderer") or pandoc_render
    logger.debug("Rendering %d characters with %r", len(text), renderer)
    html = renderer(text)

    # Post-processing: restore protected constructs
    html = apply_postprocessors(html, context)

    return html
