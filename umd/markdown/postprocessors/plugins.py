# umd/markdown/postprocessors/plugins.py
"""
Postprocessor that restores plugin markers.

Real plugins become templates for the plugin execution stage:

    {{BLOCK_PLUGIN_ARGSONLY:toc:2:BLOCK_PLUGIN_ARGSONLY}}

    → <template class="umd-plugin umd-plugin-toc"><data value="0">2</data></template>

Inline decorations (``&kbd{..};``, ``&color(..){..};``, ...) are rendered to
HTML right here, see ``inline_decorations``. Their content is protected and
restored again, so plugins nested inside a decoration render too.

Kinds are restored from the most to the least specific, inline first. Block
output replaces the ``<p>`` Pandoc put around the marker.
"""

from typing import Callable

from ..markers import Marker, MarkerKind, marker_from_match, marker_pattern, revert
from ..preprocessors.plugins import protect_plugins
from ..preprocessors.underline import protect_underline
from ..text import escape_attr, escape_text
from .inline_decorations import (
    CONTENT_FUNCTIONS,
    render_argsonly_decoration,
    render_content_decoration,
    render_noargs_decoration,
)
from .underline import restore_underline
from .utils import replace_markers

CLEARFIX = '<div class="clearfix"></div>'


def split_args(args) -> list:
    if not args:
        return []
    return [arg.strip() for arg in args.split(",")]


def render_template(function: str, args=None, content=None) -> str:
    """
    Render a plugin call as a ``<template>`` element.

    Args:
        function: Plugin name
        args: Raw comma separated arguments
        content: Plugin body as written by the author

    Returns:
        ``<template class="umd-plugin umd-plugin-NAME">`` with one
        ``<data value="i">`` child per argument followed by the escaped body
    """
    name = escape_attr(function)
    parts = [f'<template class="umd-plugin umd-plugin-{name}">']
    for index, arg in enumerate(split_args(args)):
        parts.append(f'<data value="{index}">{escape_text(arg)}</data>')
    if content:
        parts.append(escape_text(revert(content)))
    parts.append("</template>")
    return "".join(parts)


def render_fragment(text: str, context: dict) -> str:
    """Render wiki text found inside a decoration or table cell to HTML."""
    text = protect_plugins(protect_underline(revert(text), context), context)
    return restore_markers(escape_text(text), context)


def _inline_plugin(context: dict) -> Callable[[Marker], str]:
    def render(marker: Marker) -> str:
        if marker.function in CONTENT_FUNCTIONS:
            content = render_fragment(marker.content or "", context)
            html = render_content_decoration(marker.function, marker.args or "", content)
            if html is not None:
                return html
        return render_template(marker.function, marker.args, marker.content)

    return render


def _inline_argsonly(marker: Marker) -> str:
    html = render_argsonly_decoration(marker.function, marker.args or "")
    return html if html is not None else render_template(marker.function, marker.args)


def _inline_noargs(marker: Marker) -> str:
    html = render_noargs_decoration(marker.function)
    return html if html is not None else render_template(marker.function)


def _block_plugin(marker: Marker) -> str:
    return render_template(marker.function, marker.args, marker.content)


def _block_argsonly(marker: Marker) -> str:
    if marker.function == "clear" and not (marker.args or "").strip():
        return CLEARFIX
    return render_template(marker.function, marker.args)


def _block_noargs(marker: Marker) -> str:
    if marker.function == "clear":
        return CLEARFIX
    return render_template(marker.function)


def _sub(html: str, kind: MarkerKind, render: Callable[[Marker], str]) -> str:
    return marker_pattern(kind).sub(lambda match: render(marker_from_match(kind, match)), html)


def restore_plugins(html: str, context: dict) -> str:
    """
    Replace every plugin marker in ``html`` with its HTML.

    Args:
        html: Rendered HTML
        context: Processor context, passed on to nested content

    Returns:
        HTML without plugin markers
    """
    html = _sub(html, MarkerKind.INLINE_PLUGIN, _inline_plugin(context))
    html = _sub(html, MarkerKind.INLINE_PLUGIN_ARGSONLY, _inline_argsonly)
    html = _sub(html, MarkerKind.INLINE_PLUGIN_NOARGS, _inline_noargs)
    html = replace_markers(html, MarkerKind.BLOCK_PLUGIN, _block_plugin)
    html = replace_markers(html, MarkerKind.BLOCK_PLUGIN_ARGSONLY, _block_argsonly)
    html = replace_markers(html, MarkerKind.BLOCK_PLUGIN_NOARGS, _block_noargs)
    return html


def restore_markers(html: str, context: dict) -> str:
    """Restore underline and plugin markers in an HTML fragment."""
    return restore_plugins(restore_underline(html, context), context)


def restore_plugins_default(html: str, context: dict) -> str:
    """
    Default configuration for restore_plugins.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return restore_plugins(html, context)
