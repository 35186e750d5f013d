# umd/markdown/postprocessors/inline_decorations.py
"""
Inline plugin functions that render straight to HTML.

    &kbd{Ctrl};                 → <kbd>Ctrl</kbd>
    &ruby(かん){漢};             → <ruby>漢<rp>(</rp><rt>かん</rt><rp>)</rp></ruby>
    &abbr(HTML){HyperText};     → <abbr title="HyperText">HTML</abbr>
    &badge(success-pill){OK};   → <span class="badge rounded-pill bg-success">OK</span>
    &color(red,light){Alert};   → <span class="text-red bg-light">Alert</span>
    &size(1.5){Big};            → <span class="fs-4">Big</span>
    &sup(2);                    → <sup>2</sup>
    &br;                        → <br />

Any other function name is a real plugin and becomes a ``<template>``.
``content`` is HTML by the time it reaches these functions; ``args`` is raw.
"""

import re
from typing import Optional

from ..decorations import Decoration
from ..text import escape_attr, escape_text

SIMPLE_TAGS = frozenset(["dfn", "kbd", "samp", "var", "cite", "q", "small", "u", "bdi"])
ATTRIBUTE_TAGS = {"time": ("time", "datetime"), "data": ("data", "value"), "bdo": ("bdo", "dir")}
CONTENT_FUNCTIONS = SIMPLE_TAGS | frozenset(
    ["ruby", "time", "data", "bdo", "lang", "abbr", "sup", "sub", "badge", "color", "size"]
)
ARGSONLY_FUNCTIONS = frozenset(["sup", "sub"])
NOARGS_OUTPUT = {"br": "<br />", "wbr": "<wbr />"}

BADGE_LINK_PATTERN = re.compile(r"\[(?P<text>[^\]]+)\]\((?P<url>[^)\s]+)\)")


def _badge(args: str, content: str) -> str:
    color = args.strip()
    if color.endswith("-pill"):
        badge_class = f"badge rounded-pill bg-{color[: -len('-pill')]}"
    else:
        badge_class = f"badge bg-{color}"
    badge_class = escape_attr(badge_class)

    link = BADGE_LINK_PATTERN.search(content)
    if link:
        return f'<a href="{escape_attr(link.group("url"))}" class="{badge_class}">{link.group("text")}</a>'
    return f'<span class="{badge_class}">{content}</span>'


def _color(args: str, content: str) -> str:
    decoration = Decoration()
    decoration.add_colors(args)
    if not decoration:
        return content
    return f"<span{decoration.attrs()}>{content}</span>"


def _size(args: str, content: str) -> str:
    decoration = Decoration()
    decoration.add_size(args)
    if not decoration:
        return content
    return f"<span{decoration.attrs()}>{content}</span>"


def render_content_decoration(function: str, args: str, content: str) -> Optional[str]:
    """
    Render ``&function(args){content};`` if it is a decoration function.

    Returns:
        HTML, or ``None`` when ``function`` is not a decoration
    """
    if function in SIMPLE_TAGS:
        return f"<{function}>{content}</{function}>"

    value = escape_attr(args.strip())
    if function == "ruby":
        return f"<ruby>{content}<rp>(</rp><rt>{escape_text(args.strip())}</rt><rp>)</rp></ruby>"
    if function in ATTRIBUTE_TAGS:
        tag, attribute = ATTRIBUTE_TAGS[function]
        return f'<{tag} {attribute}="{value}">{content}</{tag}>'
    if function == "lang":
        return f'<span lang="{value}">{content}</span>'
    if function == "abbr":
        return f'<abbr title="{content.replace(chr(34), "&quot;")}">{escape_text(args.strip())}</abbr>'
    if function in ("sup", "sub"):
        return f"<{function}>{content or escape_text(args.strip())}</{function}>"
    if function == "badge":
        return _badge(args, content)
    if function == "color":
        return _color(args, content)
    if function == "size":
        return _size(args, content)
    return None


def render_argsonly_decoration(function: str, args: str) -> Optional[str]:
    if function in ARGSONLY_FUNCTIONS:
        return f"<{function}>{escape_text(args.strip())}</{function}>"
    return None


def render_noargs_decoration(function: str) -> Optional[str]:
    return NOARGS_OUTPUT.get(function)
