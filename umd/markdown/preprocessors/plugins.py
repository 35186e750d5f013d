# umd/markdown/preprocessors/plugins.py
"""
Preprocessor that protects plugin calls from the Markdown renderer.

Block plugins:
    @name(args){{ multi-line content }}
    @name(args){content}
    @name(args)
    @name()

Inline plugins:
    &name{content};
    &name(args){content};
    &name(args);
    &name;

Each form is replaced by a marker (see ``umd.markdown.markers``). The
patterns overlap, so they run from the most to the least specific: a looser
pattern running first would swallow part of a stricter form.
"""

from typing import Callable, List, Tuple

from ..markers import MarkerKind, encode
from ..text import HTML_ENTITY_NAMES, code_guarded

NAME = r"(?P<function>[A-Za-z]\w*)"
ARGS = r"\((?P<args>[^()\n]*)\)"
NONEMPTY_ARGS = r"\((?P<args>[^()\n]+)\)"

# Brace-balanced content, nesting up to two levels deep.
INLINE_CONTENT = r"(?P<content>(?:[^{}]|\{(?:[^{}]|\{[^{}]*\})*\})*?)"
SINGLE_LINE_CONTENT = r"(?P<content>(?:[^{}\n]|\{(?:[^{}\n]|\{[^{}\n]*\})*\})*?)"
# Multi-line content may hold one level of nested {{ }} pairs.
MULTI_LINE_CONTENT = r"(?P<content>(?:(?!\{\{|\}\})[\s\S]|\{\{(?:(?!\{\{|\}\})[\s\S])*\}\})*?)"

# "@" glued to a word is an e-mail address, not a plugin.
BLOCK_START = r"(?<![\w@&])@"

BLOCK_PROTECTORS: List[Tuple[MarkerKind, str]] = [
    # @name(args){{ ... }} spanning lines
    (MarkerKind.BLOCK_PLUGIN, BLOCK_START + NAME + ARGS + r"\{\{" + MULTI_LINE_CONTENT + r"\}\}"),
    # @name(args){...} on one line
    (MarkerKind.BLOCK_PLUGIN, BLOCK_START + NAME + ARGS + r"\{" + SINGLE_LINE_CONTENT + r"\}"),
    # @name(args)
    (MarkerKind.BLOCK_PLUGIN_ARGSONLY, BLOCK_START + NAME + NONEMPTY_ARGS),
    # @name()
    (MarkerKind.BLOCK_PLUGIN_NOARGS, BLOCK_START + NAME + r"\(\)"),
]

INLINE_PROTECTORS: List[Tuple[MarkerKind, str]] = [
    # &name{...};
    (MarkerKind.INLINE_PLUGIN, r"&" + NAME + r"\{" + INLINE_CONTENT + r"\};"),
    # &name(args){...};
    (MarkerKind.INLINE_PLUGIN, r"&" + NAME + ARGS + r"\{" + INLINE_CONTENT + r"\};"),
    # &name(args);
    (MarkerKind.INLINE_PLUGIN_ARGSONLY, r"&" + NAME + ARGS + r";"),
    # &name; (character entities excluded)
    (MarkerKind.INLINE_PLUGIN_NOARGS, r"&" + NAME + r";"),
]


def _make_protector(kind: MarkerKind, pattern: str) -> Callable[[str], str]:
    regex = code_guarded(pattern)

    def replace(match):
        if match.group("_code") is not None:
            return match.group(0)
        function = match.group("function")
        if kind is MarkerKind.INLINE_PLUGIN_NOARGS and function in HTML_ENTITY_NAMES:
            return match.group(0)
        groups = match.groupdict()
        return encode(kind, function, groups.get("args"), groups.get("content"))

    def protect(text: str) -> str:
        return regex.sub(replace, text)

    return protect


_BLOCK_STEPS = [_make_protector(kind, pattern) for kind, pattern in BLOCK_PROTECTORS]
_INLINE_STEPS = [_make_protector(kind, pattern) for kind, pattern in INLINE_PROTECTORS]


def protect_block_plugins(text: str) -> str:
    for step in _BLOCK_STEPS:
        text = step(text)
    return text


def protect_inline_plugins(text: str) -> str:
    for step in _INLINE_STEPS:
        text = step(text)
    return text


def protect_plugins(text: str, context: dict) -> str:
    """
    Replace block, then inline plugin calls with markers.

    Args:
        text: Markdown text
        context: Processor context (unused)

    Returns:
        Text in which every plugin call is a marker
    """
    return protect_inline_plugins(protect_block_plugins(text))


def protect_plugins_default(text: str, context: dict) -> str:
    """
    Default configuration for protect_plugins.

    This is the function that should be registered in PREPROCESSORS.
    """
    return protect_plugins(text, context)
