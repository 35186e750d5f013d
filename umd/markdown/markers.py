# umd/markdown/markers.py
"""
Marker codec used to carry wiki constructs through Pandoc untouched.

A marker is a self-delimited token whose kind tag opens and closes it:

    {{INLINE_PLUGIN:color:red:SGVsbG8=:INLINE_PLUGIN}}
    {{BLOCK_PLUGIN_ARGSONLY:toc:2:BLOCK_PLUGIN_ARGSONLY}}
    {{INLINE_PLUGIN_NOARGS:br:INLINE_PLUGIN_NOARGS}}

Content is Base64 encoded so that nothing inside it can be read as Markdown.
Arguments are percent-escaped instead, which keeps them readable in the
intermediate text while hiding every character Markdown cares about.

Body kinds (block decorations, legacy blockquotes, underline) carry one line
of raw Markdown on purpose: Pandoc renders their inline syntax and the
restorer receives HTML.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)


class MarkerKind(str, Enum):
    INLINE_PLUGIN = "INLINE_PLUGIN"
    INLINE_PLUGIN_ARGSONLY = "INLINE_PLUGIN_ARGSONLY"
    INLINE_PLUGIN_NOARGS = "INLINE_PLUGIN_NOARGS"
    BLOCK_PLUGIN = "BLOCK_PLUGIN"
    BLOCK_PLUGIN_ARGSONLY = "BLOCK_PLUGIN_ARGSONLY"
    BLOCK_PLUGIN_NOARGS = "BLOCK_PLUGIN_NOARGS"
    DEFINITION_LIST = "DEFINITION_LIST"
    BLOCK_DECORATION = "BLOCK_DECORATION"
    UMD_BLOCKQUOTE = "UMD_BLOCKQUOTE"
    UNDERLINE = "UNDERLINE"


# Field layout per kind: f = function, a = args, c = encoded content, b = raw body
_SHAPES = {
    MarkerKind.INLINE_PLUGIN: "fac",
    MarkerKind.BLOCK_PLUGIN: "fac",
    MarkerKind.INLINE_PLUGIN_ARGSONLY: "fa",
    MarkerKind.BLOCK_PLUGIN_ARGSONLY: "fa",
    MarkerKind.INLINE_PLUGIN_NOARGS: "f",
    MarkerKind.BLOCK_PLUGIN_NOARGS: "f",
    MarkerKind.DEFINITION_LIST: "c",
    MarkerKind.BLOCK_DECORATION: "b",
    MarkerKind.UMD_BLOCKQUOTE: "b",
    MarkerKind.UNDERLINE: "b",
}

_FIELD_PATTERNS = {
    "f": r"(?P<function>[A-Za-z]\w*)",
    "a": r"(?P<args>[^:{}]*)",
    "c": r"(?P<content>[^:{}]*)",
    # A body never spans into another marker of its own kind.
    "b": r"(?P<body>(?:(?!\{\{KIND:|:KIND\}\}).)+)",
}

# Characters quote() leaves alone that Markdown would still act on.
_EXTRA_ARG_ESCAPES = {"_": "%5F", "~": "%7E", ".": "%2E"}

ENCODED_KINDS = tuple(kind for kind, shape in _SHAPES.items() if "b" not in shape)

TASK_INDETERMINATE = "{{TASK_INDETERMINATE}}"

# Any marker at all, used for leak checks and quote unescaping.
ANY_MARKER_PATTERN = re.compile(r"\{\{(?P<kind>[A-Z_]+):.*?:(?P=kind)\}\}", re.DOTALL)


@dataclass(frozen=True)
class Marker:
    """A decoded marker."""

    kind: MarkerKind
    function: str = ""
    args: Optional[str] = None
    content: Optional[str] = None


def marker_pattern(kind: MarkerKind) -> re.Pattern:
    """Return the compiled pattern that matches one marker of ``kind``."""
    return _PATTERNS[kind]


def _build_pattern(kind: MarkerKind) -> re.Pattern:
    fields = ":".join(_FIELD_PATTERNS[field] for field in _SHAPES[kind])
    fields = fields.replace("KIND", kind.value)
    return re.compile(r"\{\{%s:%s:%s\}\}" % (kind.value, fields, kind.value), re.DOTALL)


_PATTERNS = {kind: _build_pattern(kind) for kind in MarkerKind}


def encode_args(args: str) -> str:
    escaped = quote(args, safe=" ,")
    for char, replacement in _EXTRA_ARG_ESCAPES.items():
        escaped = escaped.replace(char, replacement)
    return escaped


def decode_args(encoded: str) -> str:
    return unquote(encoded)


def encode_content(content: str) -> str:
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def decode_content(encoded: str) -> str:
    """
    Decode a Base64 payload.

    Corrupt payloads are not an error: the encoded text itself is returned so
    the document keeps its content.
    """
    try:
        return base64.b64decode(encoded.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, UnicodeEncodeError) as exc:
        logger.warning("Could not decode marker payload %r: %s", encoded[:40], exc)
        return encoded


def encode(
    kind: MarkerKind,
    function: str = "",
    args: Optional[str] = None,
    content: Optional[str] = None,
) -> str:
    """
    Build the marker text for ``kind``.

    Args:
        kind: Marker kind, which fixes the field layout
        function: Plugin function name (plugin kinds only)
        args: Raw comma separated argument string
        content: Payload; Base64 encoded for plugin and definition list
            kinds, inserted verbatim for body kinds

    Returns:
        Marker text such as ``{{BLOCK_PLUGIN_NOARGS:clear:BLOCK_PLUGIN_NOARGS}}``
    """
    values = {
        "f": function,
        "a": encode_args(args or ""),
        "c": encode_content(content or ""),
        "b": content or "",
    }
    fields = ":".join(values[field] for field in _SHAPES[kind])
    return "{{%s:%s:%s}}" % (kind.value, fields, kind.value)


def marker_from_match(kind: MarkerKind, match: re.Match) -> Marker:
    groups = match.groupdict()
    content = None
    if "content" in groups:
        content = decode_content(groups["content"])
    elif "body" in groups:
        content = groups["body"]
    args = groups.get("args")
    return Marker(
        kind=kind,
        function=groups.get("function") or "",
        args=decode_args(args) if args is not None else None,
        content=content,
    )


def decode(kind: MarkerKind, text: str) -> Marker:
    """
    Decode a single marker of ``kind``.

    Text that is not a well formed marker (truncated, wrong kind) decodes to a
    marker whose content is the raw text, so callers can always emit something.
    """
    match = _PATTERNS[kind].fullmatch(text.strip())
    if match is None:
        logger.warning("Malformed %s marker, keeping raw text", kind.value)
        return Marker(kind=kind, content=text)
    return marker_from_match(kind, match)


def contains_marker(text: str) -> bool:
    return bool(ANY_MARKER_PATTERN.search(text)) or TASK_INDETERMINATE in text


def _source_text(marker: Marker) -> str:
    kind = marker.kind
    content = marker.content or ""
    if kind is MarkerKind.INLINE_PLUGIN:
        if marker.args:
            return f"&{marker.function}({marker.args}){{{content}}};"
        return f"&{marker.function}{{{content}}};"
    if kind is MarkerKind.INLINE_PLUGIN_ARGSONLY:
        return f"&{marker.function}({marker.args});"
    if kind is MarkerKind.INLINE_PLUGIN_NOARGS:
        return f"&{marker.function};"
    if kind is MarkerKind.BLOCK_PLUGIN:
        if "\n" in content or "}" in content:
            return f"@{marker.function}({marker.args}){{{{{content}}}}}"
        return f"@{marker.function}({marker.args}){{{content}}}"
    if kind is MarkerKind.BLOCK_PLUGIN_ARGSONLY:
        return f"@{marker.function}({marker.args})"
    if kind is MarkerKind.BLOCK_PLUGIN_NOARGS:
        return f"@{marker.function}()"
    if kind is MarkerKind.UNDERLINE:
        return f"__{content}__"
    if kind is MarkerKind.UMD_BLOCKQUOTE:
        return f"> {content} <"
    return content


def revert(text: str) -> str:
    """
    Turn markers back into the wiki syntax they were made from.

    Used for plugin content, which is handed on as the author wrote it even
    when later protectors already rewrote parts of it.
    """
    for _ in range(16):
        if not ANY_MARKER_PATTERN.search(text):
            break
        for kind in MarkerKind:
            if kind is MarkerKind.DEFINITION_LIST:
                continue
            text = _PATTERNS[kind].sub(
                lambda match, kind=kind: _source_text(marker_from_match(kind, match)), text
            )
    return text.replace(f"[ ] {TASK_INDETERMINATE}", "[-]").replace(TASK_INDETERMINATE, "")
