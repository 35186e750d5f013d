# umd/markdown/postprocessors/sanitizer.py
"""
Postprocessor that runs the finished HTML through a bleach allow-list.

Pandoc's CommonMark reader passes author HTML through, so this is what keeps
``<script>``, event handlers and ``javascript:`` links out of the page:

    <img src=x onerror=alert(1)>   → <img src="x">
    <a href="javascript:x">a</a>   → <a>a</a>
    <script>x</script>             → &lt;script&gt;x&lt;/script&gt;

It runs after the restorers so the HTML they build from markers is checked
too. The allow-list covers everything the wiki syntax itself produces.
"""

from functools import lru_cache

import bleach
from bleach.css_sanitizer import CSSSanitizer

ALLOWED_PROTOCOLS = frozenset(["http", "https", "mailto", "tel"])

ALLOWED_CSS_PROPERTIES = frozenset(
    ["color", "background-color", "font-size", "text-align", "vertical-align", "width"]
)

GLOBAL_ATTRIBUTES = frozenset(["class", "id", "title", "lang", "dir", "role", "style"])
GLOBAL_ATTRIBUTE_PREFIXES = ("data-", "aria-")

TAG_ATTRIBUTES = {
    "a": frozenset(["href", "rel", "target", "tabindex"]),
    "img": frozenset(["src", "alt", "width", "height", "loading", "decoding"]),
    "th": frozenset(["colspan", "rowspan", "scope"]),
    "td": frozenset(["colspan", "rowspan"]),
    "input": frozenset(["type", "checked", "disabled"]),
    "ol": frozenset(["start", "type"]),
    "blockquote": frozenset(["cite"]),
    "q": frozenset(["cite"]),
    "time": frozenset(["datetime"]),
    "data": frozenset(["value"]),
    "bdo": frozenset(["dir"]),
    "col": frozenset(["span"]),
}


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache the allow-list, it is the same for every document."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "wbr",
            "div",
            "span",
            "section",
            "aside",
            "cite",
            "mark",
            "ins",
            "del",
            "u",
            "sup",
            "sub",
            "small",
            "q",
            "dfn",
            "hr",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "dl",
            "dt",
            "dd",
            "label",
            "input",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            "var",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
            # inline decorations
            "ruby",
            "rt",
            "rp",
            "bdi",
            "bdo",
            "time",
            "data",
            "abbr",
            # plugins
            "template",
        }
    )
    css_sanitizer = CSSSanitizer(allowed_css_properties=ALLOWED_CSS_PROPERTIES)
    return frozenset(allowed_tags), css_sanitizer


def allow_attribute(tag: str, name: str, value: str) -> bool:
    if name in GLOBAL_ATTRIBUTES or name.startswith(GLOBAL_ATTRIBUTE_PREFIXES):
        return True
    return name in TAG_ATTRIBUTES.get(tag, ())


def sanitize_html(html: str, context: dict) -> str:
    """
    Sanitize HTML output using bleach.

    Disallowed tags are escaped, not dropped, so the author sees what was
    written. Disallowed attributes and URLs with a protocol outside
    ``ALLOWED_PROTOCOLS`` are removed.
    """
    allowed_tags, css_sanitizer = _get_bleach_config()
    return bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allow_attribute,
        protocols=ALLOWED_PROTOCOLS,
        css_sanitizer=css_sanitizer,
        strip=False,
    )


def sanitize_html_default(html: str, context: dict) -> str:
    """
    Default configuration for sanitize_html.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return sanitize_html(html, context)
