# umd/markdown/postprocessors/base_url.py
"""
Postprocessor that prefixes root-relative URLs with the site's base URL.

With ``context["base_url"] = "https://example.com/wiki/"``:

    <a href="/page">       → <a href="https://example.com/wiki/page">
    <img src="/logo.png">  → <img src="https://example.com/wiki/logo.png">
    <a href="//cdn/x">     → unchanged (protocol relative)
    <a href="page">        → unchanged

Without a base URL in the context, ``settings.UMD_BASE_URL`` is used when set.
"""

from ..config import get_base_url
from .utils import get_shared_soup, soup_to_html

URL_ATTRIBUTES = ("href", "src")


def rewrite_base_url(html: str, context: dict) -> str:
    base_url = context.get("base_url") or get_base_url()
    if not base_url:
        return html

    base_url = base_url.rstrip("/")
    soup = get_shared_soup(html, context)
    for attribute in URL_ATTRIBUTES:
        for element in soup.find_all(attrs={attribute: True}):
            url = element[attribute]
            if url.startswith("/") and not url.startswith("//"):
                element[attribute] = base_url + url

    return soup_to_html(context, soup)


def rewrite_base_url_default(html: str, context: dict) -> str:
    """
    Default configuration for rewrite_base_url.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return rewrite_base_url(html, context)
