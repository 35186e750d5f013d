# umd/markdown/postprocessors/bootstrap_enhancer.py
"""
Postprocessor that adds Bootstrap classes and converts GitHub-style alerts.

Default classes:
    <table>        → <table class="table">
    <blockquote>   → <blockquote class="blockquote">

Alerts:
    > [!WARNING]
    > Mind the gap.

    → <div class="alert alert-warning" role="alert"><strong>Warning:</strong> Mind the gap.</div>
"""

import re

from bs4 import NavigableString, Tag

from .utils import get_shared_soup, soup_to_html

ALERT_TYPES = {
    "NOTE": ("alert-info", "Note"),
    "TIP": ("alert-success", "Tip"),
    "IMPORTANT": ("alert-primary", "Important"),
    "WARNING": ("alert-warning", "Warning"),
    "CAUTION": ("alert-danger", "Caution"),
}

ALERT_PATTERN = re.compile(r"^\s*\[!(?P<type>%s)\]\s*" % "|".join(ALERT_TYPES))


def _first_paragraph(blockquote: Tag):
    for child in blockquote.children:
        if isinstance(child, NavigableString):
            if child.strip():
                return None
            continue
        return child if child.name == "p" else None
    return None


def _convert_alert(soup, blockquote: Tag) -> bool:
    paragraph = _first_paragraph(blockquote)
    if paragraph is None or not paragraph.contents:
        return False
    first = paragraph.contents[0]
    if not isinstance(first, NavigableString):
        return False
    match = ALERT_PATTERN.match(str(first))
    if match is None:
        return False

    alert_class, label = ALERT_TYPES[match.group("type")]
    alert = soup.new_tag("div", attrs={"class": f"alert {alert_class}", "role": "alert"})
    strong = soup.new_tag("strong")
    strong.string = f"{label}:"
    alert.append(strong)
    alert.append(NavigableString(" "))

    rest = str(first)[match.end():]
    first.extract()
    if rest:
        alert.append(NavigableString(rest))
    for child in list(paragraph.contents):
        alert.append(child.extract())
    paragraph.decompose()

    for child in list(blockquote.contents):
        if isinstance(child, NavigableString) and not child.strip():
            continue
        alert.append(child.extract())

    blockquote.replace_with(alert)
    return True


def bootstrap_enhancer(html: str, context: dict) -> str:
    """
    Apply Bootstrap defaults to tables and blockquotes.

    Args:
        html: HTML string to process
        context: Processor context

    Returns:
        HTML with Bootstrap classes and alert blocks
    """
    if "<table" not in html and "<blockquote" not in html:
        return html

    soup = get_shared_soup(html, context)

    for table in soup.find_all("table"):
        classes = table.get("class", [])
        if "table" not in classes:
            table["class"] = ["table"] + classes

    for blockquote in soup.find_all("blockquote"):
        if blockquote.get("class"):
            continue
        if _convert_alert(soup, blockquote):
            continue
        blockquote["class"] = ["blockquote"]

    return soup_to_html(context, soup)


def bootstrap_enhancer_default(html: str, context: dict) -> str:
    """
    Default configuration for bootstrap_enhancer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return bootstrap_enhancer(html, context)
