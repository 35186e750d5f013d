# umd/markdown/postprocessors/task_lists.py
"""
Postprocessor that marks indeterminate task list checkboxes.

    <li><input type="checkbox" disabled="" />{{TASK_INDETERMINATE}} Maybe</li>

    → <li><input aria-checked="mixed" data-task="indeterminate" disabled=""
           type="checkbox"/>Maybe</li>
"""

import re

from bs4 import NavigableString

from ..markers import TASK_INDETERMINATE
from .utils import get_shared_soup, soup_to_html

PLACEHOLDER_PATTERN = re.compile(re.escape(TASK_INDETERMINATE) + r" ?")


def mark_indeterminate_checkboxes(html: str, context: dict) -> str:
    if TASK_INDETERMINATE not in html:
        return html

    soup = get_shared_soup(html, context)
    for string in soup.find_all(string=lambda text: TASK_INDETERMINATE in text):
        item = string.find_parent("li")
        checkbox = item.find("input", attrs={"type": "checkbox"}) if item else None
        if checkbox is not None:
            checkbox["data-task"] = "indeterminate"
            checkbox["aria-checked"] = "mixed"
        string.replace_with(NavigableString(PLACEHOLDER_PATTERN.sub("", str(string))))

    return soup_to_html(context, soup)


def mark_indeterminate_checkboxes_default(html: str, context: dict) -> str:
    """
    Default configuration for mark_indeterminate_checkboxes.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return mark_indeterminate_checkboxes(html, context)
