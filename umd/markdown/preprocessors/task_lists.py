# umd/markdown/preprocessors/task_lists.py
"""
Preprocessor for indeterminate task list items.

    - [-] Maybe        → - [ ] {{TASK_INDETERMINATE}} Maybe

Pandoc renders the item as an unchecked checkbox; the task list restorer
then marks it as indeterminate.
"""

import re

from ..markers import TASK_INDETERMINATE
from ..text import iter_lines_outside_fences

INDETERMINATE_PATTERN = re.compile(r"^(?P<item>[ \t]*(?:[-+*]|\d+\.)[ \t]+)\[-\](?=\s|$)")


def mark_indeterminate_tasks(text: str, context: dict) -> str:
    lines = []
    for line, in_code in iter_lines_outside_fences(text.split("\n")):
        if not in_code:
            line = INDETERMINATE_PATTERN.sub(
                lambda m: f"{m.group('item')}[ ] {TASK_INDETERMINATE}", line, count=1
            )
        lines.append(line)
    return "\n".join(lines)


def mark_indeterminate_tasks_default(text: str, context: dict) -> str:
    """
    Default configuration for mark_indeterminate_tasks.

    This is the function that should be registered in PREPROCESSORS.
    """
    return mark_indeterminate_tasks(text, context)
