# umd/markdown/decorations.py
"""
Bootstrap 5 lookups shared by block decorations, table cells and inline
decoration functions.

    COLOR(primary):     → class="text-primary"
    COLOR(,warning):    → class="bg-warning"
    COLOR(#f00):        → style="color: #f00"
    SIZE(1.5):          → class="fs-4"
    SIZE(3):            → style="font-size: 3rem"
    SIZE(12px):         → style="font-size: 12px"
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

BASE_COLORS = [
    # Theme colors
    "primary",
    "secondary",
    "success",
    "danger",
    "warning",
    "info",
    "light",
    "dark",
    # Custom colors (Bootstrap 5.3+)
    "blue",
    "indigo",
    "purple",
    "pink",
    "red",
    "orange",
    "yellow",
    "green",
    "teal",
    "cyan",
]

BODY_COLORS = ["body", "body-secondary", "body-tertiary", "body-emphasis"]

BOOTSTRAP_COLORS = frozenset(
    BODY_COLORS
    + BASE_COLORS
    + [f"{color}-subtle" for color in BASE_COLORS]
    + [f"{color}-emphasis" for color in BASE_COLORS]
)

FONT_SIZE_CLASSES = {
    "2.5": "fs-1",
    "2": "fs-2",
    "2.0": "fs-2",
    "1.75": "fs-3",
    "1.5": "fs-4",
    "1.25": "fs-5",
    "0.875": "fs-6",
}

TEXT_ALIGN_CLASSES = {
    "LEFT": "text-start",
    "CENTER": "text-center",
    "RIGHT": "text-end",
    "JUSTIFY": "text-justify",
    "TRUNCATE": "text-truncate",
}

VERTICAL_ALIGN_CLASSES = {
    "TOP": "align-top",
    "MIDDLE": "align-middle",
    "BOTTOM": "align-bottom",
    "BASELINE": "align-baseline",
}

ALIGN_KEYWORDS = tuple(TEXT_ALIGN_CLASSES) + tuple(VERTICAL_ALIGN_CLASSES)

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
SIZE_PATTERN = re.compile(r"^(?P<number>\d+(?:\.\d+)?|\.\d+)(?P<unit>rem|em|px|%)?$")


@dataclass
class Decoration:
    """Classes and inline styles collected from decoration prefixes."""

    classes: List[str] = field(default_factory=list)
    styles: List[str] = field(default_factory=list)

    def add_color(self, value: str, background: bool = False) -> None:
        mapped = map_color(value, background)
        if mapped is None:
            return
        is_class, css = mapped
        if is_class:
            self.classes.append(css)
        else:
            prop = "background-color" if background else "color"
            self.styles.append(f"{prop}: {css}")

    def add_colors(self, spec: str) -> None:
        """Apply an ``fg[,bg]`` colour spec."""
        fg, _, bg = spec.partition(",")
        self.add_color(fg)
        self.add_color(bg, background=True)

    def add_size(self, value: str) -> None:
        mapped = map_font_size(value)
        if mapped is None:
            return
        is_class, css = mapped
        if is_class:
            self.classes.append(css)
        else:
            self.styles.append(f"font-size: {css}")

    def attrs(self) -> str:
        """Render as `` class="…" style="…"`` (leading space), or ``""``."""
        parts = []
        if self.classes:
            parts.append(f' class="{" ".join(self.classes)}"')
        if self.styles:
            parts.append(f' style="{"; ".join(self.styles)}"')
        return "".join(parts)

    def __bool__(self) -> bool:
        return bool(self.classes or self.styles)


def map_color(value: str, background: bool = False) -> Optional[Tuple[bool, str]]:
    """
    Map a colour value to a Bootstrap class or a CSS colour.

    Args:
        value: Colour name or hex value as written by the author
        background: Map to ``bg-*`` instead of ``text-*``

    Returns:
        ``(True, class_name)`` for Bootstrap colours, ``(False, css_value)``
        for hex colours, ``None`` for empty, ``inherit`` and invalid values
    """
    value = value.strip()
    if not value or value == "inherit":
        return None
    if value in BOOTSTRAP_COLORS:
        prefix = "bg" if background else "text"
        return True, f"{prefix}-{value}"
    if HEX_COLOR_PATTERN.match(value):
        return False, value
    return None


def map_font_size(value: str) -> Optional[Tuple[bool, str]]:
    """
    Map a SIZE() value to an ``fs-*`` class or a CSS length.

    Unitless values on the Bootstrap scale become classes, other unitless
    values are taken as rem. Values with a unit are kept as written.
    """
    value = value.strip()
    match = SIZE_PATTERN.match(value)
    if match is None:
        return None
    if match.group("unit"):
        return False, value
    if value in FONT_SIZE_CLASSES:
        return True, FONT_SIZE_CLASSES[value]
    return False, f"{value}rem"
