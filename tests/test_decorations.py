"""Tests for colour and size mapping."""

import pytest

from umd.markdown.decorations import Decoration, map_color, map_font_size


class TestMapColor:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("primary", (True, "text-primary")),
            ("red-subtle", (True, "text-red-subtle")),
            ("body-secondary", (True, "text-body-secondary")),
            ("#f00", (False, "#f00")),
            ("#336699", (False, "#336699")),
        ],
    )
    def test_valid_colors(self, value, expected) -> None:
        assert map_color(value) == expected

    def test_background(self) -> None:
        assert map_color("warning", background=True) == (True, "bg-warning")

    @pytest.mark.parametrize("value", ["", "inherit", "chartreuse", "#12", "red;"])
    def test_no_decoration(self, value) -> None:
        assert map_color(value) is None


class TestMapFontSize:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2.5", (True, "fs-1")),
            ("2", (True, "fs-2")),
            ("2.0", (True, "fs-2")),
            ("1.5", (True, "fs-4")),
            ("0.875", (True, "fs-6")),
            ("3", (False, "3rem")),
            ("12px", (False, "12px")),
            ("1.2em", (False, "1.2em")),
            ("50%", (False, "50%")),
        ],
    )
    def test_valid_sizes(self, value, expected) -> None:
        assert map_font_size(value) == expected

    @pytest.mark.parametrize("value", ["", "big", "12pt", "-1"])
    def test_invalid_sizes(self, value) -> None:
        assert map_font_size(value) is None


class TestDecoration:
    def test_foreground_and_background(self) -> None:
        decoration = Decoration()
        decoration.add_colors("#336699,warning")
        assert decoration.attrs() == ' class="bg-warning" style="color: #336699"'

    def test_empty_is_falsy(self) -> None:
        decoration = Decoration()
        decoration.add_colors("nope")
        decoration.add_size("huge")
        assert not decoration
        assert decoration.attrs() == ""
