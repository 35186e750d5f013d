"""End-to-end tests of the render pipeline."""

import pypandoc
import pytest
from bs4 import BeautifulSoup

import umd
from umd.markdown.diagnostics import detect_ambiguous_syntax
from umd.markdown.exceptions import RenderError
from umd.markdown.markers import ANY_MARKER_PATTERN, TASK_INDETERMINATE
from umd.markdown.renderer import render_markdown


def _pandoc_available() -> bool:
    try:
        pypandoc.get_pandoc_version()
    except OSError:
        return False
    return True


requires_pandoc = pytest.mark.skipif(not _pandoc_available(), reason="pandoc is not installed")

DOCUMENT = """\
# Intro {#intro}

An __underlined__ word, &kbd{Ctrl}; and &color(red){press &kbd{x};}; // hidden

COLOR(primary): Decorated line

> Legacy quote <

@toc(2)

CENTER:
| ~Name |> |h
| A | B |
| |^ | C |

:HTML|HyperText
:CSS|Style

- [-] Maybe
"""


def _assert_no_markers(html: str) -> None:
    assert not ANY_MARKER_PATTERN.search(html)
    assert TASK_INDETERMINATE not in html
    assert "TABLE_MARKER" not in html


class TestPipeline:
    def test_inline_decoration(self, render) -> None:
        assert render("&kbd{Ctrl};") == "<p><kbd>Ctrl</kbd></p>"

    def test_heading_anchor(self, render) -> None:
        html = render("# Intro {#intro}\n\n## Next")
        assert 'id="h-intro"' in html
        assert 'href="#h-2"' in html

    def test_table(self, render) -> None:
        html = render("| A |> |h\n| C | D |")
        assert html.startswith('<table class="table umd-table"><thead><tr><td colspan="2">A</td>')

    def test_rowspan_table(self, render) -> None:
        html = render("| A | B |\n| |^ | D |")
        assert '<td rowspan="2">A</td><td>B</td></tr><tr><td>D</td></tr>' in html

    def test_gfm_shaped_umd_table(self, render) -> None:
        html = render("| a | b |\n|---|---|\n| RIGHT: x | y |")
        assert "---" not in html
        assert '<td class="text-end">x</td><td>y</td>' in html

    def test_placement(self, render) -> None:
        html = render("CENTER:\n| A | B |")
        assert '<div class="w-auto mx-auto"><table class="table umd-table">' in html
        assert "CENTER:" not in html

    def test_nested_plugin_is_preserved(self, render) -> None:
        html = render("&outer(a){text &inner(b){x}; more};")
        assert '<template class="umd-plugin umd-plugin-outer"><data value="0">a</data>' in html
        assert "text &amp;inner(b){x}; more</template>" in html

    def test_nested_block_plugin_body(self, render) -> None:
        html = render("@f(a){{ nested {{ x }} }}")
        assert html == '<template class="umd-plugin umd-plugin-f"><data value="0">a</data> nested {{ x }} </template>'

    def test_definition_list(self, render) -> None:
        html = render(":HTML|HyperText\n:CSS|Style")
        assert html == "<dl><dt>HTML</dt><dd>HyperText</dd><dt>CSS</dt><dd>Style</dd></dl>"

    def test_block_plugin(self, render) -> None:
        assert render("@clear()") == '<div class="clearfix"></div>'

    def test_alert(self, render) -> None:
        html = render("> [!TIP] Use the fake renderer.")
        assert html == (
            '<div class="alert alert-success" role="alert">'
            "<strong>Tip:</strong> Use the fake renderer.</div>"
        )

    def test_base_url(self, render) -> None:
        html = render("&badge(info){[Docs](/docs)};", base_url="https://example.com/")
        assert 'href="https://example.com/docs"' in html

    def test_no_marker_leaks(self, render) -> None:
        _assert_no_markers(render(DOCUMENT))

    def test_code_is_left_alone(self, render) -> None:
        html = render("`&kbd{x};`")
        assert "&amp;kbd{x};" in html

    def test_parse_facade(self, fake_renderer) -> None:
        assert umd.parse("__u__", renderer=fake_renderer) == "<p><u>u</u></p>"


class TestRenderError:
    def test_renderer_failure(self, monkeypatch) -> None:
        def broken(text, **kwargs):
            raise OSError("No pandoc was found")

        monkeypatch.setattr(pypandoc, "convert_text", broken)
        with pytest.raises(RenderError):
            render_markdown("text")


class TestDiagnostics:
    def test_triple_emphasis(self) -> None:
        warnings = detect_ambiguous_syntax("***Markdown*** and '''wiki'''")
        assert warnings and "***text***" in warnings[0]

    def test_color_next_to_definition(self) -> None:
        warnings = detect_ambiguous_syntax("COLOR(red): text\n: definition")
        assert warnings and "COLOR()" in warnings[0]

    def test_clean_text(self) -> None:
        assert detect_ambiguous_syntax("# Heading\n\n**Bold** and ''wiki bold''") == []


@requires_pandoc
class TestPandoc:
    def test_full_document(self) -> None:
        html = render_markdown(DOCUMENT)
        _assert_no_markers(html)
        assert 'id="h-intro"' in html
        assert "<u>underlined</u>" in html
        assert "<kbd>Ctrl</kbd>" in html
        assert '<span class="text-red">press <kbd>x</kbd></span>' in html
        assert "// hidden" not in html
        assert ">hidden" not in html
        assert '<p class="text-primary">Decorated line</p>' in html
        assert '<blockquote class="umd-blockquote">Legacy quote</blockquote>' in html
        assert '<template class="umd-plugin umd-plugin-toc"><data value="0">2</data></template>' in html
        assert '<div class="w-auto mx-auto"><table class="table umd-table">' in html
        assert '<th colspan="2" rowspan="2">Name</th>' not in html
        assert '<th colspan="2">Name</th>' in html
        assert "<dl><dt>HTML</dt><dd>HyperText</dd>" in html
        assert 'data-task="indeterminate"' in html

    def test_gfm_table_gets_bootstrap_class(self) -> None:
        html = render_markdown("| A | B |\n|---|---|\n| 1 | 2 |")
        assert '<table class="table">' in html
        assert "umd-table" not in html

    def test_vertical_alignment_in_gfm_table(self) -> None:
        html = render_markdown("| a | b |\n|---|---|\n| TOP: x | y |")
        assert "umd-table" not in html
        assert '<td class="align-top">x</td>' in html

    def test_custom_id_after_indented_code(self) -> None:
        html = render_markdown("    # shell comment\n\n# Real {#real}")
        assert 'id="h-real"' in html

    def test_custom_id_after_legacy_quote(self) -> None:
        html = render_markdown("> # Quoted <\n\n# Real {#real}")
        assert 'id="h-real"' in html

    def test_protocol_relative_link(self) -> None:
        html = render_markdown("[cdn](//cdn.example.com/x.js)")
        assert '<a href="//cdn.example.com/x.js">cdn</a>' in html

    def test_raw_html_is_escaped(self) -> None:
        html = render_markdown("<script>alert(1)</script>")
        assert "<script>" not in html

    def test_raw_html_attributes_removed(self) -> None:
        html = render_markdown('para <img src=x onerror=alert(1)> x\n\n<div onclick="x">hi</div>')
        soup = BeautifulSoup(html, "html.parser")
        assert soup.find("img")["src"] == "x"
        assert "onerror" not in soup.find("img").attrs
        assert "onclick" not in soup.find("div").attrs

    def test_javascript_link_blocked(self) -> None:
        html = render_markdown("[x](javascript:alert(1))")
        assert "javascript" not in html
        assert BeautifulSoup(html, "html.parser").find("a").get("href") is None
