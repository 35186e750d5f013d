"""Tests for the protection preprocessors."""

import json

from umd.markdown.header_ids import get_header_map
from umd.markdown.markers import TASK_INDETERMINATE, MarkerKind, decode, encode
from umd.markdown.preprocessors import apply_preprocessors
from umd.markdown.preprocessors.block_decorations import protect_block_decorations
from umd.markdown.preprocessors.comment_stripper import strip_comments
from umd.markdown.preprocessors.definition_lists import protect_definition_lists
from umd.markdown.preprocessors.header_ids import extract_header_ids
from umd.markdown.preprocessors.nested_blocks import nest_list_blocks
from umd.markdown.preprocessors.plugins import protect_plugins
from umd.markdown.preprocessors.task_lists import mark_indeterminate_tasks
from umd.markdown.preprocessors.umd_blockquote import protect_umd_blockquotes
from umd.markdown.preprocessors.underline import protect_underline


class TestCommentStripper:
    def test_line_comment(self) -> None:
        assert strip_comments("text // comment", {}) == "text"

    def test_url_survives(self) -> None:
        assert strip_comments("see https://example.com // c", {}) == "see https://example.com"

    def test_protocol_relative_urls_survive(self) -> None:
        source = "[cdn](//cdn.example.com/x.js) <//cdn.example.com> '//a' src=//b"
        assert strip_comments(source, {}) == source
        assert strip_comments("[cdn](//cdn.example.com) // note", {}) == "[cdn](//cdn.example.com)"

    def test_block_comment(self) -> None:
        assert strip_comments("a /* one\ntwo */ b", {}) == "a  b"

    def test_code_is_untouched(self) -> None:
        source = "```\nx // y\n```\n`a // b`"
        assert strip_comments(source, {}) == source


class TestNestedBlocks:
    def test_table_under_list_item(self) -> None:
        assert nest_list_blocks("- Item\n| A | B |", {}) == "- Item\n    | A | B |"

    def test_placement_line_and_plugin(self) -> None:
        source = "1. Item\nCENTER:\n@toc(2)"
        assert nest_list_blocks(source, {}) == "1. Item\n    CENTER:\n    @toc(2)"

    def test_paragraph_ends_the_item(self) -> None:
        source = "- Item\nPlain text\n| A |"
        assert nest_list_blocks(source, {}) == source


class TestTaskLists:
    def test_indeterminate_item(self) -> None:
        assert mark_indeterminate_tasks("- [-] Maybe", {}) == f"- [ ] {TASK_INDETERMINATE} Maybe"

    def test_checked_items_untouched(self) -> None:
        assert mark_indeterminate_tasks("- [x] Done", {}) == "- [x] Done"


class TestUnderline:
    def test_protects_double_underscore(self) -> None:
        assert protect_underline("an __important__ word", {}) == (
            "an {{UNDERLINE:important:UNDERLINE}} word"
        )

    def test_inline_code(self) -> None:
        assert protect_underline("`__init__`", {}) == "`__init__`"


class TestHeaderIds:
    def test_custom_ids_by_position(self) -> None:
        context = {}
        text = extract_header_ids("# Intro {#intro}\n\nBody\n\n## Next\n\n### Third {#third}", context)
        assert text == "# Intro\n\nBody\n\n## Next\n\n### Third"
        assert get_header_map(context).ids == {1: "intro", 3: "third"}

    def test_setext_headings_count(self) -> None:
        context = {}
        extract_header_ids("Title\n=====\n\n## Second {#second}", context)
        assert get_header_map(context).ids == {2: "second"}

    def test_fenced_code_ignored(self) -> None:
        context = {}
        extract_header_ids("```\n# not a heading\n```\n# Real {#real}", context)
        assert get_header_map(context).ids == {1: "real"}

    def test_indented_code_ignored(self) -> None:
        context = {}
        text = extract_header_ids("    # shell comment {#no}\n\n# Real {#real}", context)
        assert text == "    # shell comment {#no}\n\n# Real"
        assert get_header_map(context).ids == {1: "real"}

    def test_heading_in_list_item_counts(self) -> None:
        context = {}
        extract_header_ids("- item\n\n  # Nested {#nested}\n\n# Real {#real}", context)
        assert get_header_map(context).ids == {1: "nested", 2: "real"}

    def test_deeply_indented_list_content_is_code(self) -> None:
        context = {}
        extract_header_ids("- item\n\n      # code\n\n# Real {#real}", context)
        assert get_header_map(context).ids == {1: "real"}

    def test_nested_plugin_body_ignored(self) -> None:
        context = {}
        extract_header_ids("@box(){{\n{{ inner }}\n# not a heading\n}}\n# Real {#real}", context)
        assert get_header_map(context).ids == {1: "real"}

    def test_legacy_blockquote_ignored(self) -> None:
        context = {}
        text = extract_header_ids("> # Quoted <\n\n# Real {#real}", context)
        assert text.startswith("> # Quoted <\n")
        assert get_header_map(context).ids == {1: "real"}


class TestUmdBlockquote:
    def test_single_line(self) -> None:
        assert protect_umd_blockquotes("> Quoted text <", {}) == (
            "{{UMD_BLOCKQUOTE:Quoted text:UMD_BLOCKQUOTE}}"
        )

    def test_markdown_blockquote_untouched(self) -> None:
        assert protect_umd_blockquotes("> Quoted text", {}) == "> Quoted text"


class TestBlockDecorations:
    def test_chained_prefixes(self) -> None:
        assert protect_block_decorations("SIZE(1.5): CENTER: Title", {}) == (
            "{{BLOCK_DECORATION:SIZE(1.5): CENTER: Title:BLOCK_DECORATION}}"
        )

    def test_bare_placement_line_untouched(self) -> None:
        assert protect_block_decorations("CENTER:", {}) == "CENTER:"


class TestPlugins:
    def test_block_forms(self) -> None:
        assert protect_plugins("@toc(2)", {}) == encode(MarkerKind.BLOCK_PLUGIN_ARGSONLY, "toc", "2")
        assert protect_plugins("@clear()", {}) == encode(MarkerKind.BLOCK_PLUGIN_NOARGS, "clear")

    def test_multiline_block(self) -> None:
        text = protect_plugins("@code(py){{\nprint(1)\n}}", {})
        marker = decode(MarkerKind.BLOCK_PLUGIN, text)
        assert (marker.function, marker.args, marker.content) == ("code", "py", "\nprint(1)\n")

    def test_multiline_block_with_nested_braces(self) -> None:
        text = protect_plugins("@f(a){{ nested {{ x }} }}", {})
        marker = decode(MarkerKind.BLOCK_PLUGIN, text)
        assert marker.content == " nested {{ x }} "

    def test_inline_forms(self) -> None:
        assert protect_plugins("&kbd{Ctrl};", {}) == encode(MarkerKind.INLINE_PLUGIN, "kbd", None, "Ctrl")
        assert protect_plugins("&sup(2);", {}) == encode(MarkerKind.INLINE_PLUGIN_ARGSONLY, "sup", "2")
        assert protect_plugins("&mytag;", {}) == encode(MarkerKind.INLINE_PLUGIN_NOARGS, "mytag")

    def test_nested_content_is_kept_whole(self) -> None:
        text = protect_plugins("&outer(a){text &inner(b){x}; more};", {})
        marker = decode(MarkerKind.INLINE_PLUGIN, text)
        assert marker.function == "outer"
        assert marker.content == "text &inner(b){x}; more"

    def test_entities_and_email_untouched(self) -> None:
        source = "a &amp; b &nbsp; mail user@example.com"
        assert protect_plugins(source, {}) == source

    def test_code_untouched(self) -> None:
        source = "`&kbd{x};`\n```\n@toc(2)\n```"
        assert protect_plugins(source, {}) == source


class TestDefinitionLists:
    def test_run_becomes_one_marker(self) -> None:
        text = protect_definition_lists(":HTML|HyperText\n:CSS|Style sheets\n\nAfter", {})
        first, rest = text.split("\n", 1)
        marker = decode(MarkerKind.DEFINITION_LIST, first)
        assert json.loads(marker.content) == [["HTML", "HyperText"], ["CSS", "Style sheets"]]
        assert rest == "\nAfter"


class TestPipeline:
    def test_tables_recorded_on_context(self) -> None:
        context = {}
        text = apply_preprocessors("| A |> |h\n| C | D |", context)
        assert "TABLE_MARKER_0_END" in text
        assert 'colspan="2"' in get_header_map(context).tables[0][1]
