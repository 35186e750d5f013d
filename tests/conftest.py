"""Shared fixtures: a deterministic stand-in for Pandoc and Django settings."""

import html
import re

import pytest
from django.conf import settings

HEADING = re.compile(r"^(#{1,6})[ \t]+(.*)$")


def pytest_configure(config):
    if not settings.configured:
        settings.configure()


def fake_render(text: str) -> str:
    """Tiny Markdown renderer: paragraphs, ATX headings and blockquotes."""
    blocks = []
    for block in re.split(r"\n[ \t]*\n", text):
        block = block.strip()
        if not block:
            continue
        heading = HEADING.match(block)
        if heading and "\n" not in block:
            level = len(heading.group(1))
            blocks.append(f"<h{level}>{html.escape(heading.group(2), quote=False)}</h{level}>")
        elif block.startswith(">"):
            body = " ".join(line.lstrip(">").strip() for line in block.split("\n"))
            blocks.append(f"<blockquote>\n<p>{html.escape(body, quote=False)}</p>\n</blockquote>")
        else:
            blocks.append(f"<p>{html.escape(block, quote=False)}</p>")
    return "\n".join(blocks)



@pytest.fixture
def render():
    """Render wiki text through the full pipeline with the fake renderer."""
    from umd.markdown.renderer import render_markdown

    def _render(text: str, **context) -> str:
        return render_markdown(text, context={"renderer": fake_render, **context})

    return _render


@pytest.fixture
def fake_renderer():
    return fake_render
