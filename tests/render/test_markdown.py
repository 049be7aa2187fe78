"""Tests for description rendering helpers."""

from __future__ import annotations

from dox.render import MarkdownRenderer, default_renderer, escape_html


def test_renders_inline_markdown() -> None:
    assert MarkdownRenderer().render("**bold**") == "<p><strong>bold</strong></p>\n"


def test_blank_text_renders_empty() -> None:
    renderer = MarkdownRenderer()
    assert renderer.render("") == ""
    assert renderer("  \n") == ""


def test_github_extensions_enabled() -> None:
    renderer = MarkdownRenderer()
    assert "<table>" in renderer.render("| a |\n| - |\n| b |\n")
    assert "<s>gone</s>" in renderer.render("~~gone~~")


def test_html_passthrough_can_be_disabled() -> None:
    assert "<b>" in MarkdownRenderer().render("<b>x</b>")
    assert "&lt;b&gt;" in MarkdownRenderer(html=False).render("<b>x</b>")


def test_default_renderer_is_shared() -> None:
    assert default_renderer() is default_renderer()


def test_escape_html_keeps_entities() -> None:
    assert escape_html("a < b && c > d &amp;") == "a &lt; b &amp;&amp; c &gt; d &amp;"
    assert escape_html(42) == "42"
