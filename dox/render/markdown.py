"""Markdown rendering of comment descriptions."""

from __future__ import annotations

import re
from functools import lru_cache

from markdown_it import MarkdownIt

_BARE_AMPERSAND = re.compile(r"&(?!\w+;)")


class MarkdownRenderer:
    """Renders description text to HTML with GitHub-style extensions."""

    def __init__(self, *, html: bool = True, typographer: bool = False, breaks: bool = False) -> None:
        self._md = (
            MarkdownIt("commonmark", {"html": html, "typographer": typographer, "breaks": breaks})
            .enable("table")
            .enable("strikethrough")
        )

    def render(self, text: str) -> str:
        if not text.strip():
            return ""
        return self._md.render(text)

    __call__ = render


@lru_cache(maxsize=1)
def default_renderer() -> MarkdownRenderer:
    """Shared renderer with default options."""
    return MarkdownRenderer()


def escape_html(text: object) -> str:
    """Escape ``<``, ``>`` and ampersands that do not start an entity."""
    escaped = _BARE_AMPERSAND.sub("&amp;", str(text))
    return escaped.replace("<", "&lt;").replace(">", "&gt;")


__all__ = ["MarkdownRenderer", "default_renderer", "escape_html"]
