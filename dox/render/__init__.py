"""Text rendering collaborators."""

from .markdown import MarkdownRenderer, default_renderer, escape_html

__all__ = ["MarkdownRenderer", "default_renderer", "escape_html"]
