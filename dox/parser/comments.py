"""Splitting a comment body into description and tags."""

from __future__ import annotations

import re
from typing import Callable, Optional

from ..models import Comment, Description
from ..render.markdown import default_renderer
from .tags import parse_tag

Renderer = Callable[[str], str]

_LEADING_STAR = re.compile(r"^[ \t]*\* ?", re.MULTILINE)


def strip_comment_markers(text: str) -> str:
    """Remove the per-line ``*`` gutter of a block comment body."""
    return _LEADING_STAR.sub("", text)


def parse_comment(text: str, *, raw: bool = False, renderer: Optional[Renderer] = None) -> Comment:
    """Parse a comment body (gutter already stripped) into a :class:`Comment`.

    The description runs up to the first line starting with ``@``; its first
    paragraph is the summary and the remaining paragraphs form the body.
    Unless ``raw`` is set, the three description fields are passed through
    ``renderer`` (the markdown renderer when none is given).
    """
    text = text.strip()
    # A comment made only of tags has an empty description.
    if text.startswith("@"):
        text = "\n" + text

    full, has_tags, tag_block = text.partition("\n@")
    summary, _, body = full.partition("\n\n")

    comment = Comment(description=Description(full=full, summary=summary, body=body))
    if has_tags:
        comment.tags = [parse_tag("@" + segment) for segment in tag_block.split("\n@")]
        comment.is_private = any(
            tag.type == "api" and tag.visibility == "private" for tag in comment.tags
        )

    if not raw:
        render = renderer or default_renderer()
        description = comment.description
        description.full = render(description.full)
        description.summary = render(description.summary)
        description.body = render(description.body)

    return comment


__all__ = ["Renderer", "parse_comment", "strip_comment_markers"]
