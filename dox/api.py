"""Markdown API reference generated from parsed comments."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader

from .models import CodeContext, Comment
from .render.markdown import escape_html

_TEMPLATE_NAME = "api.md.j2"


@dataclass
class ApiEntry:
    """One documented entity in the API reference."""

    signature: str
    anchor: str
    description: str


class ApiDocBuilder:
    """Builds a markdown API reference with a table of contents.

    Only public, non-ignored comments attached to a recognised declaration are
    listed. Descriptions are used as-is, so comments should be parsed raw.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def build(self, comments: Iterable[Comment]) -> str:
        entries = self.entries(comments)
        if not entries:
            return ""
        template = self._env.get_template(_TEMPLATE_NAME)
        return template.render(entries=entries).rstrip() + "\n"

    def entries(self, comments: Iterable[Comment]) -> List[ApiEntry]:
        seen: Dict[str, int] = {}
        entries: List[ApiEntry] = []
        for comment in comments:
            ctx = comment.context
            if ctx is None or not _is_documented(comment, ctx):
                continue
            signature = _signature(comment, ctx)
            entries.append(
                ApiEntry(
                    signature=escape_html(signature),
                    anchor=_unique_slug(signature, seen),
                    description=_indent(comment.description.full.strip()),
                )
            )
        return entries


def _is_documented(comment: Comment, ctx: CodeContext) -> bool:
    if comment.is_private or comment.ignore:
        return False
    if "Module dependencies" in comment.description.full:
        return False
    return not ctx.string.startswith("module.exports")


def _signature(comment: Comment, ctx: CodeContext) -> str:
    if ctx.type == "function":
        return f"{ctx.name}({_params(comment)})"
    if ctx.type == "method":
        owner: Optional[str] = ctx.scope.owner if ctx.scope else None
        prefix = f"{owner}." if owner else ""
        return f"{prefix}{ctx.name}({_params(comment)})"
    return ctx.string


def _params(comment: Comment) -> str:
    params = []
    for tag in comment.tags:
        if tag.type != "param":
            continue
        types = "|".join(tag.types or [])
        params.append(f"{tag.name}:{types}" if types else tag.name or "")
    return ", ".join(params)


def _indent(text: str) -> str:
    return "\n".join(f"  {line}" if line else line for line in text.split("\n"))


def _unique_slug(title: str, seen: Dict[str, int]) -> str:
    slug = title.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s", "-", slug).strip("-")
    count = seen.get(slug, 0)
    seen[slug] = count + 1
    return slug if count == 0 else f"{slug}-{count}"


def render_api(comments: Iterable[Comment]) -> str:
    """Render the markdown API reference for ``comments``."""
    return ApiDocBuilder().build(comments)


__all__ = ["ApiDocBuilder", "ApiEntry", "render_api"]
