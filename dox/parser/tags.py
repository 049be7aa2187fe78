"""Parsing of ``@tag`` annotation lines."""

from __future__ import annotations

import re
from typing import Callable, Dict, List

from ..models import Tag

_TYPE_SEPARATOR = re.compile(r" *[|,/] *")
_EXAMPLE_MARKER = re.compile(r"^@example[ \t]*\n?")


def parse_tag_types(text: str) -> List[str]:
    """Split a ``{A|B, C/D}`` type expression into bare type names."""
    text = text.strip()
    if text.startswith("{"):
        text = text[1:]
    if text.endswith("}"):
        text = text[:-1]
    return [part.strip() for part in _TYPE_SEPARATOR.split(text) if part.strip()]


def _take_types(parts: List[str]) -> List[str]:
    """Consume the leading type expression from ``parts``.

    A token opening with ``{`` keeps absorbing tokens until one closes with
    ``}``, so ``{Array of String}`` survives whitespace splitting.
    """
    if not parts:
        return []
    tokens = [parts.pop(0)]
    if tokens[0].startswith("{"):
        while not tokens[-1].endswith("}") and parts:
            tokens.append(parts.pop(0))
    return parse_tag_types(" ".join(tokens))


def _take(parts: List[str]) -> str:
    return parts.pop(0) if parts else ""


def _param(tag: Tag, parts: List[str], _: str) -> None:
    tag.types = _take_types(parts)
    tag.name = _take(parts)
    if parts and parts[0] == "-":
        parts.pop(0)
    tag.description = " ".join(parts)


def _return(tag: Tag, parts: List[str], _: str) -> None:
    tag.types = _take_types(parts)
    tag.description = " ".join(parts)


def _type(tag: Tag, parts: List[str], _: str) -> None:
    tag.types = _take_types(parts)


def _throws(tag: Tag, parts: List[str], _: str) -> None:
    tag.types = _take_types(parts)
    tag.description = " ".join(parts)


def _see(tag: Tag, parts: List[str], text: str) -> None:
    if "http" in text:
        tag.title = parts.pop(0) if len(parts) > 1 else ""
        tag.url = " ".join(parts)
    else:
        tag.local = " ".join(parts)


def _api(tag: Tag, parts: List[str], _: str) -> None:
    tag.visibility = _take(parts)


def _member_of(tag: Tag, parts: List[str], _: str) -> None:
    tag.parent = _take(parts)


def _augments(tag: Tag, parts: List[str], _: str) -> None:
    tag.other_class = _take(parts)


def _borrows(tag: Tag, parts: List[str], _: str) -> None:
    other, _sep, this = " ".join(parts).partition(" as ")
    tag.other_member_name = other
    tag.this_member_name = this


def _example(tag: Tag, _: List[str], text: str) -> None:
    tag.string = _EXAMPLE_MARKER.sub("", text, count=1).rstrip()


def _generic(tag: Tag, parts: List[str], _: str) -> None:
    tag.string = " ".join(parts)


_TAG_HANDLERS: Dict[str, Callable[[Tag, List[str], str], None]] = {
    "param": _param,
    "return": _return,
    "type": _type,
    "throws": _throws,
    "see": _see,
    "api": _api,
    "memberOf": _member_of,
    "augments": _augments,
    "borrows": _borrows,
    "example": _example,
}


def parse_tag(text: str) -> Tag:
    """Parse a tag line such as ``@param {Array} name description``.

    Missing pieces come back as empty strings; an unknown tag keeps its
    remaining words in ``string``.
    """
    parts = text.split()
    keyword = parts.pop(0) if parts else ""
    tag = Tag(type=keyword.replace("@", "", 1))
    handler = _TAG_HANDLERS.get(tag.type, _generic)
    handler(tag, parts, text)
    return tag


__all__ = ["parse_tag", "parse_tag_types"]
