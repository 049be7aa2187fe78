"""Core data models shared across dox components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Attribute name -> serialized key for Tag fields.
_TAG_KEYS = (
    ("types", "types"),
    ("name", "name"),
    ("description", "description"),
    ("title", "title"),
    ("url", "url"),
    ("local", "local"),
    ("visibility", "visibility"),
    ("parent", "parent"),
    ("other_class", "otherClass"),
    ("other_member_name", "otherMemberName"),
    ("this_member_name", "thisMemberName"),
    ("string", "string"),
)


@dataclass
class Tag:
    """One ``@``-prefixed annotation parsed from a comment.

    Only the fields relevant to ``type`` are populated; the rest stay ``None``
    and are left out of :meth:`to_dict`.
    """

    type: str
    types: Optional[List[str]] = None
    name: Optional[str] = None
    description: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    local: Optional[str] = None
    visibility: Optional[str] = None
    parent: Optional[str] = None
    other_class: Optional[str] = None
    other_member_name: Optional[str] = None
    this_member_name: Optional[str] = None
    string: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        for attr, key in _TAG_KEYS:
            value = getattr(self, attr)
            if value is not None:
                data[key] = list(value) if isinstance(value, list) else value
        return data


@dataclass
class Description:
    """Description text split into summary (first paragraph) and body."""

    full: str = ""
    summary: str = ""
    body: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"full": self.full, "summary": self.summary, "body": self.body}


@dataclass(frozen=True)
class Scope:
    """Owner of a method or property; ``owner`` is None when unresolved."""

    owner: Optional[str]
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return {"owner": self.owner, "type": self.type}


@dataclass(frozen=True)
class CodeContext:
    """What a comment documents, derived from the first line of code after it."""

    type: str
    name: str
    string: str
    scope: Optional[Scope] = None
    value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type, "name": self.name, "string": self.string}
        if self.scope is not None:
            data["scope"] = self.scope.to_dict()
        if self.value is not None:
            data["value"] = self.value
        return data


@dataclass(frozen=True)
class ScopeBlock:
    """Half-open character span of an owner block such as ``Foo.prototype = {``."""

    name: str
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset <= self.end


@dataclass
class Comment:
    """A parsed documentation comment plus the code it precedes."""

    tags: List[Tag] = field(default_factory=list)
    description: Description = field(default_factory=Description)
    is_private: bool = False
    ignore: bool = False
    code: Optional[str] = None
    context: Optional[CodeContext] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "tags": [tag.to_dict() for tag in self.tags],
            "description": self.description.to_dict(),
            "isPrivate": self.is_private,
            "ignore": self.ignore,
        }
        if self.code is not None:
            data["code"] = self.code
            data["ctx"] = self.context.to_dict() if self.context is not None else None
        return data


__all__ = ["CodeContext", "Comment", "Description", "Scope", "ScopeBlock", "Tag"]
