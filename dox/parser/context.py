"""Classification of the code line that follows a comment."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..models import CodeContext, Scope, ScopeBlock
from .scope_blocks import find_scope_owner

_IDENT = r"[\w$]+"


@dataclass(frozen=True)
class _ContextRule:
    """A line shape and the context it produces; rules are tried in order."""

    kind: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str], Optional[str]], CodeContext]
    scoped: bool = False


def _function(match: re.Match[str], _: Optional[str]) -> CodeContext:
    name = match.group("name")
    return CodeContext(type="function", name=name, string=f"{name}()")


def _prototype_method(match: re.Match[str], _: Optional[str]) -> CodeContext:
    owner, name = match.group("owner"), match.group("name")
    return CodeContext(
        type="method",
        name=name,
        string=f"{owner}.prototype.{name}()",
        scope=Scope(owner=owner, type="instance"),
    )


def _prototype_property(match: re.Match[str], _: Optional[str]) -> CodeContext:
    owner, name = match.group("owner"), match.group("name")
    return CodeContext(
        type="property",
        name=name,
        string=f"{owner}.prototype.{name}",
        scope=Scope(owner=owner, type="instance"),
        value=match.group("value").strip(),
    )


def _member_string(owner: Optional[str], name: str) -> str:
    return f"{owner}.{name}" if owner else name


def _class_method(match: re.Match[str], _: Optional[str]) -> CodeContext:
    owner, name = match.group("owner"), match.group("name")
    return CodeContext(
        type="method",
        name=name,
        string=f"{_member_string(owner, name)}()",
        scope=Scope(owner=owner, type="class"),
    )


def _shorthand_method(match: re.Match[str], owner: Optional[str]) -> CodeContext:
    name = match.group("name")
    return CodeContext(
        type="method",
        name=name,
        string=f"{_member_string(owner, name)}()",
        scope=Scope(owner=owner, type="instance"),
    )


def _class_property(match: re.Match[str], _: Optional[str]) -> CodeContext:
    owner, name = match.group("owner"), match.group("name")
    return CodeContext(
        type="property",
        name=name,
        string=_member_string(owner, name),
        scope=Scope(owner=owner, type="class"),
        value=match.group("value").strip(),
    )


def _shorthand_property(match: re.Match[str], owner: Optional[str]) -> CodeContext:
    name = match.group("name")
    return CodeContext(
        type="property",
        name=name,
        string=_member_string(owner, name),
        scope=Scope(owner=owner, type="instance"),
        value=match.group("value").strip().rstrip(",").rstrip(),
    )


def _declaration(match: re.Match[str], _: Optional[str]) -> CodeContext:
    name = match.group("name")
    value = match.group("value") or ""
    return CodeContext(type="declaration", name=name, string=name, value=value.strip())


# Priority order matters: explicit owners beat shorthand forms, functions beat
# properties, and the bare declaration is the last resort.
CONTEXT_RULES: tuple[_ContextRule, ...] = (
    _ContextRule(
        "function statement",
        re.compile(rf"^function (?P<name>{_IDENT}) *\("),
        _function,
    ),
    _ContextRule(
        "function expression",
        re.compile(rf"^var *(?P<name>{_IDENT})[ \t]*=[ \t]*function"),
        _function,
    ),
    _ContextRule(
        "prototype method",
        re.compile(rf"^(?P<owner>{_IDENT})\.prototype\.(?P<name>{_IDENT})[ \t]*=[ \t]*function"),
        _prototype_method,
    ),
    _ContextRule(
        "prototype property",
        re.compile(
            rf"^(?P<owner>{_IDENT})\.prototype\.(?P<name>{_IDENT})[ \t]*=[ \t]*(?P<value>[^\n;]+)"
        ),
        _prototype_property,
    ),
    _ContextRule(
        "method",
        re.compile(rf"^(?P<owner>[\w$.]+)\.(?P<name>{_IDENT})[ \t]*=[ \t]*function"),
        _class_method,
    ),
    _ContextRule(
        "shorthand method",
        re.compile(rf"^(?P<name>{_IDENT})[ \t]*:[ \t]*function"),
        _shorthand_method,
        scoped=True,
    ),
    _ContextRule(
        "property",
        re.compile(rf"^(?P<owner>[\w$.]+)\.(?P<name>{_IDENT})[ \t]*=[ \t]*(?P<value>[^\n;]+)"),
        _class_property,
    ),
    _ContextRule(
        "shorthand property",
        re.compile(rf"^(?P<name>{_IDENT})[ \t]*:[ \t]*(?P<value>[^\n;]+)"),
        _shorthand_property,
        scoped=True,
    ),
    _ContextRule(
        "declaration",
        re.compile(rf"^var +(?P<name>{_IDENT})[ \t]*(?:=[ \t]*(?P<value>[^\n;]+))?"),
        _declaration,
    ),
)


def parse_code_context(
    code: str, offset: int = 0, blocks: Sequence[ScopeBlock] = ()
) -> Optional[CodeContext]:
    """Classify the first line of ``code``.

    ``offset`` is the position of that line in the scanned source; it is only
    used to resolve the owner of shorthand members against ``blocks``.
    Returns None when the line has no recognised declaration shape.
    """
    line = code.strip().split("\n", 1)[0]
    for rule in CONTEXT_RULES:
        match = rule.pattern.match(line)
        if match is None:
            continue
        owner = find_scope_owner(offset, blocks) if rule.scoped else None
        return rule.build(match, owner)
    return None


__all__ = ["CONTEXT_RULES", "parse_code_context"]
