"""Detection of owner blocks whose shorthand members lack an explicit owner."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..models import ScopeBlock


@dataclass(frozen=True)
class _BlockRule:
    """Open/close marker pair; ``open`` captures indentation and owner name."""

    open: re.Pattern[str]
    close: re.Pattern[str]


_BLOCK_RULES: tuple[_BlockRule, ...] = (
    # Widget.prototype = { ... };
    _BlockRule(
        open=re.compile(r"^(?P<indent>[ \t]*)(?P<name>[\w$.]+)\.prototype = \{", re.MULTILINE),
        close=re.compile(r"^(?P<indent>[ \t]*)\};", re.MULTILINE),
    ),
    # _.extend(Widget.prototype, { ... });
    _BlockRule(
        open=re.compile(
            r"^(?P<indent>[ \t]*)_\.extend\((?P<name>[\w$.]+)\.prototype, \{", re.MULTILINE
        ),
        close=re.compile(r"^(?P<indent>[ \t]*)\}\);", re.MULTILINE),
    ),
)


def detect_scope_blocks(source: str) -> List[ScopeBlock]:
    """Return every owner block in ``source``, grouped by rule in source order."""
    blocks: List[ScopeBlock] = []
    for rule in _BLOCK_RULES:
        blocks.extend(_detect(rule, source))
    return blocks


def _detect(rule: _BlockRule, source: str) -> Iterable[ScopeBlock]:
    for match in rule.open.finditer(source):
        indentation = len(match.group("indent"))
        start = match.start()
        end = match.end()
        for close in rule.close.finditer(source, start):
            if len(close.group("indent")) == indentation:
                end = close.end()
                break
        yield ScopeBlock(name=match.group("name").strip(), start=start, end=end)


def find_scope_owner(offset: int, blocks: Sequence[ScopeBlock]) -> Optional[str]:
    """Name of the first block containing ``offset``, or None."""
    for block in blocks:
        if block.contains(offset):
            return block.name
    return None


__all__ = ["detect_scope_blocks", "find_scope_owner"]
