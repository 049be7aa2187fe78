"""Single-pass scanner separating documentation comments from code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..logging import get_logger
from ..models import Comment, ScopeBlock
from .comments import Renderer, parse_comment, strip_comment_markers
from .context import parse_code_context
from .scope_blocks import detect_scope_blocks


class ParseError(ValueError):
    """Raised when the scanner is handed something that is not source text."""


@dataclass(frozen=True)
class ParseOptions:
    """Options accepted by :func:`parse_comments`."""

    raw: bool = False
    renderer: Optional[Renderer] = None


def normalize_newlines(source: str) -> str:
    return source.replace("\r\n", "\n").replace("\r", "\n")


class CommentScanner:
    """Walks source text once and emits one :class:`Comment` per block comment.

    Code between two block comments belongs to the earlier one. Line comments
    stay part of that code and never produce records of their own.
    """

    def __init__(self, options: Optional[ParseOptions] = None) -> None:
        self.options = options or ParseOptions()
        self._logger = get_logger("parser.scanner")

    def scan(self, source: str) -> List[Comment]:
        if not isinstance(source, str):
            raise ParseError("source text must be a string")

        source = normalize_newlines(source)
        blocks = detect_scope_blocks(source)
        comments: List[Comment] = []

        length = len(source)
        in_block = in_line = ignore = False
        buffer_start = 0
        index = 0
        while index < length:
            if in_block:
                if source.startswith("*/", index):
                    comment = self._build_comment(source[buffer_start:index])
                    comment.ignore = ignore
                    comments.append(comment)
                    in_block = ignore = False
                    index += 2
                    buffer_start = index
                    continue
            elif in_line:
                if source[index] == "\n":
                    in_line = False
            elif source.startswith("/*", index):
                if comments:
                    self._attach_code(comments[-1], source, buffer_start, index, blocks)
                index += 2
                ignore = source.startswith("!", index)
                if ignore:
                    index += 1
                in_block = True
                buffer_start = index
                continue
            elif source.startswith("//", index):
                in_line = True
                index += 2
                continue
            index += 1

        if in_block:
            self._logger.warning(
                "Unterminated block comment at offset %d; treating the rest of the source as comment",
                buffer_start,
            )
            comment = self._build_comment(source[buffer_start:])
            comment.ignore = ignore
            comments.append(comment)
            buffer_start = length

        if not comments:
            comments.append(Comment())

        self._attach_code(comments[-1], source, buffer_start, length, blocks)
        self._logger.debug(
            "Parsed %d comment(s) with %d scope block(s)", len(comments), len(blocks)
        )
        return comments

    def _build_comment(self, body: str) -> Comment:
        return parse_comment(
            strip_comment_markers(body),
            raw=self.options.raw,
            renderer=self.options.renderer,
        )

    @staticmethod
    def _attach_code(
        comment: Comment, source: str, start: int, end: int, blocks: Sequence[ScopeBlock]
    ) -> None:
        text = source[start:end]
        code = text.strip()
        if not code:
            return
        offset = start + len(text) - len(text.lstrip())
        comment.code = code
        comment.context = parse_code_context(code, offset, blocks)


def parse_comments(source: str, options: Optional[ParseOptions] = None) -> List[Comment]:
    """Parse every documentation comment in ``source``.

    Always returns at least one comment; source without comments yields a
    single empty comment carrying the code.
    """
    return CommentScanner(options).scan(source)


__all__ = ["CommentScanner", "ParseError", "ParseOptions", "normalize_newlines", "parse_comments"]
