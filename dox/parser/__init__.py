"""Comment extraction pipeline: scanner, comment/tag parsers and code context."""

from .comments import parse_comment, strip_comment_markers
from .context import parse_code_context
from .scanner import CommentScanner, ParseError, ParseOptions, parse_comments
from .scope_blocks import detect_scope_blocks, find_scope_owner
from .tags import parse_tag, parse_tag_types

__all__ = [
    "CommentScanner",
    "ParseError",
    "ParseOptions",
    "detect_scope_blocks",
    "find_scope_owner",
    "parse_code_context",
    "parse_comment",
    "parse_comments",
    "parse_tag",
    "parse_tag_types",
    "strip_comment_markers",
]
