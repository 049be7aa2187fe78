"""Extract structured documentation records from JavaScript comments."""

from .models import CodeContext, Comment, Description, Scope, ScopeBlock, Tag
from .parser import (
    CommentScanner,
    ParseError,
    ParseOptions,
    detect_scope_blocks,
    parse_code_context,
    parse_comment,
    parse_comments,
    parse_tag,
    parse_tag_types,
)

__version__ = "0.1.0"

__all__ = [
    "CodeContext",
    "Comment",
    "CommentScanner",
    "Description",
    "ParseError",
    "ParseOptions",
    "Scope",
    "ScopeBlock",
    "Tag",
    "detect_scope_blocks",
    "parse_code_context",
    "parse_comment",
    "parse_comments",
    "parse_tag",
    "parse_tag_types",
]
