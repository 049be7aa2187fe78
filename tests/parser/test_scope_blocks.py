"""Tests for owner block detection."""

from __future__ import annotations

from dox.models import ScopeBlock
from dox.parser.context import parse_code_context
from dox.parser.scope_blocks import detect_scope_blocks, find_scope_owner


def test_detects_prototype_object_literal() -> None:
    source = (
        "function Widget() {}\n"
        "\n"
        "Widget.prototype = {\n"
        "  render: function() {\n"
        "  },\n"
        "  size: 1\n"
        "};\n"
    )
    blocks = detect_scope_blocks(source)

    assert len(blocks) == 1
    block = blocks[0]
    assert block.name == "Widget"
    assert source[block.start : block.end].startswith("Widget.prototype = {")
    assert source[block.start : block.end].endswith("};")
    assert block.end == len(source) - 1


def test_detects_extend_call() -> None:
    source = "_.extend(Widget.prototype, {\n  show: function() {}\n});\n"
    blocks = detect_scope_blocks(source)

    assert [block.name for block in blocks] == ["Widget"]
    assert blocks[0].start == 0
    assert blocks[0].end == len(source) - 1


def test_close_marker_must_match_open_indentation() -> None:
    source = (
        "  Outer.prototype = {\n"
        "    Inner.prototype = {\n"
        "    };\n"
        "  };\n"
    )
    blocks = detect_scope_blocks(source)

    outer, inner = blocks
    assert outer.name == "Outer"
    assert outer.end == len(source) - 1
    assert inner.name == "Inner"
    assert source[inner.start : inner.end] == "    Inner.prototype = {\n    };"


def test_unterminated_block_ends_at_open_marker() -> None:
    source = "Widget.prototype = {\n  size: 1\n"
    blocks = detect_scope_blocks(source)

    assert blocks == [ScopeBlock(name="Widget", start=0, end=len("Widget.prototype = {"))]


def test_rules_are_concatenated_not_sorted() -> None:
    source = (
        "_.extend(First.prototype, {\n"
        "});\n"
        "Second.prototype = {\n"
        "};\n"
    )
    names = [block.name for block in detect_scope_blocks(source)]
    assert names == ["Second", "First"]


def test_no_blocks_in_plain_code() -> None:
    assert detect_scope_blocks("var a = 1;\nfunction b() {}\n") == []


def test_scope_owner_lookup_by_offset() -> None:
    blocks = [ScopeBlock(name="Widget", start=10, end=50)]

    assert find_scope_owner(30, blocks) == "Widget"
    assert find_scope_owner(10, blocks) == "Widget"
    assert find_scope_owner(50, blocks) == "Widget"
    assert find_scope_owner(60, blocks) is None
    assert find_scope_owner(30, []) is None


def test_first_containing_block_wins() -> None:
    blocks = [ScopeBlock(name="A", start=0, end=100), ScopeBlock(name="B", start=10, end=20)]
    assert find_scope_owner(15, blocks) == "A"


def test_shorthand_method_resolves_owner_from_blocks() -> None:
    blocks = [ScopeBlock(name="Widget", start=10, end=50)]

    inside = parse_code_context("show: function() {", 30, blocks)
    outside = parse_code_context("show: function() {", 60, blocks)

    assert inside is not None and inside.scope is not None
    assert inside.scope.owner == "Widget"
    assert inside.string == "Widget.show()"
    assert outside is not None and outside.scope is not None
    assert outside.scope.owner is None
    assert outside.string == "show()"
