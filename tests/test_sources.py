"""Tests for dox.sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from dox.sources import SourceCollector, SourceError


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_collects_sources_by_extension(tmp_path: Path) -> None:
    _write(tmp_path / "lib" / "a.js", "var a;\n")
    _write(tmp_path / "lib" / "nested" / "b.js", "var b;\n")
    _write(tmp_path / "lib" / "notes.md", "# Notes\n")
    _write(tmp_path / "node_modules" / "dep" / "index.js", "var dep;\n")

    files = SourceCollector().collect([str(tmp_path)])

    assert [file.relative for file in files] == ["lib/a.js", "lib/nested/b.js"]
    assert files[0].text == "var a;\n"


def test_exclude_patterns(tmp_path: Path) -> None:
    _write(tmp_path / "app.js", "var app;\n")
    _write(tmp_path / "app.min.js", "var app;\n")
    _write(tmp_path / "vendor" / "jquery.js", "var $;\n")

    collector = SourceCollector(exclude_paths=["vendor/", "*.min.js"])
    files = collector.collect([str(tmp_path)])

    assert [file.relative for file in files] == ["app.js"]


def test_explicit_file_is_always_read(tmp_path: Path) -> None:
    target = tmp_path / "script.txt"
    _write(target, "var s;\n")

    files = SourceCollector().collect([str(target)])

    assert len(files) == 1
    assert files[0].path == target


def test_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(SourceError):
        SourceCollector().collect([str(tmp_path / "missing.js")])
