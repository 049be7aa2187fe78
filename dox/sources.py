"""Collection of source files handed to the comment parser."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .logging import get_logger

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "node_modules",
    "bower_components",
    "__pycache__",
    ".idea",
}

_logger = get_logger("sources")


class SourceError(RuntimeError):
    """Raised when a requested source path cannot be read."""


@dataclass
class ExcludeRule:
    """Glob exclusion from .dox.yml; patterns with a slash match the whole path."""

    pattern: str
    directory_only: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        if self.has_slash:
            return fnmatchcase(rel_path, self.pattern)
        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def _build_exclude_rule(pattern: str) -> ExcludeRule | None:
    pattern = pattern.strip()
    directory_only = pattern.endswith("/")
    pattern = pattern.rstrip("/").lstrip("/")
    if not pattern:
        return None
    return ExcludeRule(pattern=pattern, directory_only=directory_only, has_slash="/" in pattern)


@dataclass
class SourceFile:
    """A source file and its text, addressed relative to the walk root."""

    path: Path
    relative: str
    text: str


class SourceCollector:
    """Resolves CLI paths into source files, walking directories by extension."""

    def __init__(self, extensions: Sequence[str] = (".js",), exclude_paths: Sequence[str] = ()) -> None:
        self.extensions = tuple(ext.lower() for ext in extensions)
        self._rules: List[ExcludeRule] = [
            rule for rule in (_build_exclude_rule(p) for p in exclude_paths) if rule is not None
        ]

    def collect(self, paths: Sequence[str]) -> List[SourceFile]:
        files: List[SourceFile] = []
        for raw in paths:
            path = Path(raw).expanduser()
            if path.is_dir():
                root = path.resolve()
                for candidate in self._iter_dir(root):
                    files.append(self._read(candidate, candidate.relative_to(root).as_posix()))
            elif path.is_file():
                files.append(self._read(path, path.as_posix()))
            else:
                raise SourceError(f"Source path not found: {raw}")
        _logger.debug("Collected %d source file(s)", len(files))
        return files

    def _excluded(self, rel_path: str, is_dir: bool) -> bool:
        return any(rule.matches(rel_path, is_dir) for rule in self._rules)

    def _iter_dir(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            dirnames[:] = sorted(
                name
                for name in dirnames
                if name not in _EXCLUDED_DIRS
                and not self._excluded(f"{rel_dir}/{name}" if rel_dir else name, True)
            )

            for filename in sorted(filenames):
                if not filename.lower().endswith(self.extensions):
                    continue
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if self._excluded(rel_path, False):
                    continue
                yield current_dir / filename

    @staticmethod
    def _read(path: Path, relative: str) -> SourceFile:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(f"Unable to read {path}: {exc}") from exc
        return SourceFile(path=path, relative=relative, text=text)


__all__ = ["SourceCollector", "SourceError", "SourceFile"]
