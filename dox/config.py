"""Configuration loading for dox (.dox.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".dox.yml"
OUTPUT_FORMATS = ("json", "api")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class MarkdownConfig:
    """Options for the markdown description renderer."""

    html: bool = True
    typographer: bool = False
    breaks: bool = False


@dataclass
class DoxConfig:
    """Represents the settings defined in .dox.yml."""

    root: Path
    raw: bool = False
    output: str = "json"
    indent: int = 2
    extensions: List[str] = field(default_factory=lambda: [".js"])
    exclude_paths: List[str] = field(default_factory=list)
    markdown: MarkdownConfig = field(default_factory=MarkdownConfig)


def load_config(config_path: Path) -> DoxConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DoxConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DoxConfig(root=root)

    raw = _as_bool(data.get("raw"))
    if raw is not None:
        config.raw = raw

    output = _as_str(data.get("output"))
    if output:
        output = output.lower()
        if output not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unsupported output format '{output}'; expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        config.output = output

    indent = _as_int(data.get("indent"))
    if indent is not None and indent >= 0:
        config.indent = indent

    extensions = _as_str_list(data.get("extensions"))
    if extensions:
        config.extensions = [ext if ext.startswith(".") else f".{ext}" for ext in extensions]

    config.exclude_paths = _as_str_list(data.get("exclude_paths"))

    markdown_data = _as_dict(data.get("markdown"))
    if markdown_data:
        markdown = MarkdownConfig()
        for name in ("html", "typographer", "breaks"):
            value = _as_bool(markdown_data.get(name))
            if value is not None:
                setattr(markdown, name, value)
        config.markdown = markdown

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "DoxConfig", "MarkdownConfig", "load_config"]
