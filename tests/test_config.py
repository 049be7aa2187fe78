"""Tests for dox.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from dox.config import ConfigError, DoxConfig, MarkdownConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, DoxConfig)
    assert config.root == tmp_path.resolve()
    assert config.raw is False
    assert config.output == "json"
    assert config.indent == 2
    assert config.extensions == [".js"]
    assert config.exclude_paths == []
    assert config.markdown == MarkdownConfig()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".dox.yml"
    config_file.write_text(
        """
raw: true
output: api
indent: 4
extensions: [js, ".mjs"]
exclude_paths:
  - "vendor/"
  - "*.min.js"
markdown:
  html: false
  typographer: "yes"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.raw is True
    assert config.output == "api"
    assert config.indent == 4
    assert config.extensions == [".js", ".mjs"]
    assert config.exclude_paths == ["vendor/", "*.min.js"]
    assert config.markdown == MarkdownConfig(html=False, typographer=True, breaks=False)


def test_load_config_ignores_mistyped_values(tmp_path: Path) -> None:
    (tmp_path / ".dox.yml").write_text("raw: maybe\nindent: wide\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.raw is False
    assert config.indent == 2


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".dox.yml").write_text("- raw\n- api\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_unknown_output(tmp_path: Path) -> None:
    (tmp_path / ".dox.yml").write_text("output: html\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".dox.yml").write_text("raw: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".dox.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).output == "json"
