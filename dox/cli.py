"""CLI entrypoint for the dox comment parser."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, TextIO

from .api import render_api
from .config import ConfigError, DoxConfig, load_config
from .logging import configure_logging, get_logger
from .parser import ParseError, ParseOptions, parse_comments
from .render import MarkdownRenderer
from .sources import SourceCollector, SourceError

_logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dox",
        description="Extract documentation comments from JavaScript source as JSON.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to parse (reads stdin when omitted).",
    )
    parser.add_argument(
        "-r",
        "--raw",
        action="store_true",
        default=None,
        help="Output description text without markdown rendering.",
    )
    parser.add_argument(
        "-a",
        "--api",
        action="store_true",
        help="Output a markdown API reference instead of JSON.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a .dox.yml file or the directory containing it.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation width (defaults to 2).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> DoxConfig:
    config = load_config(args.config if args.config is not None else Path.cwd())
    if args.raw is not None:
        config.raw = args.raw
    if args.api:
        config.output = "api"
    if args.indent is not None:
        config.indent = args.indent
    return config


def _parse_options(config: DoxConfig) -> ParseOptions:
    # The API reference is built from plain descriptions.
    if config.raw or config.output == "api":
        return ParseOptions(raw=True)
    markdown = config.markdown
    renderer = MarkdownRenderer(
        html=markdown.html, typographer=markdown.typographer, breaks=markdown.breaks
    )
    return ParseOptions(renderer=renderer)


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> None:
    """Parse the requested sources and write the configured output."""
    config = _resolve_config(args)
    options = _parse_options(config)

    if args.paths:
        collector = SourceCollector(config.extensions, config.exclude_paths)
        sources = [(source.relative, source.text) for source in collector.collect(args.paths)]
    else:
        sources = [("<stdin>", stdin.read())]

    results = []
    for name, text in sources:
        _logger.debug("Parsing %s", name)
        results.append((name, parse_comments(text, options)))

    if config.output == "api":
        stdout.write("".join(render_api(comments) for _, comments in results))
        return

    payload: Any
    if len(results) == 1:
        payload = [comment.to_dict() for comment in results[0][1]]
    else:
        payload = {name: [comment.to_dict() for comment in comments] for name, comments in results}
    stdout.write(json.dumps(payload, indent=config.indent or None))
    stdout.write("\n")


def main(argv: List[str] | None = None) -> None:
    """CLI entrypoint for dox."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        run(args, sys.stdin, sys.stdout)
    except (ConfigError, SourceError, ParseError) as exc:
        parser.exit(1, f"dox: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
