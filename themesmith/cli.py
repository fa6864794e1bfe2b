"""Command-line entry point for themesmith.

Provides the interactive theme studio (`studio`) and a batch converter
(`convert`) that re-exports an existing theme file in every format.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
import textwrap
from typing import Callable

from .config import AppConfig, ConfigError, load_config
from .exchange import default_formats, import_path, write_archive
from .exchange import write_files
from .formats import ThemeFormatError
from .model import ThemeState

CONFIG_ATTR = "_config"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""

    parser = argparse.ArgumentParser(
        prog="themesmith",
        description=textwrap.dedent(
            """
            Author a syntax highlighting theme once and export it as a
            VS Code theme, a pandoc highlight style and a TextMate theme.
            """
        ).strip(),
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=(
            "Path to a YAML configuration file. Defaults to "
            "$THEMESMITH_CONFIG or ~/.config/themesmith/config.yaml."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command")

    studio_parser = subparsers.add_parser(
        "studio",
        help="Launch the interactive theme studio",
    )
    studio_parser.add_argument(
        "--theme",
        type=Path,
        default=None,
        help="Theme file or archive to load on start (overrides config).",
    )
    studio_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory exports are written to (overrides config).",
    )
    studio_parser.set_defaults(handler=_run_studio)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Re-export a theme file or archive in every format",
    )
    convert_parser.add_argument(
        "source",
        type=Path,
        help="Theme file (.tmTheme, .theme, -vscode.json) or .zip archive.",
    )
    convert_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory exports are written to (overrides config).",
    )
    convert_parser.add_argument(
        "--name",
        default=None,
        help="Rename the theme before exporting.",
    )
    convert_parser.add_argument(
        "--files",
        action="store_true",
        help="Write loose files instead of a single zip archive.",
    )
    convert_parser.set_defaults(handler=_run_convert)

    parser.set_defaults(
        command="studio",
        handler=_run_studio,
        theme=None,
        output_dir=None,
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point used by console scripts and ``python -m themesmith``."""

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.error(str(exc))

    setattr(args, CONFIG_ATTR, config)

    handler: Callable[[argparse.Namespace], int] = getattr(
        args,
        "handler",
        _run_studio,
    )

    return handler(args)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _run_studio(args: argparse.Namespace) -> int:
    config: AppConfig = getattr(args, CONFIG_ATTR)

    # Lazy import so the converter works without a terminal UI.
    try:
        from .ui.studio import run as run_studio
    except ImportError as exc:  # pragma: no cover - missing textual
        raise SystemExit(
            "The theme studio could not be loaded. Ensure the 'textual' "
            f"package is installed.\nDetails: {exc}"
        ) from exc

    return run_studio(
        output_dir=_resolve_output_dir(args, config),
        formats=default_formats(author=config.author),
        initial_theme=args.theme or config.theme,
    )


def _run_convert(args: argparse.Namespace) -> int:
    config: AppConfig = getattr(args, CONFIG_ATTR)
    formats = default_formats(author=config.author)
    state = ThemeState.default()

    if not args.source.exists():
        print(f"Theme file not found: {args.source}", file=sys.stderr)
        return 2

    try:
        result = import_path(args.source, state, formats)
    except ThemeFormatError as exc:
        print(f"Failed to import {args.source}: {exc}", file=sys.stderr)
        return 1

    if args.name:
        state.set_name(args.name)

    output_dir = _resolve_output_dir(args, config)
    try:
        if args.files:
            written = write_files(state, output_dir, formats)
        else:
            written = [write_archive(state, output_dir, formats)]
    except OSError as exc:
        print(f"Failed to write exports: {exc}", file=sys.stderr)
        return 1

    print(
        f"Imported {result.source} ({result.format_key}) as "
        f"'{state.get_name()}'"
    )
    for path in written:
        print(f"  wrote {path}")
    return 0


def _resolve_output_dir(args: argparse.Namespace, config: AppConfig) -> Path:
    return args.output_dir or config.export_dir


if __name__ == "__main__":
    raise SystemExit(main())
