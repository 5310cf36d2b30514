#!/usr/bin/env python3
"""
Command line entry point for the full-screen terminal task list.

Tasks live in memory for the lifetime of the session. This module wires the
command line and the user config to TodoTUI.
"""

import argparse
import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError
from typing import List, Optional

from config import get_user_keymap, get_user_mono_select, get_user_theme
from ratatodo import __version__
from ratatodo.application.keymap import Keymap
from ratatodo.interface.constants import SUPPORTED_LANGS
from ratatodo.interface.tui_app import TodoTUI, cmd_tui
from ratatodo.interface.tui_themes import THEMES, DEFAULT_THEME

logger = logging.getLogger("ratatodo.cli")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(prog="ratatodo", description="Full-screen terminal task list")
    parser.add_argument("--theme", choices=sorted(THEMES), default=None, help=f"Colour theme (default: {DEFAULT_THEME})")
    parser.add_argument("--mono-select", action="store_true", default=None, help="Highlight the selected row without status colours")
    parser.add_argument("--lang", choices=SUPPORTED_LANGS, default=None, help="Interface language")
    parser.add_argument("--log-file", default=None, help="Write log records to this file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING", type=str.upper, help="Log level for --log-file")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def configure_logging(log_file: Optional[str], level: str) -> None:
    # The TUI owns the terminal, so records only go to a file.
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def resolve_theme(cli_theme: Optional[str]) -> str:
    theme = cli_theme or get_user_theme() or DEFAULT_THEME
    if theme not in THEMES:
        logger.warning("Unknown theme %r in config, using %s", theme, DEFAULT_THEME)
        return DEFAULT_THEME
    return theme


def resolve_keymap() -> Keymap:
    try:
        return Keymap.from_overrides(get_user_keymap())
    except ValueError as exc:
        logger.warning("Invalid keymap in config, using defaults: %s", exc)
        return Keymap()


def apply_user_config(args: argparse.Namespace) -> argparse.Namespace:
    """Fill options not given on the command line from the user config."""
    args.theme = resolve_theme(args.theme)
    if args.mono_select is None:
        args.mono_select = get_user_mono_select()
    args.keymap = resolve_keymap()
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("ratatodo"))
        except PackageNotFoundError:
            print(__version__)
        return 0
    configure_logging(args.log_file, args.log_level)
    apply_user_config(args)
    return cmd_tui(args)


__all__ = ["build_parser", "main", "apply_user_config", "configure_logging", "TodoTUI"]


if __name__ == "__main__":
    sys.exit(main())
