#!/usr/bin/env python3
"""
beads_app.py - command-line entry for the beads issue picker.

Parses arguments, wires logging and language overrides, then hands off to
the TUI.
"""

import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from typing import List, Optional

from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser
from core.desktop.devtools.interface.i18n import LANG_ENV

from .tui_app import BeadsTUI, cmd_tui
from .tui_themes import DEFAULT_THEME, THEMES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser():
    return build_cli_parser(cmd_tui, THEMES, DEFAULT_THEME)


def configure_logging(log_file: Optional[str]) -> None:
    """Attach a file handler to the ``beads_tui`` logger; the terminal belongs to the TUI."""
    path = log_file or os.getenv("BEADS_TUI_LOG")
    if not path:
        return
    handler = logging.FileHandler(os.path.expanduser(path), encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("beads_tui")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("beads-tui"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    configure_logging(getattr(args, "log_file", None))
    if getattr(args, "lang", None):
        os.environ[LANG_ENV] = args.lang
    return args.func(args)


__all__ = ["main", "build_parser", "configure_logging", "BeadsTUI"]


if __name__ == "__main__":
    sys.exit(main())
