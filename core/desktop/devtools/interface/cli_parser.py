"""CLI parser construction for the beads TUI."""

import argparse
from typing import Any, Callable, Mapping


def build_parser(cmd_tui: Callable[[Any], int], themes: Mapping[str, Any], default_theme: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beads-tui",
        description="beads-tui — pick, triage and edit beads issues",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "target",
        nargs="?",
        default="",
        help="issue id to edit, or a list scope: ready (default), open, all",
    )
    parser.add_argument("--theme", choices=list(themes.keys()), default=None, help=f"palette (default: {default_theme})")
    parser.add_argument("--bd", dest="bd", help="path to the bd binary")
    parser.add_argument("--timeout", type=float, help="seconds to wait for each bd call")
    parser.add_argument("--limit", type=int, help="max issues to load")
    parser.add_argument("--no-priority", dest="no_priority", action="store_true", help="disable 0-4 priority hotkeys")
    parser.add_argument("--no-search", dest="no_search", action="store_true", help="disable ctrl+f search")
    parser.add_argument("--log-file", dest="log_file", help="write debug log to this file")
    parser.add_argument("--lang", choices=["en", "ru"], help="interface language")
    parser.add_argument("--json", dest="as_json", action="store_true", help="print the issues as JSON instead of opening the TUI")
    parser.add_argument("--version", action="store_true", help="print version and exit")
    parser.set_defaults(func=cmd_tui)
    return parser
