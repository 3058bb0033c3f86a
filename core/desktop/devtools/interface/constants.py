"""Interface-level constants for the beads TUI."""

from core.desktop.devtools.interface.constants_i18n import LANG_PACK  # noqa: F401

LIST_VISIBLE_ROWS = 10
DESCRIPTION_PREVIEW_HEIGHT = 7
DESCRIPTION_MAX_LINES = 100
EDIT_DESCRIPTION_ROWS = 5
RULE_WIDTH = 50

SCOPE_TITLE_KEYS = {
    "ready": "TITLE_READY",
    "open": "TITLE_OPEN",
    "all": "TITLE_ALL",
}

DESCRIPTION_PART_SEPARATOR = " • "
