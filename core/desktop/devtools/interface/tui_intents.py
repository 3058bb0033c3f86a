"""Keystroke -> intent resolution for the issue list and the edit form.

Both resolvers are pure: they look at the raw key data and a small state
snapshot and never touch the session. Rule order is significant; the first
matching rule wins.
"""

from dataclasses import dataclass
from typing import Any

from core import parse_priority_key
from core.desktop.devtools.interface.tui_keys import (
    CTRL_C,
    CTRL_F,
    CTRL_Q,
    is_printable,
    is_printable_text,
    matches_key,
)

CANCEL = "cancel"
SEARCH_START = "search_start"
SEARCH_APPLY = "search_apply"
SEARCH_BACKSPACE = "search_backspace"
SEARCH_APPEND = "search_append"
MOVE_SELECTION = "move_selection"
WORK = "work"
SUBMIT = "submit"
EDIT = "edit"
TOGGLE_STATUS = "toggle_status"
SET_PRIORITY = "set_priority"
SCROLL_DESCRIPTION = "scroll_description"
DELEGATE = "delegate"

# Field-level intents (focused title/description)
CANCEL_FIELD = "cancel_field"
NEXT_FOCUS = "next_focus"
INSERT_TEXT = "insert_text"
INSERT_NEWLINE = "insert_newline"
DELETE_BACKWARD = "delete_backward"
MOVE_HORIZONTAL = "move_horizontal"
MOVE_VERTICAL = "move_vertical"

NAV_UP_KEYS = ("w", "W")
NAV_DOWN_KEYS = ("s", "S")
EDIT_KEYS = ("e", "E")
SCROLL_DOWN_KEY = "j"
SCROLL_UP_KEY = "k"


@dataclass(frozen=True)
class Intent:
    kind: str
    value: Any = None


@dataclass(frozen=True)
class ListControllerState:
    searching: bool = False
    allow_search: bool = True
    allow_priority: bool = True
    cancel_key: str = CTRL_Q
    search_key: str = CTRL_F
    editing: bool = False


def resolve_list_intent(data: str, state: ListControllerState) -> Intent:
    if data == state.cancel_key or matches_key(data, "escape"):
        return Intent(CANCEL)

    if state.searching:
        if matches_key(data, "enter"):
            return Intent(SEARCH_APPLY)
        if matches_key(data, "backspace"):
            return Intent(SEARCH_BACKSPACE)
        if is_printable(data):
            return Intent(SEARCH_APPEND, data)
        return Intent(DELEGATE)

    if state.allow_search and data == state.search_key:
        return Intent(SEARCH_START)

    if data in NAV_UP_KEYS:
        return Intent(MOVE_SELECTION, -1)
    if data in NAV_DOWN_KEYS:
        return Intent(MOVE_SELECTION, 1)

    if matches_key(data, "enter"):
        return Intent(SUBMIT if state.editing else WORK)
    if data in EDIT_KEYS:
        return Intent(EDIT)

    if matches_key(data, "space"):
        return Intent(TOGGLE_STATUS)

    if state.allow_priority:
        priority = parse_priority_key(data)
        if priority is not None:
            return Intent(SET_PRIORITY, priority)

    if data in (SCROLL_DOWN_KEY, SCROLL_UP_KEY):
        return Intent(SCROLL_DESCRIPTION, 1 if data == SCROLL_DOWN_KEY else -1)

    return Intent(DELEGATE)


def resolve_field_intent(data: str, focus: str) -> Intent:
    """Resolve a key for a focused text field ('title' or 'desc')."""
    multiline = focus == "desc"
    if matches_key(data, "escape"):
        return Intent(CANCEL_FIELD)
    if data in (CTRL_C, CTRL_Q):
        return Intent(CANCEL)
    if matches_key(data, "tab"):
        return Intent(NEXT_FOCUS)
    if matches_key(data, "ctrl+s"):
        return Intent(SUBMIT)
    if matches_key(data, "enter"):
        return Intent(INSERT_NEWLINE if multiline else SUBMIT)
    if matches_key(data, "backspace"):
        return Intent(DELETE_BACKWARD)
    if matches_key(data, "left"):
        return Intent(MOVE_HORIZONTAL, -1)
    if matches_key(data, "right"):
        return Intent(MOVE_HORIZONTAL, 1)
    if multiline and matches_key(data, "up"):
        return Intent(MOVE_VERTICAL, -1)
    if multiline and matches_key(data, "down"):
        return Intent(MOVE_VERTICAL, 1)
    text = data.replace("\r\n", "\n").replace("\r", "\n") if len(data) > 1 else data
    if is_printable_text(text):
        return Intent(INSERT_TEXT, text)
    return Intent(DELEGATE)


__all__ = [
    "Intent",
    "ListControllerState",
    "resolve_list_intent",
    "resolve_field_intent",
    "CANCEL",
    "SEARCH_START",
    "SEARCH_APPLY",
    "SEARCH_BACKSPACE",
    "SEARCH_APPEND",
    "MOVE_SELECTION",
    "WORK",
    "SUBMIT",
    "EDIT",
    "TOGGLE_STATUS",
    "SET_PRIORITY",
    "SCROLL_DESCRIPTION",
    "DELEGATE",
    "CANCEL_FIELD",
    "NEXT_FOCUS",
    "INSERT_TEXT",
    "INSERT_NEWLINE",
    "DELETE_BACKWARD",
    "MOVE_HORIZONTAL",
    "MOVE_VERTICAL",
]
