"""Cursor-accurate editing over a flat string with embedded line breaks.

Every primitive takes and returns ``(buffer, cursor)``. The cursor is an offset
in ``[0, len(buffer)]``; incoming cursors are clamped first, so the invariant
holds after any sequence of calls.
"""

from dataclasses import dataclass
from typing import Tuple

TextState = Tuple[str, int]


def clamp_cursor(buffer: str, cursor: int) -> int:
    return max(0, min(cursor, len(buffer)))


def insert(buffer: str, cursor: int, text: str) -> TextState:
    cursor = clamp_cursor(buffer, cursor)
    return buffer[:cursor] + text + buffer[cursor:], cursor + len(text)


def delete_backward(buffer: str, cursor: int) -> TextState:
    cursor = clamp_cursor(buffer, cursor)
    if cursor == 0:
        return buffer, 0
    return buffer[: cursor - 1] + buffer[cursor:], cursor - 1


def move_horizontal(buffer: str, cursor: int, delta: int) -> TextState:
    return buffer, clamp_cursor(buffer, clamp_cursor(buffer, cursor) + delta)


def line_start(buffer: str, cursor: int) -> int:
    """Offset of the first character of the line containing ``cursor``."""
    return buffer.rfind("\n", 0, cursor) + 1


def line_end(buffer: str, cursor: int) -> int:
    """Offset of the line break ending the line containing ``cursor`` (or len)."""
    idx = buffer.find("\n", cursor)
    return len(buffer) if idx < 0 else idx


def _move_up(buffer: str, cursor: int) -> int:
    start = line_start(buffer, cursor)
    if start == 0:
        return cursor
    column = cursor - start
    prev_start = line_start(buffer, start - 1)
    prev_len = (start - 1) - prev_start
    return prev_start + min(column, prev_len)


def _move_down(buffer: str, cursor: int) -> int:
    start = line_start(buffer, cursor)
    column = cursor - start
    end = line_end(buffer, cursor)
    if end >= len(buffer):
        return cursor
    next_start = end + 1
    next_len = line_end(buffer, next_start) - next_start
    return next_start + min(column, next_len)


def move_vertical(buffer: str, cursor: int, delta: int) -> TextState:
    """Move ``abs(delta)`` lines up (negative) or down, keeping the column.

    The column is clamped to each target line's own length; moving past the
    first or last line leaves the cursor where it is.
    """
    cursor = clamp_cursor(buffer, cursor)
    step = _move_up if delta < 0 else _move_down
    for _ in range(abs(delta)):
        cursor = step(buffer, cursor)
    return buffer, cursor


def cursor_line_col(buffer: str, cursor: int) -> Tuple[int, int]:
    cursor = clamp_cursor(buffer, cursor)
    line = buffer.count("\n", 0, cursor)
    return line, cursor - line_start(buffer, cursor)


@dataclass
class FieldBuffer:
    """Editable text field. Single-line fields drop inserted line breaks."""

    text: str = ""
    cursor: int = 0
    multiline: bool = False

    def __post_init__(self) -> None:
        if not self.multiline:
            self.text = _single_line(self.text)
        self.cursor = clamp_cursor(self.text, self.cursor)

    def insert(self, text: str) -> None:
        if not self.multiline:
            text = _single_line(text)
        if text:
            self.text, self.cursor = insert(self.text, self.cursor, text)

    def insert_newline(self) -> None:
        if self.multiline:
            self.text, self.cursor = insert(self.text, self.cursor, "\n")

    def delete_backward(self) -> None:
        self.text, self.cursor = delete_backward(self.text, self.cursor)

    def move_horizontal(self, delta: int) -> None:
        self.text, self.cursor = move_horizontal(self.text, self.cursor, delta)

    def move_vertical(self, delta: int) -> None:
        if self.multiline:
            self.text, self.cursor = move_vertical(self.text, self.cursor, delta)

    def snapshot(self) -> TextState:
        return self.text, self.cursor

    def restore(self, state: TextState) -> None:
        self.text, cursor = state
        self.cursor = clamp_cursor(self.text, cursor)


def _single_line(text: str) -> str:
    return text.replace("\r", "").replace("\n", " ")


__all__ = [
    "TextState",
    "FieldBuffer",
    "clamp_cursor",
    "insert",
    "delete_backward",
    "move_horizontal",
    "move_vertical",
    "line_start",
    "line_end",
    "cursor_line_col",
]
