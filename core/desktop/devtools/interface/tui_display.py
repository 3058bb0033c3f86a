"""Display helpers: visible width, trimming and padding with Unicode width handling."""

import re

from wcwidth import wcwidth

_ANSI_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_SGR_RE.sub("", text)


def _char_width(ch: str) -> int:
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


def display_width(text: str) -> int:
    """Return visual width of text, ignoring ANSI colour codes."""
    return sum(_char_width(ch) for ch in strip_ansi(text))


def trim_display(text: str, width: int) -> str:
    """Trim text so visible width doesn't exceed width."""
    acc = []
    used = 0
    for ch in text:
        w = _char_width(ch)
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def split_display(text: str, width: int) -> list:
    """Hard-split text into chunks of at most ``width`` columns."""
    chunks = []
    current = ""
    used = 0
    for ch in text:
        w = _char_width(ch)
        if used + w > width and current:
            chunks.append(current)
            current = ""
            used = 0
        current += ch
        used += w
    if current:
        chunks.append(current)
    return chunks


__all__ = ["strip_ansi", "display_width", "trim_display", "split_display"]
