"""Raw terminal key data as delivered by prompt_toolkit's KeyPress.data."""

from typing import Dict, FrozenSet

ESCAPE = "\x1b"
ENTER = "\r"
TAB = "\t"
SPACE = " "
CTRL_C = "\x03"
CTRL_F = "\x06"
CTRL_Q = "\x11"
CTRL_R = "\x12"
CTRL_S = "\x13"

KEY_SEQUENCES: Dict[str, FrozenSet[str]] = {
    "escape": frozenset({ESCAPE}),
    "enter": frozenset({"\r", "\n"}),
    "tab": frozenset({TAB}),
    "space": frozenset({SPACE}),
    "backspace": frozenset({"\x7f", "\x08"}),
    "up": frozenset({"\x1b[A", "\x1bOA"}),
    "down": frozenset({"\x1b[B", "\x1bOB"}),
    "right": frozenset({"\x1b[C", "\x1bOC"}),
    "left": frozenset({"\x1b[D", "\x1bOD"}),
    "pageup": frozenset({"\x1b[5~"}),
    "pagedown": frozenset({"\x1b[6~"}),
    "home": frozenset({"\x1b[H", "\x1bOH", "\x1b[1~", "\x1b[7~"}),
    "end": frozenset({"\x1b[F", "\x1bOF", "\x1b[4~", "\x1b[8~"}),
    "ctrl+c": frozenset({CTRL_C}),
    "ctrl+s": frozenset({CTRL_S}),
}


def matches_key(data: str, name: str) -> bool:
    return data in KEY_SEQUENCES.get(name, frozenset())


def is_printable(data: str) -> bool:
    """Single printable ASCII character."""
    return len(data) == 1 and 32 <= ord(data) < 127


def is_printable_text(data: str) -> bool:
    """Typed or pasted text: no control characters except line breaks and tabs."""
    if not data or data.startswith(ESCAPE):
        return False
    return all(ch in "\n\t" or (ch.isprintable() and ch != "\x7f") for ch in data)


__all__ = [
    "ESCAPE",
    "ENTER",
    "TAB",
    "SPACE",
    "CTRL_C",
    "CTRL_F",
    "CTRL_Q",
    "CTRL_R",
    "CTRL_S",
    "KEY_SEQUENCES",
    "matches_key",
    "is_printable",
    "is_printable_text",
]
