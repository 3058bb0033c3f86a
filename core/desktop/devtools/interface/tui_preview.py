"""Description preview: greedy word wrap plus a scrollable fixed-height window."""

from typing import List, Optional, Tuple

from core import Issue
from core.desktop.devtools.interface.constants import DESCRIPTION_MAX_LINES, DESCRIPTION_PREVIEW_HEIGHT
from core.desktop.devtools.interface.tui_display import display_width, split_display

NO_DESCRIPTION = "(no description)"
TRUNCATED_MARKER = "..."


def wrap_text(text: str, width: int) -> List[str]:
    """Greedy word wrap on spaces; words wider than ``width`` are hard-split."""
    width = max(1, width)
    if not text:
        return [""]
    lines: List[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if display_width(candidate) <= width:
            current = candidate
            continue
        if current:
            lines.append(current)
        chunks = split_display(word, width) or [""]
        lines.extend(chunks[:-1])
        current = chunks[-1]
    if current:
        lines.append(current)
    return lines


def description_lines(
    description: Optional[str],
    max_lines: int = DESCRIPTION_MAX_LINES,
    placeholder: str = NO_DESCRIPTION,
) -> List[str]:
    if not description or not description.strip():
        return [placeholder]
    all_lines = description.replace("\r\n", "\n").split("\n")
    lines = all_lines[:max_lines]
    if len(all_lines) > max_lines:
        lines.append(TRUNCATED_MARKER)
    return lines


def wrap_description(description: Optional[str], width: int, placeholder: str = NO_DESCRIPTION) -> List[str]:
    wrapped: List[str] = []
    for line in description_lines(description, placeholder=placeholder):
        wrapped.extend(wrap_text(line, width))
    return wrapped


def max_scroll(total_lines: int, height: int) -> int:
    return max(0, total_lines - height)


def window(lines: List[str], offset: int, height: int) -> List[str]:
    """Exactly ``height`` lines starting at ``offset``, blank-padded."""
    visible = list(lines[offset : offset + height])
    visible.extend([""] * (height - len(visible)))
    return visible


class DescriptionPreview:
    """Scroll state for the selected issue's description.

    Wrapping is cached per (issue, description, width); the scroll offset
    resets whenever a different issue is selected.
    """

    def __init__(self, height: int = DESCRIPTION_PREVIEW_HEIGHT, placeholder: str = NO_DESCRIPTION) -> None:
        self.height = height
        self.placeholder = placeholder
        self.width = 80
        self.issue_id: Optional[str] = None
        self.description: Optional[str] = None
        self.offset = 0
        self._cache_key: Optional[Tuple[Optional[str], Optional[str], int]] = None
        self._wrapped: List[str] = []

    def select(self, issue: Optional[Issue]) -> None:
        issue_id = issue.id if issue else None
        if issue_id != self.issue_id:
            self.offset = 0
        self.issue_id = issue_id
        self.description = issue.description if issue else None
        self._clamp()

    def set_width(self, width: int) -> None:
        self.width = max(1, width)
        self._clamp()

    @property
    def wrapped(self) -> List[str]:
        if self.issue_id is None:
            return []
        key = (self.issue_id, self.description, self.width)
        if key != self._cache_key:
            self._wrapped = wrap_description(self.description, self.width, self.placeholder)
            self._cache_key = key
        return self._wrapped

    def scroll(self, delta: int) -> None:
        self.offset += delta
        self._clamp()

    def _clamp(self) -> None:
        self.offset = max(0, min(self.offset, max_scroll(len(self.wrapped), self.height)))

    def visible_lines(self) -> List[str]:
        return window(self.wrapped, self.offset, self.height)


__all__ = [
    "NO_DESCRIPTION",
    "TRUNCATED_MARKER",
    "wrap_text",
    "description_lines",
    "wrap_description",
    "max_scroll",
    "window",
    "DescriptionPreview",
]
