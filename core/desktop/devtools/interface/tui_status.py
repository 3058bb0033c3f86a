"""Notifications and the status bar line."""

import time
from collections import deque
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Deque, List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

LEVEL_STYLES = {
    "info": "class:text.dim",
    "success": "class:icon.check",
    "warning": "class:icon.warn",
    "error": "class:icon.fail",
}

SPINNER_FRAMES: List[str] = ["⣿", "⡇", "⡏", "⡗", "⡟", "⡧", "⡯", "⡷", "⡿", "⢇", "⢏", "⢗", "⢟", "⢧", "⢯", "⢷", "⢿"]


@dataclass
class Notification:
    message: str
    level: str = "info"
    expires: float = 0.0


class Notifier:
    """Thread-safe notification queue; background writers report through it."""

    def __init__(self, ttl: float = 4.0, on_change: Optional[Callable[[], None]] = None, clock=time.time) -> None:
        self.ttl = ttl
        self.on_change = on_change
        self._clock = clock
        self._lock = Lock()
        self._items: Deque[Notification] = deque(maxlen=20)

    def notify(self, message: str, level: str = "info") -> None:
        ttl = self.ttl * 2 if level == "error" else self.ttl
        with self._lock:
            self._items.append(Notification(message, level, self._clock() + ttl))
        if self.on_change:
            self.on_change()

    def history(self) -> List[Notification]:
        with self._lock:
            return list(self._items)

    def current(self) -> Optional[Notification]:
        now = self._clock()
        with self._lock:
            for item in reversed(self._items):
                if item.expires > now:
                    return item
        return None


def build_status_text(tui) -> FormattedText:
    parts: List[Tuple[str, str]] = []
    pending = getattr(tui, "pending_label", "")
    if pending:
        frame = SPINNER_FRAMES[int(time.time() * 10) % len(SPINNER_FRAMES)]
        parts.append(("class:header", f"{frame} {pending}"))
    note = tui.notifier.current()
    if note:
        if parts:
            parts.append(("class:text.dim", " | "))
        parts.append((LEVEL_STYLES.get(note.level, "class:text"), note.message[:120]))
    if not parts:
        parts.append(("class:text.dim", ""))
    return FormattedText(parts)


__all__ = ["Notification", "Notifier", "build_status_text", "SPINNER_FRAMES", "LEVEL_STYLES"]
