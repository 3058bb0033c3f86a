from enum import Enum
from typing import Final, Tuple


class IssueStatus(Enum):
    OPEN = ("open", "status.open", "○")
    IN_PROGRESS = ("in_progress", "status.progress", "●")
    BLOCKED = ("blocked", "status.blocked", "⊘")
    DEFERRED = ("deferred", "status.deferred", "◌")
    CLOSED = ("closed", "status.closed", "✓")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def icon(self) -> str:
        return self.value[2]

    @classmethod
    def from_string(cls, value: str) -> "IssueStatus":
        code = normalize_issue_status(value)
        for status in cls:
            if status.code == code:
                return status
        raise ValueError(f"Invalid issue status: {value!r}")  # pragma: no cover - guarded above

    def __str__(self) -> str:
        return self.code


_CANONICAL_CODES: Final[frozenset] = frozenset(s.code for s in IssueStatus)

# Space toggles through these only; blocked/deferred re-enter at "open".
CYCLE_STATUSES: Final[Tuple[IssueStatus, ...]] = (
    IssueStatus.OPEN,
    IssueStatus.IN_PROGRESS,
    IssueStatus.CLOSED,
)


def normalize_issue_status(value: str) -> str:
    """Normalize status input to the tracker's status code.

    Canonical codes: open, in_progress, blocked, deferred, closed.
    Case and separators are forgiven ("In Progress", "in-progress").
    """
    token = (value or "").strip().lower().replace("-", "_").replace(" ", "_")
    if token in _CANONICAL_CODES:
        return token
    raise ValueError(f"Invalid issue status: {value!r}")


def cycle_status(current: IssueStatus) -> IssueStatus:
    """Next status for the quick toggle: open -> in_progress -> closed -> open."""
    if current not in CYCLE_STATUSES:
        return IssueStatus.OPEN
    idx = CYCLE_STATUSES.index(current)
    return CYCLE_STATUSES[(idx + 1) % len(CYCLE_STATUSES)]


__all__ = ["IssueStatus", "CYCLE_STATUSES", "normalize_issue_status", "cycle_status"]
