import re
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from .errors import ValidationError
from .status import IssueStatus

PRIORITY_MIN = 0
PRIORITY_MAX = 4
UNKNOWN_PRIORITY_LABEL = "P?"

_ISSUE_ID_RE = re.compile(r"^[a-z0-9]+-[a-z0-9]+$", re.IGNORECASE)


@dataclass
class Issue:
    id: str
    title: str
    status: IssueStatus = IssueStatus.OPEN
    description: str = ""
    priority: Optional[int] = None
    issue_type: str = ""
    owner: str = ""
    created_at: str = ""
    updated_at: str = ""
    dependency_count: int = 0
    dependent_count: int = 0
    comment_count: int = 0

    @property
    def short_id(self) -> str:
        return short_id(self.id)

    def copy(self, **changes: Any) -> "Issue":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "status": self.status.code,
        }
        if self.description:
            data["description"] = self.description
        if self.priority is not None:
            data["priority"] = self.priority
        for key in ("issue_type", "owner", "created_at", "updated_at"):
            value = getattr(self, key)
            if value:
                data[key] = value
        data["dependency_count"] = self.dependency_count
        data["dependent_count"] = self.dependent_count
        data["comment_count"] = self.comment_count
        return data


def _coerce_priority(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid priority: {value!r}")
    if isinstance(value, str):
        token = value.strip().upper()
        if token.startswith("P"):
            token = token[1:]
        if not token.isdigit():
            raise ValidationError(f"Invalid priority: {value!r}")
        value = int(token)
    if not isinstance(value, int):
        raise ValidationError(f"Invalid priority: {value!r}")
    if not PRIORITY_MIN <= value <= PRIORITY_MAX:
        raise ValidationError(f"Priority out of range [0,4]: {value}")
    return value


def _coerce_count(value: Any) -> int:
    try:
        return max(0, int(value or 0))
    except (TypeError, ValueError):
        return 0


def normalize_issue(raw: Dict[str, Any]) -> Issue:
    """Build an Issue from the tracker's JSON record.

    Raises ValidationError on a blank id or title, an unknown status or a
    priority outside [0, 4].
    """
    if not isinstance(raw, dict):
        raise ValidationError(f"Issue record must be an object, got {type(raw).__name__}")
    issue_id = str(raw.get("id") or "").strip()
    if not issue_id:
        raise ValidationError("Issue id is required")
    title = str(raw.get("title") or "").strip()
    if not title:
        raise ValidationError(f"Issue {issue_id} has an empty title")
    try:
        status = IssueStatus.from_string(str(raw.get("status") or "open"))
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    return Issue(
        id=issue_id,
        title=title,
        status=status,
        description=str(raw.get("description") or ""),
        priority=_coerce_priority(raw.get("priority")),
        issue_type=str(raw.get("issue_type") or ""),
        owner=str(raw.get("owner") or raw.get("assignee") or ""),
        created_at=str(raw.get("created_at") or ""),
        updated_at=str(raw.get("updated_at") or ""),
        dependency_count=_coerce_count(raw.get("dependency_count")),
        dependent_count=_coerce_count(raw.get("dependent_count")),
        comment_count=_coerce_count(raw.get("comment_count")),
    )


def short_id(issue_id: str) -> str:
    """Issue id without its project prefix: 'bd-a1b2' -> 'a1b2'."""
    idx = issue_id.find("-")
    return issue_id[idx + 1 :] if idx >= 0 else issue_id


def priority_label(priority: Optional[int]) -> str:
    if priority is None:
        return UNKNOWN_PRIORITY_LABEL
    return f"P{priority}"


def parse_priority_key(data: str) -> Optional[int]:
    """Priority for a single ASCII digit key; any other data (including
    non-ASCII digits such as "²") is not a priority key."""
    if len(data) != 1 or not "0" <= data <= "9":
        return None
    value = ord(data) - ord("0")
    return value if PRIORITY_MIN <= value <= PRIORITY_MAX else None


def is_likely_issue_id(value: str) -> bool:
    return bool(_ISSUE_ID_RE.match(value or ""))


def first_line(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    for line in text.splitlines():
        line = line.strip()
        if line:
            return line
    return None


def build_work_prompt(issue: Issue) -> str:
    """Message handed to the follow-up agent when the user picks an issue to work on."""
    lines = [
        f"Work on Beads task {issue.id}: {issue.title}",
        "",
        f"Status: {issue.status.code}",
        f"Priority: {issue.priority if issue.priority is not None else 'unknown'}",
    ]
    if issue.description and issue.description.strip():
        lines.extend(["", "Context:", issue.description.strip()])
    return "\n".join(lines)


__all__ = [
    "Issue",
    "PRIORITY_MIN",
    "PRIORITY_MAX",
    "UNKNOWN_PRIORITY_LABEL",
    "normalize_issue",
    "short_id",
    "priority_label",
    "parse_priority_key",
    "is_likely_issue_id",
    "first_line",
    "build_work_prompt",
]
