from .status import IssueStatus, CYCLE_STATUSES, cycle_status, normalize_issue_status
from .issue import (
    Issue,
    normalize_issue,
    short_id,
    priority_label,
    parse_priority_key,
    is_likely_issue_id,
    first_line,
    build_work_prompt,
)
from .errors import (
    BeadsError,
    FetchError,
    NotFoundError,
    ValidationError,
    WriteError,
    EmptyResultError,
)
from .filtering import matches_filter, filter_issues, apply_filter

__all__ = [
    "IssueStatus",
    "CYCLE_STATUSES",
    "cycle_status",
    "normalize_issue_status",
    "Issue",
    "normalize_issue",
    "short_id",
    "priority_label",
    "parse_priority_key",
    "is_likely_issue_id",
    "first_line",
    "build_work_prompt",
    # Errors
    "BeadsError",
    "FetchError",
    "NotFoundError",
    "ValidationError",
    "WriteError",
    "EmptyResultError",
    # Filtering
    "matches_filter",
    "filter_issues",
    "apply_filter",
]
