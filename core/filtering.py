"""Substring search over the issue list."""

from typing import Iterable, List

from .errors import EmptyResultError
from .issue import Issue


def matches_filter(issue: Issue, term: str) -> bool:
    """Case-insensitive substring match on title, description, id, then status."""
    needle = term.lower()
    return (
        needle in issue.title.lower()
        or needle in (issue.description or "").lower()
        or needle in issue.id.lower()
        or needle in issue.status.code.lower()
    )


def filter_issues(issues: Iterable[Issue], term: str) -> List[Issue]:
    """Stable filter; a blank term keeps everything in input order."""
    term = (term or "").strip()
    if not term:
        return list(issues)
    return [issue for issue in issues if matches_filter(issue, term)]


def apply_filter(issues: Iterable[Issue], term: str) -> List[Issue]:
    """Like filter_issues, but a non-blank term with no hits raises EmptyResultError."""
    visible = filter_issues(issues, term)
    if not visible and (term or "").strip():
        raise EmptyResultError(term.strip())
    return visible


__all__ = ["matches_filter", "filter_issues", "apply_filter"]
