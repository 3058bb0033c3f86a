from typing import Protocol, List, Optional

from core import Issue

LIST_SCOPES = ("ready", "open", "all")


class IssueTracker(Protocol):
    def list_issues(self, scope: str = "ready", limit: int = 200, sort: str = "priority") -> List[Issue]:
        ...

    def show_issue(self, issue_id: str) -> Issue:
        ...

    def update_issue(
        self,
        issue_id: str,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[str] = None,
        priority: Optional[int] = None,
    ) -> None:
        ...
