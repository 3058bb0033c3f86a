"""Application-level issue service over the remote tracker command."""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional

from application.ports import LIST_SCOPES, IssueTracker
from core import Issue, IssueStatus, WriteError

Notify = Callable[[str, str], None]

logger = logging.getLogger("beads_tui.sync")


def _wire_value(value: Any) -> Any:
    if isinstance(value, IssueStatus):
        return value.code
    return value


class IssueManager:
    """Fetches issues and pushes field updates.

    Blocking calls (`list_issues`, `show_issue`, `update_issue`) raise the
    tracker's errors to the caller. `push_update` is fire-and-forget: it runs on
    a single background writer, never retries, and reports failures through
    `notify` only.
    """

    def __init__(
        self,
        tracker: IssueTracker,
        notify: Optional[Notify] = None,
        executor: Optional[Executor] = None,
        limit: int = 200,
    ) -> None:
        self.tracker = tracker
        self.notify: Notify = notify or (lambda message, level: None)
        self.limit = limit
        self._executor = executor
        self._owns_executor = executor is None

    @property
    def executor(self) -> Executor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="bd-write")
        return self._executor

    def list_issues(self, scope: str = "ready") -> List[Issue]:
        if scope not in LIST_SCOPES:
            raise ValueError(f"Unknown list scope: {scope!r}")
        issues = self.tracker.list_issues(scope, limit=self.limit, sort="priority")
        logger.debug("loaded %d issues (%s)", len(issues), scope)
        return issues

    def show_issue(self, issue_id: str) -> Issue:
        return self.tracker.show_issue(issue_id)

    def update_issue(self, issue_id: str, **fields: Any) -> None:
        payload: Dict[str, Any] = {name: _wire_value(value) for name, value in fields.items()}
        self.tracker.update_issue(issue_id, **payload)

    def push_update(self, issue_id: str, **fields: Any) -> Future:
        future = self.executor.submit(self.update_issue, issue_id, **fields)
        future.add_done_callback(lambda f: self._report_push(issue_id, fields, f))
        return future

    def _report_push(self, issue_id: str, fields: Dict[str, Any], future: Future) -> None:
        exc = future.exception()
        if exc is None:
            return
        names = ", ".join(sorted(fields))
        logger.warning("Update of %s (%s) failed: %s", issue_id, names, exc)
        if isinstance(exc, WriteError):
            self.notify(f"{issue_id}: {exc}", "error")
        else:
            self.notify(f"{issue_id}: update failed ({exc})", "error")

    def shutdown(self, wait: bool = True) -> None:
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None


__all__ = ["IssueManager", "Notify"]
