from concurrent.futures import Future
from typing import Dict, List

import pytest

from core import Issue, IssueStatus, NotFoundError, WriteError


class FakeTracker:
    """In-memory stand-in for the bd command."""

    def __init__(self, issues=(), fail_fields=()):
        self.issues: List[Issue] = list(issues)
        self.fail_fields = set(fail_fields)
        self.updates: List[tuple] = []
        self.list_calls: List[tuple] = []
        self.show_calls: List[str] = []

    def list_issues(self, scope, limit=200, sort="priority"):
        self.list_calls.append((scope, limit, sort))
        return [issue.copy() for issue in self.issues]

    def show_issue(self, issue_id):
        self.show_calls.append(issue_id)
        for issue in self.issues:
            if issue.id == issue_id:
                return issue.copy()
        raise NotFoundError(issue_id)

    def update_issue(self, issue_id, **fields):
        for name in fields:
            if name in self.fail_fields:
                raise WriteError(f"bd update {issue_id} rejected {name}")
        self.updates.append((issue_id, dict(fields)))


class DeferredExecutor:
    """Executor that queues work until ``run_all`` is called."""

    def __init__(self):
        self.calls: List[tuple] = []

    def submit(self, fn, *args, **kwargs):
        future: Future = Future()
        self.calls.append((future, fn, args, kwargs))
        return future

    def run_all(self):
        calls, self.calls = self.calls, []
        for future, fn, args, kwargs in calls:
            try:
                future.set_result(fn(*args, **kwargs))
            except Exception as exc:  # forwarded to the future like a real executor
                future.set_exception(exc)

    def shutdown(self, wait=True):
        self.run_all()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("BEADS_TUI_CONFIG", str(tmp_path / "beads_tui_config.yaml"))
    monkeypatch.delenv("BEADS_TUI_LANG", raising=False)
    monkeypatch.delenv("BEADS_TUI_BD", raising=False)
    monkeypatch.delenv("BEADS_TUI_LOG", raising=False)


@pytest.fixture
def make_issue():
    def _make(issue_id="bd-1", title="Fix login", **fields) -> Issue:
        fields.setdefault("status", IssueStatus.OPEN)
        return Issue(id=issue_id, title=title, **fields)

    return _make


@pytest.fixture
def sample_issues(make_issue) -> List[Issue]:
    return [
        make_issue("bd-1", "Fix login", priority=1, issue_type="bug"),
        make_issue("bd-2", "Add docs", description="fix typo in README", priority=2),
        make_issue("bd-3", "Refactor parser", priority=3, status=IssueStatus.IN_PROGRESS),
    ]


@pytest.fixture
def tracker(sample_issues) -> FakeTracker:
    return FakeTracker(sample_issues)


@pytest.fixture
def executor() -> DeferredExecutor:
    return DeferredExecutor()


@pytest.fixture
def fake_tracker_cls():
    return FakeTracker


@pytest.fixture
def raw_records() -> List[Dict]:
    return [
        {"id": "bd-a1", "title": "First", "status": "open", "priority": 0, "issue_type": "task"},
        {"id": "bd-b2", "title": "Second", "status": "in_progress", "priority": "P2", "assignee": "ana"},
    ]
