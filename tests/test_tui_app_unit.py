import json
from argparse import Namespace
from types import SimpleNamespace

import pytest

from core import FetchError
from core.desktop.devtools.application.issue_manager import IssueManager
from core.desktop.devtools.interface import tui_app
from core.desktop.devtools.interface.tui_app import BeadsTUI, cmd_tui
from core.desktop.devtools.interface.tui_keys import CTRL_Q, CTRL_R
from core.desktop.devtools.interface.tui_session import SessionMode


class Spawner:
    """Collects background jobs so tests decide when they complete."""

    def __init__(self):
        self.jobs = []

    def __call__(self, target):
        self.jobs.append(target)

    def run_next(self):
        self.jobs.pop(0)()


@pytest.fixture
def spawner():
    return Spawner()


@pytest.fixture
def tui(tracker, executor, spawner):
    return BeadsTUI(IssueManager(tracker, executor=executor), spawn=spawner)


def test_open_scope_starts_session(tui, tracker):
    assert tui.open_scope("all")
    assert tracker.list_calls == [("all", 200, "priority")]
    assert tui.session.title == "Beads — All"


def test_open_scope_with_no_issues(tui, tracker):
    tracker.issues = []
    assert not tui.open_scope("ready")
    assert tui.session is None
    assert tui.notifier.current().message == "No issues found"


def test_keys_typed_while_pending_are_replayed_in_order(tui, spawner):
    tui.open_scope("ready")
    tui.handle_input("e")
    assert tui.pending_label == "Loading…"
    tui.handle_input("\t")
    tui.handle_input("!")
    assert tui.session.mode is SessionMode.BROWSING
    spawner.run_next()
    assert tui.pending_label == ""
    assert tui.session.mode is SessionMode.EDITING
    assert tui.session.editor.title.text == "Fix login!"


def test_ctrl_r_reloads_ready_scope(tui, tracker, spawner, make_issue):
    tui.open_scope("all")
    tracker.issues = [make_issue("bd-8", "Fresh")]
    tui.handle_input(CTRL_R)
    spawner.run_next()
    assert [issue.id for issue in tui.session.records] == ["bd-8"]
    assert tui.session.scope == "ready"


def test_ctrl_r_ignored_while_editing(tui, spawner):
    tui.open_issue("bd-2")
    tui.handle_input(CTRL_R)
    assert spawner.jobs == []
    assert tui.session.mode is SessionMode.EDITING


def test_work_exposes_outbound_message(tui):
    tui.open_scope("ready")
    tui.handle_input("\r")
    assert tui.result == "work"
    assert tui.outbound_message.startswith("Work on Beads task bd-1")


def test_body_text_renders_session(tui):
    tui.open_scope("ready")
    text = "".join(fragment[1] for fragment in tui.get_body_text())
    assert "Fix login" in text


def test_unexpected_error_in_remote_call_releases_input(tui, tracker, spawner):
    tui.open_scope("ready")

    def broken(*args, **kwargs):
        raise UnicodeDecodeError("utf-8", b"caf\xe9", 3, 4, "invalid continuation byte")

    tracker.list_issues = broken
    tui.handle_input(CTRL_R)
    tui.handle_input(CTRL_Q)
    assert tui.pending_label == "Loading…"
    spawner.run_next()
    assert tui.pending_label == ""
    assert tui.notifier.history()[-1].level == "error"
    assert tui.session.finished


class QueuedLoop:
    def __init__(self):
        self.callbacks = []

    def call_soon_threadsafe(self, callback):
        self.callbacks.append(callback)


def test_failed_remote_call_is_delivered_through_event_loop(tui, tracker, spawner):
    loop = QueuedLoop()
    tui.app = SimpleNamespace(loop=loop, invalidate=lambda: None, is_running=False)
    tui.open_scope("ready")
    tracker.issues = []
    tui.handle_input("e")
    spawner.run_next()
    assert tui.pending_label == "Loading…"
    loop.callbacks.pop()()
    assert tui.pending_label == ""
    assert tui.notifier.current().message == "Issue not found: bd-1"
    assert tui.session.mode is SessionMode.BROWSING


class FailingTracker:
    def __init__(self, *args, **kwargs):
        pass

    def list_issues(self, scope, limit=200, sort="priority"):
        raise FetchError("bd: not a beads workspace")


def test_cmd_tui_reports_fetch_error_as_json(monkeypatch, capsys):
    monkeypatch.setattr(tui_app, "BdClient", FailingTracker)
    code = cmd_tui(Namespace(target="", theme=None, bd=None, timeout=None, limit=None, no_priority=False, no_search=False))
    assert code == 1
    body = json.loads(capsys.readouterr().out)
    assert body["status"] == "ERROR"
    assert body["message"] == "bd: not a beads workspace"


def test_cmd_tui_without_issues_prints_message(monkeypatch, capsys, fake_tracker_cls):
    monkeypatch.setattr(tui_app, "BdClient", lambda **kwargs: fake_tracker_cls([]))
    code = cmd_tui(Namespace(target="open", theme=None, bd=None, timeout=None, limit=None, no_priority=False, no_search=False))
    assert code == 0
    assert capsys.readouterr().out.strip() == "No issues found"


def test_cmd_tui_json_dumps_scope_without_starting_ui(monkeypatch, capsys, fake_tracker_cls, sample_issues):
    tracker = fake_tracker_cls(sample_issues)
    monkeypatch.setattr(tui_app, "BdClient", lambda **kwargs: tracker)
    monkeypatch.setattr(BeadsTUI, "run", lambda self: pytest.fail("TUI must not start"))
    code = cmd_tui(Namespace(target="all", as_json=True, theme=None, bd=None, timeout=None, limit=None))
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert [item["id"] for item in payload] == ["bd-1", "bd-2", "bd-3"]
    assert payload[2]["status"] == "in_progress"
    assert tracker.list_calls[0][0] == "all"


def test_cmd_tui_json_for_single_issue(monkeypatch, capsys, fake_tracker_cls, sample_issues):
    monkeypatch.setattr(tui_app, "BdClient", lambda **kwargs: fake_tracker_cls(sample_issues))
    code = cmd_tui(Namespace(target="bd-2", as_json=True, theme=None, bd=None, timeout=None, limit=None))
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [sample_issues[1].to_dict()]
