from types import SimpleNamespace

from core.desktop.devtools.interface.tui_status import Notifier, build_status_text


class Clock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_current_returns_latest_unexpired_notification():
    clock = Clock()
    notifier = Notifier(ttl=2.0, clock=clock)
    notifier.notify("first")
    notifier.notify("boom", "error")
    assert notifier.current().message == "boom"
    clock.now += 3.0
    assert notifier.current().message == "boom"
    clock.now += 2.0
    assert notifier.current() is None
    assert [n.message for n in notifier.history()] == ["first", "boom"]


def test_on_change_called_for_each_notification():
    calls = []
    notifier = Notifier(on_change=lambda: calls.append(1))
    notifier.notify("a")
    notifier.notify("b", "warning")
    assert len(calls) == 2


def test_status_text_shows_pending_label_and_message():
    notifier = Notifier()
    notifier.notify("Title updated", "success")
    tui = SimpleNamespace(pending_label="Saving…", notifier=notifier)
    text = "".join(fragment[1] for fragment in build_status_text(tui))
    assert "Saving…" in text
    assert "Title updated" in text


def test_status_text_blank_when_idle():
    tui = SimpleNamespace(pending_label="", notifier=Notifier())
    assert "".join(fragment[1] for fragment in build_status_text(tui)) == ""
