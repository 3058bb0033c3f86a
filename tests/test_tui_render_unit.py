from core.desktop.devtools.application.issue_manager import IssueManager
from core.desktop.devtools.interface.tui_editing import IssueEditor
from core.desktop.devtools.interface.tui_keys import CTRL_F
from core.desktop.devtools.interface.tui_render import (
    issue_meta,
    list_window,
    plain_text,
    render_editor,
    to_formatted_text,
    truncate_fragments,
)
from core.desktop.devtools.interface.tui_session import IssueListSession


def make_session(tracker, issues):
    return IssueListSession(IssueManager(tracker), issues)


def test_list_view_marks_selection_and_aligns_meta(tracker, sample_issues):
    session = make_session(tracker, sample_issues)
    text = plain_text(session.render(80))
    lines = text.split("\n")
    assert lines[1] == "Beads — Ready"
    assert lines[2].startswith("→ P1 1 Fix login")
    assert lines[3].startswith("  P2 2 Add docs")
    assert lines[2].index("open") == lines[3].index("open")
    assert "(no description)" in text
    assert "ctrl+f search" in lines[-1]


def test_filtered_title_and_search_prompt(tracker, sample_issues):
    session = make_session(tracker, sample_issues)
    for key in (CTRL_F, "f", "i"):
        session.handle_input(key)
    assert "Search: fi_" in plain_text(session.render(80))
    session.handle_input("\r")
    assert "Beads — Ready [filter: fi]" in plain_text(session.render(80))


def test_lines_never_exceed_width(tracker, make_issue):
    issue = make_issue(title="x" * 200, description="word " * 100)
    session = make_session(tracker, [issue])
    for line in plain_text(session.render(30)).split("\n"):
        assert len(line) <= 30


def test_issue_meta_includes_type_and_summary(make_issue):
    issue = make_issue(issue_type="bug", description="\nfirst\nsecond")
    assert issue_meta(issue) == "open • bug • first"


def test_list_window_follows_selection():
    assert list_window(5, 4) == (0, 5)
    assert list_window(30, 0) == (0, 10)
    assert list_window(30, 15) == (10, 20)
    assert list_window(30, 29) == (20, 30)


def test_editor_view_header_and_cursor(make_issue):
    editor = IssueEditor(make_issue(priority=2, description="a\nb\nc\nd\ne\nf\ng"))
    editor.handle_input("\t")
    lines = render_editor(editor, 80)
    text = plain_text(lines)
    assert "P2 1 [open]" in text
    assert "▸ Title:" in text
    assert any(("class:cursor", " ") in line for line in lines)
    editor.handle_input("\t")
    desc_text = plain_text(render_editor(editor, 80))
    assert "   e" in desc_text and "   g" in desc_text
    assert "   a" not in desc_text


def test_truncate_fragments_respects_wide_chars():
    assert truncate_fragments([("a", "日本"), ("b", "語")], 5) == [("a", "日本")]


def test_to_formatted_text_joins_lines():
    fragments = list(to_formatted_text([[("x", "one")], [("y", "two")]]))
    assert fragments == [("x", "one"), ("", "\n"), ("y", "two")]
