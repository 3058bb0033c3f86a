import pytest

from core import (
    Issue,
    IssueStatus,
    ValidationError,
    build_work_prompt,
    first_line,
    is_likely_issue_id,
    normalize_issue,
    parse_priority_key,
    priority_label,
    short_id,
)


def test_normalize_issue_reads_tracker_record(raw_records):
    issue = normalize_issue(raw_records[1])
    assert issue.id == "bd-b2"
    assert issue.status is IssueStatus.IN_PROGRESS
    assert issue.priority == 2
    assert issue.owner == "ana"
    assert issue.description == ""


@pytest.mark.parametrize(
    "record",
    [
        {"id": "", "title": "x"},
        {"id": "bd-1", "title": "   "},
        {"id": "bd-1", "title": "x", "status": "done"},
        {"id": "bd-1", "title": "x", "priority": 7},
        {"id": "bd-1", "title": "x", "priority": "high"},
        ["not", "a", "dict"],
    ],
)
def test_normalize_issue_rejects_invalid_records(record):
    with pytest.raises(ValidationError):
        normalize_issue(record)


def test_missing_priority_is_unknown():
    issue = normalize_issue({"id": "bd-1", "title": "x"})
    assert issue.priority is None
    assert priority_label(issue.priority) == "P?"
    assert issue.status is IssueStatus.OPEN


def test_short_id_drops_prefix():
    assert short_id("bd-a1b2") == "a1b2"
    assert short_id("plain") == "plain"
    assert Issue(id="proj-x-9", title="t").short_id == "x-9"


def test_parse_priority_key_accepts_single_digits_in_range():
    assert parse_priority_key("0") == 0
    assert parse_priority_key("4") == 4
    assert parse_priority_key("5") is None
    assert parse_priority_key("12") is None
    assert parse_priority_key("a") is None


@pytest.mark.parametrize("data", ["²", "٣", "３", "¹"])
def test_parse_priority_key_ignores_non_ascii_digits(data):
    assert parse_priority_key(data) is None


def test_is_likely_issue_id():
    assert is_likely_issue_id("bd-a1b2")
    assert not is_likely_issue_id("open")
    assert not is_likely_issue_id("")


def test_first_line_skips_blank_lines():
    assert first_line("\n\n  summary here \nmore") == "summary here"
    assert first_line("") is None


def test_work_prompt_includes_context_when_described(make_issue):
    issue = make_issue("bd-7", "Ship it", priority=2, description="  Do the thing  ")
    assert build_work_prompt(issue) == (
        "Work on Beads task bd-7: Ship it\n\nStatus: open\nPriority: 2\n\nContext:\nDo the thing"
    )


def test_work_prompt_without_priority_or_description(make_issue):
    prompt = build_work_prompt(make_issue("bd-7", "Ship it"))
    assert prompt.endswith("Priority: unknown")
    assert "Context" not in prompt


def test_copy_and_to_dict(make_issue):
    issue = make_issue(priority=1)
    changed = issue.copy(title="Other")
    assert issue.title == "Fix login" and changed.title == "Other"
    data = changed.to_dict()
    assert data["status"] == "open"
    assert data["priority"] == 1
    assert "description" not in data
