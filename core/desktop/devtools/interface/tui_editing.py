"""Inline issue edit form: title/description buffers plus status and priority."""

from typing import Any, Dict, Optional

from core import Issue, IssueStatus, ValidationError, cycle_status
from core.desktop.devtools.interface import tui_intents as intents
from core.desktop.devtools.interface.tui_intents import (
    Intent,
    ListControllerState,
    resolve_field_intent,
    resolve_list_intent,
)
from core.desktop.devtools.interface.tui_keys import CTRL_C, matches_key
from core.desktop.devtools.interface.tui_text_edit import FieldBuffer, TextState

FOCUS_NAV = "nav"
FOCUS_TITLE = "title"
FOCUS_DESC = "desc"
FOCUS_ORDER = (FOCUS_NAV, FOCUS_TITLE, FOCUS_DESC)

RESULT_SAVE = "save"
RESULT_CANCEL = "cancel"

NAV_CANCEL_KEYS = ("q", "Q", CTRL_C)


class IssueEditor:
    """Edit state for one issue.

    ``issue`` is the baseline the form compares against; nothing here talks to
    the tracker. ``handle_input`` returns ``"save"`` or ``"cancel"`` once the
    form is finished and ``None`` while editing continues.
    """

    def __init__(self, issue: Issue, allow_priority: bool = True) -> None:
        self.issue = issue
        self.allow_priority = allow_priority
        self.title = FieldBuffer(issue.title, len(issue.title))
        description = issue.description or ""
        self.description = FieldBuffer(description, len(description), multiline=True)
        self.status: IssueStatus = issue.status
        self.priority: Optional[int] = issue.priority
        self.focus = FOCUS_NAV
        self.result: Optional[str] = None
        self._field_snapshot: Optional[TextState] = None

    @property
    def focused_field(self) -> Optional[FieldBuffer]:
        if self.focus == FOCUS_TITLE:
            return self.title
        if self.focus == FOCUS_DESC:
            return self.description
        return None

    def set_focus(self, focus: str) -> None:
        self.focus = focus
        field = self.focused_field
        self._field_snapshot = field.snapshot() if field else None

    def next_focus(self) -> None:
        idx = FOCUS_ORDER.index(self.focus)
        self.set_focus(FOCUS_ORDER[(idx + 1) % len(FOCUS_ORDER)])

    def cancel_field(self) -> None:
        """Drop what was typed since the field gained focus."""
        field = self.focused_field
        if field is not None and self._field_snapshot is not None:
            field.restore(self._field_snapshot)
        self.set_focus(FOCUS_NAV)

    def handle_input(self, data: str) -> Optional[str]:
        self.result = None
        if self.focus == FOCUS_NAV:
            self._handle_nav(data)
        else:
            self._handle_field(resolve_field_intent(data, self.focus))
        return self.result

    def _handle_nav(self, data: str) -> None:
        state = ListControllerState(allow_search=False, allow_priority=self.allow_priority, editing=True)
        intent = resolve_list_intent(data, state)
        if intent.kind == intents.CANCEL:
            self.result = RESULT_CANCEL
        elif intent.kind == intents.SUBMIT:
            self.result = RESULT_SAVE
        elif intent.kind == intents.TOGGLE_STATUS:
            self.status = cycle_status(self.status)
        elif intent.kind == intents.SET_PRIORITY:
            self.priority = intent.value
        elif intent.kind == intents.DELEGATE:
            if matches_key(data, "tab"):
                self.next_focus()
            elif data in NAV_CANCEL_KEYS:
                self.result = RESULT_CANCEL

    def _handle_field(self, intent: Intent) -> None:
        field = self.focused_field
        if field is None:  # pragma: no cover - guarded by focus check
            return
        kind = intent.kind
        if kind == intents.CANCEL_FIELD:
            self.cancel_field()
        elif kind == intents.CANCEL:
            self.result = RESULT_CANCEL
        elif kind == intents.NEXT_FOCUS:
            self.next_focus()
        elif kind == intents.SUBMIT:
            self.result = RESULT_SAVE
        elif kind == intents.INSERT_NEWLINE:
            field.insert_newline()
        elif kind == intents.DELETE_BACKWARD:
            field.delete_backward()
        elif kind == intents.MOVE_HORIZONTAL:
            field.move_horizontal(intent.value)
        elif kind == intents.MOVE_VERTICAL:
            field.move_vertical(intent.value)
        elif kind == intents.INSERT_TEXT:
            field.insert(intent.value)

    def validate(self) -> None:
        if not self.title.text.strip():
            raise ValidationError("Title cannot be empty")

    def changed_fields(self) -> Dict[str, Any]:
        """Fields that differ from the baseline, in write order."""
        changes: Dict[str, Any] = {}
        title = self.title.text.strip()
        if title != self.issue.title.strip():
            changes["title"] = title
        if self.description.text != (self.issue.description or ""):
            changes["description"] = self.description.text
        if self.status != self.issue.status:
            changes["status"] = self.status
        if self.priority is not None and self.priority != self.issue.priority:
            changes["priority"] = self.priority
        return changes

    def rebase(self, issue: Issue) -> None:
        """Adopt ``issue`` as the new baseline, keeping the form's values."""
        self.issue = issue


__all__ = [
    "IssueEditor",
    "FOCUS_NAV",
    "FOCUS_TITLE",
    "FOCUS_DESC",
    "FOCUS_ORDER",
    "RESULT_SAVE",
    "RESULT_CANCEL",
]
