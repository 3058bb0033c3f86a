"""Issue list session: the Browsing / Searching / Editing state machine.

The session owns the local record set and is its only writer. Keys arrive via
``handle_input``; remote reads and edit saves go through ``runner`` (which may
suspend input while a call is pending), quick hotkeys patch the local record
first and hand the remote write to ``IssueManager.push_update``.
"""

from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from core import (
    BeadsError,
    EmptyResultError,
    Issue,
    ValidationError,
    WriteError,
    apply_filter,
    build_work_prompt,
    cycle_status,
    filter_issues,
    priority_label,
)
from core.desktop.devtools.application.issue_manager import IssueManager
from core.desktop.devtools.interface.constants import (
    DESCRIPTION_PREVIEW_HEIGHT,
    LIST_VISIBLE_ROWS,
    SCOPE_TITLE_KEYS,
)
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_editing import RESULT_CANCEL, RESULT_SAVE, IssueEditor
from core.desktop.devtools.interface.tui_intents import Intent, ListControllerState, resolve_list_intent
from core.desktop.devtools.interface.tui_keys import CTRL_F, CTRL_Q, matches_key
from core.desktop.devtools.interface.tui_preview import DescriptionPreview
from core.desktop.devtools.interface.tui_render import StyledLine, render_editor, render_list
from core.desktop.devtools.interface.tui_status import Notifier

RemoteRunner = Callable[[str, Callable[[], Any], Callable[[Any], None], Callable[[BeadsError], None]], None]

SaveOutcome = Tuple[List[Tuple[str, Any]], Optional[WriteError]]

RESULT_WORK = "work"
RESULT_EDITED = "edited"


class SessionMode(Enum):
    BROWSING = "browsing"
    SEARCHING = "searching"
    EDITING = "editing"


def run_inline(label: str, work: Callable[[], Any], on_success: Callable[[Any], None], on_error) -> None:
    """Run a remote call on the spot; the UI glue swaps in a threaded runner."""
    try:
        result = work()
    except BeadsError as exc:
        on_error(exc)
        return
    on_success(result)


class IssueListSession:
    def __init__(
        self,
        manager: IssueManager,
        issues: List[Issue],
        *,
        scope: str = "ready",
        notifier: Optional[Notifier] = None,
        runner: RemoteRunner = run_inline,
        allow_priority: bool = True,
        allow_search: bool = True,
        filter_term: str = "",
        preview_height: int = DESCRIPTION_PREVIEW_HEIGHT,
        cancel_key: str = CTRL_Q,
        search_key: str = CTRL_F,
    ) -> None:
        self.manager = manager
        self.records: List[Issue] = list(issues)
        self.scope = scope
        self.notifier = notifier or Notifier()
        self.runner = runner
        self.allow_priority = allow_priority
        self.allow_search = allow_search
        self.cancel_key = cancel_key
        self.search_key = search_key
        self.mode = SessionMode.BROWSING
        self.filter_term = ""
        self.search_buffer = ""
        self.selected_id: Optional[str] = None
        self.editor: Optional[IssueEditor] = None
        self.exit_after_edit = False
        self.finished = False
        self.result: Optional[str] = None
        self.outbound_message: Optional[str] = None
        self.preview = DescriptionPreview(height=preview_height, placeholder=translate("NO_DESCRIPTION"))
        self.set_filter(filter_term)

    # ------------------------------------------------------------------ state
    @property
    def visible(self) -> List[Issue]:
        return filter_issues(self.records, self.filter_term)

    @property
    def selected_index(self) -> int:
        for idx, issue in enumerate(self.visible):
            if issue.id == self.selected_id:
                return idx
        return 0

    @property
    def selected_issue(self) -> Optional[Issue]:
        for issue in self.visible:
            if issue.id == self.selected_id:
                return issue
        return None

    @property
    def title(self) -> str:
        return translate(SCOPE_TITLE_KEYS.get(self.scope, "TITLE_READY"))

    def controller_state(self) -> ListControllerState:
        return ListControllerState(
            searching=self.mode == SessionMode.SEARCHING,
            allow_search=self.allow_search,
            allow_priority=self.allow_priority,
            cancel_key=self.cancel_key,
            search_key=self.search_key,
        )

    def notify(self, message: str, level: str = "info") -> None:
        self.notifier.notify(message, level)

    def set_filter(self, term: str) -> None:
        term = (term or "").strip()
        try:
            apply_filter(self.records, term)
        except EmptyResultError as exc:
            self.notify(translate("NO_MATCHES", term=exc.term), "warning")
            term = ""
        self.filter_term = term
        self._sync_selection()

    def _sync_selection(self) -> None:
        visible = self.visible
        if not visible and self.filter_term:
            self.set_filter(self.filter_term)
            return
        if not visible:
            self.selected_id = None
        elif all(issue.id != self.selected_id for issue in visible):
            self.selected_id = visible[0].id
        self.preview.select(self.selected_issue)

    def select_index(self, index: int) -> None:
        visible = self.visible
        if not visible:
            return
        index = max(0, min(index, len(visible) - 1))
        self.selected_id = visible[index].id
        self.preview.select(visible[index])

    def move_selection(self, delta: int) -> None:
        visible = self.visible
        if not visible:
            return
        self.select_index((self.selected_index + delta) % len(visible))

    def replace_records(self, issues: List[Issue], scope: Optional[str] = None) -> None:
        self.records = list(issues)
        if scope:
            self.scope = scope
        if self.mode == SessionMode.SEARCHING:
            self.mode = SessionMode.BROWSING
        self.search_buffer = ""
        self.filter_term = ""
        self._sync_selection()

    def finish(self, result: str) -> None:
        self.finished = True
        self.result = result

    # ------------------------------------------------------------------ input
    def handle_input(self, data: str) -> None:
        if self.finished:
            return
        if self.mode == SessionMode.EDITING and self.editor is not None:
            self._handle_editor(data)
            return
        intent = resolve_list_intent(data, self.controller_state())
        handler = getattr(self, f"_on_{intent.kind}")
        handler(intent, data)

    def _on_cancel(self, intent: Intent, data: str) -> None:
        if self.mode == SessionMode.SEARCHING:
            self.mode = SessionMode.BROWSING
            self.search_buffer = ""
        elif self.filter_term:
            self.set_filter("")
        else:
            self.finish(RESULT_CANCEL)

    def _on_search_start(self, intent: Intent, data: str) -> None:
        self.mode = SessionMode.SEARCHING
        self.search_buffer = ""

    def _on_search_apply(self, intent: Intent, data: str) -> None:
        self.mode = SessionMode.BROWSING
        term, self.search_buffer = self.search_buffer, ""
        self.set_filter(term)

    def _on_search_backspace(self, intent: Intent, data: str) -> None:
        self.search_buffer = self.search_buffer[:-1]

    def _on_search_append(self, intent: Intent, data: str) -> None:
        self.search_buffer += intent.value

    def _on_move_selection(self, intent: Intent, data: str) -> None:
        self.move_selection(intent.value)

    def _on_work(self, intent: Intent, data: str) -> None:
        issue = self.selected_issue
        if issue is None:
            return
        self.outbound_message = build_work_prompt(issue)
        self.finish(RESULT_WORK)

    def _on_edit(self, intent: Intent, data: str) -> None:
        issue = self.selected_issue
        if issue is None:
            return
        self.runner(
            translate("STATUS_LOADING"),
            lambda: self.manager.show_issue(issue.id),
            self.open_editor,
            lambda exc: self.notify(str(exc), "error"),
        )

    def _on_toggle_status(self, intent: Intent, data: str) -> None:
        issue = self.selected_issue
        if issue is None:
            return
        issue.status = cycle_status(issue.status)
        self.manager.push_update(issue.id, status=issue.status)
        # the new status may drop the record out of the active filter
        self._sync_selection()

    def _on_set_priority(self, intent: Intent, data: str) -> None:
        issue = self.selected_issue
        if issue is None or issue.priority == intent.value:
            return
        issue.priority = intent.value
        self.manager.push_update(issue.id, priority=intent.value)
        self._sync_selection()

    def _on_scroll_description(self, intent: Intent, data: str) -> None:
        if self.selected_issue is not None:
            self.preview.scroll(intent.value)

    def _on_delegate(self, intent: Intent, data: str) -> None:
        visible = self.visible
        if not visible:
            return
        if matches_key(data, "up"):
            self.move_selection(-1)
        elif matches_key(data, "down"):
            self.move_selection(1)
        elif matches_key(data, "pageup"):
            self.select_index(self.selected_index - LIST_VISIBLE_ROWS)
        elif matches_key(data, "pagedown"):
            self.select_index(self.selected_index + LIST_VISIBLE_ROWS)
        elif matches_key(data, "home"):
            self.select_index(0)
        elif matches_key(data, "end"):
            self.select_index(len(visible) - 1)

    # ---------------------------------------------------------------- editing
    def open_editor(self, issue: Issue) -> None:
        self.editor = IssueEditor(issue, allow_priority=self.allow_priority)
        self.mode = SessionMode.EDITING

    def _handle_editor(self, data: str) -> None:
        result = self.editor.handle_input(data)
        if result == RESULT_CANCEL:
            self._close_editor(None)
        elif result == RESULT_SAVE:
            self._save_editor()

    def _save_editor(self) -> None:
        editor = self.editor
        try:
            editor.validate()
        except ValidationError:
            self.notify(translate("ERR_EMPTY_TITLE"), "error")
            return
        changes = editor.changed_fields()
        if not changes:
            self._close_editor(editor.issue)
            return
        issue_id = editor.issue.id
        self.runner(
            translate("STATUS_SAVING"),
            lambda: self._write_changes(issue_id, changes),
            self._apply_save,
            lambda exc: self.notify(str(exc), "error"),
        )

    def _write_changes(self, issue_id: str, changes: dict) -> SaveOutcome:
        """Push changed fields one by one; stops at the first WriteError.

        Runs under the remote runner, possibly off the UI thread, so it only
        talks to the tracker and leaves the editor alone.
        """
        written: List[Tuple[str, Any]] = []
        for name, value in changes.items():
            try:
                self.manager.update_issue(issue_id, **{name: value})
            except WriteError as exc:
                return written, exc
            written.append((name, value))
        return written, None

    def _apply_save(self, outcome: SaveOutcome) -> None:
        written, error = outcome
        editor = self.editor
        issue = editor.issue
        for name, value in written:
            issue = issue.copy(**{name: value})
            self.notify(_field_message(name, value), "success")
        # fields already written become the baseline even when a later one failed
        editor.rebase(issue)
        if error is not None:
            self.notify(str(error), "error")
            return
        self._close_editor(issue)

    def _close_editor(self, updated: Optional[Issue]) -> None:
        self.editor = None
        self.mode = SessionMode.BROWSING
        if updated is not None:
            for idx, issue in enumerate(self.records):
                if issue.id == updated.id:
                    self.records[idx] = updated
                    break
        if self.exit_after_edit:
            self.finish(RESULT_EDITED if updated is not None else RESULT_CANCEL)
            return
        self._sync_selection()

    # ----------------------------------------------------------------- render
    def render(self, width: int) -> List[StyledLine]:
        if self.mode == SessionMode.EDITING and self.editor is not None:
            return render_editor(self.editor, width)
        self.preview.set_width(width)
        return render_list(self, width)


def _field_message(name: str, value: Any) -> str:
    if name == "title":
        return translate("MSG_TITLE_UPDATED")
    if name == "description":
        return translate("MSG_DESCRIPTION_UPDATED")
    if name == "status":
        return translate("MSG_STATUS_UPDATED", status=str(value))
    return translate("MSG_PRIORITY_UPDATED", priority=priority_label(value))


__all__ = ["IssueListSession", "SessionMode", "RemoteRunner", "run_inline", "RESULT_WORK", "RESULT_EDITED"]
