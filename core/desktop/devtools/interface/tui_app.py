#!/usr/bin/env python3
"""TUI application - BeadsTUI class and cmd_tui command."""

import json
import logging
import os
import threading
from typing import Any, Callable, List, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from config import get_bd_binary, get_flag, get_list_limit, get_preview_height, get_timeout, get_user_theme
from core import BeadsError, FetchError, Issue, is_likely_issue_id
from core.desktop.devtools.application.issue_manager import IssueManager
from core.desktop.devtools.interface.cli_io import structured_error
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_keys import CTRL_R
from core.desktop.devtools.interface.tui_render import to_formatted_text
from core.desktop.devtools.interface.tui_session import IssueListSession, SessionMode
from core.desktop.devtools.interface.tui_status import Notifier, build_status_text
from infrastructure.bd_client import BdClient

from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("beads_tui.tui")

RELOAD_SCOPE = "ready"


def _spawn_thread(target: Callable[[], None]) -> None:
    threading.Thread(target=target, name="bd-call", daemon=True).start()


class BeadsTUI:
    """Full-screen issue picker.

    All session state is touched from the event loop only: remote work runs on
    a worker thread that only talks to the tracker, and its outcome is posted
    back with ``call_soon_threadsafe`` to be applied in the callback.
    Keys typed while a call is pending are queued and replayed in order.
    """

    def __init__(
        self,
        manager: IssueManager,
        *,
        notifier: Optional[Notifier] = None,
        theme: str = DEFAULT_THEME,
        allow_priority: bool = True,
        allow_search: bool = True,
        preview_height: Optional[int] = None,
        spawn: Optional[Callable[[Callable[[], None]], None]] = None,
    ) -> None:
        self.manager = manager
        self._spawn = spawn or _spawn_thread
        self.notifier = notifier or Notifier()
        self.notifier.on_change = self.force_render
        self.theme_name = theme
        self.style: Style = build_style(theme)
        self.allow_priority = allow_priority
        self.allow_search = allow_search
        self.preview_height = preview_height if preview_height is not None else get_preview_height()
        self.session: Optional[IssueListSession] = None
        self.pending_label = ""
        self._deferred: List[str] = []
        self.app: Optional[Application] = None

    # ------------------------------------------------------------- sessions
    def _new_session(self, issues: List[Issue], scope: str) -> IssueListSession:
        return IssueListSession(
            self.manager,
            issues,
            scope=scope,
            notifier=self.notifier,
            runner=self.run_remote,
            allow_priority=self.allow_priority,
            allow_search=self.allow_search,
            preview_height=self.preview_height,
        )

    def open_scope(self, scope: str) -> bool:
        """Load ``scope`` and start browsing; False when there is nothing to show."""
        issues = self.manager.list_issues(scope)
        if not issues:
            self.notifier.notify(translate("NO_ISSUES"), "info")
            return False
        self.session = self._new_session(issues, scope)
        return True

    def open_issue(self, issue_id: str) -> None:
        """Go straight to the editor; the session ends when the editor closes."""
        issue = self.manager.show_issue(issue_id)
        self.session = self._new_session([issue], RELOAD_SCOPE)
        self.session.exit_after_edit = True
        self.session.open_editor(issue)

    def reload_ready(self) -> None:
        self.run_remote(
            translate("STATUS_LOADING"),
            lambda: self.manager.list_issues(RELOAD_SCOPE),
            self._apply_reload,
            lambda exc: self.notifier.notify(str(exc), "error"),
        )

    def _apply_reload(self, issues: List[Issue]) -> None:
        if not issues:
            self.notifier.notify(translate("NO_ISSUES"), "info")
            return
        if self.session is None:
            self.session = self._new_session(issues, RELOAD_SCOPE)
            return
        if self.session.mode == SessionMode.EDITING:
            return
        self.session.exit_after_edit = False
        self.session.replace_records(issues, RELOAD_SCOPE)

    # ---------------------------------------------------------------- input
    def handle_input(self, data: str) -> None:
        if self.pending_label:
            self._deferred.append(data)
            return
        session = self.session
        if session is None or session.finished:
            return
        if data == CTRL_R and session.mode != SessionMode.EDITING:
            self.reload_ready()
        else:
            session.handle_input(data)
        if session.finished:
            self.exit()
        self.force_render()

    def run_remote(
        self,
        label: str,
        work: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_error: Callable[[BeadsError], None],
    ) -> None:
        """Run ``work`` off the UI thread with input suspended until it resolves."""
        self.pending_label = label
        self.force_render()

        def _target() -> None:
            try:
                result = work()
            except BeadsError as exc:
                logger.warning("%s failed: %s", label, exc)
                error = exc
                self._post(lambda: self._finish_remote(on_error, error))
                return
            except Exception as exc:
                # anything else must still release the input queue
                logger.exception("%s crashed", label)
                crash = BeadsError(str(exc) or type(exc).__name__)
                self._post(lambda: self._finish_remote(on_error, crash))
                return
            self._post(lambda: self._finish_remote(on_success, result))

        self._spawn(_target)

    def _post(self, callback: Callable[[], None]) -> None:
        app = self.app
        loop = getattr(app, "loop", None) if app else None
        if loop is not None:
            loop.call_soon_threadsafe(callback)
        else:
            callback()

    def _finish_remote(self, callback: Callable[[Any], None], value: Any) -> None:
        self.pending_label = ""
        callback(value)
        if self.session is not None and self.session.finished:
            self.exit()
            return
        deferred, self._deferred = self._deferred, []
        for data in deferred:
            self.handle_input(data)
        self.force_render()

    # --------------------------------------------------------------- render
    @property
    def outbound_message(self) -> Optional[str]:
        return self.session.outbound_message if self.session else None

    @property
    def result(self) -> Optional[str]:
        return self.session.result if self.session else None

    def get_terminal_width(self) -> int:
        """Get current terminal width, default to 100 if unavailable."""
        if self.app is not None:
            try:
                return self.app.output.get_size().columns
            except (AttributeError, ValueError, OSError):
                pass
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def get_body_text(self) -> FormattedText:
        if self.session is None:
            return FormattedText([("class:text.dim", translate("STATUS_LOADING"))])
        return to_formatted_text(self.session.render(self.get_terminal_width()))

    def get_status_text(self) -> FormattedText:
        return build_status_text(self)

    def force_render(self) -> None:
        app = self.app
        if app:
            app.invalidate()

    def exit(self) -> None:
        app = self.app
        if app is not None and app.is_running:
            app.exit(result=self.result)

    def _build_application(self) -> Application:
        kb = KeyBindings()

        @kb.add(Keys.Any, eager=True)
        def _(event):
            self.handle_input(event.data)

        @kb.add(Keys.BracketedPaste, eager=True)
        def _(event):
            self.handle_input(event.data)

        body = Window(content=FormattedTextControl(self.get_body_text), always_hide_cursor=True, wrap_lines=False)
        status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)
        app = Application(
            layout=Layout(HSplit([body, status_bar])),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            refresh_interval=0.5,
        )
        # Esc must not wait for the default 0.5s escape-sequence timeout.
        try:
            app.ttimeoutlen = max(0.0, float(os.getenv("BEADS_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            app.ttimeoutlen = 0.05
        return app

    def run(self) -> Optional[str]:
        self.app = self._build_application()
        return self.app.run()


def _dump_json(manager: IssueManager, args) -> int:
    target = (getattr(args, "target", None) or "").strip()
    try:
        if target and is_likely_issue_id(target):
            issues = [manager.show_issue(target)]
        else:
            issues = manager.list_issues(target if target in ("open", "all") else RELOAD_SCOPE)
    except FetchError as exc:
        logger.error("json dump failed: %s", exc)
        return structured_error("tui", str(exc))
    finally:
        manager.shutdown(wait=False)
    print(json.dumps([issue.to_dict() for issue in issues], ensure_ascii=False, indent=2))
    return 0


def cmd_tui(args) -> int:
    notifier = Notifier()
    client = BdClient(
        binary=getattr(args, "bd", None) or get_bd_binary(),
        timeout=getattr(args, "timeout", None) or get_timeout(),
    )
    manager = IssueManager(client, notify=notifier.notify, limit=getattr(args, "limit", None) or get_list_limit())
    if getattr(args, "as_json", False):
        return _dump_json(manager, args)
    tui = BeadsTUI(
        manager,
        notifier=notifier,
        theme=getattr(args, "theme", None) or get_user_theme() or DEFAULT_THEME,
        allow_priority=get_flag("allow_priority") and not getattr(args, "no_priority", False),
        allow_search=get_flag("allow_search") and not getattr(args, "no_search", False),
    )
    target = (getattr(args, "target", None) or "").strip()
    try:
        if target and is_likely_issue_id(target):
            tui.open_issue(target)
        elif not tui.open_scope(target if target in ("open", "all") else RELOAD_SCOPE):
            print(translate("NO_ISSUES"))
            return 0
    except FetchError as exc:
        logger.error("initial load failed: %s", exc)
        return structured_error("tui", str(exc))
    try:
        tui.run()
    finally:
        # Let queued optimistic writes finish before the process exits.
        manager.shutdown(wait=True)
    if tui.outbound_message:
        print(tui.outbound_message)
    return 0
