"""Subprocess adapter for the `bd` issue tracker command."""

import json
import logging
import subprocess
from typing import Any, Callable, Dict, List, Optional, Sequence

from core import FetchError, Issue, NotFoundError, ValidationError, WriteError, normalize_issue

logger = logging.getLogger("beads_tui.bd")

UPDATE_FLAGS: Dict[str, str] = {
    "title": "--title",
    "description": "--description",
    "status": "--status",
    "priority": "--priority",
}


class BdCommandError(RuntimeError):
    pass


def parse_json_array(stdout: str, context: str) -> List[Any]:
    try:
        parsed = json.loads(stdout)
        if not isinstance(parsed, list):
            raise ValueError("expected JSON array")
    except ValueError as exc:
        raise BdCommandError(f"Failed to parse bd output ({context}): {exc}") from exc
    return parsed


class BdClient:
    def __init__(
        self,
        binary: str = "bd",
        timeout: float = 30.0,
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
    ) -> None:
        self.binary = binary
        self.timeout = timeout
        self.runner = runner or subprocess.run

    def _exec(self, args: Sequence[str]) -> str:
        cmd = [self.binary, *args]
        logger.debug("exec %s", " ".join(cmd))
        try:
            result = self.runner(
                cmd, capture_output=True, text=True, encoding="utf-8", errors="replace", timeout=self.timeout
            )
        except subprocess.TimeoutExpired as exc:
            raise BdCommandError(f"bd {' '.join(args)} timed out after {self.timeout:g}s") from exc
        except OSError as exc:
            raise BdCommandError(f"cannot run {self.binary}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise BdCommandError(f"bd {' '.join(args)} produced undecodable output: {exc}") from exc
        if result.returncode != 0:
            details = (result.stderr or result.stdout or "").strip()
            raise BdCommandError(details or f"bd {' '.join(args)} failed (code {result.returncode})")
        return result.stdout

    def _issues(self, args: Sequence[str], context: str) -> List[Issue]:
        try:
            records = parse_json_array(self._exec(args), context)
            return [normalize_issue(record) for record in records]
        except (BdCommandError, ValidationError) as exc:
            logger.warning("bd %s failed: %s", context, exc)
            raise FetchError(str(exc)) from exc

    def list_issues(self, scope: str = "ready", limit: int = 200, sort: str = "priority") -> List[Issue]:
        if scope == "ready":
            return self._issues(["ready", "--limit", str(limit), "--sort", sort, "--json"], "ready")
        if scope == "open":
            return self._issues(["list", "--sort", sort, "--limit", str(limit), "--json"], "list")
        if scope == "all":
            return self._issues(["list", "--all", "--sort", sort, "--limit", str(limit), "--json"], "list all")
        raise ValueError(f"Unknown list scope: {scope!r}")

    def show_issue(self, issue_id: str) -> Issue:
        issues = self._issues(["show", issue_id, "--json"], f"show {issue_id}")
        if not issues:
            raise NotFoundError(issue_id)
        return issues[0]

    def update_issue(self, issue_id: str, **fields: Any) -> None:
        args = ["update", issue_id]
        for name, value in fields.items():
            flag = UPDATE_FLAGS.get(name)
            if flag is None:
                raise ValueError(f"Unsupported update field: {name}")
            if value is None:
                continue
            args.extend([flag, str(value)])
        try:
            self._exec(args)
        except BdCommandError as exc:
            logger.warning("bd update %s failed: %s", issue_id, exc)
            raise WriteError(str(exc)) from exc


__all__ = ["BdClient", "BdCommandError", "UPDATE_FLAGS", "parse_json_array"]
