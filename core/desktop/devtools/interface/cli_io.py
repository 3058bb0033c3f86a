"""JSON error body for failures that happen before the TUI takes the screen."""

import json
from datetime import datetime, timezone
from typing import Dict


def error_body(command: str, message: str) -> Dict[str, str]:
    return {
        "command": command,
        "status": "ERROR",
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }


def structured_error(command: str, message: str) -> int:
    """Print the error body to stdout and return exit code 1."""
    print(json.dumps(error_body(command, message), ensure_ascii=False, indent=2))
    return 1


__all__ = ["error_body", "structured_error"]
