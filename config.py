from __future__ import annotations

import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any

DEFAULT_BD_BINARY = "bd"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LIST_LIMIT = 200
DEFAULT_PREVIEW_HEIGHT = 7

logger = logging.getLogger("beads_tui.config")


def user_config_path() -> Path:
    override = os.getenv("BEADS_TUI_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".beads_tui_config.yaml"


def _load_config() -> Dict[str, Any]:
    path = user_config_path()
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a mapping", path)
        return {}
    return data


def get_bd_binary() -> str:
    env_value = os.getenv("BEADS_TUI_BD")
    if env_value:
        return env_value
    return str(_load_config().get("bd_binary") or DEFAULT_BD_BINARY)


def get_timeout() -> float:
    raw = _load_config().get("timeout", DEFAULT_TIMEOUT)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def get_list_limit() -> int:
    raw = _load_config().get("list_limit", DEFAULT_LIST_LIMIT)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_LIST_LIMIT
    return value if value > 0 else DEFAULT_LIST_LIMIT


def get_preview_height() -> int:
    raw = _load_config().get("preview_height", DEFAULT_PREVIEW_HEIGHT)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_PREVIEW_HEIGHT
    return value if value > 0 else DEFAULT_PREVIEW_HEIGHT


def get_flag(key: str, default: bool = True) -> bool:
    value = _load_config().get(key, default)
    if isinstance(value, str):
        return value.strip().lower() not in {"0", "false", "no", "off"}
    return bool(value)


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()
