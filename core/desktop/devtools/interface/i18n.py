"""UI string lookup.

The language comes from the explicit argument, then ``BEADS_TUI_LANG``, then
the ``lang`` config key; unsupported values are skipped and English is the
last resort. A key missing from the pack renders as the key itself.
"""

import logging
import os
from typing import Optional

from config import get_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK

DEFAULT_LANG = "en"
LANG_ENV = "BEADS_TUI_LANG"

logger = logging.getLogger("beads_tui.i18n")


def effective_lang(preferred: Optional[str] = None) -> str:
    for candidate in (preferred, os.getenv(LANG_ENV), get_user_lang()):
        if candidate in LANG_PACK:
            return candidate
    return DEFAULT_LANG


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    template = LANG_PACK[effective_lang(lang)].get(key) or LANG_PACK[DEFAULT_LANG].get(key, key)
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError) as exc:
        logger.debug("Cannot format %s: %s", key, exc)
        return template


__all__ = ["DEFAULT_LANG", "LANG_ENV", "effective_lang", "translate"]
