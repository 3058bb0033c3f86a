#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",  # без принудительной подложки
        "status.open": "#d7dfe6",
        "status.progress": "#e5c07b bold",
        "status.blocked": "#e06c75 bold",
        "status.deferred": "#7a7f85",
        "status.closed": "#9ad974 bold",
        "priority.p0": "#ff5156 bold",
        "priority.p1": "#f9ac60 bold",
        "priority.p2": "#e5c07b",
        "priority.p3": "#8fb3d9",
        "priority.p4": "#7a7f85",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",  # мягкий серый селект для моно-режима
        "cursor": "reverse",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "icon.check": "#9ad974 bold",
        "icon.warn": "#f9ac60 bold",
        "icon.fail": "#ff5156 bold",
    },
    "dark-contrast": {
        "": "#e8eaec",  # без черной подложки
        "status.open": "#e8eaec",
        "status.progress": "#f0c674 bold",
        "status.blocked": "#ff6b6b bold",
        "status.deferred": "#8a9097",
        "status.closed": "#b8f171 bold",
        "priority.p0": "#ff5156 bold",
        "priority.p1": "#f9ac60 bold",
        "priority.p2": "#f0c674",
        "priority.p3": "#9cc4ef",
        "priority.p4": "#8a9097",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d",
        "selected": "bg:#3d4047 #e8eaec bold",
        "cursor": "reverse",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "icon.check": "#b8f171 bold",
        "icon.warn": "#f9ac60 bold",
        "icon.fail": "#ff5156 bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
