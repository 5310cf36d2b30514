#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "status.upcoming": "#e06c75 bold",
        "status.active": "#e5c07b bold",
        "status.completed": "#9ad974 bold",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "selected.upcoming": "bg:#3b3b3b #ff6b6b bold",
        "selected.active": "bg:#3b3b3b #f0c674 bold",
        "selected.completed": "bg:#3b3b3b #9ad974 bold",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "key": "#61afef bold",
        "editor.label": "#97a0a9",
        "editor.active": "#ffb347 bold",
        "editor.cursor": "reverse",
        "message": "#9ad974",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "status.upcoming": "#ff6b6b bold",
        "status.active": "#f0c674 bold",
        "status.completed": "#b8f171 bold",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d",
        "selected": "bg:#3d4047 #e8eaec bold",
        "selected.upcoming": "bg:#3d4047 #ff6b6b bold",
        "selected.active": "bg:#3d4047 #f0c674 bold",
        "selected.completed": "bg:#3d4047 #b8f171 bold",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "key": "#82cfff bold",
        "editor.label": "#a7b0ba",
        "editor.active": "#ffb347 bold",
        "editor.cursor": "reverse",
        "message": "#b8f171",
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
