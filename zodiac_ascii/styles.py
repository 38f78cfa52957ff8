#!/usr/bin/env python3
# zodiac_ascii/styles.py
"""
Style definitions for the art preview TUI.
Provides light, dark, and auto themes for prompt_toolkit.
"""

import os

from prompt_toolkit.styles import Style

from zodiac_ascii.config import Config

BASE_DARK = {
    "toolbar": "bg:#202020 #ffffff",
    "status": "bg:#303030 #cccccc",
    "help": "bg:#202020 #dddddd",
    "art": "bg:#000000",
}
BASE_LIGHT = {
    "toolbar": "bg:#dddddd #000000",
    "status": "bg:#cccccc #000000",
    "help": "bg:#eeeeee #000000",
    "art": "bg:#1a1a1a",
}


def make_style(cfg: Config) -> Style:
    theme = cfg["ui"].get("theme", "auto")

    if theme == "light":
        return Style.from_dict(BASE_LIGHT)
    if theme == "dark":
        return Style.from_dict(BASE_DARK)

    # Auto-detect via environment
    if os.getenv("TERM_THEME", "").lower() == "light":
        return Style.from_dict(BASE_LIGHT)
    return Style.from_dict(BASE_DARK)
