#!/usr/bin/env python3
# zodiac_ascii/ui/helppane.py

from __future__ import annotations

from prompt_toolkit.layout import HSplit, Window
from prompt_toolkit.widgets import Frame, TextArea

_HELP_TEXT = (
    "Key Bindings:\n"
    "  ← →       Previous/next color effect\n"
    "  b         Cycle border style\n"
    "  f         Cycle figlet font\n"
    "  h         Toggle this help\n"
    "  q         Quit\n"
    "\n"
    "Mouse:\n"
    "  Click toolbar buttons to change effect, border or font\n"
    "\n"
    "Info:\n"
    "  Status bar shows the active font, effect, border and render time.\n"
)


class HelpPane:
    def __init__(self):
        self._visible = False
        self.text_area = TextArea(
            text=_HELP_TEXT,
            style="class:help",
            read_only=True,
            focusable=False,
        )
        self.frame = Frame(self.text_area, title="Help", style="class:help")
        self.container = HSplit([self.frame])

    def __pt_container__(self):
        return self.container if self._visible else Window(height=0)

    @property
    def visible(self) -> bool:
        return self._visible

    def toggle(self) -> None:
        self._visible = not self._visible
