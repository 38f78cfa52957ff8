#!/usr/bin/env python3
# zodiac_ascii/ui/app.py
"""Compose the prompt_toolkit application for the art preview."""

from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window

from zodiac_ascii import actions
from zodiac_ascii.config import Config
from zodiac_ascii.styles import make_style
from zodiac_ascii.ui.art_control import ArtControl
from zodiac_ascii.ui.helppane import HelpPane
from zodiac_ascii.ui.state import ArtState
from zodiac_ascii.ui.statusbar import StatusBar
from zodiac_ascii.ui.toolbar import Toolbar


class ZodiacArtApp:
    def __init__(self, cfg: Optional[Config] = None, text: Optional[str] = None):
        self.cfg = cfg or Config.load()
        self.state = ArtState(self.cfg, text)
        self.art_control = ArtControl(self.cfg, self.state)
        self.status = StatusBar(self.state)
        self.help_pane = HelpPane()
        self.toolbar = Toolbar(self.state, self.art_control, self.help_pane)

        # Layout: art stretches, accessories stack below.
        self.art_window = Window(
            content=self.art_control,
            dont_extend_width=False,
            wrap_lines=False,
            style="class:art",
        )
        self.art_control.bind_window(self.art_window)
        self.root = HSplit([
            self.art_window,
            self.toolbar,       # Use the container directly
            self.status,        # Use the container directly
            self.help_pane,     # height 0 when hidden
        ])

        self.kb = self._build_key_bindings()
        self.app = Application(
            layout=Layout(self.root, focused_element=self.art_window),
            key_bindings=self.kb,
            full_screen=True,
            style=make_style(self.cfg),
            mouse_support=bool(self.cfg["ui"].get("mouse", True)),
        )

    def _build_key_bindings(self):
        kb = KeyBindings()

        @kb.add("q")
        def _(event):
            event.app.exit()

        @kb.add("left")
        def _(event):
            actions.cycle_effect(self.state, self.art_control, -1)

        @kb.add("right")
        def _(event):
            actions.cycle_effect(self.state, self.art_control, +1)

        @kb.add("b")
        def _(event):
            actions.cycle_border(self.state, self.art_control)

        @kb.add("f")
        def _(event):
            actions.cycle_font(self.state, self.art_control)

        @kb.add("h")
        def _(event):
            actions.toggle_help(self.state, self.help_pane)

        return kb

    def run(self):
        self.app.run()
