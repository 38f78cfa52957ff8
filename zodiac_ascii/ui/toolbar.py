#!/usr/bin/env python3
# zodiac_ascii/ui/toolbar.py

from __future__ import annotations

from prompt_toolkit.layout import HSplit, VSplit, Window
from prompt_toolkit.widgets import Box, Button, Label

from zodiac_ascii import actions
from zodiac_ascii.ui.art_control import ArtControl
from zodiac_ascii.ui.helppane import HelpPane
from zodiac_ascii.ui.state import ArtState


class Toolbar:
    """Clickable controls for effects, borders, fonts and help."""

    def __init__(self, state: ArtState, art_control: ArtControl, help_pane: HelpPane):
        self.state = state
        self.art_control = art_control
        self.help_pane = help_pane

        self.btn_prev = Button(text="◀", handler=lambda: self._run(actions.cycle_effect, -1))
        self.btn_next = Button(text="▶", handler=lambda: self._run(actions.cycle_effect, +1))
        self.btn_border = Button(text="Border (b)", handler=lambda: self._run(actions.cycle_border, +1))
        self.btn_font = Button(text="Font (f)", handler=lambda: self._run(actions.cycle_font, +1))

        self.btn_help = Button(text="Help (h)", handler=self._help)
        self.btn_quit = Button(text="Quit (q)", handler=actions.quit_app)

        self._container = Box(
            body=HSplit(
                [
                    Label("Toolbar  Click buttons or use keys"),
                    VSplit(
                        [
                            Label("Effect:"),
                            self.btn_prev,
                            self.btn_next,
                            Window(width=1, char="|"),
                            self.btn_border,
                            self.btn_font,
                            Window(width=1, char="|"),
                            self.btn_help,
                            self.btn_quit,
                        ],
                        padding=1,
                    ),
                ]
            ),
            style="class:toolbar",
            padding=1,
            height=3,
        )

    def __pt_container__(self):
        return self._container

    def _run(self, action, delta: int) -> None:
        action(self.state, self.art_control, delta)
        self.art_control.focus()

    def _help(self) -> None:
        actions.toggle_help(self.state, self.help_pane)
        self.art_control.focus()
