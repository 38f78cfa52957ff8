#!/usr/bin/env python3
# zodiac_ascii/ui/statusbar.py

from __future__ import annotations

from prompt_toolkit.widgets import Label

from zodiac_ascii.ui.state import ArtState


class StatusBar:
    def __init__(self, state: ArtState):
        self.state = state
        self.label = Label("", style="class:status")

    def __pt_container__(self):
        self.update()
        return self.label

    def message(self) -> str:
        return (
            f" font={self.state.font} effect={self.state.effect} "
            f"border={self.state.border} render={self.state.last_render_ms:.1f}ms  "
            f"{self.state.info_msg}"
        )

    def update(self):
        # Plain text: font names and info messages may contain markup characters
        self.label.text = self.message()
        self.state.info_msg = ""
