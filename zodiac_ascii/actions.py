#!/usr/bin/env python3
# zodiac_ascii/actions.py
"""
Shared action functions used by both keybindings and toolbar buttons.
Each action modifies ArtState and triggers an ArtControl re-render.
"""

from __future__ import annotations

from prompt_toolkit.application.current import get_app

from zodiac_ascii.ui.art_control import ArtControl
from zodiac_ascii.ui.helppane import HelpPane
from zodiac_ascii.ui.state import ArtState


def cycle_effect(state: ArtState, control: ArtControl, delta: int):
    state.set_info(f"Effect {state.cycle_effect(delta)}")
    control.request_render()


def cycle_border(state: ArtState, control: ArtControl, delta: int = 1):
    state.set_info(f"Border {state.cycle_border(delta)}")
    control.request_render()


def cycle_font(state: ArtState, control: ArtControl, delta: int = 1):
    state.set_info(f"Font {state.cycle_font(delta)}")
    control.request_render()


def toggle_help(state: ArtState, help_pane: HelpPane):
    help_pane.toggle()
    state.set_info("Help toggled")
    get_app().invalidate()


def quit_app():
    get_app().exit()
