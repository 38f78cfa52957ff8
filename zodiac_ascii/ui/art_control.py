#!/usr/bin/env python3
# zodiac_ascii/ui/art_control.py
"""prompt_toolkit UIControl that renders the colorized art preview."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from prompt_toolkit.application import get_app_or_none
from prompt_toolkit.layout.controls import UIContent, UIControl

from zodiac_ascii.pipeline import ArtRequest, generate_art
from zodiac_ascii.rendering.glyphs import GlyphRenderer
from zodiac_ascii.rendering.serialize import LineFrag, to_fragments
from zodiac_ascii.ui.state import ArtState


@dataclass
class Frame:
    key: Tuple[str, str, str, str, int]
    lines_frag: List[LineFrag]


class ArtControl(UIControl):
    """Show the current text through the selected font, border and effect."""

    def __init__(self, cfg, state: ArtState):
        self.cfg = cfg
        self.state = state
        art = cfg["art"]
        self.renderer = GlyphRenderer(art["font"], art["fallback_font"], art["width"])
        self._last_frame: Optional[Frame] = None
        self._window = None

    # -------- UIControl interface --------

    def is_focusable(self) -> bool:
        return True

    def preferred_width(self, max_available_width: int) -> int:
        return max_available_width

    def preferred_height(
        self,
        width: int,
        max_available_height: int,
        wrap_lines: bool,
        get_line_prefix,
    ) -> int:
        return max_available_height

    def create_content(self, width: int, height: int) -> UIContent:
        width = max(1, int(width))
        height = max(1, int(height))
        text, font, effect, border = self.state.snapshot()
        key = (text, font, effect, border, width)

        frame = self._last_frame
        if frame is None or frame.key != key:
            frame = self._render(key)
            self._last_frame = frame

        lines_frag = self._normalize_lines(frame.lines_frag, width, height)
        return UIContent(
            get_line=lambda i: lines_frag[i] if 0 <= i < height else [("", " " * width)],
            line_count=height,
        )

    def bind_window(self, window) -> None:
        """Remember the Window that hosts this control for focus management."""

        self._window = window

    def focus(self) -> None:
        app = get_app_or_none()
        if app and self._window is not None:
            app.layout.focus(self._window)

    # -------- rendering --------

    def _render(self, key: Tuple[str, str, str, str, int]) -> Frame:
        text, font, effect, border, width = key
        t0 = time.time()
        self.renderer.width = width
        result = generate_art(
            ArtRequest(text=text, font=font, color=self.cfg["art"]["color"], border=border, effect=effect, width=width),
            self.renderer,
        )
        self.state.last_render_ms = (time.time() - t0) * 1000.0
        return Frame(key, to_fragments(result.colorized))

    @staticmethod
    def _normalize_lines(source: List[LineFrag], width: int, height: int) -> List[LineFrag]:
        """Clip each row to the viewport width; pad missing rows."""
        lines_frag: List[LineFrag] = []
        for y in range(height):
            if y >= len(source):
                lines_frag.append([("", " " * width)])
                continue
            line: LineFrag = []
            room = width
            for style, text in source[y]:
                if room <= 0:
                    break
                line.append((style, text[:room]))
                room -= len(text[:room])
            if room > 0:
                line.append(("", " " * room))
            lines_frag.append(line)
        return lines_frag

    # -------- user actions --------

    def request_render(self) -> None:
        self._last_frame = None
        app = get_app_or_none()
        if app:
            app.invalidate()
