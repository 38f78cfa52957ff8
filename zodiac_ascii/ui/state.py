#!/usr/bin/env python3
# zodiac_ascii/ui/state.py
"""Mutable runtime state for the art preview TUI."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from zodiac_ascii.config import Config
from zodiac_ascii.rendering.effects import EFFECTS, fallback
from zodiac_ascii.rendering.framer import BORDER_STYLES

# Effects with a formula of their own, then the plain fallback
PREVIEW_EFFECTS: List[str] = [name for name, fn in EFFECTS.items() if fn is not fallback] + ["none"]
PREVIEW_BORDERS: List[str] = ["none"] + list(BORDER_STYLES)


def _index_of(items: List[str], value: str) -> int:
    try:
        return items.index(value)
    except ValueError:
        return 0


@dataclass
class ArtState:
    cfg: Config
    text: Optional[str] = None

    effect_idx: int = field(init=False)
    border_idx: int = field(init=False)
    font_idx: int = field(init=False)
    fonts: List[str] = field(init=False)

    # UI hints
    last_render_ms: float = 0.0
    info_msg: str = ""

    # Internal lock for multi-thread updates
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self):
        art = self.cfg["art"]
        if not self.text:
            self.text = self.cfg["ui"].get("sample_text", "Zodiac")
        self.fonts = list(art.get("fonts") or [art["font"]])
        if art["font"] not in self.fonts:
            self.fonts.insert(0, art["font"])
        self.font_idx = self.fonts.index(art["font"])
        self.effect_idx = _index_of(PREVIEW_EFFECTS, art.get("effect", "none"))
        self.border_idx = _index_of(PREVIEW_BORDERS, art.get("border", "none"))

    # ------------- accessors -------------

    @property
    def effect(self) -> str:
        return PREVIEW_EFFECTS[self.effect_idx]

    @property
    def border(self) -> str:
        return PREVIEW_BORDERS[self.border_idx]

    @property
    def font(self) -> str:
        return self.fonts[self.font_idx]

    # ------------- setters -------------

    def cycle_effect(self, delta: int) -> str:
        with self._lock:
            self.effect_idx = (self.effect_idx + delta) % len(PREVIEW_EFFECTS)
            return self.effect

    def cycle_border(self, delta: int) -> str:
        with self._lock:
            self.border_idx = (self.border_idx + delta) % len(PREVIEW_BORDERS)
            return self.border

    def cycle_font(self, delta: int) -> str:
        with self._lock:
            self.font_idx = (self.font_idx + delta) % len(self.fonts)
            return self.font

    # ------------- info -------------

    def set_info(self, msg: str) -> None:
        with self._lock:
            self.info_msg = msg

    # ------------- export -------------

    def snapshot(self) -> Tuple[str, str, str, str]:
        """Return (text, font, effect, border) for the renderer."""

        with self._lock:
            return self.text, self.font, self.effect, self.border
