#!/usr/bin/env python3
# zodiac_ascii/rendering/glyphs.py
"""
Figlet glyph renderer.

Turns short text into an ASCII block with pyfiglet. Unknown fonts fall over to
the fallback font; if that fails too a RenderFailure is raised with a plain
text block already substituted in `.fallback`.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional, Tuple

import pyfiglet

__all__ = ["GlyphRenderer", "RenderFailure", "available_fonts", "normalize_font", "plain_block"]

log = logging.getLogger(__name__)


class RenderFailure(Exception):
    """Raised when no font could render the text."""

    def __init__(self, message: str, fallback: Tuple[str, ...]):
        super().__init__(message)
        self.fallback = fallback


@lru_cache(maxsize=1)
def available_fonts() -> Tuple[str, ...]:
    return tuple(sorted(pyfiglet.FigletFont.getFonts()))


def normalize_font(name: str) -> str:
    """'Star Wars' -> 'starwars', 'Larry 3D' -> 'larry3d'."""
    return "".join(name.split()).lower()


def plain_block(text: str) -> Tuple[str, ...]:
    """Text over a rule, used when figlet cannot render anything."""
    return (f" {text}", "─" * (len(text) + 2))


def _strip_trailing_blank(lines: List[str]) -> List[str]:
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


class GlyphRenderer:
    def __init__(self, default_font: str = "doom", fallback_font: str = "standard", width: int = 80):
        self.default_font = normalize_font(default_font)
        self.fallback_font = normalize_font(fallback_font)
        self.width = width

    def _figlet(self, text: str, font: str) -> Tuple[str, ...]:
        fig = pyfiglet.Figlet(font=font, width=self.width)
        return tuple(_strip_trailing_blank(fig.renderText(text).split("\n")))

    def resolve_font(self, font: Optional[str]) -> str:
        name = normalize_font(font) if font else self.default_font
        if name not in available_fonts():
            log.warning("Font %r not available, using %s", font, self.fallback_font)
            return self.fallback_font
        return name

    def render(self, text: str, font: Optional[str] = None) -> Tuple[str, ...]:
        name = self.resolve_font(font)
        try:
            return self._figlet(text, name)
        except pyfiglet.FigletError as exc:
            if name == self.fallback_font:
                raise RenderFailure(f"font {name} failed: {exc}", plain_block(text)) from exc
            log.error("Font %s failed, using fallback: %s", name, exc)

        try:
            return self._figlet(text, self.fallback_font)
        except pyfiglet.FigletError as exc:
            raise RenderFailure(
                f"fallback font {self.fallback_font} failed: {exc}", plain_block(text)
            ) from exc
