#!/usr/bin/env python3
# zodiac_ascii/rendering/effects.py
"""
Color effect engine.

Assigns a color to every non-blank character of an ASCII block from its
position and a named effect. Each effect is a pure function
(x, y, row_length, total_rows) -> color, registered in EFFECTS.

- Blank cells (space or empty slot) are never styled.
- Unknown effect names, and "none", resolve to FALLBACK_COLOR.
- Zero row lengths or row counts are treated as 1 in every formula.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

__all__ = [
    "HSLColor",
    "HexColor",
    "RGBColor",
    "ColorValue",
    "Cell",
    "ColorizedBlock",
    "EFFECTS",
    "EFFECT_NAMES",
    "FALLBACK_COLOR",
    "as_block",
    "is_hex_color",
    "effect_color",
    "colorize",
]

AsciiBlock = Sequence[str]

# -------------------------
# Color values
# -------------------------

@dataclass(frozen=True)
class HSLColor:
    """Hue in degrees, saturation and brightness (HSL lightness) in percent."""
    hue: float
    saturation: float
    brightness: float

    def to_rgb(self) -> Tuple[int, int, int]:
        h = (self.hue % 360.0) / 360.0
        s = min(100.0, max(0.0, self.saturation)) / 100.0
        l = min(100.0, max(0.0, self.brightness)) / 100.0
        r, g, b = colorsys.hls_to_rgb(h, l, s)
        return round(r * 255), round(g * 255), round(b * 255)

    def css(self) -> str:
        return f"hsl({self.hue:g}, {self.saturation:g}%, {self.brightness:g}%)"


@dataclass(frozen=True)
class HexColor:
    """Fixed #RRGGBB color."""
    value: str

    def to_rgb(self) -> Tuple[int, int, int]:
        v = self.value.lstrip("#")
        if len(v) == 3:
            v = "".join(c * 2 for c in v)
        try:
            return int(v[0:2], 16), int(v[2:4], 16), int(v[4:6], 16)
        except ValueError:
            return FALLBACK_COLOR.to_rgb()

    def css(self) -> str:
        return self.value


@dataclass(frozen=True)
class RGBColor:
    """Color sampled straight from image pixels."""
    r: int
    g: int
    b: int

    def to_rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"


ColorValue = Union[HSLColor, HexColor, RGBColor]
EffectFn = Callable[[int, int, int, int], ColorValue]

# Plain terminal green
FALLBACK_COLOR = HexColor("#00FF41")

_HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


def is_hex_color(value: object) -> bool:
    """True for "#RGB" or "#RRGGBB"."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class Cell:
    char: str
    color: Optional[ColorValue] = None


@dataclass(frozen=True)
class ColorizedBlock:
    """Rows of cells with the same shape as the source block."""
    rows: Tuple[Tuple[Cell, ...], ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def text(self) -> str:
        return "\n".join("".join(c.char for c in row) for row in self.rows)


# -------------------------
# Effects
# -------------------------

def _safe(n: int) -> int:
    return n if n > 0 else 1


def _diagonal(x: int, y: int, w: int, h: int) -> float:
    return (x + y) / _safe(w + h)


def unicorn(x: int, y: int, w: int, h: int) -> ColorValue:
    # Pastel hue sweep, left to right
    return HSLColor((x * 360 / _safe(w)) % 360, 85, 75)


def fire(x: int, y: int, w: int, h: int) -> ColorValue:
    h = _safe(h)
    return HSLColor(60 - (y * 60 / h), 100 - (y * 20 / h), 50)


def angel(x: int, y: int, w: int, h: int) -> ColorValue:
    p = _diagonal(x, y, w, h)
    return HSLColor(
        45 + math.sin(p * 8) * 15,
        15 + math.sin(p * 6) * 10,
        85 + math.sin(p * 10) * 10,
    )


def chrome(x: int, y: int, w: int, h: int) -> ColorValue:
    return HSLColor(200 + math.sin(x * 0.2) * 60, 30, 70 + math.sin(y * 0.3) * 20)


def sunrise(x: int, y: int, w: int, h: int) -> ColorValue:
    p = y / _safe(h)
    return HSLColor(330 + p * 60, 85 + p * 15, 60 + p * 20)


def cyberpunk(x: int, y: int, w: int, h: int) -> ColorValue:
    p = _diagonal(x, y, w, h)
    return HSLColor(320 - p * 140, 100, 65)


def vaporwave(x: int, y: int, w: int, h: int) -> ColorValue:
    p = y / _safe(h)
    return HSLColor(
        280 + p * 80,
        80 + math.sin((x + y) * 0.3) * 15,
        65 + math.sin(x * 0.4) * 10,
    )


def ocean(x: int, y: int, w: int, h: int) -> ColorValue:
    p = y / _safe(h)
    return HSLColor(180 + p * 30, 70 + p * 20, 50 + p * 20)


def neon(x: int, y: int, w: int, h: int) -> ColorValue:
    p = _diagonal(x, y, w, h)
    return HSLColor(60 + math.sin(p * 10) * 120, 100, 60 + math.sin(p * 8) * 15)


def poison(x: int, y: int, w: int, h: int) -> ColorValue:
    p = _diagonal(x, y, w, h)
    return HSLColor(90 + p * 30, 90 + math.sin(x * 0.5) * 10, 45 + p * 20)


def fallback(x: int, y: int, w: int, h: int) -> ColorValue:
    return FALLBACK_COLOR


EFFECTS: Dict[str, EffectFn] = {
    "unicorn": unicorn,
    "fire": fire,
    "angel": angel,
    "chrome": chrome,
    "sunrise": sunrise,
    "cyberpunk": cyberpunk,
    "vaporwave": vaporwave,
    "ocean": ocean,
    "neon": neon,
    "poison": poison,
    # Accepted names without a formula of their own
    "rainbow": fallback,
    "metal": fallback,
    "matrix": fallback,
    "none": fallback,
}

EFFECT_NAMES: Tuple[str, ...] = tuple(EFFECTS)


def effect_color(effect: Optional[str], x: int, y: int, row_length: int, total_rows: int) -> ColorValue:
    fn = EFFECTS.get(effect or "none", fallback)
    return fn(x, y, row_length, total_rows)


# -------------------------
# Block colorization
# -------------------------

def as_block(text: str) -> Tuple[str, ...]:
    """Split newline-joined art into rows. Empty text is an empty block."""
    if not text:
        return ()
    return tuple(text.split("\n"))


def _is_blank(ch: str) -> bool:
    return ch == " " or ch == ""


def colorize(
    block: AsciiBlock,
    effect: Optional[str],
    base_color: Optional[ColorValue] = None,
) -> ColorizedBlock:
    """
    Pair every non-blank character of `block` with a color.

    base_color only applies when no effect is selected ("none" or None) and
    it differs from FALLBACK_COLOR.
    """
    total_rows = len(block)
    solid: Optional[ColorValue] = None
    if effect in (None, "none"):
        solid = FALLBACK_COLOR
        if base_color is not None and base_color.to_rgb() != FALLBACK_COLOR.to_rgb():
            solid = base_color
    fn = EFFECTS.get(effect or "none", fallback)

    rows = []
    for y, line in enumerate(block):
        row_length = len(line)
        cells = []
        for x, ch in enumerate(line):
            if _is_blank(ch):
                cells.append(Cell(ch))
            elif solid is not None:
                cells.append(Cell(ch, solid))
            else:
                cells.append(Cell(ch, fn(x, y, row_length, total_rows)))
        rows.append(tuple(cells))
    return ColorizedBlock(tuple(rows))
