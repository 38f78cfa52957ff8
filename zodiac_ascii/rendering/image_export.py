#!/usr/bin/env python3
# zodiac_ascii/rendering/image_export.py
"""
PNG export for colorized blocks.

Draws each colored cell on a solid background, one glyph per cell of a
fixed grid. Needs a monospace TrueType font with box-drawing and block
glyphs (DejaVu Sans Mono or similar); Pillow's built-in font is the last
resort and draws those as placeholder boxes.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image, ImageColor, ImageDraw, ImageFont

from zodiac_ascii.rendering.effects import ColorizedBlock

__all__ = ["export_png", "cell_size", "find_font_path", "load_font", "MONO_FONT_PATHS"]

log = logging.getLogger(__name__)

# Monospace cell proportions relative to the font size
CHAR_WIDTH_RATIO = 0.65
LINE_HEIGHT_RATIO = 1.4

MONO_FONT_PATHS = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
    "/data/data/com.termux/files/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/ubuntu/UbuntuMono-R.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "/System/Library/Fonts/Monaco.ttf",
    "C:\\Windows\\Fonts\\consola.ttf",
)


def cell_size(font_size: int) -> Tuple[int, int]:
    return max(1, round(font_size * CHAR_WIDTH_RATIO)), max(1, round(font_size * LINE_HEIGHT_RATIO))


def find_font_path(preferred: Optional[str] = None) -> Optional[str]:
    """First existing font file: `preferred`, then the known system locations."""
    candidates = ((os.path.expanduser(preferred),) if preferred else ()) + MONO_FONT_PATHS
    for path in candidates:
        if os.path.isfile(path):
            return path
    if preferred:
        log.warning("Export font %s not found, searching system fonts", preferred)
    return None


@lru_cache(maxsize=16)
def load_font(size: int, preferred: Optional[str] = None) -> ImageFont.FreeTypeFont:
    path = find_font_path(preferred)
    if path is not None:
        try:
            return ImageFont.truetype(path, size)
        except OSError as exc:
            log.warning("Could not load font %s: %s", path, exc)
    # Let FreeType search its own font directories by name
    try:
        return ImageFont.truetype("DejaVuSansMono.ttf", size)
    except OSError:
        log.error("No monospace font found, box and block glyphs will not render")
        return ImageFont.load_default(size=size)


def export_png(
    block: ColorizedBlock,
    path: Optional[Union[str, Path]] = None,
    padding: int = 40,
    background: str = "#000000",
    font_size: int = 16,
    font_path: Optional[str] = None,
) -> Image.Image:
    cw, lh = cell_size(font_size)
    cols = max((len(row) for row in block), default=0)
    width = cols * cw + padding * 2
    height = len(block) * lh + padding * 2

    img = Image.new("RGB", (max(1, width), max(1, height)), ImageColor.getrgb(background))
    draw = ImageDraw.Draw(img)
    font = load_font(font_size, font_path)

    for y, row in enumerate(block):
        for x, cell in enumerate(row):
            if cell.color is None:
                continue
            draw.text((padding + x * cw, padding + y * lh), cell.char, fill=cell.color.to_rgb(), font=font)

    if path is not None:
        img.save(path, "PNG")
        log.info("Exported %dx%d PNG to %s", img.width, img.height, path)
    return img
