#!/usr/bin/env python3
# zodiac_ascii/rendering/image_ascii.py
"""
Image to ASCII conversion.

- Downsamples to a character grid, halving height for the ~2:1 cell aspect
- Optional contrast boost and inversion
- Maps Rec. 601 luminance to a character set index
- Optionally keeps a color per cell: the source pixel, or a rainbow sweep

The resulting block feeds colorize() like any figlet output. Per-cell
colors are painted over a framed block with paint().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from zodiac_ascii.rendering.effects import (
    Cell,
    ColorizedBlock,
    ColorValue,
    HSLColor,
    RGBColor,
)

__all__ = [
    "CHARACTER_SETS",
    "COLOR_MODES",
    "ImageArt",
    "get_characters",
    "optimal_size",
    "rainbow_color",
    "convert_image",
    "image_to_block",
    "paint",
]

# -------------------------
# Character sets
# -------------------------

CHARACTER_SETS: Dict[str, str] = {
    "classic": " .:-=+*#%@",
    "blocks": " ░▒▓█",
    "dots": " ·•○●",
    "minimal": " .-+#",
    "retro": " .,;:clodxkO0KXNWM",
    "shades": " ▁▂▃▄▅▆▇█",
    "geometric": " ◦▫▪■",
    "hearts": " ♡♥",
    "gradient": " ░▒▓█",
}

# "effect" leaves coloring to the text effects
COLOR_MODES: Tuple[str, ...] = ("effect", "pixel", "rainbow")

ENHANCE_FACTOR = 1.3

ColorGrid = Tuple[Tuple[ColorValue, ...], ...]


@dataclass(frozen=True)
class ImageArt:
    block: Tuple[str, ...]
    colors: Optional[ColorGrid] = None


def get_characters(name: Optional[str]) -> str:
    return CHARACTER_SETS.get(name or "classic", CHARACTER_SETS["classic"])


def optimal_size(
    width: int,
    height: int,
    target_width: Optional[int] = None,
    max_height: Optional[int] = None,
) -> Tuple[int, int]:
    """Return (columns, rows) for an image of width x height pixels."""
    target_width = target_width or 80
    max_height = max_height or 40

    aspect = width / max(1, height)
    rows = int(target_width / aspect * 0.5)
    rows = max(1, min(rows, max_height))
    if rows == max_height:
        target_width = int(rows * aspect * 2)
    return max(1, target_width), rows


def rainbow_color(x: int, y: int, cols: int, rows: int) -> HSLColor:
    # Diagonal sweep, rows weigh double to match the 2:1 cell aspect
    return HSLColor(((x + y * 2) * 360 / max(1, cols + rows * 2)) % 360, 70, 50)


def _enhance(arr: np.ndarray) -> np.ndarray:
    # Contrast stretch around mid-grey
    return np.clip(ENHANCE_FACTOR * (arr - 128.0) + 128.0, 0, 255)


def _pixel_colors(arr: np.ndarray) -> ColorGrid:
    px = arr.astype(np.uint8)
    return tuple(
        tuple(RGBColor(int(r), int(g), int(b)) for r, g, b in row)
        for row in px
    )


def _rainbow_colors(cols: int, rows: int) -> ColorGrid:
    return tuple(
        tuple(rainbow_color(x, y, cols, rows) for x in range(cols))
        for y in range(rows)
    )


def convert_image(
    img: Image.Image,
    width: Optional[int] = None,
    max_height: Optional[int] = None,
    charset: Optional[str] = None,
    invert: bool = False,
    enhance: bool = False,
    color_mode: Optional[str] = None,
) -> ImageArt:
    if color_mode not in (None, *COLOR_MODES):
        raise ValueError("color mode must be one of " + ", ".join(COLOR_MODES))
    if img.mode != "RGB":
        img = img.convert("RGB")

    cols, rows = optimal_size(img.width, img.height, width, max_height)
    if img.width != cols or img.height != rows:
        img = img.resize((cols, rows), Image.LANCZOS)
    arr = np.asarray(img, dtype=np.float64)  # (H, W, 3)

    if enhance:
        arr = _enhance(arr)

    # Rec. 601; epsilon keeps pure white at 255 after floor
    lum = np.floor(0.299 * arr[..., 0] + 0.587 * arr[..., 1] + 0.114 * arr[..., 2] + 1e-6)
    if invert:
        lum = 255.0 - lum

    glyphs = np.array(list(get_characters(charset)))
    idx = np.clip((lum * (glyphs.size - 1) / 255.0).astype(np.int32), 0, glyphs.size - 1)
    block = tuple("".join(glyphs[idx[y, :]].tolist()) for y in range(idx.shape[0]))

    if color_mode == "pixel":
        return ImageArt(block, _pixel_colors(arr))
    if color_mode == "rainbow":
        return ImageArt(block, _rainbow_colors(cols, rows))
    return ImageArt(block)


def image_to_block(
    img: Image.Image,
    width: Optional[int] = None,
    max_height: Optional[int] = None,
    charset: Optional[str] = None,
    invert: bool = False,
    enhance: bool = False,
) -> Tuple[str, ...]:
    return convert_image(img, width, max_height, charset, invert, enhance).block


def paint(colorized: ColorizedBlock, art: ImageArt, framed: Sequence[str]) -> ColorizedBlock:
    """
    Replace effect colors of the image cells inside `colorized` with the
    per-cell colors of `art`.

    `framed` is art.block, optionally wrapped by frame(); border cells keep
    their effect color. Blank cells stay unstyled.
    """
    if art.colors is None:
        return colorized
    # frame() adds one row above and "│ " before every line
    framed_rows = len(framed) != len(art.block)
    dy, dx = (1, 2) if framed_rows else (0, 0)

    rows = []
    for y, row in enumerate(colorized):
        src = y - dy
        if not 0 <= src < len(art.block):
            rows.append(row)
            continue
        line_colors = art.colors[src]
        cells = []
        for x, cell in enumerate(row):
            sx = x - dx
            if cell.color is not None and 0 <= sx < len(line_colors):
                cells.append(Cell(cell.char, line_colors[sx]))
            else:
                cells.append(cell)
        rows.append(tuple(cells))
    return ColorizedBlock(tuple(rows))
