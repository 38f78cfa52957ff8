#!/usr/bin/env python3
# zodiac_ascii/rendering/serialize.py
"""
Output formats for colorized blocks.

- HTML: one <span> per colored character, blanks pass through.
- ANSI: 24-bit foreground escapes, one per color run.
- Fragments: prompt_toolkit FormattedText rows where style strings use
  "fg:#RRGGBB" tokens, merged into runs.
"""

from __future__ import annotations

import html
from typing import List, Optional, Tuple

from zodiac_ascii.rendering.effects import ColorizedBlock, ColorValue

StyleRun = Tuple[str, str]                # (style, text)
LineFrag = List[StyleRun]                 # one terminal row as runs
FrameFrag = List[LineFrag]                # full block as rows

__all__ = [
    "to_html",
    "solid_html",
    "to_ansi",
    "to_fragments",
    "rgb_to_style",
    "StyleRun",
    "LineFrag",
    "FrameFrag",
]

ANSI_RESET = "\x1b[0m"


def rgb_to_style(r: int, g: int, b: int) -> str:
    # prompt_toolkit accepts "fg:#RRGGBB"
    return f"fg:#{r:02x}{g:02x}{b:02x}"


def _style_of(color: Optional[ColorValue]) -> str:
    return rgb_to_style(*color.to_rgb()) if color is not None else ""


def to_html(block: ColorizedBlock) -> str:
    lines = []
    for row in block:
        parts = []
        for cell in row:
            if cell.color is None:
                parts.append(cell.char)
            else:
                parts.append(
                    f'<span style="color: {cell.color.css()};">{html.escape(cell.char, quote=False)}</span>'
                )
        lines.append("".join(parts))
    return "\n".join(lines)


def solid_html(text: str, color: ColorValue) -> str:
    """Wrap the whole text in one colored span."""
    return f'<span style="color: {color.css()};">{html.escape(text, quote=False)}</span>'


def to_fragments(block: ColorizedBlock) -> FrameFrag:
    frame: FrameFrag = []
    for row in block:
        line: LineFrag = []
        run_style = None
        run_text: List[str] = []
        for cell in row:
            style = _style_of(cell.color)
            if style != run_style and run_text:
                line.append((run_style, "".join(run_text)))
                run_text = []
            run_style = style
            run_text.append(cell.char)
        if run_text:
            line.append((run_style, "".join(run_text)))
        frame.append(line if line else [("", "")])
    return frame


def to_ansi(block: ColorizedBlock) -> str:
    lines = []
    for row in block:
        out: List[str] = []
        prev = None
        for cell in row:
            rgb = cell.color.to_rgb() if cell.color is not None else None
            if rgb != prev:
                out.append("\x1b[38;2;%d;%d;%dm" % rgb if rgb else ANSI_RESET)
                prev = rgb
            out.append(cell.char)
        if prev is not None:
            out.append(ANSI_RESET)
        lines.append("".join(out))
    return "\n".join(lines)
