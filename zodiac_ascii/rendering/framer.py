#!/usr/bin/env python3
# zodiac_ascii/rendering/framer.py
"""Border framing for ASCII blocks."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

__all__ = ["BORDER_STYLES", "frame"]

# tl, tr, bl, br, horizontal, vertical
BORDER_STYLES: Dict[str, Tuple[str, str, str, str, str, str]] = {
    "single": ("┌", "┐", "└", "┘", "─", "│"),
    "double": ("╔", "╗", "╚", "╝", "═", "║"),
    "block": ("█", "█", "█", "█", "█", "█"),
    "angles": ("┌", "┐", "└", "┘", "─", "│"),
    "round": ("╭", "╮", "╰", "╯", "─", "│"),
}


def frame(block: Sequence[str], style: Optional[str]) -> Tuple[str, ...]:
    """Wrap `block` in a border. No-op for a missing style or "none"."""
    if not style or style == "none":
        return tuple(block)

    tl, tr, bl, br, h, v = BORDER_STYLES.get(style, BORDER_STYLES["single"])
    width = max((len(line) for line in block), default=0)
    rule = h * (width + 2)
    return (
        tl + rule + tr,
        *(f"{v} {line.ljust(width)} {v}" for line in block),
        bl + rule + br,
    )
