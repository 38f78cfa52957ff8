#!/usr/bin/env python3
# zodiac_ascii/pipeline.py
"""
Text to colorized art.

render (figlet) -> frame (border) -> colorize (effect) -> serialize.
Returns the framed ascii, an HTML rendition and the unframed plain art.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from zodiac_ascii.horoscope import format_horoscope
from zodiac_ascii.rendering.effects import (
    FALLBACK_COLOR,
    ColorizedBlock,
    HexColor,
    colorize,
    is_hex_color,
)
from zodiac_ascii.rendering.framer import frame
from zodiac_ascii.rendering.glyphs import GlyphRenderer, RenderFailure
from zodiac_ascii.rendering.image_ascii import ImageArt, paint
from zodiac_ascii.rendering.serialize import solid_html, to_html

__all__ = [
    "ArtRequest",
    "ArtResult",
    "InvalidArtRequest",
    "MAX_TEXT_LEN",
    "generate_art",
    "generate_horoscope_art",
    "generate_image_art",
]

log = logging.getLogger(__name__)

MAX_TEXT_LEN = 30


class InvalidArtRequest(ValueError):
    pass


@dataclass
class ArtRequest:
    text: str
    font: str = "Doom"
    color: str = FALLBACK_COLOR.value
    border: Optional[str] = None
    effect: Optional[str] = "none"
    width: int = 80


@dataclass
class ArtResult:
    ascii: str
    html: str
    plain: str
    colorized: ColorizedBlock


def _html_for(
    framed: Tuple[str, ...],
    colorized: ColorizedBlock,
    effect: Optional[str],
    color: str,
    per_cell: bool = False,
) -> str:
    text = "\n".join(framed)
    if per_cell or (effect and effect != "none"):
        return to_html(colorized)
    if color and color.upper() != FALLBACK_COLOR.value:
        return solid_html(text, HexColor(color))
    return text


def generate_art(req: ArtRequest, renderer: Optional[GlyphRenderer] = None) -> ArtResult:
    if not req.text or not isinstance(req.text, str):
        raise InvalidArtRequest("Invalid text input")
    if req.color and not is_hex_color(req.color):
        raise InvalidArtRequest(f"Invalid color: {req.color!r} (expected #RRGGBB)")

    text = req.text[:MAX_TEXT_LEN]
    renderer = renderer or GlyphRenderer(width=req.width)
    try:
        art = renderer.render(text, req.font)
    except RenderFailure as exc:
        log.error("Figlet error: %s", exc)
        art = exc.fallback

    framed = frame(art, req.border)
    colorized = colorize(framed, req.effect, HexColor(req.color) if req.color else None)
    log.debug("Rendered %d rows font=%s effect=%s border=%s", len(framed), req.font, req.effect, req.border)
    return ArtResult(
        ascii="\n".join(framed),
        html=_html_for(framed, colorized, req.effect, req.color),
        plain="\n".join(art),
        colorized=colorized,
    )


def generate_horoscope_art(
    sign: str,
    text: str,
    effect: Optional[str] = "none",
    border: Optional[str] = None,
    period: str = "daily",
    date: str = "",
) -> ArtResult:
    """Colorize a horoscope card instead of figlet output."""
    card = format_horoscope(sign, text, period, date)
    plain = card.block()
    framed = frame(plain, border)
    colorized = colorize(framed, effect)
    return ArtResult(
        ascii="\n".join(framed),
        html=_html_for(framed, colorized, effect, FALLBACK_COLOR.value),
        plain="\n".join(plain),
        colorized=colorized,
    )


def generate_image_art(
    art: ImageArt,
    effect: Optional[str] = "none",
    border: Optional[str] = None,
    color: str = FALLBACK_COLOR.value,
) -> ArtResult:
    """Frame and colorize a converted image. Per-cell image colors win over the effect."""
    if color and not is_hex_color(color):
        raise InvalidArtRequest(f"Invalid color: {color!r} (expected #RRGGBB)")
    framed = frame(art.block, border)
    colorized = paint(colorize(framed, effect, HexColor(color) if color else None), art, framed)
    return ArtResult(
        ascii="\n".join(framed),
        html=_html_for(framed, colorized, effect, color, per_cell=art.colors is not None),
        plain="\n".join(art.block),
        colorized=colorized,
    )
