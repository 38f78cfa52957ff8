#!/usr/bin/env python3
# zodiac_ascii/horoscope.py
"""
Zodiac sign table and horoscope text cards.

A card is a left-aligned block: a two-line header (sign title, period/date)
followed by a blank row and the horoscope body wrapped to 66 columns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

__all__ = [
    "ZodiacSign",
    "ZODIAC_SIGNS",
    "UnknownSign",
    "get_sign",
    "wrap_text",
    "HoroscopeCard",
    "format_horoscope",
]

BODY_WIDTH = 66
PERIODS = ("daily", "weekly", "monthly")


@dataclass(frozen=True)
class ZodiacSign:
    name: str
    emoji: str
    dates: str
    element: str


ZODIAC_SIGNS: Tuple[ZodiacSign, ...] = (
    ZodiacSign("aries", "♈", "Mar 21 - Apr 19", "fire"),
    ZodiacSign("taurus", "♉", "Apr 20 - May 20", "earth"),
    ZodiacSign("gemini", "♊", "May 21 - Jun 20", "air"),
    ZodiacSign("cancer", "♋", "Jun 21 - Jul 22", "water"),
    ZodiacSign("leo", "♌", "Jul 23 - Aug 22", "fire"),
    ZodiacSign("virgo", "♍", "Aug 23 - Sep 22", "earth"),
    ZodiacSign("libra", "♎", "Sep 23 - Oct 22", "air"),
    ZodiacSign("scorpio", "♏", "Oct 23 - Nov 21", "water"),
    ZodiacSign("sagittarius", "♐", "Nov 22 - Dec 21", "fire"),
    ZodiacSign("capricorn", "♑", "Dec 22 - Jan 19", "earth"),
    ZodiacSign("aquarius", "♒", "Jan 20 - Feb 18", "air"),
    ZodiacSign("pisces", "♓", "Feb 19 - Mar 20", "water"),
)

_BY_NAME = {s.name: s for s in ZODIAC_SIGNS}


class UnknownSign(KeyError):
    pass


def get_sign(name: str) -> ZodiacSign:
    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError:
        raise UnknownSign(name) from None


def wrap_text(text: str, width: int = BODY_WIDTH) -> List[str]:
    """Greedy word wrap. Words longer than width get a line of their own."""
    lines: List[str] = []
    current: List[str] = []
    length = 0
    for word in text.split():
        extra = len(word) + (1 if current else 0)
        if current and length + extra > width:
            lines.append(" ".join(current))
            current, length = [word], len(word)
        else:
            current.append(word)
            length += extra
    if current:
        lines.append(" ".join(current))
    return lines


@dataclass(frozen=True)
class HoroscopeCard:
    sign: ZodiacSign
    header: Tuple[str, ...]
    body: Tuple[str, ...]

    def block(self) -> Tuple[str, ...]:
        return self.header + ("",) + self.body


def format_horoscope(sign: str, text: str, period: str = "daily", date: str = "") -> HoroscopeCard:
    if period not in PERIODS:
        raise ValueError("period must be one of " + ", ".join(PERIODS))
    z = get_sign(sign)
    title = f"{z.emoji}  {z.name.upper()}"
    meta = f"{period.upper()} • {date}" if date else period.upper()
    return HoroscopeCard(z, (title, meta), tuple(wrap_text(text)))
