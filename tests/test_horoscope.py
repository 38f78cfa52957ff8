"""Tests for sign lookup and horoscope cards."""

import pytest

from zodiac_ascii.horoscope import (
    ZODIAC_SIGNS,
    UnknownSign,
    format_horoscope,
    get_sign,
    wrap_text,
)


def test_twelve_signs():
    assert len(ZODIAC_SIGNS) == 12
    assert len({s.name for s in ZODIAC_SIGNS}) == 12


def test_get_sign_case_insensitive():
    assert get_sign(" Pisces ").emoji == "♓"


def test_get_sign_unknown():
    with pytest.raises(UnknownSign):
        get_sign("ophiuchus")


def test_wrap_text_small_width():
    assert wrap_text("a b c", 3) == ["a b", "c"]


def test_wrap_text_long_word():
    assert wrap_text("tiny enormousword x", 5) == ["tiny", "enormousword", "x"]


def test_wrap_text_default_width():
    text = " ".join(["stars"] * 60)
    lines = wrap_text(text)
    assert all(len(line) <= 66 for line in lines)
    assert " ".join(lines) == text


def test_format_horoscope():
    card = format_horoscope("aries", "Go first.", "weekly", "2026-10-19")
    assert card.header == ("♈  ARIES", "WEEKLY • 2026-10-19")
    assert card.block() == ("♈  ARIES", "WEEKLY • 2026-10-19", "", "Go first.")


def test_format_horoscope_bad_period():
    with pytest.raises(ValueError):
        format_horoscope("aries", "x", "hourly")
