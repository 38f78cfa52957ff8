"""Tests for the figlet glyph renderer."""

import logging

import pyfiglet
import pytest

from zodiac_ascii.rendering.glyphs import (
    GlyphRenderer,
    RenderFailure,
    available_fonts,
    normalize_font,
    plain_block,
)


@pytest.mark.parametrize(
    "name,expected",
    [("Standard", "standard"), ("Star Wars", "starwars"), ("Larry 3D", "larry3d")],
)
def test_normalize_font(name, expected):
    assert normalize_font(name) == expected


def test_available_fonts_has_defaults():
    fonts = available_fonts()
    assert "standard" in fonts
    assert "doom" in fonts


def test_render_standard():
    rows = GlyphRenderer().render("Hi", "Standard")
    assert len(rows) > 1
    assert rows[-1].strip()
    assert all(isinstance(r, str) for r in rows)


def test_unknown_font_falls_back(caplog):
    renderer = GlyphRenderer()
    with caplog.at_level(logging.WARNING):
        rows = renderer.render("Hi", "No Such Font")
    assert rows == renderer.render("Hi", "standard")
    assert "not available" in caplog.text


def test_default_font_used_when_none():
    renderer = GlyphRenderer(default_font="Doom")
    assert renderer.render("Hi") == renderer.render("Hi", "doom")


def test_failing_font_retries_fallback(monkeypatch):
    renderer = GlyphRenderer()

    def fake(text, font):
        if font == "doom":
            raise pyfiglet.FontNotFound("broken")
        return ("ok",)

    monkeypatch.setattr(renderer, "_figlet", fake)
    assert renderer.render("Hi", "Doom") == ("ok",)


def test_render_failure_carries_fallback(monkeypatch):
    renderer = GlyphRenderer()

    def fake(text, font):
        raise pyfiglet.FontError("broken")

    monkeypatch.setattr(renderer, "_figlet", fake)
    with pytest.raises(RenderFailure) as exc_info:
        renderer.render("Hi", "Doom")
    assert exc_info.value.fallback == (" Hi", "────")


def test_plain_block():
    assert plain_block("abc") == (" abc", "─────")
