"""Tests for the color effect engine."""

import pytest

from zodiac_ascii.rendering.effects import (
    EFFECTS,
    EFFECT_NAMES,
    FALLBACK_COLOR,
    HexColor,
    HSLColor,
    as_block,
    colorize,
    effect_color,
)

FORMULA_EFFECTS = ["unicorn", "fire", "angel", "chrome", "sunrise", "cyberpunk", "vaporwave", "ocean", "neon", "poison"]

BLOCKS = [
    [],
    [""],
    ["A"],
    [" "],
    ["AB", "ZW"],
    ["ABC", "", "D E", "  x  "],
]


def _hsl(c):
    assert isinstance(c, HSLColor)
    return c.hue, c.saturation, c.brightness


class TestScenarios:
    def test_fire_single_row(self):
        out = colorize(["AB"], "fire")
        assert len(out.rows[0]) == 2
        for cell in out.rows[0]:
            assert _hsl(cell.color) == (60, 100, 50)

    def test_unicorn_space_is_unstyled(self):
        out = colorize([" "], "unicorn")
        assert out.rows[0][0].color is None
        assert out.rows[0][0].char == " "

    def test_unknown_effect_uses_fallback(self):
        out = colorize(["XY", "ZW"], "unknown-theme")
        colors = [cell.color for row in out for cell in row]
        assert len(colors) == 4
        assert all(c == FALLBACK_COLOR for c in colors)
        assert FALLBACK_COLOR.value == "#00FF41"

    def test_chrome_origin(self):
        h, s, b = _hsl(colorize(["A"], "chrome").rows[0][0].color)
        assert h == pytest.approx(200)
        assert s == 30
        assert b == pytest.approx(70)


class TestProperties:
    @pytest.mark.parametrize("effect", list(EFFECT_NAMES) + ["bogus", None])
    @pytest.mark.parametrize("block", BLOCKS)
    def test_shape_preserved(self, effect, block):
        out = colorize(block, effect)
        assert len(out) == len(block)
        assert [len(row) for row in out] == [len(line) for line in block]
        assert out.text() == "\n".join(block)

    @pytest.mark.parametrize("effect", EFFECT_NAMES)
    def test_spaces_never_styled(self, effect):
        out = colorize(["A B", " C "], effect)
        for row in out:
            for cell in row:
                assert (cell.color is None) == (cell.char == " ")

    @pytest.mark.parametrize("name", EFFECT_NAMES)
    def test_deterministic(self, name):
        fn = EFFECTS[name]
        for x, y, w, h in [(0, 0, 1, 1), (3, 2, 10, 5), (7, 7, 8, 8)]:
            assert fn(x, y, w, h) == fn(x, y, w, h)
            assert effect_color(name, x, y, w, h) == fn(x, y, w, h)

    @pytest.mark.parametrize("name", EFFECT_NAMES)
    def test_zero_dimensions_do_not_raise(self, name):
        assert effect_color(name, 0, 0, 0, 0) is not None
        assert effect_color(name, 2, 1, 0, 0) is not None

    @pytest.mark.parametrize("name", ["rainbow", "metal", "matrix", "none", "", "FIRE"])
    def test_formula_less_names_resolve_to_fallback(self, name):
        assert effect_color(name, 3, 4, 10, 10) == FALLBACK_COLOR

    @pytest.mark.parametrize("name", FORMULA_EFFECTS)
    def test_formula_effects_return_hsl(self, name):
        assert isinstance(effect_color(name, 1, 1, 4, 4), HSLColor)

    def test_boundary_blocks(self):
        assert colorize([""], "fire").rows == ((),)
        out = colorize(["A"], "unicorn")
        assert _hsl(out.rows[0][0].color) == (0, 85, 75)


class TestFormulas:
    def test_unicorn_sweeps_with_row_length(self):
        out = colorize(["ABCD", "AB"], "unicorn")
        assert [c.color.hue for c in out.rows[0]] == [0, 90, 180, 270]
        assert [c.color.hue for c in out.rows[1]] == [0, 180]

    def test_fire_vertical(self):
        out = colorize(["A", "A", "A", "A"], "fire")
        h, s, b = _hsl(out.rows[1][0].color)
        assert (h, s, b) == (45, 95, 50)

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("ocean", (195, 80, 60)),
            ("sunrise", (360, 92.5, 70)),
        ],
    )
    def test_vertical_midpoint(self, name, expected):
        assert _hsl(effect_color(name, 0, 1, 3, 2)) == pytest.approx(expected)

    def test_cyberpunk_diagonal(self):
        assert _hsl(effect_color("cyberpunk", 1, 1, 2, 2)) == pytest.approx((250, 100, 65))

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("angel", (45, 15, 85)),
            ("neon", (60, 100, 60)),
            ("poison", (90, 90, 45)),
            ("vaporwave", (280, 80, 65)),
        ],
    )
    def test_origin_values(self, name, expected):
        assert _hsl(effect_color(name, 0, 0, 5, 1)) == pytest.approx(expected)


class TestBaseColor:
    def test_none_with_custom_color(self):
        red = HexColor("#FF0000")
        assert colorize(["A"], "none", red).rows[0][0].color == red
        assert colorize(["A"], None, red).rows[0][0].color == red

    def test_default_color_is_fallback(self):
        assert colorize(["A"], "none", HexColor("#00ff41")).rows[0][0].color == FALLBACK_COLOR

    def test_ignored_with_effect(self):
        out = colorize(["A"], "fire", HexColor("#FF0000"))
        assert isinstance(out.rows[0][0].color, HSLColor)

    def test_ignored_for_unknown_effect(self):
        assert colorize(["A"], "sparkle", HexColor("#FF0000")).rows[0][0].color == FALLBACK_COLOR


class TestColorValues:
    def test_hsl_to_rgb(self):
        assert HSLColor(0, 100, 50).to_rgb() == (255, 0, 0)
        assert HSLColor(120, 100, 50).to_rgb() == (0, 255, 0)
        assert HSLColor(360, 100, 50).to_rgb() == (255, 0, 0)

    def test_hsl_css(self):
        assert HSLColor(60, 100, 50).css() == "hsl(60, 100%, 50%)"

    def test_hex_to_rgb(self):
        assert FALLBACK_COLOR.to_rgb() == (0, 255, 65)
        assert HexColor("#0f0").to_rgb() == (0, 255, 0)
        assert HexColor("nonsense").to_rgb() == FALLBACK_COLOR.to_rgb()

    def test_as_block(self):
        assert as_block("") == ()
        assert as_block("a\n\nb") == ("a", "", "b")
