"""Tests for the command line entry point."""

import pytest
from PIL import Image

from zodiac_ascii.cli import build_parser, main


@pytest.fixture
def cfg_path(tmp_path):
    return str(tmp_path / "zodiac.json")


def test_plain_text(capsys, cfg_path):
    assert main(["Hi", "--font", "Standard", "--border", "single", "--format", "plain", "--config", cfg_path]) == 0
    out = capsys.readouterr().out.rstrip("\n").split("\n")
    assert out[0].startswith("┌") and out[-1].startswith("└")


def test_html_output_file(tmp_path, cfg_path):
    target = tmp_path / "art.html"
    assert main(["Hi", "--effect", "ocean", "--format", "html", "-o", str(target), "--config", cfg_path]) == 0
    assert "hsl(" in target.read_text(encoding="utf-8")


def test_ansi_output(capsys, cfg_path):
    assert main(["Hi", "--effect", "none", "--format", "ansi", "--config", cfg_path]) == 0
    assert "\x1b[38;2;0;255;65m" in capsys.readouterr().out


def test_png_requires_output(capsys, cfg_path):
    assert main(["Hi", "--format", "png", "--config", cfg_path]) == 2
    assert "--output" in capsys.readouterr().err


def test_png_export(tmp_path, cfg_path):
    target = tmp_path / "art.png"
    assert main(["Hi", "--effect", "neon", "--format", "png", "-o", str(target), "--config", cfg_path]) == 0
    with Image.open(target) as img:
        assert img.format == "PNG"


def test_horoscope_card(capsys, cfg_path):
    assert main(["--sign", "leo", "--horoscope", "Shine on.", "--format", "plain", "--border", "none", "--config", cfg_path]) == 0
    out = capsys.readouterr().out
    assert "LEO" in out
    assert "Shine on." in out


def test_unknown_sign(capsys, cfg_path):
    assert main(["--sign", "ophiuchus", "--format", "plain", "--config", cfg_path]) == 2
    assert "error" in capsys.readouterr().err


def test_image_input(tmp_path, capsys, cfg_path):
    src = tmp_path / "white.png"
    Image.new("RGB", (16, 16), (255, 255, 255)).save(src)
    assert main(["--image", str(src), "--format", "plain", "--border", "none", "--config", cfg_path]) == 0
    rows = capsys.readouterr().out.rstrip("\n").split("\n")
    assert rows and set("".join(rows)) == {"@"}


def test_missing_image(tmp_path, capsys, cfg_path):
    assert main(["--image", str(tmp_path / "nope.png"), "--format", "plain", "--config", cfg_path]) == 2


def test_list_fonts(capsys, cfg_path):
    assert main(["--list-fonts", "--config", cfg_path]) == 0
    assert "standard" in capsys.readouterr().out.split()


def test_rejects_unknown_effect():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["Hi", "--effect", "sparkle"])


@pytest.mark.parametrize("color", ["red", "#12345", "blue!"])
def test_rejects_malformed_color(color, capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["Hi", "--color", color])
    assert "invalid color" in capsys.readouterr().err


def test_hex_color_accepted():
    assert build_parser().parse_args(["Hi", "--color", "#ff0000"]).color == "#ff0000"


def test_image_pixel_colors_html(tmp_path, cfg_path):
    src = tmp_path / "red.png"
    Image.new("RGB", (16, 16), (255, 0, 0)).save(src)
    target = tmp_path / "art.html"
    args = ["--image", str(src), "--image-color", "pixel", "--border", "none", "--format", "html", "-o", str(target), "--config", cfg_path]
    assert main(args) == 0
    assert "rgb(255, 0, 0)" in target.read_text(encoding="utf-8")


def test_image_rainbow_from_config(tmp_path, cfg_path):
    with open(cfg_path, "w", encoding="utf-8") as f:
        f.write('{"image": {"color_mode": "rainbow"}}')
    src = tmp_path / "white.png"
    Image.new("RGB", (16, 16), (255, 255, 255)).save(src)
    target = tmp_path / "art.html"
    assert main(["--image", str(src), "--border", "none", "--format", "html", "-o", str(target), "--config", cfg_path]) == 0
    assert "hsl(0, 70%, 50%)" in target.read_text(encoding="utf-8")


def test_image_without_effect_is_plain_html(tmp_path, cfg_path):
    src = tmp_path / "white.png"
    Image.new("RGB", (16, 16), (255, 255, 255)).save(src)
    target = tmp_path / "art.html"
    assert main(["--image", str(src), "--effect", "none", "--border", "none", "--format", "html", "-o", str(target), "--config", cfg_path]) == 0
    html_out = target.read_text(encoding="utf-8")
    assert "<span" not in html_out
    assert set(html_out.strip().replace("\n", "")) == {"@"}
