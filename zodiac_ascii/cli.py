#!/usr/bin/env python3
# zodiac_ascii/cli.py
"""
Entry point for zodiac_ascii.

With TEXT, --image or --sign, renders once and writes the result.
Without any of them, loads configuration and runs ZodiacArtApp.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from PIL import Image
from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from zodiac_ascii.config import Config
from zodiac_ascii.horoscope import UnknownSign
from zodiac_ascii.logging_conf import setup_logging
from zodiac_ascii.pipeline import (
    ArtRequest,
    ArtResult,
    InvalidArtRequest,
    generate_art,
    generate_horoscope_art,
    generate_image_art,
)
from zodiac_ascii.rendering.effects import EFFECT_NAMES, is_hex_color
from zodiac_ascii.rendering.framer import BORDER_STYLES
from zodiac_ascii.rendering.glyphs import GlyphRenderer, available_fonts
from zodiac_ascii.rendering.image_ascii import CHARACTER_SETS, COLOR_MODES, convert_image
from zodiac_ascii.rendering.image_export import export_png
from zodiac_ascii.rendering.serialize import to_ansi, to_fragments
from zodiac_ascii.version import version_info

log = logging.getLogger(__name__)

FORMATS = ("term", "ansi", "html", "plain", "png")


def hex_color(value: str) -> str:
    if not is_hex_color(value):
        raise argparse.ArgumentTypeError(f"invalid color {value!r}, expected #RGB or #RRGGBB")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zodiac-ascii", description="Colorized ASCII art for horoscopes")
    parser.add_argument("text", nargs="?", help="text to render with figlet")
    parser.add_argument("--font", help="figlet font name")
    parser.add_argument("--effect", choices=EFFECT_NAMES)
    parser.add_argument("--border", choices=("none",) + tuple(BORDER_STYLES))
    parser.add_argument("--color", type=hex_color, help="solid #RRGGBB color when effect is none")
    parser.add_argument("--format", choices=FORMATS, default="term")
    parser.add_argument("--output", "-o", help="write to file instead of stdout")
    parser.add_argument("--image", help="convert an image to ASCII instead of text")
    parser.add_argument("--charset", choices=tuple(CHARACTER_SETS))
    parser.add_argument("--image-color", choices=COLOR_MODES, help="color image cells by effect, source pixel or rainbow")
    parser.add_argument("--sign", help="zodiac sign for a horoscope card")
    parser.add_argument("--horoscope", default="", help="horoscope body text for --sign")
    parser.add_argument("--period", default="daily", choices=("daily", "weekly", "monthly"))
    parser.add_argument("--config", help="config file path")
    parser.add_argument("--list-fonts", action="store_true")
    parser.add_argument("--version", action="version", version=version_info())
    return parser


def _render_image(args, cfg: Config) -> ArtResult:
    im = cfg["image"]
    with Image.open(args.image) as img:
        art = convert_image(
            img,
            width=im["width"],
            max_height=im["max_height"],
            charset=args.charset or im["charset"],
            invert=im["invert"],
            enhance=im["enhance"],
            color_mode=args.image_color or im["color_mode"],
        )
    return generate_image_art(
        art,
        effect=args.effect or cfg["art"]["effect"],
        border=args.border or cfg["art"]["border"],
        color=args.color or cfg["art"]["color"],
    )


def _emit(result: ArtResult, fmt: str, output: Optional[str], cfg: Config) -> None:
    if fmt == "png":
        ex = cfg["export"]
        export_png(result.colorized, output, ex["padding"], ex["background"], ex["font_size"], ex["font"])
        return
    if fmt == "term" and not output:
        for line in to_fragments(result.colorized):
            print_formatted_text(FormattedText(line))
        return

    if fmt == "html":
        text = result.html
    elif fmt == "plain":
        text = result.ascii
    else:
        text = to_ansi(result.colorized)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        sys.stdout.write(text + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config.load(args.config)
    setup_logging(cfg)

    if args.list_fonts:
        sys.stdout.write("\n".join(available_fonts()) + "\n")
        return 0

    if args.format == "png" and not args.output:
        sys.stderr.write("--format png needs --output\n")
        return 2

    if not (args.image or args.sign or args.text):
        return run_tui(cfg)

    art = cfg["art"]
    try:
        if args.image:
            result = _render_image(args, cfg)
        elif args.sign:
            result = generate_horoscope_art(
                args.sign,
                args.horoscope,
                effect=args.effect or art["effect"],
                border=args.border or art["border"],
                period=args.period,
            )
        else:
            renderer = GlyphRenderer(art["font"], art["fallback_font"], art["width"])
            req = ArtRequest(
                text=args.text,
                font=args.font or art["font"],
                color=args.color or art["color"],
                border=args.border or art["border"],
                effect=args.effect or art["effect"],
                width=art["width"],
            )
            result = generate_art(req, renderer)
    except (InvalidArtRequest, UnknownSign, ValueError, OSError) as exc:
        log.debug("Render failed", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 2

    _emit(result, args.format, args.output, cfg)
    return 0


def run_tui(cfg: Config, text: Optional[str] = None) -> int:
    if os.name == "nt" and not sys.stdout.isatty():
        print("No Windows console detected. Run from cmd, PowerShell, or Windows Terminal.")
        return 1
    from zodiac_ascii.ui.app import ZodiacArtApp

    ZodiacArtApp(cfg, text).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
