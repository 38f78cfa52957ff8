#!/usr/bin/env python3
# zodiac_ascii/config.py
"""
Config loader/saver and defaults for zodiac_ascii.

Goals:
- Single JSON file per user.
- Safe atomic writes.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.
- No external deps.

Usage:
    from zodiac_ascii.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # ~/.config/zodiac_ascii/zodiac_ascii.json or OS-specific
    effect = cfg["art"]["effect"]
    cfg["ui"]["theme"] = "dark"
    cfg.save()
"""

from __future__ import annotations

import copy
import json
import logging
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from zodiac_ascii.rendering.effects import EFFECT_NAMES, is_hex_color
from zodiac_ascii.rendering.framer import BORDER_STYLES
from zodiac_ascii.rendering.image_ascii import CHARACTER_SETS, COLOR_MODES

log = logging.getLogger(__name__)

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "app": {
        "title": "Zodiac ASCII",
    },
    "art": {
        "font": "Doom",
        "fallback_font": "Standard",
        "effect": "fire",                 # see rendering.effects.EFFECTS
        "border": "none",                 # none | single | double | block | angles | round
        "color": "#00FF41",               # solid color when effect is none
        "width": 80,                      # figlet wrap width
        "fonts": [                        # cycled by the preview UI
            "Standard", "Doom", "Slant", "Shadow", "Ghost", "Bloody",
            "Colossal", "Isometric3", "Poison", "Speed", "Star Wars",
            "Small", "Chunky", "Larry 3D", "Banner", "Block", "Big",
        ],
    },
    "image": {
        "width": 80,
        "max_height": 40,
        "charset": "classic",
        "invert": False,
        "enhance": False,
        "color_mode": "effect",           # effect | pixel | rainbow
    },
    "export": {
        "padding": 40,
        "font_size": 16,
        "background": "#000000",
        "font": None,                     # monospace .ttf path or None to search
    },
    "ui": {
        "theme": "auto",                  # auto | light | dark
        "mouse": True,
        "sample_text": "Zodiac",
    },
    "logging": {
        "level": "INFO",
        "figlet_debug": False,
        "file": None,                     # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "ZodiacAscii")
    # macOS: ~/Library/Application Support/ZodiacAscii
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "ZodiacAscii")
    # Linux and others: ~/.config/zodiac_ascii
    return os.path.join(os.path.expanduser("~/.config"), "zodiac_ascii")

def _default_config_path() -> str:
    """Resolve default config path, honoring ZODIAC_ASCII_CONFIG env override."""
    env = os.environ.get("ZODIAC_ASCII_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "zodiac_ascii.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=os.path.dirname(path))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp, path)
    except Exception:
        # Clean temp on error
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    try:
        x = int(v)
        if minmax:
            lo, hi = minmax
            if x < lo: x = lo
            if x > hi: x = hi
        return x
    except (TypeError, ValueError):
        return int(default)

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"): return True
        if s in ("0", "false", "no", "off"): return False
    return default

def _coerce_hex(v: Any, default: str) -> str:
    s = str(v or "").strip()
    return s if is_hex_color(s) else default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), copy.deepcopy(cfg or {}))

    # app
    c["app"]["title"] = str(c["app"].get("title") or DEFAULT_CONFIG["app"]["title"])

    # art
    a = c["art"]
    a["font"] = str(a.get("font") or DEFAULT_CONFIG["art"]["font"])
    a["fallback_font"] = str(a.get("fallback_font") or DEFAULT_CONFIG["art"]["fallback_font"])
    if a.get("effect") not in EFFECT_NAMES:
        a["effect"] = DEFAULT_CONFIG["art"]["effect"]
    if a.get("border") != "none" and a.get("border") not in BORDER_STYLES:
        a["border"] = DEFAULT_CONFIG["art"]["border"]
    a["color"] = _coerce_hex(a.get("color"), DEFAULT_CONFIG["art"]["color"])
    a["width"] = _coerce_int(a.get("width"), 80, (20, 400))
    fonts = a.get("fonts")
    if not isinstance(fonts, list) or not fonts:
        a["fonts"] = DEFAULT_CONFIG["art"]["fonts"][:]
    else:
        a["fonts"] = [str(f) for f in fonts]

    # image
    im = c["image"]
    im["width"] = _coerce_int(im.get("width"), 80, (8, 400))
    im["max_height"] = _coerce_int(im.get("max_height"), 40, (4, 200))
    if im.get("charset") not in CHARACTER_SETS:
        im["charset"] = DEFAULT_CONFIG["image"]["charset"]
    im["invert"] = _coerce_bool(im.get("invert"), DEFAULT_CONFIG["image"]["invert"])
    im["enhance"] = _coerce_bool(im.get("enhance"), DEFAULT_CONFIG["image"]["enhance"])
    if im.get("color_mode") not in COLOR_MODES:
        im["color_mode"] = DEFAULT_CONFIG["image"]["color_mode"]

    # export
    ex = c["export"]
    ex["padding"] = _coerce_int(ex.get("padding"), 40, (0, 400))
    ex["font_size"] = _coerce_int(ex.get("font_size"), 16, (6, 96))
    ex["background"] = _coerce_hex(ex.get("background"), DEFAULT_CONFIG["export"]["background"])
    ef = ex.get("font")
    ex["font"] = str(ef) if ef else None

    # ui
    ui = c["ui"]
    if ui.get("theme") not in ("auto", "light", "dark"):
        ui["theme"] = DEFAULT_CONFIG["ui"]["theme"]
    ui["mouse"] = _coerce_bool(ui.get("mouse"), DEFAULT_CONFIG["ui"]["mouse"])
    ui["sample_text"] = str(ui.get("sample_text") or DEFAULT_CONFIG["ui"]["sample_text"])

    # logging
    lg = c["logging"]
    if lg.get("level") not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
        lg["level"] = DEFAULT_CONFIG["logging"]["level"]
    lg["figlet_debug"] = _coerce_bool(lg.get("figlet_debug"), DEFAULT_CONFIG["logging"]["figlet_debug"])
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), DEFAULT_CONFIG["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), DEFAULT_CONFIG["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/save/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: json.loads(json.dumps(DEFAULT_CONFIG)))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    def __setitem__(self, k: str, v: Any) -> None:
        self.data[k] = v

    def get(self, k: str, default: Any = None) -> Any:
        return self.data.get(k, default)

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = True) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate(DEFAULT_CONFIG)
            if create_if_missing:
                _atomic_write_json(cfg_path, cfg)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
            if not isinstance(user_cfg, dict):
                raise ValueError("config root must be an object")
        except (OSError, ValueError) as exc:
            # Corrupt file. Backup and regenerate.
            log.warning("Config %s unreadable (%s), using defaults", cfg_path, exc)
            backup = cfg_path + ".corrupt.bak"
            try:
                shutil.copyfile(cfg_path, backup)
            except OSError:
                pass
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def save(self) -> None:
        """Persist to JSON atomically."""
        full = _validate(self.data)
        _atomic_write_json(self.path, full)
        self.data = full  # sync in-memory with normalized values

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)

    # Convenience getters
    @property
    def effect(self) -> str:
        return self.data["art"]["effect"]

    @property
    def border(self) -> str:
        return self.data["art"]["border"]


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "_default_config_path",
]
