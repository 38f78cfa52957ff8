#!/usr/bin/env python3
# zodiac_ascii/logging_conf.py
"""
Central logging setup for zodiac_ascii.
Supports console and optional rotating file logs.
"""

import logging
from logging.handlers import RotatingFileHandler

from zodiac_ascii.config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(cfg: Config) -> None:
    level_name = cfg["logging"].get("level", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    log_file = cfg["logging"].get("file")
    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(cfg["logging"].get("rotate_bytes", 5 * 1024 * 1024)),
            backupCount=int(cfg["logging"].get("rotate_keep", 3)),
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)

    if cfg["logging"].get("figlet_debug"):
        logging.getLogger("zodiac_ascii.rendering.glyphs").setLevel(logging.DEBUG)
