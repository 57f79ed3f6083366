#!/usr/bin/env python3
# slippy_geo/logging_conf.py
"""
Central logging setup for slippy_geo.
Supports console and optional rotating file logs.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from slippy_geo.config import Config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(cfg: Config) -> None:
    level_name = cfg["logging"].get("level", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    pkg_log = logging.getLogger("slippy_geo")
    pkg_log.setLevel(level)

    log_file = cfg["logging"].get("file")
    if log_file and not any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == os.path.abspath(log_file)
        for h in pkg_log.handlers
    ):
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(cfg["logging"].get("rotate_bytes", 5 * 1024 * 1024)),
            backupCount=int(cfg["logging"].get("rotate_keep", 3)),
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        pkg_log.addHandler(handler)
