#!/usr/bin/env python3
# slippy_geo/styles.py
"""
Style definitions for slippy-geo command output.
Provides light, dark, and auto themes for prompt_toolkit.
"""

import os

from prompt_toolkit.styles import Style

from slippy_geo.config import Config

def make_style(cfg: Config) -> Style:
    theme = cfg["output"].get("theme", "auto")

    base_dark = {
        "label": "fg:#88aaff bold",
        "value": "fg:#ffffff",
        "unit": "fg:#888888",
    }
    base_light = {
        "label": "fg:#003399 bold",
        "value": "fg:#000000",
        "unit": "fg:#666666",
    }

    if not cfg["output"].get("color", True):
        return Style([])
    if theme == "light":
        return Style.from_dict(base_light)
    if theme == "dark":
        return Style.from_dict(base_dark)

    # Auto-detect via environment
    if os.getenv("TERM_THEME", "").lower() == "light":
        return Style.from_dict(base_light)

    return Style.from_dict(base_dark)
