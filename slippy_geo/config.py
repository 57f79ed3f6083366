#!/usr/bin/env python3
# slippy_geo/config.py
"""
Config loader/saver and defaults for the slippy-geo command line.

Goals:
- Single JSON file per user.
- Safe atomic writes.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.
- No external deps.

Usage:
    from slippy_geo.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # ~/.config/slippy_geo/slippy_geo.json or OS-specific
    zoom = cfg["map"]["default_zoom"]
    cfg["output"]["precision"] = 8
    cfg.save()
"""

from __future__ import annotations

import json
import logging
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from slippy_geo.coords import MAX_ZOOM, MIN_ZOOM

log = logging.getLogger(__name__)

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "map": {
        "default_zoom": 14,               # used when a command gets no --zoom
        "viewport_width_px": 400,         # screen width assumed by `zoom`
    },
    "output": {
        "precision": 6,                   # decimals for lat/lon and coordinates
        "theme": "auto",                  # auto | light | dark
        "color": True,
    },
    "logging": {
        "level": "WARNING",
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
        return os.path.join(base, "SlippyGeo")
    # macOS: ~/Library/Application Support/SlippyGeo
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "SlippyGeo")
    # Linux and others: ~/.config/slippy_geo
    return os.path.join(os.path.expanduser("~/.config"), "slippy_geo")

def _default_config_path() -> str:
    """Resolve default config path, honoring SLIPPY_GEO_CONFIG env override."""
    env = os.environ.get("SLIPPY_GEO_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "slippy_geo.json")

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
    folder = os.path.dirname(path) or "."
    os.makedirs(folder, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=folder)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")
        os.replace(tmp, path)
    except BaseException:
        # Clean temp on error
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    try:
        x = int(v)
    except (TypeError, ValueError, OverflowError):
        # json accepts Infinity and NaN
        return int(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"): return True
        if s in ("0", "false", "no", "off"): return False
    return default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = _deep_merge(json.loads(json.dumps(DEFAULT_CONFIG)), cfg or {})
    for section, defaults in DEFAULT_CONFIG.items():
        if not isinstance(c.get(section), dict):
            c[section] = dict(defaults)

    # map
    m = c["map"]
    m["default_zoom"] = _coerce_int(m.get("default_zoom"), DEFAULT_CONFIG["map"]["default_zoom"], (MIN_ZOOM, MAX_ZOOM))
    m["viewport_width_px"] = _coerce_int(m.get("viewport_width_px"), DEFAULT_CONFIG["map"]["viewport_width_px"], (1, 100_000))

    # output
    o = c["output"]
    o["precision"] = _coerce_int(o.get("precision"), DEFAULT_CONFIG["output"]["precision"], (0, 15))
    if o.get("theme") not in ("auto", "light", "dark"):
        o["theme"] = DEFAULT_CONFIG["output"]["theme"]
    o["color"] = _coerce_bool(o.get("color"), DEFAULT_CONFIG["output"]["color"])

    # logging
    lg = c["logging"]
    level = str(lg.get("level") or "").upper()
    lg["level"] = level if level in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET") else DEFAULT_CONFIG["logging"]["level"]
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
    data: Dict[str, Any] = field(default_factory=lambda: _validate({}))
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
    def load(cls, path: Optional[str] = None, create_if_missing: bool = False) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate({})
            if create_if_missing:
                _atomic_write_json(cfg_path, cfg)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
            if not isinstance(user_cfg, dict):
                raise ValueError("top level must be an object")
        except (OSError, ValueError) as e:
            # Corrupt file. Backup and fall back to defaults.
            log.warning("ignoring unreadable config %s: %s", cfg_path, e)
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
    def default_zoom(self) -> int:
        return self.data["map"]["default_zoom"]

    @property
    def viewport_width_px(self) -> int:
        return self.data["map"]["viewport_width_px"]

    @property
    def precision(self) -> int:
        return self.data["output"]["precision"]


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "_default_config_path",
]
