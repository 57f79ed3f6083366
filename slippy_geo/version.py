#!/usr/bin/env python3
# slippy_geo/version.py
"""
Version metadata for slippy_geo.
"""

__version__ = "1.0.0"
__license__ = "MIT"

def version_info() -> str:
    """Return human-readable version string."""
    return f"slippy-geo v{__version__}"
