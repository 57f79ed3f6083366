#!/usr/bin/env python3
# slippy_geo/zoom.py
"""
Zoom selection: ground resolution per zoom, and the zoom that best matches
a wanted resolution or viewport width.
"""

from __future__ import annotations

import logging
import math

from slippy_geo.coords import (
    EQUATOR_METERS_PER_PX,
    MAX_ZOOM,
    MIN_ZOOM,
    GeoBounds,
    GeoPoint,
    ZoomLevel,
)
from slippy_geo.geodesy import haversine_meters

__all__ = [
    "google_zoom_meters_per_px",
    "google_zoom_level",
    "choose_zoom",
]

log = logging.getLogger(__name__)


def _zoom0_meters_per_px(point: GeoPoint) -> float:
    return EQUATOR_METERS_PER_PX * math.cos(math.radians(point.latitude))


def google_zoom_meters_per_px(point: GeoPoint, zoom: int) -> float:
    """Ground meters covered by one pixel at this latitude and zoom."""
    return _zoom0_meters_per_px(point) / 2 ** zoom


def google_zoom_level(point: GeoPoint, meters_per_px: float) -> ZoomLevel:
    """
    Deepest zoom whose pixels are at least meters_per_px wide, clamped to 1..20.

    Out-of-range results saturate, so callers always get a usable zoom:
    a zero, negative or vanishingly small resolution asks for the finest
    zoom; a latitude with no positive scale (beyond the poles), an infinite
    resolution or a NaN input gets the coarsest.
    """
    if meters_per_px <= 0:
        log.debug("non-positive resolution %r, using zoom %d", meters_per_px, MAX_ZOOM)
        return ZoomLevel(MAX_ZOOM)
    ratio = _zoom0_meters_per_px(point) / meters_per_px
    if ratio <= 0:
        log.debug("no positive scale at latitude %r, using zoom %d", point.latitude, MIN_ZOOM)
        return ZoomLevel(MIN_ZOOM)
    ideal = math.log2(ratio)
    if math.isnan(ideal):
        log.debug("undefined zoom for resolution %r at latitude %r, using zoom %d",
                  meters_per_px, point.latitude, MIN_ZOOM)
        return ZoomLevel(MIN_ZOOM)
    # saturate before flooring; a tiny resolution makes ideal infinite
    zoom = ZoomLevel.clamp(math.floor(min(max(ideal, MIN_ZOOM), MAX_ZOOM)))
    if not MIN_ZOOM <= ideal < MAX_ZOOM + 1:
        log.debug("ideal zoom %.3f saturated to %d", ideal, zoom)
    return zoom


def choose_zoom(bounds: GeoBounds, viewport_width_px: float) -> ZoomLevel:
    """Zoom at which the top edge of bounds fits across viewport_width_px pixels."""
    if viewport_width_px <= 0:
        return ZoomLevel(MIN_ZOOM)
    top_right = bounds.top_right
    width_m = haversine_meters(bounds.top_left, top_right)
    return google_zoom_level(top_right, width_m / viewport_width_px)
