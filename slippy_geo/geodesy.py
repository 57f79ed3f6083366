#!/usr/bin/env python3
# slippy_geo/geodesy.py
"""
Geodesy utilities for slippy_geo.
Great-circle distance, and conversions between latitude/longitude and
Web Mercator world coordinates on the 256x256 projection square.
"""

import math

from slippy_geo.coords import (
    EARTH_RADIUS_METERS,
    SINY_CLAMP,
    TILE_SIZE,
    GeoPoint,
    WorldCoordinate,
)

__all__ = [
    "haversine_meters",
    "clamp_siny",
    "to_world_coords",
    "world_to_latlng",
]

def _hav(theta: float) -> float:
    s = math.sin(theta / 2)
    return s * s


def haversine_meters(a: GeoPoint, b: GeoPoint) -> float:
    """
    Great-circle distance in meters between two points on a spherical Earth.
    Symmetric in its arguments.
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude) - math.radians(a.longitude)
    h = _hav(dlat) + math.cos(lat1) * math.cos(lat2) * _hav(dlon)
    return 2 * EARTH_RADIUS_METERS * math.asin(math.sqrt(h))


def clamp_siny(siny: float) -> float:
    """Clamp sin(latitude) away from +/-1 so the Mercator y stays finite."""
    return max(min(siny, SINY_CLAMP), -SINY_CLAMP)


def to_world_coords(point: GeoPoint) -> WorldCoordinate:
    """
    Project lat/lon onto the Mercator square.
    Longitude maps linearly; latitude goes through the Mercator y-function.
    """
    siny = clamp_siny(math.sin(math.radians(point.latitude)))
    x = TILE_SIZE * (0.5 + point.longitude / 360)
    y = TILE_SIZE * (0.5 - math.log((1 + siny) / (1 - siny)) / (4 * math.pi))
    return WorldCoordinate(x, y)


def world_to_latlng(world: WorldCoordinate) -> GeoPoint:
    """Inverse of to_world_coords."""
    longitude = (world.x / TILE_SIZE - 0.5) * 360
    # (e^2pi - e^(4pi*y/256)) / (e^2pi + e^(4pi*y/256)), written so it cannot overflow
    siny = math.tanh(math.pi - 2 * math.pi * world.y / TILE_SIZE)
    latitude = math.degrees(math.asin(siny))
    return GeoPoint(latitude, longitude)
