#!/usr/bin/env python3
# slippy_geo/coords.py
"""
Value records for the four coordinate spaces of the Web Mercator tile pyramid.

Each space gets its own frozen dataclass so a pixel coordinate can never be
mistaken for a world coordinate, even when the numbers line up.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "TILE_SIZE",
    "EQUATOR_METERS_PER_PX",
    "EARTH_RADIUS_METERS",
    "SINY_CLAMP",
    "MIN_ZOOM",
    "MAX_ZOOM",
    "GeoPoint",
    "GeoBounds",
    "WorldCoordinate",
    "PixelCoordinate",
    "TileCoordinate",
    "PixelBounds",
    "ZoomLevel",
]

# Side of a tile, and of the world square, in pixels
TILE_SIZE = 256
# Ground meters per pixel at the equator at zoom 0
EQUATOR_METERS_PER_PX = 156543.03392
# Mean radius, spherical model
EARTH_RADIUS_METERS = 6372800
# sin(lat) is kept inside +/- this to keep the Mercator y finite
SINY_CLAMP = 0.9999
MIN_ZOOM = 1
MAX_ZOOM = 20


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class GeoBounds:
    """Box given by its north-west and south-east corners."""

    top_left: GeoPoint
    bottom_right: GeoPoint

    @property
    def top_right(self) -> GeoPoint:
        return GeoPoint(self.top_left.latitude, self.bottom_right.longitude)


@dataclass(frozen=True)
class WorldCoordinate:
    """Position in the zoom-independent 256x256 Mercator square."""

    x: float
    y: float


@dataclass(frozen=True)
class PixelCoordinate:
    """World coordinate scaled by 2**zoom; carries its own zoom."""

    x: float
    y: float
    zoom: int


@dataclass(frozen=True)
class TileCoordinate:
    x: int
    y: int
    zoom: int


@dataclass(frozen=True)
class PixelBounds:
    top_left: PixelCoordinate
    bottom_right: PixelCoordinate


class ZoomLevel(int):
    """
    Integer zoom restricted to MIN_ZOOM..MAX_ZOOM.

    ZoomLevel(n) rejects values outside the range; ZoomLevel.clamp(n)
    saturates them instead.
    """

    def __new__(cls, value: int) -> "ZoomLevel":
        z = int(value)
        if z != value or not MIN_ZOOM <= z <= MAX_ZOOM:
            raise ValueError(f"zoom must be an integer in {MIN_ZOOM}..{MAX_ZOOM}, got {value!r}")
        return super().__new__(cls, z)

    @classmethod
    def clamp(cls, value: int) -> "ZoomLevel":
        return cls(max(MIN_ZOOM, min(MAX_ZOOM, int(value))))

    def __repr__(self) -> str:
        return f"ZoomLevel({int(self)})"

    # int has no __str__ of its own; keep str() and format() plain
    def __str__(self) -> str:
        return str(int(self))
