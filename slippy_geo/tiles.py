#!/usr/bin/env python3
# slippy_geo/tiles.py
"""
World, pixel and tile coordinates of the XYZ tile pyramid.

Pixel coordinates are world coordinates scaled by 2**zoom. A tile is a
256x256 block of pixels; its top and left edges belong to it, its bottom
and right edges belong to the neighbours.

Inputs are not validated: zooms outside 1..20 and negative indices go
through the same arithmetic as everything else.
"""

from __future__ import annotations

import logging
import math
from typing import List

from slippy_geo.coords import (
    TILE_SIZE,
    GeoBounds,
    GeoPoint,
    PixelBounds,
    PixelCoordinate,
    TileCoordinate,
    WorldCoordinate,
)
from slippy_geo.geodesy import to_world_coords, world_to_latlng

__all__ = [
    "world_to_pixel_coords",
    "pixel_to_world_coords",
    "pixel_to_tile_coords",
    "tile_to_pixel_coords",
    "tile_coordinate",
    "tile_location",
    "inclusive_range",
    "tile_coordinates",
]

log = logging.getLogger(__name__)


def world_to_pixel_coords(world: WorldCoordinate, zoom: int) -> PixelCoordinate:
    """
    Scale a world coordinate by 2**zoom.
    Zooms of 1024 or more overflow float range and raise OverflowError.
    """
    factor = 2 ** zoom
    return PixelCoordinate(world.x * factor, world.y * factor, zoom)


def pixel_to_world_coords(pixel: PixelCoordinate) -> WorldCoordinate:
    factor = 2 ** pixel.zoom
    return WorldCoordinate(pixel.x / factor, pixel.y / factor)


def pixel_to_tile_coords(pixel: PixelCoordinate) -> TileCoordinate:
    return TileCoordinate(
        math.floor(pixel.x / TILE_SIZE),
        math.floor(pixel.y / TILE_SIZE),
        pixel.zoom,
    )


def tile_to_pixel_coords(tile: TileCoordinate) -> PixelBounds:
    """Pixel bounds of a tile: inclusive top-left, exclusive bottom-right."""
    top_left = PixelCoordinate(tile.x * TILE_SIZE, tile.y * TILE_SIZE, tile.zoom)
    bottom_right = PixelCoordinate((tile.x + 1) * TILE_SIZE, (tile.y + 1) * TILE_SIZE, tile.zoom)
    return PixelBounds(top_left, bottom_right)


def tile_coordinate(point: GeoPoint, zoom: int) -> TileCoordinate:
    """Tile containing a lat/lon at the given zoom."""
    return pixel_to_tile_coords(world_to_pixel_coords(to_world_coords(point), zoom))


def tile_location(tile: TileCoordinate) -> GeoBounds:
    """Lat/lon box covered by a tile."""
    pixels = tile_to_pixel_coords(tile)
    return GeoBounds(
        world_to_latlng(pixel_to_world_coords(pixels.top_left)),
        world_to_latlng(pixel_to_world_coords(pixels.bottom_right)),
    )


def inclusive_range(lo: int, hi: int) -> List[int]:
    """
    Integers from lo up to and including hi.
    Always contains lo, so lo >= hi gives [lo].
    """
    out = [lo]
    while out[-1] < hi:
        out.append(out[-1] + 1)
    return out


def tile_coordinates(bounds: GeoBounds, zoom: int) -> List[TileCoordinate]:
    """
    Every tile intersecting a lat/lon box, x-major then y.

    The antimeridian is not handled: a box whose west edge lies east of
    its east edge yields the column of its west corner only.
    """
    tl = tile_coordinate(bounds.top_left, zoom)
    br = tile_coordinate(bounds.bottom_right, zoom)
    xs = inclusive_range(tl.x, br.x)
    ys = inclusive_range(tl.y, br.y)
    tiles = [TileCoordinate(x, y, zoom) for x in xs for y in ys]
    log.debug("z=%s box %s..%s covers %d tile(s)", zoom, tl, br, len(tiles))
    return tiles
