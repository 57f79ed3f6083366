"""Pytest configuration and shared places for slippy_geo tests."""

import pytest

from slippy_geo.coords import GeoBounds, GeoPoint, PixelCoordinate, TileCoordinate, WorldCoordinate

# Reference values from the Google Maps JavaScript coordinates example
CHICAGO = GeoPoint(41.850, -87.65)
CHICAGO_WORLD = WorldCoordinate(65.6711111111, 95.17492654)
CHICAGO_PIXEL_Z3 = PixelCoordinate(525.3688888888, 761.39941232, 3)
CHICAGO_TILE_Z3 = TileCoordinate(2, 2, 3)

CITY_PARK = GeoBounds(
    top_left=GeoPoint(39.754580779257104, -104.9599027633667),
    bottom_right=GeoPoint(39.74382424830288, -104.940505027771),
)

WHITE_HOUSE = GeoPoint(38.898556, -77.037852)
GWU = GeoPoint(38.897147, -77.043934)


@pytest.fixture
def chicago():
    return CHICAGO


@pytest.fixture
def chicago_world():
    return CHICAGO_WORLD


@pytest.fixture
def chicago_pixel():
    return CHICAGO_PIXEL_Z3


@pytest.fixture
def chicago_tile():
    return CHICAGO_TILE_Z3


@pytest.fixture
def city_park():
    return CITY_PARK


@pytest.fixture
def white_house():
    return WHITE_HOUSE


@pytest.fixture
def gwu():
    return GWU


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point SLIPPY_GEO_CONFIG at a fresh, not-yet-existing file."""
    path = tmp_path / "slippy_geo.json"
    monkeypatch.setenv("SLIPPY_GEO_CONFIG", str(path))
    return path
