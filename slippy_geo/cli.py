#!/usr/bin/env python3
# slippy_geo/cli.py
"""
Entry point for the slippy-geo command.
Loads configuration, sets up logging and prints conversions between
lat/lon, world, pixel and tile coordinates.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import HTML

from slippy_geo.config import Config
from slippy_geo.coords import GeoBounds, GeoPoint, TileCoordinate, ZoomLevel
from slippy_geo.geodesy import haversine_meters, to_world_coords
from slippy_geo.logging_conf import setup_logging
from slippy_geo.styles import make_style
from slippy_geo.tiles import tile_coordinate, tile_coordinates, tile_location, world_to_pixel_coords
from slippy_geo.version import version_info
from slippy_geo.zoom import choose_zoom, google_zoom_meters_per_px


def _zoom_arg(text: str) -> ZoomLevel:
    try:
        return ZoomLevel(int(text))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _emit(cfg: Config, label: str, fields: List[Tuple[str, str]]) -> None:
    markup = "<label>{}</label>" + "".join(" <unit>{}=</unit><value>{}</value>" for _ in fields)
    values = [label]
    for k, v in fields:
        values += [k, v]
    # file is passed explicitly so redirected stdout is honoured on every call
    print_formatted_text(HTML(markup).format(*values), style=make_style(cfg), file=sys.stdout)


def _num(cfg: Config, v: float) -> str:
    return f"{v:.{cfg.precision}f}"


def _point(args: argparse.Namespace) -> GeoPoint:
    return GeoPoint(args.lat, args.lon)


def _box(args: argparse.Namespace) -> GeoBounds:
    return GeoBounds(GeoPoint(args.north, args.west), GeoPoint(args.south, args.east))


def _zoom(args: argparse.Namespace, cfg: Config) -> ZoomLevel:
    return args.zoom if args.zoom is not None else ZoomLevel(cfg.default_zoom)

# -------------------------
# Commands
# -------------------------

def cmd_world(args: argparse.Namespace, cfg: Config) -> int:
    w = to_world_coords(_point(args))
    _emit(cfg, "world", [("x", _num(cfg, w.x)), ("y", _num(cfg, w.y))])
    return 0


def cmd_pixel(args: argparse.Namespace, cfg: Config) -> int:
    p = world_to_pixel_coords(to_world_coords(_point(args)), _zoom(args, cfg))
    _emit(cfg, "pixel", [("z", str(p.zoom)), ("x", _num(cfg, p.x)), ("y", _num(cfg, p.y))])
    return 0


def cmd_tile(args: argparse.Namespace, cfg: Config) -> int:
    t = tile_coordinate(_point(args), _zoom(args, cfg))
    _emit(cfg, "tile", [("z", str(t.zoom)), ("x", str(t.x)), ("y", str(t.y))])
    return 0


def cmd_bounds(args: argparse.Namespace, cfg: Config) -> int:
    b = tile_location(TileCoordinate(args.x, args.y, args.z))
    for label, p in (("north-west", b.top_left), ("south-east", b.bottom_right)):
        _emit(cfg, label, [("lat", _num(cfg, p.latitude)), ("lon", _num(cfg, p.longitude))])
    return 0


def cmd_tiles(args: argparse.Namespace, cfg: Config) -> int:
    for t in tile_coordinates(_box(args), _zoom(args, cfg)):
        _emit(cfg, "tile", [("z", str(t.zoom)), ("x", str(t.x)), ("y", str(t.y))])
    return 0


def cmd_distance(args: argparse.Namespace, cfg: Config) -> int:
    d = haversine_meters(GeoPoint(args.lat1, args.lon1), GeoPoint(args.lat2, args.lon2))
    _emit(cfg, "distance", [("m", _num(cfg, d))])
    return 0


def cmd_resolution(args: argparse.Namespace, cfg: Config) -> int:
    zoom = _zoom(args, cfg)
    mpp = google_zoom_meters_per_px(GeoPoint(args.lat, 0.0), zoom)
    _emit(cfg, "resolution", [("z", str(zoom)), ("m/px", _num(cfg, mpp))])
    return 0


def cmd_zoom(args: argparse.Namespace, cfg: Config) -> int:
    width = args.width if args.width is not None else cfg.viewport_width_px
    z = choose_zoom(_box(args), width)
    _emit(cfg, "zoom", [("z", str(z)), ("width_px", str(width))])
    return 0

# -------------------------
# Parser
# -------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slippy-geo",
        description="Convert between lat/lon, Web Mercator world, pixel and tile coordinates.",
    )
    parser.add_argument("--config", metavar="PATH", help="config file (default: $SLIPPY_GEO_CONFIG or per-user)")
    parser.add_argument("--version", action="version", version=version_info())
    sub = parser.add_subparsers(dest="command", required=True)

    def latlon(p: argparse.ArgumentParser) -> None:
        p.add_argument("lat", type=float)
        p.add_argument("lon", type=float)

    def box(p: argparse.ArgumentParser) -> None:
        for name in ("north", "west", "south", "east"):
            p.add_argument(name, type=float)

    def zoom(p: argparse.ArgumentParser) -> None:
        p.add_argument("--zoom", "-z", type=_zoom_arg, help="zoom 1..20 (default: map.default_zoom)")

    p = sub.add_parser("world", help="lat/lon to world coordinate")
    latlon(p)
    p.set_defaults(func=cmd_world)

    p = sub.add_parser("pixel", help="lat/lon to pixel coordinate")
    latlon(p)
    zoom(p)
    p.set_defaults(func=cmd_pixel)

    p = sub.add_parser("tile", help="lat/lon to tile index")
    latlon(p)
    zoom(p)
    p.set_defaults(func=cmd_tile)

    p = sub.add_parser("bounds", help="lat/lon bounds of a tile")
    p.add_argument("z", type=_zoom_arg)
    p.add_argument("x", type=int)
    p.add_argument("y", type=int)
    p.set_defaults(func=cmd_bounds)

    p = sub.add_parser("tiles", help="tiles covering a lat/lon box")
    box(p)
    zoom(p)
    p.set_defaults(func=cmd_tiles)

    p = sub.add_parser("distance", help="great-circle distance in meters")
    for name in ("lat1", "lon1", "lat2", "lon2"):
        p.add_argument(name, type=float)
    p.set_defaults(func=cmd_distance)

    p = sub.add_parser("resolution", help="ground meters per pixel at a latitude")
    p.add_argument("lat", type=float)
    zoom(p)
    p.set_defaults(func=cmd_resolution)

    p = sub.add_parser("zoom", help="zoom that fits a lat/lon box across a viewport")
    box(p)
    p.add_argument("--width", "-w", type=int, help="viewport width in pixels (default: map.viewport_width_px)")
    p.set_defaults(func=cmd_zoom)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config.load(args.config)
    setup_logging(cfg)
    return args.func(args, cfg)

if __name__ == "__main__":
    sys.exit(main())
