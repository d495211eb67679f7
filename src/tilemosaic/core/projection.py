"""Web Mercator conversions between geographic and fractional tile space."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from tilemosaic.core.tile_id import Tile

WORLD_LNG_SPAN_DEG = 360.0
WORLD_LNG_HALF_SPAN_DEG = 180.0
WORLD_LAT_HALF_SPAN_DEG = 90.0


def point_to_tile_space(lon: float, lat: float, z: int) -> Tuple[float, float, int]:
    """Project (lon, lat) in degrees to fractional tile coordinates at level z.

    Longitude wraps around the antimeridian; latitude is clamped at the poles,
    so y always lies in [0, 2^z].
    """
    z2 = 2**z
    x = z2 * (lon / WORLD_LNG_SPAN_DEG + 0.5)
    x = x % z2
    # float modulo of a tiny negative value rounds up to z2
    if x >= z2:
        x -= z2

    sin = math.sin(math.radians(lat))
    if sin >= 1.0:
        y = 0.0
    elif sin <= -1.0:
        y = float(z2)
    else:
        y = z2 * (0.5 - (0.25 * math.log((1 + sin) / (1 - sin))) / math.pi)
    y = max(min(y, float(z2)), 0.0)
    return x, y, z


def point_to_tile(lon: float, lat: float, z: int) -> Tile:
    x, y, _ = point_to_tile_space(lon, lat, z)
    return Tile(math.floor(x), min(math.floor(y), 2**z - 1), z)


def tile_to_point(x: float, y: float, z: int) -> Tuple[float, float]:
    """Inverse of point_to_tile_space; returns (lon, lat) in degrees."""
    z2 = 2**z
    lon = WORLD_LNG_SPAN_DEG * (x / z2) - WORLD_LNG_HALF_SPAN_DEG
    y2 = WORLD_LNG_HALF_SPAN_DEG - (y / z2) * WORLD_LNG_SPAN_DEG
    lat = (WORLD_LNG_SPAN_DEG / math.pi) * math.atan(math.exp(math.radians(y2))) - WORLD_LAT_HALF_SPAN_DEG
    return lon, lat


def level_for_zoom(zoom: float, max_zoom: Optional[int] = None) -> int:
    level = max(0, math.floor(zoom))
    if max_zoom is not None:
        level = min(level, max_zoom)
    return level
