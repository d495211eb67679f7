from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

from pyproj import Geod

EARTH_RADIUS_M = 6371008.8

_METERS_PER_UNIT: Dict[str, float] = {
    "meters": 1.0,
    "metres": 1.0,
    "kilometers": 1000.0,
    "kilometres": 1000.0,
    "miles": 1609.344,
    "nauticalmiles": 1852.0,
    "degrees": EARTH_RADIUS_M * math.pi / 180.0,
    "radians": EARTH_RADIUS_M,
}


def to_meters(distance: float, units: str) -> float:
    try:
        factor = _METERS_PER_UNIT[units.lower()]
    except KeyError as exc:
        raise ValueError(f"Unsupported distance units: {units}") from exc
    return distance * factor


@dataclass
class GeodRegionGeometry:
    """Bearing and destination on the WGS84 ellipsoid using pyproj."""

    ellps: str = "WGS84"
    _geod: Geod = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._geod = Geod(ellps=self.ellps)

    def bearing(self, origin: Tuple[float, float], point: Tuple[float, float]) -> float:
        azimuth, _, _ = self._geod.inv(origin[0], origin[1], point[0], point[1])
        return float(azimuth)

    def destination(
        self,
        origin: Tuple[float, float],
        distance: float,
        bearing: float,
        units: str,
    ) -> Tuple[float, float]:
        lon, lat, _ = self._geod.fwd(origin[0], origin[1], bearing, to_meters(distance, units))
        return float(lon), float(lat)
