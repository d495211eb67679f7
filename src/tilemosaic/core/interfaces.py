from __future__ import annotations

from typing import Protocol, Tuple


class ResidencyProvider(Protocol):
    """Read-only view of which tile keys have pixel data loaded."""

    def get(self, key: str, default: bool = False) -> bool:
        ...


class RegionGeometry(Protocol):
    def bearing(self, origin: Tuple[float, float], point: Tuple[float, float]) -> float:
        """Return the bearing in degrees from origin to point, both (lon, lat)."""
        ...

    def destination(
        self,
        origin: Tuple[float, float],
        distance: float,
        bearing: float,
        units: str,
    ) -> Tuple[float, float]:
        """Return the (lon, lat) reached from origin after `distance` along `bearing`."""
        ...
