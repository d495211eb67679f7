from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator

from tilemosaic.core.tile_id import Tile

_MIN_RING_POSITIONS = 4


@dataclass(frozen=True)
class CameraState:
    """Per-frame camera snapshot.

    camera_x / camera_y are fractional tile-space coordinates at the level of
    the tiles being enumerated.
    """

    viewport_width: float
    viewport_height: float
    zoom: float
    camera_x: float = 0.0
    camera_y: float = 0.0


@dataclass(frozen=True)
class RenderCommand:
    """One draw of one wrapped placement using one substitute tile."""

    key: str
    offset: Tile
    rendered_key: str
    adjusted_offset: Tuple[int, int]


class PyramidMetadata(BaseModel):
    levels: List[int]
    max_zoom: int = Field(..., ge=0)
    tile_size: int = Field(..., gt=0, description="Pixels per tile edge")


class RegionCenter(BaseModel):
    lng: float
    lat: float = Field(..., ge=-90.0, le=90.0)


class RegionProperties(BaseModel):
    center: RegionCenter
    radius: float = Field(..., gt=0)
    units: str = Field(default="kilometers", description="Unit of radius")


class RegionGeometryModel(BaseModel):
    type: str = Field(default="Polygon")
    coordinates: List[List[Tuple[float, float]]]

    @field_validator("coordinates")
    @classmethod
    def _has_outer_ring(cls, value: List[List[Tuple[float, float]]]) -> List[List[Tuple[float, float]]]:
        if not value or len(value[0]) < _MIN_RING_POSITIONS:
            raise ValueError(
                f"Region outer ring needs at least {_MIN_RING_POSITIONS} positions (closed linear ring)"
            )
        return value


class Region(BaseModel):
    """GeoJSON-like polygon feature describing a circular-ish region."""

    type: str = Field(default="Feature")
    properties: RegionProperties
    geometry: RegionGeometryModel
