from __future__ import annotations

from typing import Any, Dict, List, Tuple, Union

from shapely.geometry import Polygon, shape

from tilemosaic.core.interfaces import RegionGeometry
from tilemosaic.core.projection import point_to_tile
from tilemosaic.core.schemas import Region
from tilemosaic.core.tile_id import tile_to_key


def region_polygon(region: Region) -> Polygon:
    geom = shape(region.geometry.model_dump())
    if geom.is_empty:
        raise ValueError("Region geometry is empty")
    if geom.geom_type != "Polygon":
        raise ValueError(f"Expected Polygon region geometry, got {geom.geom_type}")
    return geom


def get_tiles_of_region(
    region: Union[Region, Dict[str, Any]],
    level: int,
    geometry: RegionGeometry,
) -> List[str]:
    """Return the keys of tiles at `level` touched by a region polygon.

    Covers the center tile, the tile of every outer-ring vertex and, for
    vertices more than one tile away from the center, tiles sampled along the
    line from the center towards that vertex.
    """
    if not isinstance(region, Region):
        region = Region.model_validate(region)

    props = region.properties
    center: Tuple[float, float] = (props.center.lng, props.center.lat)
    central_tile = point_to_tile(center[0], center[1], level)

    # dict keeps first-seen order
    tiles: Dict[str, None] = {tile_to_key(central_tile): None}

    for lng, lat in region_polygon(region).exterior.coords:
        edge_tile = point_to_tile(lng, lat, level)
        tiles[tile_to_key(edge_tile)] = None

        max_diff = max(abs(edge_tile.x - central_tile.x), abs(edge_tile.y - central_tile.y))
        if max_diff <= 1:
            continue

        bearing = geometry.bearing(center, (lng, lat))
        for i in range(1, max_diff):
            lon_i, lat_i = geometry.destination(center, i * props.radius / max_diff, bearing, props.units)
            tiles[tile_to_key(point_to_tile(lon_i, lat_i, level))] = None

    return list(tiles)
