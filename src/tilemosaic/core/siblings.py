"""Wrapped on-screen placements of a tile across the viewport."""

from __future__ import annotations

import itertools
import math
from typing import Dict, List, Tuple

from tilemosaic.core.schemas import CameraState
from tilemosaic.core.tile_id import Tile, tile_to_key, wrap_tile

DEFAULT_BASE_TILE_PX = 512

# Spans smaller than this fraction of a tile do not get extra siblings
_SIBLING_EPSILON = 0.001


def get_offsets(length: float, tile_size: float, camera: float) -> Tuple[int, int]:
    """Return the inclusive range of tile steps needed to cover one axis.

    Args:
        length: Viewport length along the axis, in device pixels
        tile_size: On-screen tile size, in device pixels
        camera: Fractional camera position along the axis, in tile units

    Returns:
        (first, last) step, e.g. (-1, 1) for one sibling on each side
    """
    if length <= 0 or tile_size <= 0:
        return 0, 0

    sibling_count = (length - tile_size) / tile_size
    if abs(sibling_count) < _SIBLING_EPSILON:
        return 0, 0

    camera_offset = camera - math.floor(camera)
    prev = sibling_count / 2 + 0.5 - camera_offset
    next_ = sibling_count - prev
    return -math.ceil(prev), math.ceil(next_)


def get_siblings(
    tile: Tile,
    camera: CameraState,
    *,
    pixel_ratio: float = 1.0,
    base_size: int = DEFAULT_BASE_TILE_PX,
) -> Dict[str, List[Tile]]:
    """Group every placement of `tile` needed to fill the viewport by its wrapped key.

    Offsets keep their raw (unclipped) coordinates so the renderer can place
    them on screen; the key they are grouped under is the tile they wrap to.
    """
    tile_x, tile_y, tile_z = tile
    magnification = 2 ** (camera.zoom - tile_z)
    tile_size = base_size * pixel_ratio * magnification

    lo_x, hi_x = get_offsets(camera.viewport_width, tile_size, camera.camera_x)
    lo_y, hi_y = get_offsets(camera.viewport_height, tile_size, camera.camera_y)

    siblings: Dict[str, List[Tile]] = {}
    for dx, dy in itertools.product(range(lo_x, hi_x + 1), range(lo_y, hi_y + 1)):
        offset = Tile(tile_x + dx, tile_y + dy, tile_z)
        siblings.setdefault(tile_to_key(wrap_tile(offset)), []).append(offset)
    return siblings
