from __future__ import annotations

from typing import Tuple

from tilemosaic.core.tile_id import Tile, key_to_tile


def _scale(value: int, level_diff: int) -> int:
    """floor(value / 2**level_diff), exact for negative values and negative diffs."""
    if level_diff >= 0:
        return value >> level_diff
    return value << -level_diff


def get_adjusted_offset(offset: Tile | Tuple[int, int, int], rendered_key: str) -> Tuple[int, int]:
    """Map a wrapped offset onto the tile grid of the tile drawn in its place.

    When the rendered tile is finer than the offset, the result also encodes
    which sub-cell of the offset's footprint that descendant occupies.
    """
    rendered_x, rendered_y, rendered_level = key_to_tile(rendered_key)
    offset_x, offset_y, level = offset

    level_diff = level - rendered_level
    descendant_factor = 1 << (rendered_level - level) if rendered_level > level else 1

    return (
        _scale(offset_x, level_diff) + rendered_x % descendant_factor,
        _scale(offset_y, level_diff) + rendered_y % descendant_factor,
    )
