"""Choose which resident tile(s) to draw in place of a tile that is not loaded yet."""

from __future__ import annotations

import itertools
import logging
from typing import List, Optional, Sequence

from tilemosaic.core.interfaces import ResidencyProvider
from tilemosaic.core.tile_id import Tile, key_to_tile, tile_to_key

logger = logging.getLogger(__name__)

FULL_COVERAGE = 1.0


def _is_resident(residency: ResidencyProvider, key: str) -> bool:
    return bool(residency.get(key, False))


def get_ancestor_to_render(target_key: str, residency: ResidencyProvider) -> Optional[str]:
    """Return the nearest resident key among the target and its ancestors, or None."""
    x, y, z = key_to_tile(target_key)
    while z >= 0:
        key = tile_to_key(Tile(x, y, z))
        if _is_resident(residency, key):
            return key
        z -= 1
        x //= 2
        y //= 2
    return None


def _descendant_grid(x: int, y: int, z: int, delta: int) -> List[str]:
    # dx outer, dy inner
    return [
        tile_to_key(Tile(x + dx, y + dy, z))
        for dx, dy in itertools.product(range(delta + 1), range(delta + 1))
    ]


def get_descendants_to_render(
    target_key: str,
    residency: ResidencyProvider,
    max_zoom: int,
) -> List[str]:
    """Return the descendant mosaic with the best coverage of the target's footprint.

    Walks from the target's level down to max_zoom. A fully resident mosaic is
    returned as soon as it is found; otherwise the first mosaic reaching the
    highest coverage wins. Returns an empty list when nothing is resident.
    """
    initial_x, initial_y, initial_z = key_to_tile(target_key)
    x, y, z = initial_x, initial_y, initial_z
    coverage = 0.0
    descendants: List[str] = []
    while z <= max_zoom:
        delta = z - initial_z
        keys = _descendant_grid(x, y, z, delta)
        resident = sum(1 for key in keys if _is_resident(residency, key))
        current_coverage = resident / len(keys)

        if current_coverage >= FULL_COVERAGE:
            return keys
        if current_coverage > coverage:
            coverage = current_coverage
            descendants = keys

        z += 1
        x *= 2
        y *= 2

    return descendants


def get_keys_to_render(
    target_key: str,
    residency: ResidencyProvider,
    max_zoom: int,
) -> List[str]:
    """Resolve a target key to the keys to draw: an ancestor, a mosaic, or the target itself."""
    ancestor = get_ancestor_to_render(target_key, residency)
    if ancestor is not None:
        logger.debug("Rendering %s with ancestor %s", target_key, ancestor)
        return [ancestor]

    descendants = get_descendants_to_render(target_key, residency, max_zoom)
    if descendants:
        logger.debug("Rendering %s with %d descendants", target_key, len(descendants))
        return descendants

    logger.debug("Nothing resident for %s, requesting it", target_key)
    return [target_key]


def get_overlapping_ancestor(key: str, rendered_keys: Sequence[str]) -> Optional[str]:
    """Return the first rendered key that is a strict ancestor of `key`, if any."""
    child = key_to_tile(key)
    for parent_key in rendered_keys:
        parent = key_to_tile(parent_key)
        if child.z <= parent.z:
            continue
        shift = child.z - parent.z
        if child.x >> shift == parent.x and child.y >> shift == parent.y:
            return parent_key
    return None
