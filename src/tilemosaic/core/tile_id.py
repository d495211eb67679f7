from __future__ import annotations

from typing import NamedTuple

KEY_DELIMITER = ","
_KEY_FIELDS = 3


class InvalidTileKeyError(ValueError):
    """Raised when a tile key string cannot be decoded."""


class Tile(NamedTuple):
    """Tile (or unclipped offset) address in a quad-tree pyramid."""

    x: int
    y: int
    z: int


def tile_to_key(tile: Tile | tuple[int, int, int]) -> str:
    """Return the canonical "x,y,z" key for a tile."""
    x, y, z = tile
    return KEY_DELIMITER.join((str(int(x)), str(int(y)), str(int(z))))


def key_to_tile(key: str) -> Tile:
    parts = key.split(KEY_DELIMITER)
    if len(parts) != _KEY_FIELDS:
        raise InvalidTileKeyError(f"Expected {_KEY_FIELDS} fields in tile key, got {key!r}")
    for part in parts:
        digits = part[1:] if part.startswith("-") else part
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidTileKeyError(f"Non-integer field {part!r} in tile key {key!r}")
    x, y, z = (int(part) for part in parts)
    return Tile(x, y, z)


def max_index(z: int) -> int:
    """Largest valid x/y index at level z."""
    return (1 << z) - 1


def clip(v: int, max_value: int) -> int:
    """Wrap v once into the cyclic range [0, max_value], clamping anything further out."""
    if v < 0:
        result = v + max_value + 1
    elif v > max_value:
        result = v - max_value - 1
    else:
        result = v
    return min(max(result, 0), max_value)


def wrap_tile(offset: Tile | tuple[int, int, int]) -> Tile:
    x, y, z = offset
    top = max_index(z)
    return Tile(clip(x, top), clip(y, top), z)
