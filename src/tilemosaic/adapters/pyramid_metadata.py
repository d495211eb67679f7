"""Read pyramid levels and tile size from a zarr multiscales descriptor."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from tilemosaic.core.schemas import PyramidMetadata

_ZATTRS_KEY = ".zattrs"


class InvalidPyramidMetadataError(ValueError):
    """Raised when a descriptor does not describe a tile pyramid."""


def parse_pyramid_metadata(descriptor: Mapping[str, Any]) -> PyramidMetadata:
    """Build PyramidMetadata from a consolidated zarr metadata descriptor.

    Expects descriptor["metadata"][".zattrs"]["multiscales"][0]["metadata"]["kwargs"]
    to carry `levels` (level count) and `pixels_per_tile`.
    """
    try:
        kwargs = descriptor["metadata"][_ZATTRS_KEY]["multiscales"][0]["metadata"]["kwargs"]
        level_count = int(kwargs["levels"])
        tile_size = int(kwargs["pixels_per_tile"])
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise InvalidPyramidMetadataError(f"Descriptor has no multiscales kwargs: {exc}") from exc

    max_zoom = level_count - 1
    try:
        return PyramidMetadata(
            levels=list(range(max_zoom + 1)),
            max_zoom=max_zoom,
            tile_size=tile_size,
        )
    except ValidationError as exc:
        raise InvalidPyramidMetadataError(str(exc)) from exc
