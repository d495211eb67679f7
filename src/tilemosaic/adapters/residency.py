"""Residency views over tile caches owned by the rendering layer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, Optional


class MappingResidency(Mapping):
    """Residency backed by a plain key -> flag mapping; missing keys read as False."""

    def __init__(self, flags: Optional[Mapping[str, Any]] = None) -> None:
        self._flags = dict(flags or {})

    def __getitem__(self, key: str) -> bool:
        return bool(self._flags.get(key, False))

    def __contains__(self, key: object) -> bool:
        return key in self._flags

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)


class TileCacheResidency(Mapping):
    """Residency derived from cache entries shaped like `tile.cache.buffer`.

    An entry is resident when its cache buffer is present (not None and not
    empty). Entries without a cache are not resident.
    """

    def __init__(self, tiles: Mapping[str, Any]) -> None:
        self._tiles = tiles

    def __getitem__(self, key: str) -> bool:
        tile = self._tiles.get(key)
        cache = getattr(tile, "cache", None)
        buffer = getattr(cache, "buffer", None)
        if buffer is None:
            return False
        try:
            return len(buffer) > 0
        except TypeError:
            return bool(buffer)

    def __contains__(self, key: object) -> bool:
        return key in self._tiles

    def __iter__(self) -> Iterator[str]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)
