from __future__ import annotations

import numpy as np

GRID_MODES = ("grid", "dotgrid")
TEXTURE_MODE = "texture"


def get_positions(size: int, mode: str) -> np.ndarray:
    """Vertex positions for drawing one tile of `size` pixels.

    Grid modes yield one cell center per pixel, shape (size * size, 2).
    Texture mode yields two triangles covering the tile as 12 flat floats.
    """
    if mode in GRID_MODES:
        j, i = np.meshgrid(np.arange(size), np.arange(size))
        return np.stack([j.ravel() + 0.5, i.ravel() + 0.5], axis=1).astype(np.float32)
    if mode == TEXTURE_MODE:
        return np.array(
            [0.0, 0.0, 0.0, size, size, 0.0, size, 0.0, 0.0, size, size, size],
            dtype=np.float32,
        )
    return np.empty((0,), dtype=np.float32)
