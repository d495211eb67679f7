"""Frame planner - turns needed tiles into draw commands for the renderer."""

from __future__ import annotations

import logging
from typing import Iterable, List

from tilemosaic.components.planner.settings import PlannerSettings
from tilemosaic.core.coverage import get_keys_to_render
from tilemosaic.core.interfaces import ResidencyProvider
from tilemosaic.core.offsets import get_adjusted_offset
from tilemosaic.core.projection import level_for_zoom, point_to_tile, point_to_tile_space
from tilemosaic.core.schemas import CameraState, RenderCommand
from tilemosaic.core.siblings import get_siblings
from tilemosaic.core.tile_id import Tile

logger = logging.getLogger(__name__)


class FramePlanner:
    """Runs sibling enumeration, substitute selection and offset mapping for a frame.

    The planner keeps no state between calls; residency is read only for the
    duration of `plan`.
    """

    def __init__(self, settings: PlannerSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> PlannerSettings:
        return self._settings

    def level(self, zoom: float) -> int:
        return level_for_zoom(zoom, self._settings.max_zoom)

    def needed_tiles(self, center_lon: float, center_lat: float, zoom: float) -> List[Tile]:
        """Return the tile under the viewport center at the level matching zoom."""
        return [point_to_tile(center_lon, center_lat, self.level(zoom))]

    def camera_for(
        self,
        center_lon: float,
        center_lat: float,
        zoom: float,
        viewport_width: float,
        viewport_height: float,
    ) -> CameraState:
        x, y, _ = point_to_tile_space(center_lon, center_lat, self.level(zoom))
        return CameraState(
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            zoom=zoom,
            camera_x=x,
            camera_y=y,
        )

    def plan(
        self,
        tiles: Iterable[Tile],
        camera: CameraState,
        residency: ResidencyProvider,
    ) -> List[RenderCommand]:
        """Build one RenderCommand per (placement, substitute key) pair."""
        commands: List[RenderCommand] = []
        requested = 0
        for tile in tiles:
            siblings = get_siblings(
                tile,
                camera,
                pixel_ratio=self._settings.pixel_ratio,
                base_size=self._settings.base_tile_px,
            )
            for key, offsets in siblings.items():
                rendered_keys = get_keys_to_render(key, residency, self._settings.max_zoom)
                if rendered_keys == [key] and not residency.get(key, False):
                    requested += 1
                for rendered_key in rendered_keys:
                    for offset in offsets:
                        commands.append(
                            RenderCommand(
                                key=key,
                                offset=offset,
                                rendered_key=rendered_key,
                                adjusted_offset=get_adjusted_offset(offset, rendered_key),
                            )
                        )

        logger.info("Planned %d draw commands (%d tiles still to load)", len(commands), requested)
        return commands
