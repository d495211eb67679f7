"""Frame planner - per-frame tile placement and substitute selection."""

from tilemosaic.components.planner.planner import FramePlanner
from tilemosaic.components.planner.settings import PlannerSettings

__all__ = [
    "FramePlanner",
    "PlannerSettings",
]
