"""CLI entry point for inspecting tile selection."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from tilemosaic.adapters.geodesy_pyproj import GeodRegionGeometry
from tilemosaic.adapters.residency import MappingResidency
from tilemosaic.components.planner.planner import FramePlanner
from tilemosaic.components.planner.settings import PlannerSettings
from tilemosaic.core.coverage import get_keys_to_render
from tilemosaic.core.geometry import get_tiles_of_region
from tilemosaic.core.projection import point_to_tile
from tilemosaic.core.schemas import CameraState
from tilemosaic.core.siblings import get_siblings
from tilemosaic.core.tile_id import key_to_tile, tile_to_key

# Logging configuration
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Exit codes
_EXIT_SUCCESS = 0
_EXIT_FAILURE = 1

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect tile keys, siblings and substitute selection.")
    parser.add_argument("--max-zoom", type=int, default=None, help="Override MOSAIC_MAX_ZOOM.")
    parser.add_argument("--pixel-ratio", type=float, default=None, help="Override MOSAIC_PIXEL_RATIO.")
    sub = parser.add_subparsers(dest="command", required=True)

    key_parser = sub.add_parser("key", help="Print the key of the tile containing a point.")
    key_parser.add_argument("lon", type=float)
    key_parser.add_argument("lat", type=float)
    key_parser.add_argument("zoom", type=float)

    siblings_parser = sub.add_parser("siblings", help="Print wrapped placements of a tile.")
    siblings_parser.add_argument("key", help="Tile key, e.g. 1,1,2")
    _add_viewport_args(siblings_parser)
    siblings_parser.add_argument("--zoom", type=float, required=True)
    siblings_parser.add_argument("--camera-x", type=float, default=0.5)
    siblings_parser.add_argument("--camera-y", type=float, default=0.5)

    select_parser = sub.add_parser("select", help="Print the keys to render for a target key.")
    select_parser.add_argument("key", help="Target tile key.")
    select_parser.add_argument("--residency", type=Path, default=None, help="JSON file of key -> bool.")

    plan_parser = sub.add_parser("plan", help="Plan draw commands for a viewport centered on a point.")
    plan_parser.add_argument("lon", type=float)
    plan_parser.add_argument("lat", type=float)
    plan_parser.add_argument("zoom", type=float)
    _add_viewport_args(plan_parser)
    plan_parser.add_argument("--residency", type=Path, default=None, help="JSON file of key -> bool.")

    region_parser = sub.add_parser("region", help="Print tiles touched by a GeoJSON region feature.")
    region_parser.add_argument("path", type=Path)
    region_parser.add_argument("--level", type=int, required=True)

    return parser.parse_args(argv)


def _add_viewport_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=float, default=1024.0, help="Viewport width in device pixels.")
    parser.add_argument("--height", type=float, default=768.0, help="Viewport height in device pixels.")


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _load_residency(path: Optional[Path]) -> MappingResidency:
    if path is None:
        return MappingResidency()
    raw = _load_json(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Residency file must hold a JSON object: {path}")
    return MappingResidency(raw)


def _build_settings(args: argparse.Namespace) -> PlannerSettings:
    overrides: Dict[str, Any] = {}
    if args.max_zoom is not None:
        overrides["max_zoom"] = args.max_zoom
    if args.pixel_ratio is not None:
        overrides["pixel_ratio"] = args.pixel_ratio
    return PlannerSettings(**overrides)


def _run(args: argparse.Namespace, settings: PlannerSettings) -> Any:
    planner = FramePlanner(settings)

    if args.command == "key":
        return tile_to_key(point_to_tile(args.lon, args.lat, planner.level(args.zoom)))

    if args.command == "siblings":
        tile = key_to_tile(args.key)
        camera = CameraState(
            viewport_width=args.width,
            viewport_height=args.height,
            zoom=args.zoom,
            camera_x=args.camera_x,
            camera_y=args.camera_y,
        )
        siblings = get_siblings(tile, camera, pixel_ratio=settings.pixel_ratio, base_size=settings.base_tile_px)
        return {key: [list(offset) for offset in offsets] for key, offsets in siblings.items()}

    if args.command == "select":
        return get_keys_to_render(args.key, _load_residency(args.residency), settings.max_zoom)

    if args.command == "plan":
        camera = planner.camera_for(args.lon, args.lat, args.zoom, args.width, args.height)
        tiles = planner.needed_tiles(args.lon, args.lat, args.zoom)
        commands = planner.plan(tiles, camera, _load_residency(args.residency))
        records: List[Dict[str, Any]] = []
        for command in commands:
            record = asdict(command)
            record["offset"] = list(command.offset)
            record["adjusted_offset"] = list(command.adjusted_offset)
            records.append(record)
        return records

    if args.command == "region":
        return get_tiles_of_region(_load_json(args.path), args.level, GeodRegionGeometry())

    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        settings = _build_settings(args)
    except ValidationError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return _EXIT_FAILURE

    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)

    try:
        result = _run(args, settings)
    except (ValueError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return _EXIT_FAILURE

    print(json.dumps(result))
    return _EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
