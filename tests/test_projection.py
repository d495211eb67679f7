import math

import pytest

from tilemosaic.core.projection import (
    level_for_zoom,
    point_to_tile,
    point_to_tile_space,
    tile_to_point,
)
from tilemosaic.core.tile_id import Tile


def test_origin_maps_to_world_center() -> None:
    x, y, z = point_to_tile_space(0.0, 0.0, 2)
    assert z == 2
    assert x == pytest.approx(2.0)
    assert y == pytest.approx(2.0)


def test_longitude_wraps() -> None:
    x_east, _, _ = point_to_tile_space(190.0, 10.0, 3)
    x_west, _, _ = point_to_tile_space(-170.0, 10.0, 3)
    assert x_east == pytest.approx(x_west)
    assert 0 <= x_east < 8


def test_antimeridian_wraps_to_zero() -> None:
    x, _, _ = point_to_tile_space(180.0, 0.0, 4)
    assert x == pytest.approx(0.0)


def test_latitude_clamps_at_poles() -> None:
    assert point_to_tile_space(0.0, 90.0, 3)[1] == 0.0
    assert point_to_tile_space(0.0, -90.0, 3)[1] == 8.0
    assert point_to_tile_space(0.0, 89.9999, 3)[1] == pytest.approx(0.0, abs=1e-6)


def test_point_to_tile_never_overflows_bottom_row() -> None:
    assert point_to_tile(0.0, -90.0, 3) == Tile(4, 7, 3)
    assert point_to_tile(-180.0, 90.0, 3) == Tile(0, 0, 3)


def test_point_to_tile_known_location() -> None:
    # Los Angeles
    assert point_to_tile(-118.39483, 33.87554, 10) == Tile(175, 409, 10)


@pytest.mark.parametrize("z", [0, 1, 5, 12])
@pytest.mark.parametrize("lon,lat", [(0.0, 0.0), (-118.4, 33.9), (151.2, -33.8), (-179.5, 84.0)])
def test_projection_inverts(lon: float, lat: float, z: int) -> None:
    x, y, _ = point_to_tile_space(lon, lat, z)
    lon2, lat2 = tile_to_point(x, y, z)
    assert lon2 == pytest.approx(lon, abs=1e-6)
    assert lat2 == pytest.approx(lat, abs=1e-6)


def test_tile_to_point_corners() -> None:
    lon, lat = tile_to_point(0, 0, 0)
    assert lon == pytest.approx(-180.0)
    assert lat == pytest.approx(math.degrees(math.atan(math.sinh(math.pi))))


def test_level_for_zoom() -> None:
    assert level_for_zoom(3.7) == 3
    assert level_for_zoom(-1.2) == 0
    assert level_for_zoom(9.1, 6) == 6
    assert level_for_zoom(4.9, 6) == 4


def test_level_for_zoom_zero_max() -> None:
    assert level_for_zoom(3.0, 0) == 0


@pytest.mark.parametrize("z", [0, 3, 8])
@pytest.mark.parametrize("lat", [95.0, 180.0, -270.0, 1000.0, -95.0])
def test_out_of_range_latitude_stays_in_tile_space(lat: float, z: int) -> None:
    _, y, _ = point_to_tile_space(12.0, lat, z)
    assert 0.0 <= y <= 2**z
    tile = point_to_tile(12.0, lat, z)
    assert 0 <= tile.x < 2**z
    assert 0 <= tile.y < 2**z
