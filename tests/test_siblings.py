from tilemosaic.core.schemas import CameraState
from tilemosaic.core.siblings import get_offsets, get_siblings
from tilemosaic.core.tile_id import Tile, key_to_tile, wrap_tile


def test_offsets_symmetric_for_centered_camera() -> None:
    assert get_offsets(3 * 512, 512, 0.5) == (-1, 1)
    assert get_offsets(3 * 512, 512, 7.5) == (-1, 1)


def test_offsets_exact_fit_needs_no_siblings() -> None:
    assert get_offsets(512, 512, 0.3) == (0, 0)
    assert get_offsets(512.1, 512, 0.3) == (0, 0)


def test_offsets_biased_by_camera_position() -> None:
    # two tiles wide: camera at 0.0 spans [-1, 1], at 0.9 spans [-0.1, 1.9]
    assert get_offsets(2 * 512, 512, 0.0) == (-1, 0)
    assert get_offsets(2 * 512, 512, 0.5) == (-1, 1)
    assert get_offsets(2 * 512, 512, 0.9) == (-1, 1)
    assert get_offsets(2 * 512, 512, 3.0) == (-1, 0)


def test_offsets_degenerate_axis() -> None:
    assert get_offsets(0, 512, 0.0) == (0, 0)
    assert get_offsets(1024, 0, 0.0) == (0, 0)
    assert get_offsets(-5, 512, 0.5) == (0, 0)


def test_siblings_single_group_without_wraparound() -> None:
    camera = CameraState(viewport_width=512, viewport_height=512, zoom=3, camera_x=4.5, camera_y=4.5)
    assert get_siblings(Tile(4, 4, 3), camera) == {"4,4,3": [Tile(4, 4, 3)]}


def test_siblings_wrap_across_antimeridian() -> None:
    camera = CameraState(viewport_width=3 * 512, viewport_height=512, zoom=1, camera_x=0.5, camera_y=0.5)
    siblings = get_siblings(Tile(0, 0, 1), camera)
    assert list(siblings) == ["1,0,1", "0,0,1"]
    assert siblings["1,0,1"] == [Tile(-1, 0, 1), Tile(1, 0, 1)]
    assert siblings["0,0,1"] == [Tile(0, 0, 1)]


def test_sibling_offsets_clip_to_their_key() -> None:
    camera = CameraState(viewport_width=2000, viewport_height=1500, zoom=2.4, camera_x=3.2, camera_y=0.1)
    siblings = get_siblings(Tile(3, 0, 2), camera, pixel_ratio=2.0)
    assert siblings
    for key, offsets in siblings.items():
        for offset in offsets:
            assert wrap_tile(offset) == key_to_tile(key)


def test_siblings_enumeration_order_x_outer_y_inner() -> None:
    camera = CameraState(viewport_width=3 * 512, viewport_height=3 * 512, zoom=4, camera_x=5.5, camera_y=5.5)
    siblings = get_siblings(Tile(5, 5, 4), camera)
    flat = [offset for offsets in siblings.values() for offset in offsets]
    assert flat == [Tile(5 + dx, 5 + dy, 4) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]


def test_pixel_ratio_grows_tiles() -> None:
    camera = CameraState(viewport_width=1024, viewport_height=1024, zoom=3, camera_x=4.5, camera_y=4.5)
    assert len(get_siblings(Tile(4, 4, 3), camera, pixel_ratio=2.0)) == 1
    assert len(get_siblings(Tile(4, 4, 3), camera, pixel_ratio=1.0)) > 1
