import pytest

from fdfkit.camera import Camera, Projection, camera_for, scale_to_fit
from fdfkit.geometry import Map


def test_scale_to_fit_small_map():
    assert scale_to_fit(Map(max_x=10, max_y=10), 1000, 1000) == 50.0


def test_scale_to_fit_uses_smaller_axis():
    assert scale_to_fit(Map(max_x=10, max_y=10), 1000, 500) == 25.0


def test_scale_to_fit_floor_for_large_map():
    assert scale_to_fit(Map(max_x=500, max_y=500), 1000, 1000) == 2.0


def test_scale_to_fit_empty_map_rejected():
    with pytest.raises(ValueError):
        scale_to_fit(Map(), 800, 600)


def test_camera_for_defaults():
    m = Map(max_x=10, max_y=10)
    camera = camera_for(m, 800, 600)
    assert camera.projection is Projection.ISOMETRIC
    assert camera.color_pallet is False
    assert camera.scale_z == 1.0
    assert camera.move_x * 2 == 800
    assert camera.move_y * 2 == 600
    assert (camera.alpha, camera.beta, camera.gamma) == (0.0, 0.0, 0.0)
    assert camera.scale_factor == scale_to_fit(m, 800, 600)


def test_reset_restores_everything_but_projection():
    m = Map(max_x=20, max_y=10)
    camera = camera_for(m, 800, 600)
    camera.projection = Projection.TOP
    camera.scale_factor += 7
    camera.scale_z = -0.5
    camera.move_x += 30
    camera.alpha, camera.beta, camera.gamma = 0.1, 0.2, 0.3
    camera.reset(m)
    expected = camera_for(m, 800, 600)
    expected.projection = Projection.TOP
    assert camera == expected


def test_camera_equality_covers_window():
    assert Camera(800, 600) == Camera(800, 600)
    assert not Camera(800, 600) == Camera(600, 800)