import numpy as np
import pytest

from cycloid import transforms


def test_look_at_moves_eye_to_origin():
    view = transforms.look_at((0.0, 0.0, 5.0), (0.0, 0.0, 0.0))
    assert view @ np.array([0.0, 0.0, 5.0, 1.0]) == pytest.approx([0.0, 0.0, 0.0, 1.0])
    assert view @ np.array([0.0, 0.0, 0.0, 1.0]) == pytest.approx([0.0, 0.0, -5.0, 1.0])


def test_look_at_is_a_rigid_transform():
    view = transforms.look_at((3.0, 4.0, 12.0), (1.0, -2.0, 0.5))
    rotation = view[:3, :3]
    assert rotation @ rotation.T == pytest.approx(np.identity(3))
    assert np.linalg.det(rotation) == pytest.approx(1.0)


def test_look_at_straight_down_does_not_degenerate():
    view = transforms.look_at((0.0, 10.0, 0.0), (0.0, 0.0, 0.0))
    assert np.all(np.isfinite(view))


def test_frustum_maps_near_and_far_planes():
    proj = transforms.frustum(-1.0, 1.0, -1.0, 1.0, 3.0, 1000.0)
    near = proj @ np.array([0.0, 0.0, -3.0, 1.0])
    far = proj @ np.array([0.0, 0.0, -1000.0, 1.0])
    assert near[2] / near[3] == pytest.approx(-1.0)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_mvp_defaults_to_identity_model():
    proj = transforms.frustum(-1.5, 1.5, -1.0, 1.0, 3.0, 500.0)
    view = transforms.look_at((0.0, 2.0, 9.0), (0.0, 0.0, 0.0))
    assert transforms.mvp(proj, view) == pytest.approx(proj @ view)


def test_project_points_to_pixels():
    proj = transforms.frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 100.0)
    view = transforms.look_at((0.0, 0.0, 10.0), (0.0, 0.0, 0.0))
    matrix = transforms.mvp(proj, view)
    center, behind = transforms.project_points(matrix, [(0.0, 0.0, 0.0), (0.0, 0.0, 20.0)], 800, 600)
    assert center == pytest.approx((400.0, 300.0))
    assert behind is None


def test_project_points_y_grows_downwards():
    proj = transforms.frustum(-1.0, 1.0, -1.0, 1.0, 1.0, 100.0)
    view = transforms.look_at((0.0, 0.0, 10.0), (0.0, 0.0, 0.0))
    (x, y), = transforms.project_points(transforms.mvp(proj, view), [(0.0, 1.0, 0.0)], 100, 100)
    assert x == pytest.approx(50.0)
    assert y < 50.0


def test_project_points_empty():
    assert transforms.project_points(transforms.identity(), [], 10, 10) == []
