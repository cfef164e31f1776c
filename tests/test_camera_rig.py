import math
import random

import numpy as np
import pytest

from cycloid.camera_rig import CameraRig, optimal_distance


def test_initial_orientation():
    rig = CameraRig()
    assert rig.yaw_deg == 45.0
    assert rig.pitch_deg == 30.0


@pytest.mark.parametrize("delta, expected", [(500.0, 89.0), (-1000.0, -89.0), (10.0, 40.0)])
def test_pitch_is_clamped(delta, expected):
    rig = CameraRig()
    rig.rotate(0.0, delta)
    assert rig.pitch_deg == expected


def test_yaw_wraps():
    rig = CameraRig()
    rig.rotate(-50.0, 0.0)
    assert rig.yaw_deg == pytest.approx(355.0)
    rig.rotate(10.0, 0.0)
    assert rig.yaw_deg == pytest.approx(5.0)
    rig.rotate(720.0, 0.0)
    assert rig.yaw_deg == pytest.approx(5.0)


def test_random_rotations_respect_bounds():
    rng = random.Random(1234)
    rig = CameraRig()
    for _ in range(2000):
        rig.rotate(rng.uniform(-400.0, 400.0), rng.uniform(-200.0, 200.0))
        assert -89.0 <= rig.pitch_deg <= 89.0
        assert 0.0 <= rig.yaw_deg < 360.0


def test_target_distance_is_approached_then_snapped():
    rig = CameraRig()
    rig.set_distance_immediate(100.0)
    rig.set_target_distance(1000.0)
    assert rig.distance == 100.0
    rig.tick()
    assert rig.distance == pytest.approx(100.0 + 900.0 * 0.08)
    ticks = 1
    while rig.distance != rig.target_distance:
        rig.tick()
        ticks += 1
        assert ticks < 500
    assert rig.distance == 1000.0


def test_distance_moves_monotonically_towards_target():
    rig = CameraRig(distance=2000.0)
    rig.set_target_distance(300.0)
    previous = rig.distance
    for _ in range(200):
        rig.tick()
        assert 300.0 <= rig.distance <= previous
        previous = rig.distance
    assert rig.distance == 300.0


def test_snap_inside_epsilon():
    rig = CameraRig()
    rig.set_distance_immediate(100.0)
    rig.set_target_distance(100.4)
    rig.tick()
    assert rig.distance == 100.4


def test_optimal_distance():
    assert optimal_distance(50.0) == 600.0
    assert CameraRig().optimal_distance(10.0) == 120.0


def test_eye_orbits_the_arch_midpoint():
    rig = CameraRig(yaw_deg=0.0, pitch_deg=0.0, distance=500.0)
    assert rig.target(10.0) == (math.pi * 10.0, 10.0, 0.0)
    ex, ey, ez = rig.eye(10.0)
    assert ex == pytest.approx(math.pi * 10.0)
    assert ey == pytest.approx(10.0)
    assert ez == pytest.approx(500.0)

    rig.rotate(73.0, 41.0)
    eye = np.array(rig.eye(10.0))
    assert np.linalg.norm(eye - np.array(rig.target(10.0))) == pytest.approx(500.0)


def test_view_matrix_puts_target_in_front_of_the_camera():
    rig = CameraRig(yaw_deg=120.0, pitch_deg=-20.0, distance=700.0)
    target = np.array(rig.target(25.0) + (1.0,))
    in_view = rig.view_matrix(25.0) @ target
    assert in_view[0] == pytest.approx(0.0, abs=1e-6)
    assert in_view[1] == pytest.approx(0.0, abs=1e-6)
    assert in_view[2] == pytest.approx(-700.0)


def test_far_plane_keeps_large_scenes_visible():
    rig = CameraRig(yaw_deg=0.0, pitch_deg=0.0, distance=400000.0)
    clip = rig.mvp(10000.0, 1.0) @ np.array(rig.target(10000.0) + (1.0,))
    assert clip[3] > 0
    assert -1.0 <= clip[2] / clip[3] <= 1.0
