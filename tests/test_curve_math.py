import math

import pytest

from cycloid.curve_math import (
    TWO_PI,
    area_trapezoids,
    circle_center,
    position,
    rolling_circle_points,
    theoretical_area,
    traced_point,
)


@pytest.mark.parametrize("radius", [1.0, 12.5, 50.0, 200.0])
def test_position_goes_cusp_to_cusp(radius):
    assert position(radius, 0.0) == (0.0, 0.0)
    x, y = position(radius, TWO_PI)
    assert x == pytest.approx(TWO_PI * radius)
    assert y == pytest.approx(0.0, abs=1e-9)


def test_position_apex_is_twice_the_radius():
    x, y = position(10.0, math.pi)
    assert x == pytest.approx(math.pi * 10.0)
    assert y == pytest.approx(20.0)


@pytest.mark.parametrize("theta", [0.0, 0.3, 1.0, math.pi, 4.2, TWO_PI])
def test_traced_point_follows_the_parametric_curve(theta):
    px, py = position(7.0, theta)
    tx, ty, tz = traced_point(7.0, theta)
    assert tx == pytest.approx(px, abs=1e-9)
    assert ty == pytest.approx(py, abs=1e-9)
    assert tz == 0.0


def test_circle_center_rolls_at_constant_height():
    assert circle_center(5.0, 0.0) == (0.0, 5.0, 0.0)
    cx, cy, _ = circle_center(5.0, 2.0)
    assert cx == pytest.approx(10.0)
    assert cy == 5.0


def test_rolling_circle_is_a_closed_loop_around_the_center():
    points = rolling_circle_points(4.0, 1.5, 32)
    assert len(points) == 33
    assert points[-1] == points[0]
    cx, cy, _ = circle_center(4.0, 1.5)
    for x, y, z in points:
        assert math.hypot(x - cx, y - cy) == pytest.approx(4.0)
        assert z == 0.0


def test_rolling_circle_scale_shrinks_the_ring():
    points = rolling_circle_points(10.0, 0.0, 8, scale=0.5)
    cx, cy, _ = circle_center(10.0, 0.0)
    assert math.hypot(points[3][0] - cx, points[3][1] - cy) == pytest.approx(5.0)


def test_area_trapezoids_shape():
    quads = area_trapezoids(2.0, math.pi, 10)
    assert len(quads) == 10
    base1, top1, top2, base2 = quads[0]
    assert base1 == (0.0, 0.0, 0.0)
    assert top1[0] == pytest.approx(0.0)
    assert base1[0] == top1[0]
    assert base2[0] == top2[0]
    assert base2[1] == 0.0
    # consecutive quads share an edge
    assert quads[0][2] == quads[1][1]
    last_top = quads[-1][2]
    expected = traced_point(2.0, math.pi)
    assert last_top[0] == pytest.approx(expected[0])
    assert last_top[1] == pytest.approx(expected[1])


def test_area_trapezoids_fill_converges_to_theoretical_area():
    radius = 3.0
    total = 0.0
    for (x1, _, _), (_, y1, _), (x2, y2, _), _ in area_trapezoids(radius, TWO_PI, 1000):
        total += (x2 - x1) * (y1 + y2) / 2.0
    assert total == pytest.approx(theoretical_area(radius), rel=1e-3)


def test_theoretical_area_reference_values():
    assert theoretical_area(50.0) == pytest.approx(23561.94, abs=0.01)
    assert theoretical_area(1.0) == pytest.approx(9.42478, abs=1e-5)
    assert theoretical_area(2.0) == pytest.approx(3 * math.pi * 4)
