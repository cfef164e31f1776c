"""Closed-form geometry of the classic cycloid.

Every function here is pure.  ``radius > 0`` and ``segments >= 1`` are
preconditions owned by the callers (the animation state and the scene), the
functions do not validate them.

Two parameterisations are in use:

* :func:`position` is the textbook cycloid ``(r(θ - sin θ), r(1 - cos θ))``.
* :func:`traced_point` follows the rim point of the rolling circle, whose
  rotation angle is ``-θ`` and whose center sits at ``(θ·r, r)``.  Both give
  the same curve; the second one is what the wheel and the trail are drawn
  from.
"""

from __future__ import annotations

import math
from typing import List, Tuple

Point2D = Tuple[float, float]
Point3D = Tuple[float, float, float]
Quad = Tuple[Point3D, Point3D, Point3D, Point3D]

TWO_PI = 2.0 * math.pi

__all__ = [
    "TWO_PI",
    "area_trapezoids",
    "circle_center",
    "position",
    "rolling_circle_points",
    "theoretical_area",
    "traced_point",
]


def position(radius: float, theta: float) -> Point2D:
    return radius * (theta - math.sin(theta)), radius * (1.0 - math.cos(theta))


def circle_center(radius: float, theta: float) -> Point3D:
    """Center of the rolling circle once it has turned by ``theta``."""

    return theta * radius, radius, 0.0


def traced_point(radius: float, theta: float) -> Point3D:
    """Rim point that traces the curve, starting at the bottom of the circle."""

    cx, cy, _ = circle_center(radius, theta)
    rotation = -theta
    return cx + radius * math.sin(rotation), cy - radius * math.cos(rotation), 0.0


def rolling_circle_points(
    radius: float, theta: float, segments: int, *, scale: float = 1.0
) -> List[Point3D]:
    """Closed loop of ``segments + 1`` points around the rolling circle.

    ``scale`` shrinks the loop relative to ``radius`` (used for rims and the
    hub).  The last point duplicates the first one.
    """

    cx, cy, _ = circle_center(radius, theta)
    ring = radius * scale
    points: List[Point3D] = []
    for i in range(segments + 1):
        angle = (i / segments) * TWO_PI
        points.append((cx + ring * math.cos(angle), cy + ring * math.sin(angle), 0.0))
    points[-1] = points[0]
    return points


def area_trapezoids(radius: float, theta_max: float, segments: int) -> List[Quad]:
    """Polygon decomposition of the region under the traced curve.

    ``[0, theta_max]`` is split into ``segments`` equal steps.  Each quad is
    ``(base(t1), traced(t1), traced(t2), base(t2))`` where the base points lie
    on the x axis under the traced points.  This is a fill decomposition, not
    an integration result.
    """

    delta = theta_max / segments
    quads: List[Quad] = []
    for i in range(segments):
        x1, y1, _ = traced_point(radius, i * delta)
        x2, y2, _ = traced_point(radius, (i + 1) * delta)
        quads.append(((x1, 0.0, 0.0), (x1, y1, 0.0), (x2, y2, 0.0), (x2, 0.0, 0.0)))
    return quads


def theoretical_area(radius: float) -> float:
    return 3.0 * math.pi * radius * radius
