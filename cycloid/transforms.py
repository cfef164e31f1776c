"""4x4 transform helpers (column vectors, OpenGL conventions)."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

__all__ = ["frustum", "identity", "look_at", "mvp", "project_points"]


def identity() -> np.ndarray:
    return np.identity(4, dtype=np.float64)


def look_at(
    eye: Sequence[float],
    center: Sequence[float],
    up: Sequence[float] = (0.0, 1.0, 0.0),
) -> np.ndarray:
    """Right-handed view matrix, camera looking down its local -Z axis."""

    eye_v = np.asarray(eye, dtype=np.float64)
    forward = np.asarray(center, dtype=np.float64) - eye_v
    norm = np.linalg.norm(forward)
    if norm == 0.0:
        return identity()
    forward /= norm
    side = np.cross(forward, np.asarray(up, dtype=np.float64))
    side_norm = np.linalg.norm(side)
    if side_norm == 0.0:
        # looking straight along ``up``
        side = np.array([1.0, 0.0, 0.0])
    else:
        side /= side_norm
    true_up = np.cross(side, forward)

    view = identity()
    view[0, :3] = side
    view[1, :3] = true_up
    view[2, :3] = -forward
    view[:3, 3] = -view[:3, :3] @ eye_v
    return view


def frustum(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    out = np.zeros((4, 4), dtype=np.float64)
    out[0, 0] = 2.0 * near / (right - left)
    out[1, 1] = 2.0 * near / (top - bottom)
    out[0, 2] = (right + left) / (right - left)
    out[1, 2] = (top + bottom) / (top - bottom)
    out[2, 2] = -(far + near) / (far - near)
    out[2, 3] = -2.0 * far * near / (far - near)
    out[3, 2] = -1.0
    return out


def mvp(projection: np.ndarray, view: np.ndarray, model: Optional[np.ndarray] = None) -> np.ndarray:
    if model is None:
        model = identity()
    return projection @ view @ model


def project_points(
    matrix: np.ndarray,
    points: Iterable[Sequence[float]],
    width: float,
    height: float,
) -> List[Optional[Tuple[float, float]]]:
    """Map world points to pixel coordinates through ``matrix``.

    Points behind the eye (``w <= 0``) come back as ``None``.  Pixel ``y``
    grows downwards.
    """

    pts = np.asarray(list(points), dtype=np.float64)
    if pts.size == 0:
        return []
    homogeneous = np.hstack([pts.reshape(-1, 3), np.ones((len(pts), 1))])
    clip = homogeneous @ matrix.T
    out: List[Optional[Tuple[float, float]]] = []
    for x, y, _z, w in clip:
        if w <= 1e-9:
            out.append(None)
            continue
        out.append(((x / w + 1.0) * 0.5 * width, (1.0 - y / w) * 0.5 * height))
    return out
