"""Orbital camera framing the cycloid arch."""

from __future__ import annotations

import math
from typing import Mapping, Optional, Tuple

import numpy as np

from . import transforms
from .control.config import coerce_float

__all__ = ["CameraRig", "optimal_distance"]

DISTANCE_FACTOR = 12.0


def optimal_distance(radius: float, factor: float = DISTANCE_FACTOR) -> float:
    """Distance that keeps the whole arch (about 2π·r wide) in frame."""

    return radius * factor


class CameraRig:
    """Yaw/pitch/distance orbit around the middle of the full arch.

    The look-at target is ``(π·r, r, 0)`` whatever θ is.  Zoom requests only
    move ``target_distance``; :meth:`tick` eases ``distance`` towards it by a
    fixed fraction per frame and snaps once the gap falls under
    ``snap_epsilon``.
    """

    def __init__(
        self,
        yaw_deg: float = 45.0,
        pitch_deg: float = 30.0,
        distance: float = 600.0,
        *,
        min_pitch: float = -89.0,
        max_pitch: float = 89.0,
        smoothing: float = 0.08,
        snap_epsilon: float = 0.5,
        distance_factor: float = DISTANCE_FACTOR,
        near: float = 3.0,
        far: float = 500000.0,
    ) -> None:
        self.min_pitch = min_pitch
        self.max_pitch = max_pitch
        self.smoothing = smoothing
        self.snap_epsilon = snap_epsilon
        self.distance_factor = distance_factor
        self.near = near
        self.far = far
        self.yaw_deg = 0.0
        self.pitch_deg = 0.0
        self.distance = float(distance)
        self.target_distance = float(distance)
        self.rotate(yaw_deg, pitch_deg)

    def configure(self, cfg: Mapping[str, object]) -> None:
        self.min_pitch = coerce_float(cfg.get("minPitchDeg"), self.min_pitch)
        self.max_pitch = coerce_float(cfg.get("maxPitchDeg"), self.max_pitch)
        self.smoothing = coerce_float(cfg.get("smoothing"), self.smoothing)
        self.snap_epsilon = coerce_float(cfg.get("snapEpsilon"), self.snap_epsilon)
        self.distance_factor = coerce_float(cfg.get("distanceFactor"), self.distance_factor)
        self.near = coerce_float(cfg.get("near"), self.near)
        self.far = coerce_float(cfg.get("far"), self.far)
        self.pitch_deg = max(self.min_pitch, min(self.max_pitch, self.pitch_deg))

    # ------------------------------------------------------------------ input
    def rotate(self, delta_yaw_deg: float, delta_pitch_deg: float) -> None:
        self.pitch_deg = max(self.min_pitch, min(self.max_pitch, self.pitch_deg + delta_pitch_deg))
        self.yaw_deg = (self.yaw_deg + delta_yaw_deg) % 360.0
        if self.yaw_deg >= 360.0:
            # ``-1e-18 % 360`` rounds to 360.0
            self.yaw_deg = 0.0

    def set_target_distance(self, distance: float) -> None:
        self.target_distance = float(distance)

    def set_distance_immediate(self, distance: float) -> None:
        self.distance = float(distance)
        self.target_distance = float(distance)

    def optimal_distance(self, radius: float) -> float:
        return optimal_distance(radius, self.distance_factor)

    # ------------------------------------------------------------------ frame
    def tick(self) -> None:
        gap = self.target_distance - self.distance
        if abs(gap) > self.snap_epsilon:
            self.distance += gap * self.smoothing
        else:
            self.distance = self.target_distance

    @staticmethod
    def target(radius: float) -> Tuple[float, float, float]:
        return math.pi * radius, radius, 0.0

    def eye(self, radius: float) -> Tuple[float, float, float]:
        yaw = math.radians(self.yaw_deg)
        pitch = math.radians(self.pitch_deg)
        tx, ty, tz = self.target(radius)
        return (
            tx + self.distance * math.cos(pitch) * math.sin(yaw),
            ty + self.distance * math.sin(pitch),
            tz + self.distance * math.cos(pitch) * math.cos(yaw),
        )

    def view_matrix(self, radius: float) -> np.ndarray:
        return transforms.look_at(self.eye(radius), self.target(radius))

    def projection_matrix(self, aspect: float) -> np.ndarray:
        return transforms.frustum(-aspect, aspect, -1.0, 1.0, self.near, self.far)

    def mvp(self, radius: float, aspect: float, model: Optional[np.ndarray] = None) -> np.ndarray:
        return transforms.mvp(self.projection_matrix(aspect), self.view_matrix(radius), model)
