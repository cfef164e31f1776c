"""Frame-stepped generation of one cycloid arch."""

from __future__ import annotations

import enum
from typing import List

from .curve_math import TWO_PI, Point3D, traced_point

__all__ = ["AnimationPhase", "AnimationState", "DEFAULT_THETA_STEP"]

DEFAULT_THETA_STEP = 0.02


class AnimationPhase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"


class AnimationState:
    """Owns θ, the play flags and the growing trail of traced points.

    ``tick`` advances θ by a fixed step per frame and appends the rim point
    at the new θ.  The step that crosses 2π is clamped to exactly 2π, marks
    the run complete and still appends its point, so after ``N`` executed
    ticks the trail holds ``N`` points.
    """

    def __init__(self, step: float = DEFAULT_THETA_STEP) -> None:
        self.step = float(step)
        self.radius = 0.0
        self.theta = 0.0
        self.running = False
        self.complete = False
        self.trail: List[Point3D] = []
        self._started = False

    @property
    def phase(self) -> AnimationPhase:
        if self.complete:
            return AnimationPhase.COMPLETE
        if self.running:
            return AnimationPhase.RUNNING
        if self._started:
            return AnimationPhase.PAUSED
        return AnimationPhase.IDLE

    def start(self, radius: float) -> None:
        self.radius = float(radius)
        self.theta = 0.0
        self.trail = []
        self.running = True
        self.complete = False
        self._started = True

    def tick(self) -> None:
        if not self.running or self.complete:
            return
        self.theta += self.step
        if self.theta >= TWO_PI:
            self.theta = TWO_PI
            self.complete = True
            self.running = False
        self.trail.append(traced_point(self.radius, self.theta))

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        if self.complete or not self._started:
            return
        self.running = True
