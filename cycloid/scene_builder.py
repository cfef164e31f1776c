"""Per-frame orchestration of the cycloid scene.

:class:`CycloidScene` is the only object the hosting UI talks to.  It owns the
animation, camera and glow state, advances them once per rendered frame and
turns them into a flat list of :class:`Primitive` tuples (points, topology,
colour, MVP matrix) that any renderer can draw without knowing anything about
cycloids.

Host calls may arrive from an input thread while the render thread steps the
scene, so every public entry point takes the same re-entrant lock.  The trail
given to the renderer is a tuple snapshot taken under that lock.
"""

from __future__ import annotations

import copy
import enum
import math
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

import numpy as np

from . import transforms
from .animation import AnimationPhase, AnimationState
from .camera_rig import CameraRig
from .control.config import DEFAULTS, coerce_float
from .curve_math import Point3D, area_trapezoids, circle_center, rolling_circle_points, theoretical_area, traced_point
from .glow import GlowPhase, GlowState

__all__ = ["CycloidScene", "Frame", "Primitive", "Renderer", "Topology"]

Color = Tuple[float, float, float, float]


class Topology(enum.Enum):
    LINE_STRIP = "line_strip"
    LINE_LOOP = "line_loop"
    LINES = "lines"
    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"


@dataclass(frozen=True)
class Primitive:
    """One draw call handed to the renderer."""

    points: Tuple[Point3D, ...]
    topology: Topology
    color: Color
    mvp: np.ndarray = field(repr=False, compare=False)
    role: str = ""


@dataclass
class Frame:
    primitives: List[Primitive]
    model: np.ndarray
    view: np.ndarray
    projection: np.ndarray
    mvp: np.ndarray
    theta: float = 0.0
    complete: bool = False
    glow_alpha: float = 0.0

    def by_role(self, role: str) -> Optional[Primitive]:
        for primitive in self.primitives:
            if primitive.role == role:
                return primitive
        return None

    @property
    def roles(self) -> List[str]:
        return [p.role for p in self.primitives]


class Renderer(Protocol):
    def upload_and_draw(self, primitive: Primitive) -> None:
        ...


# ---------------------------------------------------------------------------
# Helpers


def _hex_to_rgba(value: str, alpha: float = 1.0) -> Color:
    value = (value or "").strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        return 1.0, 1.0, 1.0, max(0.0, min(1.0, alpha))
    try:
        r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return 1.0, 1.0, 1.0, max(0.0, min(1.0, alpha))
    return r / 255.0, g / 255.0, b / 255.0, max(0.0, min(1.0, float(alpha)))


def _coerce_int(value: object, default: int, minimum: int = 1) -> int:
    try:
        return max(minimum, int(float(value)))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return max(minimum, default)


def _rim_point(center: Point3D, ring: float, angle: float) -> Point3D:
    # same orientation as the traced point: angle 0 is the bottom of the wheel
    return center[0] + ring * math.sin(angle), center[1] - ring * math.cos(angle), 0.0


# ---------------------------------------------------------------------------
# Scene


class CycloidScene:
    """Animation, camera and glow state plus the per-frame primitive builder."""

    def __init__(self, params: Optional[Mapping[str, object]] = None) -> None:
        self.state: Dict[str, dict] = copy.deepcopy(DEFAULTS)
        self._lock = threading.RLock()
        self.animation = AnimationState()
        self.glow = GlowState()
        cam = self.state["camera"]
        self.camera = CameraRig(
            yaw_deg=coerce_float(cam.get("yawDeg"), 45.0),
            pitch_deg=coerce_float(cam.get("pitchDeg"), 30.0),
        )
        self._last_phase: Optional[AnimationPhase] = None
        self._last_glow_phase: Optional[GlowPhase] = None
        self._last_roles: Tuple[str, ...] = ()
        if params:
            self.merge_state(params)
        self._apply_params()
        self.camera.set_distance_immediate(self.camera.optimal_distance(self.radius))

    # ------------------------------------------------------------------ helpers
    def _debug(self, message: str) -> None:
        print(f"[Cycloid][DEBUG] {message}", flush=True)

    @property
    def radius(self) -> float:
        if self.animation.radius > 0.0:
            return self.animation.radius
        return coerce_float(self.state["animation"].get("radius"), 50.0)

    @property
    def theoretical_area(self) -> float:
        return theoretical_area(self.radius)

    def merge_state(self, payload: Mapping[str, object]) -> None:
        for key, value in payload.items():
            if key not in self.state or not isinstance(self.state[key], dict) or not isinstance(value, Mapping):
                self.state[key] = value  # type: ignore[assignment]
                continue
            self.state[key].update(value)

    def _apply_params(self) -> None:
        anim = self.state.get("animation", {})
        self.animation.step = coerce_float(anim.get("thetaStep"), self.animation.step)
        self.camera.configure(self.state.get("camera", {}))
        glow = self.state.get("glow", {})
        self.glow.fade_in_step = coerce_float(glow.get("fadeInStep"), self.glow.fade_in_step)
        self.glow.hold_ticks = _coerce_int(glow.get("holdTicks"), self.glow.hold_ticks, minimum=0)
        self.glow.fade_out_step = coerce_float(glow.get("fadeOutStep"), self.glow.fade_out_step)
        self.glow.overlay_threshold = coerce_float(glow.get("overlayThreshold"), self.glow.overlay_threshold)

    def _color(self, name: str) -> Color:
        appearance = self.state.get("appearance", {})
        return _hex_to_rgba(
            str(appearance.get(f"{name}Color", "#FFFFFF")),
            coerce_float(appearance.get(f"{name}Alpha"), 1.0),
        )

    def _note_transitions(self) -> None:
        phase = self.animation.phase
        if phase is not self._last_phase:
            self._debug(
                "animation %s (theta=%.4f trail=%d radius=%.2f)"
                % (phase.value, self.animation.theta, len(self.animation.trail), self.radius)
            )
            self._last_phase = phase
        glow_phase = self.glow.phase
        if glow_phase is not self._last_glow_phase:
            self._debug("glow %s (alpha=%.3f)" % (glow_phase.value, self.glow.alpha))
            self._last_glow_phase = glow_phase

    # ------------------------------------------------------------------ host API
    def set_params(self, payload: Mapping[str, object]) -> None:
        if not isinstance(payload, Mapping):
            return
        with self._lock:
            self.merge_state(payload)
            self._apply_params()

    def start(self, radius: float) -> None:
        """Begin a new run; the caller has already validated ``radius``."""

        with self._lock:
            self.state["animation"]["radius"] = float(radius)
            self.animation.start(radius)
            self.glow.reset()
            self.camera.set_target_distance(self.camera.optimal_distance(radius))
            self._note_transitions()

    def pause(self) -> None:
        with self._lock:
            self.animation.pause()
            self._note_transitions()

    def resume(self) -> None:
        with self._lock:
            self.animation.resume()
            self._note_transitions()

    def rotate(self, delta_x: float, delta_y: float) -> None:
        """Orbit the camera; deltas are degrees (yaw, pitch)."""

        with self._lock:
            self.camera.rotate(delta_x, delta_y)

    def set_zoom(self, distance: float) -> None:
        with self._lock:
            cam = self.state.get("camera", {})
            low = coerce_float(cam.get("minDistance"), 1.0)
            high = coerce_float(cam.get("maxDistance"), self.camera.far)
            self.camera.set_target_distance(max(low, min(high, float(distance))))

    def reset_view(self) -> None:
        with self._lock:
            cam = self.state.get("camera", {})
            self.camera.yaw_deg = 0.0
            self.camera.pitch_deg = 0.0
            self.camera.rotate(coerce_float(cam.get("yawDeg"), 45.0), coerce_float(cam.get("pitchDeg"), 30.0))
            self.camera.set_target_distance(self.camera.optimal_distance(self.radius))

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "phase": self.animation.phase.value,
                "radius": self.radius,
                "theta": self.animation.theta,
                "trail": len(self.animation.trail),
                "complete": self.animation.complete,
                "glow": self.glow.phase.value,
                "glowAlpha": self.glow.alpha,
                "yawDeg": self.camera.yaw_deg,
                "pitchDeg": self.camera.pitch_deg,
                "distance": self.camera.distance,
                "targetDistance": self.camera.target_distance,
                "area": self.theoretical_area,
            }

    # ------------------------------------------------------------------ frame
    def step(self, width: int, height: int) -> Frame:
        """Advance one frame and return what has to be drawn for it."""

        with self._lock:
            self.camera.tick()
            self.glow.tick(self.animation.complete)
            if self.animation.running:
                self.animation.tick()
            self._note_transitions()

            radius = self.radius
            aspect = (width / height) if width > 0 and height > 0 else 1.0
            model = transforms.identity()
            view = self.camera.view_matrix(radius)
            projection = self.camera.projection_matrix(aspect)
            mvp = transforms.mvp(projection, view, model)
            frame = Frame(
                primitives=[],
                model=model,
                view=view,
                projection=projection,
                mvp=mvp,
                theta=self.animation.theta,
                complete=self.animation.complete,
                glow_alpha=self.glow.alpha,
            )
            if width > 0 and height > 0:
                trail = tuple(self.animation.trail)
                frame.primitives.extend(self._build_primitives(radius, trail, mvp))

            roles = tuple(frame.roles)
            if roles != self._last_roles:
                self._debug("step emits %d primitives: %s" % (len(roles), ", ".join(roles)))
                self._last_roles = roles
        return frame

    def render(self, renderer: Renderer, width: int, height: int) -> Frame:
        frame = self.step(width, height)
        for primitive in frame.primitives:
            renderer.upload_and_draw(primitive)
        return frame

    def _build_primitives(self, radius: float, trail: Sequence[Point3D], mvp: np.ndarray) -> List[Primitive]:
        geo = self.state.get("geometry", {})
        theta = self.animation.theta
        out: List[Primitive] = []

        axis_length = coerce_float(geo.get("axisLength"), 2 * math.pi * 10000)
        out.append(
            Primitive(((0.0, 0.0, 0.0), (axis_length, 0.0, 0.0)), Topology.LINES, self._color("axis"), mvp, "axis")
        )

        if len(trail) >= 2 and theta > 0.0:
            out.extend(self._area_primitives(radius, theta, mvp, _coerce_int(geo.get("areaSegments"), 100)))
            out.append(Primitive(tuple(trail), Topology.LINE_STRIP, self._color("trail"), mvp, "trail"))

        if self.animation.running or self.animation.complete:
            out.extend(self._wheel_primitives(radius, theta, mvp, geo))
        return out

    def _area_primitives(self, radius: float, theta: float, mvp: np.ndarray, segments: int) -> List[Primitive]:
        triangles: List[Point3D] = []
        for base1, top1, top2, base2 in area_trapezoids(radius, theta, segments):
            triangles.extend((base1, top1, top2, base1, top2, base2))
        base = self._color("area")
        highlight = self._color("glow")
        fill_color = self.glow.area_color(base, (highlight[0], highlight[1], highlight[2], max(base[3], 0.6)))
        out = [Primitive(tuple(triangles), Topology.TRIANGLES, fill_color, mvp, "area")]
        overlay = self.glow.overlay_alpha(highlight[3])
        if overlay > 0.0:
            out.append(
                Primitive(
                    tuple(triangles),
                    Topology.TRIANGLES,
                    (highlight[0], highlight[1], highlight[2], overlay),
                    mvp,
                    "area_glow",
                )
            )
        return out

    def _wheel_primitives(
        self, radius: float, theta: float, mvp: np.ndarray, geo: Mapping[str, object]
    ) -> List[Primitive]:
        segments = _coerce_int(geo.get("wheelSegments"), 64, minimum=3)
        spokes = _coerce_int(geo.get("spokes"), 12)
        cross = coerce_float(geo.get("spokeCross"), math.pi / 24)
        rim_outer = coerce_float(geo.get("rimOuter"), 0.92)
        rim_inner = coerce_float(geo.get("rimInner"), 0.84)
        hub_scale = coerce_float(geo.get("hubRadius"), 0.14)
        tracer_size = coerce_float(geo.get("tracerSize"), 0.15) * radius

        center = circle_center(radius, theta)
        rotation = -theta
        out = [
            Primitive(
                tuple(rolling_circle_points(radius, theta, segments)), Topology.LINE_LOOP, self._color("tire"), mvp, "tire"
            ),
            Primitive(
                tuple(rolling_circle_points(radius, theta, segments, scale=rim_outer)),
                Topology.LINE_LOOP,
                self._color("rim"),
                mvp,
                "rim_outer",
            ),
            Primitive(
                tuple(rolling_circle_points(radius, theta, segments, scale=rim_inner)),
                Topology.LINE_LOOP,
                self._color("rim"),
                mvp,
                "rim_inner",
            ),
            Primitive(
                (center,) + tuple(rolling_circle_points(radius, theta, segments, scale=hub_scale)),
                Topology.TRIANGLE_FAN,
                self._color("hub"),
                mvp,
                "hub",
            ),
        ]

        # crossed lacing: neighbouring spokes leave the hub on opposite sides
        spoke_points: List[Point3D] = []
        for i in range(spokes):
            angle = rotation + i * (2 * math.pi / spokes)
            lean = cross if i % 2 == 0 else -cross
            spoke_points.append(_rim_point(center, radius * hub_scale, angle + lean))
            spoke_points.append(_rim_point(center, radius * rim_inner, angle - lean))
        out.append(Primitive(tuple(spoke_points), Topology.LINES, self._color("spoke"), mvp, "spokes"))

        px, py, pz = traced_point(radius, theta)
        quad = (
            (px - tracer_size, py - tracer_size, pz),
            (px + tracer_size, py - tracer_size, pz),
            (px + tracer_size, py + tracer_size, pz),
            (px - tracer_size, py + tracer_size, pz),
        )
        out.append(Primitive(quad, Topology.TRIANGLE_FAN, self._color("tracer"), mvp, "tracer"))
        return out
