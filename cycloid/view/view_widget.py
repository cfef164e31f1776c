"""Qt view hosting :class:`~cycloid.scene_builder.CycloidScene`.

The scene produces backend-agnostic primitives.  This module supplies the
renderer half of that contract: :class:`PainterRenderer` projects each
primitive through its MVP matrix and draws it with ``QPainter``.  The same
painter path serves both widget backends, the OpenGL one only adds a GL clear.

Pointer input is reduced to the scene's host API: dragging orbits the camera
(pixel deltas scaled by ``camera.touchSensitivity``), the wheel changes the
zoom target.
"""

from __future__ import annotations

import os
import sys
from typing import Dict, List, Optional, Tuple

from PyQt5 import QtCore, QtGui, QtWidgets

from ..scene_builder import CycloidScene, Primitive, Topology
from ..transforms import project_points

__all__ = ["CycloidViewWidget", "PainterRenderer"]

ScreenPoint = Optional[Tuple[float, float]]

_PEN_WIDTHS: Dict[str, float] = {
    "axis": 1.5,
    "trail": 4.0,
    "tire": 3.0,
    "rim_outer": 1.5,
    "rim_inner": 1.0,
    "spokes": 1.0,
}

# roles drawn with something else than plain source-over
_COMPOSITION: Dict[str, "QtGui.QPainter.CompositionMode"] = {
    "area_glow": QtGui.QPainter.CompositionMode_Plus,
}

# GL_COLOR_BUFFER_BIT
_GL_COLOR_BUFFER_BIT = 0x00004000


def _load_gl_functions():
    """Return an initialised ``QOpenGLFunctions`` table for the current context."""

    factory = getattr(QtGui, "QOpenGLFunctions", None)
    if factory is None:
        raise RuntimeError("QOpenGLFunctions indisponible dans cette version de PyQt5")
    functions = factory()
    functions.initializeOpenGLFunctions()
    return functions


# ---------------------------------------------------------------------------
# Renderer


class PainterRenderer:  # pragma: no cover - requires GUI context
    """``upload_and_draw`` implementation on top of an active ``QPainter``."""

    def __init__(self, painter: QtGui.QPainter, width: int, height: int) -> None:
        self.painter = painter
        self.width = width
        self.height = height

    def upload_and_draw(self, primitive: Primitive) -> None:
        screen = project_points(primitive.mvp, primitive.points, self.width, self.height)
        if len(screen) < 2:
            return
        color = QtGui.QColor.fromRgbF(*primitive.color)
        painter = self.painter
        painter.save()
        try:
            painter.setCompositionMode(
                _COMPOSITION.get(primitive.role, QtGui.QPainter.CompositionMode_SourceOver)
            )
            if primitive.topology in (Topology.TRIANGLES, Topology.TRIANGLE_FAN):
                painter.setPen(QtCore.Qt.NoPen)
                painter.setBrush(QtGui.QBrush(color))
                for tri in self._triangles(primitive.topology, screen):
                    painter.drawPolygon(QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in tri]))
            else:
                pen = QtGui.QPen(color, _PEN_WIDTHS.get(primitive.role, 2.0))
                pen.setCapStyle(QtCore.Qt.RoundCap)
                pen.setJoinStyle(QtCore.Qt.RoundJoin)
                painter.setPen(pen)
                painter.setBrush(QtCore.Qt.NoBrush)
                for a_pt, b_pt in self._segments(primitive.topology, screen):
                    painter.drawLine(QtCore.QPointF(*a_pt), QtCore.QPointF(*b_pt))
        finally:
            painter.restore()

    @staticmethod
    def _segments(topology: Topology, screen: List[ScreenPoint]):
        if topology is Topology.LINES:
            pairs = [(screen[i], screen[i + 1]) for i in range(0, len(screen) - 1, 2)]
        else:
            pairs = list(zip(screen, screen[1:]))
            if topology is Topology.LINE_LOOP:
                pairs.append((screen[-1], screen[0]))
        return [(p, q) for p, q in pairs if p is not None and q is not None]

    @staticmethod
    def _triangles(topology: Topology, screen: List[ScreenPoint]):
        if topology is Topology.TRIANGLES:
            tris = [tuple(screen[i : i + 3]) for i in range(0, len(screen) - 2, 3)]
        else:
            tris = [(screen[0], screen[i], screen[i + 1]) for i in range(1, len(screen) - 1)]
        return [tri for tri in tris if all(p is not None for p in tri)]


# ---------------------------------------------------------------------------
# Widgets


class _ViewWidgetBase:
    """Scene ownership, timer, input and painting shared by both backends."""

    backend_name = "raster"

    def _init_view_widget(self) -> None:
        self.setFocusPolicy(QtCore.Qt.StrongFocus)
        self.scene = CycloidScene()
        self._transparent = False
        self._drag_origin: Optional[QtCore.QPoint] = None
        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self.update)
        self._set_frame_interval(int(self.scene.state["system"]["frameIntervalMs"]))

    def _set_frame_interval(self, interval_ms: int) -> None:
        """(Re)start the repaint timer; ``0`` or less stops it."""

        if interval_ms <= 0:
            self._timer.stop()
        elif self._timer.isActive():
            if self._timer.interval() != interval_ms:
                self._timer.setInterval(interval_ms)
        else:
            self._timer.start(interval_ms)

    def _background(self) -> QtGui.QColor:
        color = QtGui.QColor(str(self.scene.state.get("appearance", {}).get("background", "#F2F2F2")))
        if not color.isValid():
            color = QtGui.QColor("#F2F2F2")
        if self._transparent:
            color.setAlpha(0)
        return color

    # ------------------------------------------------------------------ API
    def set_params(self, payload) -> None:
        self.scene.set_params(payload)
        system = self.scene.state.get("system", {})
        try:
            interval = int(float(system.get("frameIntervalMs", 16)))
        except (TypeError, ValueError):
            interval = 16
        self._set_frame_interval(interval)
        transparent = bool(system.get("transparent", False))
        if transparent != self._transparent:
            self.set_transparent(transparent)

    def set_transparent(self, enabled: bool) -> None:  # pragma: no cover - GUI
        self._transparent = bool(enabled)
        for attribute in (QtCore.Qt.WA_NoSystemBackground, QtCore.Qt.WA_TranslucentBackground):
            self.setAttribute(attribute, self._transparent)
        self.setAutoFillBackground(not self._transparent)
        self.update()

    # ------------------------------------------------------------------ input
    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:  # pragma: no cover - GUI
        if event.button() == QtCore.Qt.LeftButton:
            self._drag_origin = event.pos()
            event.accept()
            return
        super().mousePressEvent(event)  # type: ignore[misc]

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:  # pragma: no cover - GUI
        if self._drag_origin is None:
            super().mouseMoveEvent(event)  # type: ignore[misc]
            return
        pos = event.pos()
        dx = pos.x() - self._drag_origin.x()
        dy = pos.y() - self._drag_origin.y()
        self._drag_origin = pos
        sensitivity = float(self.scene.state.get("camera", {}).get("touchSensitivity", 0.5) or 0.5)
        # horizontal drag orbits around Y, vertical drag tilts
        self.scene.rotate(dx * sensitivity, -dy * sensitivity)
        event.accept()

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:  # pragma: no cover - GUI
        self._drag_origin = None
        super().mouseReleaseEvent(event)  # type: ignore[misc]

    def wheelEvent(self, event: QtGui.QWheelEvent) -> None:  # pragma: no cover - GUI
        notches = event.angleDelta().y() / 120.0
        if notches == 0:
            return
        step = float(self.scene.state.get("camera", {}).get("wheelZoomStep", 0.1) or 0.1)
        self.scene.set_zoom(self.scene.camera.target_distance * (1.0 - step) ** notches)
        event.accept()

    # ------------------------------------------------------------------ painting
    def _paint_scene(self) -> None:  # pragma: no cover - GUI
        painter = QtGui.QPainter(self)
        try:
            painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
            painter.setCompositionMode(QtGui.QPainter.CompositionMode_Source)
            painter.fillRect(self.rect(), self._background())
            painter.setCompositionMode(QtGui.QPainter.CompositionMode_SourceOver)
            width, height = max(0, self.width()), max(0, self.height())
            self.scene.render(PainterRenderer(painter, width, height), width, height)
        finally:
            painter.end()


class _OpenGLViewWidget(_ViewWidgetBase, QtWidgets.QOpenGLWidget):
    backend_name = "opengl"

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        QtWidgets.QOpenGLWidget.__init__(self, parent)
        self._gl = None
        self._init_view_widget()

    def initializeGL(self) -> None:  # pragma: no cover - requires GUI context
        try:
            self._gl = _load_gl_functions()
        except Exception as exc:
            self._gl = None
            print(f"[Cycloid][WARN] Fonctions OpenGL indisponibles ({exc}); effacement via QPainter.", file=sys.stderr)
        self._sync_clear_color()

    def _sync_clear_color(self) -> None:
        if self._gl is not None:
            color = self._background()
            self._gl.glClearColor(color.redF(), color.greenF(), color.blueF(), color.alphaF())

    def set_transparent(self, enabled: bool) -> None:  # pragma: no cover - GUI
        super().set_transparent(enabled)
        self._sync_clear_color()

    def paintGL(self) -> None:  # pragma: no cover - requires GUI context
        if self._gl is not None:
            self._gl.glClear(_GL_COLOR_BUFFER_BIT)
        self._paint_scene()


class _RasterViewWidget(_ViewWidgetBase, QtWidgets.QWidget):
    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        QtWidgets.QWidget.__init__(self, parent)
        self._init_view_widget()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # type: ignore[override]  # pragma: no cover - GUI
        self._paint_scene()


def _requested_backend(force_backend: Optional[str]) -> str:
    choice = (force_backend or os.environ.get("CYCLOID_FORCE_BACKEND", "")).strip().lower()
    if choice in ("opengl", "raster"):
        return choice
    return "opengl" if hasattr(QtWidgets, "QOpenGLWidget") else "raster"


def CycloidViewWidget(
    parent: Optional[QtWidgets.QWidget] = None,
    *,
    force_backend: Optional[str] = None,
) -> QtWidgets.QWidget:
    """Build the view widget, preferring ``QOpenGLWidget``.

    ``force_backend`` (``"opengl"`` or ``"raster"``) overrides the choice, as
    does the ``CYCLOID_FORCE_BACKEND`` environment variable.  When the OpenGL
    widget cannot be created a warning is printed and the raster widget is
    returned instead.  Both expose ``scene``, ``set_params``,
    ``set_transparent`` and ``backend_name``.
    """

    if _requested_backend(force_backend) == "opengl":
        try:
            return _OpenGLViewWidget(parent)
        except Exception as exc:
            print(f"[Cycloid][WARN] Backend OpenGL indisponible ({exc!r}); repli sur le rendu raster.", file=sys.stderr)
    return _RasterViewWidget(parent)
