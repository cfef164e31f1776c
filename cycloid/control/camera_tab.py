from PyQt5 import QtWidgets, QtCore
from .widgets import row, spin
from .config import DEFAULTS


class CameraTab(QtWidgets.QWidget):
    """Zoom target, drag sensitivity and easing of the orbital camera."""

    changed = QtCore.pyqtSignal(dict)
    zoomRequested = QtCore.pyqtSignal(float)
    resetRequested = QtCore.pyqtSignal()

    def __init__(self):
        super().__init__()
        d = DEFAULTS["camera"]
        fl = QtWidgets.QFormLayout(self)

        self.sp_zoom = spin(DEFAULTS["animation"]["radius"] * d["distanceFactor"], d["minDistance"], d["maxDistance"], 50.0, decimals=0)
        self.sp_sensitivity = spin(d["touchSensitivity"], 0.05, 5.0, 0.05)
        self.sp_smoothing = spin(d["smoothing"], 0.01, 1.0, 0.01)

        row(fl, "Distance", self.sp_zoom, "camera.distance", reset_cb=self.resetRequested.emit)
        row(fl, "Sensibilité (°/px)", self.sp_sensitivity, "camera.touchSensitivity")
        row(fl, "Lissage du zoom", self.sp_smoothing, "camera.smoothing")

        self.sp_zoom.valueChanged.connect(self.zoomRequested.emit)
        self.sp_sensitivity.valueChanged.connect(self.emit_delta)
        self.sp_smoothing.valueChanged.connect(self.emit_delta)

    def emit_delta(self, *a):
        self.changed.emit({"camera": self.collect()})

    def collect(self):
        return dict(
            touchSensitivity=self.sp_sensitivity.value(),
            smoothing=self.sp_smoothing.value(),
        )

    def set_distance(self, distance: float):
        with QtCore.QSignalBlocker(self.sp_zoom):
            self.sp_zoom.setValue(float(distance))
