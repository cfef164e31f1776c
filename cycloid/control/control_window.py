# cycloid/control/control_window.py
import copy

from PyQt5 import QtWidgets, QtCore, QtGui

from .config import DEFAULTS
from .camera_tab import CameraTab
from .widgets import row
from ..host import RadiusValidationError, format_area_report, parse_radius


class ControlWindow(QtWidgets.QMainWindow):
    def __init__(self, app: QtWidgets.QApplication, screen: QtGui.QScreen, view_win):
        super().__init__(None)
        self.setWindowTitle("Cycloïde · Contrôle")
        self.view_win = view_win
        self.state = copy.deepcopy(DEFAULTS)

        act_quit = QtWidgets.QAction("Quitter", self)
        act_quit.setShortcut(QtGui.QKeySequence("Ctrl+Q"))
        act_quit.setShortcutContext(QtCore.Qt.ApplicationShortcut)
        act_quit.triggered.connect(app.quit)
        self.addAction(act_quit)

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)

        form = QtWidgets.QFormLayout()
        self.le_radius = QtWidgets.QLineEdit(f"{DEFAULTS['animation']['radius']:g}")
        self.le_radius.setPlaceholderText("0 < a ≤ %g" % DEFAULTS["system"]["maxRadius"])
        self.le_radius.returnPressed.connect(self.on_start)
        row(form, "Rayon (a)", self.le_radius, "animation.radius")
        layout.addLayout(form)

        buttons = QtWidgets.QHBoxLayout()
        self.btn_start = QtWidgets.QPushButton("Calculer")
        self.btn_pause = QtWidgets.QPushButton("Pause")
        self.btn_resume = QtWidgets.QPushButton("Reprendre")
        self.btn_start.clicked.connect(self.on_start)
        self.btn_pause.clicked.connect(self.on_pause)
        self.btn_resume.clicked.connect(self.on_resume)
        for b in [self.btn_start, self.btn_pause, self.btn_resume]:
            buttons.addWidget(b)
        layout.addLayout(buttons)

        self.lbl_result = QtWidgets.QLabel("")
        self.lbl_result.setTextInteractionFlags(QtCore.Qt.TextSelectableByMouse)
        self.lbl_result.setStyleSheet("font-family: monospace;")
        layout.addWidget(self.lbl_result)

        self.tabs = QtWidgets.QTabWidget()
        self.tab_camera = CameraTab()
        self.tab_camera.changed.connect(self.on_delta)
        self.tab_camera.zoomRequested.connect(self.on_zoom)
        self.tab_camera.resetRequested.connect(self.on_reset_view)
        self.tabs.addTab(self.tab_camera, "Caméra")
        layout.addWidget(self.tabs, 1)

        self.setCentralWidget(central)
        self.setStatusBar(QtWidgets.QStatusBar())
        self.resize(420, 360)
        geo = screen.availableGeometry()
        self.move(geo.x()+(geo.width()-self.width())//2, geo.y()+(geo.height()-self.height())//2)
        self.show()
        self.push_params()

    @property
    def scene(self):
        return self.view_win.view.scene

    def on_start(self):
        try:
            radius = parse_radius(self.le_radius.text(), max_radius=float(self.state["system"]["maxRadius"]))
        except RadiusValidationError as exc:
            self.statusBar().showMessage(exc.message, 4000)
            return
        self.lbl_result.setText(format_area_report(radius))
        self.scene.start(radius)
        self.tab_camera.set_distance(self.scene.camera.target_distance)
        self.statusBar().clearMessage()

    def on_pause(self):
        self.scene.pause()

    def on_resume(self):
        self.scene.resume()

    def on_zoom(self, distance: float):
        self.scene.set_zoom(distance)

    def on_reset_view(self):
        self.scene.reset_view()
        self.tab_camera.set_distance(self.scene.camera.target_distance)

    def on_delta(self, delta: dict):
        for k, v in delta.items():
            if isinstance(v, dict):
                self.state.setdefault(k, {}).update(v)
            else:
                self.state[k] = v
        self.push_params()

    def push_params(self):
        self.view_win.view.set_params(self.state)
