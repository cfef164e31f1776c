# -*- coding: utf-8 -*-
import os
import sys
import traceback
from pathlib import Path
from typing import NoReturn, Tuple


def _handle_qt_import_error(exc: ImportError) -> NoReturn:
    """Abort start-up with a readable explanation of the missing Qt binding."""

    details = str(exc)
    lines = [
        "La cycloïde ne peut pas démarrer : PyQt5 est introuvable ou incomplet.",
        "Installez PyQt5 (pip install PyQt5) ainsi que les bibliothèques OpenGL du système.",
    ]
    if "libGL" in details:
        lines.append("La bibliothèque libGL est absente : installez le paquet Mesa de votre distribution.")
    lines.append(f"Détail : {details}")
    raise SystemExit("\n".join(lines)) from exc


try:
    from PyQt5 import QtCore, QtWidgets, QtGui
except ImportError as exc:  # pragma: no cover - dépendances environnementales
    _handle_qt_import_error(exc)

# --- autorise l'exécution directe ---
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEBUG_MARKER = "[Cycloid][DEBUG]"


class _DebugSilencer:
    """stdout proxy dropping the lines that carry ``marker``."""

    def __init__(self, stream, marker: str) -> None:
        self._stream = stream
        self._marker = marker
        self._pending = ""

    def write(self, text: str) -> int:
        lines = (self._pending + text).split("\n")
        self._pending = lines.pop()
        for line in lines:
            if self._marker not in line:
                self._stream.write(line + "\n")
        return len(text)

    def flush(self) -> None:
        if self._pending and self._marker not in self._pending:
            self._stream.write(self._pending)
        self._pending = ""
        self._stream.flush()

    def __getattr__(self, name):
        return getattr(self._stream, name)


def _install_debug_silencer() -> None:
    if os.environ.get("CYCLOID_DEBUG", "").strip().lower() in {"1", "true", "yes"}:
        return
    if not isinstance(sys.stdout, _DebugSilencer):
        sys.stdout = _DebugSilencer(sys.stdout, DEBUG_MARKER)


try:
    from .control.control_window import ControlWindow  # exécution via -m
    from .view import CycloidViewWidget
except ImportError:  # pragma: no cover - compatibilité exécution directe
    from cycloid.control.control_window import ControlWindow  # type: ignore
    from cycloid.view import CycloidViewWidget  # type: ignore


class ViewWindow(QtWidgets.QMainWindow):
    """Window holding the 3D view; hiding or minimising it pauses the run."""

    def __init__(self, screen: QtGui.QScreen):
        super().__init__(None)
        self.setWindowTitle("Cycloïde · Vue 3D")
        self._screen = screen
        self._external_layout = False
        self._paused_by_window = False
        self.view = CycloidViewWidget(self)
        self.setCentralWidget(self.view)
        self._center_on_screen()
        QtWidgets.QShortcut(QtGui.QKeySequence(QtCore.Qt.Key_Escape), self, activated=self.close)

    def _center_on_screen(self) -> None:
        area = self._screen.geometry()
        width, height = int(area.width() * 0.6), int(area.height() * 0.7)
        self.setGeometry(
            area.left() + (area.width() - width) // 2,
            area.top() + (area.height() - height) // 2,
            width,
            height,
        )

    def set_external_layout(self, enabled: bool) -> None:
        self._external_layout = bool(enabled)

    def showEvent(self, event: QtGui.QShowEvent):
        if not self._external_layout:
            self._center_on_screen()
        super().showEvent(event)
        self._resume_after_window()

    def hideEvent(self, event: QtGui.QHideEvent):
        self._pause_for_window()
        super().hideEvent(event)

    def changeEvent(self, event: QtCore.QEvent):
        if event.type() == QtCore.QEvent.WindowStateChange:
            if self.isMinimized():
                self._pause_for_window()
            else:
                self._resume_after_window()
        super().changeEvent(event)

    def _pause_for_window(self) -> None:
        scene = self.view.scene
        if scene.animation.running:
            scene.pause()
            self._paused_by_window = True

    def _resume_after_window(self) -> None:
        # only undo a pause this window caused itself
        if self._paused_by_window:
            self._paused_by_window = False
            self.view.scene.resume()


def build_windows(app: QtWidgets.QApplication) -> Tuple[ViewWindow, ControlWindow]:
    """Create the view (left) and control (right) windows side by side."""

    screen = QtGui.QGuiApplication.primaryScreen()
    view_win = ViewWindow(screen)
    view_win.set_external_layout(True)
    control_win = ControlWindow(app, screen, view_win)

    area = screen.availableGeometry()
    view_w = max(200, area.width() - max(320, control_win.width()))
    view_win.setGeometry(area.left(), area.top(), view_w, area.height())
    control_win.move(area.left() + view_w, area.top())
    view_win.show()
    control_win.raise_()
    return view_win, control_win


def _record_crash(exc_type, exc_value, exc_tb) -> None:
    try:
        (ROOT / "run_exception.txt").write_text(
            "".join(traceback.format_exception(exc_type, exc_value, exc_tb)), encoding="utf-8"
        )
    except OSError:
        pass
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def main() -> int:
    """Start the application and return its exit code."""

    sys.excepthook = _record_crash
    _install_debug_silencer()
    for attribute in (QtCore.Qt.AA_EnableHighDpiScaling, QtCore.Qt.AA_UseHighDpiPixmaps):
        QtWidgets.QApplication.setAttribute(attribute, True)
    app = QtWidgets.QApplication(sys.argv)
    view_win, control_win = build_windows(app)
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
