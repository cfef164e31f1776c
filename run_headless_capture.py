"""Drive the full application offscreen and record what happened.

The windows are built on Qt's ``offscreen`` platform, a run is started through
the control window exactly as a click on *Calculer* would, and the event loop
is left running for ``--seconds``.  Afterwards the scene snapshot and the
roles of the last frame go to ``run_output.txt``; any exception lands in
``run_exception.txt``.

Usage:
  python run_headless_capture.py [--radius 50] [--seconds 8]
"""
from __future__ import annotations

import argparse
import os
import sys
import traceback

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
# the scene's transition log is the interesting part of the capture
os.environ.setdefault("CYCLOID_DEBUG", "1")

ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

OUT_FILE = os.path.join(ROOT, "run_output.txt")
ERR_FILE = os.path.join(ROOT, "run_exception.txt")


def capture(radius: str, seconds: float) -> list:
    from PyQt5 import QtCore, QtWidgets

    from cycloid.main import build_windows

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv[:1])
    view_win, control_win = build_windows(app)
    control_win.le_radius.setText(radius)
    control_win.on_start()

    QtCore.QTimer.singleShot(int(seconds * 1000), app.quit)
    app.exec_()

    scene = view_win.view.scene
    frame = scene.step(max(1, view_win.view.width()), max(1, view_win.view.height()))
    return [
        "Backend: %s" % getattr(view_win.view, "backend_name", "?"),
        "Résultat:\n%s" % control_win.lbl_result.text(),
        "Statut: %s" % control_win.statusBar().currentMessage(),
        "Snapshot: %s" % scene.snapshot(),
        "Primitives: %s" % ", ".join(frame.roles),
    ]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--radius", default="50")
    parser.add_argument("--seconds", type=float, default=8.0)
    args = parser.parse_args(argv)
    try:
        lines = capture(args.radius, args.seconds)
    except Exception:
        with open(ERR_FILE, "w", encoding="utf-8") as errf:
            traceback.print_exc(file=errf)
        print("Capture failed; see", ERR_FILE)
        return 1
    with open(OUT_FILE, "w", encoding="utf-8") as outf:
        outf.write("\n".join(lines) + "\n")
    print("Capture completed; see", OUT_FILE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
