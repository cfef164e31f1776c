from PyQt5 import QtWidgets, QtCore

from .config import TOOLTIPS

_INFO_STYLE = (
    "QToolButton{border:1px solid #7aa7c7;border-radius:10px;font-weight:bold;padding:0;"
    "color:#2b6ea8;background:#e6f2fb;}QToolButton:hover{background:#d8ecfa;}"
)
_RESET_STYLE = (
    "QToolButton{border:1px solid #9aa5b1;border-radius:11px;padding:0;"
    "background:#f2f4f7;color:#2b2b2b;font-weight:bold;}QToolButton:hover{background:#e9edf2;}"
)


def mk_info(tip: str) -> QtWidgets.QToolButton:
    """Round "i" button; ``tip`` is a ``TOOLTIPS`` key or a literal text."""
    b = QtWidgets.QToolButton(); b.setText("i"); b.setCursor(QtCore.Qt.PointingHandCursor)
    b.setToolTipDuration(0); b.setToolTip(TOOLTIPS.get(tip, tip)); b.setFixedSize(20, 20)
    b.setStyleSheet(_INFO_STYLE)
    return b

def mk_reset(cb, tip: str = "Recentrer la vue") -> QtWidgets.QToolButton:
    b = QtWidgets.QToolButton(); b.setText("↺"); b.setCursor(QtCore.Qt.PointingHandCursor)
    b.setToolTip(tip); b.setFixedSize(22, 22)
    b.setStyleSheet(_RESET_STYLE)
    b.clicked.connect(lambda checked=False, _cb=cb: _cb())
    return b

def spin(value: float, lo: float, hi: float, step: float, decimals: int = 2) -> QtWidgets.QDoubleSpinBox:
    s = QtWidgets.QDoubleSpinBox(); s.setDecimals(decimals); s.setRange(lo, hi)
    s.setSingleStep(step); s.setValue(value)
    return s

def row(form: QtWidgets.QFormLayout, label: str, widget: QtWidgets.QWidget, tip: str, reset_cb=None):
    h = QtWidgets.QHBoxLayout(); h.setContentsMargins(0, 0, 0, 0); h.setSpacing(6)
    h.addWidget(widget, 1)
    if reset_cb: h.addWidget(mk_reset(reset_cb), 0)
    h.addWidget(mk_info(tip), 0)
    w = QtWidgets.QWidget(); w.setLayout(h)
    form.addRow(QtWidgets.QLabel(label), w)
    return w
