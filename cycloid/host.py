"""Input handling shared by the control window and the headless scripts.

The animation core assumes a valid radius.  Everything typed by the user goes
through :func:`parse_radius` first; a failure carries the message shown to
the user.
"""

from __future__ import annotations

import math
from typing import Optional

from .curve_math import theoretical_area

__all__ = ["RadiusValidationError", "format_area_report", "parse_radius"]

MAX_RADIUS = 200.0


class RadiusValidationError(ValueError):
    """Radius input rejected before reaching the animation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def parse_radius(text: Optional[str], *, max_radius: float = MAX_RADIUS) -> float:
    """Return the radius typed in ``text`` or raise :class:`RadiusValidationError`."""

    raw = (text or "").strip()
    if not raw:
        raise RadiusValidationError("Veuillez saisir un rayon.")
    try:
        radius = float(raw.replace(",", "."))
    except ValueError as exc:
        raise RadiusValidationError("Veuillez saisir un nombre valide.") from exc
    if not math.isfinite(radius) or radius <= 0.0 or radius > max_radius:
        raise RadiusValidationError(f"Le rayon doit être supérieur à 0 et au plus égal à {max_radius:g}.")
    return radius


def format_area_report(radius: float) -> str:
    area = theoretical_area(radius)
    return (
        f"Rayon (a) : {radius:.2f}\n"
        f"Aire calculée : {area:.2f} unités²\n"
        "Formule : A = 3πa²\n"
        f"Valeur de π : {math.pi:.6f}"
    )
