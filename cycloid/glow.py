"""One-shot highlight played on the area fill when the arch is complete."""

from __future__ import annotations

import enum
from typing import Tuple

__all__ = ["GlowPhase", "GlowState", "lerp_color"]

Color = Tuple[float, float, float, float]


class GlowPhase(enum.Enum):
    INACTIVE = "inactive"
    FADE_IN = "fade_in"
    HOLD = "hold"
    FADE_OUT = "fade_out"
    DONE = "done"


def lerp_color(a: Color, b: Color, t: float) -> Color:
    t = max(0.0, min(1.0, t))
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
        a[3] + (b[3] - a[3]) * t,
    )


class GlowState:
    """Fade-in, hold, fade-out; fires at most once between two :meth:`reset`.

    ``fading_out`` is never cleared once set, which is what keeps a finished
    glow from triggering again while the animation stays complete.
    """

    def __init__(
        self,
        fade_in_step: float = 0.04,
        hold_ticks: int = 60,
        fade_out_step: float = 0.015,
        overlay_threshold: float = 0.2,
    ) -> None:
        self.fade_in_step = fade_in_step
        self.hold_ticks = hold_ticks
        self.fade_out_step = fade_out_step
        self.overlay_threshold = overlay_threshold
        self.reset()

    def reset(self) -> None:
        self.alpha = 0.0
        self.active = False
        self.fading_out = False
        self.hold_counter = 0

    @property
    def phase(self) -> GlowPhase:
        if self.fading_out:
            return GlowPhase.FADE_OUT if self.active else GlowPhase.DONE
        if not self.active:
            return GlowPhase.INACTIVE
        if self.alpha < 1.0:
            return GlowPhase.FADE_IN
        return GlowPhase.HOLD

    def tick(self, animation_complete: bool) -> None:
        phase = self.phase
        if phase is GlowPhase.INACTIVE:
            if animation_complete:
                self.active = True
                self.alpha = 0.0
                self.hold_counter = 0
        elif phase is GlowPhase.FADE_IN:
            self.alpha = min(1.0, self.alpha + self.fade_in_step)
        elif phase is GlowPhase.HOLD:
            self.hold_counter += 1
            if self.hold_counter >= self.hold_ticks:
                self.fading_out = True
        elif phase is GlowPhase.FADE_OUT:
            self.alpha -= self.fade_out_step
            if self.alpha <= 0.0:
                self.alpha = 0.0
                self.active = False

    # ------------------------------------------------------------------ output
    def area_color(self, base: Color, highlight: Color) -> Color:
        return lerp_color(base, highlight, self.alpha)

    def overlay_alpha(self, peak: float) -> float:
        """Alpha of the second translucent pass, 0 while the glow is faint."""

        if self.alpha <= self.overlay_threshold:
            return 0.0
        return peak * self.alpha
