import pytest

from cycloid.glow import GlowPhase, GlowState, lerp_color


def _run(glow, ticks, complete=True):
    alphas = []
    for _ in range(ticks):
        glow.tick(complete)
        alphas.append(glow.alpha)
    return alphas


def test_stays_inactive_until_animation_completes():
    glow = GlowState()
    _run(glow, 100, complete=False)
    assert glow.phase is GlowPhase.INACTIVE
    assert glow.alpha == 0.0


def test_trigger_enters_fade_in():
    glow = GlowState()
    glow.tick(True)
    assert glow.phase is GlowPhase.FADE_IN
    assert glow.active is True
    assert glow.alpha == 0.0
    assert glow.hold_counter == 0


def test_full_cycle_fires_exactly_once():
    glow = GlowState()
    alphas = _run(glow, 200)
    assert max(alphas) == 1.0
    assert glow.alpha == 0.0
    assert glow.phase is GlowPhase.DONE
    assert glow.fading_out is True

    later = _run(glow, 500)
    assert all(a == 0.0 for a in later)
    assert glow.phase is GlowPhase.DONE


def test_hold_lasts_the_configured_ticks():
    glow = GlowState()
    held = 0
    for _ in range(300):
        if glow.phase is GlowPhase.HOLD:
            held += 1
        glow.tick(True)
    assert held == 60


def test_phases_follow_each_other_in_order():
    glow = GlowState()
    seen = [glow.phase]
    for _ in range(300):
        glow.tick(True)
        if glow.phase is not seen[-1]:
            seen.append(glow.phase)
    assert seen == [GlowPhase.INACTIVE, GlowPhase.FADE_IN, GlowPhase.HOLD, GlowPhase.FADE_OUT, GlowPhase.DONE]


def test_alpha_stays_in_unit_range():
    glow = GlowState(fade_in_step=0.3, fade_out_step=0.7, hold_ticks=2)
    for alpha in _run(glow, 50):
        assert 0.0 <= alpha <= 1.0


def test_reset_rearms_the_glow():
    glow = GlowState()
    _run(glow, 300)
    glow.reset()
    assert glow.phase is GlowPhase.INACTIVE
    glow.tick(True)
    assert glow.phase is GlowPhase.FADE_IN


def test_area_color_and_overlay():
    glow = GlowState()
    base = (0.2, 0.4, 0.2, 0.3)
    highlight = (0.8, 1.0, 0.8, 0.6)
    assert glow.area_color(base, highlight) == base
    assert glow.overlay_alpha(0.75) == 0.0

    glow.alpha = 0.1
    assert glow.overlay_alpha(0.75) == 0.0
    glow.alpha = 1.0
    assert glow.area_color(base, highlight) == pytest.approx(highlight)
    assert glow.overlay_alpha(0.75) == pytest.approx(0.75)


def test_lerp_color_clamps_t():
    a = (0.0, 0.0, 0.0, 0.0)
    b = (1.0, 1.0, 1.0, 1.0)
    assert lerp_color(a, b, 2.0) == b
    assert lerp_color(a, b, -1.0) == a
    assert lerp_color(a, b, 0.5) == (0.5, 0.5, 0.5, 0.5)
