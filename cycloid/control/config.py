import math


def coerce_float(value: object, default: float = 0.0) -> float:
    """Return ``value`` as a float, ``default`` when it is missing or not numeric."""

    if value is None:
        return default
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value))
    except (TypeError, ValueError):
        return default


DEFAULTS = dict(
    animation=dict(radius=50.0, thetaStep=0.02),
    camera=dict(
        yawDeg=45.0, pitchDeg=30.0,
        minPitchDeg=-89.0, maxPitchDeg=89.0,
        distanceFactor=12.0, smoothing=0.08, snapEpsilon=0.5,
        near=3.0, far=500000.0,
        touchSensitivity=0.5, wheelZoomStep=0.1,
        minDistance=10.0, maxDistance=200000.0,
    ),
    glow=dict(fadeInStep=0.04, holdTicks=60, fadeOutStep=0.015, overlayThreshold=0.2),
    geometry=dict(
        wheelSegments=64, spokes=12, spokeCross=math.pi / 24,
        rimOuter=0.92, rimInner=0.84, hubRadius=0.14,
        tracerSize=0.15, areaSegments=100,
        axisLength=2 * math.pi * 10000,
    ),
    appearance=dict(
        axisColor="#B3B3B3", axisAlpha=1.0,
        trailColor="#0078D6", trailAlpha=1.0,
        areaColor="#64C764", areaAlpha=0.3,
        glowColor="#B8FFB0", glowAlpha=0.75,
        tireColor="#333333", tireAlpha=0.9,
        rimColor="#FF6464", rimAlpha=0.6,
        hubColor="#8A8A8A", hubAlpha=0.9,
        spokeColor="#999999", spokeAlpha=0.5,
        tracerColor="#0078D6", tracerAlpha=1.0,
        background="#F2F2F2",
    ),
    system=dict(frameIntervalMs=16, transparent=False, maxRadius=200.0),
)

TOOLTIPS = {
    "animation.radius": "Rayon du cercle générateur utilisé au lancement de l’animation.",
    "camera.distance": "Distance cible de la caméra ; le zoom s’en approche progressivement.",
    "camera.smoothing": "Fraction de l’écart de zoom rattrapée à chaque image.",
    "camera.touchSensitivity": "Degrés de rotation par pixel de glissement.",
}
