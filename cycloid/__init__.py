"""Animated cycloid generation with an orbital 3D view."""

from .animation import AnimationPhase, AnimationState
from .camera_rig import CameraRig, optimal_distance
from .glow import GlowPhase, GlowState
from .scene_builder import CycloidScene, Frame, Primitive, Renderer, Topology

__all__ = [
    "AnimationPhase",
    "AnimationState",
    "CameraRig",
    "CycloidScene",
    "Frame",
    "GlowPhase",
    "GlowState",
    "Primitive",
    "Renderer",
    "Topology",
    "optimal_distance",
]
