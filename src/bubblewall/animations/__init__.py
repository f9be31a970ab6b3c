from bubblewall.animations.base import BaseAnimation
from bubblewall.animations.engine import AnimationEngine, AnimationRequest
from bubblewall.animations.factor import (
    AccentRedrawAnimation,
    MaximizeAnimation,
    MinimizeAnimation,
    RedrawAnimation,
    SetFactorAnimation,
    SurfaceRebuildAnimation,
)
from bubblewall.animations.night_mode import NightModeAnimation
from bubblewall.animations.smooth_factor import SmoothFactorAnimation
from bubblewall.animations.touch_pulse import TouchPulseAnimation, TouchReleaseAnimation

__all__ = [
    "AccentRedrawAnimation",
    "AnimationEngine",
    "AnimationRequest",
    "BaseAnimation",
    "MaximizeAnimation",
    "MinimizeAnimation",
    "NightModeAnimation",
    "RedrawAnimation",
    "SetFactorAnimation",
    "SmoothFactorAnimation",
    "SurfaceRebuildAnimation",
    "TouchPulseAnimation",
    "TouchReleaseAnimation",
]
