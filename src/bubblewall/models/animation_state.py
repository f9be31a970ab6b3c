"""
Animation state shared by all animation routines of one engine instance
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
from bubblewall.models.bubble import Bubble
from bubblewall.models.color import Color


@dataclass
class AnimationState:
    """
    Mutable per-engine state

    Owned by the AnimationEngine worker: only animation routines running on
    the worker read or write it.

    Attributes:
        night_mode: Cached night-mode flag (compared on theme changes)
        accent_color: Cached accent color (compared on accent changes)
        gradient_factor: Height factor of the background gradient, 0..1
        brightness: Background gray level, 0 (night) .. 1 (day)
        pressed_bubble: Bubble currently held by a touch (not owned)
        pulse_origin_radius: Radius of pressed_bubble before the pulse
        pulse_offset: Radius added by the expand phase of the pulse
        surface_size: Last (width, height) reported by the host
    """

    night_mode: bool = False
    accent_color: Color = field(default_factory=lambda: Color.from_hex("#ff33b5e5"))
    gradient_factor: float = 0.0
    brightness: float = 1.0
    pressed_bubble: Optional[Bubble] = None
    pulse_origin_radius: Optional[float] = None
    pulse_offset: float = 0.0
    surface_size: Tuple[int, int] = (0, 0)

    @property
    def resting_brightness(self) -> float:
        return 0.0 if self.night_mode else 1.0

    @property
    def has_surface(self) -> bool:
        width, height = self.surface_size
        return width > 0 and height > 0

    def set_gradient_factor(self, factor: float) -> None:
        self.gradient_factor = max(0.0, min(1.0, factor))

    def release_pressed(self) -> None:
        """Forget the pressed bubble (its radius is owned by someone else now)"""
        self.pressed_bubble = None
        self.pulse_origin_radius = None
        self.pulse_offset = 0.0
