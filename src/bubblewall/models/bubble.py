"""
Bubble model

One circle of the wallpaper. Position and base radius are fixed when the
layout is generated; current_radius is the only field animations mutate.
"""

import math
from dataclasses import dataclass, field
from bubblewall.models.color import Color


@dataclass(eq=False)
class Bubble:
    """
    Single bubble record

    Identity semantics (eq=False): the pressed-bubble back-reference in
    AnimationState compares by identity, two bubbles at the same spot are
    still different bubbles.

    Example:
        bubble = Bubble(x=120, y=340, base_radius=60,
                        outline_color=Color.from_hex("#1565c0"),
                        fill_color=Color.from_hex("#42a5f5"))
        bubble.current_radius = bubble.minimized_radius   # 20
    """

    x: int
    y: int
    base_radius: int
    outline_color: Color
    fill_color: Color
    current_radius: float = field(default=-1.0)

    def __post_init__(self):
        if self.current_radius < 0:
            self.current_radius = float(self.base_radius)

    @property
    def minimized_radius(self) -> int:
        """Radius used while the screen is off (a third of the base radius)"""
        return round(self.base_radius / 3)

    def radius_for_factor(self, factor: float) -> float:
        return self.base_radius * factor

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(x - self.x, y - self.y)

    def contains_point(self, x: float, y: float) -> bool:
        """Hit-test against the resting (base) radius, not the animated one"""
        return (x - self.x) ** 2 + (y - self.y) ** 2 < self.base_radius ** 2

    def overlaps(self, x: int, y: int, radius: int, padding: int) -> bool:
        """True when a circle at (x, y, radius) would come closer than padding"""
        return self.distance_to(x, y) < radius + self.base_radius + padding

    def __repr__(self) -> str:
        return (
            f"Bubble(x={self.x}, y={self.y}, base_radius={self.base_radius}, "
            f"current_radius={self.current_radius:.2f})"
        )
