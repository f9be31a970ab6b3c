"""
Color model - RGBA color representation

Immutable color used for palette entries, accent colors and the computed
wallpaper colors. Conversion helpers live in utils.colors.
"""

from dataclasses import dataclass
from typing import Tuple
from bubblewall.utils.colors import parse_hex_color, rgba_to_hex, scale_alpha, scale_brightness, gray_level


@dataclass(frozen=True)
class Color:
    """
    RGBA color (channels 0-255)

    Examples:
        accent = Color.from_hex("#ff33b5e5")
        faded = accent.with_alpha_factor(0.3)     # same RGB, 30% alpha
        darker = accent.with_brightness(0.5)      # half RGB, same alpha
        r, g, b, a = accent.to_rgba()
    """

    r: int
    g: int
    b: int
    a: int = 255

    # === CONSTRUCTORS ===

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """Create from "#RRGGBB" or "#AARRGGBB" """
        return cls(*parse_hex_color(value))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r, g, b, 255)

    @classmethod
    def gray(cls, brightness: float) -> 'Color':
        """Opaque gray for a brightness in [0, 1] (0 = black, 1 = white)"""
        level = gray_level(brightness)
        return cls(level, level, level, 255)

    # === RENDERING ===

    def to_rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return rgba_to_hex(*self.to_rgba())

    # === ADJUSTMENTS ===

    def with_alpha_factor(self, factor: float) -> 'Color':
        """New color with alpha scaled by factor"""
        return Color(*scale_alpha(self.to_rgba(), factor))

    def with_brightness(self, factor: float) -> 'Color':
        """New color with RGB scaled by factor"""
        return Color(*scale_brightness(self.to_rgba(), factor))

    def __str__(self) -> str:
        return self.to_hex()
