"""
Color conversion utilities

Pure functions for parsing palette strings and scaling color channels.
Palette and theme data are loaded from config/*.yaml via ConfigManager.
"""

from typing import Tuple

RGBA = Tuple[int, int, int, int]


def parse_hex_color(value: str) -> RGBA:
    """
    Parse a hex color string into an (r, g, b, a) tuple

    Accepts "#RRGGBB" (opaque) and "#AARRGGBB" (alpha first), the two
    forms used by the palette files.

    Args:
        value: Hex color string, leading '#' optional

    Returns:
        (r, g, b, a) tuple with values 0-255

    Raises:
        ValueError: If the string is not a 6 or 8 digit hex color

    Example:
        parse_hex_color("#ff0000")    # (255, 0, 0, 255)
        parse_hex_color("#8033b5e5")  # (51, 181, 229, 128)
    """
    text = value.strip().lstrip('#')
    if len(text) not in (6, 8):
        raise ValueError(f"Invalid hex color: {value!r}")
    try:
        raw = int(text, 16)
    except ValueError:
        raise ValueError(f"Invalid hex color: {value!r}") from None

    if len(text) == 6:
        return ((raw >> 16) & 0xFF, (raw >> 8) & 0xFF, raw & 0xFF, 255)
    return ((raw >> 16) & 0xFF, (raw >> 8) & 0xFF, raw & 0xFF, (raw >> 24) & 0xFF)


def rgba_to_hex(r: int, g: int, b: int, a: int = 255) -> str:
    """Format channels as "#AARRGGBB" (or "#RRGGBB" when fully opaque)"""
    if a == 255:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{a:02x}{r:02x}{g:02x}{b:02x}"


def scale_alpha(rgba: RGBA, factor: float) -> RGBA:
    """Multiply the alpha channel by factor (rounded), RGB untouched"""
    r, g, b, a = rgba
    return (r, g, b, clamp_channel(round(a * factor)))


def scale_brightness(rgba: RGBA, factor: float) -> RGBA:
    """Multiply RGB channels by factor (truncated), alpha untouched"""
    r, g, b, a = rgba
    return (
        clamp_channel(int(r * factor)),
        clamp_channel(int(g * factor)),
        clamp_channel(int(b * factor)),
        a,
    )


def gray_level(brightness: float) -> int:
    """Background gray channel value for a brightness in [0, 1]"""
    return clamp_channel(round(255 * brightness))


def clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))
