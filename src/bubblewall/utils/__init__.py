"""
Utility functions for the bubble wallpaper engine
"""

from .colors import (
    parse_hex_color,
    rgba_to_hex,
    scale_alpha,
    scale_brightness,
    gray_level,
)

__all__ = [
    'parse_hex_color',
    'rgba_to_hex',
    'scale_alpha',
    'scale_brightness',
    'gray_level',
]
