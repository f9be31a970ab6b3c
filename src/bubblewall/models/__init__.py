"""
Models package - Data models for the bubble wallpaper engine
"""

from .enums import AnimationID, PaletteMode, LogLevel, LogCategory
from .color import Color
from .bubble import Bubble
from .animation_state import AnimationState
from .config import LayoutConfig, AnimationConfig, RenderConfig, ThemePreset, BubbleWallConfig

__all__ = [
    'AnimationID',
    'PaletteMode',
    'LogLevel',
    'LogCategory',
    'Color',
    'Bubble',
    'AnimationState',
    'LayoutConfig',
    'AnimationConfig',
    'RenderConfig',
    'ThemePreset',
    'BubbleWallConfig',
]
