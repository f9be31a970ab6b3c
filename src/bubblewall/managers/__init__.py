"""
Managers for configuration and palette data
"""

from .config_manager import ConfigManager
from .palette_manager import PaletteManager

__all__ = ['ConfigManager', 'PaletteManager']
