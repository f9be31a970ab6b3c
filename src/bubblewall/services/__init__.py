"""
Services - event routing, theme resolution and the engine façade
"""

from bubblewall.services.event_bus import EventBus
from bubblewall.services.middleware import log_middleware
from bubblewall.services.theme_service import IThemeResolver, ThemeResolver, ThemeService
from bubblewall.services.event_router import EventRouter, zoom_factor
from bubblewall.services.wallpaper_engine import WallpaperEngine

__all__ = [
    "EventBus",
    "EventRouter",
    "IThemeResolver",
    "ThemeResolver",
    "ThemeService",
    "WallpaperEngine",
    "log_middleware",
    "zoom_factor",
]
