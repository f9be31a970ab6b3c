"""Host surface callbacks (size, zoom, visibility) and preview selections"""

from dataclasses import dataclass

from bubblewall.models.events.base import Event
from bubblewall.models.events.types import EventType
from bubblewall.models.events.sources import EventSource


@dataclass(init=False)
class SurfaceChangedEvent(Event):
    """Surface created or resized"""
    width: int
    height: int

    def __init__(self, width: int, height: int):
        super().__init__(type=EventType.SURFACE_CHANGED, source=EventSource.SURFACE)
        self.width = width
        self.height = height


@dataclass(init=False)
class ZoomChangedEvent(Event):
    """Launcher zoom level changed (0.0 = no zoom, 1.0 = fully zoomed)"""
    level: float

    def __init__(self, level: float):
        super().__init__(type=EventType.ZOOM_CHANGED, source=EventSource.SURFACE)
        self.level = level


@dataclass(init=False)
class VisibilityChangedEvent(Event):
    """Wallpaper shown or hidden"""
    visible: bool

    def __init__(self, visible: bool):
        super().__init__(type=EventType.VISIBILITY_CHANGED, source=EventSource.SURFACE)
        self.visible = visible


@dataclass(init=False)
class PreviewThemeSelectedEvent(Event):
    """Theme preset picked on the settings/preview screen"""
    index: int

    def __init__(self, index: int):
        super().__init__(type=EventType.PREVIEW_THEME_SELECTED, source=EventSource.PREVIEW)
        self.index = index
