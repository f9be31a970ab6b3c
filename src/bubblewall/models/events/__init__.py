"""
Event system for the bubble wallpaper engine

Host callbacks are turned into typed events and published on the EventBus.
"""

from bubblewall.models.events.types import EventType
from bubblewall.models.events.base import Event
from bubblewall.models.events.sources import EventSource

from bubblewall.models.events.system import (
    UnlockedEvent,
    ScreenOffEvent,
    ThemeChangedEvent,
    AccentColorChangedEvent,
)
from bubblewall.models.events.touch import TouchDownEvent, TouchUpEvent
from bubblewall.models.events.surface import (
    SurfaceChangedEvent,
    ZoomChangedEvent,
    VisibilityChangedEvent,
    PreviewThemeSelectedEvent,
)

__all__ = [
    "EventType",
    "Event",
    "EventSource",

    # System broadcasts
    "UnlockedEvent",
    "ScreenOffEvent",
    "ThemeChangedEvent",
    "AccentColorChangedEvent",

    # Touch
    "TouchDownEvent",
    "TouchUpEvent",

    # Surface / preview
    "SurfaceChangedEvent",
    "ZoomChangedEvent",
    "VisibilityChangedEvent",
    "PreviewThemeSelectedEvent",
]
