"""Device lifecycle broadcast events (unlock, screen off, theme, accent)"""

from dataclasses import dataclass

from bubblewall.models.events.base import Event
from bubblewall.models.events.types import EventType
from bubblewall.models.events.sources import EventSource


@dataclass(init=False)
class UnlockedEvent(Event):
    """User unlocked the device (bubbles grow back smoothly)"""

    def __init__(self):
        super().__init__(type=EventType.UNLOCKED, source=EventSource.SYSTEM)


@dataclass(init=False)
class ScreenOffEvent(Event):
    """Screen turned off (bubbles shrink instantly)"""

    def __init__(self):
        super().__init__(type=EventType.SCREEN_OFF, source=EventSource.SYSTEM)


@dataclass(init=False)
class ThemeChangedEvent(Event):
    """
    Configuration changed

    Carries no payload: the night-mode flag is re-resolved from the theme
    resolver and compared against the cached one.
    """

    def __init__(self):
        super().__init__(type=EventType.THEME_CHANGED, source=EventSource.SYSTEM)


@dataclass(init=False)
class AccentColorChangedEvent(Event):
    """Accent color may have changed (package/theme change broadcast)"""

    def __init__(self):
        super().__init__(type=EventType.ACCENT_COLOR_CHANGED, source=EventSource.SYSTEM)
