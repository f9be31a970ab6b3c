from enum import Enum, auto


class EventType(Enum):
    # Device lifecycle broadcasts
    UNLOCKED = auto()
    SCREEN_OFF = auto()
    THEME_CHANGED = auto()
    ACCENT_COLOR_CHANGED = auto()

    # Touch input
    TOUCH_DOWN = auto()
    TOUCH_UP = auto()

    # Surface / window
    ZOOM_CHANGED = auto()
    VISIBILITY_CHANGED = auto()
    SURFACE_CHANGED = auto()

    # Preview screen
    PREVIEW_THEME_SELECTED = auto()
