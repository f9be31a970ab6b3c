"""
Enums for the bubble wallpaper engine
"""

from enum import Enum, auto


class AnimationID(Enum):
    """Animation identifiers (one per animation routine)"""
    SET_FACTOR = auto()       # Instant resize to a factor of base radius
    SMOOTH_FACTOR = auto()    # Eased multi-frame resize to a factor
    MINIMIZE = auto()         # Instant resize to minimized radius
    MAXIMIZE = auto()         # Instant resize to base radius (rendered twice)
    TOUCH_PULSE = auto()      # Pressed bubble grows (touch down)
    TOUCH_RELEASE = auto()    # Pressed bubble shrinks back (touch up)
    NIGHT_MODE = auto()       # Background brightness fade
    REDRAW = auto()           # Re-render current state
    ACCENT_REDRAW = auto()    # Re-render after an accent color change
    SURFACE_REBUILD = auto()  # Regenerate layout for a new surface size


class PaletteMode(Enum):
    """Color pair assignment policy"""
    ROUND_ROBIN = auto()  # Cursor consumes two entries per bubble, wraps to 0
    RANDOM = auto()       # Random even slot paired with the next slot


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    LAYOUT = auto()      # Bubble packing / registry rebuilds
    PALETTE = auto()     # Color pair assignment
    ANIMATION = auto()   # Animation start/stop/cancel
    EVENT = auto()       # Event bus events and routing
    RENDER = auto()      # Frame composition
    THEME = auto()       # Night mode, accent color, theme presets
    SURFACE = auto()     # Frame acquire / submit
    SYSTEM = auto()      # Startup, teardown, errors
    SHUTDOWN = auto()
