from enum import Enum, auto


class EventSource(Enum):
    """Event source identifiers"""
    SYSTEM = auto()     # Device broadcasts (unlock, screen off, configuration)
    INPUT = auto()      # Touch input
    SURFACE = auto()    # Host surface callbacks (size, zoom, visibility)
    PREVIEW = auto()    # Preview / settings screen
