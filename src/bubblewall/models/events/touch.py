"""Touch input events"""

from dataclasses import dataclass

from bubblewall.models.events.base import Event
from bubblewall.models.events.types import EventType
from bubblewall.models.events.sources import EventSource


@dataclass(init=False)
class TouchDownEvent(Event):
    """Finger down at surface coordinates"""
    x: int
    y: int

    def __init__(self, x: float, y: float):
        """
        Args:
            x, y: Touch position in surface pixels (truncated to int)
        """
        super().__init__(type=EventType.TOUCH_DOWN, source=EventSource.INPUT)
        self.x = int(x)
        self.y = int(y)


@dataclass(init=False)
class TouchUpEvent(Event):
    """Finger lifted"""

    def __init__(self):
        super().__init__(type=EventType.TOUCH_UP, source=EventSource.INPUT)
