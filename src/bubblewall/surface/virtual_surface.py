from __future__ import annotations
from collections import deque
from typing import Deque, List, Optional, Tuple
from PIL import Image
from bubblewall.surface.surface_interface import ISurface


class VirtualSurface(ISurface):
    """
    In-memory surface

    Double-buffered like a host surface: acquire_frame() hands out the back
    buffer, submit_frame() swaps it to the front. Keeps the last few
    submitted frames for inspection.
    """

    def __init__(self, history: int = 0):
        self._front: Optional[Image.Image] = None
        self._back: Optional[Image.Image] = None
        self._history: Deque[Image.Image] = deque(maxlen=history or None)
        self._keep_history = history > 0
        self.frames_submitted = 0
        self.available = True

    def acquire_frame(self, width: int, height: int) -> Optional[Image.Image]:
        if not self.available:
            return None
        if self._back is None or self._back.size != (width, height):
            self._back = Image.new("RGBA", (width, height))
        return self._back

    def submit_frame(self, image: Image.Image) -> None:
        self._front, self._back = image, self._front
        self.frames_submitted += 1
        if self._keep_history:
            self._history.append(image.copy())

    @property
    def last_frame(self) -> Optional[Image.Image]:
        return self._front

    @property
    def history(self) -> List[Image.Image]:
        return list(self._history)

    @property
    def size(self) -> Tuple[int, int]:
        return self._front.size if self._front is not None else (0, 0)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """RGBA of the last submitted frame at (x, y)"""
        if self._front is None:
            raise RuntimeError("no frame submitted yet")
        return self._front.getpixel((x, y))

    def close(self) -> None:
        self._front = None
        self._back = None
        self._history.clear()
        self.available = False
