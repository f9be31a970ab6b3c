"""
ISurface Protocol
=================
Host drawing surface abstraction.
Minimal contract for anything that can show a wallpaper frame.
"""

from __future__ import annotations
from typing import Optional, Protocol
from PIL import Image


class ISurface(Protocol):
    """
    Protocol defining the minimal surface interface.

    All implementations must provide:
    - acquire_frame: hand out a drawable RGBA buffer of the given size
      (None when the surface is currently unavailable)
    - submit_frame: present a completed buffer (blocking, one frame at most)
    """

    def acquire_frame(self, width: int, height: int) -> Optional[Image.Image]:
        """Drawable RGBA buffer, or None if the surface cannot be drawn on."""
        ...

    def submit_frame(self, image: Image.Image) -> None:
        """Present a buffer previously returned by acquire_frame()."""
        ...
