"""
PNG sequence surface - writes every submitted frame to a numbered PNG file.

Used by the demo CLI to look at animations without a display host.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional
from PIL import Image
from bubblewall.models.enums import LogCategory
from bubblewall.surface.surface_interface import ISurface
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.SURFACE)


class PngSequenceSurface(ISurface):
    """
    Surface writing frame_00001.png, frame_00002.png, ...

    Args:
        output_dir: Directory for the PNG files (created if missing)
        every_nth: Only write every n-th submitted frame (1 = all)
        prefix: File name prefix
    """

    def __init__(self, output_dir: Path, every_nth: int = 1, prefix: str = "frame"):
        if every_nth < 1:
            raise ValueError("every_nth must be >= 1")
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.every_nth = every_nth
        self.prefix = prefix
        self.frames_submitted = 0
        self.files_written = 0
        self._closed = False

    def acquire_frame(self, width: int, height: int) -> Optional[Image.Image]:
        if self._closed:
            return None
        return Image.new("RGBA", (width, height))

    def submit_frame(self, image: Image.Image) -> None:
        self.frames_submitted += 1
        if (self.frames_submitted - 1) % self.every_nth != 0:
            return

        path = self.output_dir / f"{self.prefix}_{self.frames_submitted:05d}.png"
        image.save(path, format="PNG")
        self.files_written += 1

    def close(self) -> None:
        if not self._closed:
            log.info(
                "PNG sequence closed",
                directory=str(self.output_dir),
                frames=self.frames_submitted,
                files=self.files_written,
            )
        self._closed = True
