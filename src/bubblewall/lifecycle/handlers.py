"""
Shutdown handlers for engine components.

Each handler shuts down one part of a WallpaperEngine. They are called in
priority order by ShutdownCoordinator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from bubblewall.lifecycle.shutdown_protocol import IShutdownHandler
from bubblewall.models.enums import LogCategory
from bubblewall.surface.surface_interface import ISurface
from bubblewall.utils.logger import get_category_logger

if TYPE_CHECKING:
    from bubblewall.animations.engine import AnimationEngine

log = get_category_logger(LogCategory.SHUTDOWN)


class AnimationShutdownHandler(IShutdownHandler):
    """
    Stops the animation worker.
    The in-flight animation is cancelled (and snapped) first.
    """

    def __init__(self, engine: "AnimationEngine"):
        self.engine = engine

    @property
    def shutdown_priority(self) -> int:
        return 100  # FIRST

    async def shutdown(self) -> None:
        log.info("Stopping animation worker...")
        await self.engine.stop()
        log.debug("Animation worker stopped", frames=self.engine.frames_rendered)


class SurfaceShutdownHandler(IShutdownHandler):
    """
    Releases the drawing surface after the worker is gone.
    Surfaces without close() are left alone.
    """

    def __init__(self, surface: ISurface):
        self.surface = surface

    @property
    def shutdown_priority(self) -> int:
        return 50

    async def shutdown(self) -> None:
        close = getattr(self.surface, "close", None)
        if close is None:
            log.debug("Surface has no close(), nothing to release")
            return
        close()
        log.info("Surface released")
