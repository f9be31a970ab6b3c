"""
Animation Engine

Single worker that runs every animation and render step in order.

Events never touch the registry directly: they enqueue animation requests and
the worker runs them one after another, each to completion or until it is
cancelled. A cancelled animation snaps to its final state and renders once,
so the surface never shows bubbles stuck mid-transition.
"""

import asyncio
import itertools
from dataclasses import dataclass, field
from typing import Dict, Optional, Type
from bubblewall.animations.base import BaseAnimation
from bubblewall.animations.factor import (
    AccentRedrawAnimation,
    MaximizeAnimation,
    MinimizeAnimation,
    RedrawAnimation,
    SetFactorAnimation,
    SurfaceRebuildAnimation,
)
from bubblewall.animations.night_mode import NightModeAnimation
from bubblewall.animations.smooth_factor import SmoothFactorAnimation
from bubblewall.animations.touch_pulse import TouchPulseAnimation, TouchReleaseAnimation
from bubblewall.engine.bubble_registry import BubbleRegistry
from bubblewall.engine.frame_compositor import FrameCompositor
from bubblewall.models.animation_state import AnimationState
from bubblewall.models.config import AnimationConfig
from bubblewall.models.enums import AnimationID, LogCategory
from bubblewall.surface.surface_interface import ISurface
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


def _build_animation_registry() -> Dict[AnimationID, Type[BaseAnimation]]:
    """Map every AnimationID to its implementation"""
    class_map = {
        AnimationID.SET_FACTOR: SetFactorAnimation,
        AnimationID.SMOOTH_FACTOR: SmoothFactorAnimation,
        AnimationID.MINIMIZE: MinimizeAnimation,
        AnimationID.MAXIMIZE: MaximizeAnimation,
        AnimationID.TOUCH_PULSE: TouchPulseAnimation,
        AnimationID.TOUCH_RELEASE: TouchReleaseAnimation,
        AnimationID.NIGHT_MODE: NightModeAnimation,
        AnimationID.REDRAW: RedrawAnimation,
        AnimationID.ACCENT_REDRAW: AccentRedrawAnimation,
        AnimationID.SURFACE_REBUILD: SurfaceRebuildAnimation,
    }
    missing = [anim_id.name for anim_id in AnimationID if anim_id not in class_map]
    if missing:
        raise RuntimeError(f"Animations without implementation: {missing}")
    return class_map


@dataclass
class AnimationRequest:
    animation: BaseAnimation
    sequence: int = field(default=0)


class AnimationEngine:
    """
    Sequential animation worker

    • One asyncio task consumes an asyncio.Queue of AnimationRequests
    • Each frame: check cancellation → step → render → pace
    • cancel_current() blocks until the running animation has snapped

    Example:
        engine = AnimationEngine(registry, state, compositor, surface, config.animation)
        engine.start()
        engine.submit(AnimationID.SMOOTH_FACTOR, factor=1.0)
        await engine.wait_until_idle()
        await engine.stop()
    """

    ANIMATIONS: Dict[AnimationID, Type[BaseAnimation]] = _build_animation_registry()

    def __init__(
        self,
        registry: BubbleRegistry,
        state: AnimationState,
        compositor: FrameCompositor,
        surface: ISurface,
        config: Optional[AnimationConfig] = None
    ):
        self.registry = registry
        self.state = state
        self.compositor = compositor
        self.surface = surface
        self.config = config or AnimationConfig()

        self.current: Optional[BaseAnimation] = None
        self.frames_rendered = 0
        self.frames_skipped = 0

        self._queue: "asyncio.Queue[AnimationRequest]" = asyncio.Queue()
        self._cancel_requested = asyncio.Event()
        self._idle = asyncio.Event()
        self._idle.set()
        self._task: Optional[asyncio.Task] = None

        self._sequence = itertools.count(1)
        self._latest: Dict[AnimationID, int] = {}

    # ============================================================
    # Worker control
    # ============================================================

    def start(self) -> None:
        if self.is_running():
            log.warn("Animation worker already running")
            return
        self._task = asyncio.create_task(self._run_loop())

    async def stop(self) -> None:
        """Cancel the in-flight animation (snapping it) and end the worker"""
        await self.cancel_current()

        task, self._task = self._task, None
        if task:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        dropped = 0
        while not self._queue.empty():
            self._queue.get_nowait()
            self._queue.task_done()
            dropped += 1
        if dropped:
            log.debug("Dropped queued animations on stop", count=dropped)

    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def is_idle(self) -> bool:
        return self._idle.is_set()

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    # ============================================================
    # Requests
    # ============================================================

    def create_animation(self, anim_id: AnimationID, **params) -> BaseAnimation:
        """Build an animation instance bound to this engine's registry and state"""
        anim_class = self.ANIMATIONS.get(anim_id)
        if anim_class is None:
            raise ValueError(f"Animation {anim_id} not registered")
        return anim_class(self.registry, self.state, self.config, **params)

    def submit(self, anim_id: AnimationID, **params) -> BaseAnimation:
        """Queue an animation; it runs after everything queued before it"""
        return self.submit_animation(self.create_animation(anim_id, **params))

    def submit_animation(self, animation: BaseAnimation) -> BaseAnimation:
        sequence = next(self._sequence)
        self._latest[animation.ANIMATION_ID] = sequence
        self._queue.put_nowait(AnimationRequest(animation, sequence))
        log.debug("Animation queued", animation=repr(animation), pending=self._queue.qsize())
        return animation

    async def cancel_current(self) -> bool:
        """
        Ask the running animation to stop and wait until it has snapped to
        its final state. Returns False when nothing was running.
        """
        if self._idle.is_set():
            return False

        self._cancel_requested.set()
        await self._idle.wait()
        return True

    async def wait_until_idle(self) -> None:
        """Wait until every queued animation has run"""
        await self._queue.join()

    # ============================================================
    # Rendering
    # ============================================================

    def render(self) -> bool:
        """Paint the current state onto a fresh surface frame and submit it"""
        if not self.state.has_surface:
            self.frames_skipped += 1
            return False

        width, height = self.state.surface_size
        image = self.surface.acquire_frame(width, height)
        if image is None:
            self.frames_skipped += 1
            log.debug("Surface unavailable, frame skipped")
            return False

        self.compositor.render(image, self.registry, self.state)
        self.surface.submit_frame(image)
        self.frames_rendered += 1
        return True

    # ============================================================
    # Internal worker loop
    # ============================================================

    def _is_superseded(self, request: AnimationRequest) -> bool:
        animation = request.animation
        return animation.COALESCE and self._latest.get(animation.ANIMATION_ID, 0) > request.sequence

    async def _run_loop(self):
        """Consume requests until cancelled"""
        log.info("Animation worker started")
        handled = 0
        try:
            while True:
                request = await self._queue.get()
                try:
                    if self._is_superseded(request):
                        log.debug("Animation superseded", animation=repr(request.animation))
                        continue
                    await self._run_animation(request.animation)
                    handled += 1
                finally:
                    self._queue.task_done()

        except asyncio.CancelledError:
            log.debug("Animation worker cancelled")
        finally:
            log.info(f"Animation worker finished after {handled} animations")

    async def _run_animation(self, animation: BaseAnimation):
        self._idle.clear()
        self.current = animation
        try:
            if not animation.begin():
                log.debug("Animation skipped", animation=repr(animation))
                return

            while True:
                if self._cancel_requested.is_set():
                    animation.snap_to_final()
                    self.render()
                    log.info(
                        "Animation cancelled",
                        animation=animation.name,
                        frames=animation.frames
                    )
                    return

                more = animation.step()
                self.render()
                if not more:
                    break

                await asyncio.sleep(self.config.frame_delay)

            log.debug("Animation finished", animation=animation.name, frames=animation.frames)

        except Exception as e:
            log.error(f"Animation {animation.name} failed: {e}", exc_info=True)
            try:
                animation.snap_to_final()
                self.render()
            except Exception as snap_error:
                log.error(f"Snapping {animation.name} after failure failed: {snap_error}")
        finally:
            self.current = None
            self._cancel_requested.clear()
            self._idle.set()
