"""
Touch Pulse Animations

Touch-down grows the bubble under the finger by pulse_step per frame for
pulse_frames frames; touch-up shrinks it back over the same number of frames
and ends exactly on the radius it had before the touch.

The hit-test runs here, on the worker, so it never sees a half-updated
radius. Hits use the base radius.
"""

from bubblewall.animations.base import BaseAnimation
from bubblewall.models.enums import AnimationID, LogCategory
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class TouchPulseAnimation(BaseAnimation):
    """Expand phase (touch down)"""
    ANIMATION_ID = AnimationID.TOUCH_PULSE

    def __init__(self, registry, state, config=None, x: int = 0, y: int = 0):
        super().__init__(registry, state, config)
        self.x = x
        self.y = y

    def begin(self) -> bool:
        if self.state.pressed_bubble is not None:
            return False

        bubble = self.registry.bubble_at(self.x, self.y)
        if bubble is None:
            return False

        self.state.pressed_bubble = bubble
        self.state.pulse_origin_radius = bubble.current_radius
        self.state.pulse_offset = 0.0
        log.debug("Bubble pressed", bubble=bubble, point=(self.x, self.y))
        return True

    def step(self) -> bool:
        self.frames += 1
        self.state.pulse_offset = self.config.pulse_step * self.frames
        self.state.pressed_bubble.current_radius = self.state.pulse_origin_radius + self.state.pulse_offset
        return self.frames < self.config.pulse_frames

    def snap_to_final(self) -> None:
        # Cancelled mid-press: put the bubble back and drop the press
        bubble = self.state.pressed_bubble
        if bubble is not None and self.state.pulse_origin_radius is not None:
            bubble.current_radius = self.state.pulse_origin_radius
        self.state.release_pressed()

    def __repr__(self) -> str:
        return f"TouchPulseAnimation(x={self.x}, y={self.y})"


class TouchReleaseAnimation(BaseAnimation):
    """Contract phase (touch up)"""
    ANIMATION_ID = AnimationID.TOUCH_RELEASE

    def begin(self) -> bool:
        return self.state.pressed_bubble is not None

    def step(self) -> bool:
        self.frames += 1
        if self.frames >= self.config.pulse_frames:
            self.snap_to_final()
            return False

        self.state.pulse_offset -= self.config.pulse_step
        self.state.pressed_bubble.current_radius = self.state.pulse_origin_radius + self.state.pulse_offset
        return True

    def snap_to_final(self) -> None:
        bubble = self.state.pressed_bubble
        if bubble is not None and self.state.pulse_origin_radius is not None:
            bubble.current_radius = self.state.pulse_origin_radius
        self.state.release_pressed()
