"""
Night Mode Transition

Fades the background between white (day) and black (night) in
brightness_step increments, re-rendering the bubbles every step.
Runs only when the resolved night-mode flag differs from the cached one.
"""

import math
from typing import TYPE_CHECKING
from bubblewall.animations.base import BaseAnimation
from bubblewall.models.enums import AnimationID, LogCategory
from bubblewall.utils.logger import get_category_logger

if TYPE_CHECKING:
    from bubblewall.services.theme_service import IThemeResolver

log = get_category_logger(LogCategory.ANIMATION)


class NightModeAnimation(BaseAnimation):
    ANIMATION_ID = AnimationID.NIGHT_MODE

    def __init__(self, registry, state, config=None, resolver: "IThemeResolver" = None):
        super().__init__(registry, state, config)
        self.resolver = resolver
        self._start = 1.0
        self._target = 1.0
        self._total_frames = 1

    def begin(self) -> bool:
        night_mode = self.resolver.is_night_mode()
        if night_mode == self.state.night_mode:
            return False

        self.state.night_mode = night_mode
        self._target = self.state.resting_brightness
        # Always fade across the full range, starting from the opposite end
        self._start = 1.0 - self._target
        distance = abs(self._target - self._start)
        self._total_frames = max(1, math.ceil(round(distance / self.config.brightness_step, 6)))

        log.info("Night mode changed", night_mode=night_mode, frames=self._total_frames)
        return True

    def step(self) -> bool:
        self.frames += 1
        if self.frames >= self._total_frames:
            self.state.brightness = self._target
            return False

        direction = 1 if self._target > self._start else -1
        self.state.brightness = self._start + direction * self.config.brightness_step * self.frames
        return True

    def snap_to_final(self) -> None:
        self.state.brightness = self._target
