"""
Smooth Factor Animation

Eases every bubble from its current radius to base_radius * factor.

Per frame each radius moves by `base_radius * radius_step_fraction *
speed_modifier(range, to_go)` in the direction decided once from the first
bubble, clamped at its own target. The first bubble leads:
once it sits within convergence_epsilon of its target every bubble is snapped
exactly onto its target and the run ends.

The gradient factor is the first bubble's progress fraction, held back so it
only ever moves in the transition's direction: after a screen-off it stays at
1/3 until the expansion has covered a third of its range. The run ends on
the target factor.
"""

from typing import List
from bubblewall.animations.base import BaseAnimation
from bubblewall.models.enums import AnimationID, LogCategory
from bubblewall.models.transition import progress_fraction, speed_modifier
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class SmoothFactorAnimation(BaseAnimation):
    ANIMATION_ID = AnimationID.SMOOTH_FACTOR

    def __init__(self, registry, state, config=None, factor: float = 1.0):
        super().__init__(registry, state, config)
        self.factor = factor

        self._targets: List[float] = []
        self._ranges: List[float] = []
        self._steps: List[float] = []
        self._expansion = True
        self._settled = False

    def begin(self) -> bool:
        self.state.release_pressed()

        bubbles = self.registry.bubbles
        self._targets = [b.radius_for_factor(self.factor) for b in bubbles]
        self._ranges = [t - b.current_radius for t, b in zip(self._targets, bubbles)]
        self._steps = [b.base_radius * self.config.radius_step_fraction for b in bubbles]

        if not bubbles:
            # Nothing to ease, one frame at the final gradient
            self._settled = True
            return True

        self._expansion = self._ranges[0] > 0
        self._settled = abs(self._ranges[0]) <= self.config.convergence_epsilon

        log.debug(
            "Smooth transition prepared",
            factor=f"{self.factor:.3f}",
            bubbles=len(bubbles),
            direction="expand" if self._expansion else "contract",
        )
        return True

    def step(self) -> bool:
        self.frames += 1
        if self._settled:
            self.snap_to_final()
            return False

        direction = 1 if self._expansion else -1
        for index, bubble in enumerate(self.registry):
            target = self._targets[index]
            to_go = target - bubble.current_radius
            modifier = speed_modifier(abs(self._ranges[index]), abs(to_go), self.config.min_speed)

            radius = bubble.current_radius + self._steps[index] * modifier * direction
            bubble.current_radius = min(radius, target) if self._expansion else max(radius, target)

        leader = self.registry.first
        remaining = self._targets[0] - leader.current_radius
        if abs(remaining) <= self.config.convergence_epsilon:
            self.snap_to_final()
            return False

        progress = progress_fraction(self._ranges[0], remaining)
        if self._expansion:
            progress = max(self.state.gradient_factor, progress)
        else:
            progress = min(self.state.gradient_factor, progress)
        self.state.set_gradient_factor(progress)
        return True

    def snap_to_final(self) -> None:
        for bubble, target in zip(self.registry, self._targets):
            bubble.current_radius = target
        self.state.set_gradient_factor(self.factor)

    def __repr__(self) -> str:
        return f"SmoothFactorAnimation(factor={self.factor:.3f})"
