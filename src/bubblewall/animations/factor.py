"""
Single-shot animations

Each sets the final radii right away and renders once (Maximize and
SurfaceRebuild render twice so the host surface ends up clear in both
buffers).
"""

from typing import TYPE_CHECKING
from bubblewall.animations.base import BaseAnimation
from bubblewall.models.enums import AnimationID, LogCategory
from bubblewall.utils.logger import get_category_logger

if TYPE_CHECKING:
    from bubblewall.engine.layout_generator import LayoutGenerator
    from bubblewall.services.theme_service import IThemeResolver

log = get_category_logger(LogCategory.ANIMATION)


class SetFactorAnimation(BaseAnimation):
    """Every radius set to base_radius * factor, gradient set to factor"""
    ANIMATION_ID = AnimationID.SET_FACTOR
    COALESCE = True

    def __init__(self, registry, state, config=None, factor: float = 1.0, repeats: int = 1):
        super().__init__(registry, state, config)
        self.factor = factor
        self.repeats = max(1, repeats)

    def begin(self) -> bool:
        self.state.release_pressed()
        return True

    def step(self) -> bool:
        self.frames += 1
        self._apply()
        return self.frames < self.repeats

    def snap_to_final(self) -> None:
        self._apply()

    def _apply(self) -> None:
        self.registry.apply_factor(self.factor)
        self.state.set_gradient_factor(self.factor)

    def __repr__(self) -> str:
        return f"SetFactorAnimation(factor={self.factor:.3f})"


class MinimizeAnimation(BaseAnimation):
    """Radius → a third of the base radius (rounded)"""
    ANIMATION_ID = AnimationID.MINIMIZE

    def begin(self) -> bool:
        self.state.release_pressed()
        return True

    def step(self) -> bool:
        self.snap_to_final()
        self.frames += 1
        return False

    def snap_to_final(self) -> None:
        self.registry.apply(lambda bubble: float(bubble.minimized_radius))
        self.state.set_gradient_factor(self.config.screen_off_factor)


class MaximizeAnimation(BaseAnimation):
    """Radius → base radius, rendered maximize_repeats times"""
    ANIMATION_ID = AnimationID.MAXIMIZE

    def begin(self) -> bool:
        self.state.release_pressed()
        return True

    def step(self) -> bool:
        self.snap_to_final()
        self.frames += 1
        return self.frames < self.config.maximize_repeats

    def snap_to_final(self) -> None:
        self.registry.apply_factor(1.0)
        self.state.set_gradient_factor(1.0)


class RedrawAnimation(BaseAnimation):
    """Re-render the current radii without changing anything"""
    ANIMATION_ID = AnimationID.REDRAW

    def step(self) -> bool:
        self.frames += 1
        return False

    def snap_to_final(self) -> None:
        pass


class AccentRedrawAnimation(RedrawAnimation):
    """Re-render only when the resolved accent differs from the cached one"""
    ANIMATION_ID = AnimationID.ACCENT_REDRAW

    def __init__(self, registry, state, config=None, resolver: "IThemeResolver" = None):
        super().__init__(registry, state, config)
        self.resolver = resolver

    def begin(self) -> bool:
        accent = self.resolver.resolve_accent_color()
        if accent == self.state.accent_color:
            return False
        log.debug("Accent color changed", previous=self.state.accent_color, current=accent)
        self.state.accent_color = accent
        return True


class SurfaceRebuildAnimation(BaseAnimation):
    """
    New surface size: cache it, resolve the theme, regenerate the layout,
    then draw everything at full size
    """
    ANIMATION_ID = AnimationID.SURFACE_REBUILD

    def __init__(
        self,
        registry,
        state,
        config=None,
        width: int = 0,
        height: int = 0,
        generator: "LayoutGenerator" = None,
        resolver: "IThemeResolver" = None
    ):
        super().__init__(registry, state, config)
        self.width = width
        self.height = height
        self.generator = generator
        self.resolver = resolver

    def begin(self) -> bool:
        self.state.surface_size = (self.width, self.height)
        self.state.release_pressed()

        if self.resolver is not None:
            self.state.night_mode = self.resolver.is_night_mode()
            self.state.accent_color = self.resolver.resolve_accent_color()
        self.state.brightness = self.state.resting_brightness

        self.registry.replace_all(self.generator.generate(self.width, self.height))
        return True

    def step(self) -> bool:
        self.snap_to_final()
        self.frames += 1
        return self.frames < self.config.maximize_repeats

    def snap_to_final(self) -> None:
        self.registry.apply_factor(1.0)
        self.state.set_gradient_factor(1.0)

    def __repr__(self) -> str:
        return f"SurfaceRebuildAnimation({self.width}x{self.height})"
