"""
Configuration models

Typed views of the merged YAML configuration. ConfigManager builds these
from config/*.yaml; every section has defaults matching factory_defaults.yaml
so tests can construct them directly.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from bubblewall.exceptions import ConfigError
from bubblewall.models.color import Color
from bubblewall.models.enums import PaletteMode


@dataclass
class LayoutConfig:
    """Bubble packing parameters (layout.yaml)"""
    padding: int = 50
    min_radius: int = 20
    max_radius: int = 250
    max_retries: int = 50
    palette_mode: PaletteMode = PaletteMode.ROUND_ROBIN
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.min_radius < 1:
            raise ConfigError("must be >= 1", key="layout.min_radius")
        if self.max_radius < self.min_radius:
            raise ConfigError(
                f"must be >= min_radius ({self.min_radius})", key="layout.max_radius"
            )
        if self.padding < 0:
            raise ConfigError("must be >= 0", key="layout.padding")
        if self.max_retries < 1:
            raise ConfigError("must be >= 1", key="layout.max_retries")


@dataclass
class AnimationConfig:
    """Animation timing and shaping parameters (animation.yaml)"""
    fps: int = 60                        # 0 disables frame pacing
    radius_step_fraction: float = 0.05   # share of base radius per eased frame
    min_speed: float = 0.001
    convergence_epsilon: float = 1e-6
    screen_off_factor: float = 1 / 3
    min_zoom_factor: float = 0.3
    pulse_step: float = 1.0
    pulse_frames: int = 5
    brightness_step: float = 0.05
    maximize_repeats: int = 2

    @property
    def frame_delay(self) -> float:
        """Seconds between animation frames"""
        if self.fps <= 0:
            return 0.0
        return 1.0 / min(self.fps, 240)

    def validate(self) -> None:
        if self.fps < 0:
            raise ConfigError("must be >= 0", key="animation.fps")
        if not 0 < self.radius_step_fraction <= 1:
            raise ConfigError("must be in (0, 1]", key="animation.radius_step_fraction")
        if self.min_speed <= 0:
            raise ConfigError("must be > 0", key="animation.min_speed")
        if self.convergence_epsilon <= 0:
            raise ConfigError("must be > 0", key="animation.convergence_epsilon")
        if self.pulse_frames < 1:
            raise ConfigError("must be >= 1", key="animation.pulse_frames")
        if not 0 < self.brightness_step <= 1:
            raise ConfigError("must be in (0, 1]", key="animation.brightness_step")
        if self.maximize_repeats < 1:
            raise ConfigError("must be >= 1", key="animation.maximize_repeats")


@dataclass
class RenderConfig:
    """Frame compositor parameters (render.yaml)"""
    outline_width: int = 30
    gradient_day_alpha: float = 0.6
    gradient_night_alpha: float = 0.1
    gradient_top_alpha: float = 0.3
    gradient_height_scale: float = 0.75
    shadow_alpha: float = 0.5
    shadow_reach: float = 1.2

    def validate(self) -> None:
        if self.outline_width < 0:
            raise ConfigError("must be >= 0", key="render.outline_width")
        for name in ("gradient_day_alpha", "gradient_night_alpha", "gradient_top_alpha", "shadow_alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError("must be in [0, 1]", key=f"render.{name}")


@dataclass
class ThemePreset:
    """Named accent color selectable from the preview screen (themes.yaml)"""
    name: str
    accent: Color


@dataclass
class BubbleWallConfig:
    """Complete engine configuration"""
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    palette: List[str] = field(default_factory=list)
    themes: List[ThemePreset] = field(default_factory=list)
    default_accent: Color = field(default_factory=lambda: Color.from_hex("#ff33b5e5"))

    def validate(self) -> None:
        self.layout.validate()
        self.animation.validate()
        self.render.validate()
