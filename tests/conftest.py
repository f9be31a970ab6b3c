import pytest
from unittest.mock import MagicMock

from bubblewall.animations.engine import AnimationEngine
from bubblewall.engine.bubble_registry import BubbleRegistry
from bubblewall.engine.frame_compositor import FrameCompositor
from bubblewall.managers.palette_manager import PaletteManager
from bubblewall.models.animation_state import AnimationState
from bubblewall.models.bubble import Bubble
from bubblewall.models.color import Color
from bubblewall.models.config import (
    AnimationConfig,
    BubbleWallConfig,
    LayoutConfig,
    RenderConfig,
    ThemePreset,
)
from bubblewall.surface.virtual_surface import VirtualSurface

PALETTE = ["#1565c0", "#42a5f5", "#2e7d32", "#66bb6a", "#c62828", "#ef5350"]
ACCENT = Color.from_hex("#ff33b5e5")


@pytest.fixture
def palette():
    """Three (outline, fill) pairs, round-robin"""
    return PaletteManager(PALETTE)


@pytest.fixture
def animation_config():
    """No frame pacing so animations run as fast as the loop allows"""
    return AnimationConfig(fps=0)


@pytest.fixture
def bubbles():
    """
    Three bubbles on a 400x400 surface, far enough apart not to overlap.
    """
    blue = (Color.from_hex("#1565c0"), Color.from_hex("#42a5f5"))
    green = (Color.from_hex("#2e7d32"), Color.from_hex("#66bb6a"))
    red = (Color.from_hex("#c62828"), Color.from_hex("#ef5350"))
    return [
        Bubble(x=100, y=100, base_radius=60, outline_color=blue[0], fill_color=blue[1]),
        Bubble(x=300, y=100, base_radius=45, outline_color=green[0], fill_color=green[1]),
        Bubble(x=200, y=300, base_radius=30, outline_color=red[0], fill_color=red[1]),
    ]


@pytest.fixture
def registry(bubbles):
    return BubbleRegistry(bubbles)


@pytest.fixture
def state():
    return AnimationState(accent_color=ACCENT, gradient_factor=1.0, surface_size=(400, 400))


@pytest.fixture
def surface():
    return VirtualSurface()


@pytest.fixture
def resolver():
    """Theme resolver reporting day mode and the default accent"""
    mock = MagicMock()
    mock.is_night_mode.return_value = False
    mock.resolve_accent_color.return_value = ACCENT
    return mock


@pytest.fixture
def compositor():
    return FrameCompositor(RenderConfig())


@pytest.fixture
def engine(registry, state, compositor, surface, animation_config):
    return AnimationEngine(registry, state, compositor, surface, animation_config)


@pytest.fixture
def config():
    """Full engine config with a fixed seed and no frame pacing"""
    return BubbleWallConfig(
        layout=LayoutConfig(seed=1234),
        animation=AnimationConfig(fps=0),
        render=RenderConfig(),
        palette=list(PALETTE),
        themes=[
            ThemePreset("ocean", Color.from_hex("#ff1e88e5")),
            ThemePreset("forest", Color.from_hex("#ff43a047")),
        ],
        default_accent=ACCENT,
    )
