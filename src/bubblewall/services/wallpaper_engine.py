"""
Wallpaper Engine - one live wallpaper instance

Wires the pieces of one engine together:

    EventBus → EventRouter → AnimationEngine (worker) → FrameCompositor → ISurface
                                   ↑
                     BubbleRegistry + AnimationState

create() starts listening and spins up the worker; destroy() detaches from
the bus and runs the shutdown handlers.
"""

import random
from typing import Optional, Tuple
from bubblewall.animations.engine import AnimationEngine
from bubblewall.engine.bubble_registry import BubbleRegistry
from bubblewall.engine.frame_compositor import FrameCompositor
from bubblewall.engine.layout_generator import LayoutGenerator
from bubblewall.lifecycle.handlers import AnimationShutdownHandler, SurfaceShutdownHandler
from bubblewall.lifecycle.shutdown_coordinator import ShutdownCoordinator
from bubblewall.managers.palette_manager import PaletteManager
from bubblewall.models.animation_state import AnimationState
from bubblewall.models.color import Color
from bubblewall.models.config import BubbleWallConfig
from bubblewall.models.enums import LogCategory
from bubblewall.models.events import Event
from bubblewall.services.event_bus import EventBus
from bubblewall.services.event_router import EventRouter
from bubblewall.services.middleware import log_middleware
from bubblewall.services.theme_service import ThemeService
from bubblewall.surface.surface_interface import ISurface
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.SYSTEM)


class WallpaperEngine:
    """
    Per-instance façade

    Example:
        config = ConfigManager().load()
        surface = VirtualSurface()
        engine = WallpaperEngine(config, surface)
        await engine.create()
        await engine.publish(SurfaceChangedEvent(1080, 2340))
        await engine.publish(ScreenOffEvent())
        await engine.publish(UnlockedEvent())
        await engine.wait_until_idle()
        await engine.destroy()
    """

    def __init__(
        self,
        config: BubbleWallConfig,
        surface: ISurface,
        themes: Optional[ThemeService] = None,
        bus: Optional[EventBus] = None,
        preview: bool = False,
        seed: Optional[int] = None
    ):
        self.config = config
        self.surface = surface
        self.preview = preview
        self.themes = themes or ThemeService(config.themes, config.default_accent)

        self._owns_bus = bus is None
        self.bus = bus or EventBus()
        if self._owns_bus:
            self.bus.add_middleware(log_middleware)

        seed = seed if seed is not None else config.layout.seed
        self.palette = PaletteManager(
            config.palette,
            config.layout.palette_mode,
            rng=random.Random(seed),
        )
        self.generator = LayoutGenerator(config.layout, self.palette, seed=seed)

        resolver = self.themes.resolver(preview)
        self.state = AnimationState(
            night_mode=resolver.is_night_mode(),
            accent_color=resolver.resolve_accent_color(),
        )
        self.state.brightness = self.state.resting_brightness

        self.registry = BubbleRegistry()
        self.compositor = FrameCompositor(config.render)
        self.animations = AnimationEngine(
            self.registry,
            self.state,
            self.compositor,
            surface,
            config.animation,
        )
        self.router = EventRouter(
            self.animations,
            self.themes,
            self.generator,
            config.animation,
            preview=preview,
        )

        self.shutdown = ShutdownCoordinator()
        self.shutdown.register(AnimationShutdownHandler(self.animations))
        self.shutdown.register(SurfaceShutdownHandler(surface))

        self.created = False

    # ============================================================
    # Lifecycle
    # ============================================================

    async def create(self) -> None:
        """Subscribe to host events and start the animation worker"""
        if self.created:
            log.warn("Engine already created")
            return

        self.router.attach(self.bus)
        self.animations.start()
        self.created = True
        log.info("Wallpaper engine created", preview=self.preview)

    async def destroy(self) -> None:
        """Unsubscribe, cancel the running animation and stop the worker"""
        if not self.created:
            return

        self.router.detach(self.bus)
        await self.shutdown.shutdown_all("engine destroyed")
        self.created = False

    async def __aenter__(self) -> "WallpaperEngine":
        await self.create()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.destroy()

    # ============================================================
    # Host interface
    # ============================================================

    async def publish(self, event: Event) -> None:
        await self.bus.publish(event)

    async def wait_until_idle(self) -> None:
        await self.animations.wait_until_idle()

    def compute_colors(self) -> Tuple[Color, Color, Color]:
        """(primary, secondary, tertiary) colors advertised to the host"""
        accent = self.router.resolver.resolve_accent_color()
        return (accent, accent, accent)

    @property
    def bubble_count(self) -> int:
        return len(self.registry)
