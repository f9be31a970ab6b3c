"""
Event Router - turns host signals into animation requests

The router never touches bubbles itself: every reaction is an animation
request queued on the AnimationEngine, so hit-tests and comparisons happen on
the worker in order with the frames around them. The only exception is
visibility loss, which cancels the running animation and waits for it.
"""

from typing import Callable, List, Tuple
from bubblewall.animations.engine import AnimationEngine
from bubblewall.engine.layout_generator import LayoutGenerator
from bubblewall.models.config import AnimationConfig
from bubblewall.models.enums import AnimationID, LogCategory
from bubblewall.models.events import (
    AccentColorChangedEvent,
    Event,
    EventType,
    PreviewThemeSelectedEvent,
    ScreenOffEvent,
    SurfaceChangedEvent,
    ThemeChangedEvent,
    TouchDownEvent,
    TouchUpEvent,
    UnlockedEvent,
    VisibilityChangedEvent,
    ZoomChangedEvent,
)
from bubblewall.services.event_bus import EventBus
from bubblewall.services.theme_service import ThemeService
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.EVENT)

# Device broadcasts a preview engine does not listen to
SYSTEM_BROADCASTS = (
    EventType.UNLOCKED,
    EventType.SCREEN_OFF,
    EventType.THEME_CHANGED,
    EventType.ACCENT_COLOR_CHANGED,
)


def zoom_factor(level: float, minimum: float = 0.3) -> float:
    """Bubble size factor for a launcher zoom level (0 = none, 1 = full)"""
    level = max(0.0, min(1.0, level))
    return max(1.0 - level, minimum)


class EventRouter:
    """
    Maps host events onto animation requests

    | Event                   | Reaction                                   |
    |-------------------------|--------------------------------------------|
    | UNLOCKED                | smooth resize to full size                 |
    | SCREEN_OFF              | instant resize to screen_off_factor        |
    | THEME_CHANGED           | night-mode fade (only on an actual flip)   |
    | ACCENT_COLOR_CHANGED    | redraw (only when the accent changed)      |
    | TOUCH_DOWN              | pulse the bubble under the finger          |
    | TOUCH_UP                | shrink the pressed bubble back             |
    | ZOOM_CHANGED            | instant resize to max(1 - zoom, 0.3)       |
    | VISIBILITY_CHANGED      | hidden: cancel, visible: apply theme       |
    | SURFACE_CHANGED         | regenerate layout, draw at full size       |
    | PREVIEW_THEME_SELECTED  | preview only: show the chosen theme        |
    """

    def __init__(
        self,
        engine: AnimationEngine,
        themes: ThemeService,
        generator: LayoutGenerator,
        config: AnimationConfig,
        preview: bool = False
    ):
        self.engine = engine
        self.themes = themes
        self.generator = generator
        self.config = config
        self.preview = preview
        self.resolver = themes.resolver(preview)
        self._attached: List[Tuple[EventType, Callable[[Event], None]]] = []

    # ------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------

    def subscriptions(self) -> List[Tuple[EventType, Callable]]:
        """(event type, handler) pairs this router listens to"""
        routes = [
            (EventType.TOUCH_DOWN, self.on_touch_down),
            (EventType.TOUCH_UP, self.on_touch_up),
            (EventType.ZOOM_CHANGED, self.on_zoom_changed),
            (EventType.VISIBILITY_CHANGED, self.on_visibility_changed),
            (EventType.SURFACE_CHANGED, self.on_surface_changed),
        ]
        if self.preview:
            routes.append((EventType.PREVIEW_THEME_SELECTED, self.on_preview_theme_selected))
        else:
            routes.extend([
                (EventType.UNLOCKED, self.on_unlocked),
                (EventType.SCREEN_OFF, self.on_screen_off),
                (EventType.THEME_CHANGED, self.on_theme_changed),
                (EventType.ACCENT_COLOR_CHANGED, self.on_accent_color_changed),
            ])
        return routes

    def attach(self, bus: EventBus) -> None:
        for event_type, handler in self.subscriptions():
            bus.subscribe(event_type, handler)
            self._attached.append((event_type, handler))
        log.debug("Router attached", preview=self.preview, routes=len(self._attached))

    def detach(self, bus: EventBus) -> None:
        for event_type, handler in self._attached:
            bus.unsubscribe(event_type, handler)
        self._attached.clear()

    @property
    def attached(self) -> bool:
        return bool(self._attached)

    # ------------------------------------------------------------
    # Device broadcasts
    # ------------------------------------------------------------

    def on_unlocked(self, event: UnlockedEvent) -> None:
        self.engine.submit(AnimationID.SMOOTH_FACTOR, factor=1.0)

    def on_screen_off(self, event: ScreenOffEvent) -> None:
        self.engine.submit(AnimationID.SET_FACTOR, factor=self.config.screen_off_factor)

    def on_theme_changed(self, event: ThemeChangedEvent) -> None:
        # Comparison against the cached flag happens on the worker
        self.engine.submit(AnimationID.NIGHT_MODE, resolver=self.resolver)

    def on_accent_color_changed(self, event: AccentColorChangedEvent) -> None:
        self.engine.submit(AnimationID.ACCENT_REDRAW, resolver=self.resolver)

    # ------------------------------------------------------------
    # Input
    # ------------------------------------------------------------

    def on_touch_down(self, event: TouchDownEvent) -> None:
        self.engine.submit(AnimationID.TOUCH_PULSE, x=event.x, y=event.y)

    def on_touch_up(self, event: TouchUpEvent) -> None:
        self.engine.submit(AnimationID.TOUCH_RELEASE)

    # ------------------------------------------------------------
    # Surface
    # ------------------------------------------------------------

    def on_zoom_changed(self, event: ZoomChangedEvent) -> None:
        factor = zoom_factor(event.level, self.config.min_zoom_factor)
        self.engine.submit(AnimationID.SET_FACTOR, factor=factor)

    async def on_visibility_changed(self, event: VisibilityChangedEvent) -> None:
        if not event.visible:
            cancelled = await self.engine.cancel_current()
            if cancelled:
                log.debug("Hidden: running animation cancelled")
            return

        if not self.preview and self.themes.apply_pending():
            self.engine.submit(AnimationID.ACCENT_REDRAW, resolver=self.resolver)

    def on_surface_changed(self, event: SurfaceChangedEvent) -> None:
        self.engine.submit(
            AnimationID.SURFACE_REBUILD,
            width=event.width,
            height=event.height,
            generator=self.generator,
            resolver=self.resolver,
        )

    # ------------------------------------------------------------
    # Preview
    # ------------------------------------------------------------

    def on_preview_theme_selected(self, event: PreviewThemeSelectedEvent) -> None:
        try:
            self.themes.select_preview_theme(event.index)
        except IndexError as e:
            log.warn(f"Ignoring theme selection: {e}")
            return
        self.engine.submit(AnimationID.ACCENT_REDRAW, resolver=self.resolver)
