"""
Event Bus - Central event routing system

Implements pub-sub pattern:
- Publishers: publish(event)
- Subscribers: subscribe(event_type, handler, priority, filter_fn)
- Middleware: add_middleware(middleware_fn)
"""

import inspect
from typing import Callable, List, Dict, Optional
from dataclasses import dataclass
from bubblewall.models.events import Event, EventType
from bubblewall.models.enums import LogCategory, LogLevel
from bubblewall.utils.logger import get_logger

log = get_logger()


@dataclass
class EventHandler:
    """Event handler registration"""
    handler: Callable[[Event], None]
    priority: int
    filter_fn: Optional[Callable[[Event], bool]]


class EventBus:
    """
    Central event bus for the host signals

    Features:
    - Priority-based handler execution (high priority first)
    - Per-handler filtering
    - Middleware pipeline (logging, blocking)
    - Async/sync handler support (auto-detected)
    - Fault tolerance (one handler crash doesn't stop others)

    Example:
        bus = EventBus()
        bus.subscribe(EventType.TOUCH_DOWN, router.on_touch_down)
        await bus.publish(TouchDownEvent(540, 1200))
    """

    def __init__(self, history_limit: int = 100):
        # Handlers organized by event type
        self._handlers: Dict[EventType, List[EventHandler]] = {}

        # Middleware pipeline (applied in registration order)
        self._middleware: List[Callable[[Event], Optional[Event]]] = []

        # Recent events for debugging
        self._event_history: List[Event] = []
        self._history_limit = history_limit

    def subscribe(
        self,
        event_type: EventType,
        handler: Callable[[Event], None],
        priority: int = 0,
        filter_fn: Optional[Callable[[Event], bool]] = None
    ) -> None:
        """
        Subscribe to event type

        Args:
            event_type: Which events to listen for
            handler: Function to call (can be async or sync)
            priority: Execution priority (higher = called first, default: 0)
            filter_fn: Optional filter (return True = handle, False = skip)
        """
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append(EventHandler(handler, priority, filter_fn))

        # Sort by priority (descending - highest first); sort is stable
        handlers.sort(key=lambda h: h.priority, reverse=True)

        log.debug(
            LogCategory.EVENT,
            "Event handler subscribed",
            event_type=event_type.name,
            handler=getattr(handler, "__name__", repr(handler)),
            priority=priority
        )

    def unsubscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> bool:
        """Remove a handler. Returns False if it was not subscribed."""
        handlers = self._handlers.get(event_type, [])
        remaining = [h for h in handlers if h.handler != handler]
        if len(remaining) == len(handlers):
            return False

        if remaining:
            self._handlers[event_type] = remaining
        else:
            del self._handlers[event_type]
        return True

    def handler_count(self, event_type: EventType) -> int:
        return len(self._handlers.get(event_type, []))

    def add_middleware(self, middleware: Callable[[Event], Optional[Event]]) -> None:
        """
        Add middleware to event processing pipeline

        Middleware can modify events (return a new one), block them (return
        None) or just observe them. Runs in registration order.
        """
        self._middleware.append(middleware)
        log.debug(
            LogCategory.EVENT,
            "Middleware registered",
            middleware=middleware.__name__
        )

    async def publish(self, event: Event) -> None:
        """
        Publish event to all subscribers

        Flow:
        1. Apply middleware (can modify or block event)
        2. Save to event history
        3. Execute handlers by priority, honoring per-handler filters
        4. Catch and log handler exceptions (fault tolerance)
        """
        for middleware in self._middleware:
            processed_event = middleware(event)
            if processed_event is None:
                return
            event = processed_event

        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

        handlers = list(self._handlers.get(event.type, []))
        if not handlers:
            log.log(
                LogCategory.EVENT,
                "No handlers for event",
                LogLevel.DEBUG,
                event_type=event.type.name
            )
            return

        for handler_entry in handlers:
            if handler_entry.filter_fn and not handler_entry.filter_fn(event):
                continue

            try:
                if inspect.iscoroutinefunction(handler_entry.handler):
                    await handler_entry.handler(event)
                else:
                    handler_entry.handler(event)
            except Exception as e:
                log.error(
                    LogCategory.EVENT,
                    f"Event handler failed: {getattr(handler_entry.handler, '__name__', '?')} for {event.type.name}",
                    exception=e
                )

    def get_event_history(self, limit: int = 10) -> List[Event]:
        """Recent events, newest last"""
        return self._event_history[-limit:]

    def clear_history(self) -> None:
        self._event_history.clear()
