"""
Middleware for EventBus

Middleware = pipeline functions that process events before handlers.
"""

from bubblewall.models.events import Event, EventType
from bubblewall.models.enums import LogCategory
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.EVENT)

# High-rate events logged at DEBUG so a swipe doesn't flood the console
_CHATTY = {EventType.ZOOM_CHANGED, EventType.TOUCH_DOWN, EventType.TOUCH_UP}


def log_middleware(event: Event) -> Event:
    """
    Log all events

    Usage:
        event_bus.add_middleware(log_middleware)
    """
    source = event.source.name if event.source else "-"
    data = event.to_data()
    data_str = " ".join(f"{k}={v}" for k, v in data.items()) if data else ""

    message = f"Event: {event.type.name} from {source}"
    if data_str:
        message = f"{message} | {data_str}"

    if event.type in _CHATTY:
        log.debug(message)
    else:
        log.info(message)
    return event
