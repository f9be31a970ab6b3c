"""
Shutdown coordinator that tears down engine components in priority order.
"""

import asyncio
from typing import List, Optional
from bubblewall.lifecycle.shutdown_protocol import IShutdownHandler
from bubblewall.models.enums import LogCategory
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.SHUTDOWN)


class ShutdownCoordinator:
    """
    Coordinates shutdown of multiple components.

    Handlers run in descending priority order. Each gets its own timeout and
    the whole sequence is bounded by total_timeout; a failing handler is
    logged and the sequence continues.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(AnimationShutdownHandler(engine))
        coordinator.register(SurfaceShutdownHandler(surface))
        await coordinator.shutdown_all("engine destroyed")
    """

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        """
        Args:
            timeout_per_handler: Timeout for each individual handler (seconds)
            total_timeout: Total timeout for entire shutdown sequence (seconds)
        """
        self._handlers: List[IShutdownHandler] = []
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self.completed = False

    def register(self, handler: IShutdownHandler) -> None:
        """
        Register a shutdown handler.

        Raises:
            ValueError: If handler lacks shutdown_priority or shutdown()
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    @property
    def handlers(self) -> List[IShutdownHandler]:
        """Handlers in the order they will run"""
        return sorted(self._handlers, key=lambda h: h.shutdown_priority, reverse=True)

    async def shutdown_all(self, reason: str = "UNKNOWN") -> None:
        """Run every handler, highest priority first"""
        log.info("Initiating shutdown sequence...", reason=reason)

        loop = asyncio.get_running_loop()
        start_time = loop.time()

        for handler in self.handlers:
            handler_name = handler.__class__.__name__

            elapsed = loop.time() - start_time
            if elapsed > self._total_timeout:
                log.error(f"Total shutdown timeout exceeded ({elapsed:.1f}s > {self._total_timeout}s)")
                break

            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug(f"{handler_name} shutdown complete")

            except asyncio.TimeoutError:
                log.error(f"{handler_name} shutdown timeout ({self._timeout_per_handler}s)")

            except Exception as e:
                log.error(f"Error shutting down {handler_name}: {e}", exc_info=True)

        self.completed = True
        log.info("Shutdown sequence complete")

    def get_handler(self, handler_type: type) -> Optional[IShutdownHandler]:
        """Registered handler of the given type, or None"""
        for handler in self._handlers:
            if isinstance(handler, handler_type):
                return handler
        return None
