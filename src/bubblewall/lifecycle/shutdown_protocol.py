"""
Shutdown handler protocol for component-based teardown.

Each engine component that needs cleanup implements IShutdownHandler to take
part in WallpaperEngine.destroy().
"""

from typing import Protocol


class IShutdownHandler(Protocol):
    """
    Protocol for components that need an orderly shutdown.

    The ShutdownCoordinator calls shutdown() on each handler in priority
    order.

    Example:
        class SurfaceShutdownHandler:
            @property
            def shutdown_priority(self) -> int:
                return 50

            async def shutdown(self) -> None:
                self.surface.close()
    """

    @property
    def shutdown_priority(self) -> int:
        """
        Higher priority shuts down earlier.
        """
        ...

    async def shutdown(self) -> None:
        """
        Called during coordinated shutdown.
        """
        ...
