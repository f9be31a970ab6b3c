from bubblewall.lifecycle.shutdown_protocol import IShutdownHandler
from bubblewall.lifecycle.shutdown_coordinator import ShutdownCoordinator
from bubblewall.lifecycle.handlers import AnimationShutdownHandler, SurfaceShutdownHandler

__all__ = [
    "IShutdownHandler",
    "ShutdownCoordinator",
    "AnimationShutdownHandler",
    "SurfaceShutdownHandler",
]
