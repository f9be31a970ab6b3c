"""
Tests for ShutdownCoordinator ordering, timeouts and fault tolerance.
"""

import asyncio
import pytest

from bubblewall.lifecycle.handlers import AnimationShutdownHandler, SurfaceShutdownHandler
from bubblewall.lifecycle.shutdown_coordinator import ShutdownCoordinator


class RecordingHandler:
    def __init__(self, name, priority, calls, delay=0.0, error=None):
        self.name = name
        self._priority = priority
        self.calls = calls
        self.delay = delay
        self.error = error

    @property
    def shutdown_priority(self) -> int:
        return self._priority

    async def shutdown(self) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        self.calls.append(self.name)


@pytest.mark.asyncio
async def test_handlers_run_by_descending_priority():
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("surface", 50, calls))
    coordinator.register(RecordingHandler("animation", 100, calls))
    coordinator.register(RecordingHandler("late", 10, calls))

    await coordinator.shutdown_all("test")

    assert calls == ["animation", "surface", "late"]
    assert coordinator.completed


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_sequence():
    calls = []
    coordinator = ShutdownCoordinator()
    coordinator.register(RecordingHandler("broken", 100, calls, error=RuntimeError("boom")))
    coordinator.register(RecordingHandler("surface", 50, calls))

    await coordinator.shutdown_all("test")

    assert calls == ["surface"]


@pytest.mark.asyncio
async def test_slow_handler_times_out():
    calls = []
    coordinator = ShutdownCoordinator(timeout_per_handler=0.01)
    coordinator.register(RecordingHandler("slow", 100, calls, delay=1.0))
    coordinator.register(RecordingHandler("fast", 50, calls))

    await coordinator.shutdown_all("test")

    assert calls == ["fast"]


def test_register_rejects_incomplete_handler():
    coordinator = ShutdownCoordinator()
    with pytest.raises(ValueError):
        coordinator.register(object())


def test_get_handler_by_type(engine, surface):
    coordinator = ShutdownCoordinator()
    animation_handler = AnimationShutdownHandler(engine)
    coordinator.register(animation_handler)
    coordinator.register(SurfaceShutdownHandler(surface))

    assert coordinator.get_handler(AnimationShutdownHandler) is animation_handler
    assert [type(h) for h in coordinator.handlers] == [AnimationShutdownHandler, SurfaceShutdownHandler]


@pytest.mark.asyncio
async def test_engine_handlers_stop_worker_and_close_surface(engine, surface):
    engine.start()
    coordinator = ShutdownCoordinator()
    coordinator.register(AnimationShutdownHandler(engine))
    coordinator.register(SurfaceShutdownHandler(surface))

    await coordinator.shutdown_all("test")

    assert not engine.is_running()
    assert surface.available is False


@pytest.mark.asyncio
async def test_surface_without_close_is_left_alone():
    class Bare:
        pass

    await SurfaceShutdownHandler(Bare()).shutdown()
