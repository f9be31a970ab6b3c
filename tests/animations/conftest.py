import pytest


def _run_to_end(animation, limit=10_000):
    if not animation.begin():
        return 0
    frames = 1
    while animation.step():
        frames += 1
        assert frames < limit, "animation did not terminate"
    return frames


@pytest.fixture
def run_to_end():
    """Drive an animation like the worker does, without rendering; returns frames"""
    return _run_to_end
