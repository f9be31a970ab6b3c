"""
Base Animation Class

All animation routines inherit from BaseAnimation. The AnimationEngine
worker drives them frame by frame:

    if animation.begin():
        while True:
            if cancelled: animation.snap_to_final(); render(); break
            more = animation.step()
            render()
            if not more: break
"""

from typing import Optional
from bubblewall.engine.bubble_registry import BubbleRegistry
from bubblewall.models.animation_state import AnimationState
from bubblewall.models.config import AnimationConfig
from bubblewall.models.enums import AnimationID


class BaseAnimation:
    """
    Base class for all bubble animations

    IMPORTANT:
    - Instances are single-use: one request, one run.
    - Only the AnimationEngine worker calls begin/step/snap_to_final, so an
      animation owns the registry and state for the whole run.

    Subclasses implement step() and snap_to_final(); begin() is optional.
    """
    ANIMATION_ID: AnimationID

    # Requests of a coalescing animation are dropped when a newer request of
    # the same animation is already queued behind them.
    COALESCE: bool = False

    def __init__(
        self,
        registry: BubbleRegistry,
        state: AnimationState,
        config: Optional[AnimationConfig] = None
    ):
        self.registry = registry
        self.state = state
        self.config = config or AnimationConfig()
        self.frames = 0

    # ------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------

    def begin(self) -> bool:
        """
        Prepare the run. Returning False means there is nothing to do and
        no frame is rendered.
        """
        return True

    def step(self) -> bool:
        """Apply one frame of changes. Returns True while frames remain."""
        raise NotImplementedError

    def snap_to_final(self) -> None:
        """Jump straight to the end state (used when the run is cancelled)."""
        raise NotImplementedError

    @property
    def name(self) -> str:
        return self.ANIMATION_ID.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
