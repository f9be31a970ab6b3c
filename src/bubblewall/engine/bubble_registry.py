"""
Bubble Registry - ordered collection of the bubbles currently on screen.

Insertion order is generation order. The first bubble is the convergence
reference for smooth transitions and the first match wins on hit-tests, so the
order is kept stable. Membership only changes wholesale (replace_all on a
surface-size change); animations mutate radii in place.
"""

from typing import Callable, Iterator, List, Optional, Sequence
from bubblewall.models.bubble import Bubble
from bubblewall.models.enums import LogCategory
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.LAYOUT)


class BubbleRegistry:
    """
    Ordered bubble storage owned by the animation worker

    Example:
        registry = BubbleRegistry()
        registry.replace_all(generator.generate(1080, 2340))
        registry.apply_factor(1 / 3)
        hit = registry.bubble_at(540, 1200)
    """

    def __init__(self, bubbles: Optional[Sequence[Bubble]] = None):
        self._bubbles: List[Bubble] = list(bubbles or [])

    # === Membership ===

    def replace_all(self, bubbles: Sequence[Bubble]) -> None:
        """Drop the old set and adopt a freshly generated one"""
        previous = len(self._bubbles)
        self._bubbles = list(bubbles)
        log.debug("Registry replaced", previous=previous, current=len(self._bubbles))

    def clear(self) -> None:
        self._bubbles = []

    @property
    def bubbles(self) -> List[Bubble]:
        """Snapshot list (mutating it does not change membership)"""
        return list(self._bubbles)

    @property
    def first(self) -> Optional[Bubble]:
        return self._bubbles[0] if self._bubbles else None

    def is_empty(self) -> bool:
        return not self._bubbles

    def __len__(self) -> int:
        return len(self._bubbles)

    def __iter__(self) -> Iterator[Bubble]:
        return iter(self._bubbles)

    def __getitem__(self, index: int) -> Bubble:
        return self._bubbles[index]

    def __contains__(self, bubble: object) -> bool:
        return any(b is bubble for b in self._bubbles)

    # === Queries ===

    def bubble_at(self, x: float, y: float) -> Optional[Bubble]:
        """First bubble whose resting circle contains the point"""
        for bubble in self._bubbles:
            if bubble.contains_point(x, y):
                return bubble
        return None

    def radii(self) -> List[float]:
        return [b.current_radius for b in self._bubbles]

    # === Radius updates ===

    def apply_factor(self, factor: float) -> None:
        """current_radius = base_radius * factor for every bubble"""
        for bubble in self._bubbles:
            bubble.current_radius = bubble.radius_for_factor(factor)

    def apply(self, radius_fn: Callable[[Bubble], float]) -> None:
        for bubble in self._bubbles:
            bubble.current_radius = radius_fn(bubble)
