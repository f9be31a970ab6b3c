"""
Layout Generator - bounded rejection sampling of non-overlapping bubbles.

Each pass keeps drawing a random radius and a random center that keeps the
bubble (plus padding) inside the surface. A candidate closer than
`r1 + r2 + padding` to any placed bubble is rejected. Every success resets
the retry counter; `max_retries` consecutive rejections end the pass.

The result is maximal for the sampler, not the densest possible packing, and
the number of attempts is bounded by `max_retries * (bubbles + 1)`.
"""

import random
from dataclasses import dataclass
from typing import List, Optional
from bubblewall.managers.palette_manager import PaletteManager
from bubblewall.models.bubble import Bubble
from bubblewall.models.color import Color
from bubblewall.models.config import LayoutConfig
from bubblewall.models.enums import LogCategory
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.LAYOUT)

DEFAULT_OUTLINE = Color.from_hex("#616161")
DEFAULT_FILL = Color.from_hex("#bdbdbd")


@dataclass
class LayoutStats:
    """Counters from the last generation pass"""
    attempts: int = 0
    rejected_overlap: int = 0
    rejected_no_room: int = 0
    placed: int = 0


def surface_fits_bubble(width: int, height: int, min_radius: int, padding: int) -> bool:
    """True when at least the smallest bubble (plus padding) fits both ways"""
    needed = 2 * min_radius + 2 * padding
    return width >= needed and height >= needed


def generate_layout(
    surface_width: int,
    surface_height: int,
    padding: int,
    min_radius: int,
    max_radius: int,
    max_retries: int,
    palette: Optional[PaletteManager] = None,
    rng: Optional[random.Random] = None,
    stats: Optional[LayoutStats] = None,
) -> List[Bubble]:
    """
    Pack randomly sized bubbles into a surface

    Args:
        surface_width, surface_height: Surface size in pixels
        padding: Minimum gap between bubbles and to the surface edge
        min_radius, max_radius: Inclusive radius range
        max_retries: Consecutive rejections that end the pass
        palette: Color pair source (round-robin cursor rewound per pass)
        rng: Random source; pass a seeded Random for reproducible layouts
        stats: Optional LayoutStats filled with the pass counters

    Returns:
        Bubbles in placement order (possibly empty)
    """
    rng = rng or random.Random()
    stats = stats if stats is not None else LayoutStats()
    bubbles: List[Bubble] = []

    if not surface_fits_bubble(surface_width, surface_height, min_radius, padding):
        log.debug(
            "Surface too small for any bubble",
            size=f"{surface_width}x{surface_height}",
            min_radius=min_radius,
            padding=padding,
        )
        return bubbles

    if palette is not None:
        palette.reset()

    failures = 0
    while failures < max_retries:
        stats.attempts += 1

        radius = rng.randint(min_radius, max_radius)
        x_low, x_high = radius + padding, surface_width - radius - padding
        y_low, y_high = radius + padding, surface_height - radius - padding
        if x_low > x_high or y_low > y_high:
            # Radius too large for this surface, counts as a failed attempt
            stats.rejected_no_room += 1
            failures += 1
            continue

        x = rng.randint(x_low, x_high)
        y = rng.randint(y_low, y_high)

        if any(existing.overlaps(x, y, radius, padding) for existing in bubbles):
            stats.rejected_overlap += 1
            failures += 1
            continue

        if palette is not None:
            outline, fill = palette.next_pair()
        else:
            outline, fill = DEFAULT_OUTLINE, DEFAULT_FILL

        bubbles.append(Bubble(x=x, y=y, base_radius=radius, outline_color=outline, fill_color=fill))
        failures = 0

    stats.placed = len(bubbles)
    return bubbles


class LayoutGenerator:
    """
    Layout generator bound to a LayoutConfig and palette

    Example:
        generator = LayoutGenerator(config.layout, palette, seed=7)
        bubbles = generator.generate(1080, 2340)
    """

    def __init__(
        self,
        config: LayoutConfig,
        palette: Optional[PaletteManager] = None,
        seed: Optional[int] = None
    ):
        self.config = config
        self.palette = palette
        seed = seed if seed is not None else config.seed
        self.rng = random.Random(seed)
        self.last_stats = LayoutStats()

    def generate(self, width: int, height: int) -> List[Bubble]:
        """Run one packing pass for a surface of the given size"""
        self.last_stats = LayoutStats()
        bubbles = generate_layout(
            width,
            height,
            padding=self.config.padding,
            min_radius=self.config.min_radius,
            max_radius=self.config.max_radius,
            max_retries=self.config.max_retries,
            palette=self.palette,
            rng=self.rng,
            stats=self.last_stats,
        )

        log.info(
            "Layout generated",
            size=f"{width}x{height}",
            bubbles=len(bubbles),
            attempts=self.last_stats.attempts,
        )
        return bubbles
