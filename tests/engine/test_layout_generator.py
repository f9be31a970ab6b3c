"""
Tests for bounded rejection-sampling bubble packing.
"""

import itertools
import math
import random

import pytest

from bubblewall.engine.layout_generator import (
    DEFAULT_FILL,
    DEFAULT_OUTLINE,
    LayoutGenerator,
    LayoutStats,
    generate_layout,
    surface_fits_bubble,
)
from bubblewall.models.config import LayoutConfig


def pack(width=1000, height=1000, padding=50, min_radius=20, max_radius=250, retries=50,
         palette=None, seed=1, stats=None):
    return generate_layout(
        width, height, padding, min_radius, max_radius, retries,
        palette=palette, rng=random.Random(seed), stats=stats,
    )


class TestPackingInvariants:

    @pytest.mark.parametrize("seed", [1, 2, 3, 42, 1234])
    def test_no_two_bubbles_overlap(self, seed):
        bubbles = pack(seed=seed)
        for a, b in itertools.combinations(bubbles, 2):
            distance = math.hypot(a.x - b.x, a.y - b.y)
            assert distance >= a.base_radius + b.base_radius + 50

    @pytest.mark.parametrize("seed", [5, 6, 7])
    def test_bubbles_stay_inside_padded_surface(self, seed):
        bubbles = pack(width=800, height=1400, seed=seed)
        for b in bubbles:
            assert b.x - b.base_radius >= 50
            assert b.y - b.base_radius >= 50
            assert b.x + b.base_radius <= 800 - 50
            assert b.y + b.base_radius <= 1400 - 50

    def test_radii_within_bounds(self):
        bubbles = pack(seed=11)
        assert bubbles
        assert all(20 <= b.base_radius <= 250 for b in bubbles)

    def test_bubbles_start_at_full_size(self):
        assert all(b.current_radius == b.base_radius for b in pack(seed=4))

    def test_attempts_bounded_by_retry_cap(self):
        stats = LayoutStats()
        bubbles = pack(seed=8, stats=stats)
        assert stats.placed == len(bubbles)
        assert stats.attempts <= 50 * (len(bubbles) + 1)
        assert stats.attempts == len(bubbles) + stats.rejected_overlap + stats.rejected_no_room


class TestTermination:

    def test_surface_smaller_than_one_bubble_is_empty(self):
        stats = LayoutStats()
        assert pack(width=100, height=100, stats=stats) == []
        assert stats.attempts == 0

    def test_one_narrow_dimension_is_enough_to_be_empty(self):
        assert pack(width=2000, height=139) == []

    def test_exact_fit_places_single_bubble(self):
        stats = LayoutStats()
        bubbles = pack(width=140, height=140, min_radius=20, max_radius=20, stats=stats)

        assert len(bubbles) == 1
        assert (bubbles[0].x, bubbles[0].y) == (70, 70)
        # One success, then the full retry budget of overlaps
        assert stats.attempts == 51

    def test_oversized_radius_counts_as_failure(self):
        stats = LayoutStats()
        pack(width=200, height=200, min_radius=20, max_radius=250, seed=3, stats=stats)
        assert stats.rejected_no_room > 0

    def test_surface_fits_bubble(self):
        assert surface_fits_bubble(140, 140, 20, 50)
        assert not surface_fits_bubble(139, 140, 20, 50)


GOLDEN_SEED = 2024
GOLDEN_LAYOUT = [
    (376, 782, 140),
    (682, 388, 87),
    (715, 806, 126),
    (163, 352, 72),
    (225, 519, 21),
    (335, 157, 50),
    (686, 187, 27),
    (430, 518, 61),
    (867, 203, 29),
    (538, 202, 47),
]


class TestDeterminism:

    def test_golden_layout(self):
        # 1000x1000, padding 50, radii 20..250, 50 retries
        stats = LayoutStats()
        bubbles = pack(seed=GOLDEN_SEED, stats=stats)

        assert len(bubbles) == 10
        assert [(b.x, b.y, b.base_radius) for b in bubbles] == GOLDEN_LAYOUT
        assert stats.attempts == 154
        assert stats.placed == 10

    def test_same_seed_same_layout(self):
        # 1000x1000, padding 50, radii 20..250, 50 retries
        first = pack(seed=2024)
        second = pack(seed=2024)

        assert len(first) == len(second) > 0
        assert [(b.x, b.y, b.base_radius) for b in first] == [(b.x, b.y, b.base_radius) for b in second]

    def test_different_seeds_differ(self):
        first = [(b.x, b.y, b.base_radius) for b in pack(seed=1)]
        second = [(b.x, b.y, b.base_radius) for b in pack(seed=2)]
        assert first != second


class TestColors:

    def test_round_robin_pairs_in_generation_order(self, palette):
        bubbles = pack(palette=palette, seed=9)
        for i, bubble in enumerate(bubbles):
            outline, fill = palette.pair_at(i)
            assert bubble.outline_color == outline
            assert bubble.fill_color == fill

    def test_each_pass_restarts_the_palette(self, palette):
        first = pack(palette=palette, seed=9)
        second = pack(palette=palette, seed=10)
        assert first[0].outline_color == second[0].outline_color == palette.pair_at(0)[0]

    def test_default_colors_without_palette(self):
        bubble = pack(seed=9)[0]
        assert bubble.outline_color == DEFAULT_OUTLINE
        assert bubble.fill_color == DEFAULT_FILL


class TestLayoutGenerator:

    def test_uses_config_values(self, palette):
        config = LayoutConfig(padding=10, min_radius=5, max_radius=15, max_retries=20, seed=5)
        generator = LayoutGenerator(config, palette)

        bubbles = generator.generate(300, 300)

        assert bubbles
        assert all(5 <= b.base_radius <= 15 for b in bubbles)
        assert generator.last_stats.placed == len(bubbles)

    def test_config_seed_is_reproducible(self, palette):
        config = LayoutConfig(seed=77)
        first = LayoutGenerator(config, palette).generate(1080, 1920)
        second = LayoutGenerator(config, palette).generate(1080, 1920)
        assert [(b.x, b.y) for b in first] == [(b.x, b.y) for b in second]

    def test_explicit_seed_overrides_config(self, palette):
        config = LayoutConfig(seed=77)
        first = LayoutGenerator(config, palette, seed=1).generate(1080, 1920)
        second = LayoutGenerator(LayoutConfig(seed=1), palette).generate(1080, 1920)
        assert [(b.x, b.y) for b in first] == [(b.x, b.y) for b in second]
