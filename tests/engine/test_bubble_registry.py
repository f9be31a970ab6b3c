"""
Tests for BubbleRegistry ordering, hit-testing and radius updates.
"""

import pytest

from bubblewall.engine.bubble_registry import BubbleRegistry


class TestMembership:

    def test_keeps_generation_order(self, bubbles):
        registry = BubbleRegistry(bubbles)
        assert list(registry) == bubbles
        assert registry.first is bubbles[0]
        assert registry[2] is bubbles[2]

    def test_empty_registry(self):
        registry = BubbleRegistry()
        assert registry.is_empty()
        assert registry.first is None
        assert len(registry) == 0

    def test_replace_all_swaps_wholesale(self, registry, bubbles):
        registry.replace_all(bubbles[:1])
        assert len(registry) == 1
        assert bubbles[0] in registry
        assert bubbles[1] not in registry

    def test_snapshot_does_not_change_membership(self, registry):
        snapshot = registry.bubbles
        snapshot.clear()
        assert len(registry) == 3

    def test_clear(self, registry):
        registry.clear()
        assert registry.is_empty()


class TestHitTest:

    def test_point_inside_bubble(self, registry, bubbles):
        assert registry.bubble_at(110, 95) is bubbles[0]

    def test_point_between_bubbles(self, registry):
        assert registry.bubble_at(200, 150) is None

    def test_hit_uses_base_radius_not_current(self, registry, bubbles):
        bubbles[0].current_radius = 10
        assert registry.bubble_at(150, 100) is bubbles[0]

    def test_first_match_wins(self, bubbles):
        overlapping = BubbleRegistry([bubbles[0], bubbles[0]])
        assert overlapping.bubble_at(100, 100) is bubbles[0]


class TestRadiusUpdates:

    def test_apply_factor(self, registry):
        registry.apply_factor(0.5)
        assert registry.radii() == [30.0, 22.5, 15.0]

    def test_apply_function(self, registry):
        registry.apply(lambda b: float(b.minimized_radius))
        assert registry.radii() == [20.0, 15.0, 10.0]
