"""
Tests for the Bubble record and AnimationState helpers.
"""

import pytest

from bubblewall.models.animation_state import AnimationState
from bubblewall.models.bubble import Bubble
from bubblewall.models.color import Color

BLUE = Color.from_hex("#1565c0")


def make_bubble(x=100, y=100, radius=60):
    return Bubble(x=x, y=y, base_radius=radius, outline_color=BLUE, fill_color=BLUE)


class TestBubble:

    def test_current_radius_starts_at_base(self):
        assert make_bubble(radius=60).current_radius == 60.0

    def test_minimized_radius_is_rounded_third(self):
        assert make_bubble(radius=60).minimized_radius == 20
        assert make_bubble(radius=50).minimized_radius == 17

    def test_contains_point_uses_base_radius(self):
        bubble = make_bubble()
        bubble.current_radius = 5
        assert bubble.contains_point(140, 100)

    def test_contains_point_is_strict(self):
        bubble = make_bubble()
        assert not bubble.contains_point(160, 100)
        assert bubble.contains_point(159, 100)

    def test_overlaps_includes_padding(self):
        bubble = make_bubble(x=100, y=100, radius=60)
        # Gap of exactly the padding is allowed
        assert not bubble.overlaps(260, 100, 50, 50)
        assert bubble.overlaps(259, 100, 50, 50)

    def test_identity_equality(self):
        assert make_bubble() != make_bubble()


class TestAnimationState:

    def test_resting_brightness_follows_night_mode(self):
        assert AnimationState(night_mode=False).resting_brightness == 1.0
        assert AnimationState(night_mode=True).resting_brightness == 0.0

    @pytest.mark.parametrize("value,expected", [(-0.5, 0.0), (0.4, 0.4), (1.7, 1.0)])
    def test_gradient_factor_is_clamped(self, value, expected):
        state = AnimationState()
        state.set_gradient_factor(value)
        assert state.gradient_factor == expected

    def test_release_pressed_clears_pulse(self):
        state = AnimationState(pressed_bubble=make_bubble(), pulse_origin_radius=60.0, pulse_offset=3.0)
        state.release_pressed()
        assert state.pressed_bubble is None
        assert state.pulse_origin_radius is None
        assert state.pulse_offset == 0.0

    def test_has_surface(self):
        assert not AnimationState().has_surface
        assert AnimationState(surface_size=(10, 20)).has_surface
