"""
Tests for the triangular speed curve.
"""

import pytest

from bubblewall.models.transition import MIN_SPEED_MODIFIER, progress_fraction, speed_modifier


class TestSpeedModifier:

    def test_starts_at_minimum(self):
        assert speed_modifier(100, 100) == MIN_SPEED_MODIFIER

    def test_peaks_at_midpoint(self):
        assert speed_modifier(100, 50) == pytest.approx(1.0)

    def test_symmetric_around_midpoint(self):
        assert speed_modifier(100, 75) == pytest.approx(speed_modifier(100, 25))

    def test_never_below_minimum(self):
        assert speed_modifier(100, 0) == MIN_SPEED_MODIFIER
        assert speed_modifier(100, 0, minimum=0.01) == 0.01

    def test_zero_range_moves_at_full_speed(self):
        assert speed_modifier(0, 0) == 1.0

    def test_uses_absolute_values(self):
        assert speed_modifier(-100, -20) == speed_modifier(100, 20)


class TestProgressFraction:

    def test_progress(self):
        assert progress_fraction(100, 100) == 0.0
        assert progress_fraction(100, 25) == pytest.approx(0.75)
        assert progress_fraction(-100, -25) == pytest.approx(0.75)

    def test_zero_range_is_done(self):
        assert progress_fraction(0, 0) == 1.0

    def test_clamped(self):
        assert progress_fraction(10, 30) == 0.0
