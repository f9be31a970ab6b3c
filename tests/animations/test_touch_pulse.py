"""
Tests for the touch pulse: expand on touch down, contract on touch up.
"""

import pytest

from bubblewall.animations.touch_pulse import TouchPulseAnimation, TouchReleaseAnimation


def press(registry, state, config, x, y):
    return TouchPulseAnimation(registry, state, config, x=x, y=y)


class TestTouchDown:

    def test_grows_hit_bubble_by_pulse_step_per_frame(self, registry, state, animation_config, bubbles):
        animation = press(registry, state, animation_config, 110, 90)
        assert animation.begin()

        radii = []
        while True:
            more = animation.step()
            radii.append(bubbles[0].current_radius)
            if not more:
                break

        assert radii == [61.0, 62.0, 63.0, 64.0, 65.0]
        assert state.pressed_bubble is bubbles[0]
        assert state.pulse_origin_radius == 60.0
        assert state.pulse_offset == 5.0

    def test_other_bubbles_untouched(self, registry, state, animation_config, bubbles, run_to_end):
        run_to_end(press(registry, state, animation_config, 100, 100))
        assert bubbles[1].current_radius == 45.0
        assert bubbles[2].current_radius == 30.0

    def test_miss_does_nothing(self, registry, state, animation_config, bubbles, run_to_end):
        assert run_to_end(press(registry, state, animation_config, 5, 395)) == 0
        assert state.pressed_bubble is None
        assert [b.current_radius for b in bubbles] == [60.0, 45.0, 30.0]

    def test_hit_uses_base_radius(self, registry, state, animation_config, bubbles):
        # Minimized to 20, a touch at distance 50 still hits
        bubbles[0].current_radius = 20.0
        animation = press(registry, state, animation_config, 150, 100)
        assert animation.begin()
        assert state.pulse_origin_radius == 20.0

    def test_second_press_ignored_while_held(self, registry, state, animation_config, bubbles, run_to_end):
        run_to_end(press(registry, state, animation_config, 100, 100))
        assert run_to_end(press(registry, state, animation_config, 300, 100)) == 0
        assert state.pressed_bubble is bubbles[0]
        assert bubbles[1].current_radius == 45.0

    def test_cancel_restores_origin(self, registry, state, animation_config, bubbles):
        animation = press(registry, state, animation_config, 100, 100)
        animation.begin()
        animation.step()
        animation.step()

        animation.snap_to_final()

        assert bubbles[0].current_radius == 60.0
        assert state.pressed_bubble is None


class TestTouchUp:

    def test_full_press_and_release_returns_to_origin(self, registry, state, animation_config, bubbles, run_to_end):
        run_to_end(press(registry, state, animation_config, 100, 100))

        release = TouchReleaseAnimation(registry, state, animation_config)
        assert release.begin()
        radii = []
        while True:
            more = release.step()
            radii.append(bubbles[0].current_radius)
            if not more:
                break

        assert radii == [64.0, 63.0, 62.0, 61.0, 60.0]
        assert state.pressed_bubble is None
        assert state.pulse_origin_radius is None

    def test_release_without_press_is_skipped(self, registry, state, animation_config, run_to_end):
        assert run_to_end(TouchReleaseAnimation(registry, state, animation_config)) == 0

    def test_release_after_partial_press_ends_on_origin(self, registry, state, animation_config, bubbles, run_to_end):
        animation = press(registry, state, animation_config, 100, 100)
        animation.begin()
        animation.step()

        run_to_end(TouchReleaseAnimation(registry, state, animation_config))

        assert bubbles[0].current_radius == 60.0
        assert state.pressed_bubble is None

    def test_pulse_from_minimized_radius(self, registry, state, animation_config, bubbles, run_to_end):
        bubbles[0].current_radius = 20.0
        run_to_end(press(registry, state, animation_config, 100, 100))
        assert bubbles[0].current_radius == 25.0

        run_to_end(TouchReleaseAnimation(registry, state, animation_config))
        assert bubbles[0].current_radius == 20.0

    @pytest.mark.parametrize("frames", [1, 3])
    def test_custom_pulse_length(self, registry, state, bubbles, frames, run_to_end):
        from bubblewall.models.config import AnimationConfig
        config = AnimationConfig(fps=0, pulse_frames=frames, pulse_step=2.0)

        assert run_to_end(press(registry, state, config, 100, 100)) == frames
        assert bubbles[0].current_radius == 60.0 + 2.0 * frames

        assert run_to_end(TouchReleaseAnimation(registry, state, config)) == frames
        assert bubbles[0].current_radius == 60.0
