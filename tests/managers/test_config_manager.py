"""
Tests for ConfigManager: include loading, factory fallback and validation.
"""

import pytest

from bubblewall.exceptions import ConfigError
from bubblewall.managers.config_manager import ConfigManager
from bubblewall.models.color import Color
from bubblewall.models.enums import PaletteMode


class TestPackagedConfig:

    def test_loads_include_files(self):
        config = ConfigManager().load()

        assert config.layout.padding == 50
        assert config.layout.min_radius == 20
        assert config.layout.max_radius == 250
        assert config.layout.max_retries == 50
        assert config.layout.palette_mode == PaletteMode.ROUND_ROBIN
        assert config.render.outline_width == 30
        assert config.animation.convergence_epsilon == pytest.approx(1e-6)
        assert len(config.palette) == 16
        assert [t.name for t in config.themes] == ["ocean", "forest", "sunset", "berry"]
        assert config.default_accent == Color.from_hex("#ff33b5e5")

    def test_missing_main_file_falls_back_to_factory_defaults(self, tmp_path):
        config = ConfigManager(config_path=tmp_path / "missing.yaml").load()

        assert len(config.palette) == 8
        assert len(config.themes) == 1

    def test_no_readable_file_raises(self, tmp_path):
        manager = ConfigManager(
            config_path=tmp_path / "missing.yaml",
            defaults_path=tmp_path / "also_missing.yaml",
        )
        with pytest.raises(ConfigError):
            manager.load()


class TestIncludes:

    def test_later_includes_override_earlier(self, tmp_path):
        (tmp_path / "config.yaml").write_text("include:\n  - a.yaml\n  - b.yaml\n")
        (tmp_path / "a.yaml").write_text("layout:\n  padding: 10\npalette: ['#000000', '#ffffff']\n")
        (tmp_path / "b.yaml").write_text("layout:\n  padding: 20\n")

        config = ConfigManager(config_path=tmp_path / "config.yaml").load()

        assert config.layout.padding == 20
        assert config.palette == ["#000000", "#ffffff"]

    def test_monolithic_file(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "animation:\n  fps: 30\npalette: ['#000000', '#ffffff']\n"
        )
        config = ConfigManager(config_path=tmp_path / "config.yaml").load()
        assert config.animation.fps == 30
        assert config.animation.frame_delay == pytest.approx(1 / 30)


class TestBuild:

    def test_defaults_for_missing_sections(self):
        config = ConfigManager.build({})
        assert config.layout.max_retries == 50
        assert config.animation.pulse_frames == 5

    def test_palette_mode_by_name(self):
        config = ConfigManager.build({"layout": {"palette_mode": "random"}})
        assert config.layout.palette_mode == PaletteMode.RANDOM

    def test_unknown_palette_mode(self):
        with pytest.raises(ConfigError):
            ConfigManager.build({"layout": {"palette_mode": "spiral"}})

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigError) as exc_info:
            ConfigManager.build({"layout": {"paddding": 5}})
        assert exc_info.value.key == "layout"

    def test_min_radius_above_max_rejected(self):
        with pytest.raises(ConfigError):
            ConfigManager.build({"layout": {"min_radius": 300, "max_radius": 250}})

    def test_non_positive_retries_rejected(self):
        with pytest.raises(ConfigError):
            ConfigManager.build({"layout": {"max_retries": 0}})

    def test_theme_needs_accent(self):
        with pytest.raises(ConfigError):
            ConfigManager.build({"themes": [{"name": "plain"}]})

    def test_bad_theme_color(self):
        with pytest.raises(ConfigError):
            ConfigManager.build({"themes": [{"name": "x", "accent": "nope"}]})
