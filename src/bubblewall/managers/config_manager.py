"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and builds the typed BubbleWallConfig.
"""

import yaml
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar
from bubblewall.exceptions import ConfigError
from bubblewall.models.color import Color
from bubblewall.models.config import (
    AnimationConfig,
    BubbleWallConfig,
    LayoutConfig,
    RenderConfig,
    ThemePreset,
)
from bubblewall.models.enums import LogCategory, PaletteMode
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.CONFIG)

CONFIG_DIR = Path(__file__).parent.parent / "config"

T = TypeVar("T")


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes the include: directive to load modular
    YAML files (layout, animation, render, palette, themes). Falls back to
    factory_defaults.yaml when the main file cannot be read.

    Example:
        config = ConfigManager().load()

        config.layout.max_retries     # 50
        config.animation.fps          # 60
        config.palette[:2]            # ["#1565c0", "#42a5f5"]
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        defaults_path: Optional[Path] = None
    ):
        """
        Args:
            config_path: Main config.yaml (defaults to the packaged one)
            defaults_path: Factory defaults fallback
        """
        self.config_path = Path(config_path) if config_path else CONFIG_DIR / "config.yaml"
        self.factory_defaults_path = (
            Path(defaults_path) if defaults_path else CONFIG_DIR / "factory_defaults.yaml"
        )
        self.data: Dict[str, Any] = {}
        self.config: Optional[BubbleWallConfig] = None

    def load(self) -> BubbleWallConfig:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat it as a monolithic config
        4. Fall back to factory_defaults.yaml on read failure
        5. Build and validate BubbleWallConfig

        Returns:
            Validated BubbleWallConfig

        Raises:
            ConfigError: Neither file readable, or a value fails validation
        """
        try:
            main_config = self._read_yaml(self.config_path)

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], self.config_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except (OSError, yaml.YAMLError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            try:
                self.data = self._read_yaml(self.factory_defaults_path)
            except (OSError, yaml.YAMLError) as fallback_ex:
                raise ConfigError(
                    f"cannot read factory defaults: {fallback_ex}",
                    key=str(self.factory_defaults_path)
                ) from fallback_ex

        self.config = self.build(self.data)
        return self.config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data or {}

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: Filenames to load (e.g., ["layout.yaml", "palette.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict (later files override earlier keys)
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                file_data = self._read_yaml(filepath)
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            if file_data:
                merged.update(file_data)
                log.debug(f"Loaded {filename}", keys=str(list(file_data.keys())))

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())))
        return merged

    # ===== Typed config =====

    @classmethod
    def build(cls, data: Dict[str, Any]) -> BubbleWallConfig:
        """
        Build BubbleWallConfig from a merged config dict

        Missing sections and keys keep their dataclass defaults; unknown keys
        are rejected so typos surface at startup.
        """
        layout_data = dict(data.get("layout") or {})
        if "palette_mode" in layout_data:
            layout_data["palette_mode"] = cls._parse_palette_mode(layout_data["palette_mode"])

        config = BubbleWallConfig(
            layout=cls._section(LayoutConfig, layout_data, "layout"),
            animation=cls._section(AnimationConfig, data.get("animation") or {}, "animation"),
            render=cls._section(RenderConfig, data.get("render") or {}, "render"),
            palette=[str(entry) for entry in data.get("palette") or []],
            themes=cls._parse_themes(data.get("themes") or []),
        )

        if "default_accent" in data:
            config.default_accent = cls._parse_color(data["default_accent"], "default_accent")

        config.validate()

        log.info(
            "Configuration ready",
            palette_pairs=len(config.palette) // 2,
            themes=len(config.themes),
            fps=config.animation.fps,
        )
        return config

    @staticmethod
    def _section(section_cls: Type[T], values: Dict[str, Any], name: str) -> T:
        known = {f.name for f in fields(section_cls)}
        unknown = set(values) - known
        if unknown:
            raise ConfigError(f"unknown keys {sorted(unknown)}", key=name)
        try:
            return section_cls(**values)
        except TypeError as ex:
            raise ConfigError(str(ex), key=name) from ex

    @staticmethod
    def _parse_palette_mode(value: Any) -> PaletteMode:
        if isinstance(value, PaletteMode):
            return value
        try:
            return PaletteMode[str(value).upper()]
        except KeyError:
            raise ConfigError(
                f"unknown palette mode {value!r} (expected one of {[m.name for m in PaletteMode]})",
                key="layout.palette_mode"
            ) from None

    @classmethod
    def _parse_themes(cls, entries: List[Dict[str, Any]]) -> List[ThemePreset]:
        themes = []
        for i, entry in enumerate(entries):
            if "accent" not in entry:
                raise ConfigError("missing 'accent'", key=f"themes[{i}]")
            themes.append(ThemePreset(
                name=str(entry.get("name", f"theme_{i}")),
                accent=cls._parse_color(entry["accent"], f"themes[{i}].accent"),
            ))
        return themes

    @staticmethod
    def _parse_color(value: Any, key: str) -> Color:
        try:
            return Color.from_hex(str(value))
        except ValueError as ex:
            raise ConfigError(str(ex), key=key) from ex
