"""
Theme Service - Night mode and accent color resolution

Stands in for the host's theme/system-color lookup. The host (or the demo
CLI) pushes system values in; engines resolve them through an IThemeResolver
view so the preview engine can show a theme before it is applied.
"""

from typing import List, Optional, Protocol
from bubblewall.models.color import Color
from bubblewall.models.config import ThemePreset
from bubblewall.models.enums import LogCategory
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.THEME)


class IThemeResolver(Protocol):
    """What an engine instance needs to know about the current theme"""

    def is_night_mode(self) -> bool:
        ...

    def resolve_accent_color(self) -> Color:
        ...


class ThemeService:
    """
    Shared theme state for all engine instances

    Accent resolution order:
    1. Preview selection (preview resolvers only)
    2. Applied theme preset
    3. System accent color

    Theme flow:
    - select_preview_theme(i): preview shows preset i at once and the choice
      becomes pending
    - apply_pending(): the live engine adopts the pending preset once it is
      visible again

    Example:
        themes = ThemeService(config.themes, config.default_accent)
        live = themes.resolver()
        preview = themes.resolver(preview=True)
        themes.select_preview_theme(2)
        preview.resolve_accent_color()   # preset 2
        live.resolve_accent_color()      # still the system accent
        themes.apply_pending()
        live.resolve_accent_color()      # preset 2
    """

    def __init__(
        self,
        presets: Optional[List[ThemePreset]] = None,
        system_accent: Optional[Color] = None,
        night_mode: bool = False
    ):
        self.presets: List[ThemePreset] = list(presets or [])
        self.system_accent = system_accent or Color.from_hex("#ff33b5e5")
        self.night_mode = night_mode

        self.theme_index: Optional[int] = None
        self.preview_index: Optional[int] = None
        self.pending = False

    # === System values ===

    def set_night_mode(self, enabled: bool) -> None:
        if enabled != self.night_mode:
            log.info("System night mode changed", night_mode=enabled)
        self.night_mode = enabled

    def set_system_accent(self, color: Color) -> None:
        if color != self.system_accent:
            log.info("System accent changed", accent=color)
        self.system_accent = color

    # === Presets ===

    def preset(self, index: int) -> ThemePreset:
        if not 0 <= index < len(self.presets):
            raise IndexError(f"theme preset {index} out of range (0..{len(self.presets) - 1})")
        return self.presets[index]

    @property
    def selected_preview_theme(self) -> int:
        """Preset shown as checked on the preview screen"""
        if self.preview_index is not None:
            return self.preview_index
        return self.theme_index or 0

    def select_preview_theme(self, index: int) -> ThemePreset:
        preset = self.preset(index)
        self.preview_index = index
        self.pending = True
        log.info("Preview theme selected", theme=preset.name, index=index)
        return preset

    def apply_pending(self) -> bool:
        """Adopt the preview selection. Returns True when the theme changed."""
        if not self.pending or self.preview_index is None:
            return False

        self.pending = False
        changed = self.theme_index != self.preview_index
        self.theme_index = self.preview_index
        log.info("Theme applied", theme=self.presets[self.theme_index].name, changed=changed)
        return changed

    def clear_theme(self) -> None:
        """Follow the system accent again"""
        self.theme_index = None
        self.preview_index = None
        self.pending = False

    # === Resolution ===

    def resolve_accent_color(self, preview: bool = False) -> Color:
        if preview and self.preview_index is not None:
            return self.presets[self.preview_index].accent
        if self.theme_index is not None:
            return self.presets[self.theme_index].accent
        return self.system_accent

    def resolver(self, preview: bool = False) -> 'ThemeResolver':
        return ThemeResolver(self, preview)


class ThemeResolver(IThemeResolver):
    """IThemeResolver view of a ThemeService for one engine instance"""

    def __init__(self, service: ThemeService, preview: bool = False):
        self.service = service
        self.preview = preview

    def is_night_mode(self) -> bool:
        return self.service.night_mode

    def resolve_accent_color(self) -> Color:
        return self.service.resolve_accent_color(preview=self.preview)
