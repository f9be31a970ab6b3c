"""
Exceptions raised by the bubble wallpaper engine

Only configuration problems raise: layout exhaustion, empty surfaces and
idle cancellations are normal outcomes, not errors.
"""


class ConfigError(Exception):
    """Invalid or unreadable configuration (fail fast at startup)"""

    def __init__(self, message: str, key: str = ""):
        self.key = key
        super().__init__(f"{key}: {message}" if key else message)


class PaletteError(ConfigError):
    """Palette list is empty or does not hold (outline, fill) pairs"""
