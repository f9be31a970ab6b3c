"""
Palette Manager - Assigns (outline, fill) color pairs to bubbles

Processes palette data from ConfigManager (does NOT load files).
"""

import random
from typing import List, Optional, Tuple
from bubblewall.exceptions import PaletteError
from bubblewall.models.color import Color
from bubblewall.models.enums import PaletteMode, LogCategory
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.PALETTE)

ColorPair = Tuple[Color, Color]


class PaletteManager:
    """
    Palette of alternating (outline, fill) entries

    Responsibilities:
    - Parse and validate hex palette entries (even, non-zero count)
    - Hand out color pairs in ROUND_ROBIN or RANDOM order

    ROUND_ROBIN keeps a cursor that consumes two entries per bubble and wraps
    to 0, so no pair repeats before the palette is used up. RANDOM picks a
    random even slot and pairs it with the next one.

    Example:
        palette = PaletteManager(["#1565c0", "#42a5f5", "#2e7d32", "#66bb6a"])
        outline, fill = palette.next_pair()   # first pair
        outline, fill = palette.next_pair()   # second pair
        outline, fill = palette.next_pair()   # first pair again
    """

    def __init__(
        self,
        entries: List[str],
        mode: PaletteMode = PaletteMode.ROUND_ROBIN,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            entries: Hex colors, outline at even index, fill right after it
            mode: Assignment policy
            rng: Random source for RANDOM mode (module random when None)

        Raises:
            PaletteError: If entries is empty, odd-sized or holds a bad color
        """
        if not entries:
            raise PaletteError("palette is empty", key="palette")
        if len(entries) % 2 != 0:
            raise PaletteError(
                f"palette needs (outline, fill) pairs, got {len(entries)} entries",
                key="palette"
            )

        try:
            colors = [Color.from_hex(entry) for entry in entries]
        except ValueError as ex:
            raise PaletteError(str(ex), key="palette") from ex

        self._pairs: List[ColorPair] = [
            (colors[i], colors[i + 1]) for i in range(0, len(colors), 2)
        ]
        self.mode = mode
        self._rng = rng or random.Random()
        self._cursor = 0

        log.debug("Palette loaded", pairs=len(self._pairs), mode=mode.name)

    @property
    def pairs(self) -> List[ColorPair]:
        return list(self._pairs)

    @property
    def pair_count(self) -> int:
        return len(self._pairs)

    @property
    def cursor(self) -> int:
        """Index of the pair ROUND_ROBIN hands out next"""
        return self._cursor

    def reset(self) -> None:
        """Rewind the round-robin cursor (called before each layout pass)"""
        self._cursor = 0

    def next_pair(self) -> ColorPair:
        """Color pair for the next bubble according to the active mode"""
        if self.mode == PaletteMode.RANDOM:
            return self._pairs[self._rng.randrange(len(self._pairs))]

        pair = self._pairs[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._pairs)
        return pair

    def pair_at(self, index: int) -> ColorPair:
        """Pair by index (wraps around)"""
        return self._pairs[index % len(self._pairs)]
