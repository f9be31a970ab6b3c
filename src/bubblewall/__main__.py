"""
Demo runner

Plays a scripted sequence of host events through a WallpaperEngine and
writes every rendered frame as a PNG.

Usage:
    python -m bubblewall --size 540x1170 --seed 7 --out frames
    python -m bubblewall --script "off,unlock,touch 270 600,release,night,zoom 0.5"

Script commands (comma separated):
    off | unlock | touch X Y | release | zoom LEVEL | night | day
    accent #AARRGGBB | theme INDEX | hide | show
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple
from bubblewall.managers.config_manager import ConfigManager
from bubblewall.models.color import Color
from bubblewall.models.enums import LogCategory, LogLevel
from bubblewall.models.events import (
    AccentColorChangedEvent,
    Event,
    ScreenOffEvent,
    SurfaceChangedEvent,
    ThemeChangedEvent,
    TouchDownEvent,
    TouchUpEvent,
    UnlockedEvent,
    VisibilityChangedEvent,
    ZoomChangedEvent,
)
from bubblewall.services.theme_service import ThemeService
from bubblewall.services.wallpaper_engine import WallpaperEngine
from bubblewall.surface.png_surface import PngSequenceSurface
from bubblewall.utils.logger import configure_logger, get_category_logger

log = get_category_logger(LogCategory.SYSTEM)

DEFAULT_SCRIPT = "off,unlock,touch 270 585,release,night,zoom 0.4,zoom 0,day"


def parse_size(value: str) -> Tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"size must look like WIDTHxHEIGHT, got {value!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError("size must be positive")
    return width, height


ScriptStep = Tuple[Optional[Callable[[], None]], Optional[Event]]


def parse_script(script: str, themes: ThemeService) -> List[ScriptStep]:
    """
    Translate script commands into (action, event) steps

    The action runs right before the event is published. Commands that
    change system values (night, day, accent, theme) use it to update the
    ThemeService the engine resolves from.
    """
    steps: List[ScriptStep] = []
    for raw in script.split(","):
        parts = raw.split()
        if not parts:
            continue
        command, args = parts[0].lower(), parts[1:]

        if command == "off":
            steps.append((None, ScreenOffEvent()))
        elif command == "unlock":
            steps.append((None, UnlockedEvent()))
        elif command == "touch":
            steps.append((None, TouchDownEvent(float(args[0]), float(args[1]))))
        elif command == "release":
            steps.append((None, TouchUpEvent()))
        elif command == "zoom":
            steps.append((None, ZoomChangedEvent(float(args[0]))))
        elif command in ("night", "day"):
            enabled = command == "night"
            steps.append((lambda enabled=enabled: themes.set_night_mode(enabled), ThemeChangedEvent()))
        elif command == "accent":
            accent = Color.from_hex(args[0])
            steps.append((lambda accent=accent: themes.set_system_accent(accent), AccentColorChangedEvent()))
        elif command == "theme":
            index = int(args[0])
            themes.preset(index)
            steps.append((lambda index=index: themes.select_preview_theme(index), None))
        elif command == "hide":
            steps.append((None, VisibilityChangedEvent(False)))
        elif command == "show":
            steps.append((None, VisibilityChangedEvent(True)))
        else:
            raise ValueError(f"unknown script command {command!r}")
    return steps


async def run(args: argparse.Namespace) -> int:
    config = ConfigManager(args.config).load()
    themes = ThemeService(config.themes, config.default_accent)

    try:
        steps = parse_script(args.script, themes)
    except (ValueError, IndexError) as ex:
        log.error(f"Bad script: {ex}")
        return 2

    surface = PngSequenceSurface(args.out, every_nth=args.every)
    width, height = args.size

    async with WallpaperEngine(config, surface, themes=themes, seed=args.seed) as engine:
        await engine.publish(SurfaceChangedEvent(width, height))
        await engine.wait_until_idle()
        log.info("Layout ready", bubbles=engine.bubble_count)

        for action, event in steps:
            if action is not None:
                action()
            if event is not None:
                await engine.publish(event)
                await engine.wait_until_idle()

        primary, _, _ = engine.compute_colors()
        log.info("Demo finished", frames=engine.animations.frames_rendered, accent=primary)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="bubblewall", description="Render a bubble wallpaper demo to PNG frames")
    parser.add_argument("--size", type=parse_size, default=(540, 1170), help="Surface size, WIDTHxHEIGHT")
    parser.add_argument("--seed", type=int, default=None, help="Layout seed (random when omitted)")
    parser.add_argument("--out", type=Path, default=Path("frames"), help="Output directory for PNG frames")
    parser.add_argument("--every", type=int, default=1, help="Only write every n-th frame")
    parser.add_argument("--config", type=Path, default=None, help="Alternative config.yaml")
    parser.add_argument("--script", default=DEFAULT_SCRIPT, help="Comma separated event script")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    configure_logger(LogLevel.DEBUG if args.verbose else LogLevel.INFO)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
