from bubblewall.engine.bubble_registry import BubbleRegistry
from bubblewall.engine.frame_compositor import FrameCompositor
from bubblewall.engine.layout_generator import LayoutGenerator, LayoutStats, generate_layout

__all__ = [
    "BubbleRegistry",
    "FrameCompositor",
    "LayoutGenerator",
    "LayoutStats",
    "generate_layout",
]
