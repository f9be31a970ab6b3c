"""
Frame Compositor - paints one wallpaper frame from the current state.

Pass order (later passes paint over earlier ones):
1. Background: opaque gray at AnimationState.brightness
2. Gradient: accent-colored vertical band rising from the bottom edge,
   its height proportional to AnimationState.gradient_factor
3. Shadows: one gradient-filled triangle per bubble, all before any fill
4. Bubbles: filled circle plus a stroked outline lying inside the radius

Rendering works on a Pillow RGBA image; the gradient and shadow ramps are
computed with numpy and alpha-composited.
"""

import math
from typing import List, Optional, Tuple
import numpy as np
from PIL import Image, ImageDraw
from bubblewall.engine.bubble_registry import BubbleRegistry
from bubblewall.models.animation_state import AnimationState
from bubblewall.models.bubble import Bubble
from bubblewall.models.color import Color
from bubblewall.models.config import RenderConfig
from bubblewall.models.enums import LogCategory
from bubblewall.utils.logger import get_category_logger

log = get_category_logger(LogCategory.RENDER)

Point = Tuple[int, int]

_COS_45 = math.cos(math.pi / 4)
_SIN_45 = math.sin(math.pi / 4)
_COS_225 = math.cos(math.pi * 1.25)
_SIN_225 = math.sin(math.pi * 1.25)


def circle_box(x: float, y: float, radius: float) -> Tuple[float, float, float, float]:
    return (x - radius, y - radius, x + radius, y + radius)


class FrameCompositor:
    """
    Stateless painter for wallpaper frames

    Example:
        compositor = FrameCompositor(RenderConfig())
        image = Image.new("RGBA", (1080, 2340))
        compositor.render(image, registry, state)
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    # ------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------

    def render(self, image: Image.Image, registry: BubbleRegistry, state: AnimationState) -> Image.Image:
        """Paint the full frame into image (RGBA) and return it"""
        if image.mode != "RGBA":
            raise ValueError(f"FrameCompositor needs an RGBA image, got {image.mode}")

        width, height = image.size
        self.paint_background(image, state)
        if width == 0 or height == 0:
            return image

        image.alpha_composite(self.gradient_layer(width, height, state))

        for bubble in registry:
            self.paint_shadow(image, bubble)

        draw = ImageDraw.Draw(image, "RGBA")
        for bubble in registry:
            self.paint_bubble(draw, bubble)

        return image

    # ------------------------------------------------------------
    # Background + gradient
    # ------------------------------------------------------------

    def paint_background(self, image: Image.Image, state: AnimationState) -> None:
        image.paste(Color.gray(state.brightness).to_rgba(), (0, 0, image.width, image.height))

    def gradient_top(self, height: int, factor: float) -> float:
        """Row where the gradient ends; the band is taller for larger factors"""
        return height - height * (factor * self.config.gradient_height_scale)

    def gradient_alphas(self, state: AnimationState) -> Tuple[int, int]:
        """(bottom alpha, top alpha) of the gradient band"""
        accent = state.accent_color
        bottom_scale = (
            self.config.gradient_night_alpha if state.night_mode else self.config.gradient_day_alpha
        )
        return (
            accent.with_alpha_factor(bottom_scale).a,
            accent.with_alpha_factor(self.config.gradient_top_alpha).a,
        )

    def gradient_layer(self, width: int, height: int, state: AnimationState) -> Image.Image:
        """Full-size RGBA layer holding the accent gradient"""
        bottom_alpha, top_alpha = self.gradient_alphas(state)
        top = self.gradient_top(height, state.gradient_factor)
        span = top - height

        rows = np.arange(height, dtype=np.float64)
        if span == 0:
            # Zero-height band: everything above the bottom edge gets the top color
            t = np.ones(height, dtype=np.float64)
        else:
            t = np.clip((rows - height) / span, 0.0, 1.0)

        alpha = bottom_alpha + (top_alpha - bottom_alpha) * t

        layer = np.empty((height, width, 4), dtype=np.uint8)
        layer[..., :3] = state.accent_color.to_rgb()
        layer[..., 3] = np.round(alpha).astype(np.uint8)[:, None]
        return Image.fromarray(layer)

    # ------------------------------------------------------------
    # Shadows
    # ------------------------------------------------------------

    def shadow_triangle(self, bubble: Bubble) -> List[Point]:
        """
        Shadow vertices: two points on the current circle at 45° and 225°
        plus a third offset up-right by shadow_reach times the base radius
        """
        r = bubble.current_radius
        reach = bubble.base_radius * self.config.shadow_reach
        return [
            (int(r * _COS_45 + bubble.x), int(r * _SIN_45 + bubble.y)),
            (int(r * _COS_225 + bubble.x), int(r * _SIN_225 + bubble.y)),
            (int(bubble.x + reach), int(bubble.y - reach)),
        ]

    def paint_shadow(self, image: Image.Image, bubble: Bubble) -> None:
        """
        Fill the shadow triangle with a linear ramp from the outline color
        (at shadow_alpha) to transparent, mirrored beyond the ramp ends
        """
        points = self.shadow_triangle(bubble)
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]

        # Clip the triangle's bounding box to the canvas
        left, top = max(0, min(xs)), max(0, min(ys))
        right, bottom = min(image.width, max(xs) + 1), min(image.height, max(ys) + 1)
        if right <= left or bottom <= top:
            return

        box_w, box_h = right - left, bottom - top
        mask = Image.new("L", (box_w, box_h), 0)
        ImageDraw.Draw(mask).polygon([(px - left, py - top) for px, py in points], fill=255)

        (x1, y1), (x2, y2), (x3, y3) = points
        start_x, start_y = (x1 + x2) / 2, (y1 + y2) / 2
        vec_x, vec_y = x3 - start_x, y3 - start_y
        length_sq = vec_x * vec_x + vec_y * vec_y

        grid_x, grid_y = np.meshgrid(
            np.arange(left, right, dtype=np.float64),
            np.arange(top, bottom, dtype=np.float64),
        )
        if length_sq == 0:
            t = np.zeros_like(grid_x)
        else:
            t = ((grid_x - start_x) * vec_x + (grid_y - start_y) * vec_y) / length_sq
            t = np.mod(t, 2.0)
            t = np.where(t > 1.0, 2.0 - t, t)

        start_alpha = bubble.outline_color.with_alpha_factor(self.config.shadow_alpha).a
        alpha = start_alpha * (1.0 - t) * (np.asarray(mask, dtype=np.float64) / 255.0)

        patch = np.zeros((box_h, box_w, 4), dtype=np.uint8)
        patch[..., :3] = bubble.outline_color.to_rgb()
        patch[..., 3] = np.round(alpha).astype(np.uint8)
        image.alpha_composite(Image.fromarray(patch), dest=(left, top))

    # ------------------------------------------------------------
    # Bubbles
    # ------------------------------------------------------------

    def outline_geometry(self, radius: float) -> Optional[Tuple[float, int]]:
        """
        (stroke center radius, stroke width) for a bubble of this radius

        The stroke is centered on radius - width/2 so its outer edge touches
        the bubble edge. None when the stroke center would not be positive.
        """
        stroke_width = self.config.outline_width
        if stroke_width <= 0:
            return None
        center = radius - stroke_width / 2
        if center <= 0:
            return None
        return center, stroke_width

    def paint_bubble(self, draw: ImageDraw.ImageDraw, bubble: Bubble) -> None:
        radius = bubble.current_radius
        if radius <= 0:
            return

        draw.ellipse(circle_box(bubble.x, bubble.y, radius), fill=bubble.fill_color.to_rgba())

        geometry = self.outline_geometry(radius)
        if geometry is None:
            return

        # Pillow strokes inwards from the box edge: box at the stroke's outer edge
        stroke_center, stroke_width = geometry
        draw.ellipse(
            circle_box(bubble.x, bubble.y, stroke_center + stroke_width / 2),
            outline=bubble.outline_color.to_rgba(),
            width=max(1, min(stroke_width, int(radius))),
        )
