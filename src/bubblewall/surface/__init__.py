from bubblewall.surface.surface_interface import ISurface
from bubblewall.surface.virtual_surface import VirtualSurface
from bubblewall.surface.png_surface import PngSequenceSurface

__all__ = ["ISurface", "VirtualSurface", "PngSequenceSurface"]
