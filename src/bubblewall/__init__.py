"""
bubblewall - animated bubble wallpaper engine
"""

__version__ = "1.0.0"
