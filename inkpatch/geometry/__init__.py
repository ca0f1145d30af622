"""
Corner geometry: rounded-rectangle clipping and stroking.
"""
from .corners import border_writes, clip_rounded_corners, stroke_rounded_rect
from .rect import PixelWrite, Rect, clamp_radius, corner_squares

__all__ = [
    "Rect",
    "PixelWrite",
    "clamp_radius",
    "corner_squares",
    "border_writes",
    "clip_rounded_corners",
    "stroke_rounded_rect",
]
