"""
Pixel surface: the host's paint buffer as a numpy frame.
RGB frames are (H, W, 3) uint8; grayscale frames are (H, W) uint8 and receive
colors converted to luminance.
"""
from typing import Iterable

import numpy as np

from .geometry.rect import Color, PixelWrite

# ITU-R BT.601 luma weights (same as the analysis code uses for brightness)
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def luminance(color: Color) -> int:
    """Gray level 0-255 for an RGB color, rounded half up."""
    r, g, b = color[0], color[1], color[2]
    return int(r * LUMA_WEIGHTS[0] + g * LUMA_WEIGHTS[1] + b * LUMA_WEIGHTS[2] + 0.5)


class Surface:
    """
    Writable pixel buffer. Writes outside the buffer are ignored (clamped), which
    lets corner and marker routines run near screen edges without bounds checks.
    """

    def __init__(self, frame: np.ndarray):
        if frame.ndim not in (2, 3) or (frame.ndim == 3 and frame.shape[-1] < 3):
            raise ValueError("Expected RGB frame (H, W, 3) or grayscale frame (H, W)")
        self.frame = frame

    @classmethod
    def blank(cls, width: int, height: int, color: Color = (255, 255, 255), *, grayscale: bool = False) -> "Surface":
        if grayscale:
            frame = np.full((height, width), luminance(color), dtype=np.uint8)
        else:
            frame = np.empty((height, width, 3), dtype=np.uint8)
            frame[:, :] = color[:3]
        return cls(frame)

    @property
    def width(self) -> int:
        return int(self.frame.shape[1])

    @property
    def height(self) -> int:
        return int(self.frame.shape[0])

    @property
    def is_grayscale(self) -> bool:
        return self.frame.ndim == 2

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not self.contains(x, y):
            return
        if self.is_grayscale:
            self.frame[y, x] = luminance(color)
        else:
            self.frame[y, x, :3] = color[:3]

    def get_pixel(self, x: int, y: int) -> Color | None:
        """Color at (x, y), or None outside the buffer."""
        if not self.contains(x, y):
            return None
        if self.is_grayscale:
            v = int(self.frame[y, x])
            return (v, v, v)
        px = self.frame[y, x]
        return (int(px[0]), int(px[1]), int(px[2]))

    def paint_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Solid rectangle, clipped to the buffer."""
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(self.width, x + w), min(self.height, y + h)
        if x1 <= x0 or y1 <= y0:
            return
        if self.is_grayscale:
            self.frame[y0:y1, x0:x1] = luminance(color)
        else:
            self.frame[y0:y1, x0:x1, :3] = color[:3]

    def apply(self, writes: Iterable[PixelWrite]) -> int:
        """Apply pixel writes in order; returns how many landed inside the buffer."""
        applied = 0
        for x, y, color in writes:
            if self.contains(x, y):
                self.set_pixel(x, y, color)
                applied += 1
        return applied
