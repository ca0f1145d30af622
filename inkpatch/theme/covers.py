"""
Rounded book covers. Wraps a host paint callable instead of patching the host's
item class: the wrapped paint draws the cover, then the corners are clipped to the
surrounding background and outlined.
"""
import logging
from dataclasses import dataclass
from typing import Callable

from ..color.convert import hex_to_rgb
from ..config import CornerSettings
from ..geometry import Rect, border_writes, clip_rounded_corners, stroke_rounded_rect
from ..surface import Surface

logger = logging.getLogger(__name__)

PaintFn = Callable[[Surface, "CoverItem", int, int], None]

DEFAULT_BACKGROUND = (255, 255, 255)


@dataclass(frozen=True)
class CoverItem:
    """A grid cell (width x height) holding a cover frame of cover_w x cover_h."""

    width: int
    height: int
    cover_w: int
    cover_h: int
    padding: int = 0
    is_directory: bool = False

    def frame_rect(self, x: int, y: int) -> Rect:
        """Cover frame centered in the cell painted at (x, y)."""
        return Rect(0, 0, self.cover_w, self.cover_h).centered_in(self.width, self.height, origin_x=x, origin_y=y)


def round_cover(
    surface: Surface,
    frame: Rect,
    settings: CornerSettings,
    *,
    background: tuple[int, int, int] | None = None,
) -> None:
    """
    Clip frame's corners to the background and stroke a rounded outline.
    The background defaults to the pixel just above-left of the frame.
    """
    if frame.is_empty:
        return
    if background is None:
        background = surface.get_pixel(frame.x - 1, frame.y - 1) or DEFAULT_BACKGROUND
    border = hex_to_rgb(settings.border_color)
    surface.apply(clip_rounded_corners(frame, settings.radius, background))
    surface.apply(stroke_rounded_rect(frame, settings.radius, border, settings.border_thickness))


class RoundedCoverPainter:
    """
    Paint decorator for cover items. Call it with the same arguments as the wrapped
    paint function; directories are left square unless settings.round_directories.
    """

    def __init__(self, paint: PaintFn, settings: CornerSettings | None = None):
        self.paint = paint
        self.settings = settings or CornerSettings()

    def __call__(self, surface: Surface, item: CoverItem, x: int, y: int) -> None:
        self.paint(surface, item, x, y)
        if item.cover_w <= 0 or item.cover_h <= 0:
            logger.debug("Skipping rounding for empty cover at (%s, %s)", x, y)
            return
        frame = item.frame_rect(x, y)
        if item.is_directory and not self.settings.round_directories:
            return
        if not item.is_directory:
            inner = frame.inset(item.padding)
            border = hex_to_rgb(self.settings.border_color)
            surface.apply(border_writes(inner, self.settings.border_thickness, border))
        round_cover(surface, frame, self.settings)
