"""
Rectangles, pixel writes, and corner geometry shared by the clip and stroke routines.
"""
from dataclasses import dataclass
from typing import NamedTuple

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Rect:
    """Integer rectangle: top-left (x, y), width w, height h."""

    x: int
    y: int
    w: int
    h: int

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def centered_in(self, outer_w: int, outer_h: int, *, origin_x: int = 0, origin_y: int = 0) -> "Rect":
        """Same size, centered inside an outer_w x outer_h cell at (origin_x, origin_y)."""
        return Rect(
            origin_x + (outer_w - self.w) // 2,
            origin_y + (outer_h - self.h) // 2,
            self.w,
            self.h,
        )

    def inset(self, amount: int) -> "Rect":
        """Shrink by amount on every side; width and height never drop below 1."""
        return Rect(
            self.x + amount,
            self.y + amount,
            max(1, self.w - 2 * amount),
            max(1, self.h - 2 * amount),
        )


class PixelWrite(NamedTuple):
    x: int
    y: int
    color: Color


class Corner(NamedTuple):
    """One r x r corner square and the center of its arc."""

    name: str
    cx: int
    cy: int
    x0: int
    x1: int  # inclusive
    y0: int
    y1: int  # inclusive


def clamp_radius(rect: Rect, radius: int) -> int:
    """Reduce radius so that 2*r fits in both width and height."""
    r = int(radius)
    if 2 * r > rect.w:
        r = rect.w // 2
    if 2 * r > rect.h:
        r = rect.h // 2
    return r


def corner_squares(rect: Rect, r: int) -> list[Corner]:
    """
    The four r x r corner squares of rect. Arc centers sit one pixel inward
    from the true corner so the arc is tangent to the straight edges.
    """
    x, y, w, h = rect.x, rect.y, rect.w, rect.h
    return [
        Corner("top_left", x + r - 1, y + r - 1, x, x + r - 1, y, y + r - 1),
        Corner("top_right", x + w - r, y + r - 1, x + w - r, x + w - 1, y, y + r - 1),
        Corner("bottom_left", x + r - 1, y + h - r, x, x + r - 1, y + h - r, y + h - 1),
        Corner("bottom_right", x + w - r, y + h - r, x + w - r, x + w - 1, y + h - r, y + h - 1),
    ]


def fill_rect_writes(x: int, y: int, w: int, h: int, color: Color) -> list[PixelWrite]:
    """Pixel writes covering a solid rectangle (empty if w or h <= 0)."""
    if w <= 0 or h <= 0:
        return []
    return [PixelWrite(px, py, color) for py in range(y, y + h) for px in range(x, x + w)]
