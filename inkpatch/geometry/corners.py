"""
Rounded-corner rasterizer: rect + radius → pixel writes.
Clipping erases what lies outside each corner arc; stroking paints the arc ring and
the straight edges between corners. Work is O(r²) per corner, never O(w·h), since
both run from a paint callback on every frame.
"""
from .rect import Color, Corner, PixelWrite, Rect, clamp_radius, corner_squares, fill_rect_writes


def _clip_corner(corner: Corner, r2: int, color: Color) -> list[PixelWrite]:
    writes = []
    for px in range(corner.x0, corner.x1 + 1):
        dx = px - corner.cx
        for py in range(corner.y0, corner.y1 + 1):
            dy = py - corner.cy
            if dx * dx + dy * dy > r2:
                writes.append(PixelWrite(px, py, color))
    return writes


def _ring_corner(corner: Corner, inner2: int, outer2: int, color: Color) -> list[PixelWrite]:
    writes = []
    for px in range(corner.x0, corner.x1 + 1):
        dx = px - corner.cx
        for py in range(corner.y0, corner.y1 + 1):
            dy = py - corner.cy
            dist2 = dx * dx + dy * dy
            if inner2 <= dist2 <= outer2:
                writes.append(PixelWrite(px, py, color))
    return writes


def clip_rounded_corners(rect: Rect, radius: int, fill_color: Color) -> list[PixelWrite]:
    """
    Pixel writes that erase the four corners of rect outside a circle of `radius`.
    Pixels with squared distance > r² from their corner's arc center get fill_color.
    A radius <= 0 or an empty rect gives no writes.
    """
    if radius <= 0 or rect.is_empty:
        return []
    r = clamp_radius(rect, radius)
    if r <= 0:
        return []
    r2 = r * r
    writes: list[PixelWrite] = []
    for corner in corner_squares(rect, r):
        writes.extend(_clip_corner(corner, r2, fill_color))
    return writes


def border_writes(rect: Rect, thickness: int, color: Color) -> list[PixelWrite]:
    """Plain rectangular border of the given thickness, four straight sides."""
    if rect.is_empty:
        return []
    t = max(1, int(thickness))
    x, y, w, h = rect.x, rect.y, rect.w, rect.h
    if 2 * t >= w or 2 * t >= h:
        return fill_rect_writes(x, y, w, h, color)
    return (
        fill_rect_writes(x, y, w, t, color)
        + fill_rect_writes(x, y + h - t, w, t, color)
        + fill_rect_writes(x, y + t, t, h - 2 * t, color)
        + fill_rect_writes(x + w - t, y + t, t, h - 2 * t, color)
    )


def stroke_rounded_rect(rect: Rect, radius: int, color: Color, thickness: int = 1) -> list[PixelWrite]:
    """
    Pixel writes for a rounded-rectangle outline of `thickness` pixels.

    Straight edges run between the corner squares; each corner gets the ring of
    pixels whose squared distance from its arc center lies in [(r-t)², r²].
    When t > r the inner bound is 0 and the whole quarter disk is filled.
    A radius <= 0 falls back to a plain rectangular border.
    """
    if rect.is_empty:
        return []
    t = max(1, int(thickness))
    if radius <= 0:
        return border_writes(rect, t, color)
    r = clamp_radius(rect, radius)
    if r <= 0:
        return border_writes(rect, t, color)

    x, y, w, h = rect.x, rect.y, rect.w, rect.h
    writes = (
        fill_rect_writes(x + r, y, w - 2 * r, t, color)
        + fill_rect_writes(x + r, y + h - t, w - 2 * r, t, color)
        + fill_rect_writes(x, y + r, t, h - 2 * r, color)
        + fill_rect_writes(x + w - t, y + r, t, h - 2 * r, color)
    )

    inner = max(0, r - t)
    inner2 = inner * inner
    r2 = r * r
    for corner in corner_squares(rect, r):
        writes.extend(_ring_corner(corner, inner2, r2, color))
    return writes
