"""
HSV color wheel: polar position ↔ (hue, saturation).
Angle from the center gives hue, distance over radius gives saturation; value is
a separate control and does not change the wheel geometry.
"""
import math

import numpy as np

from ..surface import LUMA_WEIGHTS, Surface

MARKER_OUTER_RADIUS = 4
MARKER_INNER_RADIUS = 3


def _hsv_to_rgb_array(h: np.ndarray, s: np.ndarray, v: float) -> np.ndarray:
    """Vectorized hsv_to_rgb: same sextant formula and rounding, returns (..., 3) uint8."""
    h = np.mod(h, 360.0)
    c = v * s
    x = c * (1 - np.abs(np.mod(h / 60.0, 2) - 1))
    m = v - c
    zero = np.zeros_like(c)
    sextant = np.floor(h / 60.0).astype(np.int32)
    sextant = np.clip(sextant, 0, 5)
    r = np.choose(sextant, [c, x, zero, zero, x, c])
    g = np.choose(sextant, [x, c, c, x, zero, zero])
    b = np.choose(sextant, [zero, zero, x, c, c, x])
    rgb = np.stack([r + m, g + m, b + m], axis=-1)
    return np.floor(rgb * 255 + 0.5).astype(np.uint8)


def polar_offsets(radius: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Per-pixel (hue, distance) over the (2R+1)² square centered on the wheel.
    hue = (deg(atan2(py, px)) + 360) mod 360.
    """
    r = max(0, int(radius))
    coords = np.arange(-r, r + 1, dtype=np.float64)
    px, py = np.meshgrid(coords, coords)
    dist = np.sqrt(px * px + py * py)
    hue = np.mod(np.degrees(np.arctan2(py, px)) + 360.0, 360.0)
    return hue, dist


def sample_wheel_color(radius: int, value: float, invert: bool = False) -> np.ndarray:
    """
    Render the wheel as an RGBA grid of shape (2R+1, 2R+1, 4), uint8.
    Grid index [R + py, R + px] holds the color for offset (px, py) from the center.
    Pixels inside the disk get alpha 255; outside stay fully transparent.
    With invert, every painted channel becomes 255 - channel (night-mode preview).
    value is clamped to [0, 1].
    """
    r = max(0, int(radius))
    v = max(0.0, min(1.0, float(value)))
    hue, dist = polar_offsets(r)
    inside = dist <= r
    sat = dist / r if r > 0 else np.zeros_like(dist)
    rgb = _hsv_to_rgb_array(hue, np.clip(sat, 0.0, 1.0), v)
    if invert:
        rgb = 255 - rgb
    grid = np.zeros((2 * r + 1, 2 * r + 1, 4), dtype=np.uint8)
    grid[inside, :3] = rgb[inside]
    grid[inside, 3] = 255
    return grid


def pick_from_point(
    center: tuple[float, float],
    radius: float,
    point: tuple[float, float],
) -> tuple[float, float] | None:
    """
    Map a tapped point to (hue, saturation), or None when it lies outside the disk.
    Inverse of sample_wheel_color's polar mapping.
    """
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    dist = math.sqrt(dx * dx + dy * dy)
    if dist > radius:
        return None
    hue = (math.degrees(math.atan2(dy, dx)) + 360) % 360
    saturation = min(1.0, dist / radius) if radius > 0 else 0.0
    return hue, saturation


def paint_wheel(surface: Surface, x: int, y: int, radius: int, value: float, invert: bool = False) -> None:
    """Paint the wheel with its bounding square's top-left at (x, y); pixels outside the disk are untouched."""
    grid = sample_wheel_color(radius, value, invert)
    ys, xs = np.nonzero(grid[:, :, 3])
    gx = xs + x
    gy = ys + y
    keep = (gx >= 0) & (gx < surface.width) & (gy >= 0) & (gy < surface.height)
    ys, xs, gx, gy = ys[keep], xs[keep], gx[keep], gy[keep]
    rgb = grid[ys, xs, :3]
    if surface.is_grayscale:
        weights = np.array(LUMA_WEIGHTS)
        surface.frame[gy, gx] = np.floor(rgb.astype(np.float64) @ weights + 0.5).astype(np.uint8)
    else:
        surface.frame[gy, gx, :3] = rgb


def selection_point(cx: int, cy: int, radius: int, hue: float, saturation: float) -> tuple[int, int]:
    """Pixel where the current (hue, saturation) sits on a wheel centered at (cx, cy)."""
    angle = math.radians(hue)
    dist = saturation * radius
    return (
        cx + math.floor(math.cos(angle) * dist + 0.5),
        cy + math.floor(math.sin(angle) * dist + 0.5),
    )


def paint_selection_marker(surface: Surface, cx: int, cy: int, radius: int, hue: float, saturation: float) -> None:
    """Black dot with a white outline at the current selection."""
    sx, sy = selection_point(cx, cy, radius, hue, saturation)
    outer2 = MARKER_OUTER_RADIUS * MARKER_OUTER_RADIUS
    inner2 = MARKER_INNER_RADIUS * MARKER_INNER_RADIUS
    for py in range(-MARKER_OUTER_RADIUS, MARKER_OUTER_RADIUS + 1):
        for px in range(-MARKER_OUTER_RADIUS, MARKER_OUTER_RADIUS + 1):
            d = px * px + py * py
            if d <= inner2:
                surface.set_pixel(sx + px, sy + py, (0, 0, 0))
            elif d <= outer2:
                surface.set_pixel(sx + px, sy + py, (255, 255, 255))
