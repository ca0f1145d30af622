"""
Screen border correction: solid lines along the screen edges to hide e-ink
ghosting at the panel border. Redrawn after host refreshes that may have
overwritten them.
"""
from ..config import BorderSettings
from ..surface import Surface

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# Refresh modes that repaint enough of the screen to cover the border lines
_REDRAW_MODES = frozenset({"full", "flashpartial", "partial", "flashui"})


def border_color(settings: BorderSettings) -> tuple[int, int, int]:
    return BLACK if settings.invert else WHITE


def draw_screen_borders(surface: Surface, settings: BorderSettings) -> bool:
    """Paint the enabled edges. Returns False when every edge is disabled."""
    if not settings.any_enabled:
        return False
    c = border_color(settings)
    w, h, t = surface.width, surface.height, settings.width
    if settings.top:
        surface.paint_rect(0, 0, w, t, c)
    if settings.bottom:
        surface.paint_rect(0, h - t, w, t, c)
    if settings.left:
        surface.paint_rect(0, 0, t, h, c)
    if settings.right:
        surface.paint_rect(w - t, 0, t, h, c)
    return True


def is_relevant_refresh(refresh_mode: str | None, region: object = None, currently_scrolling: bool = False) -> bool:
    """Whether a host refresh should trigger a border redraw. A "ui" refresh counts only with a region."""
    if not refresh_mode or currently_scrolling:
        return False
    if refresh_mode in _REDRAW_MODES:
        return True
    return refresh_mode == "ui" and region is not None
