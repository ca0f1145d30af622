"""
Rounded folder covers. A directory whose folder holds a ".cover.<ext>" image (or
whose first book has a cover) shows that image in an aspect-ratio frame centered in
its grid cell; the painter then outlines the image and rounds its corners against
the surrounding background.
"""
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, NamedTuple

from ..color.convert import hex_to_rgb
from ..config import CornerSettings, FolderSettings
from ..geometry import Rect, border_writes, clip_rounded_corners, stroke_rounded_rect
from ..surface import Surface
from .covers import DEFAULT_BACKGROUND

logger = logging.getLogger(__name__)

COVER_NAME = ".cover"
COVER_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".gif")


def find_folder_cover(dir_path: str | Path) -> Path | None:
    """First existing <dir>/.cover<ext>, checked in COVER_EXTENSIONS order."""
    base = Path(dir_path)
    for ext in COVER_EXTENSIONS:
        candidate = base / (COVER_NAME + ext)
        if candidate.is_file():
            return candidate
    return None


def folder_frame_size(
    cell_w: int,
    cell_h: int,
    aspect_ratio: float,
    fill: bool = False,
    border_size: int = 0,
) -> tuple[int, int]:
    """
    Largest width:height = aspect_ratio frame that fits the cell once border_size is
    taken off each side, plus that border. With fill the frame takes the whole cell.
    """
    available_w = cell_w - 2 * border_size
    available_h = cell_h - 2 * border_size
    if available_w <= 0 or available_h <= 0:
        return 0, 0
    if fill:
        frame_w, frame_h = available_w, available_h
    elif available_w / available_h > aspect_ratio:
        frame_h = available_h
        frame_w = math.floor(available_h * aspect_ratio)
    else:
        frame_w = available_w
        frame_h = math.floor(available_w / aspect_ratio)
    return frame_w + 2 * border_size, frame_h + 2 * border_size


def fit_image_size(image_w: int, image_h: int, box_w: int, box_h: int, stretch_limit: int = 50) -> tuple[int, int]:
    """
    Size an image_w x image_h image for a box_w x box_h frame. When the two aspect
    ratios differ by less than stretch_limit percent the image is stretched to the
    box; otherwise it is scaled to fit inside, keeping its aspect.
    """
    if image_w <= 0 or image_h <= 0 or box_w <= 0 or box_h <= 0:
        return 0, 0
    ratio = (box_w / box_h) / (image_w / image_h)
    if abs(1 - ratio) * 100 < stretch_limit:
        return box_w, box_h
    scale = min(box_w / image_w, box_h / image_h)
    return (
        max(1, min(box_w, int(image_w * scale + 0.5))),
        max(1, min(box_h, int(image_h * scale + 0.5))),
    )


class FolderLayout(NamedTuple):
    frame: Rect
    image: Rect


@dataclass(frozen=True)
class FolderItem:
    """A directory cell (width x height) showing a cover image of image_w x image_h source pixels."""

    width: int
    height: int
    image_w: int
    image_h: int

    def layout(self, x: int, y: int, settings: FolderSettings) -> FolderLayout:
        """Frame centered in the cell painted at (x, y), image centered in the frame."""
        frame_w, frame_h = folder_frame_size(self.width, self.height, settings.aspect_ratio, settings.fill)
        image_w, image_h = fit_image_size(self.image_w, self.image_h, frame_w, frame_h, settings.stretch_limit)
        frame = Rect(0, 0, frame_w, frame_h).centered_in(self.width, self.height, origin_x=x, origin_y=y)
        image = Rect(0, 0, image_w, image_h).centered_in(frame_w, frame_h, origin_x=frame.x, origin_y=frame.y)
        return FolderLayout(frame, image)


def round_folder_cover(
    surface: Surface,
    layout: FolderLayout,
    corners: CornerSettings,
    folders: FolderSettings,
    *,
    background: tuple[int, int, int] | None = None,
) -> None:
    """
    Outline the folder image, then clip its corners to the background and stroke
    the rounded outline. The background defaults to the pixel just above-left of
    the frame, which lies outside the image however the image sits in it.
    """
    image = layout.image
    if image.is_empty:
        return
    if background is None:
        background = surface.get_pixel(layout.frame.x - 1, layout.frame.y - 1) or DEFAULT_BACKGROUND
    border = hex_to_rgb(corners.border_color)
    surface.apply(border_writes(image, folders.border, border))
    surface.apply(clip_rounded_corners(image, corners.radius, background))
    surface.apply(stroke_rounded_rect(image, corners.radius, border, folders.border))


class FolderCoverPainter:
    """
    Paint decorator for folder cells with a cover image. The wrapped paint receives
    the item and its FolderLayout, so it can draw the image where it will be rounded.
    """

    def __init__(
        self,
        paint: Callable[[Surface, FolderItem, FolderLayout], None],
        corners: CornerSettings | None = None,
        folders: FolderSettings | None = None,
    ):
        self.paint = paint
        self.corners = corners or CornerSettings()
        self.folders = folders or FolderSettings()

    def __call__(self, surface: Surface, item: FolderItem, x: int, y: int) -> FolderLayout:
        layout = item.layout(x, y, self.folders)
        self.paint(surface, item, layout)
        if layout.image.is_empty:
            logger.debug("No folder cover to round at (%s, %s)", x, y)
            return layout
        round_folder_cover(surface, layout, self.corners, self.folders)
        return layout
