"""
Theme: night-mode color resolution, rounded book and folder covers, screen border correction.
"""
from .borders import draw_screen_borders, is_relevant_refresh
from .covers import CoverItem, RoundedCoverPainter, round_cover
from .folders import (
    FolderCoverPainter,
    FolderItem,
    FolderLayout,
    find_folder_cover,
    fit_image_size,
    folder_frame_size,
    round_folder_cover,
)
from .resolve import ThemeSnapshot, resolve_color_hex

__all__ = [
    "draw_screen_borders",
    "is_relevant_refresh",
    "CoverItem",
    "RoundedCoverPainter",
    "round_cover",
    "FolderCoverPainter",
    "FolderItem",
    "FolderLayout",
    "find_folder_cover",
    "fit_image_size",
    "folder_frame_size",
    "round_folder_cover",
    "ThemeSnapshot",
    "resolve_color_hex",
]
