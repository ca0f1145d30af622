"""
Unit tests for folder cover sizing, cover lookup and the folder cover painter.
Run from project root: python -m pytest tests/ -v
"""
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inkpatch.config import CornerSettings, FolderSettings
from inkpatch.geometry import Rect
from inkpatch.surface import Surface
from inkpatch.theme import (
    FolderCoverPainter,
    FolderItem,
    FolderLayout,
    find_folder_cover,
    fit_image_size,
    folder_frame_size,
    round_folder_cover,
)

BLACK = (0, 0, 0)
COVER = (200, 200, 200)
BACKGROUND = (10, 20, 30)


class TestFolderFrameSize(unittest.TestCase):
    def test_wide_cell_is_limited_by_height(self):
        self.assertEqual(folder_frame_size(90, 100, 2 / 3), (66, 100))

    def test_tall_cell_is_limited_by_width(self):
        self.assertEqual(folder_frame_size(50, 120, 2 / 3), (50, 75))

    def test_fill_ignores_aspect_ratio(self):
        self.assertEqual(folder_frame_size(90, 100, 2 / 3, fill=True), (90, 100))

    def test_border_is_taken_off_then_added_back(self):
        self.assertEqual(folder_frame_size(94, 104, 2 / 3, border_size=2), (70, 104))

    def test_degenerate_cell(self):
        self.assertEqual(folder_frame_size(0, 10, 2 / 3), (0, 0))
        self.assertEqual(folder_frame_size(3, 3, 1.0, border_size=2), (0, 0))


class TestFitImageSize(unittest.TestCase):
    def test_close_aspect_is_stretched(self):
        self.assertEqual(fit_image_size(200, 300, 66, 100), (66, 100))

    def test_far_aspect_is_letterboxed(self):
        self.assertEqual(fit_image_size(300, 100, 66, 100), (66, 22))

    def test_zero_limit_never_stretches(self):
        self.assertEqual(fit_image_size(100, 100, 50, 80, stretch_limit=0), (50, 50))

    def test_missing_image(self):
        self.assertEqual(fit_image_size(0, 0, 66, 100), (0, 0))


class TestFindFolderCover(unittest.TestCase):
    def test_first_extension_wins(self):
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / ".cover.png").write_bytes(b"")
            (Path(tmp) / ".cover.jpg").write_bytes(b"")
            self.assertEqual(find_folder_cover(tmp), Path(tmp) / ".cover.jpg")

    def test_no_cover(self):
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "cover.jpg").write_bytes(b"")
            (Path(tmp) / ".cover.jpg").mkdir()
            self.assertIsNone(find_folder_cover(tmp))


def _paint_image(surface, item, layout):
    image = layout.image
    surface.paint_rect(image.x, image.y, image.w, image.h, COVER)


class TestFolderCoverPainter(unittest.TestCase):
    def test_layout_centers_frame_and_image(self):
        layout = FolderItem(90, 100, 300, 100).layout(5, 5, FolderSettings())
        self.assertEqual(layout.frame, Rect(17, 5, 66, 100))
        self.assertEqual(layout.image, Rect(17, 44, 66, 22))

    def test_stretched_image_is_rounded(self):
        surface = Surface.blank(100, 110, BACKGROUND)
        painter = FolderCoverPainter(_paint_image, CornerSettings(radius=8))
        layout = painter(surface, FolderItem(90, 100, 200, 300), 5, 5)

        self.assertEqual(layout.image, Rect(17, 5, 66, 100))
        self.assertEqual(surface.get_pixel(17, 5), BACKGROUND)
        self.assertEqual(surface.get_pixel(82, 104), BACKGROUND)
        self.assertEqual(surface.get_pixel(50, 5), BLACK)
        self.assertEqual(surface.get_pixel(17, 50), BLACK)
        self.assertEqual(surface.get_pixel(50, 50), COVER)
        self.assertEqual(surface.get_pixel(16, 50), BACKGROUND)

    def test_letterboxed_image_is_rounded_in_place(self):
        surface = Surface.blank(100, 110, BACKGROUND)
        FolderCoverPainter(_paint_image, CornerSettings(radius=8))(surface, FolderItem(90, 100, 300, 100), 5, 5)

        self.assertEqual(surface.get_pixel(17, 44), BACKGROUND)
        self.assertEqual(surface.get_pixel(50, 44), BLACK)
        self.assertEqual(surface.get_pixel(50, 65), BLACK)
        self.assertEqual(surface.get_pixel(50, 55), COVER)
        self.assertEqual(surface.get_pixel(50, 43), BACKGROUND)

    def test_border_thickness_from_settings(self):
        surface = Surface.blank(100, 110, BACKGROUND)
        painter = FolderCoverPainter(_paint_image, CornerSettings(radius=8), FolderSettings(border=3))
        painter(surface, FolderItem(90, 100, 200, 300), 5, 5)
        self.assertEqual(surface.get_pixel(50, 7), BLACK)
        self.assertEqual(surface.get_pixel(50, 8), COVER)

    def test_folder_without_cover_is_left_alone(self):
        calls = []
        surface = Surface.blank(20, 20, BACKGROUND)
        painter = FolderCoverPainter(lambda s, item, layout: calls.append(layout))
        layout = painter(surface, FolderItem(20, 20, 0, 0), 0, 0)
        self.assertEqual(calls, [layout])
        self.assertTrue(layout.image.is_empty)
        self.assertTrue((surface.frame == surface.frame[0, 0]).all())

    def test_explicit_background(self):
        surface = Surface.blank(30, 30, BACKGROUND)
        layout = FolderLayout(Rect(5, 5, 20, 20), Rect(5, 5, 20, 20))
        surface.paint_rect(5, 5, 20, 20, COVER)
        round_folder_cover(surface, layout, CornerSettings(radius=6), FolderSettings(), background=(1, 2, 3))
        self.assertEqual(surface.get_pixel(5, 5), (1, 2, 3))
        self.assertEqual(surface.get_pixel(4, 4), BACKGROUND)


if __name__ == "__main__":
    unittest.main()
