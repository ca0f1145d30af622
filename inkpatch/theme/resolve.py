"""
Theme color resolution for night mode.
The host inverts the whole screen in night mode, so a color that must keep its
appearance is stored pre-inverted. Resolution happens once per paint pass into an
immutable snapshot instead of reading a global night-mode flag at each call site.
"""
from dataclasses import dataclass

from ..color.convert import hex_to_rgb, invert_hex
from ..config import ThemeSettings


def resolve_color_hex(hex_color: str, night_mode: bool, invert_in_night_mode: bool) -> str:
    """Hex to paint with: pre-inverted when night mode is on and the color should not invert."""
    if night_mode and not invert_in_night_mode:
        return invert_hex(hex_color)
    return hex_color


@dataclass(frozen=True)
class ThemeSnapshot:
    night_mode: bool
    background_hex: str
    font_hex: str

    @classmethod
    def capture(cls, settings: ThemeSettings, night_mode: bool) -> "ThemeSnapshot":
        return cls(
            night_mode=night_mode,
            background_hex=resolve_color_hex(settings.background_hex, night_mode, settings.background_inverted),
            font_hex=resolve_color_hex(settings.font_hex, night_mode, settings.font_inverted),
        )

    @property
    def background_rgb(self) -> tuple[int, int, int]:
        return hex_to_rgb(self.background_hex)

    @property
    def font_rgb(self) -> tuple[int, int, int]:
        return hex_to_rgb(self.font_hex)
