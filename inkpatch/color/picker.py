"""
Color wheel picker: interaction state for choosing a color on the HSV wheel.

Two states. IDLE shows the current color and waits for input; DRAGGING follows the
pointer while it stays down inside the disk. A press outside the disk while IDLE is
reported to the caller as a cancel. Brightness (value) is a separate stepped control.
"""
import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable

import numpy as np

from .convert import DEFAULT_HSV, hex_to_hsv_or, hsv_to_hex, hsv_to_rgb, invert_rgb
from .wheel import pick_from_point, sample_wheel_color

if TYPE_CHECKING:
    from ..config import WheelSettings

logger = logging.getLogger(__name__)

VALUE_STEP = 0.1


def wheel_radius(screen_width: int, screen_height: int, width_factor: float = 0.6, padding: int = 0) -> int:
    """Wheel radius for a dialog sized to width_factor of the short screen side, minus padding on both sides."""
    width = int(min(screen_width, screen_height) * width_factor)
    return max(0, (width - 2 * padding) // 2)


class PickerState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class ColorWheelPicker:
    """
    Wheel picker bound to a disk of `radius` pixels centered at `center`.
    Callbacks: on_apply(hex) when the user applies, on_cancel() on a press outside
    the wheel or an explicit cancel, on_change(hue, saturation, value) after any update.
    """

    def __init__(
        self,
        center: tuple[int, int],
        radius: int,
        *,
        hue: float = DEFAULT_HSV[0],
        saturation: float = DEFAULT_HSV[1],
        value: float = DEFAULT_HSV[2],
        invert_in_night_mode: bool = True,
        on_apply: Callable[[str], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
        on_change: Callable[[float, float, float], None] | None = None,
    ):
        self.center = center
        self.radius = max(0, int(radius))
        self.hue = hue
        self.saturation = saturation
        self.value = max(0.0, min(1.0, value))
        self.invert_in_night_mode = invert_in_night_mode
        self.on_apply = on_apply
        self.on_cancel = on_cancel
        self.on_change = on_change
        self.state = PickerState.IDLE

    @classmethod
    def from_hex(cls, center: tuple[int, int], radius: int, hex_color: str, **kwargs) -> "ColorWheelPicker":
        """Start from a stored hex color; malformed input falls back to red."""
        h, s, v = hex_to_hsv_or(hex_color)
        return cls(center, radius, hue=h, saturation=s, value=v, **kwargs)

    @classmethod
    def from_settings(
        cls,
        center: tuple[int, int],
        screen_width: int,
        screen_height: int,
        settings: "WheelSettings",
        hex_color: str | None = None,
        *,
        padding: int = 0,
        **kwargs,
    ) -> "ColorWheelPicker":
        """Wheel sized for the screen by settings.width_factor, with its night-mode inversion flag."""
        radius = wheel_radius(screen_width, screen_height, settings.width_factor, padding)
        kwargs.setdefault("invert_in_night_mode", settings.invert_in_night_mode)
        if hex_color is not None:
            return cls.from_hex(center, radius, hex_color, **kwargs)
        return cls(center, radius, **kwargs)

    # --- pointer input ---

    def _update_from_point(self, point: tuple[int, int]) -> bool:
        picked = pick_from_point(self.center, self.radius, point)
        if picked is None:
            return False
        self.hue, self.saturation = picked
        self._changed()
        return True

    def press(self, point: tuple[int, int]) -> bool:
        """Pointer down. Inside the disk starts a drag; outside while idle cancels."""
        if self._update_from_point(point):
            self.state = PickerState.DRAGGING
            return True
        if self.state is PickerState.IDLE:
            self.cancel()
        return False

    def move(self, point: tuple[int, int]) -> bool:
        """Pointer moved while down. Ignored unless dragging and inside the disk."""
        if self.state is not PickerState.DRAGGING:
            return False
        return self._update_from_point(point)

    def release(self) -> None:
        self.state = PickerState.IDLE

    def tap(self, point: tuple[int, int]) -> bool:
        handled = self.press(point)
        self.release()
        return handled

    # --- brightness ---

    @property
    def can_decrease(self) -> bool:
        return self.value > 0

    @property
    def can_increase(self) -> bool:
        return self.value < 1

    def increase_value(self) -> float:
        self.value = min(1.0, round(self.value + VALUE_STEP, 10))
        self._changed()
        return self.value

    def decrease_value(self) -> float:
        self.value = max(0.0, round(self.value - VALUE_STEP, 10))
        self._changed()
        return self.value

    # --- output ---

    @property
    def rgb(self) -> tuple[int, int, int]:
        return hsv_to_rgb(self.hue, self.saturation, self.value)

    @property
    def hex(self) -> str:
        return hsv_to_hex(self.hue, self.saturation, self.value)

    @property
    def brightness_label(self) -> str:
        return "Brightness: %d%%" % int(self.value * 100 + 1e-9)

    def _invert_for(self, night_mode: bool) -> bool:
        return bool(night_mode and self.invert_in_night_mode)

    def preview_rgb(self, night_mode: bool = False) -> tuple[int, int, int]:
        """Color swatch as it should be painted; pre-inverted when the screen is inverted."""
        rgb = self.rgb
        return invert_rgb(rgb) if self._invert_for(night_mode) else rgb

    def render(self, night_mode: bool = False) -> np.ndarray:
        """RGBA wheel grid for the current brightness."""
        return sample_wheel_color(self.radius, self.value, invert=self._invert_for(night_mode))

    def apply(self) -> str:
        color = self.hex
        logger.debug("Color picker applied %s", color)
        if self.on_apply:
            self.on_apply(color)
        return color

    def cancel(self) -> None:
        self.state = PickerState.IDLE
        if self.on_cancel:
            self.on_cancel()

    def _changed(self) -> None:
        if self.on_change:
            self.on_change(self.hue, self.saturation, self.value)
