"""
Load and expose patch settings (YAML). Replaces ad-hoc reads from the host's settings
store: every recognized key has a documented default, and components receive typed
settings objects at construction.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .color.convert import is_valid_hex

logger = logging.getLogger(__name__)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        logger.warning("Config %s is not a mapping; using defaults", path)
        return _defaults()
    return _merge(_defaults(), data)


def _defaults() -> dict[str, Any]:
    return {
        "theme": {
            "background_hex": "#FFFFFF",   # UI background color
            "background_inverted": True,   # let night mode invert the background
            "font_hex": "#000000",         # UI font color
            "font_inverted": True,         # let night mode invert the font color
        },
        "covers": {
            "radius": 24,
            "border_thickness": 1,
            "border_color": "#000000",
            "round_directories": False,
        },
        "folders": {
            "aspect_ratio": "2:3",  # folder cover frame, width:height or a number
            "fill": False,          # true fills the whole cell, ignoring aspect_ratio
            "stretch_limit": 50,    # percent of aspect mismatch stretched away instead of letterboxed
            "border": 1,            # outline thickness around the folder image
        },
        "borders": {
            "top": True,
            "bottom": True,
            "left": True,
            "right": True,
            "width": 1,
            "invert": False,  # black lines instead of white
        },
        "wheel": {
            "width_factor": 0.6,  # wheel dialog width as a fraction of the short screen side
            "invert_in_night_mode": True,
        },
    }


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """One-level-deep merge of override sections into base; unknown keys are dropped."""
    out = {section: dict(values) for section, values in base.items()}
    for section, values in override.items():
        if section not in out:
            logger.debug("Ignoring unknown config section %r", section)
            continue
        if not isinstance(values, dict):
            logger.warning("Config section %r must be a mapping; using defaults", section)
            continue
        for key, value in values.items():
            if key not in out[section]:
                logger.debug("Ignoring unknown config key %s.%s", section, key)
                continue
            out[section][key] = value
    return out


def _hex(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    if not is_valid_hex(value):
        logger.warning("Invalid color %r for %s; using %s", value, key, default)
        return default
    return value


def _int(section: dict[str, Any], key: str, default: int, minimum: int = 0) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < minimum:
        logger.warning("Invalid value %r for %s; using %s", value, key, default)
        return default
    return int(value)


def _float(section: dict[str, Any], key: str, default: float, lo: float, hi: float) -> float:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not lo <= value <= hi:
        logger.warning("Invalid value %r for %s; using %s", value, key, default)
        return default
    return float(value)


def _bool(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        logger.warning("Invalid value %r for %s; using %s", value, key, default)
        return default
    return value


def _ratio(section: dict[str, Any], key: str, default: float) -> float:
    """Positive number, or a "w:h" string such as "2:3"."""
    value = section.get(key, default)
    if isinstance(value, str) and value.count(":") == 1:
        w, _, h = value.partition(":")
        try:
            value = float(w) / float(h)
        except (ValueError, ZeroDivisionError):
            pass
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        logger.warning("Invalid value %r for %s; using %s", value, key, default)
        return default
    return float(value)


@dataclass(frozen=True)
class ThemeSettings:
    background_hex: str = "#FFFFFF"
    background_inverted: bool = True
    font_hex: str = "#000000"
    font_inverted: bool = True


@dataclass(frozen=True)
class CornerSettings:
    radius: int = 24
    border_thickness: int = 1
    border_color: str = "#000000"
    round_directories: bool = False


@dataclass(frozen=True)
class FolderSettings:
    aspect_ratio: float = 2 / 3
    fill: bool = False
    stretch_limit: int = 50
    border: int = 1


@dataclass(frozen=True)
class BorderSettings:
    top: bool = True
    bottom: bool = True
    left: bool = True
    right: bool = True
    width: int = 1
    invert: bool = False

    @property
    def any_enabled(self) -> bool:
        return self.top or self.bottom or self.left or self.right


@dataclass(frozen=True)
class WheelSettings:
    width_factor: float = 0.6
    invert_in_night_mode: bool = True


@dataclass(frozen=True)
class Settings:
    theme: ThemeSettings
    covers: CornerSettings
    folders: FolderSettings
    borders: BorderSettings
    wheel: WheelSettings


def settings_from_config(config: dict[str, Any]) -> Settings:
    """Typed settings from a loaded config dict. Invalid values fall back to defaults."""
    merged = _merge(_defaults(), config or {})
    theme, covers, borders, wheel = merged["theme"], merged["covers"], merged["borders"], merged["wheel"]
    folders = merged["folders"]
    return Settings(
        theme=ThemeSettings(
            background_hex=_hex(theme, "background_hex", ThemeSettings.background_hex),
            background_inverted=_bool(theme, "background_inverted", ThemeSettings.background_inverted),
            font_hex=_hex(theme, "font_hex", ThemeSettings.font_hex),
            font_inverted=_bool(theme, "font_inverted", ThemeSettings.font_inverted),
        ),
        covers=CornerSettings(
            radius=_int(covers, "radius", CornerSettings.radius),
            border_thickness=_int(covers, "border_thickness", CornerSettings.border_thickness, minimum=1),
            border_color=_hex(covers, "border_color", CornerSettings.border_color),
            round_directories=_bool(covers, "round_directories", CornerSettings.round_directories),
        ),
        folders=FolderSettings(
            aspect_ratio=_ratio(folders, "aspect_ratio", FolderSettings.aspect_ratio),
            fill=_bool(folders, "fill", FolderSettings.fill),
            stretch_limit=_int(folders, "stretch_limit", FolderSettings.stretch_limit),
            border=_int(folders, "border", FolderSettings.border, minimum=1),
        ),
        borders=BorderSettings(
            top=_bool(borders, "top", BorderSettings.top),
            bottom=_bool(borders, "bottom", BorderSettings.bottom),
            left=_bool(borders, "left", BorderSettings.left),
            right=_bool(borders, "right", BorderSettings.right),
            width=_int(borders, "width", BorderSettings.width, minimum=1),
            invert=_bool(borders, "invert", BorderSettings.invert),
        ),
        wheel=WheelSettings(
            width_factor=_float(wheel, "width_factor", WheelSettings.width_factor, 0.1, 1.0),
            invert_in_night_mode=_bool(wheel, "invert_in_night_mode", WheelSettings.invert_in_night_mode),
        ),
    )
