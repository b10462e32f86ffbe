from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import List, Optional

import yaml

from ..errors import SettingsError
from ..grid.layout import MIN_SIZE

logger = logging.getLogger(__name__)


@dataclass
class WindowSettings:
    title: str = "Pixel Restaurant"
    cell_px: int = 32
    padding_px: int = 8
    header_px: int = 72
    footer_px: int = 96


@dataclass
class SceneSettings:
    size: int = 15


@dataclass
class TimingSettings:
    show_path_seconds: float = 1.0
    step_interval_seconds: float = 0.2
    follower_lags: List[int] = field(default_factory=lambda: [0, 1, 2])


@dataclass
class Settings:
    window: WindowSettings = field(default_factory=WindowSettings)
    scene: SceneSettings = field(default_factory=SceneSettings)
    timing: TimingSettings = field(default_factory=TimingSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise SettingsError(f"Could not read settings from {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        sections = {"window": WindowSettings, "scene": SceneSettings, "timing": TimingSettings}
        unknown = set(data) - set(sections)
        if unknown:
            raise SettingsError(f"Unknown settings sections: {sorted(unknown)}")
        built = {}
        for name, section_cls in sections.items():
            try:
                built[name] = section_cls(**(data.get(name) or {}))
            except TypeError as exc:
                raise SettingsError(f"Invalid keys in settings section '{name}': {exc}") from exc
        settings = cls(**built)
        settings.validate()
        return settings

    def validate(self) -> None:
        """Raise SettingsError for values the scene or procession cannot use."""
        if not _is_int(self.scene.size) or self.scene.size < MIN_SIZE:
            raise SettingsError(f"scene.size must be an integer >= {MIN_SIZE}, got {self.scene.size!r}")
        for name in ("cell_px", "padding_px", "header_px", "footer_px"):
            value = getattr(self.window, name)
            if not _is_int(value) or value < 0:
                raise SettingsError(f"window.{name} must be a non-negative integer, got {value!r}")
        for name in ("show_path_seconds", "step_interval_seconds"):
            value = getattr(self.timing, name)
            if not _is_number(value) or value < 0:
                raise SettingsError(f"timing.{name} must be a non-negative number, got {value!r}")
        lags = self.timing.follower_lags
        if not isinstance(lags, list) or not lags or not all(_is_int(lag) and lag >= 0 for lag in lags):
            raise SettingsError(f"timing.follower_lags must be a non-empty list of non-negative integers, got {lags!r}")

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files("pixel_restaurant.config").joinpath("default_settings.yaml").open(
                "r", encoding="utf-8"
            ) as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(dataclasses.asdict(self), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
