"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Optional

import yaml


@dataclass(frozen=True)
class SessionConfig:
    """Session timing and target limits."""
    duration_ms: int             # Default session length
    spawn_period_ms: int         # Interval between spawn ticks
    max_targets: Optional[int]   # Concurrent target cap, None for unbounded


@dataclass(frozen=True)
class SurfaceConfig:
    """Coordinate range for target positions (percent of the play area)."""
    coordinate_min: int
    coordinate_max: int


@dataclass(frozen=True)
class TargetConfig:
    """Target appearance."""
    radius: int
    color: Tuple[int, int, int]
    ring_color: Tuple[int, int, int]


@dataclass(frozen=True)
class DisplayConfig:
    """Window and palette for the pygame front end."""
    window_width: int
    window_height: int
    fps: int
    hud_height: int
    background_color: Tuple[int, int, int]
    play_area_color: Tuple[int, int, int]
    text_color: Tuple[int, int, int]
    accent_color: Tuple[int, int, int]


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    session: SessionConfig
    surface: SurfaceConfig
    target: TargetConfig
    display: DisplayConfig

    @property
    def coordinate_range(self) -> Tuple[int, int]:
        """Inclusive (min, max) range for target coordinates."""
        return (self.surface.coordinate_min, self.surface.coordinate_max)

    @property
    def window_size(self) -> Tuple[int, int]:
        """Window (width, height) in pixels."""
        return (self.display.window_width, self.display.window_height)


def _parse_color(color_data: List) -> Tuple[int, int, int]:
    """Parse RGB color from YAML."""
    if len(color_data) != 3:
        raise ValueError(f"Color must have 3 values [R, G, B], got {color_data}")
    return (int(color_data[0]), int(color_data[1]), int(color_data[2]))


def _parse_optional_int(value) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    session = config.session
    if session.duration_ms <= 0:
        raise ValueError(f"session.duration_ms must be positive, got {session.duration_ms}")
    if session.spawn_period_ms <= 0:
        raise ValueError(f"session.spawn_period_ms must be positive, got {session.spawn_period_ms}")
    if session.max_targets is not None and session.max_targets <= 0:
        raise ValueError(f"session.max_targets must be positive or null, got {session.max_targets}")

    # Coordinates are percentages of the play area
    lo, hi = config.coordinate_range
    if not 0 <= lo <= hi <= 100:
        raise ValueError(
            f"surface coordinates must satisfy 0 <= coordinate_min <= coordinate_max <= 100, "
            f"got [{lo}, {hi}]"
        )

    if config.target.radius <= 0:
        raise ValueError(f"target.radius must be positive, got {config.target.radius}")

    display = config.display
    if display.window_width <= 0 or display.window_height <= 0:
        raise ValueError(
            f"display window size must be positive, got {display.window_width}x{display.window_height}"
        )
    if not 0 <= display.hud_height < display.window_height:
        raise ValueError(
            f"display.hud_height ({display.hud_height}) must be within the window height "
            f"({display.window_height})"
        )
    if display.fps <= 0:
        raise ValueError(f"display.fps must be positive, got {display.fps}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f) or {}

    session_data = raw.get("session", {})
    session = SessionConfig(
        duration_ms=int(session_data.get("duration_ms", 10000)),
        spawn_period_ms=int(session_data.get("spawn_period_ms", 500)),
        max_targets=_parse_optional_int(session_data.get("max_targets"))
    )

    surface_data = raw.get("surface", {})
    surface = SurfaceConfig(
        coordinate_min=int(surface_data.get("coordinate_min", 0)),
        coordinate_max=int(surface_data.get("coordinate_max", 75))
    )

    target_data = raw.get("target", {})
    target = TargetConfig(
        radius=int(target_data.get("radius", 22)),
        color=_parse_color(target_data.get("color", [235, 90, 70])),
        ring_color=_parse_color(target_data.get("ring_color", [255, 235, 225]))
    )

    display_data = raw.get("display", {})
    display = DisplayConfig(
        window_width=int(display_data.get("window_width", 900)),
        window_height=int(display_data.get("window_height", 640)),
        fps=int(display_data.get("fps", 60)),
        hud_height=int(display_data.get("hud_height", 70)),
        background_color=_parse_color(display_data.get("background_color", [24, 26, 32])),
        play_area_color=_parse_color(display_data.get("play_area_color", [34, 38, 46])),
        text_color=_parse_color(display_data.get("text_color", [230, 230, 230])),
        accent_color=_parse_color(display_data.get("accent_color", [70, 180, 110]))
    )

    config = GameConfig(
        session=session,
        surface=surface,
        target=target,
        display=display
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
