"""
Pygame Surface
==============

RenderSurface backed by pygame. Draws the idle, playing and results panels,
maps mouse positions onto targets, and supports headless RGB output.
"""

from __future__ import annotations

from typing import Dict, Any, Optional, Tuple, List

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

import numpy as np

from click_accuracy.game_core.config_loader import GameConfig, get_config
from click_accuracy.game_core.scoring import STAT_FIELDS
from click_accuracy.game_core.surface import RenderSurface, Target

STAT_LABELS = {
    "targets": "Targets",
    "hits": "Hits",
    "target_accuracy": "Target accuracy",
    "clicks": "Clicks",
    "click_accuracy": "Click accuracy",
}

PERCENT_FIELDS = ("target_accuracy", "click_accuracy")


class PygameSurface(RenderSurface):
    """
    Pygame implementation of the render surface.

    Target coordinates are percentages of the play area and place the target's
    top-left corner, so a target at the maximum coordinate stays fully inside.
    Later targets are drawn on top and win hit tests.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        window_size: Optional[Tuple[int, int]] = None
    ):
        """
        Initialize surface.

        Args:
            config: Game configuration.
            window_size: (width, height) override for the configured window.
        """
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame is required for PygameSurface")

        super().__init__()

        if config is None:
            config = get_config()

        self._config = config
        self._width, self._height = window_size or config.window_size

        if not pygame.get_init():
            pygame.init()

        pygame.font.init()
        self._font = pygame.font.Font(None, 30)
        self._font_large = pygame.font.Font(None, 56)
        self._font_small = pygame.font.Font(None, 22)

        display = config.display
        self._bg_color = display.background_color
        self._area_color = display.play_area_color
        self._text_color = display.text_color
        self._accent_color = display.accent_color
        self._target_color = config.target.color
        self._ring_color = config.target.ring_color
        self._radius = config.target.radius

        margin = 16
        self._play_area = pygame.Rect(
            margin,
            display.hud_height,
            self._width - 2 * margin,
            self._height - display.hud_height - margin
        )
        self._start_button = pygame.Rect(0, 0, 220, 64)
        self._start_button.center = (self._width // 2, self._height * 2 // 3)

        self._targets: Dict[int, Target] = {}
        self._stats: Dict[str, int] = {}

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def play_area(self) -> "pygame.Rect":
        """Rectangle receiving targets and pointer events."""
        return self._play_area.copy()

    @property
    def start_button(self) -> "pygame.Rect":
        return self._start_button.copy()

    @property
    def stats(self) -> Dict[str, int]:
        return dict(self._stats)

    @property
    def targets(self) -> List[Target]:
        return list(self._targets.values())

    # ------------- RenderSurface -------------
    def add_target(self, target: Target) -> None:
        self._targets[target.uid] = target

    def remove_target(self, uid: int) -> bool:
        return self._targets.pop(uid, None) is not None

    def clear(self) -> None:
        self._targets.clear()

    def write_stat(self, name: str, value: int) -> None:
        if name not in STAT_LABELS:
            raise KeyError(f"Unknown statistic field: {name}")
        self._stats[name] = value

    # ------------- geometry -------------
    def target_center(self, target: Target) -> Tuple[int, int]:
        """Pixel center of a target."""
        area = self._play_area
        left = area.x + area.width * target.x / 100.0
        top = area.y + area.height * target.y / 100.0
        return (int(left + self._radius), int(top + self._radius))

    def target_at(self, pos: Tuple[int, int]) -> Optional[int]:
        """uid of the topmost target under `pos`, or None."""
        px, py = pos
        r2 = self._radius * self._radius
        for target in reversed(list(self._targets.values())):
            cx, cy = self.target_center(target)
            dx = px - cx
            dy = py - cy
            if dx * dx + dy * dy <= r2:
                return target.uid
        return None

    def dispatch_pointer_down(self, pos: Tuple[int, int]) -> bool:
        """
        Route a mouse press to the bound handler.

        Presses outside the play area are ignored.

        Returns:
            True if the press was delivered to a handler.
        """
        if self.pointer_handler is None or not self._play_area.collidepoint(pos):
            return False
        self.pointer_down(self.target_at(pos))
        return True

    def is_start_button(self, pos: Tuple[int, int]) -> bool:
        return self._start_button.collidepoint(pos)

    # ------------- drawing -------------
    def render(self, screen: "pygame.Surface", render_data: Dict[str, Any]) -> None:
        """Draw the active view onto `screen`."""
        screen.fill(self._bg_color)

        view = render_data.get("view", "idle")
        if view == "playing":
            self._draw_playing(screen, render_data)
        elif view == "results":
            self._draw_results(screen)
        else:
            self._draw_idle(screen)

    def render_array(self, render_data: Dict[str, Any]) -> np.ndarray:
        """
        Render off-screen to an RGB array.

        Returns:
            (height, width, 3) uint8 array.
        """
        surface = pygame.Surface((self._width, self._height))
        self.render(surface, render_data)
        array = pygame.surfarray.array3d(surface)
        return np.transpose(array, (1, 0, 2))

    def _blit_centered(self, screen, text: str, font, y: int, color=None) -> None:
        rendered = font.render(text, True, color or self._text_color)
        screen.blit(rendered, ((self._width - rendered.get_width()) // 2, y))

    def _draw_start_button(self, screen, label: str) -> None:
        pygame.draw.rect(screen, self._accent_color, self._start_button, border_radius=10)
        text = self._font.render(label, True, self._bg_color)
        screen.blit(text, text.get_rect(center=self._start_button.center))

    def _draw_idle(self, screen) -> None:
        self._blit_centered(screen, "Click Accuracy", self._font_large, self._height // 4)
        self._blit_centered(
            screen, "Click the targets before they pile up",
            self._font_small, self._height // 4 + 60
        )
        self._draw_start_button(screen, "Start")

    def _draw_playing(self, screen, render_data: Dict[str, Any]) -> None:
        pygame.draw.rect(screen, self._area_color, self._play_area, border_radius=6)

        for target in self._targets.values():
            center = self.target_center(target)
            pygame.draw.circle(screen, self._target_color, center, self._radius)
            pygame.draw.circle(screen, self._ring_color, center, self._radius, width=2)
            pygame.draw.circle(screen, self._ring_color, center, max(2, self._radius // 4))

        remaining = render_data.get("time_remaining_ms", 0.0) / 1000.0
        hud = (
            f"Time {remaining:4.1f}s   "
            f"Hits {render_data.get('hits', 0)}   "
            f"Clicks {render_data.get('clicks', 0)}"
        )
        text = self._font.render(hud, True, self._text_color)
        screen.blit(text, (self._play_area.x, (self._play_area.y - text.get_height()) // 2))

    def _draw_results(self, screen) -> None:
        self._blit_centered(screen, "Results", self._font_large, 40)

        y = 120
        for name in STAT_FIELDS:
            if name not in self._stats:
                continue
            value = self._stats[name]
            suffix = "%" if name in PERCENT_FIELDS else ""
            self._blit_centered(screen, f"{STAT_LABELS[name]}: {value}{suffix}", self._font, y)
            y += 40

        self._draw_start_button(screen, "Play again")
