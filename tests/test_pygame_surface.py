"""
Tests for the pygame render surface (headless, dummy video driver).
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pytest

pygame = pytest.importorskip("pygame")

from click_accuracy.game_core.config_loader import load_config
from click_accuracy.game_core.game import ClickGame
from click_accuracy.game_core.render_pygame import PygameSurface
from click_accuracy.game_core.rng import TargetPosition
from click_accuracy.game_core.surface import Target


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def surface(config):
    surface = PygameSurface(config)
    yield surface
    pygame.quit()


class TestGeometry:
    """Test coordinate mapping and hit tests."""

    def test_targets_inside_play_area(self, surface, config):
        area = surface.play_area
        r = config.target.radius
        for x, y in ((0, 0), (75, 75), (0, 75), (75, 0)):
            cx, cy = surface.target_center(Target(1, TargetPosition(x, y)))
            assert area.left <= cx - r and cx + r <= area.right
            assert area.top <= cy - r and cy + r <= area.bottom

    def test_target_at_center(self, surface):
        target = Target(7, TargetPosition(30, 40))
        surface.add_target(target)

        assert surface.target_at(surface.target_center(target)) == 7

    def test_target_at_miss(self, surface):
        surface.add_target(Target(1, TargetPosition(0, 0)))

        assert surface.target_at(surface.play_area.bottomright) is None

    def test_topmost_target_wins(self, surface):
        surface.add_target(Target(1, TargetPosition(20, 20)))
        surface.add_target(Target(2, TargetPosition(20, 20)))

        center = surface.target_center(Target(0, TargetPosition(20, 20)))
        assert surface.target_at(center) == 2

    def test_unknown_stat_field(self, surface):
        with pytest.raises(KeyError):
            surface.write_stat("score", 10)


class TestWithGame:
    """Drive a session through the pygame surface."""

    def test_click_dispatch(self, surface, config):
        game = ClickGame(surface, config=config, seed=42)
        game.start(duration=2000)
        game.scheduler.advance(500)
        target = surface.targets[0]

        assert surface.dispatch_pointer_down(surface.target_center(target))
        assert game.statistics.hits == 1
        assert surface.targets == []

    def test_clicks_outside_play_area_ignored(self, surface, config):
        game = ClickGame(surface, config=config, seed=42)
        game.start(duration=2000)

        assert not surface.dispatch_pointer_down((0, 0))
        assert game.statistics.clicks == 0

    def test_results_written(self, surface, config):
        game = ClickGame(surface, config=config, seed=42)
        game.start(duration=1000)
        game.scheduler.advance(1000)

        assert surface.stats["targets"] == 2
        assert not surface.dispatch_pointer_down(surface.play_area.center)

    def test_render_every_view(self, surface, config):
        game = ClickGame(surface, config=config, seed=42)
        width, height = surface.size

        idle = surface.render_array(game.get_render_data())
        game.start(duration=1000)
        game.scheduler.advance(500)
        playing = surface.render_array(game.get_render_data())
        game.scheduler.advance(500)
        results = surface.render_array(game.get_render_data())

        for frame in (idle, playing, results):
            assert frame.shape == (height, width, 3)
            assert frame.dtype.name == "uint8"
        assert not (idle == playing).all()
