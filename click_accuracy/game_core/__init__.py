"""
Click Accuracy Core - the headless game.

This module provides the session controller and all supporting systems
(target placement, statistics, timers, views, render surfaces).

Main exports:
- ClickGame: Session controller
- HeadlessSurface: In-memory render surface
- TimerQueue: Cooperative millisecond clock driving sessions
- GameConfig: Configuration loaded from game_config.yaml

The pygame front end lives in click_accuracy.game_core.render_pygame.
"""

from click_accuracy.game_core.config_loader import GameConfig, load_config
from click_accuracy.game_core.rng import TargetGenerator, TargetPosition
from click_accuracy.game_core.scoring import SessionStatistics, StatisticsReport, STAT_FIELDS
from click_accuracy.game_core.scheduler import TimerQueue
from click_accuracy.game_core.views import ViewState, ViewSwitcher
from click_accuracy.game_core.surface import RenderSurface, HeadlessSurface, Target
from click_accuracy.game_core.game import ClickGame, SessionResult
from click_accuracy.game_core.results import (
    save_session_result,
    load_session_result,
    generate_results_filename,
)

__all__ = [
    "GameConfig",
    "load_config",
    "TargetGenerator",
    "TargetPosition",
    "SessionStatistics",
    "StatisticsReport",
    "STAT_FIELDS",
    "TimerQueue",
    "ViewState",
    "ViewSwitcher",
    "RenderSurface",
    "HeadlessSurface",
    "Target",
    "ClickGame",
    "SessionResult",
    "save_session_result",
    "load_session_result",
    "generate_results_filename",
]
