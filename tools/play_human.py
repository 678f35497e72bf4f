"""
Human Play Mode
================

Play Click Accuracy in a pygame window.

Controls:
    - Click Start (or Space/Enter): Begin a session
    - Click: Shoot at targets
    - R: Back to the start screen
    - ESC: Quit

Usage:
    python -m tools.play_human [--seed SEED] [--duration MS] [--width WIDTH] [--height HEIGHT]
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from click_accuracy.game_core.config_loader import load_config, GameConfig
from click_accuracy.game_core.game import ClickGame, SessionResult
from click_accuracy.game_core.render_pygame import PygameSurface
from click_accuracy.game_core.results import save_session_result
from click_accuracy.game_core.views import ViewState


class HumanPlayer:
    """
    Interactive session runner.

    The pygame frame clock drives the game's timer queue, so spawn ticks and
    the end deadline fire on the same thread as input handling.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        window_width: Optional[int] = None,
        window_height: Optional[int] = None,
        target_fps: Optional[int] = None,
        duration_ms: Optional[int] = None,
        results_dir: Optional[str] = None,
        debug: bool = False
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        if config is None:
            config = load_config()

        self._config = config
        self._window_width = window_width or config.display.window_width
        self._window_height = window_height or config.display.window_height
        self._target_fps = target_fps or config.display.fps
        self._duration_ms = duration_ms
        self._results_dir = results_dir
        self._sessions_played = 0

        # Initialize pygame
        pygame.init()
        self._screen = pygame.display.set_mode((self._window_width, self._window_height))
        pygame.display.set_caption("Click Accuracy")
        self._clock = pygame.time.Clock()

        # Surface + game
        self._surface = PygameSurface(config, (self._window_width, self._window_height))
        self._game = ClickGame(
            surface=self._surface,
            config=config,
            seed=seed,
            on_session_end=self._on_session_end,
            debug=debug
        )

        self._running = True

    def run(self) -> int:
        """Run the game loop. Returns the number of finished sessions."""
        print("=== Click Accuracy ===")
        print("Click Start (or press Space) and hit as many targets as you can")
        print("R to return to the start screen, ESC to quit")
        print()

        while self._running:
            dt = self._clock.tick(self._target_fps)
            self._handle_events()
            self._game.scheduler.advance(dt)
            self._render()

        pygame.quit()
        return self._sessions_played

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key == pygame.K_r:
                    self._game.reset()
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    if self._game.view != ViewState.PLAYING:
                        self._start()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self._game.view == ViewState.PLAYING:
                    self._surface.dispatch_pointer_down(event.pos)
                elif self._surface.is_start_button(event.pos):
                    self._start()

    def _start(self) -> None:
        self._game.start(self._duration_ms)

    def _on_session_end(self, result: SessionResult) -> None:
        self._sessions_played += 1
        report = result.report
        print(f"Session {self._sessions_played}: "
              f"{report.hits}/{report.targets} targets ({report.target_accuracy}%), "
              f"{report.clicks} clicks ({report.click_accuracy}%)")

        if self._results_dir is not None:
            try:
                save_session_result(result, directory=self._results_dir)
            except OSError as e:
                print(f"Could not save results: {e}")

    def _render(self) -> None:
        """Render the game."""
        self._surface.render(self._screen, self._game.get_render_data())
        pygame.display.flip()


def main():
    parser = argparse.ArgumentParser(description="Play Click Accuracy interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--duration", type=int, default=None,
                        help="Session length in ms (default: from config)")
    parser.add_argument("--width", type=int, default=None, help="Window width (default: from config)")
    parser.add_argument("--height", type=int, default=None, help="Window height (default: from config)")
    parser.add_argument("--fps", type=int, default=None, help="Target FPS")
    parser.add_argument("--config", type=str, default=None, help="Path to a game_config.yaml")
    parser.add_argument("--save-results", nargs="?", const=".", default=None, metavar="DIR",
                        help="Save each finished session as JSON (default dir: current)")
    parser.add_argument("--debug", action="store_true", help="Print debug output")

    args = parser.parse_args()

    try:
        config = load_config(args.config)
        player = HumanPlayer(
            config=config,
            seed=args.seed,
            window_width=args.width,
            window_height=args.height,
            target_fps=args.fps,
            duration_ms=args.duration,
            results_dir=args.save_results,
            debug=args.debug
        )
        sessions = player.run()
        print(f"\nSessions played: {sessions}")
        return 0
    except (ImportError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
