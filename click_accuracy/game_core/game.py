"""
Core Game
=========

Session controller combining target spawning, click handling, statistics,
timers and view switching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from click_accuracy.game_core.config_loader import GameConfig, get_config
from click_accuracy.game_core.rng import TargetGenerator
from click_accuracy.game_core.scheduler import TimerQueue
from click_accuracy.game_core.scoring import SessionStatistics, StatisticsReport
from click_accuracy.game_core.surface import RenderSurface, Target
from click_accuracy.game_core.views import ViewState, ViewSwitcher


@dataclass
class SessionResult:
    """Outcome of one finished session."""
    report: StatisticsReport
    duration_ms: int
    seed: Optional[int]
    started_at_ms: float
    ended_at_ms: float

    @property
    def elapsed_ms(self) -> float:
        return self.ended_at_ms - self.started_at_ms

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "duration_ms": self.duration_ms,
            "started_at_ms": self.started_at_ms,
            "ended_at_ms": self.ended_at_ms,
            "statistics": self.report.display_fields(),
        }


class ClickGame:
    """
    Main session controller.

    Orchestrates:
    - Target generator (RNG)
    - Session statistics
    - Spawn interval and end deadline on the timer queue
    - View switching
    - The render surface (targets, pointer handler, results fields)

    One session = start(), spawn ticks until the deadline, end().
    """

    def __init__(
        self,
        surface: RenderSurface,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        scheduler: Optional[TimerQueue] = None,
        on_session_end: Optional[Callable[[SessionResult], None]] = None,
        debug: bool = False
    ):
        """
        Initialize game.

        Args:
            surface: Where targets and statistics are displayed.
            config: Game configuration. Uses default if None.
            seed: Random seed for target placement.
            scheduler: Timer queue driving the session. A fresh one if None.
            on_session_end: Optional callback receiving each finished session.
            debug: Print diagnostic lines.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._surface = surface
        self._seed = seed
        self._scheduler = scheduler if scheduler is not None else TimerQueue()
        self._on_session_end = on_session_end
        self._debug = debug

        # Subsystems
        self._generator = TargetGenerator(config, seed)
        self._statistics = SessionStatistics()
        self._views = ViewSwitcher(ViewState.IDLE)
        self._views.add_listener(self._on_view_change)

        # Session state
        self._spawn_period_ms: int = config.session.spawn_period_ms
        self._max_targets: Optional[int] = config.session.max_targets
        self._targets: Dict[int, Target] = {}
        self._next_uid: int = 1
        self._spawn_handle: Optional[int] = None
        self._end_handle: Optional[int] = None
        self._running: bool = False
        self._duration_ms: int = 0
        self._started_at_ms: float = 0.0
        self._last_result: Optional[SessionResult] = None

    @property
    def config(self) -> GameConfig:
        """Game configuration."""
        return self._config

    @property
    def surface(self) -> RenderSurface:
        return self._surface

    @property
    def scheduler(self) -> TimerQueue:
        """The timer queue; advance it to run the session."""
        return self._scheduler

    @property
    def statistics(self) -> SessionStatistics:
        """Live counters for the current (or last) session."""
        return self._statistics

    @property
    def views(self) -> ViewSwitcher:
        return self._views

    @property
    def view(self) -> ViewState:
        """Currently active view."""
        return self._views.active

    @property
    def is_running(self) -> bool:
        """True while a session is in progress."""
        return self._running

    @property
    def active_targets(self) -> Dict[int, Target]:
        """Targets currently on the play area, by uid."""
        return dict(self._targets)

    @property
    def time_remaining_ms(self) -> float:
        """Milliseconds until the session ends (0 when not running)."""
        if not self._running:
            return 0.0
        deadline = self._started_at_ms + self._duration_ms
        return max(0.0, deadline - self._scheduler.now_ms)

    @property
    def last_result(self) -> Optional[SessionResult]:
        """Result of the most recently finished session."""
        return self._last_result

    def _log(self, message: str) -> None:
        if self._debug:
            print(f"[DEBUG] {message}")

    def _on_view_change(self, previous: ViewState, current: ViewState) -> None:
        self._log(f"View: {previous.value} -> {current.value}")

    def start(self, duration: Optional[int] = None) -> None:
        """
        Begin a new session.

        A session already in progress is abandoned: its timers are cancelled
        and its targets removed, and no results are written for it.

        Args:
            duration: Session length in milliseconds. Uses the configured
                default if None.

        Raises:
            ValueError: If duration is not a positive integer.
        """
        if duration is None:
            duration = self._config.session.duration_ms
        if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
            raise ValueError(f"Session duration must be a positive integer (ms), got {duration!r}")

        if self._running:
            self._log("start() during a running session, superseding it")
            self._abandon_session()

        self._statistics.reset()
        self._views.activate(ViewState.PLAYING)

        self._duration_ms = duration
        self._started_at_ms = self._scheduler.now_ms
        self._running = True

        self._spawn_handle = self._scheduler.set_interval(self._spawn_tick, self._spawn_period_ms)
        self._surface.bind_pointer_down(self.pointer_down)
        self._end_handle = self._scheduler.set_timeout(self.end, duration)

        self._log(f"Session started: duration={duration}ms period={self._spawn_period_ms}ms")

    def _abandon_session(self) -> None:
        self._scheduler.cancel(self._spawn_handle)
        self._scheduler.cancel(self._end_handle)
        self._spawn_handle = None
        self._end_handle = None
        self._surface.clear()
        self._targets.clear()
        self._running = False

    def _spawn_tick(self) -> None:
        """Place one new target."""
        if self._max_targets is not None and len(self._targets) >= self._max_targets:
            self._log(f"Spawn skipped: {len(self._targets)} targets at cap")
            return

        position = self._generator.generate()
        target = Target(uid=self._next_uid, position=position)
        self._next_uid += 1

        self._targets[target.uid] = target
        self._surface.add_target(target)
        self._statistics.record_spawn()

    def pointer_down(self, element: Optional[int]) -> bool:
        """
        Handle a pointer-down on the play area.

        Args:
            element: uid of the clicked element, or None for empty space.

        Returns:
            True if a target was hit.
        """
        self._statistics.record_click()

        if element is None or element not in self._targets:
            return False

        del self._targets[element]
        self._surface.remove_target(element)
        self._statistics.record_hit()
        return True

    def end(self) -> Optional[SessionResult]:
        """
        Finish the running session and publish its statistics.

        Returns:
            The session result. With no session running, returns the previous
            result (or None) and changes nothing.
        """
        if not self._running:
            return self._last_result

        self._views.activate(ViewState.RESULTS)

        # Cancel the spawn interval before clearing so no tick lands afterwards
        self._scheduler.cancel(self._spawn_handle)
        self._scheduler.cancel(self._end_handle)
        self._spawn_handle = None
        self._end_handle = None

        self._surface.clear()
        self._targets.clear()
        self._surface.bind_pointer_down(None)
        self._running = False

        report = self._statistics.report()
        for name, value in report.display_fields().items():
            self._surface.write_stat(name, value)

        result = SessionResult(
            report=report,
            duration_ms=self._duration_ms,
            seed=self._seed,
            started_at_ms=self._started_at_ms,
            ended_at_ms=self._scheduler.now_ms
        )
        self._last_result = result

        self._log(f"Session ended: {report!r}")

        if self._on_session_end is not None:
            self._on_session_end(result)

        return result

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Return to the idle view, abandoning any running session.

        Args:
            seed: New random seed. Uses previous if None.
        """
        if seed is not None:
            self._seed = seed
        if self._running:
            self._abandon_session()
        self._generator.reset(self._seed)
        self._statistics.reset()
        self._next_uid = 1
        self._last_result = None
        self._views.activate(ViewState.IDLE)

    def get_render_data(self) -> Dict[str, Any]:
        """
        Get data needed for rendering.

        Returns:
            Dict with view, targets and live counters.
        """
        return {
            "view": self._views.active.value,
            "targets": [
                {"uid": t.uid, "x": t.x, "y": t.y}
                for t in self._targets.values()
            ],
            "targets_spawned": self._statistics.targets_spawned,
            "hits": self._statistics.hits,
            "clicks": self._statistics.clicks,
            "time_remaining_ms": self.time_remaining_ms,
            "duration_ms": self._duration_ms,
        }
