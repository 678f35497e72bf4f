"""
Timer Queue
===========

Cooperative millisecond clock for the game loop. Callers drive it with
`advance(dt_ms)` (the pygame frame clock, or explicit steps in tests) and due
callbacks fire in order on the caller's thread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass
class _Timer:
    handle: int
    due_ms: float
    callback: Callable[[], None]
    period_ms: Optional[float] = None   # None for one-shot timers

    @property
    def repeating(self) -> bool:
        return self.period_ms is not None


class TimerQueue:
    """
    Interval and timeout scheduling against a virtual clock.

    Timers due at the same instant fire in the order they were created.
    A timer cancelled from inside another callback does not fire afterwards.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now_ms: float = float(start_ms)
        self._timers: Dict[int, _Timer] = {}
        self._next_handle: int = 1

    @property
    def now_ms(self) -> float:
        """Current clock time in milliseconds."""
        return self._now_ms

    @property
    def pending(self) -> int:
        """Number of live timers."""
        return len(self._timers)

    def _add(self, callback: Callable[[], None], due_ms: float, period_ms: Optional[float]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._timers[handle] = _Timer(handle, due_ms, callback, period_ms)
        return handle

    def set_interval(self, callback: Callable[[], None], period_ms: float) -> int:
        """
        Call `callback` every `period_ms` milliseconds until cancelled.

        Returns:
            Handle for `cancel`.
        """
        if period_ms <= 0:
            raise ValueError(f"Interval period must be positive, got {period_ms}")
        return self._add(callback, self._now_ms + period_ms, float(period_ms))

    def set_timeout(self, callback: Callable[[], None], delay_ms: float) -> int:
        """
        Call `callback` once after `delay_ms` milliseconds.

        Returns:
            Handle for `cancel`.
        """
        if delay_ms < 0:
            raise ValueError(f"Timeout delay must be non-negative, got {delay_ms}")
        return self._add(callback, self._now_ms + delay_ms, None)

    def cancel(self, handle: Optional[int]) -> bool:
        """Cancel a timer. Returns False if it was unknown or already done."""
        if handle is None:
            return False
        return self._timers.pop(handle, None) is not None

    def _next_due(self) -> Optional[_Timer]:
        if not self._timers:
            return None
        return min(self._timers.values(), key=lambda t: (t.due_ms, t.handle))

    def advance(self, dt_ms: float) -> int:
        """
        Move the clock forward, firing every timer that comes due.

        Args:
            dt_ms: Milliseconds to advance.

        Returns:
            Number of callbacks fired.
        """
        if dt_ms < 0:
            raise ValueError(f"Cannot advance clock backwards ({dt_ms}ms)")

        target_ms = self._now_ms + dt_ms
        fired = 0

        while True:
            timer = self._next_due()
            if timer is None or timer.due_ms > target_ms:
                break

            self._now_ms = timer.due_ms
            if timer.repeating:
                timer.due_ms += timer.period_ms
            else:
                del self._timers[timer.handle]

            timer.callback()
            fired += 1

        self._now_ms = target_ms
        return fired
