"""
Tests for the cooperative timer queue.
"""

import pytest

from click_accuracy.game_core.scheduler import TimerQueue


class TestTimerQueue:
    """Test interval and timeout scheduling."""

    def test_timeout_fires_once(self):
        timers = TimerQueue()
        calls = []
        timers.set_timeout(lambda: calls.append(timers.now_ms), 100)

        timers.advance(99)
        assert calls == []

        timers.advance(1)
        timers.advance(500)
        assert calls == [100]
        assert timers.pending == 0

    def test_interval_repeats(self):
        timers = TimerQueue()
        calls = []
        timers.set_interval(lambda: calls.append(timers.now_ms), 500)

        timers.advance(1600)

        assert calls == [500, 1000, 1500]
        assert timers.now_ms == 1600

    def test_small_steps_match_one_big_step(self):
        """Frame-sized advances should fire the same callbacks."""
        a, b = TimerQueue(), TimerQueue()
        calls_a, calls_b = [], []
        a.set_interval(lambda: calls_a.append(a.now_ms), 500)
        b.set_interval(lambda: calls_b.append(b.now_ms), 500)

        a.advance(3000)
        for _ in range(181):
            b.advance(1000 / 60)

        assert len(calls_a) == len(calls_b) == 6

    def test_same_instant_fires_in_creation_order(self):
        timers = TimerQueue()
        order = []
        timers.set_interval(lambda: order.append("interval"), 500)
        timers.set_timeout(lambda: order.append("timeout"), 1000)

        timers.advance(1000)

        assert order == ["interval", "interval", "timeout"]

    def test_cancel(self):
        timers = TimerQueue()
        calls = []
        handle = timers.set_interval(lambda: calls.append(1), 10)

        assert timers.cancel(handle)
        assert not timers.cancel(handle)
        assert not timers.cancel(None)

        timers.advance(100)
        assert calls == []

    def test_cancel_from_callback(self):
        """A timer cancelled inside another callback should not fire again."""
        timers = TimerQueue()
        calls = []
        interval = timers.set_interval(lambda: calls.append("tick"), 500)
        timers.set_timeout(lambda: timers.cancel(interval), 1000)

        timers.advance(5000)

        assert calls == ["tick", "tick"]
        assert timers.pending == 0

    def test_invalid_arguments(self):
        timers = TimerQueue()

        with pytest.raises(ValueError):
            timers.set_interval(lambda: None, 0)
        with pytest.raises(ValueError):
            timers.set_timeout(lambda: None, -1)
        with pytest.raises(ValueError):
            timers.advance(-5)
