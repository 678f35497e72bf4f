"""
Tests for session statistics and accuracy metrics.
"""

import pytest

from click_accuracy.game_core.scoring import (
    SessionStatistics,
    StatisticsReport,
    STAT_FIELDS,
    percentage,
)


def make_stats(targets=0, hits=0, clicks=0):
    stats = SessionStatistics()
    for _ in range(targets):
        stats.record_spawn()
    for _ in range(hits):
        stats.record_hit()
    for _ in range(clicks):
        stats.record_click()
    return stats


class TestAccuracy:
    """Test derived accuracy percentages."""

    def test_click_accuracy_no_clicks_is_zero(self):
        """No clicks should give 0, not an error."""
        stats = make_stats(hits=0, clicks=0)
        assert stats.click_accuracy == 0

    def test_click_accuracy_three_of_four(self):
        stats = make_stats(hits=3, clicks=4)
        assert stats.click_accuracy == 75

    def test_target_accuracy_two_of_five(self):
        stats = make_stats(targets=5, hits=2)
        assert stats.target_accuracy == 40

    def test_target_accuracy_no_targets_is_zero(self):
        """No spawned targets should give 0."""
        stats = make_stats(targets=0, hits=0, clicks=3)
        assert stats.target_accuracy == 0

    def test_halves_round_up(self):
        """12.5% should display as 13."""
        assert percentage(1, 8) == 13
        assert percentage(1, 3) == 33
        assert percentage(2, 3) == 67

    def test_perfect_accuracy(self):
        stats = make_stats(targets=4, hits=4, clicks=4)
        assert stats.click_accuracy == 100
        assert stats.target_accuracy == 100


class TestSessionStatistics:
    """Test counters and reports."""

    def test_starts_at_zero(self):
        stats = SessionStatistics()
        assert stats.targets_spawned == 0
        assert stats.hits == 0
        assert stats.clicks == 0

    def test_reset_clears_counters(self):
        stats = make_stats(targets=6, hits=2, clicks=9)

        stats.reset()

        assert (stats.targets_spawned, stats.hits, stats.clicks) == (0, 0, 0)

    def test_report_snapshot(self):
        stats = make_stats(targets=5, hits=2, clicks=4)

        report = stats.report()

        assert report == StatisticsReport(
            targets=5, hits=2, target_accuracy=40, clicks=4, click_accuracy=50
        )

    def test_report_is_independent_of_later_updates(self):
        stats = make_stats(targets=1, hits=1, clicks=1)
        report = stats.report()

        stats.record_click()

        assert report.clicks == 1

    def test_display_fields_order(self):
        report = make_stats(targets=2, hits=1, clicks=2).report()

        fields = report.display_fields()

        assert tuple(fields) == STAT_FIELDS
        assert fields == {
            "targets": 2,
            "hits": 1,
            "target_accuracy": 50,
            "clicks": 2,
            "click_accuracy": 50,
        }

    def test_report_is_frozen(self):
        report = SessionStatistics().report()
        with pytest.raises(Exception):
            report.hits = 5
