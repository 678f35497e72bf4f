"""
Scoring System
==============

Tracks per-session counters and derives the two accuracy percentages.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict


# Display field names, in the order they are written at session end
STAT_FIELDS = ("targets", "hits", "target_accuracy", "clicks", "click_accuracy")


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, with exact halves rounding up."""
    return int(math.floor(value + 0.5))


def percentage(numerator: int, denominator: int) -> int:
    """
    Integer percentage of numerator over denominator.

    Returns 0 when the denominator is zero.
    """
    if denominator <= 0:
        return 0
    return _round_half_up(numerator / denominator * 100)


@dataclass(frozen=True)
class StatisticsReport:
    """End-of-session statistics, as shown on the results panel."""
    targets: int
    hits: int
    target_accuracy: int
    clicks: int
    click_accuracy: int

    def display_fields(self) -> Dict[str, int]:
        """Field name -> value, in display order."""
        return {name: getattr(self, name) for name in STAT_FIELDS}

    def __repr__(self) -> str:
        return (
            f"StatisticsReport(hits={self.hits}/{self.targets} targets "
            f"({self.target_accuracy}%), clicks={self.clicks} ({self.click_accuracy}%))"
        )


class SessionStatistics:
    """
    Counters for one session.

    Owned by the game controller; renderers only read them.
    """

    def __init__(self):
        self._targets_spawned: int = 0
        self._hits: int = 0
        self._clicks: int = 0

    @property
    def targets_spawned(self) -> int:
        """Targets spawned this session."""
        return self._targets_spawned

    @property
    def hits(self) -> int:
        """Targets clicked this session."""
        return self._hits

    @property
    def clicks(self) -> int:
        """All clicks on the play area this session."""
        return self._clicks

    @property
    def click_accuracy(self) -> int:
        """Hits as a percentage of clicks (0 with no clicks)."""
        return percentage(self._hits, self._clicks)

    @property
    def target_accuracy(self) -> int:
        """Hits as a percentage of spawned targets (0 with no targets)."""
        return percentage(self._hits, self._targets_spawned)

    def record_spawn(self) -> None:
        self._targets_spawned += 1

    def record_click(self) -> None:
        self._clicks += 1

    def record_hit(self) -> None:
        self._hits += 1

    def reset(self) -> None:
        """Reset all counters to zero."""
        self._targets_spawned = 0
        self._hits = 0
        self._clicks = 0

    def report(self) -> StatisticsReport:
        """Snapshot the counters and derived accuracies."""
        return StatisticsReport(
            targets=self._targets_spawned,
            hits=self._hits,
            target_accuracy=self.target_accuracy,
            clicks=self._clicks,
            click_accuracy=self.click_accuracy
        )
