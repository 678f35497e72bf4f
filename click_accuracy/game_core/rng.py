"""
RNG - Target Positions
======================

Provides seedable target placement. Each coordinate is drawn independently
and uniformly from the configured integer range.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple

from click_accuracy.game_core.config_loader import GameConfig, get_config


@dataclass(frozen=True)
class TargetPosition:
    """Percentage offsets of a target within the play area."""
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


class TargetGenerator:
    """
    Uniform random target placement.

    Both coordinates are sampled from [coordinate_min, coordinate_max]
    inclusive (default [0, 75]), so a target drawn at the upper bound still
    fits inside the play area.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize target generator.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Random if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._low, self._high = config.coordinate_range
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def coordinate_range(self) -> Tuple[int, int]:
        """Inclusive (min, max) coordinate range."""
        return (self._low, self._high)

    def _coordinate(self) -> int:
        return self._rng.randint(self._low, self._high)

    def generate(self) -> TargetPosition:
        """Draw a new target position."""
        x = self._coordinate()
        y = self._coordinate()
        return TargetPosition(x=x, y=y)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Restart the sequence.

        Args:
            seed: New random seed. Keeps current if None.
        """
        if seed is not None:
            self._seed = seed
        self._rng = random.Random(self._seed)
