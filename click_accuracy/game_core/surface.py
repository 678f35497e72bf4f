"""
Render Surface
==============

The display capability the game controller draws through. The controller never
touches a window directly; it adds and removes targets, clears the play area
and writes the final statistics through this interface.

HeadlessSurface keeps everything in memory and is used by tests and by
anything that wants to drive sessions without a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from click_accuracy.game_core.rng import TargetPosition
from click_accuracy.game_core.scoring import STAT_FIELDS


# Receives the uid of the clicked element, or None for empty play area
PointerHandler = Callable[[Optional[int]], None]


@dataclass(frozen=True)
class Target:
    """A clickable marker on the play area."""
    uid: int
    position: TargetPosition

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y


class RenderSurface:
    """
    Base interface surfaces implement.

    Owns the single pointer-down handler slot: binding a new handler replaces
    the previous one.
    """

    def __init__(self):
        self._pointer_handler: Optional[PointerHandler] = None

    def add_target(self, target: Target) -> None:
        """Show a target at its position."""
        raise NotImplementedError

    def remove_target(self, uid: int) -> bool:
        """Remove a target. Returns False if no such target is shown."""
        raise NotImplementedError

    def clear(self) -> None:
        """Remove every target from the play area."""
        raise NotImplementedError

    def write_stat(self, name: str, value: int) -> None:
        """Write a value into the named results field."""
        raise NotImplementedError

    @property
    def pointer_handler(self) -> Optional[PointerHandler]:
        return self._pointer_handler

    def bind_pointer_down(self, handler: Optional[PointerHandler]) -> None:
        """Set (or with None, remove) the play-area pointer-down handler."""
        self._pointer_handler = handler

    def pointer_down(self, uid: Optional[int]) -> None:
        """Deliver a pointer-down on element `uid` (None for background)."""
        if self._pointer_handler is not None:
            self._pointer_handler(uid)


class HeadlessSurface(RenderSurface):
    """In-memory surface recording targets and written statistics."""

    def __init__(self):
        super().__init__()
        self._targets: Dict[int, Target] = {}
        self._stats: Dict[str, int] = {}
        self._write_counts: Dict[str, int] = {name: 0 for name in STAT_FIELDS}

    @property
    def targets(self) -> List[Target]:
        """Visible targets, oldest first."""
        return list(self._targets.values())

    @property
    def target_count(self) -> int:
        return len(self._targets)

    @property
    def stats(self) -> Dict[str, int]:
        """Results fields written so far."""
        return dict(self._stats)

    def write_count(self, name: str) -> int:
        """How many times a results field has been written."""
        return self._write_counts[name]

    def add_target(self, target: Target) -> None:
        self._targets[target.uid] = target

    def remove_target(self, uid: int) -> bool:
        return self._targets.pop(uid, None) is not None

    def clear(self) -> None:
        self._targets.clear()

    def write_stat(self, name: str, value: int) -> None:
        if name not in self._write_counts:
            raise KeyError(f"Unknown statistic field: {name}")
        self._stats[name] = value
        self._write_counts[name] += 1

    def click(self, uid: Optional[int] = None) -> None:
        """Simulate a click on a target (or on empty play area)."""
        self.pointer_down(uid)
