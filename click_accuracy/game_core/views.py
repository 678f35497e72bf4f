"""
Views
=====

Which UI panel is visible: the idle start screen, the play area, or the
results panel. Exactly one view is active at a time.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional, Union


class ViewState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    RESULTS = "results"


ViewListener = Callable[[ViewState, ViewState], None]


def _lookup(view: Union[ViewState, str]) -> Optional[ViewState]:
    if isinstance(view, ViewState):
        return view
    try:
        return ViewState(str(view).lower())
    except ValueError:
        return None


class ViewSwitcher:
    """
    Single active-view state.

    `activate` is the only setter, so hiding the previous view and showing the
    next one always happen together.
    """

    def __init__(self, initial: ViewState = ViewState.IDLE):
        self._active: ViewState = initial
        self._listeners: List[ViewListener] = []

    @property
    def active(self) -> ViewState:
        """The currently visible view."""
        return self._active

    def is_active(self, view: Union[ViewState, str]) -> bool:
        return _lookup(view) is self._active

    def add_listener(self, listener: ViewListener) -> None:
        """Register a callback receiving (previous, current) on every switch."""
        self._listeners.append(listener)

    def activate(self, view: Union[ViewState, str]) -> bool:
        """
        Make `view` the only visible view.

        Args:
            view: A ViewState or its name ("idle", "playing", "results").

        Returns:
            True if the view was activated, False if the name is unknown
            (the active view is left unchanged).
        """
        target = _lookup(view)
        if target is None:
            return False

        previous = self._active
        self._active = target
        for listener in self._listeners:
            listener(previous, target)
        return True
