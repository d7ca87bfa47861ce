"""Switching between views with a history to return through."""

from __future__ import annotations

from enum import Enum, auto


class View(Enum):
    TASK_LIST = auto()
    TASK_DETAIL = auto()
    REPORTS = auto()
    SETTINGS = auto()
    HELP = auto()


class NavigationHandler:
    """Tracks the current view and the views visited before it."""

    def __init__(self) -> None:
        self._current = View.TASK_LIST
        self._history: list[View] = []

    def navigate_to(self, view: View) -> None:
        """Show `view`, remembering the one it replaces."""
        self._history.append(self._current)
        self._current = view

    def go_back(self) -> bool:
        """Return to the previous view; False if there is none."""
        if not self._history:
            return False
        self._current = self._history.pop()
        return True

    def current_view(self) -> View:
        return self._current