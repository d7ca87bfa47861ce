"""Translation of key presses into application actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Action(Enum):
    """Something the user asked the application to do."""

    QUIT = auto()
    REFRESH = auto()
    HELP = auto()
    ADD_TASK = auto()
    EDIT_TASK = auto()
    DONE_TASK = auto()
    DELETE_TASK = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SELECT = auto()
    BACK = auto()
    FILTER = auto()
    CONTEXT = auto()
    REPORTS = auto()
    BACKSPACE = auto()
    NONE = auto()
    SPACE = auto()
    TAB = auto()


@dataclass(frozen=True)
class Character:
    """A typed character that carries no command of its own."""

    char: str


@dataclass(frozen=True)
class KeyEvent:
    """A key press.

    `code` is a single character for printable keys, or a key name such as
    "Esc", "Enter", "Up", "Down", "Left", "Right", "Tab", "BackTab",
    "Backspace", "Delete" or "F1".."F12".
    """

    code: str
    ctrl: bool = False

    @property
    def is_char(self) -> bool:
        return len(self.code) == 1


_FORM_KEYS = {
    "Esc": Action.BACK,
    "Enter": Action.SELECT,
    "Up": Action.MOVE_UP,
    "Down": Action.MOVE_DOWN,
    "Left": Action.MOVE_LEFT,
    "Right": Action.MOVE_RIGHT,
    "Tab": Action.TAB,
    "BackTab": Action.MOVE_UP,
    "Backspace": Action.BACKSPACE,
}

_LIST_NAMED_KEYS = {
    "F1": Action.HELP,
    "F5": Action.REFRESH,
    "Delete": Action.DELETE_TASK,
    "Up": Action.MOVE_UP,
    "Down": Action.MOVE_DOWN,
    "Left": Action.MOVE_LEFT,
    "Right": Action.MOVE_RIGHT,
    "Enter": Action.SELECT,
    "Esc": Action.BACK,
    "Tab": Action.TAB,
    "Backspace": Action.BACKSPACE,
}

_LIST_CHARS = {
    "q": Action.QUIT,
    "a": Action.ADD_TASK,
    "e": Action.EDIT_TASK,
    "d": Action.DONE_TASK,
    "/": Action.FILTER,
    "c": Action.CONTEXT,
    "r": Action.REPORTS,
    " ": Action.SPACE,
}


class InputHandler:
    """Maps key events to actions, depending on whether a form has focus."""

    def __init__(self, config: Any = None) -> None:
        self.config = config

    def handle_key_event(self, key: KeyEvent, in_form: bool = False) -> Action | Character:
        """The action a key press stands for."""
        if in_form:
            return self._form_action(key)
        return self._list_action(key)

    @staticmethod
    def _form_action(key: KeyEvent) -> Action | Character:
        if key.is_char:
            return Action.SPACE if key.code == " " else Character(key.code)
        return _FORM_KEYS.get(key.code, Action.NONE)

    @staticmethod
    def _list_action(key: KeyEvent) -> Action | Character:
        if key.is_char:
            if key.code == "c" and key.ctrl:
                return Action.QUIT
            return _LIST_CHARS.get(key.code, Character(key.code))
        return _LIST_NAMED_KEYS.get(key.code, Action.NONE)