"""Keyboard actions — the fixed key table."""

import curses
from enum import Enum


class Action(Enum):
    PAUSE = "pause"
    LEFT = "left"
    RIGHT = "right"
    FREEZE = "freeze"
    REDRAW = "redraw"
    QUIT = "quit"


KEYMAP: dict[int, Action] = {
    ord("p"): Action.PAUSE,
    ord("P"): Action.PAUSE,
    ord("j"): Action.LEFT,
    ord("J"): Action.LEFT,
    curses.KEY_LEFT: Action.LEFT,
    ord("k"): Action.RIGHT,
    ord("K"): Action.RIGHT,
    curses.KEY_RIGHT: Action.RIGHT,
    ord(" "): Action.FREEZE,
    ord("r"): Action.REDRAW,
    ord("R"): Action.REDRAW,
    ord("q"): Action.QUIT,
    ord("Q"): Action.QUIT,
}


def action_for_key(key: int | None) -> Action | None:
    """Map a curses key code to an action; unknown keys and None map to None."""
    if key is None:
        return None
    return KEYMAP.get(key)
