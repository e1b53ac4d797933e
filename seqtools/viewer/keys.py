"""Key decoding and dispatch onto the alignment model."""

from __future__ import annotations

import curses
from enum import Enum
from typing import Optional

from seqtools.viewer.model import AlignmentModel


class Key(Enum):
    """Every key the viewer reacts to."""

    QUIT = "quit"
    TOGGLE_DARK = "toggle_dark"
    TOGGLE_HELP = "toggle_help"
    TOGGLE_HIGHLIGHT = "toggle_highlight"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


_CHAR_KEYS = {
    "q": Key.QUIT,
    "t": Key.TOGGLE_DARK,
    "h": Key.TOGGLE_HELP,
    "?": Key.TOGGLE_HELP,
    "r": Key.TOGGLE_HIGHLIGHT,
}

_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_PPAGE: Key.PAGE_UP,
    curses.KEY_NPAGE: Key.PAGE_DOWN,
    curses.KEY_HOME: Key.HOME,
    curses.KEY_END: Key.END,
}

_ACTIONS = {
    Key.TOGGLE_DARK: AlignmentModel.toggle_dark,
    Key.TOGGLE_HELP: AlignmentModel.toggle_help,
    Key.TOGGLE_HIGHLIGHT: AlignmentModel.toggle_highlight,
    Key.UP: AlignmentModel.scroll_up,
    Key.DOWN: AlignmentModel.scroll_down,
    Key.LEFT: AlignmentModel.scroll_left,
    Key.RIGHT: AlignmentModel.scroll_right,
    Key.PAGE_UP: AlignmentModel.scroll_top,
    Key.PAGE_DOWN: AlignmentModel.scroll_bottom,
    Key.HOME: AlignmentModel.scroll_start,
    Key.END: AlignmentModel.scroll_end,
}


def decode_key(code: int) -> Optional[Key]:
    """Map a curses key code to a :class:`Key`, or ``None`` if unbound."""
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 0 <= code < 0x110000:
        return _CHAR_KEYS.get(chr(code).lower())
    return None


def dispatch(model: AlignmentModel, key: Optional[Key]) -> bool:
    """Apply *key* to *model*; return ``False`` when the viewer should quit."""
    if key is Key.QUIT:
        return False
    action = _ACTIONS.get(key)
    if action is not None:
        action(model)
    return True
