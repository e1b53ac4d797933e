"""Event loop and curses terminal backend for the alignment viewer."""

from __future__ import annotations

import curses
import locale
import logging
import time
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from seqtools.errors import InputError, RenderError, SetupError
from seqtools.viewer.alphabet import Color
from seqtools.viewer.config import ViewerConfig
from seqtools.viewer.keys import decode_key, dispatch
from seqtools.viewer.layout import Rect
from seqtools.viewer.model import AlignmentModel
from seqtools.viewer.render import DrawCommand, Style, draw_frame

logger = logging.getLogger(__name__)

_BASE_COLORS = {
    Color.BLACK: curses.COLOR_BLACK,
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.BLUE: curses.COLOR_BLUE,
    Color.MAGENTA: curses.COLOR_MAGENTA,
    Color.CYAN: curses.COLOR_CYAN,
    Color.WHITE: curses.COLOR_WHITE,
    Color.LIGHT_RED: curses.COLOR_RED,
    Color.LIGHT_MAGENTA: curses.COLOR_MAGENTA,
}
_BRIGHT = {Color.LIGHT_RED, Color.LIGHT_MAGENTA}


class CursesTerminal:
    """Paints draw commands onto a curses window and polls it for keys."""

    def __init__(self, stdscr, colors: bool = True, default_colors: bool = False):
        self.stdscr = stdscr
        self.colors = colors
        self.default_colors = default_colors
        self._pairs: Dict[Tuple[int, int], int] = {}
        self._pair_limit = curses.COLOR_PAIRS if colors else 0
        self._bright_colors = colors and curses.COLORS >= 16

    def viewport(self) -> Rect:
        height, width = self.stdscr.getmaxyx()
        return Rect(0, 0, width, height)

    def _color_number(self, color: Optional[Color], default: int) -> int:
        if color is None:
            return -1 if self.default_colors else default
        number = _BASE_COLORS[color]
        if color in _BRIGHT and self._bright_colors:
            number += 8
        return number

    def _pair(self, fg: Optional[Color], bg: Optional[Color]) -> int:
        key = (
            self._color_number(fg, curses.COLOR_WHITE),
            self._color_number(bg, curses.COLOR_BLACK),
        )
        if key not in self._pairs:
            number = len(self._pairs) + 1
            if number >= self._pair_limit:
                return 0
            curses.init_pair(number, *key)
            self._pairs[key] = number
        return self._pairs[key]

    def attributes(self, style: Style) -> int:
        attr = 0
        if self.colors:
            attr |= curses.color_pair(self._pair(style.fg, style.bg))
            if style.fg in _BRIGHT and not self._bright_colors:
                attr |= curses.A_BOLD
        if style.bold:
            attr |= curses.A_BOLD
        if style.italic:
            attr |= getattr(curses, "A_ITALIC", 0)
        return attr

    def paint(self, commands: List[DrawCommand]) -> None:
        """Draw a full frame; commands are clipped to the window."""
        height, width = self.stdscr.getmaxyx()
        try:
            self.stdscr.erase()
            for cmd in commands:
                if cmd.y < 0 or cmd.y >= height or cmd.x < 0 or cmd.x >= width:
                    continue
                limit = width - cmd.x
                if cmd.y == height - 1:
                    # curses cannot write the bottom-right cell
                    limit -= 1
                text = cmd.text[:limit]
                if text:
                    self.stdscr.addstr(cmd.y, cmd.x, text, self.attributes(cmd.style))
            self.stdscr.refresh()
        except curses.error as e:
            raise RenderError(f"Failed to draw frame: {e}") from e

    def poll(self, timeout: float) -> Optional[int]:
        """Wait up to *timeout* seconds for a key code."""
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        try:
            code = self.stdscr.getch()
        except curses.error as e:
            raise InputError(f"Failed to read terminal input: {e}") from e
        return None if code == -1 else code


def _restore(stdscr) -> None:
    """Leave raw mode and the alternate screen, as far as possible."""
    steps = [
        lambda: curses.mousemask(0),
        lambda: stdscr.keypad(False),
        curses.noraw,
        curses.echo,
        lambda: curses.curs_set(1),
        curses.endwin,
    ]
    for step in steps:
        try:
            step()
        except curses.error as e:
            logger.warning("Terminal restore step failed: %s", e)


@contextmanager
def terminal_session() -> Iterator[CursesTerminal]:
    """Own the terminal for one viewer session.

    Enters raw mode on the alternate screen with key and mouse capture, and
    always restores the terminal on exit.
    """
    try:
        # box drawing and arrow glyphs need the user locale (usually UTF-8)
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        logger.debug("Could not set locale from environment")

    try:
        stdscr = curses.initscr()
    except curses.error as e:
        raise SetupError(f"Could not initialise terminal: {e}") from e

    try:
        curses.noecho()
        curses.raw()
        stdscr.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS)
        colors = curses.has_colors()
        default_colors = False
        if colors:
            curses.start_color()
            try:
                curses.use_default_colors()
                default_colors = True
            except curses.error:
                logger.debug("Terminal has no default colors, using black/white")
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
    except curses.error as e:
        _restore(stdscr)
        raise SetupError(f"Could not enter raw mode: {e}") from e

    logger.debug("Terminal session started")
    try:
        yield CursesTerminal(stdscr, colors=colors, default_colors=default_colors)
    finally:
        _restore(stdscr)
        logger.debug("Terminal session ended")


def run_app(
    terminal,
    model: AlignmentModel,
    config: Optional[ViewerConfig] = None,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Run the draw/poll/dispatch loop until the quit key is pressed.

    *terminal* needs ``viewport()``, ``paint(commands)`` and
    ``poll(timeout)``.  Every iteration redraws first, so a frame always
    reflects the last applied key.
    """
    config = config or ViewerConfig()
    tick_rate = config.tick_rate
    last_tick = clock()
    while True:
        terminal.paint(draw_frame(model, terminal.viewport(), config))

        timeout = max(0.0, tick_rate - (clock() - last_tick))
        code = terminal.poll(timeout)
        if code is not None:
            key = decode_key(code)
            logger.debug("Key %r -> %s", code, key)
            if not dispatch(model, key):
                return

        if clock() - last_tick >= tick_rate:
            last_tick = clock()


def view(
    ids: List[str],
    seqs: List[str],
    title: str,
    config: Optional[ViewerConfig] = None,
) -> None:
    """Open an interactive viewer on an in-memory alignment."""
    config = config or ViewerConfig()
    model = AlignmentModel(ids, seqs, title, config)
    logger.info("Viewing %d sequences from %s", model.n_seqs, title)
    with terminal_session() as terminal:
        run_app(terminal, model, config)
