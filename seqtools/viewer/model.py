"""Alignment model: loaded content plus scroll and display state."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from seqtools.viewer.alphabet import Alphabet, Color, classify
from seqtools.viewer.config import ViewerConfig
from seqtools.viewer.ruler import make_ruler

logger = logging.getLogger(__name__)


class AlignmentModel:
    """State of one viewer session.

    Content (``ids``, ``seqs``, ``alphabet``, ``ruler``) is fixed at
    construction.  Scroll offsets and toggles are mutated in place by the
    event loop.  ``frame_height``/``frame_width`` are the inner size of the
    sequence panel (borders excluded) and bound the scroll offsets:

        0 <= y_scroll <= max(0, n_seqs - frame_height)
        0 <= x_scroll <= max(0, max_len - frame_width)
    """

    def __init__(
        self,
        ids: List[str],
        seqs: List[str],
        title: str,
        config: Optional[ViewerConfig] = None,
    ):
        if len(ids) != len(seqs):
            raise ValueError(
                f"Got {len(ids)} identifiers for {len(seqs)} sequences"
            )
        config = config or ViewerConfig()
        self.ids = list(ids)
        self.seqs = list(seqs)
        self.title = title
        self.max_len = max((len(s) for s in self.seqs), default=0)
        self.n_seqs = len(self.seqs)
        self.alphabet = classify(self.seqs)
        self.ruler = make_ruler(self.max_len)

        self.y_scroll = 0
        self.x_scroll = 0
        self.frame_height = 0
        self.frame_width = 0

        self.dark_mode = config.dark_mode
        self.help_visible = False
        self.highlight_as_background = config.highlight_as_background
        logger.debug(
            "Model for %r: %d sequences, max length %d, %s alphabet",
            title, self.n_seqs, self.max_len, self.alphabet.value,
        )

    # -- bounds ---------------------------------------------------------

    @property
    def usable_width(self) -> int:
        return self.frame_width

    @property
    def y_bound(self) -> int:
        return max(0, self.n_seqs - self.frame_height)

    @property
    def x_bound(self) -> int:
        return max(0, self.max_len - self.usable_width)

    def set_frame(self, height: int, width: int) -> None:
        """Record the current inner panel size and re-clamp the offsets."""
        height, width = max(0, height), max(0, width)
        if (height, width) != (self.frame_height, self.frame_width):
            logger.debug("Frame resized to %dx%d", width, height)
        self.frame_height = height
        self.frame_width = width
        self.y_scroll = min(self.y_scroll, self.y_bound)
        self.x_scroll = min(self.x_scroll, self.x_bound)

    # -- scrolling ------------------------------------------------------

    def scroll_up(self) -> None:
        self.y_scroll = max(0, self.y_scroll - 1)

    def scroll_down(self) -> None:
        if self.y_scroll < self.y_bound:
            self.y_scroll += 1

    def scroll_left(self) -> None:
        self.x_scroll = max(0, self.x_scroll - 1)

    def scroll_right(self) -> None:
        if self.x_scroll < self.x_bound:
            self.x_scroll += 1

    def scroll_top(self) -> None:
        self.y_scroll = 0

    def scroll_bottom(self) -> None:
        self.y_scroll = self.y_bound

    def scroll_start(self) -> None:
        self.x_scroll = 0

    def scroll_end(self) -> None:
        self.x_scroll = self.x_bound

    # -- toggles --------------------------------------------------------

    def toggle_dark(self) -> None:
        self.dark_mode = not self.dark_mode

    def toggle_help(self) -> None:
        self.help_visible = not self.help_visible

    def toggle_highlight(self) -> None:
        self.highlight_as_background = not self.highlight_as_background

    # -- styling --------------------------------------------------------

    def palette(self) -> Tuple[Color, Color]:
        """Foreground/background pair for panel chrome."""
        if self.dark_mode:
            return Color.WHITE, Color.BLACK
        return Color.BLACK, Color.WHITE

    def cell_colors(self, char: str) -> Tuple[Color, Color]:
        """Foreground/background pair for one sequence character."""
        fg, bg = self.palette()
        color = self.alphabet.colorize(char)
        if self.highlight_as_background:
            # keep the glyph readable on a same-colored cell
            return (bg if color is fg else fg), color
        return color, bg
