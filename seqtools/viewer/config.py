"""Tunable parameters of the alignment viewer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewerConfig:
    """Viewer settings.

    ``tick_rate`` is the minimum redraw interval in seconds when no key is
    pressed.  ``help_width``/``help_height`` size the help overlay as a
    percentage of the terminal.
    """

    tick_rate: float = 1.0
    margin: int = 2
    id_width: int = 10
    help_width: int = 60
    help_height: int = 40
    dark_mode: bool = True
    highlight_as_background: bool = True
