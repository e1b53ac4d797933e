"""Frame rendering: turns the model and a layout into draw commands.

Rendering is a pure function of ``(model, layout)``; the terminal backend
only has to paint the returned commands in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import List, Optional, Sequence

from seqtools.viewer.alphabet import Color
from seqtools.viewer.config import ViewerConfig
from seqtools.viewer.layout import Layout, Rect, compute_layout
from seqtools.viewer.model import AlignmentModel

HELP_LINES = [
    "Navigation:",
    "  ← → ↑ ↓    Scroll Left/Right/Up/Down",
    "  PgUp PgDn  Scroll to Top/Bottom",
    "  Home End   Scroll to Beginning/End",
    "Rendering:",
    "  T    Toggle light/dark mode",
    "  H ?  Toggle Help",
    "  R    Toggle fore/background",
    "  Q    Quit",
]
FOOTER_HINT = "Help: H/?  Quit: Q"

# Box drawing characters: corners then edges
_TOP_LEFT, _TOP_RIGHT, _BOTTOM_LEFT, _BOTTOM_RIGHT = "┌", "┐", "└", "┘"
_HORIZONTAL, _VERTICAL = "─", "│"


@dataclass(frozen=True)
class Style:
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class DrawCommand:
    """Write *text* at column *x*, row *y* with *style*."""

    x: int
    y: int
    text: str
    style: Style


def _fill(rect: Rect, style: Style) -> List[DrawCommand]:
    if rect.width <= 0:
        return []
    blank = " " * rect.width
    return [DrawCommand(rect.x, y, blank, style) for y in range(rect.y, rect.bottom)]


def _block(rect: Rect, title: str, style: Style) -> List[DrawCommand]:
    """A bordered box with a bold title on its top edge."""
    if rect.width < 2 or rect.height < 2:
        return _fill(rect, style)
    inner_width = rect.width - 2
    commands = [
        DrawCommand(rect.x, rect.y, _TOP_LEFT + _HORIZONTAL * inner_width + _TOP_RIGHT, style),
    ]
    for y in range(rect.y + 1, rect.bottom - 1):
        commands.append(DrawCommand(rect.x, y, _VERTICAL + " " * inner_width + _VERTICAL, style))
    commands.append(
        DrawCommand(rect.x, rect.bottom - 1, _BOTTOM_LEFT + _HORIZONTAL * inner_width + _BOTTOM_RIGHT, style)
    )
    if title and inner_width > 0:
        bold = Style(style.fg, style.bg, bold=True)
        commands.append(DrawCommand(rect.x + 1, rect.y, title[:inner_width], bold))
    return commands


def _lines(
    rect: Rect,
    lines: Sequence[str],
    style: Style,
    align: str = "left",
) -> List[DrawCommand]:
    commands = []
    for row, line in enumerate(lines[: rect.height]):
        text = line[: rect.width]
        if align == "right":
            text = text.rjust(rect.width)
        elif align == "center":
            text = text.center(rect.width)
        if text:
            commands.append(DrawCommand(rect.x, rect.y + row, text, style))
    return commands


def _sequence_rows(model: AlignmentModel, frame: Rect) -> List[DrawCommand]:
    """Colored residues for the visible window, one command per color run."""
    commands = []
    if frame.width <= 0:
        return commands
    visible = model.seqs[model.y_scroll : model.y_scroll + frame.height]
    for row, seq in enumerate(visible):
        window = seq[model.x_scroll : model.x_scroll + frame.width]
        x = frame.x
        for (fg, bg), run in groupby(window, key=model.cell_colors):
            text = "".join(run)
            commands.append(DrawCommand(x, frame.y + row, text, Style(fg, bg)))
            x += len(text)
    return commands


def render(model: AlignmentModel, layout: Layout) -> List[DrawCommand]:
    """Draw commands for a full frame, painted back to front."""
    fg, bg = model.palette()
    chrome = Style(fg, bg)
    commands: List[DrawCommand] = []

    commands += _block(layout.title, "File", chrome)
    commands += _lines(layout.title.inner(), [model.title], Style(fg, bg, bold=True), align="center")

    commands += _fill(layout.ruler_gutter, chrome)
    commands += _fill(layout.ruler, chrome)
    commands += _lines(layout.ruler, [model.ruler[model.x_scroll :]], chrome)

    commands += _block(layout.ids, "Id", chrome)
    id_frame = layout.ids.inner()
    commands += _lines(id_frame, model.ids[model.y_scroll :], chrome, align="right")

    commands += _block(layout.sequences, "Sequence", chrome)
    commands += _sequence_rows(model, layout.sequence_frame)

    commands += _fill(layout.footer, chrome)
    commands += _lines(layout.footer, [FOOTER_HINT], Style(fg, bg, italic=True), align="right")

    if layout.help is not None:
        commands += _block(layout.help, "Help:", chrome)
        commands += _lines(layout.help.inner(), HELP_LINES, chrome)
    return commands


def draw_frame(
    model: AlignmentModel,
    viewport: Rect,
    config: Optional[ViewerConfig] = None,
) -> List[DrawCommand]:
    """Lay out *viewport*, feed the panel size back to *model* and render."""
    layout = compute_layout(viewport, model.help_visible, config)
    frame = layout.sequence_frame
    model.set_frame(frame.height, frame.width)
    return render(model, layout)
