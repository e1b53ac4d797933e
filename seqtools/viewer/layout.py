"""Layout engine: partitions the terminal into viewer panels.

Layouts are recomputed on every frame from the viewport size; nothing here
keeps state between frames.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

from seqtools.viewer.config import ViewerConfig


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, margin: int = 1) -> "Rect":
        """Shrink by *margin* cells on every side."""
        width = max(0, self.width - 2 * margin)
        height = max(0, self.height - 2 * margin)
        return Rect(self.x + min(margin, self.width), self.y + min(margin, self.height), width, height)


class Direction(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Length:
    """Exactly *value* cells."""

    value: int


@dataclass(frozen=True)
class Min:
    """At least *value* cells; shares whatever is left over."""

    value: int


@dataclass(frozen=True)
class Percentage:
    """*value* percent of the available cells, rounded down."""

    value: int


Constraint = Union[Length, Min, Percentage]


def split(
    rect: Rect,
    direction: Direction,
    constraints: Sequence[Constraint],
    margin: int = 0,
) -> List[Rect]:
    """Split *rect* along *direction* according to *constraints*.

    Fixed constraints (``Length``, ``Percentage``) are served first in order,
    then ``Min`` constraints get their minimum and split the remainder.
    Sizes never exceed the available space, so the resulting rectangles
    never overlap.
    """
    area = rect.inner(margin) if margin else rect
    total = area.height if direction is Direction.VERTICAL else area.width
    sizes = [0] * len(constraints)
    remaining = total

    for i, c in enumerate(constraints):
        if isinstance(c, Length):
            wanted = c.value
        elif isinstance(c, Percentage):
            wanted = total * c.value // 100
        else:
            continue
        sizes[i] = min(max(0, wanted), remaining)
        remaining -= sizes[i]

    flexible = [i for i, c in enumerate(constraints) if isinstance(c, Min)]
    for i in flexible:
        sizes[i] = min(max(0, constraints[i].value), remaining)
        remaining -= sizes[i]
    if flexible and remaining > 0:
        share, extra = divmod(remaining, len(flexible))
        for n, i in enumerate(flexible):
            sizes[i] += share + (1 if n < extra else 0)

    rects = []
    offset = 0
    for size in sizes:
        if direction is Direction.VERTICAL:
            rects.append(Rect(area.x, area.y + offset, area.width, size))
        else:
            rects.append(Rect(area.x + offset, area.y, size, area.height))
        offset += size
    return rects


def centered_rect(percent_x: int, percent_y: int, rect: Rect) -> Rect:
    """A rectangle of the given percentages centered inside *rect*."""
    rows = split(
        rect,
        Direction.VERTICAL,
        [
            Percentage((100 - percent_y) // 2),
            Percentage(percent_y),
            Percentage((100 - percent_y) // 2),
        ],
    )
    return split(
        rows[1],
        Direction.HORIZONTAL,
        [
            Percentage((100 - percent_x) // 2),
            Percentage(percent_x),
            Percentage((100 - percent_x) // 2),
        ],
    )[1]


@dataclass(frozen=True)
class Layout:
    """Panel rectangles for one frame."""

    viewport: Rect
    title: Rect
    ruler_gutter: Rect
    ruler: Rect
    ids: Rect
    sequences: Rect
    footer: Rect
    help: Optional[Rect] = None

    @property
    def sequence_frame(self) -> Rect:
        """Inner area of the sequence panel, where residues are drawn."""
        return self.sequences.inner()


def compute_layout(
    viewport: Rect,
    show_help: bool = False,
    config: Optional[ViewerConfig] = None,
) -> Layout:
    """Partition *viewport* into title, ruler, body and footer panels."""
    config = config or ViewerConfig()
    title, ruler_row, body, footer = split(
        viewport,
        Direction.VERTICAL,
        [Length(3), Length(1), Min(20), Length(1)],
        margin=config.margin,
    )
    columns = [Length(config.id_width), Min(20)]
    ruler_gutter, ruler = split(ruler_row, Direction.HORIZONTAL, columns)
    ids, sequences = split(body, Direction.HORIZONTAL, columns)

    help_rect = None
    if show_help:
        help_rect = centered_rect(config.help_width, config.help_height, viewport)

    return Layout(
        viewport=viewport,
        title=title,
        ruler_gutter=ruler_gutter,
        ruler=ruler,
        ids=ids,
        sequences=sequences,
        footer=footer,
        help=help_rect,
    )
