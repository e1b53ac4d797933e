"""Tests for the layout engine."""

import pytest

from seqtools.viewer.config import ViewerConfig
from seqtools.viewer.layout import (
    Direction,
    Length,
    Min,
    Percentage,
    Rect,
    centered_rect,
    compute_layout,
    split,
)


def _inside(inner, outer):
    return (
        outer.x <= inner.x
        and outer.y <= inner.y
        and inner.right <= outer.right
        and inner.bottom <= outer.bottom
    )


class TestSplit:
    def test_vertical_lengths_and_min(self):
        rects = split(Rect(0, 0, 10, 30), Direction.VERTICAL, [Length(3), Min(5), Length(2)])
        assert rects == [
            Rect(0, 0, 10, 3),
            Rect(0, 3, 10, 25),
            Rect(0, 28, 10, 2),
        ]

    def test_horizontal_with_margin(self):
        rects = split(Rect(0, 0, 40, 10), Direction.HORIZONTAL, [Length(10), Min(5)], margin=2)
        assert rects == [Rect(2, 2, 10, 6), Rect(12, 2, 26, 6)]

    def test_percentages(self):
        rects = split(
            Rect(0, 0, 100, 1),
            Direction.HORIZONTAL,
            [Percentage(20), Percentage(60), Percentage(20)],
        )
        assert [r.width for r in rects] == [20, 60, 20]
        assert [r.x for r in rects] == [0, 20, 80]

    def test_min_constraints_share_remainder(self):
        rects = split(Rect(0, 0, 11, 1), Direction.HORIZONTAL, [Min(1), Min(1)])
        assert [r.width for r in rects] == [6, 5]

    def test_never_exceeds_space(self):
        rects = split(Rect(0, 0, 5, 4), Direction.VERTICAL, [Length(3), Length(1), Min(20), Length(1)])
        assert sum(r.height for r in rects) <= 4
        assert all(r.height >= 0 for r in rects)
        for a, b in zip(rects, rects[1:]):
            assert a.bottom <= b.y

    def test_rect_inner(self):
        assert Rect(5, 5, 10, 4).inner() == Rect(6, 6, 8, 2)
        assert Rect(0, 0, 1, 1).inner().area == 0


class TestComputeLayout:
    def test_panels_80x30(self, viewport):
        layout = compute_layout(viewport)
        assert layout.title == Rect(2, 2, 76, 3)
        assert layout.ruler_gutter == Rect(2, 5, 10, 1)
        assert layout.ruler == Rect(12, 5, 66, 1)
        assert layout.ids == Rect(2, 6, 10, 21)
        assert layout.sequences == Rect(12, 6, 66, 21)
        assert layout.footer == Rect(2, 27, 76, 1)
        assert layout.sequence_frame == Rect(13, 7, 64, 19)
        assert layout.help is None

    def test_ruler_column_lines_up_with_sequence_border(self, viewport):
        layout = compute_layout(viewport)
        # ruler column 0 sits over the panel border, column 1 over residue 1
        assert layout.ruler.x == layout.sequences.x
        assert layout.ruler.x + 1 == layout.sequence_frame.x

    def test_panels_do_not_overlap(self, viewport):
        layout = compute_layout(viewport)
        rows = [layout.title, layout.ruler, layout.sequences, layout.footer]
        for a, b in zip(rows, rows[1:]):
            assert a.bottom <= b.y
        assert layout.ids.right <= layout.sequences.x
        assert layout.ruler_gutter.right <= layout.ruler.x

    def test_help_overlay_centered(self, viewport):
        layout = compute_layout(viewport, show_help=True)
        assert layout.help == Rect(16, 9, 48, 12)
        assert layout.help == centered_rect(60, 40, viewport)

    def test_custom_config(self, viewport):
        config = ViewerConfig(margin=0, id_width=20)
        layout = compute_layout(viewport, config=config)
        assert layout.ids.width == 20
        assert layout.title.x == 0

    @pytest.mark.parametrize("width,height", [(0, 0), (3, 3), (10, 5), (30, 12), (300, 100)])
    def test_any_size_stays_inside_viewport(self, width, height):
        viewport = Rect(0, 0, width, height)
        layout = compute_layout(viewport, show_help=True)
        for rect in (layout.title, layout.ruler, layout.ids, layout.sequences,
                     layout.footer, layout.help, layout.sequence_frame):
            assert rect.width >= 0 and rect.height >= 0
            assert _inside(rect, viewport)
