"""seqtools viewer - interactive terminal alignment viewer.

This package provides:
- AlignmentModel: scroll/toggle state over a loaded alignment
- Alphabet: nucleic/protein detection and residue coloring
- compute_layout / render: pure frame layout and drawing
- view: curses event loop that ties them together
"""


def __getattr__(name):
    """Lazy imports so that curses is only loaded when the viewer runs."""
    if name in ("Alphabet", "Color", "classify"):
        from seqtools.viewer.alphabet import Alphabet, Color, classify
        return locals()[name]
    elif name == "make_ruler":
        from seqtools.viewer.ruler import make_ruler
        return make_ruler
    elif name == "AlignmentModel":
        from seqtools.viewer.model import AlignmentModel
        return AlignmentModel
    elif name == "ViewerConfig":
        from seqtools.viewer.config import ViewerConfig
        return ViewerConfig
    elif name in ("Rect", "Layout", "compute_layout"):
        from seqtools.viewer.layout import Rect, Layout, compute_layout
        return locals()[name]
    elif name in ("view", "run_app", "terminal_session"):
        from seqtools.viewer.app import view, run_app, terminal_session
        return locals()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Alphabet",
    "Color",
    "classify",
    "make_ruler",
    "AlignmentModel",
    "ViewerConfig",
    "Rect",
    "Layout",
    "compute_layout",
    "view",
    "run_app",
    "terminal_session",
]
