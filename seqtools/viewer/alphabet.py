"""Alphabet detection and residue coloring."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

NUCLEOTIDES = frozenset("ATCGU-")


class Color(Enum):
    """Terminal colors used by the viewer."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    LIGHT_RED = "light_red"
    LIGHT_MAGENTA = "light_magenta"


_NUCLEIC_COLORS = {
    "A": Color.RED,
    "C": Color.YELLOW,
    "G": Color.BLUE,
    "T": Color.GREEN,
    "U": Color.GREEN,
}

# Grouped by physico-chemical property
_PROTEIN_GROUPS = [
    ("AILMFWV", Color.BLUE),          # hydrophobic
    ("KR", Color.RED),                # basic
    ("ED", Color.MAGENTA),            # acidic
    ("NQST", Color.GREEN),            # polar
    ("C", Color.LIGHT_MAGENTA),
    ("G", Color.LIGHT_RED),
    ("P", Color.YELLOW),
    ("HY", Color.CYAN),               # aromatic polar
]
_PROTEIN_COLORS = {aa: color for group, color in _PROTEIN_GROUPS for aa in group}


class Alphabet(Enum):
    """Inferred character set of the loaded sequences."""

    NUCLEIC = "nucleic"
    PROTEIN = "protein"

    def colorize(self, char: str) -> Color:
        """Return the display color for *char* (case-insensitive)."""
        table = _NUCLEIC_COLORS if self is Alphabet.NUCLEIC else _PROTEIN_COLORS
        return table.get(char.upper(), Color.WHITE)


def classify(seqs: Iterable[str]) -> Alphabet:
    """Return PROTEIN if any character falls outside A/T/C/G/U/-."""
    for seq in seqs:
        if not NUCLEOTIDES.issuperset(seq.upper()):
            return Alphabet.PROTEIN
    return Alphabet.NUCLEIC
