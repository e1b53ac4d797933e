"""Summary statistics and text histograms for sequence lengths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass
class SummaryStats:
    """Distribution summary of a set of integer values."""

    min: int
    max: int
    mean: float
    std: float
    q1: float
    median: float
    q3: float

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "SummaryStats":
        arr = np.asarray(values, dtype=float)
        if arr.size == 0:
            raise ValueError("Cannot summarise an empty set of values")
        q1, median, q3 = np.percentile(arr, [25, 50, 75])
        return cls(
            min=int(arr.min()),
            max=int(arr.max()),
            mean=float(arr.mean()),
            std=float(arr.std()),
            q1=float(q1),
            median=float(median),
            q3=float(q3),
        )

    def to_row(self) -> str:
        return (
            f"Min: {self.min}\tMax: {self.max}\tMean: {self.mean:.2f}\t"
            f"Sdev: {self.std:.2f}\tQ1: {self.q1:g}\tMedian: {self.median:g}\t"
            f"Q3: {self.q3:g}"
        )

    def to_column(self) -> str:
        return "\n".join([
            f"Min:\t{self.min}",
            f"Max:\t{self.max}",
            f"Mean:\t{self.mean:.2f}",
            f"Sdev:\t{self.std:.2f}",
            f"Q1:\t{self.q1:g}",
            f"Median:\t{self.median:g}",
            f"Q3:\t{self.q3:g}",
        ])


def text_histogram(values: Sequence[int], bins: int = 20, width: int = 60) -> str:
    """Render a horizontal bar histogram of *values* as plain text.

    Each line is ``[lo, hi) | ####### count``; the longest bar is *width*
    characters wide.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return ""
    n_bins = max(1, min(bins, int(arr.max() - arr.min()) + 1))
    counts, edges = np.histogram(arr, bins=n_bins)
    peak = counts.max()
    label_width = len(f"{edges[-1]:.0f}")

    lines = []
    for count, lo, hi in zip(counts, edges[:-1], edges[1:]):
        bar = "#" * int(round(width * count / peak)) if peak else ""
        lines.append(
            f"[{lo:>{label_width}.0f}, {hi:>{label_width}.0f}) | {bar} {count}"
        )
    return "\n".join(lines)
