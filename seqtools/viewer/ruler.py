"""Position ruler shown above the sequence panel."""

from __future__ import annotations


def make_ruler(max_len: int) -> str:
    """Build a ruler of length ``max_len + 1`` with a numeral every 10 columns.

    Column 0 is a gutter placeholder. A numeral's first digit sits on its
    column and the following digits consume the next columns.
    """
    parts = [" "]
    i = 1
    while i <= max_len:
        if i % 10 == 0:
            label = str(i)
            parts.append(label)
            i += len(label) - 1
        else:
            parts.append(" ")
        i += 1
    return "".join(parts)[: max_len + 1]
