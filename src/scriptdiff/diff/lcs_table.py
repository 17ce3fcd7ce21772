"""Longest Common Subsequence length table over two line sequences.

Uses the standard dynamic-programming LCS recurrence.  The table is kept
in a single flat list indexed as ``i * (cols) + j`` rather than a list of
rows, so building it costs one allocation regardless of input size.
"""

from __future__ import annotations

from collections.abc import Sequence


class LCSTable:
    """Prefix LCS lengths for *original* and *updated*.

    ``table[i, j]`` is the length of the LCS of ``original[:i]`` and
    ``updated[:j]``, for ``0 <= i <= len(original)`` and
    ``0 <= j <= len(updated)``.  Row ``0`` and column ``0`` are zero.

    Lines match under exact string equality; no whitespace or case
    normalisation is applied.
    """

    __slots__ = ("_cells", "_width", "rows", "cols")

    def __init__(self, original: Sequence[str], updated: Sequence[str]) -> None:
        self.rows = len(original) + 1
        self.cols = len(updated) + 1
        width = self.cols
        cells = [0] * (self.rows * width)

        for i in range(1, self.rows):
            line = original[i - 1]
            row = i * width
            prev = row - width
            for j in range(1, width):
                if line == updated[j - 1]:
                    cells[row + j] = cells[prev + j - 1] + 1
                else:
                    up = cells[prev + j]
                    left = cells[row + j - 1]
                    cells[row + j] = up if up >= left else left

        self._cells = cells
        self._width = width

    def __getitem__(self, index: tuple[int, int]) -> int:
        i, j = index
        return self._cells[i * self._width + j]

    @property
    def length(self) -> int:
        """LCS length of the full sequences (the bottom-right cell)."""
        return self._cells[-1]

    @property
    def size(self) -> int:
        """Number of cells in the table."""
        return len(self._cells)
