# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..log import OutOfRangeError

__all__ = ["EditGraph"]


class EditGraph(object):
    """Table of llcs scores for every pair of prefixes of two sequences.

    For sequences of length m and n the graph holds (m+1) x (n+1) cells,
    cell (i, j) being the length of the lcs of A[:i] and B[:j]. Row 0
    and column 0 represent the empty prefix and stay zero.

    The dimensions are fixed at construction. Reads and writes outside
    [0, m] x [0, n] raise OutOfRangeError, negative indices included.
    """

    def __init__(self, m, n):
        if m < 0 or n < 0:
            raise ValueError("Edit graph dimensions must be non-negative, got (%d, %d)." % (m, n))
        self.rows = m
        self.cols = n
        self._grid = [[0]*(n+1) for i in range(m+1)]

    @property
    def shape(self):
        return (self.rows + 1, self.cols + 1)

    def _check(self, i, j):
        if not (0 <= i <= self.rows and 0 <= j <= self.cols):
            raise OutOfRangeError(
                "Coordinate (%d, %d) is outside edit graph of size %dx%d." % (
                    i, j, self.rows + 1, self.cols + 1))

    def get(self, i, j):
        self._check(i, j)
        return self._grid[i][j]

    def set(self, i, j, value):
        self._check(i, j)
        self._grid[i][j] = value

    def __getitem__(self, key):
        i, j = key
        return self.get(i, j)

    def __setitem__(self, key, value):
        i, j = key
        self.set(i, j, value)

    def __str__(self):
        "Comma separated rendering of the graph, one line per row."
        return "".join(", ".join(str(v) for v in row) + "\n" for row in self._grid)
