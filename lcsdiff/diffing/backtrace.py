# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from ..diff_format import EditScriptBuilder
from ..log import InvariantViolation, OutOfRangeError

__all__ = ["backtrace_diff"]


def backtrace_diff(G, A, B, compare=operator.__eq__):
    """Walk the edit graph G of A and B from (N, M) back to (0, 0).

    Returns the list of diff entries transforming A into B, one entry
    per unit, in order from the start of the sequences.

    Deletions are preferred over insertions. At each (x, y) the first
    applicable move is taken:

      1. equal  if A[x-1] == B[y-1]                     -> (x-1, y-1)
      2. delete if y == 0 or G[x-1, y] >  G[x, y-1]     -> (x-1, y)
      3. insert if x == 0 or G[x-1, y] <= G[x, y-1]     -> (x, y-1)

    For A = "ABCABBA" and B = "CBABAC" this gives -A-BC-AB+ABA+C, the
    deletions of a tie showing up before the insertions.
    """
    N, M = len(A), len(B)
    if (G.rows, G.cols) != (N, M):
        raise InvariantViolation(
            "Edit graph of size %dx%d does not match sequences of length %d and %d." % (
                G.rows + 1, G.cols + 1, N, M))

    di = EditScriptBuilder(reverse=True)
    x = N
    y = M
    try:
        while x > 0 or y > 0:
            if x > 0 and y > 0 and compare(A[x-1], B[y-1]):
                x -= 1
                y -= 1
                di.equal(A[x])
            elif x > 0 and (y == 0 or G[x-1, y] > G[x, y-1]):
                x -= 1
                di.delete(A[x])
            elif y > 0 and (x == 0 or G[x-1, y] <= G[x, y-1]):
                y -= 1
                di.insert(B[y])
            else:
                raise InvariantViolation(
                    "No backtrace move possible at (%d, %d)." % (x, y))
    except OutOfRangeError as e:
        raise InvariantViolation(
            "Backtrace left the edit graph at (%d, %d)." % (x, y)) from e

    return di.validated()
