# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from .editgraph import EditGraph

__all__ = ["tabulate_lcs", "llcs"]


def tabulate_lcs(A, B, compare=operator.__eq__):
    """Compute the edit graph G[x, y] == llcs(A[:x], B[:y]) by tabulation.

    Runs in O(NM) time and space for N, M = len(A), len(B).
    For A = "ABCABBA" and B = "CBABAC" the graph is:

            C  B  A  B  A  C
         0  0  0  0  0  0  0
      A  0  0  0  1  1  1  1
      B  0  0  1  1  2  2  2
      C  0  1  1  1  2  2  3
      A  0  1  1  2  2  3  3
      B  0  1  2  2  3  3  3
      B  0  1  2  2  3  3  3
      A  0  1  2  3  3  4  4
    """
    N, M = len(A), len(B)
    G = EditGraph(N, M)
    # Rows are filled top down, so (x-1, y), (x, y-1) and (x-1, y-1)
    # are always available when computing (x, y)
    for x in range(1, N+1):
        a = A[x-1]
        for y in range(1, M+1):
            if compare(a, B[y-1]):
                G[x, y] = G[x-1, y-1] + 1
            else:
                G[x, y] = max(G[x-1, y], G[x, y-1])
    return G


def llcs(A, B, compare=operator.__eq__):
    "Length of the longest common subsequence of A and B."
    return tabulate_lcs(A, B, compare)[len(A), len(B)]
