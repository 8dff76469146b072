# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import random

from lcsdiff import diff_strings
from lcsdiff.diff_format import DiffOp, is_valid_diff
from lcsdiff.diff_utils import reconstruct_old, reconstruct_new
from lcsdiff.diffing.lcs import llcs


def naive_llcs(A, B):
    """Length of the lcs of A and B by plain recursion.

    Exponential in len(A) + len(B), only usable as a reference on tiny inputs.
    """
    def rec(m, n):
        if m == 0 or n == 0:
            return 0
        if A[m-1] == B[n-1]:
            return 1 + rec(m-1, n-1)
        return max(rec(m-1, n), rec(m, n-1))
    return rec(len(A), len(B))


def lcs_string(G, A, B):
    """Reconstruct an lcs of A and B from their edit graph G.

    Prefers skipping units of A when both directions keep the score.
    """
    x, y = len(A), len(B)
    chars = []
    while x > 0 and y > 0:
        if A[x-1] == B[y-1]:
            chars.append(A[x-1])
            x -= 1
            y -= 1
        elif G[x-1, y] < G[x, y-1]:
            y -= 1
        else:
            x -= 1
    return "".join(reversed(chars))


def is_subsequence(s, t):
    "Check that s is a (not necessarily contiguous) subsequence of t."
    it = iter(t)
    return all(c in it for c in s)


def random_string(n, alphabet="ABC"):
    return "".join(random.choice(alphabet) for _ in range(n))


def check_diff_roundtrip(a, b):
    "Check that the diff of a and b covers both strings exactly once."
    d = diff_strings(a, b)
    assert is_valid_diff(d)
    assert reconstruct_old(d) == a
    assert reconstruct_new(d) == b
    return d


def check_diff_minimal(a, b):
    "Check that the diff of a and b keeps an lcs of a and b."
    d = check_diff_roundtrip(a, b)
    kept = "".join(e.text for e in d if e.op == DiffOp.EQUAL)
    assert len(kept) == llcs(a, b)
    assert is_subsequence(kept, a)
    assert is_subsequence(kept, b)
    return d
