# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from ..diff_format import op_equal

__all__ = ["common_prefix", "common_suffix", "trim_affixes", "AffixTrim"]


AffixTrim = namedtuple("AffixTrim", ("prefix", "suffix", "a", "b"))


def common_prefix(a, b):
    "Return the longest run a[:k] == b[:k]."
    n = min(len(a), len(b))
    k = 0
    while k < n and a[k] == b[k]:
        k += 1
    return a[:k]


def common_suffix(a, b):
    "Return the longest run matching backwards from the ends of a and b."
    n = min(len(a), len(b))
    k = 0
    while k < n and a[-1-k] == b[-1-k]:
        k += 1
    return a[len(a)-k:]


def trim_affixes(a, b):
    """Split off the common prefix and suffix of a and b.

    Returns an AffixTrim with equal entries for the prefix and suffix,
    and the remaining middle parts of a and b to be diffed.

    If the prefix ends with the suffix, the suffix is not trimmed.
    Otherwise the same units could be claimed by both affixes, e.g.
    a="AABB", b="AABBCDEFBB" has prefix "AABB" and suffix "BB", and
    trimming both would leave nothing of a but too little of b.
    An empty suffix trims nothing either way. A suffix that would
    still reach into the prefix of the shorter sequence is cut back
    to the units after the prefix.
    """
    prefix = common_prefix(a, b)
    suffix = common_suffix(a, b)
    k = len(prefix)

    if prefix[len(prefix)-len(suffix):] == suffix:
        suffix_len = 0
    else:
        suffix_len = min(len(suffix), min(len(a), len(b)) - k)

    a_end = len(a) - suffix_len
    b_end = len(b) - suffix_len
    return AffixTrim(
        op_equal(a[:k]),
        op_equal(a[a_end:]),
        a[k:a_end],
        b[k:b_end],
    )
