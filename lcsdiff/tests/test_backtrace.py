# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from lcsdiff import InvariantViolation, OutOfRangeError
from lcsdiff.diff_format import DiffOp, op_insert, op_delete, op_equal
from lcsdiff.diff_utils import render_diff, reconstruct_old, reconstruct_new
from lcsdiff.diffing.backtrace import backtrace_diff
from lcsdiff.diffing.editgraph import EditGraph
from lcsdiff.diffing.lcs import tabulate_lcs, llcs


def backtrace(a, b):
    return backtrace_diff(tabulate_lcs(a, b), a, b)


def test_backtrace_prefers_deletions_at_ties():
    d = backtrace("ABCABBA", "CBABAC")
    assert render_diff(d) == "-A-BC-AB+ABA+C"


def test_backtrace_single_substitution():
    assert backtrace("A", "B") == [op_delete("A"), op_insert("B")]


def test_backtrace_empty_sides():
    assert backtrace("", "") == []
    assert backtrace("", "ab") == [op_insert("a"), op_insert("b")]
    assert backtrace("ab", "") == [op_delete("a"), op_delete("b")]


def test_backtrace_emits_one_entry_per_unit():
    a, b = "xaxcxabc", "abcy"
    d = backtrace(a, b)
    assert all(len(e.text) == 1 for e in d)
    n_equal = sum(1 for e in d if e.op == DiffOp.EQUAL)
    assert len(d) == len(a) + len(b) - n_equal
    assert n_equal == llcs(a, b)
    assert reconstruct_old(d) == a
    assert reconstruct_new(d) == b


def test_backtrace_matches_at_end_first():
    assert backtrace("AB", "B") == [op_delete("A"), op_equal("B")]


def test_backtrace_rejects_mismatched_graph():
    with pytest.raises(InvariantViolation):
        backtrace_diff(EditGraph(2, 2), "abc", "ab")
    with pytest.raises(InvariantViolation):
        backtrace_diff(tabulate_lcs("ab", "ab"), "ab", "abc")


def test_backtrace_rejects_unordered_scores():
    # NaN scores compare neither greater nor less-or-equal
    G = EditGraph(1, 1)
    G[0, 1] = G[1, 0] = float("nan")
    with pytest.raises(InvariantViolation, match="No backtrace move"):
        backtrace_diff(G, "a", "b")


class GraphWithLostRow(EditGraph):
    def get(self, i, j):
        if i == self.rows - 1:
            raise OutOfRangeError("row %d is gone" % i)
        return super(GraphWithLostRow, self).get(i, j)


def test_backtrace_wraps_graph_read_errors():
    G = GraphWithLostRow(2, 2)
    with pytest.raises(InvariantViolation, match="left the edit graph") as exc:
        backtrace_diff(G, "ab", "cd")
    assert isinstance(exc.value.__cause__, OutOfRangeError)


def test_backtrace_is_iterative():
    # Far deeper than the default recursion limit
    a, b = "Q", "Z"*5000
    d = backtrace(a, b)
    assert len(d) == 5001
    assert d[0] == op_delete("Q")
    assert reconstruct_new(d) == b
