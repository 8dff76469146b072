# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import op_insert, op_delete, op_equal
from ..log import debug
from ..profiling import timer

from .affixes import trim_affixes
from .backtrace import backtrace_diff
from .lcs import tabulate_lcs

__all__ = ["DiffCalculator", "compute", "diff_strings"]


class DiffCalculator(object):
    """Character based diff of two strings.

    The common prefix and suffix of the strings are split off before
    the remaining middle parts are diffed with the lcs algorithm.
    """

    def __init__(self, old, new):
        if not isinstance(old, str) or not isinstance(new, str):
            raise TypeError(
                'Arguments need to be string types. Got %r and %r' % (old, new))
        self.old = old
        self.new = new

    def compute(self):
        """Generate the diff entries transforming old into new.

        The returned generator is lazy and one-shot; call compute
        again to get a fresh sequence.
        """
        old, new = self.old, self.new

        # Trivial cases need no lcs
        if not old:
            debug("Old string is empty, inserting all of new")
            yield op_insert(new)
            return
        if not new:
            debug("New string is empty, deleting all of old")
            yield op_delete(old)
            return
        if old == new:
            debug("Strings are equal")
            yield op_equal(old)
            return

        with timer.time("affixes"):
            trim = trim_affixes(old, new)
        debug("Common prefix %d, common suffix %d, diffing %d x %d chars",
              len(trim.prefix.text), len(trim.suffix.text), len(trim.a), len(trim.b))

        cells = len(trim.a) * len(trim.b)
        with timer.time("tabulate", cells):
            graph = tabulate_lcs(trim.a, trim.b)
        with timer.time("backtrace", cells):
            middle = backtrace_diff(graph, trim.a, trim.b)
        del graph

        if trim.prefix.text:
            yield trim.prefix
        for e in middle:
            yield e
        if trim.suffix.text:
            yield trim.suffix


def compute(old, new):
    "Compute the diff of two strings as a lazy sequence of diff entries."
    return DiffCalculator(old, new).compute()


def diff_strings(old, new, merge=False):
    """Compute the diff of two strings as a list of diff entries.

    With merge=True, neighbouring entries with the same op are joined.
    """
    diff = list(compute(old, new))
    if merge:
        from ..diff_utils import merge_adjacent
        diff = merge_adjacent(diff)
    return diff
