"""Tools for profiling diff performance.

The lcs tabulation is quadratic in time and memory, so diffing long
inputs can become slow. The tools in this module tell which phase of a
diff the time goes to. For more rigorous profiling, consider cProfile.

The diff calculator times its phases, passing the number of edit graph
cells each phase covers:

    affixes      trimming of the common prefix and suffix
    tabulate     filling the edit graph
    backtrace    walking the edit graph into diff entries

Other code can be timed with

    from lcsdiff.profiling import timer
    with timer.time('my phase'):
        <code to time>

`python -m lcsdiff.profiling old.txt new.txt` runs `lcsdiff-diff` with
timing enabled and prints a table like:

    Phase        Calls    Cells      Time    us/Cell
    ---------  -------  -------  --------  ---------
    tabulate         1   560000  0.51634     0.922
    backtrace        1   560000  0.00152     0.00272
    affixes          1        0  0.00012
"""

import contextlib
import time
from functools import wraps

from tabulate import tabulate


class PhaseStats(object):
    """Accumulated timings of one named phase."""

    __slots__ = ('calls', 'cells', 'seconds')

    def __init__(self):
        self.calls = 0
        self.cells = 0
        self.seconds = 0.0

    def add(self, seconds, cells):
        self.calls += 1
        self.cells += cells
        self.seconds += seconds

    @property
    def us_per_cell(self):
        if not self.cells:
            return None
        return 1e6 * self.seconds / self.cells


class TimePaths(object):
    """Collects wall clock time per phase while enabled."""

    def __init__(self, enabled=True):
        self.enabled = enabled
        self.phases = {}

    @contextlib.contextmanager
    def time(self, key, cells=0):
        if not self.enabled:
            yield
            return
        start = time.perf_counter()
        try:
            yield
        finally:
            stats = self.phases.setdefault(key, PhaseStats())
            stats.add(time.perf_counter() - start, cells)

    def profile(self, key=None):
        "Decorator timing every call of a function under `key`."
        def decorator(function):
            name = key or function.__name__
            @wraps(function)
            def inner(*args, **kwargs):
                with self.time(name):
                    return function(*args, **kwargs)
            return inner
        return decorator

    @contextlib.contextmanager
    def _switched(self, enabled):
        previous, self.enabled = self.enabled, enabled
        try:
            yield self
        finally:
            self.enabled = previous

    def enable(self):
        return self._switched(True)

    def disable(self):
        return self._switched(False)

    def reset(self):
        self.phases.clear()

    def __str__(self):
        rows = [
            (key, s.calls, s.cells, s.seconds, s.us_per_cell)
            for key, s in sorted(self.phases.items(), key=lambda kv: -kv[1].seconds)
        ]
        return tabulate(rows, headers=['Phase', 'Calls', 'Cells', 'Time', 'us/Cell'])


timer = TimePaths(enabled=False)


def profile_diff_paths(args=None):
    import lcsdiff.lcsdiffapp
    try:
        with timer.enable():
            lcsdiff.lcsdiffapp.main(args)
    finally:
        print(str(timer))


if __name__ == "__main__":
    profile_diff_paths()
