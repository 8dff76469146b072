# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import compute, diff_strings, DiffCalculator
from .diff_format import DiffEntry, DiffOp
from .log import DiffFormatError, InvariantViolation, OutOfRangeError


__all__ = [
    "__version__",
    "compute", "diff_strings", "DiffCalculator",
    "DiffEntry", "DiffOp",
    "DiffFormatError", "InvariantViolation", "OutOfRangeError",
    ]
