# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .calculator import DiffCalculator, compute, diff_strings
from .editgraph import EditGraph

__all__ = ["DiffCalculator", "compute", "diff_strings", "EditGraph"]
