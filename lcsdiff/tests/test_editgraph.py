# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from lcsdiff import OutOfRangeError
from lcsdiff.diffing.editgraph import EditGraph


def test_get_and_set_with_valid_coordinates():
    graph = EditGraph(2, 2)
    graph[0, 0] = 1
    graph[0, 1] = 2
    graph[1, 0] = 3
    graph[1, 1] = 4

    assert graph[0, 0] == 1
    assert graph[0, 1] == 2
    assert graph[1, 0] == 3
    assert graph[1, 1] == 4
    assert graph.get(1, 1) == 4


def test_new_graph_is_zero_filled():
    m, n = 3, 5
    graph = EditGraph(m, n)
    assert graph.shape == (4, 6)
    assert (graph.rows, graph.cols) == (m, n)
    for i in range(m+1):
        for j in range(n+1):
            assert graph.get(i, j) == 0


def test_every_cell_in_range_is_accessible():
    m, n = 2, 3
    graph = EditGraph(m, n)
    for i in range(m+1):
        for j in range(n+1):
            graph.set(i, j, i*10 + j)
    for i in range(m+1):
        for j in range(n+1):
            assert graph.get(i, j) == i*10 + j


@pytest.mark.parametrize('i, j', [
    (0, 2),
    (2, 0),
    (2, 2),
    (-1, 0),
    (0, -1),
    (-1, -1),
])
def test_get_with_out_of_bounds_coordinates(i, j):
    graph = EditGraph(1, 1)
    with pytest.raises(OutOfRangeError):
        graph[i, j]
    with pytest.raises(OutOfRangeError):
        graph.get(i, j)


@pytest.mark.parametrize('i, j', [
    (0, 2),
    (2, 0),
    (2, 2),
    (-1, 0),
    (0, -1),
])
def test_set_with_out_of_bounds_coordinates(i, j):
    graph = EditGraph(1, 1)
    with pytest.raises(OutOfRangeError):
        graph[i, j] = 1
    with pytest.raises(OutOfRangeError):
        graph.set(i, j, 1)
    # Nothing was written anywhere
    assert str(graph) == "0, 0\n0, 0\n"


def test_out_of_range_error_is_an_index_error():
    graph = EditGraph(0, 0)
    with pytest.raises(IndexError):
        graph[1, 0]


def test_negative_dimensions_are_rejected():
    with pytest.raises(ValueError):
        EditGraph(-1, 2)


def test_graph_rendering():
    graph = EditGraph(1, 2)
    graph[1, 2] = 7
    assert str(graph) == "0, 0, 0\n0, 0, 7\n"
