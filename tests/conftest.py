# -*- coding: utf-8 -*-
"""Shared fixtures: small weighted and unweighted graphs."""

import pytest

from pathgraph.analysis import ListGraph, MatrixGraph


@pytest.fixture
def weighted_graph():
    """A → B (5), B → C (3), A → C (20); shortest paths computed."""
    graph = MatrixGraph()
    graph.build(3, ["A", "B", "C"], [(1, 2, 5), (2, 3, 3), (1, 3, 20)])
    return graph.compute_shortest_paths()


@pytest.fixture
def unweighted_graph():
    """Edges (1,2), (1,3), (2,4) in input order."""
    graph = ListGraph()
    graph.build(4, ["one", "two", "three", "four"], [(1, 2), (1, 3), (2, 4)])
    return graph
