# -*- coding: utf-8 -*-
import numpy as np
import networkx as nx
import pytest

from pathgraph.analysis import MatrixGraph, PathResult
from pathgraph.utils import NotComputedError, OutOfRangeError


def path_weight(graph, path):
    return sum(graph.weight(a, b) for a, b in zip(path, path[1:]))


def random_graph(seed, size=12, density=0.3):
    rng = np.random.default_rng(seed)
    edges = [
        (i, j, int(rng.integers(1, 20)))
        for i in range(1, size + 1)
        for j in range(1, size + 1)
        if i != j and rng.random() < density
    ]
    graph = MatrixGraph()
    graph.build(size, [f"n{i}" for i in range(1, size + 1)], edges)
    return graph.compute_shortest_paths()


# -----------------------------------------------------------------------------
# Three-node scenario
# -----------------------------------------------------------------------------
def test_shortest_path_goes_through_intermediate_node(weighted_graph):
    result = weighted_graph.distance_and_path(1, 3)
    assert result == PathResult(8, [1, 2, 3])
    assert result.reachable
    assert result.nb_edges == 2


def test_no_path_back_is_unreachable(weighted_graph):
    result = weighted_graph.distance_and_path(3, 1)
    assert result.distance is None
    assert result.path == []
    assert not result.reachable
    assert result.nb_edges == 0


def test_self_distance_is_zero(weighted_graph):
    for node in range(1, 4):
        assert weighted_graph.distance_and_path(node, node) == PathResult(0, [node])


def test_labels(weighted_graph):
    assert weighted_graph.label(1) == "A"
    assert weighted_graph.label(3) == "C"
    with pytest.raises(OutOfRangeError):
        weighted_graph.label(4)


# -----------------------------------------------------------------------------
# Properties
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_zero_distance_only_for_source(seed):
    graph = random_graph(seed)
    for source in range(1, graph.size + 1):
        for node in range(1, graph.size + 1):
            distance = graph.distance_and_path(source, node).distance
            if distance is not None:
                assert (distance == 0) == (source == node)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_path_weight_equals_distance(seed):
    graph = random_graph(seed)
    for source in range(1, graph.size + 1):
        for node in range(1, graph.size + 1):
            result = graph.distance_and_path(source, node)
            if not result.reachable:
                continue
            assert result.path[0] == source
            assert result.path[-1] == node
            assert len(result.path) <= graph.size
            assert path_weight(graph, result.path) == result.distance


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_distances_match_networkx(seed):
    graph = random_graph(seed)
    expected = dict(nx.all_pairs_dijkstra_path_length(graph.to_networkx(), weight="weight"))
    for source in range(1, graph.size + 1):
        for node in range(1, graph.size + 1):
            assert graph.distance_and_path(source, node).distance == expected[source].get(node)


def test_direction_is_preserved():
    graph = MatrixGraph()
    graph.build(2, ["A", "B"], [(1, 2, 1), (2, 1, 10)])
    graph.compute_shortest_paths()
    assert graph.distance_and_path(1, 2).distance == 1
    assert graph.distance_and_path(2, 1).distance == 10


def test_ties_go_to_lowest_id():
    graph = MatrixGraph()
    graph.build(4, list("ABCD"), [(1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 4, 1)])
    graph.compute_shortest_paths()
    assert graph.distance_and_path(1, 4) == PathResult(2, [1, 2, 4])


def test_unreachable_nodes_do_not_corrupt_table():
    graph = MatrixGraph()
    graph.build(4, list("ABCD"), [(1, 2, 4), (3, 4, 1)])
    graph.compute_shortest_paths()
    assert graph.distance_and_path(1, 2) == PathResult(4, [1, 2])
    assert graph.distance_and_path(1, 3) == PathResult(None, [])
    assert graph.distance_and_path(1, 4) == PathResult(None, [])
    assert graph.distance_and_path(3, 4) == PathResult(1, [3, 4])


def test_zero_weight_is_an_edge():
    graph = MatrixGraph()
    graph.build(2, ["A", "B"], [(1, 2, 0)])
    graph.compute_shortest_paths()
    assert graph.has_edge(1, 2)
    assert graph.weight(1, 2) == 0
    assert graph.distance_and_path(1, 2) == PathResult(0, [1, 2])


def test_recompute_is_idempotent(weighted_graph):
    before = weighted_graph.table.cells.copy()
    weighted_graph.compute_shortest_paths()
    assert np.array_equal(before, weighted_graph.table.cells)


# -----------------------------------------------------------------------------
# Edge mutation
# -----------------------------------------------------------------------------
def test_remove_edge_then_recompute(weighted_graph):
    weighted_graph.remove_edge(2, 3)
    weighted_graph.compute_shortest_paths()
    assert weighted_graph.distance_and_path(1, 3) == PathResult(20, [1, 3])
    assert weighted_graph.distance_and_path(1, 2) == PathResult(5, [1, 2])
    assert weighted_graph.distance_and_path(2, 3) == PathResult(None, [])


def test_remove_edge_never_shortens_distances():
    graph = random_graph(7)
    before = {
        (s, t): graph.distance_and_path(s, t).distance
        for s in range(1, graph.size + 1)
        for t in range(1, graph.size + 1)
    }
    from_node, to_node, _ = graph.edges()[0]
    graph.remove_edge(from_node, to_node)
    graph.compute_shortest_paths()
    for (s, t), old in before.items():
        new = graph.distance_and_path(s, t).distance
        if old is None:
            assert new is None
        elif new is not None:
            assert new >= old


def test_insert_edge_overwrites(weighted_graph):
    weighted_graph.insert_edge(1, 3, 2)
    assert weighted_graph.weight(1, 3) == 2
    assert weighted_graph.weight(3, 1) is None
    weighted_graph.compute_shortest_paths()
    assert weighted_graph.distance_and_path(1, 3) == PathResult(2, [1, 3])


def test_query_before_compute_raises():
    graph = MatrixGraph()
    graph.build(2, ["A", "B"], [(1, 2, 1)])
    assert not graph.is_computed
    with pytest.raises(NotComputedError):
        graph.distance_and_path(1, 2)
    with pytest.raises(NotComputedError):
        graph.table


@pytest.mark.parametrize("mutate", [
    lambda g: g.insert_edge(3, 1, 1),
    lambda g: g.remove_edge(1, 2),
])
def test_mutation_makes_table_stale(weighted_graph, mutate):
    mutate(weighted_graph)
    assert not weighted_graph.is_computed
    with pytest.raises(NotComputedError):
        weighted_graph.distance_and_path(1, 3)


# -----------------------------------------------------------------------------
# Build
# -----------------------------------------------------------------------------
def test_build_stops_at_end_marker():
    graph = MatrixGraph()
    graph.build(3, list("ABC"), [(1, 2, 5), (0, 0, 0), (2, 3, 3)])
    assert graph.edges() == [(1, 2, 5)]


def test_rebuild_discards_previous_state(weighted_graph):
    weighted_graph.build(2, ["X", "Y"], [(2, 1, 7)])
    assert weighted_graph.size == 2
    assert not weighted_graph.is_computed
    assert weighted_graph.edges() == [(2, 1, 7)]
    assert weighted_graph.label(1) == "X"


def test_empty_graph():
    graph = MatrixGraph()
    graph.build(0, [], [])
    graph.compute_shortest_paths()
    assert graph.size == 0
    assert graph.number_of_edges() == 0
    with pytest.raises(OutOfRangeError):
        graph.distance_and_path(1, 1)


@pytest.mark.parametrize("edge", [(0, 1), (1, 0), (4, 1), (1, 4), (-1, 2)])
def test_out_of_range_edge_operations(weighted_graph, edge):
    with pytest.raises(OutOfRangeError):
        weighted_graph.insert_edge(*edge, 1)
    with pytest.raises(OutOfRangeError):
        weighted_graph.remove_edge(*edge)
    with pytest.raises(OutOfRangeError):
        weighted_graph.distance_and_path(*edge)


def test_build_with_unknown_node_raises():
    graph = MatrixGraph()
    with pytest.raises(OutOfRangeError):
        graph.build(2, ["A", "B"], [(1, 3, 1)])


def test_build_with_label_mismatch_raises():
    with pytest.raises(ValueError):
        MatrixGraph().build(3, ["A", "B"], [])


def test_build_with_pairs_raises():
    with pytest.raises(ValueError):
        MatrixGraph().build(2, ["A", "B"], [(1, 2)])


def test_node_cap():
    graph = MatrixGraph({"max_nodes": 2})
    graph.build(2, ["A", "B"], [])
    with pytest.raises(OutOfRangeError):
        graph.build(3, ["A", "B", "C"], [])


# -----------------------------------------------------------------------------
# Export and console output
# -----------------------------------------------------------------------------
def test_edges_frame(weighted_graph):
    frame = weighted_graph.edges_frame()
    assert frame.columns == ["from", "to", "weight"]
    assert frame.rows() == [(1, 2, 5), (1, 3, 20), (2, 3, 3)]


def test_to_networkx_keeps_isolated_nodes():
    graph = MatrixGraph()
    graph.build(3, list("ABC"), [(1, 2, 4)])
    exported = graph.to_networkx()
    assert exported.number_of_nodes() == 3
    assert exported.number_of_edges() == 1
    assert exported[1][2]["weight"] == 4
    assert exported.nodes[3]["label"] == "C"


def test_main_print(capsys):
    graph = MatrixGraph({"main_print": True})
    graph.build(2, ["A", "B"], [(1, 2, 1)])
    graph.compute_shortest_paths()
    out = capsys.readouterr().out
    assert "Weighted graph built with 2 nodes and 1 edges." in out
    assert "Shortest paths computed for 2 source nodes." in out


def test_silent_by_default(capsys):
    graph = MatrixGraph()
    graph.build(2, ["A", "B"], [(1, 2, 1)])
    graph.compute_shortest_paths()
    assert capsys.readouterr().out == ""


# -----------------------------------------------------------------------------
# Weight values
# -----------------------------------------------------------------------------
def test_distance_beyond_int64_raises():
    graph = MatrixGraph()
    graph.build(3, list("ABC"), [(1, 2, 2**62), (2, 3, 2**62)])
    with pytest.raises(OverflowError):
        graph.compute_shortest_paths()
    assert not graph.is_computed
    with pytest.raises(NotComputedError):
        graph.distance_and_path(1, 3)


def test_large_weights_within_range():
    graph = MatrixGraph()
    graph.build(3, list("ABC"), [(1, 2, 2**62), (2, 3, 2**62 - 1)])
    graph.compute_shortest_paths()
    result = graph.distance_and_path(1, 3)
    assert result == PathResult(2**63 - 1, [1, 2, 3])
    assert path_weight(graph, result.path) == result.distance


def test_weight_above_int64_is_refused():
    graph = MatrixGraph()
    graph.build(2, ["A", "B"], [])
    with pytest.raises(OverflowError):
        graph.insert_edge(1, 2, 2**63)


@pytest.mark.parametrize("weight", [2.7, 2.0, "3", None])
def test_non_integer_weight_is_refused(weight):
    with pytest.raises(TypeError):
        MatrixGraph().build(2, ["A", "B"], [(1, 2, weight)])
    graph = MatrixGraph()
    graph.build(2, ["A", "B"], [])
    with pytest.raises(TypeError):
        graph.insert_edge(1, 2, weight)
    assert graph.weight(1, 2) is None


def test_numpy_integer_ids_and_weights():
    graph = MatrixGraph()
    graph.build(2, ["A", "B"], [(np.int32(1), np.int64(2), np.int16(7))])
    assert graph.weight(np.int64(1), np.int64(2)) == 7
    assert graph.weight(2, 1) is None
    with pytest.raises(OutOfRangeError):
        graph.weight(3, 1)
