# -*- coding: utf-8 -*-
"""
Weighted digraph on an adjacency matrix, with all-pairs Dijkstra.

This module defines the class `MatrixGraph`. A caller builds it from
``(node_count, labels, edge triples)``, runs `compute_shortest_paths()` once and
then queries `distance_and_path()` for any pair as many times as needed.

Notes
-----
- The table is not maintained incrementally: any edge change makes it stale and
  queries raise `NotComputedError` until the next `compute_shortest_paths()`.
- Node ids are 1-based; row/column 0 of the matrices is unused.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union, TYPE_CHECKING

import numpy as np
import polars as pl
import networkx as nx

from pathgraph.analysis.table import PathResult, ShortestPathTable
from pathgraph.pre.request import BuildRequest, NodeLabels
from pathgraph.utils.config import resolve_config
from pathgraph.utils.constant import SCHEMA_WEIGHTED_EDGES, WEIGHTED_EDGE_COLUMNS
from pathgraph.utils.errors import NotComputedError
from pathgraph.utils.utils import as_integer, check_node_count, check_node_id, truncate_at_sentinel

if TYPE_CHECKING:  # noqa: F401
    from pathgraph.utils.config import ParamConfig

__all__ = ["MatrixGraph"]


# -----------------------------------------------------------------------------
# Class: MatrixGraph
# -----------------------------------------------------------------------------
class MatrixGraph:
    """
    Weighted directed graph stored as an adjacency matrix.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    size : int
        Current node count. The graph is empty when ``size == 0``.
    labels : NodeLabels
        Display label of each node.
    cost : numpy.ndarray
        ``int64`` matrix, ``cost[i, j]`` is the weight of edge ``i → j`` when it exists.
    adjacent : numpy.ndarray
        ``bool`` matrix, ``False`` is the "no edge" sentinel. Any integer weight,
        0 included, is a valid edge weight.
    main_print : bool
        Controls console output, determined by configuration parameters or
        execution context.

    Methods
    -------
    build(node_count, labels, edges):
        Reset the graph and load edge triples.
    insert_edge(from_node, to_node, weight):
        Set (or overwrite) the edge ``from_node → to_node``.
    remove_edge(from_node, to_node):
        Clear the edge ``from_node → to_node``.
    compute_shortest_paths():
        Run Dijkstra from every node.
    distance_and_path(from_node, to_node):
        Query the computed table.

    Examples
    --------
    >>> graph = MatrixGraph()
    >>> graph.build(3, ["A", "B", "C"], [(1, 2, 5), (2, 3, 3), (1, 3, 20)])
    >>> graph.compute_shortest_paths().distance_and_path(1, 3)
    PathResult(distance=8, path=[1, 2, 3])
    """

    def __init__(self, param: Union[dict, ParamConfig, None] = None) -> None:
        """
        Parameters
        ----------
        param : dict, ParamConfig or None
            Configuration parameters (see `pathgraph.utils.config.ParamConfig`).
            Relevant keys: ``max_nodes``, ``main_print``.

        Raises
        ------
        TypeError
            If ``param`` has an unsupported type.
        ValueError
            If a configuration value is invalid.
        """
        self.config = resolve_config(param)
        self.max_nodes = self.config.max_nodes

        # Adjust parameters based on execution context
        self.main_print = self.config.main_print or (__name__ == "__main__")

        self._reset(0, NodeLabels())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self.size}, edges={self.number_of_edges()}, "
            f"computed={self._computed})"
        )

    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)

    def _reset(self, size: int, labels: NodeLabels) -> None:
        self.size = size
        self.labels = labels
        self.cost = np.zeros((size + 1, size + 1), dtype=np.int64)
        self.adjacent = np.zeros((size + 1, size + 1), dtype=bool)
        self._table = ShortestPathTable(size)
        self._computed = False

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------
    def build(
        self,
        node_count: int,
        labels: Union[Sequence[str], NodeLabels],
        edges: Iterable[Sequence[int]] = (),
    ) -> None:
        """
        Reset every piece of state and load the graph.

        Parameters
        ----------
        node_count : int
            Number of nodes; ids run from 1 to ``node_count``.
        labels : sequence of str or NodeLabels
            One label per node, in id order.
        edges : iterable of (from, to, weight)
            Edge triples, applied in order through `insert_edge`. Consumption stops
            at the first triple whose ``from`` is ``0``.

        Raises
        ------
        ValueError
            If the label count does not match ``node_count`` or a tuple is not a triple.
        OutOfRangeError
            If ``node_count`` exceeds ``max_nodes`` or an edge names an unknown node.
        """
        request = BuildRequest.from_records(node_count, labels, edges)
        self.build_from_request(request)

    def build_from_request(self, request: BuildRequest) -> None:
        """
        Same as `build`, from an already assembled `BuildRequest`.
        """
        request.validate(weighted=True)
        node_count = check_node_count(request.node_count, self.max_nodes)

        self._reset(node_count, request.labels)
        for from_node, to_node, weight in truncate_at_sentinel(request.edges):
            self.insert_edge(from_node, to_node, weight)

        self._log(f"Weighted graph built with {self.size} nodes and {self.number_of_edges()} edges.")

    # -------------------------------------------------------------------------
    # Edge operations
    # -------------------------------------------------------------------------
    def insert_edge(self, from_node: int, to_node: int, weight: int) -> None:
        """
        Set the weight of edge ``from_node → to_node``, overwriting any previous value.

        The reverse edge ``to_node → from_node`` is left untouched.

        Raises
        ------
        OutOfRangeError
            If a node id is out of range.
        TypeError
            If ``weight`` is not an integer.
        OverflowError
            If ``weight`` does not fit in a signed 64-bit integer.
        """
        i = check_node_id(from_node, self.size, name="from")
        j = check_node_id(to_node, self.size, name="to")
        self.cost[i, j] = as_integer(weight, name="weight")
        self.adjacent[i, j] = True
        self._computed = False

    def remove_edge(self, from_node: int, to_node: int) -> None:
        """Clear edge ``from_node → to_node`` (no-op on the matrix if absent)."""
        i = check_node_id(from_node, self.size, name="from")
        j = check_node_id(to_node, self.size, name="to")
        self.cost[i, j] = 0
        self.adjacent[i, j] = False
        self._computed = False

    def has_edge(self, from_node: int, to_node: int) -> bool:
        i = check_node_id(from_node, self.size, name="from")
        j = check_node_id(to_node, self.size, name="to")
        return bool(self.adjacent[i, j])

    def weight(self, from_node: int, to_node: int) -> Optional[int]:
        """Weight of edge ``from_node → to_node``, ``None`` if there is no such edge."""
        i = check_node_id(from_node, self.size, name="from")
        j = check_node_id(to_node, self.size, name="to")
        if not self.adjacent[i, j]:
            return None
        return int(self.cost[i, j])

    def edges(self) -> List[Tuple[int, int, int]]:
        """All edges as ``(from, to, weight)`` triples, sorted by ``(from, to)``."""
        rows, cols = np.nonzero(self.adjacent)
        return [(int(i), int(j), int(self.cost[i, j])) for i, j in zip(rows, cols)]

    def number_of_edges(self) -> int:
        return int(np.count_nonzero(self.adjacent))

    def label(self, node: int) -> str:
        """Display label of ``node``."""
        return self.labels[node]

    # -------------------------------------------------------------------------
    # Shortest paths
    # -------------------------------------------------------------------------
    @property
    def is_computed(self) -> bool:
        """True if the table reflects the current edges."""
        return self._computed

    @property
    def table(self) -> ShortestPathTable:
        """The shortest-path table (raises `NotComputedError` if stale)."""
        self._require_computed()
        return self._table

    def compute_shortest_paths(self) -> MatrixGraph:
        """
        Run Dijkstra's algorithm with every node as source.

        The whole table is reset first, so calling this twice on an unchanged
        graph yields an identical table.

        Returns
        -------
        self : MatrixGraph

        Raises
        ------
        OverflowError
            If a shortest distance does not fit in a signed 64-bit integer.
        """
        self._table.reset()
        for source in range(1, self.size + 1):
            self._table.run_source(source, self.cost, self.adjacent)
        self._computed = True

        self._log(f"Shortest paths computed for {self.size} source nodes.")
        return self

    def distance_and_path(self, from_node: int, to_node: int) -> PathResult:
        """
        Shortest distance and path between two nodes.

        Parameters
        ----------
        from_node, to_node : int
            Node ids in ``[1, size]``.

        Returns
        -------
        PathResult
            ``(distance, [from_node, ..., to_node])``, or ``(None, [])`` if
            ``to_node`` is unreachable.

        Raises
        ------
        OutOfRangeError
            If a node id is out of range.
        NotComputedError
            If the edges changed since the last `compute_shortest_paths()`.
        """
        i = check_node_id(from_node, self.size, name="from")
        j = check_node_id(to_node, self.size, name="to")
        self._require_computed()

        distance = self._table.distance(i, j)
        if distance is None:
            return PathResult(None, [])
        return PathResult(distance, self._table.reconstruct(i, j))

    def _require_computed(self) -> None:
        if not self._computed:
            raise NotComputedError(
                "Shortest paths are not computed for the current edges.\n"
                "Run 'compute_shortest_paths' first."
            )

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------
    def edges_frame(self) -> pl.DataFrame:
        """Edges as a polars DataFrame with columns ``from``, ``to``, ``weight``."""
        return pl.DataFrame(
            self.edges(), schema=SCHEMA_WEIGHTED_EDGES, orient="row"
        )

    def to_networkx(self) -> nx.DiGraph:
        """
        Export to a NetworkX DiGraph.

        Nodes ``1..size`` carry a ``label`` attribute and edges a ``weight`` attribute.
        """
        edgelist_df = self.edges_frame().to_pandas()

        graph = nx.from_pandas_edgelist(
            edgelist_df,
            source=WEIGHTED_EDGE_COLUMNS[0],
            target=WEIGHTED_EDGE_COLUMNS[1],
            edge_attr=WEIGHTED_EDGE_COLUMNS[2],
            create_using=nx.DiGraph,
        )
        graph.add_nodes_from((node, {"label": label}) for node, label in self.labels)
        return graph
