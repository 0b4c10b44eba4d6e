# -*- coding: utf-8 -*-
"""
Tabular reports on built graphs, for display collaborators.

This module defines the class `GraphReport`, which turns the state of a
`MatrixGraph` or a `ListGraph` into polars DataFrames (and label lists) that any
front end can render. No text formatting happens here.

Notes
-----
- `shortest_paths_table` requires a computed `MatrixGraph`; it raises
  `NotComputedError` otherwise.
- Unreachable pairs are kept in the table with a null ``distance`` and an empty
  ``path``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Union, TYPE_CHECKING

import polars as pl

from pathgraph.utils.config import resolve_config
from pathgraph.utils.constant import SCHEMA_ADJACENCY, SCHEMA_SHORTEST_PATHS, SCHEMA_TRAVERSAL
from pathgraph.utils.errors import NotComputedError

if TYPE_CHECKING:  # noqa: F401
    from pathgraph.analysis.adjacency import ListGraph
    from pathgraph.analysis.matrix import MatrixGraph
    from pathgraph.utils.config import ParamConfig

__all__ = ["GraphReport"]


# -----------------------------------------------------------------------------
# Class: GraphReport
# -----------------------------------------------------------------------------
class GraphReport:
    """
    Build report tables from graphs.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    main_print : bool
        Controls console output.

    Methods
    -------
    shortest_paths_table(graph):
        Every ordered pair of distinct nodes of a `MatrixGraph`, with distance and path.
    path_labels(graph, from_node, to_node):
        Labels of the nodes along one shortest path.
    adjacency_table(graph):
        Node, label and edge targets of a `ListGraph`.
    traversal_table(graph):
        Depth-first order of a `ListGraph` with labels.
    """

    def __init__(self, param: Union[dict, ParamConfig, None] = None) -> None:
        self.config = resolve_config(param)
        self.main_print = self.config.main_print or (__name__ == "__main__")

    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)

    # -------------------------------------------------------------------------
    # Weighted graph
    # -------------------------------------------------------------------------
    def shortest_paths_table(self, graph: MatrixGraph) -> pl.DataFrame:
        """
        All-pairs shortest-path table.

        Parameters
        ----------
        graph : MatrixGraph
            A graph on which `compute_shortest_paths()` has run.

        Returns
        -------
        polars.DataFrame
            One row per ordered pair ``from != to``, sorted by ``from``, ``to``.

            Columns:

            - 'from', 'to': Int32 (node ids)
            - 'from_label', 'to_label': Utf8
            - 'distance': Int64 (null if unreachable)
            - 'nb_edges': Int32 (``len(path) - 1``, 0 if unreachable)
            - 'path': List(Int32)

        Raises
        ------
        NotComputedError
            If the shortest paths of ``graph`` are stale or were never computed.
        """
        if not graph.is_computed:
            raise NotComputedError(
                "The graph has no up-to-date shortest paths.\n"
                "Run 'compute_shortest_paths' first."
            )

        rows: Dict[str, List[Any]] = {column: [] for column in SCHEMA_SHORTEST_PATHS}

        for source in range(1, graph.size + 1):
            for target in range(1, graph.size + 1):
                if source == target:
                    continue
                result = graph.distance_and_path(source, target)
                rows["from"].append(source)
                rows["to"].append(target)
                rows["from_label"].append(graph.label(source))
                rows["to_label"].append(graph.label(target))
                rows["distance"].append(result.distance)
                rows["nb_edges"].append(result.nb_edges)
                rows["path"].append(result.path)

        table = pl.DataFrame(rows, schema=SCHEMA_SHORTEST_PATHS)

        reachable = table.filter(pl.col("distance").is_not_null()).height
        self._log(f"Shortest-path table: {reachable} reachable pairs out of {table.height}.")
        return table

    def path_labels(self, graph: MatrixGraph, from_node: int, to_node: int) -> List[str]:
        """
        Labels of the nodes traversed by the shortest path ``from_node → to_node``.

        Returns an empty list when ``to_node`` is unreachable.
        """
        result = graph.distance_and_path(from_node, to_node)
        return [graph.label(node) for node in result.path]

    # -------------------------------------------------------------------------
    # Unweighted graph
    # -------------------------------------------------------------------------
    def adjacency_table(self, graph: ListGraph) -> pl.DataFrame:
        """
        One row per node with its label and edge targets in list order.

        Columns: 'node' (Int32), 'label' (Utf8), 'targets' (List(Int32)).
        """
        nodes = list(range(1, graph.size + 1))
        return pl.DataFrame(
            {
                "node": nodes,
                "label": [graph.label(node) for node in nodes],
                "targets": [graph.neighbors(node) for node in nodes],
            },
            schema=SCHEMA_ADJACENCY,
        )

    def traversal_table(self, graph: ListGraph) -> pl.DataFrame:
        """
        Depth-first traversal from node 1, one row per visited node.

        Columns: 'order' (Int32, starting at 1), 'node' (Int32), 'label' (Utf8).
        """
        order = graph.depth_first_traversal()
        return pl.DataFrame(
            {
                "order": list(range(1, len(order) + 1)),
                "node": order,
                "label": [graph.label(node) for node in order],
            },
            schema=SCHEMA_TRAVERSAL,
        )
