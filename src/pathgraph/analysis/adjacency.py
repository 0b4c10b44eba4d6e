# -*- coding: utf-8 -*-
"""
Unweighted digraph on adjacency lists, with depth-first traversal.

This module defines the class `ListGraph`. Each node owns the list of its outgoing
edges; a new edge is inserted at the head of the list, so the list order is the
reverse of the input order. `depth_first_traversal()` walks the graph from node 1
in that order.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Iterator, List, Sequence, Tuple, Union, TYPE_CHECKING

import polars as pl
import networkx as nx

from pathgraph.pre.request import BuildRequest, NodeLabels
from pathgraph.utils.config import resolve_config
from pathgraph.utils.constant import SCHEMA_UNWEIGHTED_EDGES, UNWEIGHTED_EDGE_COLUMNS
from pathgraph.utils.utils import check_node_count, check_node_id, truncate_at_sentinel

if TYPE_CHECKING:  # noqa: F401
    from pathgraph.utils.config import ParamConfig

__all__ = ["ListGraph", "GraphNode"]


@dataclass
class GraphNode:
    """One node record: its label, its outgoing edge targets and its traversal flag."""
    label: str
    edges: Deque[int] = field(default_factory=deque)
    visited: bool = False


# -----------------------------------------------------------------------------
# Class: ListGraph
# -----------------------------------------------------------------------------
class ListGraph:
    """
    Unweighted directed graph stored as per-node adjacency lists.

    Attributes
    ----------
    config : ParamConfig
        Dataclass with validated configuration parameters.
    size : int
        Current node count.
    nodes : list of GraphNode
        Node records; index 0 is unused so that ``nodes[i]`` is node ``i``.
    main_print : bool
        Controls console output.

    Examples
    --------
    >>> graph = ListGraph()
    >>> graph.build(4, ["a", "b", "c", "d"], [(1, 2), (1, 3), (2, 4)])
    >>> graph.neighbors(1)
    [3, 2]
    >>> graph.depth_first_traversal()
    [1, 3, 2, 4]
    """

    def __init__(self, param: Union[dict, ParamConfig, None] = None) -> None:
        self.config = resolve_config(param)
        self.max_nodes = self.config.max_nodes
        self.main_print = self.config.main_print or (__name__ == "__main__")

        self.size = 0
        self.nodes: List[GraphNode] = [GraphNode(label="")]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, edges={self.number_of_edges()})"

    def _log(self, message: str) -> None:
        if self.main_print:
            print(message)

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
        Discard the previous graph and load a new one.

        Parameters
        ----------
        node_count : int
            Number of nodes; ids run from 1 to ``node_count``.
        labels : sequence of str or NodeLabels
            One label per node, in id order.
        edges : iterable of (from, to)
            Edge pairs; consumption stops at the first pair whose ``from`` is ``0``.

        Raises
        ------
        ValueError
            If the label count does not match ``node_count`` or a tuple is not a pair.
        OutOfRangeError
            If ``node_count`` exceeds ``max_nodes`` or an edge names an unknown node.
        """
        request = BuildRequest.from_records(node_count, labels, edges)
        self.build_from_request(request)

    def build_from_request(self, request: BuildRequest) -> None:
        """
        Same as `build`, from an already assembled `BuildRequest`.
        """
        request.validate(weighted=False)
        node_count = check_node_count(request.node_count, self.max_nodes)

        # Fresh records: nothing survives from a previous build
        self.size = node_count
        self.nodes = [GraphNode(label="")]
        self.nodes.extend(GraphNode(label=label) for _, label in request.labels)

        for from_node, to_node in truncate_at_sentinel(request.edges):
            self.insert_edge(from_node, to_node)

        self._log(f"Unweighted graph built with {self.size} nodes and {self.number_of_edges()} edges.")

    def insert_edge(self, from_node: int, to_node: int) -> None:
        """Prepend an edge ``from_node → to_node`` to the list of ``from_node``."""
        i = check_node_id(from_node, self.size, name="from")
        j = check_node_id(to_node, self.size, name="to")
        self.nodes[i].edges.appendleft(j)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def neighbors(self, node: int) -> List[int]:
        """Targets of the outgoing edges of ``node``, in list order."""
        node = check_node_id(node, self.size)
        return list(self.nodes[node].edges)

    def label(self, node: int) -> str:
        node = check_node_id(node, self.size)
        return self.nodes[node].label

    def is_visited(self, node: int) -> bool:
        """Whether ``node`` was visited by the last traversal."""
        node = check_node_id(node, self.size)
        return self.nodes[node].visited

    def number_of_edges(self) -> int:
        return sum(len(record.edges) for record in self.nodes)

    def edges(self) -> List[Tuple[int, int]]:
        """All edges as ``(from, to)`` pairs, by source id then list order."""
        return [
            (node, target)
            for node in range(1, self.size + 1)
            for target in self.nodes[node].edges
        ]

    # -------------------------------------------------------------------------
    # Depth-first traversal
    # -------------------------------------------------------------------------
    def depth_first_traversal(self) -> List[int]:
        """
        Visit every node reachable from node 1, depth first.

        A node is emitted when first visited; its edges are then followed in list
        order, descending into each target not yet visited before moving to the
        next edge. Nodes unreachable from node 1 are never emitted.

        Returns
        -------
        list of int
            Node ids in visiting order; empty when the graph has no node.

        Notes
        -----
        - Visited flags are cleared at the start of each call, so repeated calls
          return the same sequence.
        - The descent uses an explicit stack of edge iterators and produces the
          same order as the recursive formulation.
        """
        for record in self.nodes:
            record.visited = False

        order: List[int] = []
        if self.size == 0:
            return order

        stack: List[Iterator[int]] = [self._visit(1, order)]
        while stack:
            for target in stack[-1]:
                if not self.nodes[target].visited:
                    stack.append(self._visit(target, order))
                    break
            else:
                stack.pop()

        self._log(f"Depth-first traversal visited {len(order)} of {self.size} nodes.")
        return order

    def _visit(self, node: int, order: List[int]) -> Iterator[int]:
        self.nodes[node].visited = True
        order.append(node)
        return iter(self.nodes[node].edges)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------
    def edges_frame(self) -> pl.DataFrame:
        """Edges as a polars DataFrame with columns ``from``, ``to`` (list order)."""
        return pl.DataFrame(self.edges(), schema=SCHEMA_UNWEIGHTED_EDGES, orient="row")

    def to_networkx(self) -> nx.DiGraph:
        """Export to a NetworkX DiGraph; nodes carry a ``label`` attribute."""
        edgelist_df = self.edges_frame().to_pandas()

        graph = nx.from_pandas_edgelist(
            edgelist_df,
            source=UNWEIGHTED_EDGE_COLUMNS[0],
            target=UNWEIGHTED_EDGE_COLUMNS[1],
            create_using=nx.DiGraph,
        )
        graph.add_nodes_from(
            (node, {"label": self.nodes[node].label}) for node in range(1, self.size + 1)
        )
        return graph
