# -*- coding: utf-8 -*-
"""
Build requests handed to the graph classes by an external loader.

This module defines:

- `NodeLabels` – immutable id → display label store (ids ``1..n``).
- `BuildRequest` – the pre-parsed ``{node_count, labels, edges}`` structure consumed
  by `MatrixGraph.build_from_request` and `ListGraph.build_from_request`.

Notes
-----
- Parsing any textual or wire format is the loader's job; this module starts from
  Python sequences or a polars DataFrame.
- An edge whose ``from`` is ``0`` marks the end of the edge list: it and everything
  after it are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

import polars as pl

from pathgraph.utils.constant import UNWEIGHTED_EDGE_COLUMNS, WEIGHTED_EDGE_COLUMNS
from pathgraph.utils.utils import as_integer, check_node_id, truncate_at_sentinel

__all__ = ["NodeLabels", "BuildRequest"]

Edge = Union[Tuple[int, int], Tuple[int, int, int]]


# -----------------------------------------------------------------------------
# Class: NodeLabels
# -----------------------------------------------------------------------------
class NodeLabels:
    """
    Immutable store of node labels keyed by 1-based node id.

    Examples
    --------
    >>> labels = NodeLabels(["A", "B", "C"])
    >>> labels[2]
    'B'
    >>> len(labels)
    3
    """

    __slots__ = ("_labels",)

    def __init__(self, labels: Iterable[str] = ()) -> None:
        self._labels: Tuple[str, ...] = tuple(str(label) for label in labels)

    def __getitem__(self, node: int) -> str:
        node = check_node_id(node, len(self._labels))
        return self._labels[node - 1]

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(enumerate(self._labels, start=1))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeLabels):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        return hash(self._labels)

    def __repr__(self) -> str:
        return f"NodeLabels({list(self._labels)!r})"

    def as_list(self) -> List[str]:
        """Labels in id order (index 0 holds node 1)."""
        return list(self._labels)


# -----------------------------------------------------------------------------
# Class: BuildRequest
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class BuildRequest:
    """
    Pre-parsed graph description.

    Attributes
    ----------
    node_count : int
        Number of nodes; ids run from 1 to ``node_count``.
    labels : NodeLabels
        One label per node.
    edges : tuple of tuples
        ``(from, to)`` pairs for an unweighted graph, ``(from, to, weight)`` triples
        for a weighted one. Already truncated at the end-of-list marker.
    """

    node_count: int
    labels: NodeLabels
    edges: Tuple[Edge, ...] = field(default_factory=tuple)

    @classmethod
    def from_records(
        cls,
        node_count: int,
        labels: Sequence[str],
        edges: Iterable[Sequence[int]] = (),
    ) -> BuildRequest:
        """
        Create a request from plain Python sequences.

        Parameters
        ----------
        node_count : int
            Number of nodes.
        labels : sequence of str
            Labels for nodes ``1..node_count`` in order.
        edges : iterable of tuples
            Edge tuples; consumption stops at the first tuple with ``from == 0``.

        Returns
        -------
        BuildRequest
        """
        return cls(
            node_count=as_integer(node_count, name="node_count"),
            labels=labels if isinstance(labels, NodeLabels) else NodeLabels(labels),
            edges=tuple(truncate_at_sentinel(edges)),
        )

    @classmethod
    def from_frame(cls, labels: Sequence[str], edges: pl.DataFrame) -> BuildRequest:
        """
        Create a request from a polars edge frame.

        Parameters
        ----------
        labels : sequence of str
            Labels for nodes ``1..len(labels)``.
        edges : polars.DataFrame
            Columns ``from`` and ``to``, plus ``weight`` for a weighted graph.
            Rows are consumed in frame order up to the first ``from == 0``.

        Returns
        -------
        BuildRequest

        Raises
        ------
        TypeError
            If ``edges`` is not a polars DataFrame.
        ValueError
            If ``from`` or ``to`` is missing.
        """
        if not isinstance(edges, pl.DataFrame):
            raise TypeError("The 'edges' frame must be a Polars DataFrame.")

        missing_columns = set(UNWEIGHTED_EDGE_COLUMNS) - set(edges.columns)
        if missing_columns:
            raise ValueError(f"Missing required columns in edges: {', '.join(sorted(missing_columns))}")

        columns = WEIGHTED_EDGE_COLUMNS if "weight" in edges.columns else UNWEIGHTED_EDGE_COLUMNS
        records = edges.select(columns).iter_rows()
        return cls.from_records(len(labels), labels, records)

    @property
    def is_weighted(self) -> bool:
        """True if every edge carries a weight (an edgeless request counts as weighted)."""
        return all(len(edge) == 3 for edge in self.edges)

    def validate(self, *, weighted: bool) -> BuildRequest:
        """
        Check the request shape before a build.

        Parameters
        ----------
        weighted : bool
            ``True`` for a `MatrixGraph` (triples), ``False`` for a `ListGraph` (pairs).

        Raises
        ------
        ValueError
            If the node count is negative, the label count differs from the node
            count, or an edge has the wrong arity.
        """
        if self.node_count < 0:
            raise ValueError(f"Node count must be >= 0, got {self.node_count}.")
        if len(self.labels) != self.node_count:
            raise ValueError(
                f"Expected {self.node_count} labels, got {len(self.labels)}."
            )

        arity = 3 if weighted else 2
        for edge in self.edges:
            if len(edge) != arity:
                kind = "(from, to, weight)" if weighted else "(from, to)"
                raise ValueError(f"Edge {edge} is not a {kind} tuple.")
        return self
