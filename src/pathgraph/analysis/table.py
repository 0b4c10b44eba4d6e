# -*- coding: utf-8 -*-
"""
Shortest-path bookkeeping for the adjacency-matrix graph.

This module defines:

- `ShortestPathTable` – one row per source node of ``{visited, reached, dist, path}``
  cells, filled by Dijkstra's algorithm and read for path reconstruction.
- `PathResult` – the ``(distance, path)`` answer of a per-pair query.

Notes
-----
- "Infinite" is the ``reached == False`` tag of a cell. The ``dist`` field of an
  unreached cell is never read nor used in an addition.
- The table is filled once per build and read-only afterwards; the owning graph
  resets it whenever its edges change.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

import numpy as np

from pathgraph.utils.constant import DIST_MAX, NO_NODE, table_dtype

__all__ = ["ShortestPathTable", "PathResult"]


# -----------------------------------------------------------------------------
# Class: PathResult
# -----------------------------------------------------------------------------
class PathResult(NamedTuple):
    """
    Answer of `MatrixGraph.distance_and_path`.

    Attributes
    ----------
    distance : int or None
        Total weight of the shortest path, ``None`` if the target is unreachable.
    path : list of int
        Node ids from source to target (both included), empty if unreachable.
    """

    distance: Optional[int]
    path: List[int]

    @property
    def reachable(self) -> bool:
        return self.distance is not None

    @property
    def nb_edges(self) -> int:
        """Number of edges along the path (0 when unreachable or source == target)."""
        return max(len(self.path) - 1, 0)


# -----------------------------------------------------------------------------
# Class: ShortestPathTable
# -----------------------------------------------------------------------------
class ShortestPathTable:
    """
    All-pairs table of Dijkstra state, indexed ``[source, node]`` with 1-based ids.

    Attributes
    ----------
    size : int
        Node count of the graph the table belongs to.
    cells : numpy.ndarray
        Structured array of shape ``(size + 1, size + 1)`` with the fields
        ``visited``, ``reached``, ``dist`` and ``path`` (row/column 0 unused).
    """

    def __init__(self, size: int = 0) -> None:
        self.size = int(size)
        self.cells = np.zeros((self.size + 1, self.size + 1), dtype=table_dtype())
        self.reset()

    def __repr__(self) -> str:
        return f"ShortestPathTable(size={self.size})"

    def reset(self) -> None:
        """Put every cell back to unvisited, unreached, no predecessor."""
        self.cells["visited"] = False
        self.cells["reached"] = False
        self.cells["dist"] = 0
        self.cells["path"] = NO_NODE

    # -------------------------------------------------------------------------
    # Read-only field views
    # -------------------------------------------------------------------------
    @property
    def visited(self) -> np.ndarray:
        return self.cells["visited"]

    @property
    def reached(self) -> np.ndarray:
        return self.cells["reached"]

    @property
    def dist(self) -> np.ndarray:
        return self.cells["dist"]

    @property
    def path(self) -> np.ndarray:
        return self.cells["path"]

    # -------------------------------------------------------------------------
    # Dijkstra
    # -------------------------------------------------------------------------
    def run_source(self, source: int, cost: np.ndarray, adjacent: np.ndarray) -> None:
        """
        Run Dijkstra's algorithm from one source and store the result in its row.

        Parameters
        ----------
        source : int
            Source node id, in ``[1, size]``.
        cost : numpy.ndarray
            Integer weight matrix of shape ``(size + 1, size + 1)``.
        adjacent : numpy.ndarray
            Boolean matrix of the same shape; ``False`` means "no edge".

        Notes
        -----
        - The next node to finalize is the unvisited reached node with the smallest
          distance; ties go to the lowest id.
        - The loop stops as soon as no unvisited node is reached: the remaining
          nodes are unreachable and nothing is relaxed from them.
        - Edge weights are assumed non-negative; this is not checked.

        Raises
        ------
        OverflowError
            If a relaxed distance would not fit in a signed 64-bit integer.
        """
        row = self.cells[source]
        visited = row["visited"]
        reached = row["reached"]
        dist = row["dist"]
        path = row["path"]

        dist[source] = 0
        reached[source] = True

        for _ in range(self.size):
            candidates = np.flatnonzero(reached & ~visited)
            if candidates.size == 0:
                break
            # argmin keeps the first minimum, candidates are in ascending id order
            current = int(candidates[np.argmin(dist[candidates])])
            visited[current] = True

            targets = adjacent[current] & ~visited
            # dist[current] >= 0 with non-negative weights, so the bound itself cannot wrap
            overflow = targets & (cost[current] > DIST_MAX - dist[current])
            if overflow.any():
                raise OverflowError(
                    f"Distance from node {source} through node {current} exceeds the int64 range."
                )
            relaxed = dist[current] + cost[current]
            improve = targets & (~reached | (relaxed < dist))

            dist[improve] = relaxed[improve]
            path[improve] = current
            reached[improve] = True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def distance(self, source: int, target: int) -> Optional[int]:
        """Shortest distance, or ``None`` if ``target`` is unreachable from ``source``."""
        if not self.cells["reached"][source, target]:
            return None
        return int(self.cells["dist"][source, target])

    def reconstruct(self, source: int, target: int) -> List[int]:
        """
        Rebuild the node sequence from ``source`` to ``target``.

        Walks the predecessors of ``target`` back to ``NO_NODE`` and reverses them.

        Returns
        -------
        list of int
            Path from source to target, or ``[]`` if the target is unreachable.

        Raises
        ------
        RuntimeError
            If the walk does not end within ``size`` nodes (corrupt table).
        """
        if not self.cells["reached"][source, target]:
            return []

        predecessors = self.cells["path"][source]
        backward: List[int] = []
        node = target
        while node != NO_NODE:
            backward.append(node)
            if len(backward) > self.size:
                raise RuntimeError(
                    f"Path from {source} to {target} does not terminate; the table is inconsistent."
                )
            node = int(predecessors[node])

        backward.reverse()
        return backward
