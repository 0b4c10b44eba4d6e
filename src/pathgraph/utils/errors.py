# -*- coding: utf-8 -*-
"""
Exceptions raised by the pathgraph graph classes.

- `OutOfRangeError` – a node id outside ``[1, size]`` or a node count above the cap.
- `NotComputedError` – a distance/path query on a stale shortest-path table.

An unreachable pair is not an error: it is returned as a regular `PathResult`.
"""

from __future__ import annotations

__all__ = ["OutOfRangeError", "NotComputedError"]


class OutOfRangeError(IndexError):
    """A node id or node count is outside the range accepted by the graph."""
    pass


class NotComputedError(RuntimeError):
    """Shortest paths were queried before `compute_shortest_paths()` ran on the current edges."""
    pass
