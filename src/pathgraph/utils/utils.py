# -*- coding: utf-8 -*-
"""
General-purpose utilities for pathgraph.

This module provides small helpers for:

- node id validation against the current graph size (`check_node_id`, `check_node_count`).
- edge list handling (`truncate_at_sentinel`).
"""

from __future__ import annotations

import operator
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from pathgraph.utils.constant import NO_NODE
from pathgraph.utils.errors import OutOfRangeError

__all__ = [
    "as_integer",
    "check_node_id",
    "check_node_count",
    "truncate_at_sentinel",
]


# -----------------------------------------------------------------------------
# Validation helpers
# -----------------------------------------------------------------------------
def as_integer(value: Any, *, name: str = "value") -> int:
    """
    Convert an integer-like value (Python or numpy integer) to a plain int.

    Raises
    ------
    TypeError
        If ``value`` is not an integer (floats are refused rather than truncated).

    Examples
    --------
    >>> as_integer(3)
    3
    >>> as_integer(2.7)
    Traceback (most recent call last):
    ...
    TypeError: 'value' must be an integer, got float.
    """
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"'{name}' must be an integer, got {type(value).__name__}.") from None


def check_node_id(node: int, size: int, *, name: str = "node") -> int:
    """
    Validate a node id against the current node count.

    Parameters
    ----------
    node : int
        Node id to check. Valid ids are ``1..size``.
    size : int
        Current node count of the graph.
    name : str, optional
        Name used in the error message (e.g., ``"from"``).

    Returns
    -------
    int
        The id, converted to a plain Python int.

    Raises
    ------
    OutOfRangeError
        If ``node`` is not in ``[1, size]``.
    """
    node = as_integer(node, name=name)
    if node < 1 or node > size:
        raise OutOfRangeError(f"Node id '{name}'={node} is out of range [1, {size}].")
    return node


def check_node_count(node_count: int, max_nodes: Optional[int]) -> int:
    """
    Validate the node count of a build against the configured cap.

    Raises
    ------
    ValueError
        If ``node_count`` is negative.
    OutOfRangeError
        If ``node_count`` exceeds ``max_nodes``.
    """
    node_count = as_integer(node_count, name="node_count")
    if node_count < 0:
        raise ValueError(f"Node count must be >= 0, got {node_count}.")
    if max_nodes is not None and node_count > max_nodes:
        raise OutOfRangeError(f"Node count {node_count} exceeds the configured cap of {max_nodes} nodes.")
    return node_count


# -----------------------------------------------------------------------------
# Edge list helpers
# -----------------------------------------------------------------------------
def truncate_at_sentinel(edges: Iterable[Sequence[int]]) -> List[Tuple[int, ...]]:
    """
    Copy an edge sequence up to (excluding) the first tuple whose ``from`` is ``NO_NODE``.

    Parameters
    ----------
    edges : iterable of tuples
        ``(from, to)`` or ``(from, to, weight)`` tuples, possibly followed by an
        end-of-list marker.

    Returns
    -------
    list of tuple
        The edges before the marker, as tuples of ints.

    Raises
    ------
    TypeError
        If an edge holds a non-integer value.
    ValueError
        If an edge has fewer than two values.

    Examples
    --------
    >>> truncate_at_sentinel([(1, 2, 5), (2, 3, 3), (0, 0, 0), (3, 1, 1)])
    [(1, 2, 5), (2, 3, 3)]
    """
    kept: List[Tuple[int, ...]] = []
    for edge in edges:
        edge = tuple(as_integer(value, name="edge") for value in edge)
        if edge and edge[0] == NO_NODE:
            break
        if len(edge) < 2:
            raise ValueError(f"Edge {edge} must have at least a 'from' and a 'to' node.")
        kept.append(edge)
    return kept

