# -*- coding: utf-8 -*-
"""
Core constants for pathgraph.

This module centralizes:

- the reserved node id ``NO_NODE`` (end of path, end of edge list).
- the numpy record layout of the shortest-path table (``TABLE_DTYPE``).
- the polars schemas of the edge frames and reports.

Notes
-----
* Node ids are 1-based; slot 0 of every container is left unused so that
  ``NO_NODE`` never collides with a real node.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np
import polars as pl

__all__ = [
    "NO_NODE",
    "DIST_MAX",
    "TABLE_DTYPE",
    "WEIGHTED_EDGE_COLUMNS",
    "UNWEIGHTED_EDGE_COLUMNS",
    "SCHEMA_WEIGHTED_EDGES",
    "SCHEMA_UNWEIGHTED_EDGES",
    "SCHEMA_SHORTEST_PATHS",
    "SCHEMA_ADJACENCY",
    "SCHEMA_TRAVERSAL",
    "table_dtype",
]


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

NO_NODE: int = 0
""" Reserved id: "no predecessor" in the table, "end of edge list" in a build request. """

DIST_MAX: int = int(np.iinfo(np.int64).max)
""" Largest distance the shortest-path table can hold. """

# One cell of the shortest-path table, per (source, node) pair.
# `reached` is the finite/infinite tag: `dist` is meaningless while it is False.
TABLE_DTYPE: List[Tuple[str, str]] = [
    ("visited", "?"),
    ("reached", "?"),
    ("dist", "i8"),
    ("path", "i8"),
]

WEIGHTED_EDGE_COLUMNS: List[str] = ["from", "to", "weight"]
UNWEIGHTED_EDGE_COLUMNS: List[str] = ["from", "to"]

# ------------------------------------------------------------------
# Polars schemas of the frames produced by the graphs and GraphReport
SCHEMA_WEIGHTED_EDGES: Dict[str, pl.DataType] = {
    "from": pl.Int32,
    "to": pl.Int32,
    "weight": pl.Int64,
}

SCHEMA_UNWEIGHTED_EDGES: Dict[str, pl.DataType] = {
    "from": pl.Int32,
    "to": pl.Int32,
}

SCHEMA_SHORTEST_PATHS: Dict[str, pl.DataType] = {
    "from": pl.Int32,
    "to": pl.Int32,
    "from_label": pl.Utf8,
    "to_label": pl.Utf8,
    "distance": pl.Int64,
    "nb_edges": pl.Int32,
    "path": pl.List(pl.Int32),
}

SCHEMA_ADJACENCY: Dict[str, pl.DataType] = {
    "node": pl.Int32,
    "label": pl.Utf8,
    "targets": pl.List(pl.Int32),
}

SCHEMA_TRAVERSAL: Dict[str, pl.DataType] = {
    "order": pl.Int32,
    "node": pl.Int32,
    "label": pl.Utf8,
}


def table_dtype() -> np.dtype:
    """Return the numpy structured dtype of a shortest-path table cell."""
    return np.dtype(TABLE_DTYPE)
