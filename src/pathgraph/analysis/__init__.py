# -*- coding: utf-8 -*-
"""
Analysis subpackage: graph representations and their algorithms.

For most users, the classes `MatrixGraph` (all-pairs Dijkstra) and `ListGraph`
(depth-first traversal) are the entry points. The lower-level class
`ShortestPathTable` remains available in `pathgraph.analysis.table`
for advanced workflows, but is intentionally not re-exported here.
"""

from __future__ import annotations

from .matrix import MatrixGraph
from .adjacency import ListGraph
from .table import PathResult
# Advanced (not re-exported): from .table import ShortestPathTable  # import explicitly if needed

__all__ = ["MatrixGraph", "ListGraph", "PathResult"]
