# -*- coding: utf-8 -*-
"""
`pathgraph`: weighted and unweighted digraphs with shortest paths and traversal.

This top-level package exposes four subpackages:

- `pathgraph.pre`       – build requests (node count, labels, edge tuples)
- `pathgraph.analysis`  – adjacency-matrix graph with all-pairs Dijkstra,
  adjacency-list graph with depth-first traversal
- `pathgraph.post`      – report tables for display front ends
- `pathgraph.utils`     – configuration, errors, constants and helpers
"""

from __future__ import annotations

__all__ = ["pre", "analysis", "post", "utils", "__version__"]

# Optional version placeholder; replace at build time if needed
__version__ = "1.0.0"
