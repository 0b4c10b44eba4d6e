# -*- coding: utf-8 -*-
"""
Post-processing subpackage: report tables for display front ends.

This subpackage re-exports the main user-facing class:

- class `GraphReport` – polars tables of all-pairs shortest paths, adjacency
  lists and depth-first order, plus label lookup along a path.
"""

from __future__ import annotations

from .report import GraphReport

__all__ = ["GraphReport"]
