# -*- coding: utf-8 -*-
"""
Pre-processing subpackage: build requests handed to the graph classes.

This subpackage re-exports user-facing classes so they can be imported directly:

- class `BuildRequest` – pre-parsed ``{node_count, labels, edges}`` structure
- class `NodeLabels` – immutable id → label store
"""

from __future__ import annotations

from .request import BuildRequest, NodeLabels

__all__ = [
    "BuildRequest",
    "NodeLabels",
]
