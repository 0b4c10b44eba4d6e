# -*- coding: utf-8 -*-
"""
Internal utilities (config, errors, constants, misc).

This subpackage is intentionally not a user-facing API surface beyond the
configuration and the exceptions. Import what you need from concrete modules,
for example:

    from pathgraph.utils.constant import NO_NODE
"""

from __future__ import annotations

from pathgraph.utils.config import ParamConfig
from pathgraph.utils.errors import NotComputedError, OutOfRangeError

__all__: list[str] = ["ParamConfig", "OutOfRangeError", "NotComputedError"]
