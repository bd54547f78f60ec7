# -*- coding: utf-8 -*-
"""
Top-level package for the image maze solver.
Turns a binary maze image into a reduced graph of open cells and solves it
with interchangeable planners. Provides a convenience factory for planners.
"""

from __future__ import annotations
from typing import Any

__all__ = [
    "__version__",
    "get_planner",
]

__version__ = "0.1.0"


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'bfs', 'dfs', 'dijkstra'
    kwargs : dict
        Passed to the planner constructor

    Returns
    -------
    planner instance
    """
    name = name.strip().lower()
    from .planners import PLANNERS  # lazy import
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)
