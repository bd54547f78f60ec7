# -*- coding: utf-8 -*-
"""
Planners on maze graphs with a unified API:
planner.plan(graph: MazeGraph, start: int = None, end: int = None)
  -> {'success': bool, 'path': List[int] or None, 'expanded': int}
"""

from __future__ import annotations
from typing import Dict, List, Optional, Type

from ..graph.model import MazeGraph
from .bfs import BFSPlanner
from .dfs import DFSPlanner
from .dijkstra import DijkstraPlanner
from .common import path_cost, path_length, reconstruct_path

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "bfs": BFSPlanner,
    "dfs": DFSPlanner,
    "dijkstra": DijkstraPlanner,
}


def solve_graph(graph: MazeGraph, algorithm: str) -> Optional[List[int]]:
    """Run the named planner; returns the path, or None when there is none."""
    key = algorithm.strip().lower()
    if key not in PLANNERS:
        raise ValueError(f"Unknown planner '{algorithm}'. Available: {sorted(PLANNERS)}")
    res = PLANNERS[key]().plan(graph)
    return res['path'] if res['success'] else None


__all__ = [
    "BFSPlanner",
    "DFSPlanner",
    "DijkstraPlanner",
    "PLANNERS",
    "solve_graph",
    "reconstruct_path",
    "path_cost",
    "path_length",
]
