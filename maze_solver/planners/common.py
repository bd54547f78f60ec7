#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Helpers shared by all planners: endpoint resolution, path reconstruction
from a parent array, and path cost.

Planner API
-----------
planner.plan(graph, start=None, end=None)
  -> {'success': bool, 'path': List[int] or None, 'expanded': int}
"""

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..graph.model import MazeGraph

NO_PARENT = -1


def failure(expanded: int = 0) -> Dict:
    return {'success': False, 'path': None, 'expanded': expanded}


def resolve_endpoints(graph: MazeGraph,
                      start: Optional[int] = None,
                      end: Optional[int] = None) -> Tuple[Optional[int], Optional[int]]:
    """Explicit indices win over the graph's own; out-of-range indices become None."""
    s = graph.start if start is None else start
    e = graph.end if end is None else end
    n = len(graph)
    if s is None or not (0 <= s < n):
        s = None
    if e is None or not (0 <= e < n):
        e = None
    return s, e


def new_parents(n: int) -> np.ndarray:
    return np.full(n, NO_PARENT, dtype=np.int64)


def reconstruct_path(parents: np.ndarray, target: int) -> List[int]:
    """Walk predecessors back from `target` and return the start->target order."""
    path = [int(target)]
    current = int(target)
    while parents[current] != NO_PARENT:
        current = int(parents[current])
        path.append(current)
    path.reverse()
    return path


def path_length(path: Sequence[int]) -> int:
    """Number of edges along the path."""
    return max(0, len(path) - 1)


def path_cost(graph: MazeGraph, path: Sequence[int], strict: bool = True) -> float:
    """
    Sum of edge weights between consecutive path vertices.

    strict=True raises ValueError when two consecutive vertices share no
    stored edge; strict=False counts such a pair as zero.
    """
    total = 0.0
    for cur, nxt in zip(path, path[1:]):
        edge = graph.vertices[cur].edge_to(nxt)
        if edge is None:
            if strict:
                raise ValueError(f"No edge between vertices {cur} and {nxt}")
            continue
        total += edge[1]
    return total
