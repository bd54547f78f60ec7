#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-First Search planner (not optimal, but useful as a baseline).
- Explicit stack; a vertex is marked visited when popped, so it may be pushed
  several times before that. Its parent is the last vertex that pushed it.
- Returns the first path found (often long and twisty).
"""

from __future__ import annotations
from typing import Dict, Optional
import numpy as np

from ..graph.model import MazeGraph
from .common import failure, new_parents, reconstruct_path, resolve_endpoints


class DFSPlanner:
    name = "dfs"

    def plan(self, graph: MazeGraph, start: Optional[int] = None, end: Optional[int] = None) -> Dict:
        """
        Find a path from start to end using depth-first search.

        Args:
            graph: MazeGraph to search (not modified)
            start: start vertex index, graph.start if None
            end: end vertex index, graph.end if None

        Returns:
            Dictionary with 'success' (bool), 'path' (list of indices or None)
            and 'expanded' (number of vertices popped)
        """
        start, end = resolve_endpoints(graph, start, end)
        if start is None or end is None:
            return failure()

        visited = np.zeros(len(graph), dtype=bool)
        parents = new_parents(len(graph))

        stack = [start]
        expanded = 0

        while stack:
            current = stack.pop()
            expanded += 1
            if current == end:
                return {'success': True, 'path': reconstruct_path(parents, end), 'expanded': expanded}
            if visited[current]:
                continue
            visited[current] = True

            for nb, _ in graph.neighbors(current):
                if not visited[nb]:
                    parents[nb] = current
                    stack.append(nb)

        return failure(expanded)
