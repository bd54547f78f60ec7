#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (fewest edges, ignores weights).
- Marks vertices visited when they are enqueued.
"""

from __future__ import annotations
from typing import Dict, Optional
from collections import deque
import numpy as np

from ..graph.model import MazeGraph
from .common import failure, new_parents, reconstruct_path, resolve_endpoints


class BFSPlanner:
    name = "bfs"

    def plan(self, graph: MazeGraph, start: Optional[int] = None, end: Optional[int] = None) -> Dict:
        start, end = resolve_endpoints(graph, start, end)
        if start is None or end is None:
            return failure()

        visited = np.zeros(len(graph), dtype=bool)
        parents = new_parents(len(graph))

        dq = deque([start])
        visited[start] = True
        expanded = 0

        while dq:
            current = dq.popleft()
            expanded += 1
            if current == end:
                return {'success': True, 'path': reconstruct_path(parents, end), 'expanded': expanded}
            for nb, _ in graph.neighbors(current):
                if visited[nb]:
                    continue
                visited[nb] = True
                parents[nb] = current
                dq.append(nb)

        return failure(expanded)
