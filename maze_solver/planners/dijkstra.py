#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra planner over the (reduced) maze graph.
- Min-heap of (cost, vertex) with lazy deletion of stale entries.
- Relaxes a neighbour only on a strictly smaller distance.
- Edge weights are non-negative by construction (1.0 and sums of 1.0).
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import heapq
import numpy as np

from ..graph.model import MazeGraph
from .common import failure, new_parents, reconstruct_path, resolve_endpoints


class DijkstraPlanner:
    name = "dijkstra"

    def plan(self, graph: MazeGraph, start: Optional[int] = None, end: Optional[int] = None) -> Dict:
        start, end = resolve_endpoints(graph, start, end)
        if start is None or end is None:
            return failure()

        dist = np.full(len(graph), np.inf, dtype=np.float64)
        parents = new_parents(len(graph))

        dist[start] = 0.0
        pq: List[Tuple[float, int]] = [(0.0, start)]
        expanded = 0

        while pq:
            d, current = heapq.heappop(pq)
            if current == end:
                return {'success': True, 'path': reconstruct_path(parents, end), 'expanded': expanded + 1}
            if d > dist[current]:
                continue  # stale entry
            expanded += 1
            for nb, w in graph.neighbors(current):
                nd = d + w
                if nd < dist[nb]:
                    dist[nb] = nd
                    parents[nb] = current
                    heapq.heappush(pq, (nd, nb))

        return failure(expanded)
