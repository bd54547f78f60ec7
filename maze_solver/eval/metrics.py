#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Planner comparison on a single maze graph, plus aggregation across runs.

Assumptions
-----------
- Graph: MazeGraph from maze_solver.graph
- Planner API: planner.plan(graph) -> {'success': bool, 'path': ..., 'expanded': int}

What's inside
-------------
- is_valid_path(): endpoints match and every step follows a stored edge
- evaluate_planners(): run planners on one graph, one row per planner
- summarize_runs(): per-planner aggregate over many rows (pandas)
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Sequence
import time

import numpy as np
import pandas as pd

from ..graph.model import MazeGraph
from ..planners import PLANNERS
from ..planners.common import path_cost, path_length


def is_valid_path(graph: MazeGraph, path: Optional[Sequence[int]]) -> bool:
    if not path:
        return False
    if path[0] != graph.start or path[-1] != graph.end:
        return False
    return all(graph.vertices[a].edge_to(b) is not None for a, b in zip(path, path[1:]))


def evaluate_planners(graph: MazeGraph,
                      planners: Optional[Iterable[str]] = None) -> List[Dict[str, Any]]:
    """
    Run each planner once on `graph`.

    Row keys: planner, success, cost, edges, expanded, time_sec. cost/edges
    are NaN when no path was found.
    """
    names = list(planners) if planners is not None else list(PLANNERS)
    rows: List[Dict[str, Any]] = []
    for name in names:
        key = name.strip().lower()
        if key not in PLANNERS:
            raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
        planner = PLANNERS[key]()
        t0 = time.perf_counter()
        res = planner.plan(graph)
        dt = time.perf_counter() - t0
        ok = bool(res['success'])
        rows.append({
            "planner": key,
            "success": ok,
            "cost": path_cost(graph, res['path']) if ok else np.nan,
            "edges": path_length(res['path']) if ok else np.nan,
            "expanded": int(res.get('expanded', 0)),
            "time_sec": float(dt),
        })
    return rows


def summarize_runs(rows: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    """Mean cost/edges/expanded/time and success rate per planner."""
    df = pd.DataFrame(list(rows))
    if df.empty:
        return df
    agg = df.groupby("planner").agg(
        runs=("success", "size"),
        success_rate=("success", "mean"),
        mean_cost=("cost", "mean"),
        mean_edges=("edges", "mean"),
        mean_expanded=("expanded", "mean"),
        mean_time_ms=("time_sec", lambda s: 1000.0 * s.mean()),
    )
    return agg.reset_index()
