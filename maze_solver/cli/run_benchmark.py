#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_benchmark.py
----------------
Planner benchmark on generated mazes:
- Generates random mazes across (sizes x seeds), optionally braided
- Builds the reduced graph of each and runs the selected planners
- Writes one CSV row per (maze, planner) to <outdir>/bench_s<seed>_<stamp>.csv
- Prints a per-planner summary

Example:
    python -m maze_solver.cli.run_benchmark \
        --sizes 10x10,25x25,50x50 \
        --num-mazes 20 \
        --braid 0.05 \
        --planners bfs,dfs,dijkstra \
        --seed 0
"""

from __future__ import annotations
import argparse
import logging
import os
import sys
import time
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .. import config
from ..eval.metrics import evaluate_planners, summarize_runs
from ..graph import build_graph
from ..mazes.generator import generate_maze
from ..planners import PLANNERS


def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    sizes: List[Tuple[int, int]] = []
    for token in s.split(","):
        token = token.strip().lower()
        if "x" not in token:
            raise ValueError(f"Bad size '{token}', expected like 30x30")
        h, w = token.split("x")
        sizes.append((int(h), int(w)))
    return sizes


def run(sizes: List[Tuple[int, int]], num_mazes: int, planners: List[str],
        braid: float = 0.0, seed: int = 0, reduce: bool = True,
        progress: bool = True) -> pd.DataFrame:
    """Benchmark rows for every (size, maze, planner) combination."""
    rows: List[Dict] = []
    total = len(sizes) * num_mazes
    with tqdm(total=total, desc="Mazes", disable=not progress) as pbar:
        for (R, C) in sizes:
            for i_maze in range(num_mazes):
                # Unique, reproducible seed per maze
                base = (int(seed) * 1_000_003 + i_maze * 97 + R * 11 + C * 13) % 2**32
                maze = generate_maze(R, C, braid=braid, rng=np.random.default_rng(base))

                t0 = time.perf_counter()
                graph = build_graph(maze.grid, reduce=reduce)
                build_sec = time.perf_counter() - t0

                for row in evaluate_planners(graph, planners):
                    row.update({
                        "maze_id": i_maze, "rows": R, "cols": C, "braid": braid,
                        "seed": base, "vertices": len(graph),
                        "active_vertices": graph.active_vertices(),
                        "build_sec": build_sec,
                    })
                    rows.append(row)
                pbar.update(1)
    return pd.DataFrame(rows)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="maze-benchmark",
                                 description="Benchmark planners on generated mazes.")
    ap.add_argument("--sizes", type=str, default=config.DEFAULT_BENCHMARK_SIZES,
                    help="Comma-separated maze sizes in cells, like 10x10,25x25")
    ap.add_argument("--num-mazes", type=int, default=10, help="Mazes per size")
    ap.add_argument("--braid", type=float, default=0.05,
                    help="Fraction of internal walls to reopen (0 = perfect maze)")
    ap.add_argument("--planners", type=str, default=",".join(config.DEFAULT_PLANNERS),
                    help="Comma-separated planners: bfs,dfs,dijkstra")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--no-reduce", action="store_true", help="Keep corridor vertices")
    ap.add_argument("--outdir", type=str, default=str(config.RESULTS_DIR), help="Output directory for CSV")
    ap.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    ap.add_argument("--log-level", type=str, default=config.LOG_LEVEL,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=config.LOG_FORMAT)

    planners = [p.strip().lower() for p in args.planners.split(",") if p.strip()]
    for key in planners:
        if key not in PLANNERS:
            ap.error(f"Unknown planner '{key}'")
    try:
        sizes = _parse_sizes(args.sizes)
    except ValueError as e:
        ap.error(str(e))

    df = run(sizes, args.num_mazes, planners, braid=args.braid, seed=args.seed,
             reduce=not args.no_reduce, progress=not args.no_progress)

    os.makedirs(args.outdir, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_csv = os.path.join(args.outdir, f"bench_s{args.seed}_{stamp}.csv")
    df.to_csv(out_csv, index=False)
    print(f"Saved: {out_csv}")

    summary = summarize_runs(df.to_dict("records"))
    if not summary.empty:
        print(summary.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
