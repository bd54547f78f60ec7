#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
solve.py
--------
Solve one maze image:
- Decodes the image and builds the reduced graph (timed)
- Runs the selected planners on it, printing time and path cost for each
- Renders one planner's path onto a copy of the image

Example:
    python -m maze_solver.cli.solve maze.png \
        --planners bfs,dfs,dijkstra \
        --render-with dijkstra \
        --output solved_maze.png

Image convention: red channel 0 = wall, anything else = open.
"""

from __future__ import annotations
import argparse
import logging
import sys
import time
from typing import Dict, List, Optional

from .. import config
from ..graph import MazeGraph
from ..mazes.io import ImageDecodeError, load_grid
from ..mazes.render import render_solution
from ..planners import PLANNERS
from ..planners.common import path_cost


def _ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)


def _fmt_cost(cost: float) -> str:
    """Whole costs print as integers, others with two decimals; never in exponent form."""
    cost = float(cost)
    if cost.is_integer():
        return str(int(cost))
    return f"{cost:.2f}"


def _parse_planners(s: str) -> List[str]:
    names = [p.strip().lower() for p in s.split(",") if p.strip()]
    if not names:
        raise argparse.ArgumentTypeError("Expected at least one planner name")
    for name in names:
        if name not in PLANNERS:
            raise argparse.ArgumentTypeError(
                f"Unknown planner '{name}'. Available: {', '.join(sorted(PLANNERS))}")
    return names


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="maze-solve", description="Solve a maze image.")
    ap.add_argument("image", help="Path to the maze image")
    ap.add_argument("--output", type=str, default=str(config.DEFAULT_OUTPUT_PATH),
                    help="Where to write the highlighted solution")
    ap.add_argument("--planners", type=_parse_planners, default=list(config.DEFAULT_PLANNERS),
                    help="Comma-separated planners: bfs,dfs,dijkstra")
    ap.add_argument("--render-with", type=str, default=None, choices=sorted(PLANNERS),
                    help=f"Planner whose path is rendered (default: {config.RENDER_PLANNER} "
                         "if selected, else the first of --planners)")
    ap.add_argument("--no-render", action="store_true", help="Skip writing the solution image")
    ap.add_argument("--no-reduce", action="store_true", help="Keep corridor vertices")
    ap.add_argument("--figure", type=str, default=None,
                    help="Optional matplotlib figure with all planner paths")
    ap.add_argument("--log-level", type=str, default=config.LOG_LEVEL,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    render_with = args.render_with
    if render_with is None:
        render_with = config.RENDER_PLANNER if config.RENDER_PLANNER in args.planners else args.planners[0]
    elif not args.no_render and render_with not in args.planners:
        ap.error(f"--render-with {render_with} is not one of --planners ({','.join(args.planners)})")
    logging.basicConfig(level=getattr(logging, args.log_level), format=config.LOG_FORMAT)

    t_total = time.perf_counter()

    t0 = time.perf_counter()
    try:
        grid = load_grid(args.image)
    except ImageDecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    graph = MazeGraph.from_grid(grid, reduce=not args.no_reduce)
    print(f"Graph creation took {_ms(t0)}ms "
          f"({graph.active_vertices()} of {len(graph)} vertices after reduction)")

    paths: Dict[str, List[int]] = {}
    for name in args.planners:
        t0 = time.perf_counter()
        res = PLANNERS[name]().plan(graph)
        elapsed = _ms(t0)
        if not res['success']:
            print(f"Graph solved using {name} took {elapsed}ms: no path found")
            continue
        paths[name] = res['path']
        print(f"Graph solved using {name} took {elapsed}ms with cost {_fmt_cost(path_cost(graph, res['path']))}")

    if not args.no_render:
        path = paths.get(render_with)
        if path is None:
            print(f"Nothing to render: {render_with} found no path")
        else:
            try:
                out = render_solution(graph, path, args.image, args.output)
            except (OSError, ValueError) as e:
                print(f"error: could not write {args.output}: {e}", file=sys.stderr)
                return 1
            print(f"Solution written to {out}")

    if args.figure:
        from ..mazes.plotting import save_figure  # lazy import (matplotlib)
        save_figure(grid, graph, paths, args.figure, title=args.image)
        print(f"Figure written to {args.figure}")

    print(f"Total runtime was {_ms(t_total)}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
