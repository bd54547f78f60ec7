# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m maze_solver.cli.<name>`):

- solve          : solve one maze image, print per-planner cost, render the path
- run_benchmark  : compare planners on generated mazes, write a CSV
"""
__all__ = [
    "solve",
    "run_benchmark",
]
