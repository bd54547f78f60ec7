#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random maze rasters for tests and benchmarks.

- Perfect maze carved by randomized depth-first backtracking on a cell
  lattice: cell (r, c) is pixel (2r+1, 2c+1), walls sit between cells.
- Optional braiding: reopen a fraction of the remaining internal walls to add
  loops, so BFS, DFS and Dijkstra return different paths.
- Entrance in the top row, exit in the bottom row; every other perimeter
  pixel is wall, so the boundary scan finds exactly these two cells.
- Reproducibility: explicit np.random.Generator.

Pillars (even, even pixels) are never opened, so the raster has no 2x2 open
blocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

try:
    from scipy.ndimage import label as cc_label
except Exception as e:
    raise ImportError(
        "scipy.ndimage is required. Install with: pip install scipy"
    ) from e

from .. import config
from .io import PathLike, save_grid

# Cell-lattice moves: up, down, left, right
DELTAS_4 = np.array([(-1, 0), (1, 0), (0, -1), (0, 1)], dtype=np.int8)


@dataclass
class GeneratedMaze:
    """A maze raster plus the pixels of its entrance and exit."""
    grid: np.ndarray            # (H, W) uint8: 0 = wall, OPEN_VALUE = open
    entrance: Tuple[int, int]   # (row, col) in the top row
    exit: Tuple[int, int]       # (row, col) in the bottom row
    settings: Dict              # generator settings used (for provenance)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def H(self) -> int:
        return self.grid.shape[0]

    @property
    def W(self) -> int:
        return self.grid.shape[1]

    def save(self, path: PathLike) -> None:
        save_grid(self.grid, path)


def _carve(grid: np.ndarray, rows: int, cols: int, rng: np.random.Generator) -> None:
    visited = np.zeros((rows, cols), dtype=bool)
    r0, c0 = int(rng.integers(rows)), int(rng.integers(cols))
    visited[r0, c0] = True
    grid[2 * r0 + 1, 2 * c0 + 1] = config.OPEN_VALUE
    stack = [(r0, c0)]

    while stack:
        r, c = stack[-1]
        for k in rng.permutation(len(DELTAS_4)):
            dr, dc = DELTAS_4[k]
            nr, nc = r + int(dr), c + int(dc)
            if 0 <= nr < rows and 0 <= nc < cols and not visited[nr, nc]:
                visited[nr, nc] = True
                # open the wall between the two cells, then the new cell
                grid[r + nr + 1, c + nc + 1] = config.OPEN_VALUE
                grid[2 * nr + 1, 2 * nc + 1] = config.OPEN_VALUE
                stack.append((nr, nc))
                break
        else:
            stack.pop()


def _closed_internal_walls(grid: np.ndarray, rows: int, cols: int) -> List[Tuple[int, int]]:
    walls = []
    for r in range(rows):
        for c in range(cols):
            if c + 1 < cols and grid[2 * r + 1, 2 * c + 2] == 0:
                walls.append((2 * r + 1, 2 * c + 2))
            if r + 1 < rows and grid[2 * r + 2, 2 * c + 1] == 0:
                walls.append((2 * r + 2, 2 * c + 1))
    return walls


def generate_maze(
    rows: int = 20,
    cols: int = 20,
    *,
    braid: float = 0.0,
    entrance_col: int = 0,
    exit_col: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> GeneratedMaze:
    """
    Create a (2*rows+1) x (2*cols+1) maze raster.

    braid        : fraction in [0, 1] of closed internal walls to reopen.
    entrance_col : cell column of the opening in the top row.
    exit_col     : cell column of the opening in the bottom row (default: last).
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Maze needs at least one cell, got {rows}x{cols}")
    if not 0.0 <= braid <= 1.0:
        raise ValueError(f"braid must be in [0, 1], got {braid}")
    if exit_col is None:
        exit_col = cols - 1
    if not (0 <= entrance_col < cols and 0 <= exit_col < cols):
        raise ValueError("entrance/exit column outside the maze")
    if rng is None:
        rng = np.random.default_rng()

    H, W = 2 * rows + 1, 2 * cols + 1
    grid = np.full((H, W), config.WALL_VALUE, dtype=np.uint8)
    _carve(grid, rows, cols, rng)

    n_reopened = 0
    if braid > 0.0:
        walls = _closed_internal_walls(grid, rows, cols)
        n_reopened = int(round(braid * len(walls)))
        if n_reopened:
            for k in rng.choice(len(walls), size=n_reopened, replace=False):
                grid[walls[int(k)]] = config.OPEN_VALUE

    entrance = (0, 2 * entrance_col + 1)
    exit_ = (H - 1, 2 * exit_col + 1)
    grid[entrance] = config.OPEN_VALUE
    grid[exit_] = config.OPEN_VALUE

    # Default structure is 4-connected, matching the graph's adjacency.
    _, n_components = cc_label(grid != 0)
    if n_components != 1:
        raise RuntimeError(f"Carved maze is not connected ({n_components} components)")

    settings = dict(rows=rows, cols=cols, braid=braid, reopened_walls=n_reopened,
                    entrance_col=entrance_col, exit_col=exit_col)
    return GeneratedMaze(grid=grid, entrance=entrance, exit=exit_, settings=settings)
