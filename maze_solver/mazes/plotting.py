import os
from typing import Dict, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from ..graph.model import MazeGraph

# One colour per planner, cycled if more are given
PATH_COLORS = ["red", "dodgerblue", "orange", "magenta", "lime"]


def plot_maze(grid: np.ndarray, graph: Optional[MazeGraph] = None, ax=None,
              show_vertices: bool = True, title: Optional[str] = None):
    """
    Render a maze grid.

    Layers:
      - walls (black) / open cells (white)
      - remaining graph vertices after reduction (small grey dots)
      - start (green star), end (red star)
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W / 10), max(3, H / 10)), dpi=120)

    ax.imshow(grid != 0, cmap="gray", interpolation="nearest", origin="upper", vmin=0, vmax=1)
    ax.set_xticks([]); ax.set_yticks([])

    if graph is not None:
        if show_vertices:
            pts = [v.pos for v in graph.vertices if v.neighbors]
            if pts:
                ax.scatter([p.col for p in pts], [p.row for p in pts], s=6, c="grey", lw=0)
        if graph.start is not None:
            s = graph.position(graph.start)
            ax.plot(s.col, s.row, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
        if graph.end is not None:
            e = graph.position(graph.end)
            ax.plot(e.col, e.row, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)

    if title:
        ax.set_title(title, fontsize=10)
    return ax


def plot_paths(grid: np.ndarray, graph: MazeGraph, paths: Dict[str, Sequence[int]],
               ax=None, title: Optional[str] = None):
    """Maze plus one polyline per planner path (vertex to vertex)."""
    ax = plot_maze(grid, graph, ax=ax, title=title)
    drawn = 0
    for k, (name, path) in enumerate(paths.items()):
        if not path:
            continue
        pos = [graph.position(i) for i in path]
        ax.plot([p.col for p in pos], [p.row for p in pos],
                color=PATH_COLORS[k % len(PATH_COLORS)], lw=2, alpha=0.8, label=name)
        drawn += 1
    if drawn:
        ax.legend(loc="upper right", fontsize=7)
    return ax


def save_figure(grid: np.ndarray, graph: MazeGraph, paths: Dict[str, Sequence[int]],
                path: str, title: Optional[str] = None) -> None:
    H, W = grid.shape
    fig, ax = plt.subplots(figsize=(max(4, W / 8), max(4, H / 8)), dpi=120)
    plot_paths(grid, graph, paths, ax=ax, title=title)
    fig.tight_layout()
    d = os.path.dirname(str(path))
    if d:
        os.makedirs(d, exist_ok=True)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
