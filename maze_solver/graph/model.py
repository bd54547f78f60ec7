#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
model.py
--------
Data classes for the maze graph.

- Position : immutable (row, col) cell coordinate
- Vertex   : one open cell plus its outgoing (neighbor_index, weight) edges
- MazeGraph: ordered vertex list, raster shape and the start/end indices

Neighbours are stored as indices into the owning vertex list, never as object
references, so a graph can be shared read-only between planners.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

Edge = Tuple[int, float]


@dataclass(frozen=True)
class Position:
    """A cell coordinate on the raster (row-major, origin top-left)."""
    row: int
    col: int

    def neighbors(self) -> List["Position"]:
        """Orthogonal candidates: up, down, left, right (negatives dropped)."""
        out: List[Position] = []
        if self.row > 0:
            out.append(Position(self.row - 1, self.col))
        out.append(Position(self.row + 1, self.col))
        if self.col > 0:
            out.append(Position(self.row, self.col - 1))
        out.append(Position(self.row, self.col + 1))
        return out

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass
class Vertex:
    pos: Position
    neighbors: List[Edge] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.neighbors)

    def edge_to(self, target: int) -> Optional[Edge]:
        """First stored edge pointing at `target`, or None."""
        for edge in self.neighbors:
            if edge[0] == target:
                return edge
        return None


PositionLike = Union[Position, Tuple[int, int]]


def as_position(p: PositionLike) -> Position:
    if isinstance(p, Position):
        return p
    r, c = p
    return Position(int(r), int(c))


@dataclass
class MazeGraph:
    """Graph of open cells built from a binary raster.

    `start`/`end` are indices into `vertices`; either may be None when the
    raster has no usable entry/exit. The graph is not modified after
    construction.
    """
    vertices: List[Vertex]
    shape: Tuple[int, int]                  # (H, W) of the source raster
    start: Optional[int] = None
    end: Optional[int] = None
    _index: Optional[Dict[Position, int]] = field(default=None, init=False, repr=False, compare=False)

    # ---------------------------------------------------------------- builders
    @classmethod
    def from_grid(cls, grid: np.ndarray, **kwargs) -> "MazeGraph":
        from .builder import build_graph  # lazy import
        return build_graph(grid, **kwargs)

    @classmethod
    def from_image(cls, path, **kwargs) -> "MazeGraph":
        """Decode an image (red channel: 0 = wall) and build its graph."""
        from ..mazes.io import load_grid  # lazy import
        from .builder import build_graph
        return build_graph(load_grid(path), **kwargs)

    # ---------------------------------------------------------------- queries
    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    @property
    def height(self) -> int:
        return self.shape[0]

    @property
    def width(self) -> int:
        return self.shape[1]

    def neighbors(self, idx: int) -> Sequence[Edge]:
        return self.vertices[idx].neighbors

    def position(self, idx: int) -> Position:
        return self.vertices[idx].pos

    def index_of(self, pos: PositionLike) -> Optional[int]:
        if self._index is None:
            self._index = {v.pos: i for i, v in enumerate(self.vertices)}
        return self._index.get(as_position(pos))

    def active_vertices(self) -> int:
        """Vertices that still take part in the reduced structure."""
        return sum(
            1 for i, v in enumerate(self.vertices)
            if v.neighbors or i == self.start or i == self.end
        )

    def edge_count(self) -> int:
        # every edge is stored on both endpoints
        return sum(len(v.neighbors) for v in self.vertices) // 2

    def __str__(self) -> str:
        return "\n".join(
            f"[{i:2}]: {v.pos}, {v.neighbors}" for i, v in enumerate(self.vertices)
        )

